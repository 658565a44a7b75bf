"""Shared fixtures: in-memory implementations of the ports."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from jira_versions.adapters.config import Credentials
from jira_versions.application.sync import (
    RetryPolicy,
    SessionManager,
    VersionReconciler,
    VersionSyncOrchestrator,
)
from jira_versions.core.domain import EventBus, PluginHistory, VersionCandidate
from jira_versions.core.exceptions import AuthenticationError
from jira_versions.core.ports import (
    PluginMetadataPort,
    ReleaseRepositoryPort,
    VersionData,
    VersionTrackerPort,
)


RELEASED_AT = datetime(2011, 3, 14, 9, 30, tzinfo=timezone.utc)


class FakeTracker(VersionTrackerPort):
    """Tracker keeping versions in memory and recording every call."""

    def __init__(self, existing=()):
        self.versions = [VersionData(name=name, released=True) for name in existing]
        self.login_calls = []
        self.add_calls = []
        self.created = []
        self.auth_failures = 0
        self.login_failures = []
        self.add_error = None
        self._sessions = 0

    @property
    def name(self):
        return "Fake"

    def login(self, username, password):
        self.login_calls.append((username, password))
        if self.login_failures:
            raise self.login_failures.pop(0)
        self._sessions += 1
        return f"token-{self._sessions}"

    def get_versions(self, token, project_key):
        return list(self.versions)

    def add_version(self, token, project_key, entry):
        self.add_calls.append((token, project_key, entry))
        if self.add_error is not None:
            raise self.add_error
        if self.auth_failures:
            self.auth_failures -= 1
            raise AuthenticationError("session expired")
        version = VersionData(
            name=entry.name,
            released=entry.released,
            release_date=entry.release_date,
        )
        self.versions.append(version)
        self.created.append(entry.name)
        return version


class FakeRepository(ReleaseRepositoryPort):
    """Repository serving fixed releases; a plugin may map to an exception."""

    def __init__(self, core=(), plugins=None):
        self.core = list(core)
        self.plugins = dict(plugins or {})
        self.core_error = None
        self.timestamp_calls = []
        self.timestamp_errors = {}

    def list_core_releases(self):
        if self.core_error is not None:
            raise self.core_error
        return list(self.core)

    def list_plugins(self):
        return [PluginHistory(artifact_id=artifact_id) for artifact_id in self.plugins]

    def get_plugin_releases(self, plugin):
        releases = self.plugins[plugin.artifact_id]
        if isinstance(releases, Exception):
            raise releases
        return list(releases)

    def release_timestamp(self, candidate):
        name = candidate.canonical_name
        self.timestamp_calls.append(name)
        if name in self.timestamp_errors:
            raise self.timestamp_errors[name]
        return super().release_timestamp(candidate)


class FakeMetadata(PluginMetadataPort):
    """Deprecation lookup; artifact ids mapped to an exception fail."""

    def __init__(self, deprecated=(), errors=None):
        self.deprecated = set(deprecated)
        self.errors = dict(errors or {})

    def is_deprecated(self, artifact_id):
        if artifact_id in self.errors:
            raise self.errors[artifact_id]
        return artifact_id in self.deprecated


class StaticCredentials:
    """Stands in for CredentialsFile."""

    def __init__(self, username="alice", password="secret"):
        self.credentials = Credentials(username, password)

    def load(self):
        return self.credentials


def core(version, timestamp=RELEASED_AT):
    return VersionCandidate.core(version, timestamp)


def plugin(artifact_id, version, timestamp=RELEASED_AT):
    return VersionCandidate.plugin(artifact_id, version, timestamp)


@pytest.fixture
def tracker():
    return FakeTracker()


@pytest.fixture
def repository():
    return FakeRepository()


@pytest.fixture
def metadata():
    return FakeMetadata()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def session_manager(tracker):
    return SessionManager(tracker, StaticCredentials())


@pytest.fixture
def make_orchestrator(tracker, repository, metadata, event_bus):
    """Build an orchestrator over the fake ports."""

    def factory(retry_policy=None, **kwargs):
        reconciler = VersionReconciler(repository, metadata, event_bus=event_bus)
        return VersionSyncOrchestrator(
            tracker,
            reconciler,
            SessionManager(tracker, StaticCredentials()),
            retry_policy=retry_policy or RetryPolicy(max_attempts=5),
            event_bus=event_bus,
            **kwargs,
        )

    return factory


@pytest.fixture
def candidates():
    """Factories for core and plugin candidates."""
    return SimpleNamespace(core=core, plugin=plugin)

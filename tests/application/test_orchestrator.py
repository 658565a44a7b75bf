"""Tests for the sync orchestrator."""

import pytest

from jira_versions.adapters.maven import ExperimentalFilter
from jira_versions.application.sync import VersionReconciler, VersionSyncOrchestrator
from jira_versions.core.domain import SyncCompleted, SyncStarted, VersionCreated
from jira_versions.core.exceptions import IssueTrackerError, ReleaseRepositoryError
from jira_versions.core.ports import VersionData


class TestVersionSyncOrchestrator:
    """End-to-end runs over in-memory ports."""

    @pytest.fixture
    def populated(self, repository, candidates):
        repository.core = [candidates.core("1.409"), candidates.core("1.410")]
        repository.plugins = {
            "foo-plugin": [candidates.plugin("foo-plugin", "2.0"), candidates.plugin("foo-plugin", "2.1")],
            "bar": [candidates.plugin("bar", "3.0")],
        }
        return repository

    def test_creates_all_missing_versions(self, make_orchestrator, tracker, populated):
        result = make_orchestrator().run()

        expected = ["jenkins-1.409", "jenkins-1.410", "foo-2.0", "foo-2.1", "bar-3.0"]
        assert tracker.created == expected
        assert result.created == expected
        assert all(token == "token-1" for token, _, _ in tracker.add_calls)
        assert all(project == "JENKINS" for _, project, _ in tracker.add_calls)

    def test_existing_versions_are_not_recreated(self, make_orchestrator, tracker, populated):
        tracker.versions = [VersionData(name="jenkins-1.409"), VersionData(name="foo-2.0")]

        make_orchestrator().run()

        assert tracker.created == ["jenkins-1.410", "foo-2.1", "bar-3.0"]

    def test_second_run_is_idempotent(self, make_orchestrator, tracker, populated):
        make_orchestrator().run()
        first_run = list(tracker.created)

        result = make_orchestrator().run()

        assert tracker.created == first_run
        assert result.created == []
        assert result.known_versions == len(first_run)

    def test_duplicate_candidates_submitted_once(
        self, make_orchestrator, tracker, repository, candidates
    ):
        repository.plugins = {
            "foo-plugin": [candidates.plugin("foo-plugin", "1.2")],
            "foo": [candidates.plugin("foo", "1.2")],
        }

        make_orchestrator().run()

        assert [entry.name for _, _, entry in tracker.add_calls] == ["foo-1.2"]

    def test_deprecated_plugin_produces_no_writes(
        self, make_orchestrator, tracker, populated, metadata
    ):
        metadata.deprecated = {"foo-plugin"}

        result = make_orchestrator().run()

        assert tracker.created == ["jenkins-1.409", "jenkins-1.410", "bar-3.0"]
        assert result.skipped_plugins == ["foo-plugin"]

    def test_unreadable_plugin_does_not_abort(self, make_orchestrator, tracker, populated):
        populated.plugins["foo-plugin"] = ReleaseRepositoryError("gone", artifact_id="foo-plugin")

        result = make_orchestrator().run()

        assert tracker.created == ["jenkins-1.409", "jenkins-1.410", "bar-3.0"]
        assert result.failed_plugins == ["foo-plugin"]

    def test_auth_failure_once_means_two_logins(
        self, make_orchestrator, tracker, repository, candidates
    ):
        repository.core = [candidates.core("1.410")]
        tracker.auth_failures = 1

        result = make_orchestrator().run()

        assert len(tracker.login_calls) == 2
        assert tracker.created == ["jenkins-1.410"]
        assert result.created == ["jenkins-1.410"]

    def test_renewed_token_is_used_for_later_writes(self, make_orchestrator, tracker, populated):
        tracker.auth_failures = 1

        make_orchestrator().run()

        tokens = [token for token, _, _ in tracker.add_calls]
        assert tokens[:2] == ["token-1", "token-2"]
        assert set(tokens[2:]) == {"token-2"}

    def test_non_auth_error_aborts_run(self, make_orchestrator, tracker, populated):
        tracker.add_error = IssueTrackerError("API error 500")

        with pytest.raises(IssueTrackerError):
            make_orchestrator().run()

        assert len(tracker.add_calls) == 1

    def test_core_error_aborts_run(self, make_orchestrator, tracker, populated):
        populated.core_error = ReleaseRepositoryError("metadata unreadable")

        with pytest.raises(ReleaseRepositoryError):
            make_orchestrator().run()

        assert tracker.add_calls == []

    def test_core_wins_over_colliding_plugin(
        self, make_orchestrator, tracker, repository, candidates
    ):
        repository.core = [candidates.core("1.0")]
        repository.plugins = {"jenkins-plugin": [candidates.plugin("jenkins-plugin", "1.0")]}

        make_orchestrator().run()

        [(_, _, entry)] = tracker.add_calls
        assert entry.name == "jenkins-1.0"

    def test_publishes_events(self, make_orchestrator, populated, event_bus):
        make_orchestrator(dry_run=True).run()

        history = event_bus.get_history()
        assert isinstance(history[0], SyncStarted)
        assert isinstance(history[-1], SyncCompleted)
        assert history[-1].versions_created == 5
        created = [e for e in history if isinstance(e, VersionCreated)]
        assert [e.source_kind for e in created] == ["core", "core", "plugin", "plugin", "plugin"]
        assert all(e.dry_run for e in created)

    def test_repeated_runs_keep_separate_results(
        self, make_orchestrator, populated, metadata
    ):
        metadata.deprecated = {"foo-plugin"}
        populated.plugins["bar"] = ReleaseRepositoryError("gone", artifact_id="bar")
        orchestrator = make_orchestrator()

        first = orchestrator.run()
        second = orchestrator.run()

        assert first.skipped_plugins == ["foo-plugin"]
        assert first.failed_plugins == ["bar"]
        assert second.skipped_plugins == ["foo-plugin"]
        assert second.failed_plugins == ["bar"]

    def test_excluded_prereleases_are_never_written(
        self, tracker, repository, metadata, session_manager, candidates
    ):
        repository.core = [
            candidates.core("1.0"),
            candidates.core("1.1-alpha-1"),
            candidates.core("1.1-beta-2"),
            candidates.core("1.1"),
        ]
        repository.plugins = {
            "foo-plugin": [
                candidates.plugin("foo-plugin", "2.0-alpha"),
                candidates.plugin("foo-plugin", "2.0-BETA-1"),
                candidates.plugin("foo-plugin", "2.0"),
            ],
        }
        reconciler = VersionReconciler(ExperimentalFilter(repository), metadata)

        VersionSyncOrchestrator(tracker, reconciler, session_manager).run()

        written = [entry.name for _, _, entry in tracker.add_calls]
        assert written == ["jenkins-1.0", "jenkins-1.1", "foo-2.0"]
        assert not any("alpha" in name.lower() or "beta" in name.lower() for name in written)

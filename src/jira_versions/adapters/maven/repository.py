"""
Maven Repository - Reads core and plugin releases from a Maven repository.

Versions come from each artifact's maven-metadata.xml; the release
timestamp of a version is the Last-Modified time of its packaged artifact,
read only when a release is about to be written.
"""

import logging
import xml.etree.ElementTree as ElementTree
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Callable, Iterable, Optional

import requests

from ...core.domain.entities import PluginHistory, SourceKind, VersionCandidate
from ...core.domain.value_objects import VersionNumber
from ...core.exceptions import ReleaseRepositoryError
from ...core.ports.release_repository import ReleaseRepositoryPort


CORE_GROUP_PATH = "org/jenkins-ci/main"
CORE_ARTIFACT_ID = "jenkins-war"


class MavenReleaseRepository(ReleaseRepositoryPort):
    """
    ReleaseRepositoryPort backed by a Maven repository over HTTP.

    The repository layout has no plugin index, so the list of plugins is
    supplied by ``plugin_source`` (usually the update center).
    """

    def __init__(
        self,
        base_url: str,
        plugin_source: Callable[[], Iterable[PluginHistory]],
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the repository reader.

        Args:
            base_url: Repository root (e.g., https://repo.jenkins-ci.org/releases)
            plugin_source: Callable returning the plugins to read
            timeout: Per-request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.base_url = base_url.rstrip("/")
        self.plugin_source = plugin_source
        self.timeout = timeout
        self.logger = logging.getLogger("MavenReleaseRepository")
        self._session = session or requests.Session()
        self._plugin_groups: dict[str, str] = {}

    # -------------------------------------------------------------------------
    # ReleaseRepositoryPort Implementation
    # -------------------------------------------------------------------------

    def list_core_releases(self) -> list[VersionCandidate]:
        versions = self._read_versions(CORE_GROUP_PATH, CORE_ARTIFACT_ID)
        return [VersionCandidate.core(version) for version in versions]

    def list_plugins(self) -> Iterable[PluginHistory]:
        return sorted(self.plugin_source(), key=lambda plugin: plugin.artifact_id)

    def get_plugin_releases(self, plugin: PluginHistory) -> list[VersionCandidate]:
        versions = self._read_versions(plugin.group_path, plugin.artifact_id)
        self._plugin_groups[plugin.artifact_id] = plugin.group_path
        return [VersionCandidate.plugin(plugin.artifact_id, version) for version in versions]

    def release_timestamp(self, candidate: VersionCandidate) -> datetime:
        """Release time of a version: Last-Modified of its packaged artifact."""
        if candidate.timestamp is not None:
            return candidate.timestamp

        if candidate.source_kind is SourceKind.CORE:
            return self._artifact_timestamp(
                CORE_GROUP_PATH, CORE_ARTIFACT_ID, candidate.raw_version, "war"
            )

        group_path = self._plugin_groups.get(
            candidate.artifact_id, PluginHistory(candidate.artifact_id).group_path
        )
        return self._artifact_timestamp(
            group_path, candidate.artifact_id, candidate.raw_version, "hpi"
        )

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _read_versions(self, group_path: str, artifact_id: str) -> list[str]:
        """Read the version list of an artifact, sorted ascending."""
        url = f"{self.base_url}/{group_path}/{artifact_id}/maven-metadata.xml"
        response = self._fetch("GET", url, artifact_id)

        try:
            root = ElementTree.fromstring(response.content)
        except ElementTree.ParseError as e:
            raise ReleaseRepositoryError(
                f"Malformed maven-metadata.xml for {artifact_id}: {e}",
                artifact_id=artifact_id,
                cause=e,
            )

        versions = {
            node.text.strip()
            for node in root.iterfind("./versioning/versions/version")
            if node.text and node.text.strip()
        }
        return sorted(versions, key=VersionNumber)

    def _artifact_timestamp(
        self,
        group_path: str,
        artifact_id: str,
        version: str,
        packaging: str,
    ) -> datetime:
        url = (
            f"{self.base_url}/{group_path}/{artifact_id}/{version}/"
            f"{artifact_id}-{version}.{packaging}"
        )
        response = self._fetch("HEAD", url, artifact_id, allow_redirects=True)

        last_modified = response.headers.get("Last-Modified")
        if not last_modified:
            raise ReleaseRepositoryError(
                f"No Last-Modified header for {artifact_id} {version}",
                artifact_id=artifact_id,
            )
        try:
            timestamp = parsedate_to_datetime(last_modified)
        except (TypeError, ValueError) as e:
            raise ReleaseRepositoryError(
                f"Bad Last-Modified header for {artifact_id} {version}: {last_modified}",
                artifact_id=artifact_id,
                cause=e,
            )
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return timestamp

    def _fetch(self, method: str, url: str, artifact_id: str, **kwargs) -> requests.Response:
        self.logger.debug(f"{method} {url}")
        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ReleaseRepositoryError(
                f"Failed to read {url}: {e}",
                artifact_id=artifact_id,
                cause=e,
            )
        return response

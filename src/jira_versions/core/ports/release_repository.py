"""
Release Repository Port - Abstract interface for reading known releases.

Implementations:
- MavenReleaseRepository: Maven repository over HTTP
- ExperimentalFilter: wrapper excluding alpha/beta releases
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable

from ..domain.entities import PluginHistory, VersionCandidate
from ..exceptions import PluginMetadataError, ReleaseRepositoryError


class ReleaseRepositoryPort(ABC):
    """
    Abstract interface for the artifact repository.

    Releases are returned in ascending version order.
    """

    @abstractmethod
    def list_core_releases(self) -> list[VersionCandidate]:
        """
        List all core platform releases.

        Raises:
            ReleaseRepositoryError: If the release list cannot be read
        """
        ...

    @abstractmethod
    def list_plugins(self) -> Iterable[PluginHistory]:
        """List all plugins known to the repository."""
        ...

    @abstractmethod
    def get_plugin_releases(self, plugin: PluginHistory) -> list[VersionCandidate]:
        """
        List all releases of one plugin.

        Raises:
            ReleaseRepositoryError: If the plugin's releases cannot be read
        """
        ...

    def release_timestamp(self, candidate: VersionCandidate) -> datetime:
        """
        Resolve the release time of a candidate.

        Only called for candidates missing from the tracker. The default
        returns the timestamp the candidate was listed with.

        Raises:
            ReleaseRepositoryError: If the release time cannot be read
        """
        if candidate.timestamp is None:
            raise ReleaseRepositoryError(
                f"No release time for {candidate.canonical_name}",
                artifact_id=candidate.artifact_id,
            )
        return candidate.timestamp


class PluginMetadataPort(ABC):
    """Abstract interface for plugin documentation metadata."""

    @abstractmethod
    def is_deprecated(self, artifact_id: str) -> bool:
        """
        Check whether a plugin is flagged deprecated.

        Raises:
            PluginMetadataError: If the metadata cannot be read
        """
        ...


__all__ = [
    "ReleaseRepositoryPort",
    "PluginMetadataPort",
    "ReleaseRepositoryError",
    "PluginMetadataError",
]

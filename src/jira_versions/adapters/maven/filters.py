"""
Repository filters - Wrappers narrowing what a release repository exposes.
"""

import logging
from datetime import datetime
from typing import Iterable

from ...core.domain.entities import PluginHistory, VersionCandidate
from ...core.ports.release_repository import ReleaseRepositoryPort


class ExperimentalFilter(ReleaseRepositoryPort):
    """Hides alpha and beta releases of the wrapped repository."""

    def __init__(self, repository: ReleaseRepositoryPort):
        self.repository = repository
        self.logger = logging.getLogger("ExperimentalFilter")

    def list_core_releases(self) -> list[VersionCandidate]:
        return self._exclude(self.repository.list_core_releases())

    def list_plugins(self) -> Iterable[PluginHistory]:
        return self.repository.list_plugins()

    def get_plugin_releases(self, plugin: PluginHistory) -> list[VersionCandidate]:
        return self._exclude(self.repository.get_plugin_releases(plugin))

    def release_timestamp(self, candidate: VersionCandidate) -> datetime:
        return self.repository.release_timestamp(candidate)

    def _exclude(self, candidates: list[VersionCandidate]) -> list[VersionCandidate]:
        kept = []
        for candidate in candidates:
            if candidate.is_experimental:
                self.logger.debug(f"Excluding experimental release {candidate.canonical_name}")
                continue
            kept.append(candidate)
        return kept

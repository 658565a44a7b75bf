"""
Version Reconciler - Decides which releases still need a tracker version.

Candidates are compared by canonical name against a running set of known
names. The set is seeded from the tracker once and grows as entries are
emitted, so no name is ever emitted twice in one run.
"""

import logging
from dataclasses import replace
from typing import Iterable, Iterator, Optional

from ...core.domain.entities import TrackerVersionEntry, VersionCandidate
from ...core.domain.events import EventBus, PluginFailed, PluginSkipped
from ...core.exceptions import PluginMetadataError, ReleaseRepositoryError
from ...core.ports.release_repository import PluginMetadataPort, ReleaseRepositoryPort


Emission = tuple[VersionCandidate, TrackerVersionEntry]


class VersionReconciler:
    """
    Produces the version entries missing from the tracker.

    Core releases are reconciled before plugin releases against the same
    set of known names, so core entries win any name collision.
    """

    def __init__(
        self,
        repository: ReleaseRepositoryPort,
        plugin_metadata: PluginMetadataPort,
        event_bus: Optional[EventBus] = None,
    ):
        self.repository = repository
        self.plugin_metadata = plugin_metadata
        self.event_bus = event_bus or EventBus()
        self.logger = logging.getLogger("VersionReconciler")

    def reconcile(self, known_names: set[str]) -> Iterator[Emission]:
        """Yield every missing core entry, then every missing plugin entry."""
        yield from self.core_entries(known_names)
        yield from self.plugin_entries(known_names)

    def core_entries(self, known_names: set[str]) -> Iterator[Emission]:
        """
        Yield missing core release entries.

        Repository errors propagate: core data is expected to be well formed.
        """
        releases = self.repository.list_core_releases()
        yield from self._missing(releases, known_names)

    def plugin_entries(self, known_names: set[str]) -> Iterator[Emission]:
        """
        Yield missing plugin release entries.

        Deprecated plugins are skipped. A plugin whose metadata, releases or
        release times cannot be read is logged and skipped; the remaining
        plugins are still processed.
        """
        for plugin in self.repository.list_plugins():
            artifact_id = plugin.artifact_id
            self.logger.info(artifact_id)

            try:
                if self.plugin_metadata.is_deprecated(artifact_id):
                    self.logger.info(f"=> Plugin {artifact_id} is deprecated, skipping")
                    self.event_bus.publish(PluginSkipped(artifact_id=artifact_id))
                    continue

                releases = self.repository.get_plugin_releases(plugin)
                yield from self._missing(releases, known_names)
            except (ReleaseRepositoryError, PluginMetadataError) as e:
                self.logger.exception(f"Failed to read plugin {artifact_id}, moving on")
                self.event_bus.publish(PluginFailed(artifact_id=artifact_id, error=str(e)))

    def _missing(
        self,
        candidates: Iterable[VersionCandidate],
        known_names: set[str],
    ) -> Iterator[Emission]:
        for candidate in candidates:
            name = candidate.canonical_name
            if name in known_names:
                self.logger.debug(f"{name} already exists")
                continue

            candidate = replace(candidate, timestamp=self.repository.release_timestamp(candidate))
            # Recorded at emission so a repeated release is emitted only once
            known_names.add(name)
            yield candidate, TrackerVersionEntry.from_candidate(candidate)

"""
Sync Orchestrator - Coordinates one version synchronization run.

This is the main entry point for sync operations.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...core.domain.events import (
    EventBus,
    PluginFailed,
    PluginSkipped,
    SyncCompleted,
    SyncStarted,
    VersionCreated,
)
from ...core.ports.config_provider import DEFAULT_PROJECT_KEY
from ...core.ports.issue_tracker import VersionTrackerPort
from .reconciler import VersionReconciler
from .session import SessionManager
from .writer import ResilientWriter, RetryPolicy


@dataclass
class SyncResult:
    """Result of a sync run."""

    dry_run: bool = False
    known_versions: int = 0

    created: list[str] = field(default_factory=list)
    skipped_plugins: list[str] = field(default_factory=list)
    failed_plugins: list[str] = field(default_factory=list)

    @property
    def versions_created(self) -> int:
        return len(self.created)


class VersionSyncOrchestrator:
    """
    Orchestrates the synchronization of releases into tracker versions.

    Phases:
    1. Log in
    2. Seed the known names from the tracker's version list
    3. Reconcile core, then plugin releases
    4. Create each missing version through the resilient writer
    """

    def __init__(
        self,
        tracker: VersionTrackerPort,
        reconciler: VersionReconciler,
        session_manager: SessionManager,
        project_key: str = DEFAULT_PROJECT_KEY,
        writer: Optional[ResilientWriter] = None,
        retry_policy: Optional[RetryPolicy] = None,
        dry_run: bool = False,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            tracker: Issue tracker port
            reconciler: Version reconciler over the release repository
            session_manager: Source of session tokens
            project_key: Tracker project receiving the versions
            writer: Optional pre-built writer
            retry_policy: Re-authentication policy for the default writer
            dry_run: Recorded on results and events; writes are suppressed
                by the tracker adapter
            event_bus: Optional event bus
        """
        self.tracker = tracker
        self.reconciler = reconciler
        self.session_manager = session_manager
        self.project_key = project_key
        self.dry_run = dry_run
        self.event_bus = event_bus or reconciler.event_bus
        self.writer = writer or ResilientWriter(
            tracker,
            session_manager,
            project_key,
            retry_policy=retry_policy,
            event_bus=self.event_bus,
        )
        self.logger = logging.getLogger("VersionSyncOrchestrator")

    def run(self) -> SyncResult:
        """
        Run one full synchronization.

        Raises:
            IssueTrackerError: On any unrecovered tracker failure
            ReleaseRepositoryError: If core releases cannot be read
        """
        result = SyncResult(dry_run=self.dry_run)
        handlers = [
            (PluginSkipped, lambda event: result.skipped_plugins.append(event.artifact_id)),
            (PluginFailed, lambda event: result.failed_plugins.append(event.artifact_id)),
        ]
        for event_type, handler in handlers:
            self.event_bus.subscribe(event_type, handler)
        try:
            self._sync(result)
        finally:
            for event_type, handler in handlers:
                self.event_bus.unsubscribe(event_type, handler)
        return result

    def _sync(self, result: SyncResult) -> None:
        token = self.session_manager.login()
        known_names = self.load_known_names(token)
        result.known_versions = len(known_names)

        self.event_bus.publish(SyncStarted(
            project_key=self.project_key,
            known_versions=len(known_names),
            dry_run=self.dry_run,
        ))

        for candidate, entry in self.reconciler.reconcile(known_names):
            _, token = self.writer.write(token, entry)
            result.created.append(entry.name)
            self.event_bus.publish(VersionCreated(
                name=entry.name,
                source_kind=candidate.source_kind.value,
                dry_run=self.dry_run,
            ))

        self.event_bus.publish(SyncCompleted(
            project_key=self.project_key,
            versions_created=result.versions_created,
            plugins_skipped=len(result.skipped_plugins),
            plugins_failed=len(result.failed_plugins),
        ))

    def load_known_names(self, token: str) -> set[str]:
        """Seed the known names from the tracker. Called once per run."""
        versions = self.tracker.get_versions(token, self.project_key)
        self.logger.info(f"Found {len(versions)} existing versions in {self.project_key}")
        return {version.name for version in versions}

"""
Domain Events - Things that happened during a sync run.

Events are immutable records of something that occurred.
They enable loose coupling and audit trails.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4

from .value_objects import CanonicalVersionName


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


@dataclass(frozen=True)
class VersionCreated(DomainEvent):
    """Event: A version entry was created in the tracker."""

    name: CanonicalVersionName = None
    source_kind: str = ""
    dry_run: bool = False


@dataclass(frozen=True)
class PluginSkipped(DomainEvent):
    """Event: A plugin was skipped because it is deprecated."""

    artifact_id: str = ""
    reason: str = "deprecated"


@dataclass(frozen=True)
class PluginFailed(DomainEvent):
    """Event: Reading a plugin's metadata or releases failed."""

    artifact_id: str = ""
    error: str = ""


@dataclass(frozen=True)
class Reauthenticated(DomainEvent):
    """Event: The tracker session was renewed after an auth failure."""

    attempt: int = 0
    entry_name: Optional[CanonicalVersionName] = None


@dataclass(frozen=True)
class SyncStarted(DomainEvent):
    """Event: A sync run started."""

    project_key: str = ""
    known_versions: int = 0
    dry_run: bool = False


@dataclass(frozen=True)
class SyncCompleted(DomainEvent):
    """Event: A sync run completed."""

    project_key: str = ""
    versions_created: int = 0
    plugins_skipped: int = 0
    plugins_failed: int = 0


class EventBus:
    """
    Simple event bus for publishing and subscribing to domain events.
    """

    def __init__(self):
        self._handlers: dict[type, list[Callable]] = {}
        self._history: list[DomainEvent] = []

    def subscribe(self, event_type: type, handler: Callable[[DomainEvent], None]) -> None:
        """Subscribe a handler to an event type."""
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: Callable[[DomainEvent], None]) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers."""
        self._history.append(event)

        for handler in self._handlers.get(type(event), []):
            handler(event)

        # Catch-all handlers
        for handler in self._handlers.get(DomainEvent, []):
            handler(event)

    def get_history(self) -> list[DomainEvent]:
        """Get all published events."""
        return self._history.copy()

    def clear_history(self) -> None:
        self._history.clear()

"""
Domain - Entities, value objects and events.
"""

from .entities import (
    CORE_PREFIX,
    PLUGIN_SUFFIX,
    PluginHistory,
    SourceKind,
    TrackerVersionEntry,
    VersionCandidate,
    canonical_name,
)
from .events import (
    DomainEvent,
    EventBus,
    PluginFailed,
    PluginSkipped,
    Reauthenticated,
    SyncCompleted,
    SyncStarted,
    VersionCreated,
)
from .value_objects import CanonicalVersionName, VersionNumber

__all__ = [
    "CORE_PREFIX",
    "PLUGIN_SUFFIX",
    "PluginHistory",
    "SourceKind",
    "TrackerVersionEntry",
    "VersionCandidate",
    "canonical_name",
    "DomainEvent",
    "EventBus",
    "PluginFailed",
    "PluginSkipped",
    "Reauthenticated",
    "SyncCompleted",
    "SyncStarted",
    "VersionCreated",
    "CanonicalVersionName",
    "VersionNumber",
]

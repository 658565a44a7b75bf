"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .config_provider import (
    AppConfig,
    ConfigProviderPort,
    RepositoryConfig,
    SyncConfig,
    TrackerConfig,
)
from .issue_tracker import VersionData, VersionTrackerPort
from .release_repository import PluginMetadataPort, ReleaseRepositoryPort

__all__ = [
    "AppConfig",
    "ConfigProviderPort",
    "RepositoryConfig",
    "SyncConfig",
    "TrackerConfig",
    "VersionData",
    "VersionTrackerPort",
    "PluginMetadataPort",
    "ReleaseRepositoryPort",
]

"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Issue Tracker: Jira
- Release Repository: Maven repository, experimental-release filter
- Plugin Metadata: Jenkins update center
- Config: Environment variables, credentials file
"""

from .config import CredentialsFile, EnvironmentConfigProvider
from .jira import JiraVersionAdapter
from .maven import ExperimentalFilter, MavenReleaseRepository
from .updatecenter import UpdateCenterClient

__all__ = [
    "CredentialsFile",
    "EnvironmentConfigProvider",
    "JiraVersionAdapter",
    "ExperimentalFilter",
    "MavenReleaseRepository",
    "UpdateCenterClient",
]

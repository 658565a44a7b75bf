"""
Issue Tracker Port - Abstract interface for the tracker holding version records.

Implementations:
- JiraVersionAdapter: Jira REST API
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..domain.entities import TrackerVersionEntry
from ..exceptions import (
    AuthenticationError,
    IssueTrackerError,
    NotFoundError,
    PermissionError,
    RetryExhaustedError,
    TransportError,
)


@dataclass
class VersionData:
    """A version record as stored in the tracker."""

    name: str
    id: Optional[str] = None
    released: bool = False
    archived: bool = False
    release_date: Optional[date] = None


class VersionTrackerPort(ABC):
    """
    Abstract interface for issue tracker version management.

    Every call takes the session token explicitly; the token is opaque to
    callers and may be renewed at any time through ``login``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the tracker name (e.g., 'Jira')."""
        ...

    @abstractmethod
    def login(self, username: str, password: str) -> str:
        """
        Open a session and return its token.

        Raises:
            AuthenticationError: If the credentials are rejected
            TransportError: If the tracker cannot be reached
        """
        ...

    @abstractmethod
    def get_versions(self, token: str, project_key: str) -> list[VersionData]:
        """List all versions of a project."""
        ...

    @abstractmethod
    def add_version(
        self,
        token: str,
        project_key: str,
        entry: TrackerVersionEntry,
    ) -> VersionData:
        """
        Create a version in a project.

        Raises:
            AuthenticationError: If the session token is expired or invalid
            IssueTrackerError: On any other failure
        """
        ...


__all__ = [
    "VersionTrackerPort",
    "VersionData",
    "IssueTrackerError",
    "AuthenticationError",
    "RetryExhaustedError",
    "PermissionError",
    "NotFoundError",
    "TransportError",
]

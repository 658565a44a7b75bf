"""
Exceptions - Centralized exception hierarchy.

Tracker errors abort the run unless they are authentication failures,
which the resilient writer recovers from. Repository and plugin metadata
errors are scoped to a single plugin and are skipped by the reconciler.
"""

from typing import Optional


class JiraVersionsError(Exception):
    """Base class for all jira-versions errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigError(JiraVersionsError):
    """Invalid or missing configuration."""


# -------------------------------------------------------------------------
# Issue Tracker
# -------------------------------------------------------------------------

class IssueTrackerError(JiraVersionsError):
    """Base error for issue tracker operations."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.endpoint = endpoint


class AuthenticationError(IssueTrackerError):
    """The tracker rejected the session or the credentials."""


class RetryExhaustedError(AuthenticationError):
    """Re-authentication gave up after the configured number of attempts."""

    def __init__(self, message: str, attempts: int, cause: Optional[Exception] = None):
        super().__init__(message, cause=cause)
        self.attempts = attempts


class PermissionError(IssueTrackerError):
    """The authenticated user may not perform the operation."""


class NotFoundError(IssueTrackerError):
    """Project or resource does not exist."""


class TransportError(IssueTrackerError):
    """Connection failure or timeout talking to the tracker."""


# -------------------------------------------------------------------------
# Release Sources
# -------------------------------------------------------------------------

class ReleaseRepositoryError(JiraVersionsError):
    """Failure reading releases from the artifact repository."""

    def __init__(
        self,
        message: str,
        artifact_id: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.artifact_id = artifact_id


class PluginMetadataError(JiraVersionsError):
    """Failure reading plugin metadata (deprecation state)."""


__all__ = [
    "JiraVersionsError",
    "ConfigError",
    "IssueTrackerError",
    "AuthenticationError",
    "RetryExhaustedError",
    "PermissionError",
    "NotFoundError",
    "TransportError",
    "ReleaseRepositoryError",
    "PluginMetadataError",
]

"""
Config Provider Port - Abstract interface for configuration.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


DEFAULT_PROJECT_KEY = "JENKINS"
DEFAULT_REPOSITORY_URL = "https://repo.jenkins-ci.org/releases"
DEFAULT_UPDATE_CENTER_URL = "https://updates.jenkins.io/current/update-center.actual.json"
CREDENTIALS_FILE_NAME = ".jenkins-ci.org"


@dataclass
class TrackerConfig:
    """Configuration for the issue tracker."""

    url: str
    project_key: str = DEFAULT_PROJECT_KEY
    credentials_path: Path = field(
        default_factory=lambda: Path.home() / CREDENTIALS_FILE_NAME
    )
    timeout: Optional[float] = None

    def is_valid(self) -> bool:
        return bool(self.url)


@dataclass
class RepositoryConfig:
    """Configuration for the release sources."""

    repository_url: str = DEFAULT_REPOSITORY_URL
    update_center_url: str = DEFAULT_UPDATE_CENTER_URL
    exclude_experimental: bool = False
    timeout: Optional[float] = None


@dataclass
class SyncConfig:
    """Configuration for sync behavior."""

    dry_run: bool = False
    verbose: bool = False
    max_auth_retries: Optional[int] = None
    retry_backoff: float = 0.0


@dataclass
class AppConfig:
    """Complete application configuration."""

    tracker: TrackerConfig
    repository: RepositoryConfig = field(default_factory=RepositoryConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not self.tracker.url:
            errors.append("Missing tracker base URL - pass -jiraBaseUrl or set JIRA_URL")
        if not self.tracker.project_key:
            errors.append("Missing project key")
        if self.sync.max_auth_retries is not None and self.sync.max_auth_retries < 1:
            errors.append("--max-auth-retries must be at least 1")
        if self.sync.retry_backoff < 0:
            errors.append("--retry-backoff must not be negative")
        return errors


class ConfigProviderPort(ABC):
    """Abstract interface for configuration providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """Load complete configuration."""
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        ...

"""
Environment Config Provider - Load configuration from environment variables.

Supports:
- Environment variables (JIRA_URL, JIRA_PROJECT, JIRA_VERSIONS_*)
- .env files
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.exceptions import ConfigError
from ...core.ports.config_provider import (
    CREDENTIALS_FILE_NAME,
    DEFAULT_PROJECT_KEY,
    DEFAULT_REPOSITORY_URL,
    DEFAULT_UPDATE_CENTER_URL,
    AppConfig,
    ConfigProviderPort,
    RepositoryConfig,
    SyncConfig,
    TrackerConfig,
)


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Precedence, lowest first: defaults, .env file, environment, CLI flags.
    """

    ENV_MAPPING = {
        "JIRA_URL": "jira_base_url",
        "JIRA_PROJECT": "project_key",
        "JIRA_VERSIONS_CREDENTIALS": "credentials_path",
        "JIRA_VERSIONS_REPOSITORY_URL": "repository_url",
        "JIRA_VERSIONS_UPDATE_CENTER_URL": "update_center_url",
        "JIRA_VERSIONS_NO_EXPERIMENTAL": "no_experimental",
        "JIRA_VERSIONS_VERBOSE": "verbose",
    }

    CLI_MAPPING = {
        "jira_base_url": "jira_base_url",
        "project": "project_key",
        "credentials": "credentials_path",
        "repository_url": "repository_url",
        "update_center_url": "update_center_url",
        "no_experimental": "no_experimental",
        "max_auth_retries": "max_auth_retries",
        "retry_backoff": "retry_backoff",
        "timeout": "timeout",
        "dry_run": "dry_run",
        "verbose": "verbose",
    }

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
        environ: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
            environ: Environment to read (defaults to os.environ)
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._environ = os.environ if environ is None else environ
        self._cli_overrides = {
            key: value
            for key, value in (cli_overrides or {}).items()
            if value is not None
        }

        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """Load complete configuration."""
        timeout = self._float("timeout")

        credentials_path = self.get("credentials_path")
        tracker = TrackerConfig(
            url=self.get("jira_base_url", ""),
            project_key=self.get("project_key", DEFAULT_PROJECT_KEY),
            credentials_path=(
                Path(credentials_path).expanduser()
                if credentials_path
                else Path.home() / CREDENTIALS_FILE_NAME
            ),
            timeout=timeout,
        )

        repository = RepositoryConfig(
            repository_url=self.get("repository_url", DEFAULT_REPOSITORY_URL),
            update_center_url=self.get("update_center_url", DEFAULT_UPDATE_CENTER_URL),
            exclude_experimental=self._bool("no_experimental"),
            timeout=timeout,
        )

        sync = SyncConfig(
            dry_run=self._bool("dry_run"),
            verbose=self._bool("verbose"),
            max_auth_retries=self._int("max_auth_retries"),
            retry_backoff=self._float("retry_backoff") or 0.0,
        )

        return AppConfig(tracker=tracker, repository=repository, sync=sync)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value

    def validate(self) -> list[str]:
        """Validate configuration."""
        try:
            return self.load().validate()
        except ConfigError as e:
            return [e.message]

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            config_key = self.ENV_MAPPING.get(key.strip().upper())
            if config_key:
                self._values[config_key] = self._coerce(value.strip().strip('"').strip("'"))

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file:
            return self._env_file if self._env_file.exists() else None

        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = self._environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = self._coerce(raw_value)

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        for cli_key, config_key in self.CLI_MAPPING.items():
            if cli_key not in self._cli_overrides:
                continue
            value = self._cli_overrides[cli_key]
            # store_true flags left unset must not clobber the environment
            if value is False and config_key in self._values:
                continue
            self._values[config_key] = value

    @staticmethod
    def _coerce(raw_value: str) -> Any:
        """Convert boolean-ish strings."""
        if raw_value.lower() in ("true", "1", "yes"):
            return True
        if raw_value.lower() in ("false", "0", "no"):
            return False
        return raw_value

    def _bool(self, key: str) -> bool:
        return bool(self.get(key, False))

    def _int(self, key: str) -> Optional[int]:
        value = self.get(key)
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid integer for {key}: {value!r}", cause=e)

    def _float(self, key: str) -> Optional[float]:
        value = self.get(key)
        if value is None or value == "":
            return None
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid number for {key}: {value!r}", cause=e)

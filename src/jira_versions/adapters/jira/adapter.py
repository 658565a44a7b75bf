"""
Jira Adapter - Implements VersionTrackerPort for Atlassian Jira.

This is the main entry point for Jira integration.
"""

import logging
from datetime import date
from typing import Any, Optional

from ...core.domain.entities import TrackerVersionEntry
from ...core.ports.config_provider import TrackerConfig
from ...core.ports.issue_tracker import VersionData, VersionTrackerPort
from .client import JiraApiClient


class JiraVersionAdapter(VersionTrackerPort):
    """
    Jira implementation of the VersionTrackerPort.

    Translates between version entries and Jira's version resource.
    """

    DATE_FORMAT = "%Y-%m-%d"

    def __init__(
        self,
        config: TrackerConfig,
        dry_run: bool = False,
        client: Optional[JiraApiClient] = None,
    ):
        """
        Initialize the Jira adapter.

        Args:
            config: Tracker configuration
            dry_run: If True, don't make changes
            client: Optional pre-built API client
        """
        self.config = config
        self._dry_run = dry_run
        self.logger = logging.getLogger("JiraVersionAdapter")

        self._client = client or JiraApiClient(
            base_url=config.url,
            dry_run=dry_run,
            timeout=config.timeout,
        )

    # -------------------------------------------------------------------------
    # VersionTrackerPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Jira"

    def login(self, username: str, password: str) -> str:
        return self._client.login(username, password)

    def get_versions(self, token: str, project_key: str) -> list[VersionData]:
        data = self._client.get_project_versions(token, project_key)
        return [self._parse_version(item) for item in data]

    def add_version(
        self,
        token: str,
        project_key: str,
        entry: TrackerVersionEntry,
    ) -> VersionData:
        fields = {
            "name": entry.name,
            "project": project_key,
            "released": entry.released,
            "releaseDate": entry.release_date.strftime(self.DATE_FORMAT),
        }

        if self._dry_run:
            self.logger.info(f"[DRY-RUN] Would create version {entry.name} in {project_key}")
            return VersionData(
                name=entry.name,
                released=entry.released,
                release_date=entry.release_date,
            )

        data = self._client.create_version(token, fields)
        self.logger.info(f"Created version {entry.name} in {project_key}")
        return self._parse_version(data or fields)

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _parse_version(self, data: dict[str, Any]) -> VersionData:
        """Parse a Jira version resource into VersionData."""
        return VersionData(
            name=data.get("name", ""),
            id=data.get("id"),
            released=bool(data.get("released", False)),
            archived=bool(data.get("archived", False)),
            release_date=self._parse_date(data.get("releaseDate")),
        )

    def _parse_date(self, value: Optional[str]) -> Optional[date]:
        if not value:
            return None
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            self.logger.debug(f"Ignoring unparseable release date: {value}")
            return None

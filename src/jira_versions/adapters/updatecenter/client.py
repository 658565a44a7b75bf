"""
Update Center Client - Plugin index and deprecation metadata.

The update center publishes one JSON document listing every plugin with
its Maven coordinates and labels, plus a map of deprecated plugins.
"""

import logging
from typing import Any, Optional

import requests

from ...core.domain.entities import PluginHistory
from ...core.exceptions import PluginMetadataError
from ...core.ports.release_repository import PluginMetadataPort


DEPRECATED_LABEL = "deprecated"


class UpdateCenterClient(PluginMetadataPort):
    """
    Reads the update-center JSON once and answers plugin queries from it.
    """

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.logger = logging.getLogger("UpdateCenterClient")
        self._session = session or requests.Session()
        self._data: Optional[dict[str, Any]] = None

    @property
    def data(self) -> dict[str, Any]:
        """The update-center document, fetched on first access."""
        if self._data is None:
            self._data = self._fetch()
        return self._data

    # -------------------------------------------------------------------------
    # PluginMetadataPort Implementation
    # -------------------------------------------------------------------------

    def is_deprecated(self, artifact_id: str) -> bool:
        if artifact_id in self.data.get("deprecations", {}):
            return True

        plugin = self.data.get("plugins", {}).get(artifact_id) or {}
        return DEPRECATED_LABEL in (plugin.get("labels") or [])

    # -------------------------------------------------------------------------
    # Plugin Index
    # -------------------------------------------------------------------------

    def list_plugins(self) -> list[PluginHistory]:
        """All plugins with their Maven coordinates."""
        plugins = []
        for name, plugin in self.data.get("plugins", {}).items():
            gav = plugin.get("gav", "")
            parts = gav.split(":")
            if len(parts) < 2:
                self.logger.warning(f"Skipping {name}: missing Maven coordinates")
                continue
            plugins.append(PluginHistory(artifact_id=parts[1], group_id=parts[0]))
        return plugins

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _fetch(self) -> dict[str, Any]:
        self.logger.info(f"Loading plugin metadata from {self.url}")
        try:
            response = self._session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise PluginMetadataError(f"Failed to load update center: {e}", cause=e)
        except ValueError as e:
            raise PluginMetadataError(f"Malformed update center JSON: {e}", cause=e)

"""
Jira API Client - Low-level HTTP client for the Jira REST API.

This handles the raw HTTP communication with Jira.
The JiraVersionAdapter uses this to implement the VersionTrackerPort.
"""

import logging
from typing import Any, Optional

import requests

from ...core.exceptions import (
    AuthenticationError,
    IssueTrackerError,
    NotFoundError,
    PermissionError,
    TransportError,
)


class JiraApiClient:
    """
    Low-level Jira REST API client.

    Authentication is cookie based: ``login`` opens a server-side session
    and returns its id, which later requests send back as the session
    cookie. An empty token means an anonymous request.
    """

    API_VERSION = "2"
    SESSION_COOKIE = "JSESSIONID"

    def __init__(
        self,
        base_url: str,
        dry_run: bool = False,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Jira client.

        Args:
            base_url: Jira instance URL (e.g., https://issues.jenkins.io)
            dry_run: If True, don't make write operations
            timeout: Per-request timeout in seconds (None waits forever)
            session: Optional pre-configured requests session
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}/rest/api/{self.API_VERSION}"
        self.auth_url = f"{self.base_url}/rest/auth/1"
        self.dry_run = dry_run
        self.timeout = timeout
        self.logger = logging.getLogger("JiraApiClient")

        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        self._session = session or requests.Session()
        self._session.headers.update(self.headers)

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        token: str = "",
        base: Optional[str] = None,
        **kwargs
    ) -> Any:
        """
        Make a request to the Jira API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., 'project/JENKINS/versions')
            token: Session token, sent as the session cookie when set
            base: URL prefix, defaults to the REST API root
            **kwargs: Additional arguments for requests

        Returns:
            Decoded JSON response

        Raises:
            IssueTrackerError: On API errors
        """
        url = f"{base or self.api_url}/{endpoint}"
        if token:
            kwargs["cookies"] = {self.SESSION_COOKIE: token}
        kwargs.setdefault("timeout", self.timeout)

        self.logger.debug(f"{method} {url}")
        try:
            response = self._session.request(method, url, **kwargs)
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection failed: {e}", endpoint=endpoint, cause=e)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {e}", endpoint=endpoint, cause=e)
        return self._handle_response(response, endpoint)

    def get(self, endpoint: str, token: str = "", **kwargs) -> Any:
        """GET request."""
        return self.request("GET", endpoint, token=token, **kwargs)

    def post(
        self,
        endpoint: str,
        json: Optional[dict] = None,
        token: str = "",
        **kwargs
    ) -> Any:
        """POST request (checks dry_run for mutations)."""
        if self.dry_run:
            self.logger.info(f"[DRY-RUN] Would POST to {endpoint}")
            return {}
        return self.request("POST", endpoint, token=token, json=json, **kwargs)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(
        self,
        response: requests.Response,
        endpoint: str
    ) -> Any:
        """Handle API response and errors."""
        if response.ok:
            if response.text:
                return response.json()
            return {}

        status = response.status_code
        error_body = response.text[:500] if response.text else ""

        if status == 401:
            raise AuthenticationError(
                f"Authentication failed for {endpoint}",
                endpoint=endpoint,
            )

        if status == 403:
            raise PermissionError(
                f"Permission denied for {endpoint}",
                endpoint=endpoint,
            )

        if status == 404:
            raise NotFoundError(
                f"Not found: {endpoint}",
                endpoint=endpoint,
            )

        raise IssueTrackerError(
            f"API error {status}: {error_body}",
            endpoint=endpoint,
        )

    # -------------------------------------------------------------------------
    # Convenience Methods
    # -------------------------------------------------------------------------

    def login(self, username: str, password: str) -> str:
        """
        Open a session and return its id.

        An empty username yields an anonymous session: no request is sent
        and the returned token is empty.
        """
        if not username:
            self.logger.info("No credentials configured, using anonymous access")
            return ""

        # Login bypasses the dry-run guard
        data = self.request(
            "POST",
            "session",
            base=self.auth_url,
            json={"username": username, "password": password},
        )
        try:
            return data["session"]["value"]
        except (KeyError, TypeError) as e:
            raise AuthenticationError(
                "Login response did not contain a session",
                endpoint="session",
                cause=e,
            )

    def get_project_versions(self, token: str, project_key: str) -> list[dict]:
        """List the versions of a project."""
        return self.get(f"project/{project_key}/versions", token=token) or []

    def create_version(self, token: str, fields: dict) -> dict:
        """Create a version from raw Jira fields."""
        return self.post("version", json=fields, token=token)

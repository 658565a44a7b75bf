"""
Session Manager - Obtains tracker session tokens from stored credentials.
"""

import logging

from ...adapters.config.credentials import CredentialsFile
from ...core.ports.issue_tracker import VersionTrackerPort


class SessionManager:
    """
    Logs into the tracker.

    Credentials are re-read on every login and tokens are never persisted.
    Empty credentials mean an anonymous session.
    """

    def __init__(self, tracker: VersionTrackerPort, credentials: CredentialsFile):
        self.tracker = tracker
        self.credentials = credentials
        self.login_count = 0
        self.logger = logging.getLogger("SessionManager")

    def login(self) -> str:
        """
        Return a fresh session token.

        Raises:
            AuthenticationError: If the credentials are rejected
            TransportError: If the tracker cannot be reached
        """
        credentials = self.credentials.load()
        self.login_count += 1
        self.logger.debug(
            f"Logging into {self.tracker.name} as {credentials.username or '<anonymous>'}"
        )
        return self.tracker.login(credentials.username, credentials.password)

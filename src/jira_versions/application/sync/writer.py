"""
Resilient Writer - Creates tracker versions, renewing the session on demand.

An expired or rejected session never aborts the batch: the writer logs in
again and repeats the same call. Any other tracker error is fatal.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ...core.domain.entities import TrackerVersionEntry
from ...core.domain.events import EventBus, Reauthenticated
from ...core.exceptions import AuthenticationError, IssueTrackerError, RetryExhaustedError
from ...core.ports.issue_tracker import VersionData, VersionTrackerPort
from .session import SessionManager


@dataclass
class RetryPolicy:
    """
    How often and how fast to re-authenticate.

    ``max_attempts`` caps the number of re-logins for one write; None
    retries forever. ``backoff`` is the delay before the first re-login and
    grows by ``backoff_factor`` per attempt, up to ``max_backoff``.
    """

    max_attempts: Optional[int] = None
    backoff: float = 0.0
    backoff_factor: float = 1.0
    max_backoff: Optional[float] = None
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    @classmethod
    def forever(cls) -> "RetryPolicy":
        return cls()

    def allows(self, attempt: int) -> bool:
        """Whether re-login number ``attempt`` (1-based) may run."""
        return self.max_attempts is None or attempt <= self.max_attempts

    def delay(self, attempt: int) -> float:
        if self.backoff <= 0:
            return 0.0
        delay = self.backoff * (self.backoff_factor ** (attempt - 1))
        if self.max_backoff is not None:
            delay = min(delay, self.max_backoff)
        return delay

    def wait(self, attempt: int) -> None:
        delay = self.delay(attempt)
        if delay > 0:
            self.sleep(delay)


class ResilientWriter:
    """
    Wraps VersionTrackerPort.add_version in a re-authentication loop.

    States: attempting the write, re-authenticating, done, or fatal.
    Authentication failures of the write and any failure of the re-login
    itself lead to another login; the loop ends on success, on a
    non-authentication write error, or when the retry policy gives up.
    """

    def __init__(
        self,
        tracker: VersionTrackerPort,
        session_manager: SessionManager,
        project_key: str,
        retry_policy: Optional[RetryPolicy] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.tracker = tracker
        self.session_manager = session_manager
        self.project_key = project_key
        self.retry_policy = retry_policy or RetryPolicy.forever()
        self.event_bus = event_bus or EventBus()
        self.logger = logging.getLogger("ResilientWriter")

    def write(self, token: str, entry: TrackerVersionEntry) -> tuple[VersionData, str]:
        """
        Create one version.

        Args:
            token: Current session token
            entry: Version to create

        Returns:
            The created version and the session token that succeeded,
            which callers should use for subsequent calls.

        Raises:
            RetryExhaustedError: If the retry policy gives up
            IssueTrackerError: On any non-authentication failure
        """
        attempt = 0
        while True:
            try:
                version = self.tracker.add_version(token, self.project_key, entry)
                return version, token
            except AuthenticationError as e:
                self.logger.warning(f"Session rejected while creating {entry.name}: {e}")
                attempt, token = self._reauthenticate(entry, attempt, e)

    def _reauthenticate(
        self,
        entry: TrackerVersionEntry,
        attempt: int,
        error: Exception,
    ) -> tuple[int, str]:
        """Log in until a token is obtained. Returns the attempt count and token."""
        last_error = error
        while True:
            attempt += 1
            if not self.retry_policy.allows(attempt):
                raise RetryExhaustedError(
                    f"Giving up on {entry.name} after {attempt - 1} re-authentication attempts",
                    attempts=attempt - 1,
                    cause=last_error,
                )

            self.retry_policy.wait(attempt)
            try:
                token = self.session_manager.login()
            except IssueTrackerError as e:
                # Bad credentials and transport failures are indistinguishable
                # here and both retried.
                self.logger.warning(f"Re-authentication attempt {attempt} failed: {e}")
                last_error = e
                continue

            self.logger.info(f"Re-authenticated (attempt {attempt})")
            self.event_bus.publish(Reauthenticated(attempt=attempt, entry_name=entry.name))
            return attempt, token

"""
Credentials File - Tracker login stored in a Java-style properties file.

The file lives at ~/.jenkins-ci.org and holds the keys ``userName`` and
``password``. A missing file is not an error: it yields empty credentials
and an anonymous session.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...core.ports.config_provider import CREDENTIALS_FILE_NAME


USERNAME_KEY = "userName"
PASSWORD_KEY = "password"


@dataclass(frozen=True)
class Credentials:
    """Username and password for the tracker."""

    username: str = ""
    password: str = ""

    @property
    def is_anonymous(self) -> bool:
        return not self.username

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password=***)"


class CredentialsFile:
    """Loads Credentials from a properties file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else Path.home() / CREDENTIALS_FILE_NAME
        self.logger = logging.getLogger("CredentialsFile")

    def load(self) -> Credentials:
        """Read the credentials, or empty ones if the file is absent."""
        if not self.path.is_file():
            self.logger.debug(f"No credentials file at {self.path}")
            return Credentials()

        properties = parse_properties(self.path.read_text(encoding="utf-8"))
        return Credentials(
            username=properties.get(USERNAME_KEY, ""),
            password=properties.get(PASSWORD_KEY, ""),
        )


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse ``key=value`` / ``key: value`` lines.

    Blank lines and lines starting with ``#`` or ``!`` are ignored; keys
    and values are stripped. Line continuations and escapes are not
    supported.
    """
    properties = {}
    for line in text.splitlines():
        line = line.strip()

        if not line or line[0] in "#!":
            continue

        separators = [i for i in (line.find("="), line.find(":")) if i != -1]
        if not separators:
            properties[line] = ""
            continue

        index = min(separators)
        key = line[:index].strip()
        value = line[index + 1:].strip()
        properties[key] = value

    return properties

"""
Exit Codes - Process exit statuses of the jira-versions command.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status of a jira-versions run."""

    SUCCESS = 0
    USAGE_ERROR = 1

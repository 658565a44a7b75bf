"""
Jira Adapter - Implementation of VersionTrackerPort for Atlassian Jira.
"""

from .adapter import JiraVersionAdapter
from .client import JiraApiClient

__all__ = [
    "JiraVersionAdapter",
    "JiraApiClient",
]

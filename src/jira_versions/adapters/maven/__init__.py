"""
Maven Adapter - Implementation of ReleaseRepositoryPort for Maven repositories.
"""

from .filters import ExperimentalFilter
from .repository import MavenReleaseRepository

__all__ = [
    "ExperimentalFilter",
    "MavenReleaseRepository",
]

"""
Domain Entities - Releases read from the repository and the tracker
version entries derived from them.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional

from .value_objects import CanonicalVersionName, VersionNumber


CORE_PREFIX = "jenkins-"
PLUGIN_SUFFIX = "-plugin"


class SourceKind(Enum):
    """Where a release comes from."""

    CORE = "core"
    PLUGIN = "plugin"


@dataclass(frozen=True)
class VersionCandidate:
    """
    A release discovered in the artifact repository that may need a
    corresponding version entry in the tracker.

    The timestamp may be left unset by repositories where reading it is
    expensive; it is resolved only for candidates that are emitted.
    """

    source_kind: SourceKind
    raw_version: str
    timestamp: Optional[datetime] = None
    artifact_id: str = ""

    @classmethod
    def core(cls, version: str, timestamp: Optional[datetime] = None) -> "VersionCandidate":
        return cls(SourceKind.CORE, version, timestamp)

    @classmethod
    def plugin(
        cls,
        artifact_id: str,
        version: str,
        timestamp: Optional[datetime] = None,
    ) -> "VersionCandidate":
        return cls(SourceKind.PLUGIN, version, timestamp, artifact_id=artifact_id)

    @property
    def version_number(self) -> VersionNumber:
        return VersionNumber(self.raw_version)

    @property
    def is_experimental(self) -> bool:
        return self.version_number.is_experimental

    @property
    def canonical_name(self) -> CanonicalVersionName:
        return canonical_name(self)


def canonical_name(candidate: VersionCandidate) -> CanonicalVersionName:
    """
    Derive the tracker version name for a candidate.

    Core releases are prefixed with ``jenkins-``. Plugin releases use the
    artifact id with a trailing ``-plugin`` removed, so ``foo-plugin`` at
    1.2 becomes ``foo-1.2``.
    """
    if candidate.source_kind is SourceKind.CORE:
        return CanonicalVersionName(CORE_PREFIX + candidate.raw_version)

    artifact_id = candidate.artifact_id
    if artifact_id.endswith(PLUGIN_SUFFIX):
        artifact_id = artifact_id[: -len(PLUGIN_SUFFIX)]
    return CanonicalVersionName(f"{artifact_id}-{candidate.raw_version}")


@dataclass(frozen=True)
class TrackerVersionEntry:
    """A version record to be created in the tracker. Always released."""

    name: CanonicalVersionName
    release_date: date
    released: bool = True

    @classmethod
    def from_candidate(cls, candidate: VersionCandidate) -> "TrackerVersionEntry":
        timestamp = candidate.timestamp
        if timestamp is None:
            raise ValueError(f"Release time of {canonical_name(candidate)} is not resolved")
        release_date = timestamp.date() if isinstance(timestamp, datetime) else timestamp
        return cls(name=canonical_name(candidate), release_date=release_date)


@dataclass(frozen=True)
class PluginHistory:
    """A plugin known to the repository, identified by its Maven coordinates."""

    artifact_id: str
    group_id: str = "org.jenkins-ci.plugins"

    @property
    def group_path(self) -> str:
        return self.group_id.replace(".", "/")

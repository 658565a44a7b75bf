"""
Value Objects - Immutable objects defined by their attributes.
"""

import re
from functools import total_ordering
from typing import NewType


# Name of a version entry in the tracker's namespace
CanonicalVersionName = NewType("CanonicalVersionName", str)


@total_ordering
class VersionNumber:
    """
    Comparable release version, ordered the way Maven/Jenkins order them.

    Numeric components compare numerically. Qualifiers sort before the
    plain release they qualify, so 1.0-alpha-1 < 1.0-beta-1 < 1.0-rc-1 < 1.0
    and 1.0 < 1.0.1.

    Example:
        >>> sorted(["1.10", "1.9", "1.10-beta-1"], key=VersionNumber)
        ['1.9', '1.10-beta-1', '1.10']
    """

    QUALIFIER_RANKS = {
        "alpha": 0,
        "a": 0,
        "beta": 1,
        "b": 1,
        "milestone": 2,
        "m": 2,
        "rc": 3,
        "cr": 3,
        "snapshot": 4,
    }
    UNKNOWN_QUALIFIER_RANK = 5

    _TOKEN_PATTERN = re.compile(r"\d+|[A-Za-z]+")
    _RELEASE_MARK = (1, 0, "")

    def __init__(self, version: str):
        self.version = str(version).strip()
        self._key = self._parse(self.version)

    @classmethod
    def _parse(cls, version: str) -> tuple:
        key = []
        for token in cls._TOKEN_PATTERN.findall(version):
            if token.isdigit():
                key.append((1, int(token), ""))
            else:
                word = token.lower()
                rank = cls.QUALIFIER_RANKS.get(word, cls.UNKNOWN_QUALIFIER_RANK)
                key.append((0, rank, word))
        return tuple(key)

    def _padded(self, length: int) -> tuple:
        return self._key + (self._RELEASE_MARK,) * (length - len(self._key))

    def _strip_trailing_zeros(self) -> tuple:
        key = list(self._key)
        while key and key[-1] == (1, 0, ""):
            key.pop()
        return tuple(key)

    @property
    def is_experimental(self) -> bool:
        """True for alpha and beta builds."""
        lowered = self.version.lower()
        return "alpha" in lowered or "beta" in lowered

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        length = max(len(self._key), len(other._key))
        return self._padded(length) < other._padded(length)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        length = max(len(self._key), len(other._key))
        return self._padded(length) == other._padded(length)

    def __hash__(self) -> int:
        return hash(self._strip_trailing_zeros())

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return f"VersionNumber({self.version!r})"

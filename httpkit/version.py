"""HTTP protocol versions."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

__all__ = ["Version", "default_version"]


@total_ordering
class Version(Enum):
    """A version of the HTTP specification, ordered from oldest to newest."""

    HTTP_09 = "HTTP/0.9"
    HTTP_10 = "HTTP/1.0"
    HTTP_11 = "HTTP/1.1"
    HTTP_2 = "HTTP/2.0"
    HTTP_3 = "HTTP/3.0"

    @property
    def _rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank < other._rank

    def __str__(self) -> str:
        return self.value


_RANKS = {version: rank for rank, version in enumerate(Version)}


def default_version() -> Version:
    """Return the default HTTP version, HTTP/1.1."""
    return Version.HTTP_11
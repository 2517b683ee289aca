"""The port component of a URI."""

from __future__ import annotations

import re
from dataclasses import dataclass

from httpkit.errors import ErrorKind, InvalidUri

__all__ = ["Port"]

_PORT_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_MAX_PORT = 0xFFFF


@dataclass(frozen=True, eq=False)
class Port:
    """A port number together with the text it was written as."""

    number: int
    text: str

    @classmethod
    def parse(cls, text: str) -> Port:
        """Parse a decimal port number in the range 0..65535."""
        if not _PORT_RE.fullmatch(text):
            raise InvalidUri(ErrorKind.INVALID_PORT)
        number = int(text)
        if number > _MAX_PORT:
            raise InvalidUri(ErrorKind.INVALID_PORT)
        return cls(number, text)

    def __int__(self) -> int:
        return self.number

    def __index__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return str(self.number)

    def __repr__(self) -> str:
        return f"Port({self.number})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Port):
            return self.number == other.number
        if isinstance(other, int) and not isinstance(other, bool):
            return self.number == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.number)
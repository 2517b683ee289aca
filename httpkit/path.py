"""The path and query component of a URI."""

from __future__ import annotations

from typing import Optional, Union

from httpkit.errors import ErrorKind, InvalidUri

__all__ = ["PathAndQuery"]

_QUESTION, _HASH = ord("?"), ord("#")

_Source = Union[str, bytes, bytearray, memoryview]


def _to_bytes(src: _Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _allowed_in_path(b: int) -> bool:
    # Bytes that need no percent-encoding in a path, plus '"', '{' and '}',
    # which some clients send raw (for instance JSON embedded in the path).
    return (
        b == 0x21
        or 0x24 <= b <= 0x3B
        or b == 0x3D
        or 0x40 <= b <= 0x5F
        or 0x61 <= b <= 0x7A
        or b in (0x7C, 0x7E, 0x22, 0x7B, 0x7D)
    )


def _allowed_in_query(b: int) -> bool:
    return b == 0x21 or 0x24 <= b <= 0x3B or b == 0x3D or 0x3F <= b <= 0x7E


def _content_end(raw: bytes) -> int:
    """Validate ``raw`` and return where the fragment, if any, begins."""
    in_query = False
    for i, b in enumerate(raw):
        if b >= 0x7F:
            # Possibly UTF-8; checked when the bytes are decoded.
            continue
        if b == _HASH:
            return i
        if in_query:
            if not _allowed_in_query(b):
                raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
        elif b == _QUESTION:
            in_query = True
        elif not _allowed_in_path(b):
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
    return len(raw)


class PathAndQuery:
    """The path of a URI together with its optional query string.

    Any fragment is dropped when parsing.
    """

    __slots__ = ("_data", "_query")

    def __init__(self, data: str = "", query: Optional[int] = None) -> None:
        """Wrap text already known to be valid; ``query`` indexes its ``?``."""
        self._data = data
        self._query = query

    @classmethod
    def parse(cls, src: _Source) -> PathAndQuery:
        """Parse a path with an optional query; a fragment is discarded."""
        raw = _to_bytes(src)
        raw = raw[: _content_end(raw)]
        try:
            data = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR) from None
        i = data.find("?")
        return cls(data, None if i < 0 else i)

    @classmethod
    def _empty(cls) -> PathAndQuery:
        return cls("")

    @classmethod
    def _slash(cls) -> PathAndQuery:
        return cls("/")

    @classmethod
    def _star(cls) -> PathAndQuery:
        return cls("*")

    @property
    def _is_empty(self) -> bool:
        return not self._data

    def path(self) -> str:
        """Return the path; an empty path is reported as ``/``."""
        path = self._data if self._query is None else self._data[: self._query]
        return path or "/"

    def query(self) -> Optional[str]:
        """Return the text after the ``?``, or None if there is no query."""
        if self._query is None:
            return None
        return self._data[self._query + 1 :]

    def as_str(self) -> str:
        """Return path and query as one string; empty becomes ``/``."""
        return self._data or "/"

    def __str__(self) -> str:
        if not self._data:
            return "/"
        if self._data[0] in "/*":
            return self._data
        return "/" + self._data

    def __repr__(self) -> str:
        return f"PathAndQuery({str(self)!r})"

    def _other_text(self, other: object) -> Optional[str]:
        if isinstance(other, PathAndQuery):
            return other.as_str()
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathAndQuery):
            return self._data == other._data
        if isinstance(other, str):
            return self.as_str() == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str() < text

    def __le__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str() <= text

    def __gt__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str() > text

    def __ge__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str() >= text

    def __hash__(self) -> int:
        return hash(self._data)
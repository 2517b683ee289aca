"""The scheme component of a URI."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple, Union

from httpkit.chars import is_scheme_char
from httpkit.errors import ErrorKind, InvalidUri

__all__ = ["Scheme", "split_scheme"]

MAX_SCHEME_LEN = 64

_COLON = ord(":")


def _to_bytes(src: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


class Scheme:
    """A URI scheme such as ``http``, ``https`` or any other valid name."""

    __slots__ = ("_text", "_standard")

    HTTP: ClassVar[Scheme]
    HTTPS: ClassVar[Scheme]

    def __init__(self, text: str, standard: bool = False) -> None:
        self._text = text
        self._standard = standard

    @classmethod
    def parse(cls, src: Union[str, bytes, bytearray, memoryview]) -> Scheme:
        """Parse a scheme given on its own, without the trailing ``://``."""
        data = _to_bytes(src)
        if data == b"http":
            return cls.HTTP
        if data == b"https":
            return cls.HTTPS
        if len(data) > MAX_SCHEME_LEN:
            raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
        if any(b == _COLON or not is_scheme_char(b) for b in data):
            raise InvalidUri(ErrorKind.INVALID_SCHEME)
        return cls(data.decode("ascii"))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Scheme({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scheme):
            if self._standard or other._standard:
                return (
                    self._standard
                    and other._standard
                    and self._text == other._text
                )
            return self._text.encode("ascii").lower() == other._text.encode("ascii").lower()
        if isinstance(other, str):
            return self._text.encode("ascii").lower() == other.encode("utf-8").lower()
        return NotImplemented

    def __hash__(self) -> int:
        if self._standard:
            return hash((1,) if self._text == "http" else (2,))
        return hash(self._text.encode("ascii").lower())


Scheme.HTTP = Scheme("http", standard=True)
Scheme.HTTPS = Scheme("https", standard=True)


def split_scheme(
    data: Union[str, bytes, bytearray, memoryview],
) -> Tuple[Optional[Scheme], bytes]:
    """Split a leading ``scheme://`` off ``data``.

    Returns the scheme (or None when there is none) and the bytes that
    follow the ``://`` separator.
    """
    raw = _to_bytes(data)

    if len(raw) >= 7 and raw[:7].lower() == b"http://":
        return Scheme.HTTP, raw[7:]

    if len(raw) >= 8 and raw[:8].lower() == b"https://":
        return Scheme.HTTPS, raw[8:]

    if len(raw) > 3:
        for i, b in enumerate(raw):
            if not is_scheme_char(b):
                break
            if b == _COLON:
                if raw[i + 1 : i + 3] != b"//":
                    break
                if i > MAX_SCHEME_LEN:
                    raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
                return Scheme(raw[:i].decode("ascii")), raw[i + 3 :]

    return None, raw
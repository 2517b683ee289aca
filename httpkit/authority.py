"""The authority component of a URI."""

from __future__ import annotations

from typing import Optional, Union

from httpkit.chars import is_uri_char
from httpkit.errors import ErrorKind, InvalidUri
from httpkit.port import Port

__all__ = ["Authority", "authority_end"]

# e.g. [FEDC:BA98:7654:3210:FEDC:BA98:7654:3210]:80
MAX_COLONS = 8

_SLASH, _QUESTION, _HASH = ord("/"), ord("?"), ord("#")
_COLON, _AT, _PERCENT = ord(":"), ord("@"), ord("%")
_OPEN_BRACKET, _CLOSE_BRACKET = ord("["), ord("]")

_Source = Union[str, bytes, bytearray, memoryview]


def _to_bytes(src: _Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _folded(text: str) -> bytes:
    """Lower-case ASCII letters only, leaving every other byte as it is."""
    return text.encode("utf-8").lower()


def authority_end(data: _Source) -> int:
    """Return where the authority at the start of ``data`` ends.

    The authority ends at the first ``/``, ``?`` or ``#``, or at the end of
    the data. The result may be 0, meaning an empty authority. Raises
    InvalidUri if the bytes before that point are not a valid authority.
    """
    raw = _to_bytes(data)
    colon_count = 0
    start_bracket = False
    end_bracket = False
    has_percent = False
    at_sign_pos: Optional[int] = None
    end = len(raw)

    for i, b in enumerate(raw):
        if b in (_SLASH, _QUESTION, _HASH):
            end = i
            break
        if b == _COLON:
            if colon_count >= MAX_COLONS:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            colon_count += 1
        elif b == _OPEN_BRACKET:
            # A '%' before the bracket cannot belong to the userinfo.
            if has_percent or start_bracket:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            start_bracket = True
        elif b == _CLOSE_BRACKET:
            if not start_bracket or end_bracket:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            end_bracket = True
            # Colons and '%' so far belonged to an IPv6 literal.
            colon_count = 0
            has_percent = False
        elif b == _AT:
            at_sign_pos = i
            # Colons and '%' so far belonged to the userinfo.
            colon_count = 0
            has_percent = False
        elif b == _PERCENT:
            # Allowed in the userinfo and in an IPv6 zone identifier; if the
            # flag survives to the end it was part of the host name.
            has_percent = True
        elif not is_uri_char(b):
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)

    if start_bracket != end_bracket:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if colon_count > 1:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if end > 0 and at_sign_pos == end - 1:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if has_percent:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    return end


def _host(text: str) -> str:
    host_port = text.rsplit("@", 1)[-1]
    if host_port.startswith("["):
        return host_port[: host_port.index("]") + 1]
    return host_port.split(":", 1)[0]


class Authority:
    """The authority of a URI: optional userinfo, a host and an optional port.

    Comparison, ordering and hashing ignore ASCII case.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str = "") -> None:
        """Wrap text that is already known to be a valid authority."""
        self._text = text

    @classmethod
    def parse(cls, src: _Source) -> Authority:
        """Parse a complete, non-empty authority."""
        raw = _to_bytes(src)
        if not raw:
            raise InvalidUri(ErrorKind.EMPTY)
        if authority_end(raw) != len(raw):
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
        return cls(raw.decode("ascii"))

    def host(self) -> str:
        """Return the host, including the brackets of an IPv6 literal."""
        if not self._text:
            return ""
        return _host(self._text)

    def port(self) -> Optional[Port]:
        """Return the port, or None if there is no valid one."""
        i = self._text.rfind(":")
        if i < 0:
            return None
        try:
            return Port.parse(self._text[i + 1 :])
        except InvalidUri:
            return None

    def port_u16(self) -> Optional[int]:
        """Return the port number, or None if there is no valid port."""
        port = self.port()
        return None if port is None else port.number

    def _key(self) -> bytes:
        return _folded(self._text)

    @staticmethod
    def _other_key(other: object) -> Optional[bytes]:
        if isinstance(other, Authority):
            return other._key()
        if isinstance(other, str):
            return _folded(other)
        return None

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Authority({self._text!r})"

    def __eq__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() == key

    def __lt__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() < key

    def __le__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() <= key

    def __gt__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() > key

    def __ge__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() >= key

    def __hash__(self) -> int:
        return hash(self._key())

    def __bool__(self) -> bool:
        return bool(self._text)
"""Parsing and inspecting URIs as they appear in HTTP request targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from httpkit.authority import Authority, authority_end
from httpkit.errors import ErrorKind, InvalidUri, InvalidUriParts
from httpkit.path import PathAndQuery
from httpkit.port import Port
from httpkit.scheme import Scheme, split_scheme

if TYPE_CHECKING:
    from httpkit.builder import Builder

__all__ = ["Parts", "Uri", "MAX_LEN"]

# One below the largest 16-bit value, which marks "no query" in a path.
MAX_LEN = 0xFFFF - 1

_Source = Union[str, bytes, bytearray, memoryview]


def _to_bytes(src: _Source) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


@dataclass
class Parts:
    """The separate components of a URI, each of which may be absent."""

    scheme: Optional[Scheme] = None
    authority: Optional[Authority] = None
    path_and_query: Optional[PathAndQuery] = None


class Uri:
    """A URI in origin, absolute, authority or asterisk form.

    ``Uri()`` is the origin-form URI ``/``.
    """

    __slots__ = ("_scheme", "_authority", "_path_and_query")

    def __init__(self) -> None:
        self._scheme: Optional[Scheme] = None
        self._authority = Authority()
        self._path_and_query = PathAndQuery._slash()

    @classmethod
    def _new(
        cls,
        scheme: Optional[Scheme],
        authority: Authority,
        path_and_query: PathAndQuery,
    ) -> Uri:
        uri = cls.__new__(cls)
        uri._scheme = scheme
        uri._authority = authority
        uri._path_and_query = path_and_query
        return uri

    @classmethod
    def parse(cls, src: _Source) -> Uri:
        """Parse a URI from text or bytes."""
        raw = _to_bytes(src)
        if len(raw) > MAX_LEN:
            raise InvalidUri(ErrorKind.TOO_LONG)
        if not raw:
            raise InvalidUri(ErrorKind.EMPTY)
        if len(raw) == 1:
            if raw == b"/":
                return cls._new(None, Authority(), PathAndQuery._slash())
            if raw == b"*":
                return cls._new(None, Authority(), PathAndQuery._star())
            return cls._new(None, Authority.parse(raw), PathAndQuery._empty())
        if raw.startswith(b"/"):
            return cls._new(None, Authority(), PathAndQuery.parse(raw))
        return cls._parse_full(raw)

    @classmethod
    def _parse_full(cls, raw: bytes) -> Uri:
        scheme, rest = split_scheme(raw)
        end = authority_end(rest)

        if scheme is None:
            if end != len(rest):
                raise InvalidUri(ErrorKind.INVALID_FORMAT)
            return cls._new(None, Authority(rest.decode("ascii")), PathAndQuery._empty())

        # An absolute URI needs an authority.
        if end == 0:
            raise InvalidUri(ErrorKind.INVALID_FORMAT)

        authority = Authority(rest[:end].decode("ascii"))
        return cls._new(scheme, authority, PathAndQuery.parse(rest[end:]))

    @classmethod
    def from_parts(cls, parts: Parts) -> Uri:
        """Assemble a URI from parts, checking that they form a valid one."""
        if parts.scheme is not None:
            if parts.authority is None:
                raise InvalidUriParts(ErrorKind.AUTHORITY_MISSING)
            if parts.path_and_query is None:
                raise InvalidUriParts(ErrorKind.PATH_AND_QUERY_MISSING)
        elif parts.authority is not None and parts.path_and_query is not None:
            raise InvalidUriParts(ErrorKind.SCHEME_MISSING)

        return cls._new(
            parts.scheme,
            parts.authority if parts.authority is not None else Authority(),
            parts.path_and_query
            if parts.path_and_query is not None
            else PathAndQuery._empty(),
        )

    @classmethod
    def from_authority(cls, authority: Authority) -> Uri:
        """Return an authority-form URI."""
        return cls._new(None, authority, PathAndQuery._empty())

    @classmethod
    def from_path_and_query(cls, path_and_query: PathAndQuery) -> Uri:
        """Return an origin-form URI."""
        return cls._new(None, Authority(), path_and_query)

    @classmethod
    def builder(cls) -> Builder:
        """Return a new builder for assembling a URI piece by piece."""
        from httpkit.builder import Builder

        return Builder()

    def _has_path(self) -> bool:
        return not self._path_and_query._is_empty or self._scheme is not None

    def into_parts(self) -> Parts:
        """Return the components of this URI; absent ones are None."""
        return Parts(
            scheme=self._scheme,
            authority=self._authority if self._authority else None,
            path_and_query=self._path_and_query if self._has_path() else None,
        )

    def scheme(self) -> Optional[Scheme]:
        """Return the scheme, or None for a relative URI."""
        return self._scheme

    def scheme_str(self) -> Optional[str]:
        """Return the scheme as text, or None for a relative URI."""
        return None if self._scheme is None else str(self._scheme)

    def authority(self) -> Optional[Authority]:
        """Return the authority, or None if there is none."""
        return self._authority if self._authority else None

    def host(self) -> Optional[str]:
        """Return the host, or None if there is no authority."""
        authority = self.authority()
        return None if authority is None else authority.host()

    def port(self) -> Optional[Port]:
        """Return the port, or None if there is none."""
        authority = self.authority()
        return None if authority is None else authority.port()

    def port_u16(self) -> Optional[int]:
        """Return the port number, or None if there is none."""
        port = self.port()
        return None if port is None else port.number

    def path(self) -> str:
        """Return the path; empty for an authority-form URI."""
        return self._path_and_query.path() if self._has_path() else ""

    def query(self) -> Optional[str]:
        """Return the query after the ``?``, or None if there is none."""
        return self._path_and_query.query()

    def path_and_query(self) -> Optional[PathAndQuery]:
        """Return the path and query, or None for an authority-form URI."""
        if self._scheme is not None or not self._authority:
            return self._path_and_query
        return None

    def __str__(self) -> str:
        pieces = []
        if self._scheme is not None:
            pieces.append(f"{self._scheme}://")
        if self._authority:
            pieces.append(str(self._authority))
        pieces.append(self.path())
        query = self.query()
        if query is not None:
            pieces.append(f"?{query}")
        return "".join(pieces)

    def __repr__(self) -> str:
        return f"Uri({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Uri):
            return (
                self.scheme() == other.scheme()
                and self.authority() == other.authority()
                and self.path() == other.path()
                and self.query() == other.query()
            )
        if isinstance(other, str):
            return self._matches_text(other)
        return NotImplemented

    def _matches_text(self, text: str) -> bool:
        rest = text.encode("utf-8")
        absolute = False

        if self._scheme is not None:
            scheme = str(self._scheme).encode("ascii")
            absolute = True
            if len(rest) < len(scheme) + 3:
                return False
            if rest[: len(scheme)].lower() != scheme.lower():
                return False
            rest = rest[len(scheme) :]
            if rest[:3] != b"://":
                return False
            rest = rest[3:]

        if self._authority:
            authority = str(self._authority).encode("ascii")
            absolute = True
            if len(rest) < len(authority):
                return False
            if rest[: len(authority)].lower() != authority.lower():
                return False
            rest = rest[len(authority) :]

        path = self.path().encode("utf-8")
        if rest.startswith(path):
            rest = rest[len(path) :]
        elif not (absolute and path == b"/"):
            # Only the "/" of an absolute URI may be left out.
            return False

        query = self.query()
        if query is not None:
            if not rest:
                return not query
            if rest[:1] != b"?":
                return False
            rest = rest[1:]
            encoded = query.encode("utf-8")
            if not rest.startswith(encoded):
                return False
            rest = rest[len(encoded) :]

        return not rest or rest[:1] == b"#"

    def __hash__(self) -> int:
        return hash((self.scheme(), self.authority(), self.path(), self.query()))
"""Assembling a URI from its components."""

from __future__ import annotations

from typing import Any, Callable, Optional

from httpkit.authority import Authority
from httpkit.errors import InvalidUri
from httpkit.path import PathAndQuery
from httpkit.scheme import Scheme
from httpkit.uri import Parts, Uri

__all__ = ["Builder"]


class Builder:
    """Collects URI components and builds a Uri from them.

    Conversion errors are remembered and raised by ``build``; once one has
    occurred, further settings are ignored.
    """

    __slots__ = ("_parts", "_error")

    def __init__(self) -> None:
        self._parts = Parts()
        self._error: Optional[InvalidUri] = None

    @classmethod
    def from_uri(cls, uri: Uri) -> Builder:
        """Start from the components of an existing URI."""
        builder = cls()
        builder._parts = uri.into_parts()
        return builder

    def _set(
        self,
        field: str,
        value: Any,
        kind: type,
        parse: Callable[[Any], Any],
    ) -> Builder:
        if self._error is None:
            try:
                converted = value if isinstance(value, kind) else parse(value)
            except InvalidUri as exc:
                self._error = exc
            else:
                setattr(self._parts, field, converted)
        return self

    def scheme(self, scheme: Any) -> Builder:
        """Set the scheme, given as a Scheme or as text."""
        return self._set("scheme", scheme, Scheme, Scheme.parse)

    def authority(self, authority: Any) -> Builder:
        """Set the authority, given as an Authority or as text."""
        return self._set("authority", authority, Authority, Authority.parse)

    def path_and_query(self, path_and_query: Any) -> Builder:
        """Set the path and query, given as a PathAndQuery or as text."""
        return self._set(
            "path_and_query", path_and_query, PathAndQuery, PathAndQuery.parse
        )

    def build(self) -> Uri:
        """Build the URI, raising any error met while collecting its parts."""
        if self._error is not None:
            raise self._error
        return Uri.from_parts(self._parts)
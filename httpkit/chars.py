"""Byte classes used when validating URI components."""

from __future__ import annotations

import string

__all__ = ["is_uri_char", "is_scheme_char"]

# Bytes that may appear in a URI without percent-encoding. '%' is absent on
# purpose: the authority parser treats it separately.
_URI_CHARS = frozenset(
    (string.ascii_letters + string.digits + "!#$&'()*+,-./:;=?@[]_~").encode("ascii")
)

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ), plus ':' which ends a
# scheme and '~' which the table has always accepted.
_SCHEME_CHARS = frozenset(
    (string.ascii_letters + string.digits + "+-.:~").encode("ascii")
)


def is_uri_char(byte: int) -> bool:
    """Return True if ``byte`` may appear unescaped in a URI."""
    return byte in _URI_CHARS


def is_scheme_char(byte: int) -> bool:
    """Return True if ``byte`` may appear in a URI scheme (':' included)."""
    return byte in _SCHEME_CHARS
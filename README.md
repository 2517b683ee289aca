# httpkit

Small, strict types for the parts of an HTTP request line: the protocol
version and the request target URI. No dependencies beyond the standard
library.

- `httpkit.version` — `Version` (`HTTP_09`, `HTTP_10`, `HTTP_11`, `HTTP_2`,
  `HTTP_3`), ordered from oldest to newest; `str()` gives `"HTTP/1.1"` and
  so on. `default_version()` returns `Version.HTTP_11`.
- `httpkit.uri` — `Uri` parses origin-form (`/path?query`), absolute-form
  (`http://host:port/path`), authority-form (`host:port`) and asterisk-form
  (`*`) targets, dropping any fragment. `Parts` holds its components.
- `httpkit.scheme`, `httpkit.authority`, `httpkit.port`, `httpkit.path` —
  `Scheme`, `Authority`, `Port` and `PathAndQuery`, each parseable on its
  own with `.parse(...)`.
- `httpkit.builder` — `Builder` assembles a `Uri` from components.
- `httpkit.errors` — `InvalidUri`, `InvalidUriParts` and `ErrorKind`.

All `parse` methods accept `str` or bytes-like input.

## Install

```
pip install httpkit
```

## Parsing

```python
from httpkit.uri import Uri

uri = Uri.parse("https://user@example.com:8443/install.html?lang=en#top")
uri.scheme_str()   # "https"
uri.host()         # "example.com"
uri.port_u16()     # 8443
uri.path()         # "/install.html"
uri.query()        # "lang=en"
str(uri)           # "https://user@example.com:8443/install.html?lang=en"

Uri.parse("/foo/bar?baz").host()   # None
str(Uri())                         # "/"
```

A URI longer than 65534 bytes is rejected, as is a scheme longer than 64
bytes.

Scheme and authority compare and hash case-insensitively; paths and queries
do not. A `Uri` also compares equal to a string that spells the same URI:

```python
Uri.parse("localhost:3000") == "LOCALHOST:3000"   # True
Uri.parse("http://example.com") == "http://example.com/"   # True
```

`into_parts()` returns a `Parts` with absent components set to `None`, and
`Uri.from_parts(parts)` puts them back together. `Uri.from_authority` and
`Uri.from_path_and_query` wrap a single component.

## Components

```python
from httpkit.authority import Authority
from httpkit.path import PathAndQuery
from httpkit.scheme import Scheme

auth = Authority.parse("example.org:80")
auth.host()          # "example.org"
auth.port() == 80    # True; a Port compares equal to its number
int(auth.port())     # 80
str(auth.port())     # "80"

pq = PathAndQuery.parse("/hello?world")
pq.path(), pq.query()   # ("/hello", "world")

Scheme.parse("HTTP") == "http"   # True
Scheme.HTTP, Scheme.HTTPS        # the two standard schemes
```

## Building

```python
from httpkit.builder import Builder
from httpkit.scheme import Scheme

uri = (
    Builder()
    .scheme(Scheme.HTTPS)
    .authority("example.com")
    .path_and_query("/")
    .build()
)
```

Each setter takes either the component type or text to parse. A parse
error is kept and raised by `build()`, not by the setter. `Builder.from_uri`
starts from an existing `Uri`, and `Uri.builder()` returns a fresh
`Builder`.

An absolute URI needs scheme, authority and path together; a scheme
without an authority or path, or an authority with a path but no scheme,
raises `InvalidUriParts`.

## Errors

`InvalidUri` is a `ValueError`; `InvalidUriParts` is a subclass of it. The
error's `kind` is an `ErrorKind` and its message is the kind's text, such
as `"invalid authority"`.

```python
from httpkit.errors import ErrorKind, InvalidUri
from httpkit.uri import Uri

try:
    Uri.parse("localhost:8080:3030")
except InvalidUri as err:
    assert err.kind is ErrorKind.INVALID_AUTHORITY
```

## What it does not do

httpkit covers versions and request targets only. It has no request or
response types, header maps, methods or status codes, does no network I/O,
and provides no command-line tool.

## Tests

```
pip install -e .[test]
pytest
```
import pytest

from httpkit.builder import Builder
from httpkit.errors import ErrorKind, InvalidUri, InvalidUriParts
from httpkit.scheme import Scheme
from httpkit.uri import Parts, Uri


def test_build_from_str():
    uri = (
        Builder()
        .scheme(Scheme.HTTP)
        .authority("hyper.rs")
        .path_and_query("/foo?a=1")
        .build()
    )
    assert uri.scheme_str() == "http"
    assert uri.authority().host() == "hyper.rs"
    assert uri.path() == "/foo"
    assert uri.query() == "a=1"


@pytest.mark.parametrize("i", range(1, 10))
def test_build_from_string(i):
    uri = Builder().path_and_query(f"/foo?a={i}").build()
    assert uri.path() == "/foo"
    assert uri.query() == f"a={i}"


def test_build_from_uri():
    original = Uri()
    uri = Builder.from_uri(original).build()
    assert uri == original


def test_build_from_absolute_uri():
    original = Uri.parse("https://example.com/x?y")
    assert Builder.from_uri(original).build() == original


def test_empty_builder_builds_empty_uri():
    assert Builder().build() == Uri.from_parts(Parts())


def test_invalid_scheme_raises_on_build():
    builder = Builder().scheme("!@#%/^").authority("hyper.rs").path_and_query("/")
    with pytest.raises(InvalidUri) as info:
        builder.build()
    assert info.value.kind is ErrorKind.INVALID_SCHEME


def test_first_error_is_kept():
    builder = Builder().authority("").path_and_query("/?<")
    with pytest.raises(InvalidUri) as info:
        builder.build()
    assert info.value.kind is ErrorKind.EMPTY


def test_missing_authority_raises_on_build():
    with pytest.raises(InvalidUriParts) as info:
        Builder().scheme("https").path_and_query("/").build()
    assert info.value.kind is ErrorKind.AUTHORITY_MISSING


def test_authority_only():
    uri = Builder().authority("tokio.rs").build()
    assert str(uri) == "tokio.rs"
    assert uri.host() == "tokio.rs"
import pytest

from httpkit.authority import Authority, authority_end
from httpkit.errors import ErrorKind, InvalidUri


def _kind(src):
    with pytest.raises(InvalidUri) as info:
        Authority.parse(src)
    return info.value.kind


def test_parse_empty_string_is_error():
    assert _kind(b"") is ErrorKind.EMPTY


def test_equal_to_self_of_same_authority():
    a1 = Authority.parse("example.com")
    a2 = Authority.parse("EXAMPLE.COM")
    assert a1 == a2
    assert a2 == a1


def test_not_equal_to_self_of_different_authority():
    a1 = Authority.parse("example.com")
    a2 = Authority.parse("test.com")
    assert a1 != a2
    assert a2 != a1


def test_equates_with_a_str():
    authority = Authority.parse("example.com")
    assert authority == "EXAMPLE.com"
    assert "EXAMPLE.com" == authority


def test_not_equal_with_a_str_of_a_different_authority():
    authority = Authority.parse("example.com")
    assert (authority == "test.com") is False
    assert ("test.com" == authority) is False
    assert (authority != "test.com") is True


def test_case_insensitive_equality_example():
    authority = Authority.parse("HELLO.com")
    assert authority == "hello.coM"
    assert "hello.com" == authority


def test_compares_to_self():
    a1 = Authority.parse("abc.com")
    a2 = Authority.parse("def.com")
    assert a1 < a2
    assert a2 > a1
    assert a1 <= a2
    assert a2 >= a1


def test_compares_with_a_str():
    authority = Authority.parse("def.com")
    assert authority < "ghi.com"
    assert "ghi.com" > authority
    assert authority > "abc.com"
    assert "abc.com" < authority


def test_compares_case_insensitively():
    authority = Authority.parse("DEF.com")
    assert authority < "ghi.com"
    assert authority > "abc.com"
    assert authority <= "def.COM"
    assert authority >= "def.COM"


def test_hash_is_case_insensitive():
    a = Authority.parse("HELLO.com")
    b = Authority.parse("hello.coM")
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_allows_percent_in_userinfo():
    text = "a%2f:b%2f@example.com"
    assert Authority.parse(text) == text


def test_rejects_percent_in_hostname():
    assert _kind(b"example%2f.com") is ErrorKind.INVALID_AUTHORITY
    assert _kind(b"a%2f:b%2f@example%2f.com") is ErrorKind.INVALID_AUTHORITY


def test_allows_percent_in_ipv6_address():
    text = "[fe80::1:2:3:4%25eth0]"
    assert Authority.parse(text) == text


def test_reject_obviously_invalid_ipv6_address():
    src = b"[0:1:2:3:4:5:6:7:8:9:10:11:12:13:14]"
    assert _kind(src) is ErrorKind.INVALID_AUTHORITY


def test_rejects_percent_outside_ipv6_address():
    assert _kind(b"1234%20[fe80::1:2:3:4]") is ErrorKind.INVALID_AUTHORITY
    assert _kind(b"[fe80::1:2:3:4]%20") is ErrorKind.INVALID_AUTHORITY


def test_rejects_invalid_utf8():
    assert _kind(bytes([0xC0])) is ErrorKind.INVALID_URI_CHAR


def test_rejects_invalid_use_of_brackets():
    assert _kind(b"[]@[") is ErrorKind.INVALID_AUTHORITY
    assert _kind(b"]o[") is ErrorKind.INVALID_AUTHORITY


def test_rejects_too_many_port_colons():
    assert _kind("localhost:8080:3030") is ErrorKind.INVALID_AUTHORITY


def test_rejects_trailing_at_sign():
    assert _kind("@") is ErrorKind.INVALID_AUTHORITY


def test_rejects_path_after_authority():
    assert _kind("example.com/") is ErrorKind.INVALID_URI_CHAR


def test_host_examples():
    assert Authority.parse("example.com").host() == "example.com"
    assert Authority.parse("example.org:80").host() == "example.org"
    assert Authority.parse("user:password @ localhost:3000".replace(" ", "")).host() == "localhost"
    assert Authority.parse("[::1]:8080").host() == "[::1]"


def test_port_with_and_without():
    authority = Authority.parse("example.org:80")
    port = authority.port()
    assert port.number == 80
    assert port.text == "80"
    assert authority.port_u16() == 80
    plain = Authority.parse("example.org")
    assert plain.port() is None
    assert plain.port_u16() is None


def test_str_and_repr_keep_original_case():
    authority = Authority.parse("Example.COM:8080")
    assert str(authority) == "Example.COM:8080"
    assert repr(authority) == "Authority('Example.COM:8080')"


def test_authority_end_stops_at_delimiters():
    assert authority_end(b"example.com/path") == 11
    assert authority_end("example.com?q") == 11
    assert authority_end("example.com#f") == 11
    assert authority_end(b"") == 0
    assert authority_end(b"/path") == 0


def test_empty_authority_is_falsy():
    assert not Authority()
    assert Authority.parse("a")
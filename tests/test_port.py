import pytest

from httpkit.errors import ErrorKind, InvalidUri
from httpkit.port import Port


def test_partialeq_port():
    port_a = Port.parse("8080")
    port_b = Port.parse("8080")
    assert port_a == port_b


def test_partialeq_port_different_reprs():
    port_a = Port(8081, "8081")
    port_b = Port.parse("+8081")
    assert port_a == port_b
    assert port_b == port_a


def test_partialeq_u16():
    port = Port.parse("8080")
    assert port == 8080
    assert 8080 == port


def test_u16_from_port():
    port = Port.parse("8080")
    assert int(port) == 8080


def test_text_is_kept():
    port = Port.parse("080")
    assert port.text == "080"
    assert port.number == 80
    assert str(port) == "80"


def test_extremes():
    assert Port.parse("0") == 0
    assert Port.parse("65535") == 65535


def test_not_equal_to_other_number():
    assert Port.parse("80") != 81
    assert Port.parse("80") != Port.parse("443")


def test_hash_matches_equality():
    ports = {Port.parse("80"), Port.parse("080"), Port.parse("443")}
    assert len(ports) == 2
    assert hash(Port.parse("80")) == hash(80)


@pytest.mark.parametrize(
    "text", ["", "+", "-1", "65536", "99999", "abc", " 80", "80 ", "8_0", "8.0", "٨٠"]
)
def test_invalid_port(text):
    with pytest.raises(InvalidUri) as info:
        Port.parse(text)
    assert info.value.kind is ErrorKind.INVALID_PORT
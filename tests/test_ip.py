import pytest

from qsox.ip import IpAddress, IpAddressParseError, IpAddressParseErrorCode
from qsox.ipv4 import Ipv4Address
from qsox.ipv6 import Ipv6Address


def test_parse_v4():
    addr = IpAddress.parse("127.0.0.1")
    assert addr.is_v4()
    assert not addr.is_v6()
    assert addr.as_v4() == Ipv4Address.LOCALHOST


def test_parse_short_v4():
    addr = IpAddress.parse("1.2.3.4")
    assert addr.is_v4()
    assert str(addr) == "1.2.3.4"


def test_parse_short_v6():
    addr = IpAddress.parse("::")
    assert addr.is_v6()
    assert addr.as_v6() == Ipv6Address.UNSPECIFIED


def test_parse_medium_v6():
    addr = IpAddress.parse("::1")
    assert addr.is_v6()
    assert addr.is_localhost()


def test_parse_long_v6():
    text = "2001:db8:85a3::8a2e:370:7334"
    addr = IpAddress.parse(text)
    assert addr.is_v6()
    assert str(addr) == text


@pytest.mark.parametrize("text", ["", "hello", "1.2.3", "256.0.0.1", "::g", "1.2.3.4.5.6.7.8.9"])
def test_parse_errors(text):
    with pytest.raises(IpAddressParseError) as info:
        IpAddress.parse(text)
    assert info.value.code is IpAddressParseErrorCode.UNSPECIFIED
    assert info.value.message() == "Invalid IP address"


def test_wrong_variant_access():
    v4 = IpAddress(Ipv4Address.LOCALHOST)
    v6 = IpAddress(Ipv6Address.LOCALHOST)
    with pytest.raises(TypeError):
        v4.as_v6()
    with pytest.raises(TypeError):
        v6.as_v4()


def test_equality_and_hash():
    assert IpAddress(Ipv4Address.LOCALHOST) == IpAddress.parse("127.0.0.1")
    assert hash(IpAddress(Ipv4Address.LOCALHOST)) == hash(IpAddress.parse("127.0.0.1"))
    assert IpAddress(Ipv4Address.UNSPECIFIED) != IpAddress(Ipv6Address.UNSPECIFIED)
    assert len({IpAddress(Ipv4Address.UNSPECIFIED), IpAddress(Ipv6Address.UNSPECIFIED)}) == 2


def test_copy_construction():
    original = IpAddress(Ipv6Address.LOCALHOST)
    copy = IpAddress(original)
    assert copy == original
    assert copy.is_v6()


def test_rejects_non_address():
    with pytest.raises(TypeError):
        IpAddress("127.0.0.1")


def test_delegated_predicates():
    assert IpAddress(Ipv4Address.UNSPECIFIED).is_unspecified()
    assert IpAddress(Ipv6Address.UNSPECIFIED).is_unspecified()
    assert IpAddress(Ipv4Address.LOCALHOST).is_localhost()
    assert not IpAddress(Ipv4Address.BROADCAST).is_localhost()
    assert not IpAddress(Ipv6Address.LOCALHOST).is_unspecified()


@pytest.mark.parametrize("text", ["10.0.0.1", "::ffff:10.0.0.1", "2001:db8::1", "255.255.255.255"])
def test_string_round_trip(text):
    assert str(IpAddress.parse(text)) == text
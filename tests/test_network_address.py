import socket

import pytest

from qsox.ip import IpAddress
from qsox.ipv4 import Ipv4Address
from qsox.ipv6 import Ipv6Address
from qsox.network_address import (
    NetworkAddress,
    NetworkAddressParseError,
    NetworkAddressParseErrorCode,
)
from qsox.resolver import ResolverError, ResolverErrorCode
from qsox.socket_address import SocketAddress, SocketAddressV4, SocketAddressV6


def test_parse_round_trip():
    addr = NetworkAddress.parse("example.com:443")
    assert addr.host == "example.com"
    assert addr.port == 443
    assert str(addr) == "example.com:443"
    assert NetworkAddress.parse(str(addr)) == addr


@pytest.mark.parametrize(
    "text, code",
    [
        ("example.com", NetworkAddressParseErrorCode.MISSING_PORT),
        (":80", NetworkAddressParseErrorCode.MISSING_PORT),
        ("example.com:", NetworkAddressParseErrorCode.MISSING_PORT),
        ("example.com:70000", NetworkAddressParseErrorCode.INVALID_PORT),
        ("example.com:1a", NetworkAddressParseErrorCode.INVALID_PORT),
    ],
)
def test_parse_errors(text, code):
    with pytest.raises(NetworkAddressParseError) as info:
        NetworkAddress.parse(text)
    assert info.value.code is code


def test_error_message():
    err = NetworkAddressParseError(NetworkAddressParseErrorCode.MISSING_PORT)
    assert err.message() == "Missing host string or port number"


def test_from_socket_address_and_ip():
    sock_addr = SocketAddress.parse("10.1.2.3:99")
    addr = NetworkAddress.from_socket_address(sock_addr)
    assert addr == NetworkAddress("10.1.2.3", 99)
    assert NetworkAddress.from_ip(IpAddress(Ipv6Address.LOCALHOST), 7) == NetworkAddress("::1", 7)
    assert hash(addr) == hash(NetworkAddress("10.1.2.3", 99))


def test_bad_port_rejected():
    with pytest.raises(ValueError):
        NetworkAddress("example.com", -1)


def test_resolve_literals_without_lookup(monkeypatch):
    def forbidden(*args, **kwargs):
        raise AssertionError("no lookup expected")

    monkeypatch.setattr(socket, "getaddrinfo", forbidden)
    assert NetworkAddress("127.0.0.1", 80).resolve_v4() == SocketAddressV4(Ipv4Address.LOCALHOST, 80)
    assert NetworkAddress("::1", 80).resolve_v6() == SocketAddressV6(Ipv6Address.LOCALHOST, 80)
    resolved = NetworkAddress("::1", 80).resolve()
    assert resolved.is_v6() and resolved.port == 80
    assert NetworkAddress("127.0.0.1", 81).resolve() == SocketAddressV4(Ipv4Address.LOCALHOST, 81)


def _fake_lookup(v4_host, v6_host):
    def lookup(host, port, family=0, type=0, *args, **kwargs):
        if family == socket.AF_INET and v4_host is not None:
            return [(socket.AF_INET, socket.SOCK_DGRAM, 17, "", (v4_host, 0))]
        if family == socket.AF_INET6 and v6_host is not None:
            return [(socket.AF_INET6, socket.SOCK_DGRAM, 17, "", (v6_host, 0, 0, 0))]
        raise socket.gaierror(socket.EAI_FAIL, "lookup failed")

    return lookup


def test_resolve_name_prefers_v4(monkeypatch):
    monkeypatch.setattr(socket, "getaddrinfo", _fake_lookup("192.0.2.7", "2001:db8::7"))
    addr = NetworkAddress("service.example.com", 53)
    assert addr.resolve_v4() == SocketAddressV4(Ipv4Address.parse("192.0.2.7"), 53)
    assert addr.resolve_v6() == SocketAddressV6(Ipv6Address.parse("2001:db8::7"), 53)
    assert addr.resolve() == addr.resolve_v4()


def test_resolve_falls_back_to_v6(monkeypatch):
    monkeypatch.setattr(socket, "getaddrinfo", _fake_lookup(None, "2001:db8::7"))
    resolved = NetworkAddress("service.example.com", 53).resolve()
    assert resolved == SocketAddressV6(Ipv6Address.parse("2001:db8::7"), 53)


def test_resolve_failure(monkeypatch):
    monkeypatch.setattr(socket, "getaddrinfo", _fake_lookup(None, None))
    with pytest.raises(ResolverError) as info:
        NetworkAddress("service.example.com", 53).resolve_v4()
    assert info.value.code is ResolverErrorCode.PERMANENT_FAILURE
    with pytest.raises(ResolverError):
        NetworkAddress("service.example.com", 53).resolve()
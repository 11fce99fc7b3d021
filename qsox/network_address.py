"""Network endpoints named by host string and port, resolved on demand."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import resolver
from .ip import IpAddress
from .ipv4 import Ipv4Address, Ipv4ParseError
from .ipv6 import Ipv6Address, Ipv6ParseError
from .socket_address import (
    SocketAddress,
    SocketAddressV4,
    SocketAddressV6,
    _check_port,
    _parse_port,
)


class NetworkAddressParseErrorCode(Enum):
    MISSING_PORT = "missing_port"
    INVALID_PORT = "invalid_port"


_MESSAGES = {
    NetworkAddressParseErrorCode.MISSING_PORT: "Missing host string or port number",
    NetworkAddressParseErrorCode.INVALID_PORT: "Invalid port number",
}


class NetworkAddressParseError(ValueError):
    """Raised when text is not of the form host:port."""

    def __init__(self, code: NetworkAddressParseErrorCode) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _MESSAGES[self.code]


@dataclass(frozen=True)
class NetworkAddress:
    """A host (IP literal or domain name) and a port, resolved only when asked."""

    host: str
    port: int

    def __post_init__(self) -> None:
        if not isinstance(self.host, str):
            raise TypeError("host must be a string")
        _check_port(self.port)

    @classmethod
    def from_socket_address(cls, address: SocketAddress) -> "NetworkAddress":
        return cls(str(address.address), address.port)

    @classmethod
    def from_ip(cls, address: IpAddress, port: int) -> "NetworkAddress":
        return cls(str(IpAddress(address)), port)

    def __str__(self) -> str:
        """'host:port', without any resolution."""
        return f"{self.host}:{self.port}"

    @classmethod
    def parse(cls, text: str) -> "NetworkAddress":
        """Parse 'host:port', splitting at the last colon."""
        colon = text.rfind(":")
        if colon <= 0 or colon == len(text) - 1:
            raise NetworkAddressParseError(NetworkAddressParseErrorCode.MISSING_PORT)
        port = _parse_port(text[colon + 1:])
        if port is None:
            raise NetworkAddressParseError(NetworkAddressParseErrorCode.INVALID_PORT)
        return cls(text[:colon], port)

    def resolve_v4(self) -> SocketAddressV4:
        """Resolve to an IPv4 socket address, raising ResolverError on failure."""
        try:
            return SocketAddressV4(Ipv4Address.parse(self.host), self.port)
        except Ipv4ParseError:
            pass
        return SocketAddressV4(resolver.resolve_ipv4(self.host), self.port)

    def resolve_v6(self) -> SocketAddressV6:
        """Resolve to an IPv6 socket address, raising ResolverError on failure."""
        try:
            return SocketAddressV6(Ipv6Address.parse(self.host), self.port)
        except Ipv6ParseError:
            pass
        return SocketAddressV6(resolver.resolve_ipv6(self.host), self.port)

    def resolve(self) -> SocketAddress:
        """Resolve, taking IP literals as they are and preferring IPv4 otherwise."""
        try:
            return SocketAddress(Ipv4Address.parse(self.host), self.port)
        except Ipv4ParseError:
            pass
        try:
            return SocketAddress(Ipv6Address.parse(self.host), self.port)
        except Ipv6ParseError:
            pass
        return SocketAddress(resolver.resolve(self.host), self.port)
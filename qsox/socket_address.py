"""Socket addresses: an IP address paired with a port."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .ip import IpAddress
from .ipv4 import Ipv4Address, Ipv4ParseError, Ipv4ParseErrorCode
from .ipv6 import Ipv6Address, Ipv6ParseError

_DIGITS = frozenset("0123456789")
_MAX_PORT = 0xFFFF


def _parse_port(text: str) -> Optional[int]:
    """Read a whole decimal 16-bit port number, or return None."""
    if not text or not all(char in _DIGITS for char in text):
        return None
    value = int(text)
    if value > _MAX_PORT:
        return None
    return value


def _split_host_port(text: str) -> Optional[Tuple[str, str]]:
    """Split at the last colon; None if either side would be empty."""
    colon = text.rfind(":")
    if colon <= 0 or colon == len(text) - 1:
        return None
    return text[:colon], text[colon + 1:]


def _check_port(port: int) -> None:
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= _MAX_PORT:
        raise ValueError(f"invalid port: {port!r}")


def _strip_scope(host: str) -> str:
    return host.partition("%")[0]


class SocketAddressV4ParseErrorCode(Enum):
    MISSING_OCTETS = "missing_octets"
    TRAILING_DATA = "trailing_data"
    INVALID_OCTET = "invalid_octet"
    MISSING_PORT = "missing_port"
    INVALID_PORT = "invalid_port"


_V4_MESSAGES = {
    SocketAddressV4ParseErrorCode.MISSING_OCTETS: "Missing octets in IPv4 address",
    SocketAddressV4ParseErrorCode.TRAILING_DATA: "Trailing data after IPv4 address",
    SocketAddressV4ParseErrorCode.INVALID_OCTET: "Invalid octet in IPv4 address",
    SocketAddressV4ParseErrorCode.MISSING_PORT: "Missing port in socket address",
    SocketAddressV4ParseErrorCode.INVALID_PORT: "Invalid port in socket address",
}

_FROM_IPV4 = {
    Ipv4ParseErrorCode.MISSING_OCTETS: SocketAddressV4ParseErrorCode.MISSING_OCTETS,
    Ipv4ParseErrorCode.TRAILING_DATA: SocketAddressV4ParseErrorCode.TRAILING_DATA,
    Ipv4ParseErrorCode.INVALID_OCTET: SocketAddressV4ParseErrorCode.INVALID_OCTET,
}


class SocketAddressV4ParseError(ValueError):
    """Raised when text is not a valid IPv4 socket address."""

    def __init__(self, code: SocketAddressV4ParseErrorCode) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _V4_MESSAGES[self.code]


class SocketAddressV6ParseErrorCode(Enum):
    INVALID_STRUCTURE = "invalid_structure"
    INVALID_ADDRESS = "invalid_address"
    MISSING_PORT = "missing_port"
    INVALID_PORT = "invalid_port"


_V6_MESSAGES = {
    SocketAddressV6ParseErrorCode.INVALID_STRUCTURE:
        "Invalid structure for IPv6 socket address (missing square brackets)",
    SocketAddressV6ParseErrorCode.INVALID_ADDRESS: "Invalid IPv6 address in socket address",
    SocketAddressV6ParseErrorCode.MISSING_PORT: "Missing port in socket address",
    SocketAddressV6ParseErrorCode.INVALID_PORT: "Invalid port in socket address",
}


class SocketAddressV6ParseError(ValueError):
    """Raised when text is not a valid IPv6 socket address."""

    def __init__(self, code: SocketAddressV6ParseErrorCode) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _V6_MESSAGES[self.code]


class SocketAddressParseErrorCode(Enum):
    INVALID_ADDRESS = "invalid_address"
    MISSING_PORT = "missing_port"
    INVALID_PORT = "invalid_port"


_MESSAGES = {
    SocketAddressParseErrorCode.INVALID_ADDRESS: "Invalid IP address in socket address",
    SocketAddressParseErrorCode.MISSING_PORT: "Missing port in socket address",
    SocketAddressParseErrorCode.INVALID_PORT: "Invalid port in socket address",
}


class SocketAddressParseError(ValueError):
    """Raised when text is not a valid socket address of either version."""

    def __init__(self, code: SocketAddressParseErrorCode) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _MESSAGES[self.code]


def _is_bracketed(text: str) -> bool:
    return len(text) >= 2 and text[0] == "[" and text[-1] == "]"


@dataclass(frozen=True)
class SocketAddressV4:
    """An IPv4 address and a port."""

    address: Ipv4Address = Ipv4Address.UNSPECIFIED
    port: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.address, Ipv4Address):
            raise TypeError("address must be an Ipv4Address")
        _check_port(self.port)

    @classmethod
    def any(cls) -> "SocketAddressV4":
        """0.0.0.0 with port 0."""
        return cls(Ipv4Address.UNSPECIFIED, 0)

    @classmethod
    def parse(cls, text: str) -> "SocketAddressV4":
        """Parse 'a.b.c.d:port', raising SocketAddressV4ParseError on failure."""
        parts = _split_host_port(text)
        if parts is None:
            raise SocketAddressV4ParseError(SocketAddressV4ParseErrorCode.MISSING_PORT)
        host, port_text = parts
        try:
            address = Ipv4Address.parse(host)
        except Ipv4ParseError as exc:
            raise SocketAddressV4ParseError(_FROM_IPV4[exc.code]) from exc
        port = _parse_port(port_text)
        if port is None:
            raise SocketAddressV4ParseError(SocketAddressV4ParseErrorCode.INVALID_PORT)
        return cls(address, port)

    def __str__(self) -> str:
        return f"{self.address}:{self.port}"

    def to_sockaddr(self) -> Tuple[str, int]:
        """The address in the form the socket module takes for AF_INET."""
        return (str(self.address), self.port)

    @classmethod
    def from_sockaddr(cls, sockaddr: Tuple) -> "SocketAddressV4":
        """Build from an AF_INET address tuple as the socket module returns it."""
        host, port = sockaddr[0], sockaddr[1]
        return cls(Ipv4Address.from_packed(socket.inet_pton(socket.AF_INET, host)), port)


@dataclass(frozen=True)
class SocketAddressV6:
    """An IPv6 address and a port."""

    address: Ipv6Address = Ipv6Address.UNSPECIFIED
    port: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.address, Ipv6Address):
            raise TypeError("address must be an Ipv6Address")
        _check_port(self.port)

    @classmethod
    def any(cls) -> "SocketAddressV6":
        """:: with port 0."""
        return cls(Ipv6Address.UNSPECIFIED, 0)

    @classmethod
    def parse(cls, text: str) -> "SocketAddressV6":
        """Parse '[addr]:port', raising SocketAddressV6ParseError on failure."""
        parts = _split_host_port(text)
        if parts is None:
            raise SocketAddressV6ParseError(SocketAddressV6ParseErrorCode.MISSING_PORT)
        host, port_text = parts
        if not _is_bracketed(host):
            raise SocketAddressV6ParseError(SocketAddressV6ParseErrorCode.INVALID_STRUCTURE)
        try:
            address = Ipv6Address.parse(host[1:-1])
        except Ipv6ParseError as exc:
            raise SocketAddressV6ParseError(SocketAddressV6ParseErrorCode.INVALID_ADDRESS) from exc
        port = _parse_port(port_text)
        if port is None:
            raise SocketAddressV6ParseError(SocketAddressV6ParseErrorCode.INVALID_PORT)
        return cls(address, port)

    def __str__(self) -> str:
        return f"{self.address}:{self.port}"

    def to_sockaddr(self) -> Tuple[str, int, int, int]:
        """The address in the form the socket module takes for AF_INET6."""
        return (str(self.address), self.port, 0, 0)

    @classmethod
    def from_sockaddr(cls, sockaddr: Tuple) -> "SocketAddressV6":
        """Build from an AF_INET6 address tuple; flow info and scope are dropped."""
        host, port = _strip_scope(sockaddr[0]), sockaddr[1]
        return cls(Ipv6Address.from_packed(socket.inet_pton(socket.AF_INET6, host)), port)


_AnyIp = Union[IpAddress, Ipv4Address, Ipv6Address]


class SocketAddress:
    """An IPv4 or IPv6 address together with a port."""

    __slots__ = ("_address", "_port")

    def __init__(self, address: _AnyIp, port: int = 0) -> None:
        _check_port(port)
        self._address = IpAddress(address)
        self._port = port

    @classmethod
    def from_typed(cls, addr: Union[SocketAddressV4, SocketAddressV6]) -> "SocketAddress":
        """Wrap a version-specific socket address."""
        if not isinstance(addr, (SocketAddressV4, SocketAddressV6)):
            raise TypeError("expected a SocketAddressV4 or SocketAddressV6")
        return cls(addr.address, addr.port)

    @classmethod
    def any(cls, v6: bool = True) -> "SocketAddress":
        """The unspecified address of the chosen version with port 0."""
        return cls.from_typed(SocketAddressV6.any() if v6 else SocketAddressV4.any())

    @property
    def address(self) -> IpAddress:
        return self._address

    @property
    def ip(self) -> IpAddress:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    def with_port(self, port: int) -> "SocketAddress":
        return SocketAddress(self._address, port)

    def with_address(self, address: _AnyIp) -> "SocketAddress":
        return SocketAddress(address, self._port)

    def is_v4(self) -> bool:
        return self._address.is_v4()

    def is_v6(self) -> bool:
        return self._address.is_v6()

    def to_v4(self) -> SocketAddressV4:
        return SocketAddressV4(self._address.as_v4(), self._port)

    def to_v6(self) -> SocketAddressV6:
        return SocketAddressV6(self._address.as_v6(), self._port)

    @classmethod
    def parse(cls, text: str) -> "SocketAddress":
        """Parse 'a.b.c.d:port' or '[addr]:port', raising SocketAddressParseError."""
        parts = _split_host_port(text)
        if parts is None:
            raise SocketAddressParseError(SocketAddressParseErrorCode.MISSING_PORT)
        host, port_text = parts
        address: Union[Ipv4Address, Ipv6Address]
        try:
            if _is_bracketed(host):
                address = Ipv6Address.parse(host[1:-1])
            else:
                address = Ipv4Address.parse(host)
        except (Ipv4ParseError, Ipv6ParseError) as exc:
            raise SocketAddressParseError(SocketAddressParseErrorCode.INVALID_ADDRESS) from exc
        port = _parse_port(port_text)
        if port is None:
            raise SocketAddressParseError(SocketAddressParseErrorCode.INVALID_PORT)
        return cls(address, port)

    def __str__(self) -> str:
        if self.is_v4():
            return f"{self._address}:{self._port}"
        return f"[{self._address}]:{self._port}"

    def __repr__(self) -> str:
        return f"SocketAddress({str(self)!r})"

    def family(self) -> int:
        """AF_INET or AF_INET6."""
        return socket.AF_INET if self.is_v4() else socket.AF_INET6

    def to_sockaddr(self) -> Tuple:
        """The address tuple the socket module takes for this family."""
        return self.to_v4().to_sockaddr() if self.is_v4() else self.to_v6().to_sockaddr()

    @classmethod
    def from_sockaddr(cls, family: int, sockaddr: Tuple) -> "SocketAddress":
        """Build from a socket-module address tuple of the given family."""
        if family == socket.AF_INET:
            return cls.from_typed(SocketAddressV4.from_sockaddr(sockaddr))
        return cls.from_typed(SocketAddressV6.from_sockaddr(sockaddr))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SocketAddress):
            return self._address == other._address and self._port == other._port
        if isinstance(other, SocketAddressV4):
            return self.is_v4() and self._address.as_v4() == other.address and self._port == other.port
        if isinstance(other, SocketAddressV6):
            return self.is_v6() and self._address.as_v6() == other.address and self._port == other.port
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._address.address, self._port))
"""IP addresses of either version."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .ipv4 import Ipv4Address, Ipv4ParseError
from .ipv6 import Ipv6Address, Ipv6ParseError


class IpAddressParseErrorCode(Enum):
    UNSPECIFIED = "unspecified"


_PARSE_MESSAGES = {
    IpAddressParseErrorCode.UNSPECIFIED: "Invalid IP address",
}


class IpAddressParseError(ValueError):
    """Raised when text is neither an IPv4 nor an IPv6 address."""

    def __init__(self, code: IpAddressParseErrorCode = IpAddressParseErrorCode.UNSPECIFIED) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _PARSE_MESSAGES[self.code]


class IpAddress:
    """Holds either an IPv4 or an IPv6 address."""

    __slots__ = ("_address",)

    def __init__(self, address: Union[Ipv4Address, Ipv6Address, "IpAddress"]) -> None:
        if isinstance(address, IpAddress):
            address = address._address
        if not isinstance(address, (Ipv4Address, Ipv6Address)):
            raise TypeError(f"expected an IPv4 or IPv6 address, got {type(address).__name__}")
        self._address = address

    @property
    def address(self) -> Union[Ipv4Address, Ipv6Address]:
        return self._address

    def is_v4(self) -> bool:
        return isinstance(self._address, Ipv4Address)

    def is_v6(self) -> bool:
        return isinstance(self._address, Ipv6Address)

    def as_v4(self) -> Ipv4Address:
        if not isinstance(self._address, Ipv4Address):
            raise TypeError("address is not IPv4")
        return self._address

    def as_v6(self) -> Ipv6Address:
        if not isinstance(self._address, Ipv6Address):
            raise TypeError("address is not IPv6")
        return self._address

    @classmethod
    def parse(cls, text: str) -> "IpAddress":
        """Parse as IPv4 first, then IPv6; raise IpAddressParseError if neither fits."""
        if 7 <= len(text) <= 15:
            try:
                return cls(Ipv4Address.parse(text))
            except Ipv4ParseError:
                pass
        try:
            return cls(Ipv6Address.parse(text))
        except Ipv6ParseError as exc:
            raise IpAddressParseError(IpAddressParseErrorCode.UNSPECIFIED) from exc

    def __str__(self) -> str:
        return str(self._address)

    def __repr__(self) -> str:
        return f"IpAddress({self._address!r})"

    def is_localhost(self) -> bool:
        return self._address.is_localhost()

    def is_unspecified(self) -> bool:
        return self._address.is_unspecified()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IpAddress):
            return self._address == other._address
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._address)
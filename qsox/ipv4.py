"""IPv4 addresses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple


class Ipv4ParseErrorCode(Enum):
    MISSING_OCTETS = "missing_octets"
    TRAILING_DATA = "trailing_data"
    INVALID_OCTET = "invalid_octet"


_PARSE_MESSAGES = {
    Ipv4ParseErrorCode.MISSING_OCTETS: "Missing octets in IPv4 address",
    Ipv4ParseErrorCode.TRAILING_DATA: "Trailing data in IPv4 address",
    Ipv4ParseErrorCode.INVALID_OCTET: "Invalid octet in IPv4 address",
}


class Ipv4ParseError(ValueError):
    """Raised when text is not a valid IPv4 address."""

    def __init__(self, code: Ipv4ParseErrorCode) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _PARSE_MESSAGES[self.code]


_DIGITS = frozenset("0123456789")


def _leading_octet(text: str) -> int:
    """Read the decimal digits at the start of ``text`` as an octet."""
    end = 0
    for char in text:
        if char not in _DIGITS:
            break
        end += 1
    if end == 0:
        raise Ipv4ParseError(Ipv4ParseErrorCode.INVALID_OCTET)
    value = int(text[:end])
    if value > 255:
        raise Ipv4ParseError(Ipv4ParseErrorCode.INVALID_OCTET)
    return value


@dataclass(frozen=True, order=True)
class Ipv4Address:
    """An IPv4 address held as four octets."""

    octets: Tuple[int, ...] = (0, 0, 0, 0)

    LOCALHOST: ClassVar["Ipv4Address"]
    UNSPECIFIED: ClassVar["Ipv4Address"]
    BROADCAST: ClassVar["Ipv4Address"]

    def __post_init__(self) -> None:
        octets = tuple(self.octets)
        if len(octets) != 4:
            raise ValueError("an IPv4 address has exactly 4 octets")
        for octet in octets:
            if not isinstance(octet, int) or not 0 <= octet <= 255:
                raise ValueError(f"invalid octet: {octet!r}")
        object.__setattr__(self, "octets", octets)

    @classmethod
    def from_bits(cls, bits: int) -> "Ipv4Address":
        if not 0 <= bits <= 0xFFFFFFFF:
            raise ValueError(f"{bits} is not a 32-bit value")
        return cls(tuple(bits.to_bytes(4, "big")))

    def to_bits(self) -> int:
        return int.from_bytes(bytes(self.octets), "big")

    @classmethod
    def parse(cls, text: str) -> "Ipv4Address":
        """Parse dotted-quad text, raising Ipv4ParseError on failure."""
        rest = text
        octets = []
        for position in range(4):
            last = position == 3
            head, dot, tail = rest.partition(".")
            if not dot and not last:
                raise Ipv4ParseError(Ipv4ParseErrorCode.MISSING_OCTETS)
            octets.append(_leading_octet(head))
            rest = dot + tail if last else tail
        if rest:
            raise Ipv4ParseError(Ipv4ParseErrorCode.TRAILING_DATA)
        return cls(tuple(octets))

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)

    def __getitem__(self, index: int) -> int:
        return self.octets[index]

    def is_unspecified(self) -> bool:
        return self.octets == (0, 0, 0, 0)

    def is_localhost(self) -> bool:
        """Whether the address is in 127.0.0.0/8."""
        return self.octets[0] == 127

    def is_private(self) -> bool:
        """Whether the address is in an RFC 1918 private range."""
        first, second = self.octets[0], self.octets[1]
        return (
            first == 10
            or (first == 172 and 16 <= second <= 31)
            or (first == 192 and second == 168)
        )

    def is_broadcast(self) -> bool:
        return self.octets == (255, 255, 255, 255)

    def packed(self) -> bytes:
        """The address in network byte order."""
        return bytes(self.octets)

    @classmethod
    def from_packed(cls, data: bytes) -> "Ipv4Address":
        if len(data) != 4:
            raise ValueError("packed IPv4 address must be 4 bytes")
        return cls(tuple(data))


Ipv4Address.LOCALHOST = Ipv4Address((127, 0, 0, 1))
Ipv4Address.UNSPECIFIED = Ipv4Address((0, 0, 0, 0))
Ipv4Address.BROADCAST = Ipv4Address((255, 255, 255, 255))
"""IPv6 addresses."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from .ipv4 import Ipv4Address


class Ipv6ParseErrorCode(Enum):
    UNSPECIFIED = "unspecified"


_PARSE_MESSAGES = {
    Ipv6ParseErrorCode.UNSPECIFIED: "Error parsing IPv6 address",
}


class Ipv6ParseError(ValueError):
    """Raised when text is not a valid IPv6 address."""

    def __init__(self, code: Ipv6ParseErrorCode = Ipv6ParseErrorCode.UNSPECIFIED) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _PARSE_MESSAGES[self.code]


_MAPPED_PREFIX = (0,) * 10 + (0xFF, 0xFF)


@dataclass(frozen=True, order=True)
class Ipv6Address:
    """An IPv6 address held as sixteen octets in network order."""

    octets: Tuple[int, ...] = (0,) * 16

    LOCALHOST: ClassVar["Ipv6Address"]
    UNSPECIFIED: ClassVar["Ipv6Address"]

    def __post_init__(self) -> None:
        octets = tuple(self.octets)
        if len(octets) != 16:
            raise ValueError("an IPv6 address has exactly 16 octets")
        for octet in octets:
            if not isinstance(octet, int) or not 0 <= octet <= 255:
                raise ValueError(f"invalid octet: {octet!r}")
        object.__setattr__(self, "octets", octets)

    @classmethod
    def from_segments(cls, *args: int) -> "Ipv6Address":
        """Build an address from eight 16-bit groups."""
        if len(args) != 8:
            raise ValueError("an IPv6 address has exactly 8 segments")
        data = bytearray()
        for segment in args:
            if not isinstance(segment, int) or not 0 <= segment <= 0xFFFF:
                raise ValueError(f"invalid segment: {segment!r}")
            data += segment.to_bytes(2, "big")
        return cls(tuple(data))

    def segments(self) -> Tuple[int, ...]:
        """The eight 16-bit groups of the address."""
        data = bytes(self.octets)
        return tuple(
            int.from_bytes(data[start:start + 2], "big") for start in range(0, 16, 2)
        )

    @classmethod
    def parse(cls, text: str) -> "Ipv6Address":
        """Parse textual IPv6 notation, raising Ipv6ParseError on failure."""
        try:
            data = socket.inet_pton(socket.AF_INET6, text)
        except (OSError, ValueError, TypeError) as exc:
            raise Ipv6ParseError(Ipv6ParseErrorCode.UNSPECIFIED) from exc
        return cls(tuple(data))

    def __str__(self) -> str:
        mapped = self.to_ipv4_mapped()
        if mapped is not None:
            return f"::ffff:{mapped}"

        segments = self.segments()
        best_start, best_len = 0, 0
        run_start, run_len = 0, 0
        for index, segment in enumerate(segments):
            if segment == 0:
                if run_len == 0:
                    run_start = index
                run_len += 1
                if run_len > best_len:
                    best_start, best_len = run_start, run_len
            else:
                run_len = 0

        def join(part: Tuple[int, ...]) -> str:
            return ":".join(f"{segment:x}" for segment in part)

        if best_len > 1:
            return join(segments[:best_start]) + "::" + join(segments[best_start + best_len:])
        return join(segments)

    def __getitem__(self, index: int) -> int:
        return self.octets[index]

    def to_ipv4_mapped(self) -> Optional[Ipv4Address]:
        """Return a.b.c.d for ::ffff:a.b.c.d, otherwise None."""
        if self.octets[:12] != _MAPPED_PREFIX:
            return None
        return Ipv4Address(self.octets[12:])

    @classmethod
    def from_ipv4_mapped(cls, addr: Ipv4Address) -> "Ipv6Address":
        """Build the IPv4-mapped address ::ffff:a.b.c.d."""
        return cls(_MAPPED_PREFIX + tuple(addr.octets))

    def is_unspecified(self) -> bool:
        return self.octets == (0,) * 16

    def is_localhost(self) -> bool:
        """Whether the address is ::1."""
        return self.octets == (0,) * 15 + (1,)

    def is_unique_local(self) -> bool:
        """Whether the address is in fc00::/7."""
        return (self.octets[0] & 0xFE) == 0xFC

    def packed(self) -> bytes:
        """The address in network byte order."""
        return bytes(self.octets)

    @classmethod
    def from_packed(cls, data: bytes) -> "Ipv6Address":
        if len(data) != 16:
            raise ValueError("packed IPv6 address must be 16 bytes")
        return cls(tuple(data))


Ipv6Address.LOCALHOST = Ipv6Address.from_segments(0, 0, 0, 0, 0, 0, 0, 1)
Ipv6Address.UNSPECIFIED = Ipv6Address.from_segments(0, 0, 0, 0, 0, 0, 0, 0)
"""Byte-order helpers."""

from __future__ import annotations

import socket
import sys

_SIZES = (1, 2, 4, 8)


def byteswap(value: int, size: int) -> int:
    """Reverse the byte order of an unsigned integer of ``size`` bytes."""
    if size not in _SIZES:
        raise ValueError(f"unsupported size for byteswap: {size}")
    if not 0 <= value < 1 << (8 * size):
        raise ValueError(f"value {value} does not fit in {size} bytes")
    return int.from_bytes(value.to_bytes(size, "little"), "big")


def _swap_on_little(value: int, size: int) -> int:
    if sys.byteorder == "big":
        return value
    return byteswap(value, size)


def to_big_endian(value: int, size: int) -> int:
    """Convert a host-order integer to big-endian order."""
    return _swap_on_little(value, size)


def from_big_endian(value: int, size: int) -> int:
    """Convert a big-endian integer to host order."""
    return _swap_on_little(value, size)


def system_supports_ip(v6: bool) -> bool:
    """Report whether the socket layer was built with support for the given IP version."""
    if v6:
        return bool(socket.has_ipv6) and hasattr(socket, "AF_INET6")
    return hasattr(socket, "AF_INET")
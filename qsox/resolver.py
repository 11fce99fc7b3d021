"""Resolution of host names to A and AAAA addresses."""

from __future__ import annotations

import socket
from enum import Enum
from typing import Callable, TypeVar

from .ip import IpAddress
from .ipv4 import Ipv4Address
from .ipv6 import Ipv6Address


class ResolverErrorCode(Enum):
    SUCCESS = "success"
    ADDR_FAMILY = "addr_family"
    TEMPORARY_FAILURE = "temporary_failure"
    PERMANENT_FAILURE = "permanent_failure"
    OUT_OF_MEMORY = "out_of_memory"
    NO_DATA = "no_data"
    UNKNOWN_HOST = "unknown_host"
    SERVICE_NOT_FOUND = "service_not_found"
    SOCKET_NOT_SUPPORTED = "socket_not_supported"
    OTHER = "other"


_MESSAGES = {
    ResolverErrorCode.SUCCESS: "Success",
    ResolverErrorCode.ADDR_FAMILY: "Host does not support the requested address family",
    ResolverErrorCode.TEMPORARY_FAILURE: "Temporary failure in name resolution",
    ResolverErrorCode.PERMANENT_FAILURE: "Permanent failure in name resolution",
    ResolverErrorCode.OUT_OF_MEMORY: "Out of memory",
    ResolverErrorCode.NO_DATA: "No data found for the requested hostname",
    ResolverErrorCode.UNKNOWN_HOST: "Unknown host",
    ResolverErrorCode.SERVICE_NOT_FOUND: "Service not found",
    ResolverErrorCode.SOCKET_NOT_SUPPORTED: "Socket type not supported",
    ResolverErrorCode.OTHER: "Other error",
}


class ResolverError(Exception):
    """A failed name resolution."""

    def __init__(self, code: ResolverErrorCode) -> None:
        self.code = code
        super().__init__(self.message())

    def message(self) -> str:
        return _MESSAGES[self.code]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResolverError):
            return self.code is other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)


_EAI_NAMES = [
    ("EAI_ADDRFAMILY", ResolverErrorCode.ADDR_FAMILY),
    ("EAI_AGAIN", ResolverErrorCode.TEMPORARY_FAILURE),
    ("EAI_FAIL", ResolverErrorCode.PERMANENT_FAILURE),
    ("EAI_NODATA", ResolverErrorCode.NO_DATA),
    ("EAI_NONAME", ResolverErrorCode.UNKNOWN_HOST),
    ("EAI_SERVICE", ResolverErrorCode.SERVICE_NOT_FOUND),
    ("EAI_SOCKTYPE", ResolverErrorCode.SOCKET_NOT_SUPPORTED),
    ("EAI_MEMORY", ResolverErrorCode.OUT_OF_MEMORY),
]

_EAI_CODES: dict[int, ResolverErrorCode] = {}
for _name, _code in _EAI_NAMES:
    _value = getattr(socket, _name, None)
    if _value is not None:
        _EAI_CODES.setdefault(_value, _code)


def make_error(code: int) -> ResolverError:
    """Classify a getaddrinfo error code."""
    return ResolverError(_EAI_CODES.get(code, ResolverErrorCode.OTHER))


def _first_address(hostname: str, family: int) -> str:
    try:
        infos = socket.getaddrinfo(hostname, None, family, socket.SOCK_DGRAM)
    except socket.gaierror as exc:
        raise make_error(exc.errno) from exc
    except (UnicodeError, ValueError, TypeError) as exc:
        raise ResolverError(ResolverErrorCode.OTHER) from exc

    for info_family, _type, _proto, _canon, sockaddr in infos:
        if info_family == family:
            return str(sockaddr[0]).partition("%")[0]
    raise ResolverError(ResolverErrorCode.NO_DATA)


_T = TypeVar("_T")


def _resolve_with(hostname: str, family: int, parse: Callable[[str], _T]) -> _T:
    text = _first_address(hostname, family)
    try:
        return parse(text)
    except ValueError as exc:
        raise ResolverError(ResolverErrorCode.OTHER) from exc


def resolve_ipv4(hostname: str) -> Ipv4Address:
    """Resolve a host name to its first IPv4 address."""
    return _resolve_with(hostname, socket.AF_INET, Ipv4Address.parse)


def resolve_ipv6(hostname: str) -> Ipv6Address:
    """Resolve a host name to its first IPv6 address."""
    return _resolve_with(hostname, socket.AF_INET6, Ipv6Address.parse)


def resolve(hostname: str) -> IpAddress:
    """Resolve a host name, preferring IPv4 and falling back to IPv6."""
    try:
        return IpAddress(resolve_ipv4(hostname))
    except ResolverError:
        return IpAddress(resolve_ipv6(hostname))
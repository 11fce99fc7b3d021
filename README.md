# qsox

qsox provides typed network addresses and host name resolution:

- `qsox.ipv4.Ipv4Address` and `qsox.ipv6.Ipv6Address`: parsing, formatting,
  conversion to and from packed bytes, and classification (localhost,
  unspecified, private, broadcast, unique local, IPv4-mapped).
- `qsox.ip.IpAddress`: holds an address of either version.
- `qsox.socket_address`: `SocketAddressV4`, `SocketAddressV6` and
  `SocketAddress`, an IP address paired with a port, convertible to and from
  the address tuples of Python's `socket` module.
- `qsox.network_address.NetworkAddress`: a host string (IP literal or domain
  name) and a port, resolved only when asked.
- `qsox.resolver`: `resolve_ipv4`, `resolve_ipv6` and `resolve` for A and
  AAAA lookups.
- `qsox.util`: byte-order helpers (`byteswap`, `to_big_endian`,
  `from_big_endian`) and `system_supports_ip`.

Failures are raised as exceptions. Each parser raises its own error class
(`Ipv4ParseError`, `Ipv6ParseError`, `IpAddressParseError`,
`SocketAddressV4ParseError`, `SocketAddressV6ParseError`,
`SocketAddressParseError`, `NetworkAddressParseError`); all of them are
`ValueError` subclasses and carry a `code` enum member and a `message()`.
Resolution failures raise `qsox.resolver.ResolverError`.

## Installation

```
pip install qsox
```

To run the tests, install the `test` extra and run pytest:

```
pip install "qsox[test]"
pytest
```

## IP addresses

```python
from qsox.ipv4 import Ipv4Address
from qsox.ipv6 import Ipv6Address
from qsox.ip import IpAddress

addr = Ipv4Address.parse("192.168.1.10")
print(addr.is_private())        # True
print(hex(addr.to_bits()))      # 0xc0a8010a

v6 = Ipv6Address.parse("2001:db8:0:0:0:0:0:1")
print(v6)                       # 2001:db8::1

mapped = Ipv6Address.from_ipv4_mapped(addr)
print(mapped)                   # ::ffff:192.168.1.10

ip = IpAddress.parse("::1")
print(ip.is_v6(), ip.is_localhost())   # True True
```

`IpAddress.parse` tries IPv4 first and falls back to IPv6.

## Socket and network addresses

```python
from qsox.socket_address import SocketAddress, SocketAddressV4

sa = SocketAddress.parse("[::1]:8080")
print(sa.is_v6(), sa.port)      # True 8080
print(sa.to_sockaddr())         # ('::1', 8080, 0, 0)

v4 = SocketAddressV4.parse("127.0.0.1:80")
print(SocketAddress.from_typed(v4) == v4)   # True
```

IPv6 socket addresses are written with square brackets around the address.

```python
from qsox.network_address import NetworkAddress

na = NetworkAddress.parse("localhost:8080")
print(na.host, na.port)         # localhost 8080
resolved = na.resolve()         # SocketAddress
```

`resolve()` takes IPv4 and IPv6 literals as they are; for names it prefers an
IPv4 address and falls back to IPv6. `resolve_v4()` and `resolve_v6()` ask for
one version only.

## Resolver

```python
from qsox.resolver import ResolverError, resolve_ipv4

try:
    print(resolve_ipv4("localhost"))
except ResolverError as exc:
    print(exc.code, exc.message())
```

## Byte order

```python
from qsox.util import byteswap

print(hex(byteswap(0x1234, 2)))   # 0x3412
```

## What this package does not do

qsox deals in addresses and name lookups only. It does not open, bind,
connect or poll sockets: there are no TCP stream, TCP listener or UDP socket
types and no readiness polling. Use the address tuples from `to_sockaddr()`
with Python's `socket` module for that.
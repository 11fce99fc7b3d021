"""Typed IPv4/IPv6 addresses, socket and network addresses, and host name resolution."""

__version__ = "1.0.0"
"""HTTP/3 fingerprint selection and the address handling of the QUIC transport."""

from __future__ import annotations

import ipaddress
import re
import socket
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from surfprint.proxy import is_socks5
from surfprint.tlsspec import _join_host_port, _split_host_port

MIN_PORT = 1
MAX_PORT = 65535

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
Resolver = Callable[[str], Iterable[str]]

_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class QUICID:
    """A predefined QUIC Initial packet fingerprint."""

    client: str
    version: str

    def __str__(self) -> str:
        return f"{self.client}-{self.version}"


QUIC_CHROME_115 = QUICID("Chrome", "115")
QUIC_FIREFOX_116 = QUICID("Firefox", "116")


@dataclass(frozen=True)
class ParsedAddr:
    """A validated IP address and port."""

    ip: IPAddress
    port: int


class HTTP3Settings:
    """Fluent chooser of the QUIC fingerprint used for HTTP/3."""

    def __init__(self) -> None:
        self._quic_id: Optional[QUICID] = None
        self._quic_spec: Optional[object] = None

    def chrome(self) -> HTTP3Settings:
        self._quic_id = QUIC_CHROME_115
        return self

    def firefox(self) -> HTTP3Settings:
        self._quic_id = QUIC_FIREFOX_116
        return self

    def set_quic_id(self, quic_id: QUICID) -> HTTP3Settings:
        if not isinstance(quic_id, QUICID):
            raise TypeError(f"expected QUICID, got {type(quic_id).__name__}")
        self._quic_id = quic_id
        return self

    def set_quic_spec(self, quic_spec: object) -> HTTP3Settings:
        if quic_spec is None:
            raise TypeError("quic spec must not be None")
        self._quic_spec = quic_spec
        return self

    def quic_spec(self) -> Optional[Union[object, QUICID]]:
        """The custom spec if one is set, else the QUIC ID, else None."""
        if self._quic_spec is not None:
            return self._quic_spec
        return self._quic_id


def _parse_ip(host: str) -> Optional[IPAddress]:
    if "%" in host:
        return None
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


def _as_ipv4(ip: IPAddress) -> Optional[ipaddress.IPv4Address]:
    if isinstance(ip, ipaddress.IPv4Address):
        return ip
    return ip.ipv4_mapped


def parse_resolved_address(resolved: str) -> ParsedAddr:
    """Validate ``ip:port`` and return its parts; raises ValueError when invalid."""
    try:
        host, port_text = _split_host_port(resolved)
    except ValueError as exc:
        raise ValueError(f"split host/port: {exc}") from exc
    if not _DECIMAL.fullmatch(port_text):
        raise ValueError(f"parse port {port_text!r}: invalid syntax")
    port = int(port_text)
    if not MIN_PORT <= port <= MAX_PORT:
        raise ValueError(f"port {port} out of valid range [{MIN_PORT}-{MAX_PORT}]")
    ip = _parse_ip(host)
    if ip is None:
        raise ValueError(f"invalid IP address: {host!r}")
    return ParsedAddr(ip=ip, port=port)


def _system_resolver(host: str) -> list[str]:
    seen: dict[str, None] = {}
    for *_, sockaddr in socket.getaddrinfo(host, None, type=socket.SOCK_DGRAM):
        seen.setdefault(str(sockaddr[0]), None)
    return list(seen)


def resolve(address: str, resolver: Optional[Resolver] = None) -> str:
    """Resolve ``host:port`` to ``ip:port``, preferring IPv4 addresses.

    Addresses whose host is already an IP are returned unchanged. ``resolver``
    maps a host name to its addresses; the system resolver is used without one.
    Raises ValueError for a malformed address and OSError when lookup fails.
    """
    try:
        host, port = _split_host_port(address)
    except ValueError as exc:
        raise ValueError(f"invalid address format: {exc}") from exc
    if _parse_ip(host) is not None:
        return address
    lookup = resolver or _system_resolver
    try:
        found = list(lookup(host))
    except OSError as exc:
        raise OSError(f"lookup failed for {host!r}: {exc}") from exc
    ips = [ip for ip in (_parse_ip(str(item)) for item in found) if ip is not None]
    if not ips:
        raise OSError(f"lookup {host}: no IP addresses found")
    for ip in ips:
        v4 = _as_ipv4(ip)
        if v4 is not None:
            return _join_host_port(str(v4), port)
    return _join_host_port(str(ips[0]), port)


def udp_network(ip: Union[str, IPAddress]) -> str:
    """The UDP network name to listen on for a target IP."""
    parsed = _parse_ip(ip) if isinstance(ip, str) else ip
    if parsed is None:
        return "udp"
    if _as_ipv4(parsed) is not None:
        return "udp4"
    return "udp6"


def transport_cache_key(addr: str, proxy: Optional[str]) -> str:
    """The key under which an HTTP/3 transport for ``addr`` is cached."""
    return f"{proxy}|{addr}" if proxy else addr


def should_fallback(proxy: Optional[str], has_fallback: bool) -> bool:
    """True when a non-SOCKS5 proxy forces use of the fallback transport."""
    return bool(proxy) and not is_socks5(proxy) and has_fallback
"""TLS ClientHello description and the transport choices made from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DEFAULT_HTTPS_PORT = "443"
HTTP2_PROTOCOL = "h2"
HTTP1_PROTOCOL = "http/1.1"


@dataclass
class ALPNExtension:
    """Application-Layer Protocol Negotiation extension."""

    alpn_protocols: list[str] = field(default_factory=list)


@dataclass
class PreSharedKeyExtension:
    """Pre-shared key extension, which enables session resumption."""

    identities: list[bytes] = field(default_factory=list)


@dataclass
class ClientHelloSpec:
    """A ClientHello described by its ordered list of extensions."""

    extensions: list[object] = field(default_factory=list)


class TransportKind(Enum):
    """The HTTP transport used for an address."""

    HTTP1 = "http/1.1"
    HTTP2 = "h2"


def set_alpn_protocol_to_http1(spec: ClientHelloSpec) -> None:
    """Restrict the first ALPN extension of ``spec`` to HTTP/1.1, in place."""
    alpn = next((ext for ext in spec.extensions if isinstance(ext, ALPNExtension)), None)
    if alpn is None:
        return
    if HTTP2_PROTOCOL in alpn.alpn_protocols:
        alpn.alpn_protocols.remove(HTTP2_PROTOCOL)
    if HTTP1_PROTOCOL not in alpn.alpn_protocols:
        alpn.alpn_protocols.insert(0, HTTP1_PROTOCOL)


def supports_session(spec: ClientHelloSpec) -> bool:
    """True when the spec carries a pre-shared key extension."""
    return any(isinstance(ext, PreSharedKeyExtension) for ext in spec.extensions)


def _split_host_port(hostport: str) -> tuple[str, str]:
    i = hostport.rfind(":")
    if i < 0:
        raise ValueError(f"missing port in address {hostport!r}")
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise ValueError(f"missing ']' in address {hostport!r}")
        if end + 1 == len(hostport):
            raise ValueError(f"missing port in address {hostport!r}")
        if end + 1 != i:
            if hostport[end + 1] == ":":
                raise ValueError(f"too many colons in address {hostport!r}")
            raise ValueError(f"missing port in address {hostport!r}")
        host = hostport[1:end]
        rest_start = 1
        rest_end = end + 1
    else:
        host = hostport[:i]
        if ":" in host:
            raise ValueError(f"too many colons in address {hostport!r}")
        rest_start = 0
        rest_end = 0
    if "[" in hostport[rest_start:] or "]" in hostport[rest_end:]:
        raise ValueError(f"unexpected bracket in address {hostport!r}")
    return host, hostport[i + 1 :]


def _join_host_port(host: str, port: str) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def request_address(host: str) -> str:
    """Build ``host:port`` from a URL host, defaulting to port 443."""
    try:
        name, port = _split_host_port(host)
    except ValueError:
        return _join_host_port(host, DEFAULT_HTTPS_PORT)
    return _join_host_port(name, port)


def transport_for_scheme(scheme: str) -> Optional[TransportKind]:
    """HTTP/1.1 for plain HTTP, None for HTTPS (decided by negotiation).

    Raises ValueError for any other scheme.
    """
    lowered = scheme.lower()
    if lowered == "http":
        return TransportKind.HTTP1
    if lowered == "https":
        return None
    raise ValueError(f"invalid URL scheme: [{scheme}]")


def transport_for_protocol(protocol: str) -> TransportKind:
    """The transport to use for a protocol negotiated over TLS."""
    return TransportKind.HTTP2 if protocol == HTTP2_PROTOCOL else TransportKind.HTTP1
import ipaddress
import socket

import pytest

from surfprint.quic import (
    QUIC_CHROME_115,
    QUIC_FIREFOX_116,
    HTTP3Settings,
    ParsedAddr,
    QUICID,
    parse_resolved_address,
    resolve,
    should_fallback,
    transport_cache_key,
    udp_network,
)


def test_chrome_and_firefox_quic_ids():
    assert HTTP3Settings().chrome().quic_spec() == QUIC_CHROME_115
    assert HTTP3Settings().firefox().quic_spec() == QUIC_FIREFOX_116
    assert QUIC_CHROME_115.version == "115"


def test_no_settings_give_none():
    assert HTTP3Settings().quic_spec() is None


def test_custom_spec_takes_precedence():
    spec = object()
    settings = HTTP3Settings().set_quic_spec(spec).chrome()
    assert settings.quic_spec() is spec


def test_set_quic_id():
    custom = QUICID("Custom", "7")
    assert HTTP3Settings().set_quic_id(custom).quic_spec() == custom
    with pytest.raises(TypeError):
        HTTP3Settings().set_quic_id("chrome")


def test_parse_resolved_address_ipv4():
    parsed = parse_resolved_address("192.168.1.1:443")
    assert parsed == ParsedAddr(ipaddress.ip_address("192.168.1.1"), 443)


def test_parse_resolved_address_ipv6():
    parsed = parse_resolved_address("[::1]:8443")
    assert parsed.ip == ipaddress.ip_address("::1")
    assert parsed.port == 8443


@pytest.mark.parametrize(
    "value",
    ["1.2.3.4", "1.2.3.4:0", "1.2.3.4:65536", "1.2.3.4:http", "example.com:443", "[::1:443"],
)
def test_parse_resolved_address_errors(value):
    with pytest.raises(ValueError):
        parse_resolved_address(value)


def test_parse_resolved_address_port_bounds():
    assert parse_resolved_address("1.2.3.4:1").port == 1
    assert parse_resolved_address("1.2.3.4:65535").port == 65535


def test_resolve_skips_ip_addresses():
    def fail(host):
        raise AssertionError("resolver must not be called")

    assert resolve("10.0.0.1:443", fail) == "10.0.0.1:443"
    assert resolve("[::1]:443", fail) == "[::1]:443"


def test_resolve_prefers_ipv4():
    result = resolve("example.com:443", lambda host: ["2001:db8::1", "10.0.0.1"])
    assert result == "10.0.0.1:443"


def test_resolve_falls_back_to_first_ipv6():
    result = resolve("example.com:8443", lambda host: ["2001:db8::1", "2001:db8::2"])
    assert result == "[2001:db8::1]:8443"


def test_resolve_passes_host_to_resolver():
    seen = []

    def fake(host):
        seen.append(host)
        return ["10.1.1.1"]

    result = resolve("example.com:80", fake)
    assert result == "10.1.1.1:80"
    assert seen == ["example.com"]


def test_resolve_errors():
    with pytest.raises(ValueError):
        resolve("example.com", lambda host: ["10.0.0.1"])
    with pytest.raises(OSError):
        resolve("example.com:443", lambda host: [])

    def broken(host):
        raise socket.gaierror("no such host")

    with pytest.raises(OSError):
        resolve("example.com:443", broken)


def test_udp_network():
    assert udp_network("10.0.0.1") == "udp4"
    assert udp_network("::ffff:10.0.0.1") == "udp4"
    assert udp_network("2001:db8::1") == "udp6"
    assert udp_network(ipaddress.ip_address("::1")) == "udp6"
    assert udp_network("not an ip") == "udp"


def test_transport_cache_key():
    assert transport_cache_key("example.com:443", None) == "example.com:443"
    assert transport_cache_key("example.com:443", "") == "example.com:443"
    assert (
        transport_cache_key("example.com:443", "socks5://localhost:1080")
        == "socks5://localhost:1080|example.com:443"
    )


def test_should_fallback():
    assert should_fallback("http://localhost:8080", True) is True
    assert should_fallback("http://localhost:8080", False) is False
    assert should_fallback("socks5://localhost:1080", True) is False
    assert should_fallback("socks5h://localhost:1080", True) is False
    assert should_fallback(None, True) is False
    assert should_fallback("", True) is False
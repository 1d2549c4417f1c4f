# surfprint

Building blocks for HTTP clients that present themselves the way a real
browser does: TLS ClientHello choices, HTTP/2 connection settings, QUIC
identifiers for HTTP/3, multipart boundaries and the ordered header sets
that Chrome and Firefox send.

The package has no runtime dependencies.

## Installation

```
pip install surfprint
```

To run the tests:

```
pip install "surfprint[test]"
pytest
```

## What is inside

- `surfprint.http2settings` holds `HTTP2Settings`, a chainable description
  of the HTTP/2 SETTINGS parameters, connection flow window, priority
  parameter and priority frames. `settings()` returns the `Setting` values
  in identifier order, leaving out those that are zero; `ENABLE_PUSH` is
  kept, even at zero, once `enable_push()` has been called.
  `build(force_http1)` returns an `HTTP2TransportConfig`, or `None` when
  HTTP/1.1 is forced. `PriorityParam` and `PriorityFrame` describe stream
  priorities; values that do not fit their wire width raise `ValueError`.
- `surfprint.impersonate_os` defines the `ImpersonateOS` enum, with the
  `sec-ch-ua-mobile` value (`mobile()`), the Chrome platform string
  (`chrome_platform()`) and the Chrome and Firefox user agents
  (`chrome_user_agent()`, `firefox_user_agent()`) for each system.
- `surfprint.tlsspec` models a `ClientHelloSpec` made of extensions such as
  `ALPNExtension` and `PreSharedKeyExtension`.
  `set_alpn_protocol_to_http1(spec)` removes `h2` from the first ALPN
  extension and puts `http/1.1` first; `supports_session(spec)` tells
  whether a pre-shared key extension is present; `request_address(host)`
  adds port 443 when the host has none. `transport_for_scheme(scheme)` and
  `transport_for_protocol(protocol)` choose a `TransportKind`; an unknown
  scheme raises `ValueError`.
- `surfprint.ja` offers `JA`, with one method per named ClientHello
  profile (`chrome131()`, `firefox120()`, `safari()` and so on), plus
  `set_hello_id()`, `set_hello_spec()` and `resolved()`, which returns the
  chosen `ClientHelloID` or, failing that, the custom spec, and raises
  `ValueError` when neither is set.
- `surfprint.quic` offers `HTTP3Settings` with Chrome and Firefox `QUICID`
  values, and helpers used by a QUIC transport: `parse_resolved_address`,
  `resolve` (prefers IPv4, accepts a custom resolver), `udp_network`,
  `transport_cache_key` and `should_fallback`.
- `surfprint.proxy` picks a proxy from a string, a list or a callable
  (`pick_proxy`), returns the fixed proxy of a static configuration
  (`static_proxy`), and tells SOCKS5 proxies, the only ones that carry UDP,
  apart (`is_socks5`).
- `surfprint.boundary` makes multipart boundaries the way Chrome
  (`----WebKitFormBoundary` and 16 characters) and Firefox (27 dashes and
  three random numbers) do.
- `surfprint.impersonate` joins these into a `BrowserProfile` via
  `Impersonate`, which chooses an operating system and then returns the
  Chrome 131 or Firefox 131 profile.
- `surfprint.drainbody.drain_body` reads a body stream fully, closes it and
  returns two independent readers over the same bytes.

## Example

```python
from surfprint.impersonate import Impersonate

profile = Impersonate().macos().chrome()

for name, value in profile.headers.items():
    print(f"{name}: {value}")

print(profile.boundary())
print(profile.ja.resolved())
```

```python
from surfprint.http2settings import HTTP2Settings, PriorityParam

h2 = (
    HTTP2Settings()
    .header_table_size(65536)
    .enable_push(0)
    .initial_window_size(6291456)
    .max_header_list_size(262144)
    .connection_flow(15663105)
    .priority_param(PriorityParam(stream_dep=0, exclusive=True, weight=255))
)
config = h2.build(force_http1=False)
```

```python
from surfprint.proxy import is_socks5

is_socks5("socks5://127.0.0.1:1080")   # True
is_socks5("http://127.0.0.1:8080")     # False
```

## What it does not do

surfprint describes fingerprints; it does not send requests. It performs no
TLS handshakes, opens no HTTP/2 or QUIC connections and speaks to no proxy.
The profiles, settings and helpers here are meant to be handed to an HTTP
client that can apply them.
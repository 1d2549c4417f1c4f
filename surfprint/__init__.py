"""Browser fingerprint profiles for HTTP clients: TLS, HTTP/2, QUIC and headers."""

__version__ = "0.1.0"
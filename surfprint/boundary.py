"""Multipart form boundaries generated the way browsers generate them."""

from __future__ import annotations

import secrets

_WEBKIT_PREFIX = "----WebKitFormBoundary"
# 'A' and 'B' appear twice, so they are twice as likely as other characters.
_WEBKIT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789AB"

_GECKO_PREFIX = "-" * 27


def chrome_boundary() -> str:
    """A Blink/WebKit boundary: a fixed prefix and 16 random alphanumerics."""
    chars = [
        _WEBKIT_ALPHABET[byte & 0x3F]
        for _ in range(4)
        for byte in secrets.token_bytes(4)
    ]
    return _WEBKIT_PREFIX + "".join(chars)


def firefox_boundary() -> str:
    """A Gecko boundary: 27 dashes followed by three random 32-bit decimals."""
    numbers = (
        str(int.from_bytes(secrets.token_bytes(4), "little")) for _ in range(3)
    )
    return _GECKO_PREFIX + "".join(numbers)
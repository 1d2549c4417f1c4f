"""Choosing a proxy from a static or dynamic proxy configuration."""

from __future__ import annotations

import random
from typing import Callable, Optional, Sequence, Union
from urllib.parse import urlsplit

ProxySource = Union[str, Callable[[], Optional[str]], Sequence[str], None]

_SOCKS5_SCHEMES = frozenset({"socks5", "socks5h"})


def pick_proxy(proxy: ProxySource) -> Optional[str]:
    """Return the proxy URL to use for one request, or None when there is none.

    A string is used as is, a callable is asked for a fresh value, and a list or
    tuple of strings gives a random member. Any other value gives no proxy.
    """
    if isinstance(proxy, str):
        chosen: Optional[str] = proxy
    elif callable(proxy):
        chosen = proxy()
    elif isinstance(proxy, (list, tuple)):
        chosen = random.choice(proxy) if proxy else None
    else:
        chosen = None
    return chosen or None


def static_proxy(proxy: ProxySource) -> Optional[str]:
    """The fixed proxy URL when the configuration is a plain string, else None.

    Configurations that are not plain strings are dynamic: they are evaluated
    again for every connection, and their results must not be cached.
    """
    if isinstance(proxy, str) and proxy:
        return proxy
    return None


def is_socks5(proxy_url: Optional[str]) -> bool:
    """True when the URL names a SOCKS5 proxy, the only kind that carries UDP."""
    if not proxy_url:
        return False
    try:
        scheme = urlsplit(proxy_url).scheme
    except ValueError:
        return False
    return scheme.lower() in _SOCKS5_SCHEMES
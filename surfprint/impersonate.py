"""Browser impersonation: TLS, HTTP/2 and header profiles of real browsers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

from surfprint.boundary import chrome_boundary, firefox_boundary
from surfprint.http2settings import HTTP2Settings, PriorityFrame, PriorityParam
from surfprint.impersonate_os import CHROME_SEC_CH_UA, ImpersonateOS
from surfprint.ja import JA

_CHROME_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
    "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
)
_FIREFOX_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
    "image/png,image/svg+xml,*/*;q=0.8"
)


@dataclass
class BrowserProfile:
    """Everything a client needs to present itself as a given browser.

    ``headers`` keeps the browser's header order; empty values mark headers
    whose position is fixed but whose value is filled in per request.
    """

    browser: str
    ja: JA
    http2: HTTP2Settings
    boundary: Callable[[], str]
    headers: dict[str, str] = field(default_factory=dict)


class Impersonate:
    """Fluent chooser of an operating system and browser to impersonate."""

    def __init__(self, os: ImpersonateOS = ImpersonateOS.WINDOWS) -> None:
        self.os = os

    def random_os(self) -> Impersonate:
        self.os = random.choice(list(ImpersonateOS))
        return self

    def windows(self) -> Impersonate:
        self.os = ImpersonateOS.WINDOWS
        return self

    def macos(self) -> Impersonate:
        self.os = ImpersonateOS.MACOS
        return self

    def linux(self) -> Impersonate:
        self.os = ImpersonateOS.LINUX
        return self

    def android(self) -> Impersonate:
        self.os = ImpersonateOS.ANDROID
        return self

    def ios(self) -> Impersonate:
        self.os = ImpersonateOS.IOS
        return self

    def chrome(self) -> BrowserProfile:
        """The Chrome 131 profile for the chosen operating system."""
        http2 = (
            HTTP2Settings()
            .header_table_size(65536)
            .enable_push(0)
            .initial_window_size(6291456)
            .max_header_list_size(262144)
            .connection_flow(15663105)
            .priority_param(PriorityParam(stream_dep=0, exclusive=True, weight=255))
        )
        headers = {
            ":method": "",
            ":authority": "",
            ":scheme": "",
            ":path": "",
            "cookie": "",
            "sec-ch-ua": CHROME_SEC_CH_UA,
            "sec-ch-ua-mobile": self.os.mobile(),
            "sec-ch-ua-platform": self.os.chrome_platform(),
            "upgrade-insecure-requests": "1",
            "user-agent": self.os.chrome_user_agent(),
            "accept": _CHROME_ACCEPT,
            "sec-fetch-site": "none",
            "sec-fetch-mode": "navigate",
            "sec-fetch-user": "?1",
            "sec-fetch-dest": "document",
            "referer": "",
            "accept-encoding": "gzip, deflate, br, zstd",
            "accept-language": "en-US,en;q=0.9",
            "priority": "u=0, i",
        }
        return BrowserProfile(
            browser="chrome",
            ja=JA().chrome131(),
            http2=http2,
            boundary=chrome_boundary,
            headers=headers,
        )

    def firefox(self) -> BrowserProfile:
        """The Firefox 131 profile for the chosen operating system."""
        frames = [
            PriorityFrame(3, PriorityParam(stream_dep=0, exclusive=False, weight=200)),
            PriorityFrame(5, PriorityParam(stream_dep=0, exclusive=False, weight=100)),
            PriorityFrame(7, PriorityParam(stream_dep=0, exclusive=False, weight=0)),
            PriorityFrame(9, PriorityParam(stream_dep=7, exclusive=False, weight=0)),
            PriorityFrame(11, PriorityParam(stream_dep=3, exclusive=False, weight=0)),
            PriorityFrame(13, PriorityParam(stream_dep=0, exclusive=False, weight=240)),
        ]
        http2 = (
            HTTP2Settings()
            .header_table_size(65536)
            .initial_window_size(131072)
            .max_frame_size(16384)
            .connection_flow(12517377)
            .priority_param(PriorityParam(stream_dep=13, exclusive=False, weight=41))
            .priority_frames(frames)
        )
        headers = {
            ":method": "",
            ":path": "",
            ":authority": "",
            ":scheme": "",
            "cookie": "",
            "user-agent": self.os.firefox_user_agent(),
            "accept": _FIREFOX_ACCEPT,
            "accept-language": "en-US,en;q=0.5",
            "accept-encoding": "gzip, deflate, br, zstd",
            "referer": "",
            "upgrade-insecure-requests": "1",
            "sec-fetch-dest": "document",
            "sec-fetch-mode": "navigate",
            "sec-fetch-site": "none",
            "sec-fetch-user": "?1",
            "priority": "u=0, i",
        }
        return BrowserProfile(
            browser="firefox",
            ja=JA().firefox131(),
            http2=http2,
            boundary=firefox_boundary,
            headers=headers,
        )
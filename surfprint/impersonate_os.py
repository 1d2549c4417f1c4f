"""Operating systems that browser impersonation can present."""

from __future__ import annotations

from enum import Enum

CHROME_SEC_CH_UA = '"Google Chrome";v="131", "Chromium";v="131", "Not_A Brand";v="24"'


class ImpersonateOS(Enum):
    """Operating system shown in User-Agent and client-hint headers."""

    WINDOWS = 0
    MACOS = 1
    LINUX = 2
    ANDROID = 3
    IOS = 4

    def mobile(self) -> str:
        """The Sec-CH-UA-Mobile value for this system."""
        return "?1" if self in (ImpersonateOS.ANDROID, ImpersonateOS.IOS) else "?0"

    def chrome_platform(self) -> str:
        """The quoted Sec-CH-UA-Platform value Chrome sends."""
        return _CHROME_PLATFORM[self]

    def chrome_user_agent(self) -> str:
        return _CHROME_USER_AGENT[self]

    def firefox_user_agent(self) -> str:
        return _FIREFOX_USER_AGENT[self]


_CHROME_PLATFORM = {
    ImpersonateOS.WINDOWS: '"Windows"',
    ImpersonateOS.MACOS: '"macOS"',
    ImpersonateOS.LINUX: '"Linux"',
    ImpersonateOS.ANDROID: '"Android"',
    ImpersonateOS.IOS: '"iOS"',
}

_CHROME_USER_AGENT = {
    ImpersonateOS.WINDOWS: "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    ImpersonateOS.MACOS: "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    ImpersonateOS.LINUX: "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    ImpersonateOS.ANDROID: "Mozilla/5.0 (Linux; Android 10; K) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Mobile Safari/537.36",
    ImpersonateOS.IOS: "Mozilla/5.0 (iPhone; CPU iPhone OS 18_2_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) CriOS/131.0.6778.154 Mobile/15E148 Safari/604.1",
}

_FIREFOX_USER_AGENT = {
    ImpersonateOS.WINDOWS: "Mozilla/5.0 (Windows NT 10.0; rv:131.0) Gecko/20100101 Firefox/131.0",
    ImpersonateOS.MACOS: "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:131.0) Gecko/20100101 Firefox/131.0",
    ImpersonateOS.LINUX: "Mozilla/5.0 (X11; Linux x86_64; rv:131.0) Gecko/20100101 Firefox/131.0",
    ImpersonateOS.ANDROID: "Mozilla/5.0 (Android 10; Mobile; rv:131.0) Gecko/134.0 Firefox/131.0",
    ImpersonateOS.IOS: "Mozilla/5.0 (iPhone; CPU iPhone OS 18_2_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) FxiOS/131.1 Mobile/15E148 Safari/605.1.15",
}
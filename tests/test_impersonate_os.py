import pytest

from surfprint.impersonate_os import ImpersonateOS


@pytest.mark.parametrize(
    "system, expected",
    [
        (ImpersonateOS.WINDOWS, "?0"),
        (ImpersonateOS.MACOS, "?0"),
        (ImpersonateOS.LINUX, "?0"),
        (ImpersonateOS.ANDROID, "?1"),
        (ImpersonateOS.IOS, "?1"),
    ],
)
def test_mobile(system, expected):
    assert system.mobile() == expected


def test_chrome_platform_is_quoted():
    assert ImpersonateOS.WINDOWS.chrome_platform() == '"Windows"'
    assert ImpersonateOS.MACOS.chrome_platform() == '"macOS"'
    assert ImpersonateOS.LINUX.chrome_platform() == '"Linux"'
    assert ImpersonateOS.ANDROID.chrome_platform() == '"Android"'
    assert ImpersonateOS.IOS.chrome_platform() == '"iOS"'


def test_windows_user_agents():
    assert ImpersonateOS.WINDOWS.chrome_user_agent() == (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
    )
    assert ImpersonateOS.WINDOWS.firefox_user_agent() == (
        "Mozilla/5.0 (Windows NT 10.0; rv:131.0) Gecko/20100101 Firefox/131.0"
    )


def test_every_system_has_distinct_user_agents():
    chrome = {
        ImpersonateOS.WINDOWS.chrome_user_agent(),
        ImpersonateOS.MACOS.chrome_user_agent(),
        ImpersonateOS.LINUX.chrome_user_agent(),
        ImpersonateOS.ANDROID.chrome_user_agent(),
        ImpersonateOS.IOS.chrome_user_agent(),
    }
    firefox = {
        ImpersonateOS.WINDOWS.firefox_user_agent(),
        ImpersonateOS.MACOS.firefox_user_agent(),
        ImpersonateOS.LINUX.firefox_user_agent(),
        ImpersonateOS.ANDROID.firefox_user_agent(),
        ImpersonateOS.IOS.firefox_user_agent(),
    }
    assert len(chrome) == 5
    assert len(firefox) == 5


def test_mobile_chrome_agents_mention_mobile():
    assert "Mobile" in ImpersonateOS.ANDROID.chrome_user_agent()
    assert "Mobile" in ImpersonateOS.IOS.chrome_user_agent()
    assert "Mobile" not in ImpersonateOS.WINDOWS.chrome_user_agent()
    assert "Mobile" not in ImpersonateOS.MACOS.chrome_user_agent()
    assert "Mobile" not in ImpersonateOS.LINUX.chrome_user_agent()


def test_linux_firefox_user_agent():
    assert ImpersonateOS.LINUX.firefox_user_agent() == (
        "Mozilla/5.0 (X11; Linux x86_64; rv:131.0) Gecko/20100101 Firefox/131.0"
    )
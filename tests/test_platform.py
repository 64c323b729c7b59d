from __future__ import annotations

import pytest

from facemetrics.platform import PlatformClass

IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15"
ANDROID_UA = "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 Chrome/120.0 Mobile"
DESKTOP_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0"


@pytest.mark.parametrize(
    "ua,expected",
    [
        (IPHONE_UA, PlatformClass.IOS),
        ("Mozilla/5.0 (iPad; CPU OS 16_0 like Mac OS X)", PlatformClass.IOS),
        (ANDROID_UA, PlatformClass.ANDROID),
        (DESKTOP_UA, PlatformClass.PC),
        ("", PlatformClass.PC),
        (None, PlatformClass.PC),
    ],
)
def test_from_user_agent(ua, expected):
    assert PlatformClass.from_user_agent(ua) is expected


def test_is_mobile():
    assert PlatformClass.IOS.is_mobile
    assert PlatformClass.ANDROID.is_mobile
    assert not PlatformClass.PC.is_mobile


def test_parse():
    assert PlatformClass.parse("android") is PlatformClass.ANDROID
    assert PlatformClass.parse(" IOS ") is PlatformClass.IOS
    assert PlatformClass.parse(PlatformClass.PC) is PlatformClass.PC
    with pytest.raises(ValueError):
        PlatformClass.parse("toaster")

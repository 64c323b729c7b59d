# SPDX-License-Identifier: Apache-2.0
"""Platform classification used to pick calibration constants."""

from __future__ import annotations

import re
from enum import Enum

_IOS_PATTERN = re.compile(r"iphone|ipad|ipod")
_ANDROID_PATTERN = re.compile(r"android")


class PlatformClass(str, Enum):
    IOS = "iOS"
    ANDROID = "Android"
    PC = "PC"

    @property
    def is_mobile(self) -> bool:
        return self in (PlatformClass.IOS, PlatformClass.ANDROID)

    @classmethod
    def from_user_agent(cls, user_agent: str | None) -> "PlatformClass":
        """Classify an embedding environment's identifying string."""
        ua = (user_agent or "").lower()
        if _IOS_PATTERN.search(ua):
            return cls.IOS
        if _ANDROID_PATTERN.search(ua):
            return cls.ANDROID
        return cls.PC

    @classmethod
    def parse(cls, value: "str | PlatformClass") -> "PlatformClass":
        """Accept an enum member or a case-insensitive name such as ``"android"``."""
        if isinstance(value, PlatformClass):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(f"unknown platform: {value!r}")

# SPDX-License-Identifier: Apache-2.0
"""CSS color strings -> RGBA tuples for the raster backend."""

from __future__ import annotations

import re
from functools import lru_cache

from PIL import ImageColor

_RGBA = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)$",
    re.IGNORECASE,
)


@lru_cache(maxsize=256)
def parse_color(value: str) -> tuple[int, int, int, int]:
    """Parse ``#RGB``/``#RRGGBB``, named colors and ``rgb()``/``rgba()`` with a
    0..1 alpha channel.
    """
    match = _RGBA.match(value.strip())
    if match:
        r, g, b = (int(round(float(c))) for c in match.group(1, 2, 3))
        alpha = float(match.group(4)) if match.group(4) is not None else 1.0
        return r, g, b, int(round(max(0.0, min(alpha, 1.0)) * 255))
    return ImageColor.getcolor(value, "RGBA")

# SPDX-License-Identifier: Apache-2.0
"""Small 2D geometry helpers shared by the extractor and the overlay."""

from __future__ import annotations

import math
from typing import Sequence

EPSILON = 1e-6


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def angle_deg(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Signed angle of the segment ``p1 -> p2`` in degrees (``atan2`` convention)."""
    return math.degrees(math.atan2(p2[1] - p1[1], p2[0] - p1[0]))


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def safe_ratio(numerator: float, denominator: float, eps: float = EPSILON) -> float:
    """Divide, returning the ``0.0`` sentinel when ``|denominator| < eps``."""
    if not math.isfinite(denominator) or abs(denominator) < eps:
        return 0.0
    return numerator / denominator


def mirror_x(x: float, canvas_width: float) -> float:
    """Map a normalized x into the horizontally flipped drawing space."""
    return canvas_width - x * canvas_width


def to_mirrored(
    point: Sequence[float], canvas_width: float, canvas_height: float
) -> tuple[float, float]:
    return mirror_x(point[0], canvas_width), point[1] * canvas_height

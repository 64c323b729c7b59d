# SPDX-License-Identifier: Apache-2.0
"""Color sampling from a companion video frame at landmark positions."""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

import numpy as np

from facemetrics import landmarks as lm
from facemetrics.config import SamplingConfig
from facemetrics.logging_utils import get_logger
from facemetrics.schemas import LandmarkSet

LOGGER = get_logger(__name__)


def sample_color(
    frame: np.ndarray | None, x: float, y: float, window: int = 3
) -> Optional[Tuple[int, int, int]]:
    """Average RGB over a ``window`` x ``window`` neighborhood centred on a
    normalized point.

    Returns ``None`` when there is no frame, the point is not finite or the
    neighborhood does not lie fully inside the frame.
    """
    if frame is None or frame.ndim < 2:
        return None
    h, w = frame.shape[:2]
    px, py = x * w, y * h
    if not (math.isfinite(px) and math.isfinite(py)):
        return None
    cx = int(np.floor(px))
    cy = int(np.floor(py))
    half = window // 2
    x0, y0 = cx - half, cy - half
    if x0 < 0 or y0 < 0 or x0 + window > w or y0 + window > h:
        return None
    patch = frame[y0 : y0 + window, x0 : x0 + window]
    if patch.ndim == 2:
        patch = patch[..., None].repeat(3, axis=2)
    mean = patch[..., :3].reshape(-1, 3).astype(np.float64).mean(axis=0)
    r, g, b = (int(np.floor(c + 0.5)) for c in mean)
    return r, g, b


def to_rgba(rgb: Tuple[int, int, int], alpha: float) -> str:
    return f"rgba({rgb[0]}, {rgb[1]}, {rgb[2]}, {alpha:g})"


def to_hex(rgb: Tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def _sample_at(
    frame: np.ndarray | None, landmarks: LandmarkSet, index: int, window: int
) -> Optional[Tuple[int, int, int]]:
    if not landmarks.has(index):
        return None
    point = landmarks[index]
    return sample_color(frame, point.x, point.y, window)


def sample_appearance(
    frame: np.ndarray | None,
    landmarks: LandmarkSet,
    config: SamplingConfig | None = None,
) -> Dict[str, str]:
    """Sample iris, dark-circle and skin colors; absent samples use defaults."""
    config = config or SamplingConfig()
    if frame is not None:
        frame = np.asarray(frame)

    def iris(index: int) -> str:
        rgb = _sample_at(frame, landmarks, index, config.window)
        return to_rgba(rgb, config.iris_alpha) if rgb else config.default_iris_color

    dark = _sample_at(frame, landmarks, lm.RIGHT_UNDER_EYE, config.window)
    skin = _sample_at(frame, landmarks, lm.RIGHT_CHEEK, config.window)
    colors = {
        "eye_iris_color_l": iris(lm.LEFT_IRIS_CENTER),
        "eye_iris_color_r": iris(lm.RIGHT_IRIS_CENTER),
        "eye_dark_circle_color": to_hex(dark) if dark else config.default_dark_circle_color,
        "skin_tone_color": to_hex(skin) if skin else config.default_skin_tone_color,
    }
    if frame is None:
        LOGGER.debug("no pixel source, using default colors")
    return colors

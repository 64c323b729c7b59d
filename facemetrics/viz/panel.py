# SPDX-License-Identifier: Apache-2.0
"""Analysis panel with the fWHR and fSR feature bars."""

from __future__ import annotations

from facemetrics.config import DEFAULT_CONFIG, Config
from facemetrics.logging_utils import get_logger
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures, PanelBounds
from facemetrics.viz.canvas import Canvas, mirrored
from facemetrics.viz.primitives import draw_feature_bar, fill_rounded_rect, fmt, rounded_rect_path

LOGGER = get_logger(__name__)

DEFAULT_FACE_RATIO = 0.5
DEFAULT_FACE_RATIO_TEXT = "0.70"
DEFAULT_SYMMETRY_TEXT = "85%"


def draw_analysis_panel(
    ctx: Canvas,
    bounds: PanelBounds,
    features: FaceFeatures | None,
    platform: PlatformClass = PlatformClass.PC,
    config: Config | None = None,
) -> None:
    cfg = config or DEFAULT_CONFIG
    panel = cfg.panel
    if bounds.height < panel.min_height_px:
        LOGGER.debug("panel skipped, too short", height=bounds.height)
        return
    features = features or FaceFeatures()

    face_ratio = features.face_ratio if features.face_ratio is not None else DEFAULT_FACE_RATIO
    ratio_text = (
        DEFAULT_FACE_RATIO_TEXT
        if features.display_face_ratio is None
        else fmt(features.display_face_ratio)
    )
    symmetry_text = (
        DEFAULT_SYMMETRY_TEXT
        if features.display_symmetry_score is None
        else fmt(features.display_symmetry_score, 0, "%")
    )
    bar_max = cfg.calibration.for_platform(platform).face_ratio_bar_max

    with mirrored(ctx, panel.stretch_y):
        x = ctx.width - bounds.x - bounds.width
        y, w, h = bounds.y, bounds.width, bounds.height

        ctx.fill_style = panel.background_color
        fill_rounded_rect(ctx, x, y, w, h, panel.corner_radius)
        rounded_rect_path(ctx, x, y, w, h, panel.corner_radius)
        ctx.stroke_style = panel.border_color
        ctx.line_width = 1
        ctx.stroke()

        draw_feature_bar(ctx, x, y, w, h, "fWHR", face_ratio, ratio_text, bar_max, 0.33, panel)
        draw_feature_bar(
            ctx, x, y, w, h, "fSR", features.symmetry_score or 0.0, symmetry_text, 1.0, 0.67, panel
        )

# SPDX-License-Identifier: Apache-2.0
"""Per-frame feature overlay drawn in mirrored (selfie) space.

All anchors are computed as ``W - x * W`` inside a scope translated by ``W``
and scaled by ``-1`` on x, so values sit next to the landmarks they describe
in the mirrored webcam preview.
"""

from __future__ import annotations

from facemetrics import landmarks as lm
from facemetrics.config import DEFAULT_CONFIG, Config, OverlayConfig
from facemetrics.logging_utils import get_logger
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures, LandmarkSet
from facemetrics.utils.geometry import clamp, mirror_x, to_mirrored
from facemetrics.viz.canvas import Canvas, mirrored, saved_state
from facemetrics.viz.primitives import (
    CircleStyle,
    css_font,
    draw_labeled_circle,
    fmt,
    rounded_rect_path,
)

LOGGER = get_logger(__name__)

DEFAULT_EYE_DISTANCE_TEXT = "1.00"
BANNER_FONT = "bold 24px Arial"
BANNER_TEXT_COLOR = "rgba(255, 255, 255, 0.9)"
BANNER_BACKGROUND = "rgba(0, 0, 0, 0.7)"
BANNER_Y = 50.0
BANNER_HEIGHT = 30.0
BANNER_PADDING = 10.0


def face_width_px(
    ctx: Canvas,
    landmarks: LandmarkSet,
    features: FaceFeatures | None,
    face_size_hint: float | None = None,
) -> float:
    if face_size_hint is not None:
        return float(face_size_hint)
    if features is not None and features.face_width_pixels:
        return float(features.face_width_pixels)
    if len(landmarks) == 0:
        return 0.0
    return float(landmarks.xs.max() - landmarks.xs.min()) * ctx.width


def overlay_scale(width_px: float, config: OverlayConfig | None = None) -> float:
    """Distance-based scale for overlay elements."""
    cfg = config or DEFAULT_CONFIG.overlay
    return clamp(width_px / cfg.base_face_width_px, cfg.min_scale, cfg.max_scale)


class OverlayRenderer:
    """Draw landmark-anchored metric labels onto a canvas.

    Args:
        platform: selects the platform banner text.
        config: overlay styling and offsets; see :class:`OverlayConfig`.
    """

    def __init__(
        self,
        platform: PlatformClass = PlatformClass.PC,
        config: Config | None = None,
    ):
        self.platform = platform
        self.config = config or DEFAULT_CONFIG

    def render(
        self,
        ctx: Canvas,
        landmarks: LandmarkSet | None,
        features: FaceFeatures | None,
        face_size_hint: float | None = None,
    ) -> None:
        if landmarks is None or features is None:
            return
        cfg = self.config.overlay
        try:
            if not isinstance(landmarks, LandmarkSet):
                landmarks = LandmarkSet.from_points(landmarks)
            if len(landmarks) < lm.MIN_GEOMETRY_POINTS:
                LOGGER.debug("overlay skipped, landmark set too short", points=len(landmarks))
                return

            scale = overlay_scale(face_width_px(ctx, landmarks, features, face_size_hint), cfg)
            if scale < cfg.hide_below_scale:
                LOGGER.debug("overlay hidden, face too small", scale=scale)
                return

            with mirrored(ctx):
                if cfg.show_platform_info:
                    self._draw_banner(ctx)
                self._draw(ctx, landmarks, features, scale)
        except Exception as exc:
            LOGGER.warning("overlay render failed", error=str(exc))

    def _draw_banner(self, ctx: Canvas) -> None:
        text = f"Device: {self.platform.value}"
        with saved_state(ctx):
            ctx.set_transform(1, 0, 0, 1, 0, 0)
            ctx.font = BANNER_FONT
            ctx.text_align = "center"
            ctx.text_baseline = "middle"
            text_width = ctx.measure_text(text)
            ctx.fill_style = BANNER_BACKGROUND
            ctx.fill_rect(
                ctx.width / 2 - text_width / 2 - BANNER_PADDING,
                BANNER_Y,
                text_width + BANNER_PADDING * 2,
                BANNER_HEIGHT,
            )
            ctx.fill_style = BANNER_TEXT_COLOR
            ctx.fill_text(text, ctx.width / 2, BANNER_Y + BANNER_HEIGHT / 2)

    def _draw(
        self, ctx: Canvas, pts: LandmarkSet, features: FaceFeatures, scale: float
    ) -> None:
        cfg = self.config.overlay
        sampling = self.config.sampling
        width, height = ctx.width, ctx.height

        def at(index: int) -> tuple[float, float]:
            return to_mirrored(pts[index], width, height)

        font = css_font(cfg.font_size * scale, cfg.font_family)
        circle = CircleStyle(
            radius=cfg.circle_radius * scale,
            fill=cfg.fill_color,
            stroke=cfg.stroke_color,
            text_color=cfg.text_color,
            font=font,
            line_width=scale,
            shadow_blur=2 * scale,
        )
        small = CircleStyle(
            radius=cfg.small_circle_radius * scale,
            fill=cfg.fill_color,
            stroke=cfg.stroke_color,
            text_color=cfg.text_color,
            font=font,
            line_width=scale,
        )
        inner = cfg.inner_circle_radius * scale

        nose_x, nose_y = at(lm.NOSE_TIP)
        left_temple_x, left_temple_y = at(lm.LEFT_EYE_OUTER)
        left_temple_x += cfg.temple_offset_px
        right_temple_x, right_temple_y = at(lm.RIGHT_EYE_OUTER)
        right_temple_x -= cfg.temple_offset_px
        lip_x, lip_y = at(lm.LOWER_LIP_BOTTOM)
        lip_y += cfg.lower_lip_offset_px

        self._draw_nose_box(ctx, pts, features, scale, circle)
        self._draw_eye_gap(ctx, pts, features, circle)

        draw_labeled_circle(ctx, nose_x, nose_y, fmt(features.display_value("nose_height")), circle)
        draw_labeled_circle(ctx, *at(lm.LEFT_NOSTRIL), fmt(features.nostril_size_l), circle)
        draw_labeled_circle(ctx, *at(lm.RIGHT_NOSTRIL), fmt(features.nostril_size_r), circle)
        draw_labeled_circle(
            ctx, left_temple_x, left_temple_y, fmt(features.eye_angle_deg_l, 1, "°"), circle
        )
        draw_labeled_circle(
            ctx, right_temple_x, right_temple_y, fmt(features.eye_angle_deg_r, 1, "°"), circle
        )

        draw_labeled_circle(
            ctx,
            left_temple_x + cfg.outer_temple_offset_px,
            left_temple_y,
            "",
            small,
            features.eye_iris_color_l or sampling.default_iris_color,
            inner,
        )
        draw_labeled_circle(
            ctx,
            right_temple_x - cfg.outer_temple_offset_px,
            right_temple_y,
            "",
            small,
            features.eye_iris_color_r or sampling.default_iris_color,
            inner,
        )
        draw_labeled_circle(
            ctx,
            right_temple_x,
            right_temple_y + cfg.under_eye_offset_px,
            "",
            small,
            features.eye_dark_circle_color or sampling.default_dark_circle_color,
            inner,
        )
        draw_labeled_circle(
            ctx,
            right_temple_x - cfg.cheek_offset_px,
            right_temple_y + cfg.cheek_offset_px,
            "",
            small,
            features.skin_tone_color or sampling.default_skin_tone_color,
            inner,
        )

        draw_labeled_circle(
            ctx, lip_x, lip_y, fmt(features.display_value("lower_lip_thickness")), circle
        )

    def _draw_nose_box(
        self,
        ctx: Canvas,
        pts: LandmarkSet,
        features: FaceFeatures,
        scale: float,
        circle: CircleStyle,
    ) -> None:
        width, height = ctx.width, ctx.height
        nose = pts[lm.NOSE_TIP]
        nose_x = mirror_x(nose.x, width)
        nose_y = nose.y * height
        top_y = pts[lm.BETWEEN_EYES].y * height
        box_w = self.config.overlay.nose_box_width * scale
        start_y = nose_y - circle.radius - 10
        box_h = top_y - start_y

        with saved_state(ctx):
            rounded_rect_path(ctx, nose_x - box_w / 2, start_y, box_w, box_h, 0)
            ctx.fill_style = circle.fill
            ctx.fill()
            ctx.stroke_style = circle.stroke
            ctx.line_width = circle.line_width
            ctx.stroke()

            ctx.font = circle.font
            ctx.text_align = "center"
            ctx.text_baseline = "middle"
            ctx.fill_style = circle.text_color
            ctx.fill_text(
                fmt(features.display_value("nose_length")), nose_x, start_y + box_h / 2
            )

    def _draw_eye_gap(
        self, ctx: Canvas, pts: LandmarkSet, features: FaceFeatures, circle: CircleStyle
    ) -> None:
        width, height = ctx.width, ctx.height
        left_x = mirror_x(pts[lm.LEFT_EYE_INNER].x, width)
        right_x = mirror_x(pts[lm.RIGHT_EYE_INNER].x, width)
        center_x = (left_x + right_x) / 2
        center_y = (pts[lm.LEFT_EYEBROW_MID].y + pts[lm.RIGHT_EYEBROW_MID].y) / 2 * height
        text = (
            DEFAULT_EYE_DISTANCE_TEXT
            if features.eye_distance_ratio is None
            else fmt(features.eye_distance_ratio)
        )
        draw_labeled_circle(ctx, center_x, center_y, text, circle)


def render(
    ctx: Canvas,
    landmarks: LandmarkSet | None,
    features: FaceFeatures | None,
    face_size_hint: float | None = None,
    platform: PlatformClass = PlatformClass.PC,
    config: Config | None = None,
) -> None:
    """Draw the overlay for one frame; never raises."""
    OverlayRenderer(platform, config).render(ctx, landmarks, features, face_size_hint)


__all__ = ["OverlayRenderer", "face_width_px", "overlay_scale", "render"]

# SPDX-License-Identifier: Apache-2.0
"""Reusable canvas drawing helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from facemetrics.config import DEFAULT_CONFIG, PanelConfig
from facemetrics.viz.canvas import Canvas, saved_state


@dataclass(frozen=True)
class CircleStyle:
    radius: float
    fill: str
    stroke: str
    text_color: str
    font: str
    line_width: float = 1.0
    shadow_color: str = "rgba(255, 255, 255, 0.0)"
    shadow_blur: float = 0.0


def css_font(size: float, family: str = "Arial", weight: str = "bold") -> str:
    return f"{weight} {size:g}px {family}"


def fmt(value: float | None, digits: int = 2, suffix: str = "") -> str:
    """Fixed-point text for a metric; ``None`` reads as 0."""
    return f"{(value or 0.0):.{digits}f}{suffix}"


def rounded_rect_path(
    ctx: Canvas, x: float, y: float, width: float, height: float, radius: float
) -> None:
    radius = max(0.0, min(radius, width / 2, height / 2))
    ctx.begin_path()
    ctx.move_to(x + radius, y)
    ctx.line_to(x + width - radius, y)
    ctx.quadratic_curve_to(x + width, y, x + width, y + radius)
    ctx.line_to(x + width, y + height - radius)
    ctx.quadratic_curve_to(x + width, y + height, x + width - radius, y + height)
    ctx.line_to(x + radius, y + height)
    ctx.quadratic_curve_to(x, y + height, x, y + height - radius)
    ctx.line_to(x, y + radius)
    ctx.quadratic_curve_to(x, y, x + radius, y)
    ctx.close_path()


def fill_rounded_rect(
    ctx: Canvas, x: float, y: float, width: float, height: float, radius: float
) -> None:
    rounded_rect_path(ctx, x, y, width, height, radius)
    ctx.fill()


def fill_left_rounded_rect(
    ctx: Canvas, x: float, y: float, width: float, height: float, radius: float
) -> None:
    """Rectangle with only the two left corners rounded."""
    radius = max(0.0, min(radius, width, height / 2))
    ctx.begin_path()
    ctx.move_to(x + radius, y)
    ctx.line_to(x + width, y)
    ctx.line_to(x + width, y + height)
    ctx.line_to(x + radius, y + height)
    ctx.quadratic_curve_to(x, y + height, x, y + height - radius)
    ctx.line_to(x, y + radius)
    ctx.quadratic_curve_to(x, y, x + radius, y)
    ctx.close_path()
    ctx.fill()


def draw_labeled_circle(
    ctx: Canvas,
    x: float,
    y: float,
    text: str,
    style: CircleStyle,
    inner_color: str | None = None,
    inner_radius: float = 0.0,
) -> None:
    """Filled, outlined circle with centred text or a solid inner swatch."""
    with saved_state(ctx):
        ctx.begin_path()
        ctx.arc(x, y, style.radius, 0, 2 * math.pi)
        ctx.fill_style = style.fill
        ctx.fill()
        ctx.stroke_style = style.stroke
        ctx.line_width = style.line_width
        ctx.stroke()

        if inner_color is not None and inner_radius > 0:
            ctx.begin_path()
            ctx.arc(x, y, inner_radius, 0, 2 * math.pi)
            ctx.fill_style = inner_color
            ctx.fill()

        if text:
            ctx.font = style.font
            ctx.fill_style = style.text_color
            ctx.text_align = "center"
            ctx.text_baseline = "middle"
            ctx.shadow_color = style.shadow_color
            ctx.shadow_blur = style.shadow_blur
            ctx.fill_text(text, x, y)


def draw_progress_bar(
    ctx: Canvas,
    x: float,
    y: float,
    width: float,
    height: float,
    value: float,
    max_value: float,
    radius: float,
    track_color: str = "rgba(255, 255, 255, 0.2)",
    bar_color: str = "rgba(255, 255, 255, 0.8)",
    min_fill: float = 10.0,
) -> float:
    """Draw a track and its fill; return the fill width in pixels."""
    ctx.fill_style = track_color
    fill_rounded_rect(ctx, x, y, width, height, radius)

    if value <= 0 or max_value <= 0 or width <= 0:
        return 0.0

    fill = (value / max_value) * width
    ctx.fill_style = bar_color
    if fill >= width:
        fill_rounded_rect(ctx, x, y, width, height, radius)
        return float(width)
    fill = min(max(fill, min_fill), width)
    fill_left_rounded_rect(ctx, x, y, fill, height, radius)
    return float(fill)


def draw_feature_bar(
    ctx: Canvas,
    x: float,
    y: float,
    width: float,
    height: float,
    label: str,
    value: float,
    text: str,
    max_value: float,
    position: float,
    config: PanelConfig | None = None,
) -> float:
    """Labeled row inside a panel: label left, value right, bar between.

    ``position`` is the row's vertical centre as a fraction of ``height``.
    The bar is only drawn when the panel is wide enough to hold it.
    """
    panel = config or DEFAULT_CONFIG.panel
    row_y = y + height * position

    ctx.font = css_font(12)
    ctx.fill_style = "#FFFFFF"
    ctx.text_baseline = "middle"
    ctx.text_align = "left"
    ctx.fill_text(label, x + 20, row_y)
    ctx.text_align = "right"
    ctx.fill_text(text, x + width - 20, row_y)

    if width < panel.min_bar_width_px:
        return 0.0
    return draw_progress_bar(
        ctx,
        x + 90,
        row_y - 7,
        width - 170,
        panel.bar_height,
        value,
        max_value,
        panel.bar_radius,
        track_color=panel.track_color,
        bar_color=panel.bar_color,
        min_fill=panel.min_fill_px,
    )

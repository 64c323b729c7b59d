# SPDX-License-Identifier: Apache-2.0
"""Pillow-backed implementation of the canvas protocol.

Paths are flattened to polylines in device space as they are built, so the
transform in effect when a point is added is the one that applies. Fills and
strokes are drawn on a transparent layer and alpha-composited onto the image.
Shadows are accepted but not rendered.
"""

from __future__ import annotations

import copy
import math
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont, ImageOps

from facemetrics.logging_utils import get_logger
from facemetrics.viz.colors import parse_color

LOGGER = get_logger(__name__)

_FONT_SIZE = re.compile(r"(\d+(?:\.\d+)?)px")
_CURVE_STEPS = 12

Matrix = Tuple[float, float, float, float, float, float]
_IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


@lru_cache(maxsize=32)
def _load_font(size: int, bold: bool) -> ImageFont.ImageFont:
    name = "DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf"
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        return ImageFont.load_default(size=size)


def _parse_font(font: str) -> Tuple[int, bool]:
    match = _FONT_SIZE.search(font)
    size = float(match.group(1)) if match else 10.0
    return max(1, int(round(size))), "bold" in font.lower()


@dataclass
class _State:
    matrix: Matrix = _IDENTITY
    fill_style: str = "#000000"
    stroke_style: str = "#000000"
    line_width: float = 1.0
    font: str = "10px sans-serif"
    text_align: str = "start"
    text_baseline: str = "alphabetic"
    shadow_color: str = "rgba(0, 0, 0, 0)"
    shadow_blur: float = 0.0


@dataclass
class _Path:
    subpaths: List[List[Tuple[float, float]]] = field(default_factory=list)
    closed: List[bool] = field(default_factory=list)

    def start(self, point: Tuple[float, float]) -> None:
        self.subpaths.append([point])
        self.closed.append(False)

    def add(self, point: Tuple[float, float]) -> None:
        if not self.subpaths or self.closed[-1]:
            self.start(point)
        else:
            self.subpaths[-1].append(point)

    @property
    def current(self) -> Tuple[float, float] | None:
        if not self.subpaths:
            return None
        return self.subpaths[-1][-1]


class RasterCanvas:
    """Draw onto an RGBA :class:`PIL.Image.Image`.

    Args:
        image: base image, converted to RGBA. A blank transparent image of
            ``size`` is created when omitted.
        size: ``(width, height)`` used when ``image`` is ``None``.
    """

    _STYLE_ATTRS = (
        "fill_style",
        "stroke_style",
        "line_width",
        "font",
        "text_align",
        "text_baseline",
        "shadow_color",
        "shadow_blur",
    )

    def __init__(self, image: Image.Image | None = None, size: Tuple[int, int] = (640, 480)):
        if image is None:
            image = Image.new("RGBA", size, (0, 0, 0, 0))
        object.__setattr__(self, "image", image.convert("RGBA"))
        object.__setattr__(self, "_state", _State())
        object.__setattr__(self, "_stack", [])
        object.__setattr__(self, "_path", _Path())

    @classmethod
    def from_array(cls, frame: np.ndarray) -> "RasterCanvas":
        return cls(Image.fromarray(frame))

    # style attributes live on the current state so save/restore covers them
    def __getattr__(self, name: str):
        if name in RasterCanvas._STYLE_ATTRS:
            return getattr(self._state, name)
        raise AttributeError(name)

    def __setattr__(self, name: str, value) -> None:
        if name in self._STYLE_ATTRS:
            setattr(self._state, name, value)
        else:
            object.__setattr__(self, name, value)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def depth(self) -> int:
        return len(self._stack)

    def to_array(self) -> np.ndarray:
        return np.asarray(self.image.convert("RGB"))

    # state
    def save(self) -> None:
        self._stack.append(copy.copy(self._state))

    def restore(self) -> None:
        if self._stack:
            object.__setattr__(self, "_state", self._stack.pop())

    # transform
    def _transform(self, x: float, y: float) -> Tuple[float, float]:
        a, b, c, d, e, f = self._state.matrix
        return a * x + c * y + e, b * x + d * y + f

    def _apply(self, a2: float, b2: float, c2: float, d2: float, e2: float, f2: float) -> None:
        a, b, c, d, e, f = self._state.matrix
        self._state.matrix = (
            a * a2 + c * b2,
            b * a2 + d * b2,
            a * c2 + c * d2,
            b * c2 + d * d2,
            a * e2 + c * f2 + e,
            b * e2 + d * f2 + f,
        )

    def translate(self, x: float, y: float) -> None:
        self._apply(1.0, 0.0, 0.0, 1.0, x, y)

    def scale(self, sx: float, sy: float) -> None:
        self._apply(sx, 0.0, 0.0, sy, 0.0, 0.0)

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self._state.matrix = (float(a), float(b), float(c), float(d), float(e), float(f))

    def _scale_factor(self) -> float:
        a, b, c, d, _, _ = self._state.matrix
        return math.sqrt(abs(a * d - b * c))

    # paths
    def begin_path(self) -> None:
        object.__setattr__(self, "_path", _Path())

    def move_to(self, x: float, y: float) -> None:
        self._path.start(self._transform(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.add(self._transform(x, y))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        start = self._path.current
        end = self._transform(x, y)
        if start is None:
            self._path.start(end)
            return
        ctrl = self._transform(cpx, cpy)
        for i in range(1, _CURVE_STEPS + 1):
            t = i / _CURVE_STEPS
            u = 1.0 - t
            self._path.add(
                (
                    u * u * start[0] + 2 * u * t * ctrl[0] + t * t * end[0],
                    u * u * start[1] + 2 * u * t * ctrl[1] + t * t * end[1],
                )
            )

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        sweep = end - start
        if abs(sweep) >= 2 * math.pi:
            sweep = math.copysign(2 * math.pi, sweep)
        steps = max(8, int(abs(sweep) / (2 * math.pi) * 64))
        for i in range(steps + 1):
            angle = start + sweep * i / steps
            self._path.add(
                self._transform(x + radius * math.cos(angle), y + radius * math.sin(angle))
            )

    def close_path(self) -> None:
        if self._path.subpaths:
            self._path.closed[-1] = True

    def _layer(self) -> Tuple[Image.Image, ImageDraw.ImageDraw]:
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        return layer, ImageDraw.Draw(layer)

    def _composite(self, layer: Image.Image) -> None:
        object.__setattr__(self, "image", Image.alpha_composite(self.image, layer))

    def fill(self) -> None:
        color = parse_color(self._state.fill_style)
        layer, draw = self._layer()
        for points in self._path.subpaths:
            if len(points) >= 3:
                draw.polygon(points, fill=color)
        self._composite(layer)

    def stroke(self) -> None:
        color = parse_color(self._state.stroke_style)
        width = max(1, int(round(self._state.line_width * self._scale_factor())))
        layer, draw = self._layer()
        for points, closed in zip(self._path.subpaths, self._path.closed):
            if len(points) < 2:
                continue
            line = points + [points[0]] if closed else points
            draw.line(line, fill=color, width=width, joint="curve")
        self._composite(layer)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = [
            self._transform(x, y),
            self._transform(x + width, y),
            self._transform(x + width, y + height),
            self._transform(x, y + height),
        ]
        layer, draw = self._layer()
        draw.polygon(corners, fill=parse_color(self._state.fill_style))
        self._composite(layer)

    # text
    def _font(self) -> ImageFont.ImageFont:
        size, bold = _parse_font(self._state.font)
        return _load_font(max(1, int(round(size * self._scale_factor()))), bold)

    def measure_text(self, text: str) -> float:
        size, bold = _parse_font(self._state.font)
        return float(_load_font(size, bold).getlength(text))

    def fill_text(self, text: str, x: float, y: float) -> None:
        if not text:
            return
        font = self._font()
        left, top, right, bottom = font.getbbox(text)
        glyphs = Image.new("RGBA", (max(1, right), max(1, bottom)), (0, 0, 0, 0))
        ImageDraw.Draw(glyphs).text((0, 0), text, font=font, fill=parse_color(self._state.fill_style))
        a = self._state.matrix[0]
        if a < 0:
            glyphs = ImageOps.mirror(glyphs)

        dx, dy = self._transform(x, y)
        w, h = glyphs.size
        align = self._state.text_align
        # alignment is expressed in user space; a flipped x axis swaps sides
        if align == "center":
            ox = dx - w / 2
        elif (align in ("right", "end")) != (a < 0):
            ox = dx - w
        else:
            ox = dx
        baseline = self._state.text_baseline
        if baseline == "middle":
            oy = dy - (top + bottom) / 2
        elif baseline == "top":
            oy = dy - top
        elif baseline == "bottom":
            oy = dy - bottom
        else:
            oy = dy - bottom * 0.8

        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        layer.paste(glyphs, (int(round(ox)), int(round(oy))), glyphs)
        self._composite(layer)

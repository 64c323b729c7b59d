# SPDX-License-Identifier: Apache-2.0
"""Drawing-surface protocol modelled on the HTML canvas 2D context."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class Canvas(Protocol):
    """Stateful 2D drawing surface.

    Style attributes and the current transform are part of the drawing state
    pushed by :meth:`save` and popped by :meth:`restore`. Path coordinates are
    transformed when they are added, as in the browser API.
    """

    width: int
    height: int
    fill_style: str
    stroke_style: str
    line_width: float
    font: str
    text_align: str
    text_baseline: str
    shadow_color: str
    shadow_blur: float

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def set_transform(
        self, a: float, b: float, c: float, d: float, e: float, f: float
    ) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None: ...

    def arc(
        self, x: float, y: float, radius: float, start: float, end: float
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def measure_text(self, text: str) -> float: ...


@contextmanager
def saved_state(ctx: Canvas) -> Iterator[Canvas]:
    """Push the drawing state and pop it on every exit path."""
    ctx.save()
    try:
        yield ctx
    finally:
        ctx.restore()


@contextmanager
def mirrored(ctx: Canvas, stretch_y: float = 1.0) -> Iterator[Canvas]:
    """Scope in which the x axis is flipped about the canvas' right edge."""
    with saved_state(ctx):
        ctx.translate(ctx.width, 0)
        ctx.scale(-1, stretch_y)
        yield ctx

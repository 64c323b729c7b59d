from __future__ import annotations

from typing import Any, Callable

import numpy as np
import pytest

from facemetrics.schemas import LandmarkSet

N_POINTS = 478

# a roughly frontal face: width 0.30, height 0.34, level eyes
FACE_POINTS = {
    234: (0.35, 0.50),
    454: (0.65, 0.50),
    10: (0.50, 0.30),
    152: (0.50, 0.64),
    1: (0.50, 0.52),
    6: (0.50, 0.42),
    168: (0.50, 0.40),
    102: (0.46, 0.55),
    331: (0.54, 0.55),
    33: (0.40, 0.42),
    133: (0.46, 0.42),
    362: (0.54, 0.42),
    263: (0.60, 0.42),
    253: (0.57, 0.45),
    468: (0.43, 0.42),
    473: (0.57, 0.42),
    66: (0.43, 0.36),
    296: (0.57, 0.36),
    70: (0.39, 0.37),
    105: (0.45, 0.36),
    334: (0.55, 0.36),
    300: (0.61, 0.37),
    13: (0.50, 0.58),
    15: (0.50, 0.61),
    17: (0.50, 0.63),
    61: (0.45, 0.59),
    291: (0.55, 0.59),
    425: (0.60, 0.55),
}


def build_landmarks(overrides: dict[int, tuple[float, float]] | None = None, n: int = N_POINTS) -> LandmarkSet:
    idx = np.arange(n)
    pts = np.stack([0.3 + 0.4 * (idx % 22) / 21, 0.2 + 0.6 * (idx // 22) / 21], axis=1)
    for i, (x, y) in {**FACE_POINTS, **(overrides or {})}.items():
        if i < n:
            pts[i] = (x, y)
    return LandmarkSet(pts)


@pytest.fixture
def make_landmarks() -> Callable[..., LandmarkSet]:
    return build_landmarks


@pytest.fixture
def face_landmarks() -> LandmarkSet:
    return build_landmarks()


class RecordingCanvas:
    """Canvas double that records every call and tracks the save depth."""

    def __init__(self, width: int = 640, height: int = 480, fail_on: str | None = None):
        self.width = width
        self.height = height
        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width = 1.0
        self.font = "10px sans-serif"
        self.text_align = "start"
        self.text_baseline = "alphabetic"
        self.shadow_color = "rgba(0, 0, 0, 0)"
        self.shadow_blur = 0.0
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.depth = 0
        self.max_depth = 0
        self.fail_on = fail_on

    def _record(self, name: str, *args: Any) -> None:
        if name == self.fail_on:
            raise RuntimeError(f"{name} failed")
        self.calls.append((name, args))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def args_of(self, name: str) -> list[tuple[Any, ...]]:
        return [args for n, args in self.calls if n == name]

    def texts(self) -> list[str]:
        return [args[0] for args in self.args_of("fill_text")]

    @property
    def drew(self) -> bool:
        return any(n in ("fill", "stroke", "fill_rect", "fill_text") for n in self.names())

    def save(self) -> None:
        self._record("save")
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)

    def restore(self) -> None:
        self._record("restore")
        self.depth -= 1

    def translate(self, x, y):
        self._record("translate", x, y)

    def scale(self, sx, sy):
        self._record("scale", sx, sy)

    def set_transform(self, a, b, c, d, e, f):
        self._record("set_transform", a, b, c, d, e, f)

    def begin_path(self):
        self._record("begin_path")

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def quadratic_curve_to(self, cpx, cpy, x, y):
        self._record("quadratic_curve_to", cpx, cpy, x, y)

    def arc(self, x, y, radius, start, end):
        self._record("arc", x, y, radius, start, end)

    def close_path(self):
        self._record("close_path")

    def fill(self):
        self._record("fill", self.fill_style)

    def stroke(self):
        self._record("stroke", self.stroke_style)

    def fill_rect(self, x, y, width, height):
        self._record("fill_rect", x, y, width, height)

    def fill_text(self, text, x, y):
        self._record("fill_text", text, x, y)

    def measure_text(self, text):
        return 7.0 * len(text)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def frame() -> np.ndarray:
    img = np.full((480, 640, 3), 200, dtype=np.uint8)
    img[195:210, 270:282] = (10, 20, 30)  # left iris around (0.43, 0.42)
    return img


@pytest.fixture
def canvas_factory() -> type[RecordingCanvas]:
    return RecordingCanvas

# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, NamedTuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


class Point(NamedTuple):
    x: float
    y: float


def _coerce_point(item: Any) -> tuple[float, float]:
    if isinstance(item, dict):
        return float(item["x"]), float(item["y"])
    if hasattr(item, "x") and hasattr(item, "y"):
        return float(item.x), float(item.y)
    return float(item[0]), float(item[1])


@dataclass(frozen=True, eq=False)
class LandmarkSet:
    """Ordered, immutable set of normalized landmark points for one frame."""

    points: np.ndarray

    def __post_init__(self) -> None:
        arr = np.asarray(self.points, dtype=np.float64).reshape(-1, 2)
        arr.setflags(write=False)
        object.__setattr__(self, "points", arr)

    @classmethod
    def from_points(cls, points: Iterable[Any] | None) -> "LandmarkSet":
        """Build from ``{"x", "y"}`` dicts, ``(x, y)`` pairs or objects with ``.x``/``.y``."""
        if points is None:
            return cls(np.empty((0, 2)))
        if isinstance(points, np.ndarray):
            return cls(points)
        if hasattr(points, "landmark"):  # MediaPipe NormalizedLandmarkList
            points = points.landmark
        coords = [_coerce_point(p) for p in points]
        return cls(np.array(coords, dtype=np.float64).reshape(-1, 2))

    @classmethod
    def empty(cls) -> "LandmarkSet":
        return cls(np.empty((0, 2)))

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __getitem__(self, index: int) -> Point:
        x, y = self.points[index]
        return Point(float(x), float(y))

    def __iter__(self) -> Iterator[Point]:
        for x, y in self.points:
            yield Point(float(x), float(y))

    def has(self, index: int) -> bool:
        return 0 <= index < len(self)

    @property
    def xs(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def ys(self) -> np.ndarray:
        return self.points[:, 1]

    def to_list(self) -> list[dict[str, float]]:
        return [{"x": p.x, "y": p.y} for p in self]


class FaceFeatures(BaseModel):
    """Metrics derived from one LandmarkSet.

    Every field is optional; ``None`` means "not computed". Consumers resolve
    absent fields to the fallbacks documented next to each consumer.
    Serialized with the camelCase keys used by the web client.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # ratios
    face_width: float | None = Field(None, alias="faceWidth")
    face_height: float | None = Field(None, alias="faceHeight")
    fwhr: float | None = Field(None, alias="fWHR")
    fsr: float | None = Field(None, alias="fSR")
    face_ratio: float | None = Field(None, alias="faceRatio")
    symmetry_score: float | None = Field(None, alias="symmetryScore")
    display_face_ratio: float | None = Field(None, alias="displayFaceRatio")
    display_symmetry_score: float | None = Field(None, alias="displaySymmetryScore")
    eye_distance_ratio: float | None = Field(None, alias="eyeDistanceRatio")
    face_width_pixels: float | None = Field(None, alias="faceWidthPixels")

    # distances (landmark units, unscaled)
    nose_height: float | None = Field(None, alias="noseHeight")
    nose_length: float | None = Field(None, alias="noseLength")
    nostril_size_l: float | None = Field(None, alias="nostrilSize_L")
    nostril_size_r: float | None = Field(None, alias="nostrilSize_R")
    lower_lip_thickness: float | None = Field(None, alias="lowerLipThickness")
    display_nose_height: float | None = Field(None, alias="displayNoseHeight")
    display_nose_length: float | None = Field(None, alias="displayNoseLength")
    display_lower_lip_thickness: float | None = Field(
        None, alias="displayLowerLipThickness"
    )

    # angles (degrees)
    eye_angle_l: float | None = Field(None, alias="eyeAngle_L")
    eye_angle_r: float | None = Field(None, alias="eyeAngle_R")
    eye_angle_deg_l: float | None = Field(None, alias="eyeAngleDeg_L")
    eye_angle_deg_r: float | None = Field(None, alias="eyeAngleDeg_R")
    eyebrow_angle_l: float | None = Field(None, alias="eyebrowAngle_L")
    eyebrow_angle_r: float | None = Field(None, alias="eyebrowAngle_R")
    lip_angle_l: float | None = Field(None, alias="lipAngle_L")
    lip_angle_r: float | None = Field(None, alias="lipAngle_R")

    # appearance
    eye_iris_color_l: str | None = Field(None, alias="eyeIrisColor_L")
    eye_iris_color_r: str | None = Field(None, alias="eyeIrisColor_R")
    eye_dark_circle_color: str | None = Field(None, alias="eyeDarkCircleColor")
    skin_tone_color: str | None = Field(None, alias="skinToneColor")

    @property
    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    def display_value(self, name: str) -> float | None:
        """Return ``display_<name>`` when present, else the raw ``<name>``."""
        display = getattr(self, f"display_{name}", None)
        if display is not None:
            return display
        return getattr(self, name, None)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class PanelBounds:
    """Caller-supplied analysis panel rectangle in unmirrored canvas pixels."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def parse(cls, value: str) -> "PanelBounds":
        parts = [float(v) for v in value.split(",")]
        if len(parts) != 4:
            raise ValueError(f"expected x,y,width,height, got {value!r}")
        return cls(*parts)


class AIResult(BaseModel):
    title: str
    description: str

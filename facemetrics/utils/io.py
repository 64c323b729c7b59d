# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from pathlib import Path
from typing import Any

import cv2
import numpy as np
import orjson

from facemetrics.schemas import LandmarkSet


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_json(path: Path) -> Any:
    return orjson.loads(Path(path).read_bytes())


def write_json(path: Path, data: Any) -> None:
    path = Path(path)
    ensure_dir(path.parent)
    path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))


def load_landmarks(path: Path) -> LandmarkSet:
    """Load a LandmarkSet from a JSON list of points or ``{"landmarks": [...]}``.

    A list of faces (list of lists of points) keeps only the first face.
    """
    data = read_json(path)
    if isinstance(data, dict):
        data = data.get("landmarks", [])
    if data and isinstance(data[0], list) and data[0] and not isinstance(
        data[0][0], (int, float)
    ):
        data = data[0]
    return LandmarkSet.from_points(data)


def load_frame(path: Path) -> np.ndarray:
    """Read an image as an RGB ``uint8`` array."""
    bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if bgr is None:
        raise FileNotFoundError(f"could not read image: {path}")
    return cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)

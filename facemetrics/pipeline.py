# SPDX-License-Identifier: Apache-2.0
"""Frame loop glue: extract features, then draw them."""

from __future__ import annotations

from typing import Any

import numpy as np

from facemetrics.config import DEFAULT_CONFIG, Config
from facemetrics.features.extractor import FeatureExtractor
from facemetrics.logging_utils import get_logger
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures, LandmarkSet, PanelBounds
from facemetrics.viz.canvas import Canvas
from facemetrics.viz.overlay import OverlayRenderer
from facemetrics.viz.panel import draw_analysis_panel

LOGGER = get_logger(__name__)


class FaceAnalysisSession:
    """Per-stream state: the platform, its config and the latest features.

    Only the most recent FaceFeatures record is kept; each call to
    :meth:`process_frame` replaces it.
    """

    def __init__(
        self,
        platform: PlatformClass = PlatformClass.PC,
        config: Config | None = None,
    ):
        self.platform = platform
        self.config = config or DEFAULT_CONFIG
        self.extractor = FeatureExtractor(platform, self.config)
        self.renderer = OverlayRenderer(platform, self.config)
        self.latest: FaceFeatures = FaceFeatures()
        self.frames = 0

    @classmethod
    def from_user_agent(cls, user_agent: str | None, config: Config | None = None) -> "FaceAnalysisSession":
        return cls(PlatformClass.from_user_agent(user_agent), config)

    def process_frame(
        self,
        landmarks: LandmarkSet | Any,
        frame: np.ndarray | None,
        canvas: Canvas | None = None,
        panel_bounds: PanelBounds | None = None,
        face_size_hint: float | None = None,
    ) -> FaceFeatures:
        if landmarks is not None and not isinstance(landmarks, LandmarkSet):
            landmarks = LandmarkSet.from_points(landmarks)
        features = self.extractor.extract(landmarks, frame)
        self.latest = features
        self.frames += 1

        if canvas is not None:
            self.renderer.render(canvas, landmarks, features, face_size_hint)
            if panel_bounds is not None:
                draw_analysis_panel(canvas, panel_bounds, features, self.platform, self.config)
        return features

    def reset(self) -> None:
        self.latest = FaceFeatures()
        self.frames = 0

# SPDX-License-Identifier: Apache-2.0
"""facemetrics: facial landmark metrics and live overlay rendering."""

from __future__ import annotations

from facemetrics.features.extractor import FeatureExtractor, extract
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures, LandmarkSet, PanelBounds, Point
from facemetrics.viz.overlay import OverlayRenderer, render

__all__ = [
    "FaceFeatures",
    "FeatureExtractor",
    "LandmarkSet",
    "OverlayRenderer",
    "PanelBounds",
    "PlatformClass",
    "Point",
    "extract",
    "render",
]
__version__ = "0.1.0"

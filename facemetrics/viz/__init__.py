# SPDX-License-Identifier: Apache-2.0
"""Overlay drawing on a canvas-style 2D surface."""

from facemetrics.viz.canvas import Canvas, saved_state
from facemetrics.viz.overlay import OverlayRenderer, render
from facemetrics.viz.panel import draw_analysis_panel
from facemetrics.viz.raster import RasterCanvas

__all__ = [
    "Canvas",
    "OverlayRenderer",
    "RasterCanvas",
    "draw_analysis_panel",
    "render",
    "saved_state",
]

from __future__ import annotations

import pytest

from facemetrics.features.extractor import extract
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures, PanelBounds
from facemetrics.viz.panel import draw_analysis_panel


def test_short_panel_is_skipped(canvas):
    draw_analysis_panel(canvas, PanelBounds(10, 10, 300, 19), FaceFeatures())
    assert canvas.calls == []


def test_panel_is_flipped_into_mirrored_space(canvas):
    draw_analysis_panel(canvas, PanelBounds(20, 300, 300, 100), FaceFeatures())
    assert canvas.calls[:3] == [("save", ()), ("translate", (640, 0)), ("scale", (-1, 1.0))]
    # background starts at the flipped x plus the corner radius
    assert canvas.args_of("move_to")[0] == (640 - 20 - 300 + 10, 300)
    assert canvas.depth == 0


def test_panel_fallback_texts(canvas):
    draw_analysis_panel(canvas, PanelBounds(0, 0, 300, 100), FaceFeatures())
    assert canvas.texts() == ["fWHR", "0.70", "fSR", "85%"]


def test_panel_values(canvas, face_landmarks):
    features = extract(face_landmarks, platform=PlatformClass.ANDROID)
    draw_analysis_panel(canvas, PanelBounds(0, 0, 300, 100), features, PlatformClass.ANDROID)
    texts = canvas.texts()
    assert texts[1] == f"{features.display_face_ratio:.2f}"
    assert texts[3] == f"{features.display_symmetry_score:.0f}%"


def test_narrow_panel_has_no_bars(canvas):
    draw_analysis_panel(canvas, PanelBounds(0, 0, 219, 100), FaceFeatures(symmetry_score=0.9))
    # background fill only
    assert canvas.names().count("fill") == 1
    assert canvas.names().count("stroke") == 1


@pytest.mark.parametrize("platform,bar_max", [(PlatformClass.PC, 3.0), (PlatformClass.IOS, 2.5)])
def test_face_ratio_bar_max_per_platform(canvas, platform, bar_max):
    features = FaceFeatures(face_ratio=1.25, symmetry_score=0.0)
    draw_analysis_panel(canvas, PanelBounds(0, 0, 300, 100), features, platform)
    # fWHR row sits at y = 33; the panel starts at x = 640 - 300 = 340 once flipped
    ends = [x for x, y in canvas.args_of("line_to") if y == pytest.approx(33 - 7)]
    assert sorted(ends) == [pytest.approx(430 + 130 * 1.25 / bar_max), pytest.approx(555)]

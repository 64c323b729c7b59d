from __future__ import annotations

import math

import pytest

from facemetrics.utils.geometry import angle_deg, clamp, distance, mirror_x, safe_ratio, to_mirrored


def test_safe_ratio_guards_small_denominators():
    assert safe_ratio(1.0, 0.0) == 0.0
    assert safe_ratio(1.0, 5e-7) == 0.0
    assert safe_ratio(1.0, -5e-7) == 0.0
    assert safe_ratio(1.0, math.nan) == 0.0
    assert safe_ratio(1.0, 4.0) == 0.25


def test_angle_and_distance():
    assert angle_deg((0, 0), (1, 1)) == pytest.approx(45.0)
    assert angle_deg((0, 0), (1, -1)) == pytest.approx(-45.0)
    assert distance((0, 0), (3, 4)) == pytest.approx(5.0)


def test_clamp():
    assert clamp(0.2, 0.5, 1.5) == 0.5
    assert clamp(2.0, 0.5, 1.5) == 1.5
    assert clamp(1.0, 0.5, 1.5) == 1.0


def test_mirror():
    assert mirror_x(0.25, 640) == 480
    assert to_mirrored((0.25, 0.5), 640, 480) == (480, 240)

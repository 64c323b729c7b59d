from __future__ import annotations

import math

import numpy as np
import pytest

from facemetrics.config import Config
from facemetrics.features.extractor import FeatureExtractor, extract, symmetry_score
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures, LandmarkSet


def test_empty_landmarks_give_empty_record():
    assert extract(LandmarkSet.empty()).is_empty
    assert extract(None).is_empty
    assert extract([]).is_empty


def test_short_landmark_set_gives_empty_record(make_landmarks):
    assert extract(make_landmarks(n=100)).is_empty


def test_face_ratio_pc_vs_android(face_landmarks):
    pc = extract(face_landmarks, platform=PlatformClass.PC)
    android = extract(face_landmarks, platform=PlatformClass.ANDROID)

    assert pc.face_width == pytest.approx(0.30)
    assert pc.face_height == pytest.approx(0.34)
    assert pc.fwhr == pytest.approx(0.30 / 0.34)
    assert android.fwhr == pytest.approx(0.34 / 0.30)
    assert pc.face_ratio == pc.fwhr
    assert android.face_width == pc.face_width


def test_raw_distances(face_landmarks):
    f = extract(face_landmarks)
    assert f.nose_height == pytest.approx(0.12)
    assert f.nose_length == pytest.approx(0.10)
    assert f.lower_lip_thickness == pytest.approx(0.02)
    assert f.nostril_size_l == pytest.approx(0.03)
    assert f.nostril_size_r == pytest.approx(0.03)
    assert f.eye_distance_ratio == pytest.approx(0.08 / 0.06)


def test_mobile_multipliers_only_touch_display_fields(face_landmarks):
    pc = extract(face_landmarks, platform=PlatformClass.PC)
    ios = extract(face_landmarks, platform=PlatformClass.IOS)

    assert ios.nose_length == pytest.approx(pc.nose_length)
    assert ios.display_nose_length == pytest.approx(pc.nose_length * 3)
    assert ios.display_nose_height == pytest.approx(pc.nose_height / 3)
    assert ios.display_lower_lip_thickness == pytest.approx(pc.lower_lip_thickness * 3)
    assert pc.display_nose_length == pytest.approx(pc.nose_length)


def test_symmetry_score_matches_weighted_sum(face_landmarks):
    f = extract(face_landmarks)
    # level eyes, equal nostrils; brow and lip terms saturate at 1
    assert f.fsr == pytest.approx(1 - (0.20 + 0.25))
    assert f.display_symmetry_score == pytest.approx(f.fsr * 100)
    assert f.eye_angle_deg_l == pytest.approx(0.0)


def test_nostril_term_contribution():
    score = symmetry_score((0.0, 0.0), (0.0, 0.0), (1.00, 0.80), (0.0, 0.0))
    assert 1 - score == pytest.approx(0.20 * 0.2 / 0.9)
    assert 1 - score == pytest.approx(0.0444, abs=1e-4)


@pytest.mark.parametrize(
    "eye,brow,nostril,lip",
    [
        ((90.0, -90.0), (0.0, 0.0), (1.0, 1.0), (0.0, 0.0)),
        ((45.0, 10.0), (80.0, -30.0), (5.0, 0.0), (170.0, 2.0)),
        ((0.0, 0.0), (0.0, 0.0), (0.0, 0.0), (0.0, 0.0)),
    ],
)
def test_symmetry_score_bounded(eye, brow, nostril, lip):
    assert 0.0 <= symmetry_score(eye, brow, nostril, lip) <= 1.0


def test_zero_face_height_returns_sentinel(make_landmarks):
    flat = make_landmarks({10: (0.50, 0.50), 152: (0.50, 0.50)})
    f = extract(flat, platform=PlatformClass.PC)
    assert f.fwhr == 0.0
    assert math.isfinite(f.fsr)


def test_extract_is_idempotent(face_landmarks, frame):
    extractor = FeatureExtractor(PlatformClass.ANDROID)
    assert extractor.extract(face_landmarks, frame) == extractor.extract(face_landmarks, frame)


def test_accepts_point_dicts(face_landmarks):
    as_dicts = face_landmarks.to_list()
    assert extract(as_dicts) == extract(face_landmarks)


def test_face_width_pixels_passthrough(face_landmarks):
    f = FeatureExtractor().extract(face_landmarks, face_width_pixels=210.0)
    assert f.face_width_pixels == 210.0


def test_custom_symmetry_weights(face_landmarks):
    cfg = Config()
    cfg.symmetry.eyebrow_weight = 0.0
    cfg.symmetry.lip_weight = 0.0
    assert extract(face_landmarks, config=cfg).fsr == pytest.approx(1.0)


def test_serializes_with_client_keys(face_landmarks):
    data = extract(face_landmarks).to_dict()
    assert "fWHR" in data
    assert "nostrilSize_L" in data
    assert "eyeIrisColor_L" in data
    assert FaceFeatures.model_validate(data) == extract(face_landmarks)


def test_landmarkset_is_read_only(face_landmarks):
    with pytest.raises(ValueError):
        face_landmarks.points[0, 0] = 1.0
    assert isinstance(face_landmarks.points, np.ndarray)

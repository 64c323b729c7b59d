# SPDX-License-Identifier: Apache-2.0
"""Landmark geometry -> FaceFeatures.

The extractor is a pure function of its inputs: it keeps no per-frame state,
so repeated calls with the same landmarks, frame and platform produce equal
records. Platform corrections are looked up in the calibration table and
only ever applied to the ``display_*`` fields.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from facemetrics import landmarks as lm
from facemetrics.config import DEFAULT_CONFIG, Config
from facemetrics.features.sampling import sample_appearance
from facemetrics.logging_utils import get_logger
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures, LandmarkSet
from facemetrics.utils.geometry import angle_deg, clamp, distance, safe_ratio

LOGGER = get_logger(__name__)


def symmetry_score(
    eye_angles: tuple[float, float],
    eyebrow_angles: tuple[float, float],
    nostril_sizes: tuple[float, float],
    lip_angles: tuple[float, float],
    config: Config = DEFAULT_CONFIG,
) -> float:
    """Weighted symmetry score in ``[0, 1]``; 1 means perfectly symmetric.

    Angle differences use ``|left - |right||``. Each normalized term is
    clamped to ``[0, 1]`` before weighting.
    """
    sym = config.symmetry
    eps = config.calibration.min_denominator
    eye_diff = abs(eye_angles[0] - abs(eye_angles[1]))
    brow_diff = abs(eyebrow_angles[0] - abs(eyebrow_angles[1]))
    lip_diff = abs(lip_angles[0] - abs(lip_angles[1]))
    left, right = nostril_sizes
    nostril_diff = safe_ratio(abs(left - right), (left + right) / 2, eps)

    asymmetry = (
        sym.eye_weight * clamp(eye_diff / sym.eye_divisor_deg, 0.0, 1.0)
        + sym.eyebrow_weight * clamp(brow_diff / sym.eyebrow_divisor_deg, 0.0, 1.0)
        + sym.nostril_weight * clamp(nostril_diff, 0.0, 1.0)
        + sym.lip_weight * clamp(lip_diff / sym.lip_divisor_deg, 0.0, 1.0)
    )
    return clamp(1.0 - asymmetry, 0.0, 1.0)


class FeatureExtractor:
    """Compute FaceFeatures for one platform class.

    Args:
        platform: capture pipeline the landmarks come from.
        config: calibration, symmetry and sampling constants.
    """

    def __init__(
        self,
        platform: PlatformClass = PlatformClass.PC,
        config: Config | None = None,
    ):
        self.platform = platform
        self.config = config or DEFAULT_CONFIG

    def extract(
        self,
        landmarks: LandmarkSet | None,
        video_frame: np.ndarray | None = None,
        face_width_pixels: float | None = None,
    ) -> FaceFeatures:
        if landmarks is None or len(landmarks) == 0:
            return FaceFeatures()
        if not isinstance(landmarks, LandmarkSet):
            landmarks = LandmarkSet.from_points(landmarks)
        if len(landmarks) < lm.MIN_GEOMETRY_POINTS:
            LOGGER.warning(
                "landmark set too short",
                points=len(landmarks),
                required=lm.MIN_GEOMETRY_POINTS,
            )
            return FaceFeatures()

        fields = self._geometry(landmarks)
        fields.update(sample_appearance(video_frame, landmarks, self.config.sampling))
        if face_width_pixels is not None:
            fields["face_width_pixels"] = float(face_width_pixels)
        return FaceFeatures(**fields)

    def _geometry(self, pts: LandmarkSet) -> Dict[str, Any]:
        calib = self.config.calibration.for_platform(self.platform)
        eps = self.config.calibration.min_denominator

        face_width = abs(pts[lm.LEFT_EAR].x - pts[lm.RIGHT_EAR].x)
        face_height = abs(pts[lm.FOREHEAD].y - pts[lm.CHIN].y)
        nose_height = abs(pts[lm.NOSE_TIP].y - pts[lm.BETWEEN_EYES].y)
        # chord approximation of the curved bridge
        nose_length = distance(pts[lm.NOSE_BRIDGE_TOP], pts[lm.NOSE_TIP])
        lower_lip = abs(pts[lm.LOWER_LIP_BOTTOM].y - pts[lm.LOWER_LIP_INNER].y)
        nostril_l = abs(pts[lm.NOSE_TIP].y - pts[lm.LEFT_NOSTRIL].y)
        nostril_r = abs(pts[lm.NOSE_TIP].y - pts[lm.RIGHT_NOSTRIL].y)

        if calib.invert_face_ratio:
            fwhr = safe_ratio(face_height, face_width, eps)
        else:
            fwhr = safe_ratio(face_width, face_height, eps)
        if fwhr == 0.0:
            LOGGER.debug("degenerate face box", width=face_width, height=face_height)

        eye_l = angle_deg(pts[lm.LEFT_EYE_OUTER], pts[lm.LEFT_EYE_INNER])
        eye_r = angle_deg(pts[lm.RIGHT_EYE_INNER], pts[lm.RIGHT_EYE_OUTER])
        brow_l = angle_deg(pts[lm.LEFT_EYEBROW_OUTER], pts[lm.LEFT_EYEBROW_INNER])
        brow_r = angle_deg(pts[lm.RIGHT_EYEBROW_INNER], pts[lm.RIGHT_EYEBROW_OUTER])
        lip_l = angle_deg(pts[lm.LEFT_LIP_CORNER], pts[lm.UPPER_LIP_MID])
        lip_r = angle_deg(pts[lm.UPPER_LIP_MID], pts[lm.RIGHT_LIP_CORNER])

        fsr = symmetry_score(
            (eye_l, eye_r), (brow_l, brow_r), (nostril_l, nostril_r), (lip_l, lip_r),
            self.config,
        )

        inner_gap = distance(pts[lm.LEFT_EYE_INNER], pts[lm.RIGHT_EYE_INNER])
        eye_width = (
            distance(pts[lm.LEFT_EYE_OUTER], pts[lm.LEFT_EYE_INNER])
            + distance(pts[lm.RIGHT_EYE_INNER], pts[lm.RIGHT_EYE_OUTER])
        ) / 2

        return {
            "face_width": face_width,
            "face_height": face_height,
            "fwhr": fwhr,
            "fsr": fsr,
            "face_ratio": fwhr,
            "symmetry_score": fsr,
            "display_face_ratio": fwhr,
            "display_symmetry_score": fsr * 100.0,
            "eye_distance_ratio": safe_ratio(inner_gap, eye_width, eps),
            "nose_height": nose_height,
            "nose_length": nose_length,
            "nostril_size_l": nostril_l,
            "nostril_size_r": nostril_r,
            "lower_lip_thickness": lower_lip,
            "display_nose_height": nose_height * calib.nose_height_scale,
            "display_nose_length": nose_length * calib.nose_length_scale,
            "display_lower_lip_thickness": lower_lip * calib.lower_lip_scale,
            "eye_angle_l": eye_l,
            "eye_angle_r": eye_r,
            "eye_angle_deg_l": abs(eye_l),
            "eye_angle_deg_r": abs(eye_r),
            "eyebrow_angle_l": brow_l,
            "eyebrow_angle_r": brow_r,
            "lip_angle_l": lip_l,
            "lip_angle_r": lip_r,
        }


def extract(
    landmarks: LandmarkSet | None,
    video_frame: np.ndarray | None = None,
    platform: PlatformClass = PlatformClass.PC,
    config: Config | None = None,
) -> FaceFeatures:
    """Compute FaceFeatures; empty landmarks give an empty record."""
    return FeatureExtractor(platform, config).extract(landmarks, video_frame)

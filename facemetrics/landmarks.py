# SPDX-License-Identifier: Apache-2.0
"""MediaPipe FaceMesh landmark indices used by the metrics and the overlay.

Names follow the detector's convention: "left" is the subject's left side as
labelled by FaceMesh, which lands on the right half of an unmirrored frame.
"""

from __future__ import annotations

# face outline
LEFT_EAR = 234
RIGHT_EAR = 454
FOREHEAD = 10
CHIN = 152

# nose
NOSE_TIP = 1
NOSE_BRIDGE_TOP = 6
BETWEEN_EYES = 168
LEFT_NOSTRIL = 102
RIGHT_NOSTRIL = 331

# eyes
LEFT_EYE_OUTER = 33
LEFT_EYE_INNER = 133
RIGHT_EYE_INNER = 362
RIGHT_EYE_OUTER = 263
RIGHT_UNDER_EYE = 253

# refined mesh only (478 points)
LEFT_IRIS_CENTER = 468
RIGHT_IRIS_CENTER = 473

# eyebrows
LEFT_EYEBROW_MID = 66
RIGHT_EYEBROW_MID = 296
LEFT_EYEBROW_OUTER = 70
LEFT_EYEBROW_INNER = 105
RIGHT_EYEBROW_INNER = 334
RIGHT_EYEBROW_OUTER = 300

# mouth
UPPER_LIP_MID = 13
LOWER_LIP_BOTTOM = 15
LOWER_LIP_INNER = 17
LEFT_LIP_CORNER = 61
RIGHT_LIP_CORNER = 291

# cheek sample for skin tone
RIGHT_CHEEK = 425

GEOMETRY_INDICES = (
    LEFT_EAR,
    RIGHT_EAR,
    FOREHEAD,
    CHIN,
    NOSE_TIP,
    NOSE_BRIDGE_TOP,
    BETWEEN_EYES,
    LEFT_NOSTRIL,
    RIGHT_NOSTRIL,
    LEFT_EYE_OUTER,
    LEFT_EYE_INNER,
    RIGHT_EYE_INNER,
    RIGHT_EYE_OUTER,
    LEFT_EYEBROW_MID,
    RIGHT_EYEBROW_MID,
    LEFT_EYEBROW_OUTER,
    LEFT_EYEBROW_INNER,
    RIGHT_EYEBROW_INNER,
    RIGHT_EYEBROW_OUTER,
    UPPER_LIP_MID,
    LOWER_LIP_BOTTOM,
    LOWER_LIP_INNER,
    LEFT_LIP_CORNER,
    RIGHT_LIP_CORNER,
)

# minimum number of points a LandmarkSet needs for the geometric metrics
MIN_GEOMETRY_POINTS = max(GEOMETRY_INDICES) + 1

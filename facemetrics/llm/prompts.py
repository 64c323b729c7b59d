# SPDX-License-Identifier: Apache-2.0
"""
Prompt building and response parsing for feature descriptions.
"""
from __future__ import annotations

from typing import Dict

from facemetrics.schemas import AIResult, FaceFeatures
from facemetrics.viz.primitives import fmt

SYSTEM_PROMPT = """You write short, friendly face-reading style descriptions from facial measurements.

The first line of your answer is a one-line title. Everything after it is the description, in Markdown.
Refer to the person as "username". Where you describe a personality trait spectrum, write it as
"Trait - NN% - OppositeTrait" on its own line, using one of: Flexible, Judging, Observing, Empathy,
Exploring, Driving, Reflecting, Perceiving, Focus, Intuition, Thinking."""

DEFAULT_TITLE = "Analysis complete"
DEFAULT_DESCRIPTION = "The analysis has been completed."
USER_NAME_PLACEHOLDER = "username"


def format_feature_summary(features: FaceFeatures, user_name: str | None = None) -> Dict[str, str]:
    """Ordered, human-readable summary of the metrics sent to the model.

    Display values win over raw values; missing numbers read as 0.
    """
    f = features
    return {
        "username": user_name or "user",
        "face width-height ratio": fmt(f.display_value("face_ratio")),
        "face symmetry": fmt(f.display_value("symmetry_score"), 0, "%"),
        "eye tilt left/right": (
            f"{fmt(f.eye_angle_deg_l, 1, '°')} / {fmt(f.eye_angle_deg_r, 1, '°')}"
        ),
        "eye distance ratio": fmt(f.eye_distance_ratio),
        "nose length": fmt(f.display_value("nose_length")),
        "nose height": fmt(f.display_value("nose_height")),
        "nostril size left/right": f"{fmt(f.nostril_size_l)} / {fmt(f.nostril_size_r)}",
        "lower lip thickness": fmt(f.display_value("lower_lip_thickness")),
        "left iris color": f.eye_iris_color_l or "",
        "right iris color": f.eye_iris_color_r or "",
        "dark circle color": f.eye_dark_circle_color or "",
        "skin tone color": f.skin_tone_color or "",
    }


def build_user_prompt(summary: Dict[str, str]) -> str:
    return "\n".join(f"- {key} : {value}" for key, value in summary.items())


def parse_ai_response(text: str, user_name: str | None = None) -> AIResult:
    """Split a completion into title (first line) and description (the rest)."""
    name = user_name or "user"
    lines = (text or "").split("\n")
    title = lines[0].strip() or DEFAULT_TITLE
    description = "\n".join(lines[1:]).strip() or DEFAULT_DESCRIPTION
    return AIResult(
        title=title.replace(USER_NAME_PLACEHOLDER, name),
        description=description.replace(USER_NAME_PLACEHOLDER, name),
    )

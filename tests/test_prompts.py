from __future__ import annotations

from facemetrics.features.extractor import extract
from facemetrics.llm.prompts import build_user_prompt, format_feature_summary, parse_ai_response
from facemetrics.platform import PlatformClass
from facemetrics.schemas import FaceFeatures


def test_summary_prefers_display_values(face_landmarks):
    features = extract(face_landmarks, platform=PlatformClass.IOS)
    summary = format_feature_summary(features, "Mina")
    assert list(summary)[0] == "username"
    assert summary["username"] == "Mina"
    assert summary["nose length"] == f"{features.display_nose_length:.2f}"
    assert summary["face symmetry"] == f"{features.display_symmetry_score:.0f}%"
    assert summary["eye tilt left/right"] == "0.0° / 0.0°"
    assert summary["skin tone color"] == features.skin_tone_color


def test_summary_defaults():
    summary = format_feature_summary(FaceFeatures())
    assert summary["username"] == "user"
    assert summary["face width-height ratio"] == "0.00"


def test_user_prompt_lines():
    prompt = build_user_prompt({"username": "Mina", "nose length": "0.30"})
    assert prompt == "- username : Mina\n- nose length : 0.30"


def test_parse_response_splits_title():
    result = parse_ai_response("A calm face for username\nusername has balanced features.\nMore.", "Mina")
    assert result.title == "A calm face for Mina"
    assert result.description == "Mina has balanced features.\nMore."


def test_parse_response_fallbacks():
    result = parse_ai_response("\n")
    assert result.title == "Analysis complete"
    assert result.description == "The analysis has been completed."

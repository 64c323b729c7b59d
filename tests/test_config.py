from __future__ import annotations

import pytest
from pydantic import ValidationError

from facemetrics.config import Config, load_config
from facemetrics.platform import PlatformClass


def test_packaged_config_matches_defaults(monkeypatch):
    for var in ("LLM_ENABLED", "OPENAI_MODEL", "FACEMETRICS_SYSTEM_PROMPT"):
        monkeypatch.delenv(var, raising=False)
    assert load_config() == Config()


def test_calibration_table():
    cfg = Config()
    mobile = cfg.calibration.for_platform(PlatformClass.ANDROID)
    desktop = cfg.calibration.for_platform(PlatformClass.PC)
    assert mobile.invert_face_ratio and not desktop.invert_face_ratio
    assert mobile.face_ratio_bar_max == 2.5
    assert desktop.face_ratio_bar_max == 3.0
    assert mobile.nose_height_scale == pytest.approx(1 / 3)


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
    monkeypatch.setenv("LLM_ENABLED", "false")
    monkeypatch.setenv("FACEMETRICS_SYSTEM_PROMPT", "Be kind.")
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.llm.model == "gpt-4o"
    assert cfg.llm.enabled is False
    assert cfg.llm.system_prompt == "Be kind."


def test_yaml_overrides(tmp_path, monkeypatch):
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text("overlay:\n  show_platform_info: true\npanel:\n  stretch_y: 1.05\n")
    cfg = load_config(path)
    assert cfg.overlay.show_platform_info is True
    assert cfg.panel.stretch_y == 1.05
    assert cfg.overlay.circle_radius == 20.0


def test_invalid_yaml_value(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("overlay:\n  circle_radius: big\n")
    with pytest.raises(ValidationError):
        load_config(path)

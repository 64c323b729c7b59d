# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from facemetrics.platform import PlatformClass


class PlatformCalibration(BaseModel):
    """Per-capture-pipeline corrections applied to display values."""

    invert_face_ratio: bool = False
    nose_length_scale: float = 1.0
    nose_height_scale: float = 1.0
    lower_lip_scale: float = 1.0
    face_ratio_bar_max: float = 3.0


def _mobile_calibration() -> PlatformCalibration:
    return PlatformCalibration(
        invert_face_ratio=True,
        nose_length_scale=3.0,
        nose_height_scale=1.0 / 3.0,
        lower_lip_scale=3.0,
        face_ratio_bar_max=2.5,
    )


class CalibrationConfig(BaseModel):
    mobile: PlatformCalibration = Field(default_factory=_mobile_calibration)
    desktop: PlatformCalibration = Field(default_factory=PlatformCalibration)
    min_denominator: float = 1e-6

    def for_platform(self, platform: PlatformClass) -> PlatformCalibration:
        return self.mobile if platform.is_mobile else self.desktop


class SymmetryConfig(BaseModel):
    eye_weight: float = 0.35
    eyebrow_weight: float = 0.20
    nostril_weight: float = 0.20
    lip_weight: float = 0.25
    eye_divisor_deg: float = 10.0
    eyebrow_divisor_deg: float = 15.0
    lip_divisor_deg: float = 12.0


class SamplingConfig(BaseModel):
    window: int = 3
    iris_alpha: float = 0.9
    default_iris_color: str = "rgba(101, 67, 33, 0.9)"
    default_dark_circle_color: str = "#472D22"
    default_skin_tone_color: str = "#E8C4A2"


class OverlayConfig(BaseModel):
    base_face_width_px: float = 300.0
    min_scale: float = 0.5
    max_scale: float = 1.5
    hide_below_scale: float = 0.6
    circle_radius: float = 20.0
    small_circle_radius: float = 15.0
    inner_circle_radius: float = 10.0
    font_size: float = 12.0
    font_family: str = "Arial"
    fill_color: str = "rgba(255, 255, 255, 0.2)"
    stroke_color: str = "rgba(255, 255, 255, 0.3)"
    text_color: str = "#FFFFFF"
    temple_offset_px: float = 40.0
    outer_temple_offset_px: float = 35.0
    under_eye_offset_px: float = 40.0
    cheek_offset_px: float = 30.0
    lower_lip_offset_px: float = 15.0
    nose_box_width: float = 30.0
    show_platform_info: bool = False


class PanelConfig(BaseModel):
    min_height_px: float = 20.0
    min_bar_width_px: float = 220.0
    corner_radius: float = 10.0
    stretch_y: float = 1.0
    background_color: str = "rgba(255, 255, 255, 0.2)"
    border_color: str = "rgba(255, 255, 255, 0.1)"
    track_color: str = "rgba(255, 255, 255, 0.2)"
    bar_color: str = "rgba(255, 255, 255, 0.8)"
    bar_height: float = 10.0
    bar_radius: float = 5.0
    min_fill_px: float = 10.0


class LLMConfig(BaseModel):
    enabled: bool = True
    model: str = "gpt-4o-mini"
    max_tokens: int = 2048
    temperature: float = 1.0
    top_p: float = 1.0
    timeout_s: int = 30
    max_attempts: int = 3
    backoff_s: float = 1.0
    system_prompt: str | None = None
    default_user_name: str = "user"


class Config(BaseModel):
    calibration: CalibrationConfig = Field(default_factory=CalibrationConfig)
    symmetry: SymmetryConfig = Field(default_factory=SymmetryConfig)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    overlay: OverlayConfig = Field(default_factory=OverlayConfig)
    panel: PanelConfig = Field(default_factory=PanelConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)


def load_config(path: Path | None = None) -> Config:
    load_dotenv()
    path = path or Path(__file__).with_name("config.yaml")
    if path.exists():
        data = yaml.safe_load(path.read_text()) or {}
        cfg = Config(**data)
    else:
        cfg = Config()

    # environment overrides
    if os.getenv("LLM_ENABLED") is not None:
        cfg.llm.enabled = os.getenv("LLM_ENABLED", "").lower() == "true"
    model = os.getenv("OPENAI_MODEL")
    if model:
        cfg.llm.model = model
    prompt = os.getenv("FACEMETRICS_SYSTEM_PROMPT")
    if prompt:
        cfg.llm.system_prompt = prompt
    return cfg


DEFAULT_CONFIG = Config()

# SPDX-License-Identifier: Apache-2.0
"""Text description of a FaceFeatures record via a hosted language model."""

from facemetrics.llm.base import (
    LLMAuthenticationError,
    LLMConfigError,
    LLMEmptyResponseError,
    LLMError,
    LLMRateLimitError,
    LLMServerError,
    LLMTimeoutError,
)
from facemetrics.llm.openai_client import DescriptionClient
from facemetrics.llm.prompts import build_user_prompt, format_feature_summary, parse_ai_response

__all__ = [
    "DescriptionClient",
    "LLMAuthenticationError",
    "LLMConfigError",
    "LLMEmptyResponseError",
    "LLMError",
    "LLMRateLimitError",
    "LLMServerError",
    "LLMTimeoutError",
    "build_user_prompt",
    "format_feature_summary",
    "parse_ai_response",
]

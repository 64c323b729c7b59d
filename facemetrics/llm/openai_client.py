# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import os
import time
from typing import Any

import openai
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from facemetrics.config import LLMConfig, load_config
from facemetrics.llm.base import (
    TRANSIENT_ERRORS,
    LLMAuthenticationError,
    LLMConfigError,
    LLMEmptyResponseError,
    LLMError,
    LLMRateLimitError,
    LLMServerError,
    LLMTimeoutError,
)
from facemetrics.llm.prompts import (
    SYSTEM_PROMPT,
    build_user_prompt,
    format_feature_summary,
    parse_ai_response,
)
from facemetrics.logging_utils import get_logger
from facemetrics.schemas import AIResult, FaceFeatures

LOGGER = get_logger(__name__)


class DescriptionClient:
    """Request a titled description of FaceFeatures from the OpenAI chat API.

    ``client`` may be any object exposing ``chat.completions.create``; when
    omitted an :class:`openai.OpenAI` client is built from ``OPENAI_API_KEY``.
    """

    def __init__(self, config: LLMConfig | None = None, client: Any | None = None):
        self.config = config or load_config().llm
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            api_key = os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise LLMConfigError("OPENAI_API_KEY is not set")
            self._client = openai.OpenAI(api_key=api_key, timeout=self.config.timeout_s)
        return self._client

    def describe(self, features: FaceFeatures, user_name: str | None = None) -> AIResult:
        if not self.config.enabled:
            raise LLMConfigError("LLM descriptions are disabled")
        name = user_name or self.config.default_user_name
        messages = [
            {"role": "system", "content": self.config.system_prompt or SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(format_feature_summary(features, name))},
        ]

        start = time.time()
        text = self._complete_with_retries(messages)
        LOGGER.info(
            "description received",
            model=self.config.model,
            duration_s=round(time.time() - start, 3),
            chars=len(text),
        )
        return parse_ai_response(text, name)

    def _complete_with_retries(self, messages: list[dict]) -> str:
        @retry(
            stop=stop_after_attempt(self.config.max_attempts),
            wait=wait_exponential(multiplier=self.config.backoff_s, min=self.config.backoff_s, max=10),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            reraise=True,
        )
        def _do_complete() -> str:
            return self._complete(messages)

        return _do_complete()

    def _complete(self, messages: list[dict]) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.config.model,
                messages=messages,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
                top_p=self.config.top_p,
            )
        except openai.AuthenticationError as e:
            raise LLMAuthenticationError(f"OpenAI authentication failed: {e}") from e
        except openai.RateLimitError as e:
            LOGGER.warning("rate limited", error=str(e))
            raise LLMRateLimitError(f"OpenAI rate limit: {e}") from e
        except openai.APITimeoutError as e:
            LOGGER.warning("request timed out", error=str(e))
            raise LLMTimeoutError(f"OpenAI timeout: {e}") from e
        except (openai.InternalServerError, openai.APIConnectionError) as e:
            LOGGER.warning("transient provider error", error=str(e))
            raise LLMServerError(f"OpenAI server error: {e}") from e
        except openai.APIError as e:
            raise LLMError(f"OpenAI API error: {e}") from e

        choices = getattr(response, "choices", None) or []
        if not choices:
            raise LLMEmptyResponseError("No choices in completion")
        content = choices[0].message.content
        if not content:
            raise LLMEmptyResponseError("Empty completion content")
        return content

# SPDX-License-Identifier: Apache-2.0
"""
Error types for the description service.
"""
from __future__ import annotations


class LLMError(Exception):
    """Base exception for LLM-related errors"""

    user_message = "Something went wrong during the analysis. Please try again shortly."


class LLMConfigError(LLMError):
    """Service is not configured (missing API key or prompt)"""

    user_message = "The service is not configured correctly. Please contact the administrator."


class LLMAuthenticationError(LLMError):
    """Credentials were rejected"""

    user_message = "The service could not be authenticated. Please contact the administrator."


class LLMRateLimitError(LLMError):
    """Rate limit exceeded"""

    user_message = "The service is busy right now. Please try again shortly."


class LLMTimeoutError(LLMError):
    """Request timed out"""

    user_message = "The analysis timed out. Please try again."


class LLMServerError(LLMError):
    """Transient failure on the provider side (5xx or connection)"""

    user_message = "The service had a temporary problem. Please try again shortly."


class LLMEmptyResponseError(LLMError):
    """Completion carried no content"""

    user_message = "No analysis result was returned. Please try again."


TRANSIENT_ERRORS = (LLMRateLimitError, LLMTimeoutError, LLMServerError)

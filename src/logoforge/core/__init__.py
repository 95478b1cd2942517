r"""Core configuration and validation shared by the executor and the
brand studio."""

from __future__ import annotations

__all__ = [
    "API_KEY_ENV_VARS",
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_LANGUAGE",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TEXT_MODEL",
    "QUOTA_STATUS_CODES",
    "UNAVAILABLE_STATUS_CODES",
    "RetryConfig",
    "StudioConfig",
    "validate_retry_params",
]

from logoforge.core.config import (
    API_KEY_ENV_VARS,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TEXT_MODEL,
    QUOTA_STATUS_CODES,
    UNAVAILABLE_STATUS_CODES,
    RetryConfig,
    StudioConfig,
)
from logoforge.core.validation import validate_retry_params

r"""Configuration dataclasses and defaults for the retry executor and the
brand studio.

This module provides configuration constants and dataclass-based
configuration objects for :class:`logoforge.retry.RetryExecutor` and
:class:`logoforge.studio.BrandStudio`.
"""

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
]

import os
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from logoforge.core.validation import validate_model_name, validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from logoforge.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo


# Default maximum number of attempts, the first one included
DEFAULT_MAX_RETRIES = 3

# Delay before the first retry, in seconds
# Wait time doubles on every retry: 2s, 4s, 8s, ...
DEFAULT_INITIAL_DELAY = 2.0

# 429: Too Many Requests - Rate limiting or exhausted quota
QUOTA_STATUS_CODES = (429,)

# 503: Service Unavailable - Model overloaded or temporarily down
UNAVAILABLE_STATUS_CODES = (503,)

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"

# Language used for every piece of generated copy
DEFAULT_LANGUAGE = "Mexican Spanish"

# Environment variables holding the Gemini credential, in lookup order
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


@dataclass
class RetryConfig:
    """Configuration for the retry executor.

    Args:
        max_retries: Maximum number of attempts, the first one included.
            Must be >= 1.
        initial_delay: Delay in seconds before the first retry. Must be >= 0.
        retry_if: Optional predicate replacing the default failure
            classification. It receives the raised exception and returns
            ``True`` when the operation should be retried.
        on_attempt: Optional callback called before each attempt.
        on_retry: Optional callback called before each backoff delay.
        on_success: Optional callback called when the operation succeeds.
        on_failure: Optional callback called when the final failure is
            about to propagate.

    Example:
        ```pycon
        >>> from logoforge.core.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_retries, config.initial_delay
        (3, 2.0)
        >>> config.merge(max_retries=5).max_retries
        5
        >>> config.max_retries  # Original unchanged
        3

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay: float = DEFAULT_INITIAL_DELAY
    retry_if: Callable[[BaseException], bool] | None = None
    on_attempt: Callable[[AttemptInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        validate_retry_params(max_retries=self.max_retries, initial_delay=self.initial_delay)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with the specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


@dataclass
class StudioConfig:
    """Configuration for :class:`logoforge.studio.BrandStudio`.

    Args:
        api_key: The Gemini API key. ``None`` means the credential is
            missing, see :func:`logoforge.client.create_genai_client`.
        text_model: Model used for text and JSON responses.
        image_model: Model used for image responses.
        language: Language of every piece of generated copy.
        retry: Retry configuration applied to every model call.

    Example:
        ```pycon
        >>> from logoforge.core.config import StudioConfig
        >>> config = StudioConfig.from_env({"GEMINI_API_KEY": "secret"})
        >>> config.api_key
        'secret'
        >>> config.text_model
        'gemini-2.5-flash'

        ```
    """

    api_key: str | None = None
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    language: str = DEFAULT_LANGUAGE
    retry: RetryConfig = field(default_factory=RetryConfig)

    def __post_init__(self) -> None:
        validate_model_name(self.text_model, "text_model")
        validate_model_name(self.image_model, "image_model")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **kwargs: Any) -> StudioConfig:
        """Build a config reading the API key from the environment.

        The first non-empty variable of ``API_KEY_ENV_VARS`` wins.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
            **kwargs: Other StudioConfig fields.

        Returns:
            The studio configuration.
        """
        environ = os.environ if environ is None else environ
        api_key = next((environ[name] for name in API_KEY_ENV_VARS if environ.get(name)), None)
        return cls(api_key=api_key, **kwargs)

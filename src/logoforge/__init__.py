r"""logoforge - Logo and brand asset generation with resilient model
calls.

This package turns business attributes or an uploaded logo into prompts
for Google Gemini and returns the generated logo and derived brand assets
(colour palette, typography, mockups, social posts, brand guidelines).
Every model call runs through an asynchronous retry executor that retries
rate limiting and temporary unavailability with exponential backoff and
propagates any other failure unchanged.

Key Features:
    - Resilient executor: 3 attempts by default, 2s initial delay doubled
      on every retry, no jitter
    - Strict failure classification on structured status codes, with a
      message-matching fallback only when no status exists
    - Lifecycle callbacks and structured JSON logging with correlation IDs
    - Async brand studio wrapping an explicitly constructed Gemini client

Example:
    ```pycon
    >>> from logoforge import with_retry
    >>> result = await with_retry(lambda: call_model(prompt))  # doctest: +SKIP
    >>> from logoforge import BrandStudio, LogoRequest
    >>> async with BrandStudio() as studio:  # doctest: +SKIP
    ...     result = await studio.design_logo(LogoRequest("Café Luna", "Coffee shop"))
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "BrandStudio",
    "EditRequest",
    "FailureKind",
    "GenerationError",
    "LogoForgeError",
    "LogoRequest",
    "MockupKind",
    "RetryConfig",
    "RetryExecutor",
    "StudioConfig",
    "__version__",
    "classify_failure",
    "create_genai_client",
    "retryable",
    "with_retry",
]

from importlib.metadata import PackageNotFoundError, version

from logoforge.client import create_genai_client
from logoforge.core.config import RetryConfig, StudioConfig
from logoforge.exceptions import GenerationError, LogoForgeError
from logoforge.models import EditRequest, LogoRequest, MockupKind
from logoforge.retry import FailureKind, RetryExecutor, classify_failure, retryable, with_retry
from logoforge.studio import BrandStudio

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

r"""Parameter validation utilities for the retry executor.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry
executor.
"""

from __future__ import annotations

__all__ = ["validate_model_name", "validate_retry_params"]


def validate_retry_params(max_retries: int, initial_delay: float) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of attempts, the first one included.
            Must be >= 1.
        initial_delay: Delay in seconds before the first retry. Must be >= 0.
            Each following retry waits twice as long as the previous one.

    Raises:
        ValueError: If max_retries is lower than 1 or initial_delay is
            negative.

    Example:
        ```pycon
        >>> from logoforge.core.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3, initial_delay=2.0)
        >>> validate_retry_params(max_retries=1, initial_delay=0.0)
        >>> validate_retry_params(max_retries=0, initial_delay=2.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 1, got 0

        ```
    """
    if max_retries < 1:
        msg = f"max_retries must be >= 1, got {max_retries}"
        raise ValueError(msg)
    if initial_delay < 0:
        msg = f"initial_delay must be >= 0, got {initial_delay}"
        raise ValueError(msg)


def validate_model_name(name: str, field_name: str) -> None:
    """Validate a generative model name.

    Args:
        name: The model name, for example ``"gemini-2.5-flash"``.
        field_name: The configuration field, used in the error message.

    Raises:
        ValueError: If the model name is empty or blank.
    """
    if not name or not name.strip():
        msg = f"{field_name} must be a non-empty model name, got {name!r}"
        raise ValueError(msg)

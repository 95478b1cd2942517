r"""Callback types and data structures for observability.

This module provides callback support for the retry executor, enabling
users to hook into the retry lifecycle for logging, metrics or progress
reporting.

The callback system provides four lifecycle hooks:
- on_attempt: Called before each attempt
- on_retry: Called before each backoff delay
- on_success: Called when the operation succeeds
- on_failure: Called when the final failure is about to propagate

Example:
    ```pycon
    >>> from logoforge.callbacks import RetryInfo
    >>> from logoforge.retry import with_retry
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"Retry {info.attempt}/{info.max_retries} in {info.delay}s")
    ...
    >>> result = await with_retry(operation, on_retry=log_retry)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptInfo",
    "FailureInfo",
    "RetryInfo",
    "SuccessInfo",
    "invoke_on_attempt",
    "invoke_on_failure",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from logoforge.retry.classifier import FailureKind


@dataclass
class AttemptInfo:
    """Information passed to on_attempt callback.

    Attributes:
        operation: Name of the wrapped operation.
        attempt: The attempt about to run (1-indexed).
        max_retries: Maximum number of attempts.
    """

    operation: str
    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        operation: Name of the wrapped operation.
        attempt: The attempt that will run after the delay (1-indexed).
            The first retry is attempt 2.
        max_retries: Maximum number of attempts.
        delay: Seconds waited before the retry.
        error: The failure that triggered the retry.
        failure_kind: Classification of the failure.
    """

    operation: str
    attempt: int
    max_retries: int
    delay: float
    error: BaseException
    failure_kind: FailureKind


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        operation: Name of the wrapped operation.
        attempt: The attempt that succeeded (1-indexed).
        max_retries: Maximum number of attempts.
        result: The value returned by the operation.
        total_time: Seconds spent on all attempts, delays included.
    """

    operation: str
    attempt: int
    max_retries: int
    result: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        operation: Name of the wrapped operation.
        attempt: The final attempt (1-indexed).
        max_retries: Maximum number of attempts.
        error: The failure about to propagate.
        failure_kind: Classification of the failure.
        exhausted: ``True`` when every attempt failed retryably,
            ``False`` for a terminal failure.
        total_time: Seconds spent on all attempts, delays included.
    """

    operation: str
    attempt: int
    max_retries: int
    error: BaseException
    failure_kind: FailureKind
    exhausted: bool
    total_time: float


def invoke_on_attempt(
    on_attempt: Callable[[AttemptInfo], None] | None,
    *,
    operation: str,
    attempt: int,
    max_retries: int,
) -> None:
    """Invoke on_attempt callback if provided.

    Args:
        on_attempt: Optional callback to invoke before each attempt.
        operation: Name of the wrapped operation.
        attempt: The current attempt (0-indexed internally). The callback
            receives this as a 1-indexed value.
        max_retries: Maximum number of attempts.
    """
    if on_attempt is not None:
        on_attempt(AttemptInfo(operation=operation, attempt=attempt + 1, max_retries=max_retries))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    operation: str,
    attempt: int,
    max_retries: int,
    delay: float,
    error: BaseException,
    failure_kind: FailureKind,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each backoff delay.
        operation: Name of the wrapped operation.
        attempt: The attempt that just failed (0-indexed internally). The
            callback receives the next attempt as a 1-indexed value, so
            after the first failure (attempt=0) it receives attempt=2.
        max_retries: Maximum number of attempts.
        delay: Seconds about to be waited.
        error: The failure that triggered the retry.
        failure_kind: Classification of the failure.
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                operation=operation,
                attempt=attempt + 2,
                max_retries=max_retries,
                delay=delay,
                error=error,
                failure_kind=failure_kind,
            )
        )


def invoke_on_success(
    on_success: Callable[[SuccessInfo], None] | None,
    *,
    operation: str,
    attempt: int,
    max_retries: int,
    result: Any,
    start_time: float,
) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke on success.
        operation: Name of the wrapped operation.
        attempt: The attempt that succeeded (0-indexed internally).
        max_retries: Maximum number of attempts.
        result: The value returned by the operation.
        start_time: Timestamp when the execution started.
    """
    if on_success is not None:
        on_success(
            SuccessInfo(
                operation=operation,
                attempt=attempt + 1,
                max_retries=max_retries,
                result=result,
                total_time=time.time() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    operation: str,
    attempt: int,
    max_retries: int,
    error: BaseException,
    failure_kind: FailureKind,
    exhausted: bool,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided.

    Args:
        on_failure: Optional callback to invoke on the final failure.
        operation: Name of the wrapped operation.
        attempt: The final attempt (0-indexed internally).
        max_retries: Maximum number of attempts.
        error: The failure about to propagate.
        failure_kind: Classification of the failure.
        exhausted: Whether the attempt budget was exhausted.
        start_time: Timestamp when the execution started.
    """
    if on_failure is not None:
        on_failure(
            FailureInfo(
                operation=operation,
                attempt=attempt + 1,
                max_retries=max_retries,
                error=error,
                failure_kind=failure_kind,
                exhausted=exhausted,
                total_time=time.time() - start_time,
            )
        )

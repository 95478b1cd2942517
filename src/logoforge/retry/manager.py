r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined callbacks at various points in the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from logoforge.callbacks import (
    invoke_on_attempt,
    invoke_on_failure,
    invoke_on_retry,
    invoke_on_success,
)

if TYPE_CHECKING:
    from logoforge.core.config import RetryConfig
    from logoforge.retry.classifier import FailureKind


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attributes:
        config: Retry configuration holding the callback functions.
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    def on_attempt(self, operation: str, attempt: int) -> None:
        invoke_on_attempt(
            self.config.on_attempt,
            operation=operation,
            attempt=attempt,
            max_retries=self.config.max_retries,
        )

    def on_retry(
        self,
        operation: str,
        attempt: int,
        delay: float,
        error: BaseException,
        failure_kind: FailureKind,
    ) -> None:
        invoke_on_retry(
            self.config.on_retry,
            operation=operation,
            attempt=attempt,
            max_retries=self.config.max_retries,
            delay=delay,
            error=error,
            failure_kind=failure_kind,
        )

    def on_success(self, operation: str, attempt: int, result: Any, start_time: float) -> None:
        invoke_on_success(
            self.config.on_success,
            operation=operation,
            attempt=attempt,
            max_retries=self.config.max_retries,
            result=result,
            start_time=start_time,
        )

    def on_failure(
        self,
        operation: str,
        attempt: int,
        error: BaseException,
        failure_kind: FailureKind,
        exhausted: bool,
        start_time: float,
    ) -> None:
        """Invoke on_failure callback.

        Args:
            operation: Name of the wrapped operation.
            attempt: Final attempt number (0-indexed).
            error: The failure about to propagate.
            failure_kind: Classification of the failure.
            exhausted: Whether the attempt budget was exhausted.
            start_time: Timestamp when the execution started.
        """
        invoke_on_failure(
            self.config.on_failure,
            operation=operation,
            attempt=attempt,
            max_retries=self.config.max_retries,
            error=error,
            failure_kind=failure_kind,
            exhausted=exhausted,
            start_time=start_time,
        )

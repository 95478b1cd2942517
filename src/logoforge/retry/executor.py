r"""Asynchronous retry executor.

This module provides the RetryExecutor class that runs an asynchronous
unit of work and retries it with exponential backoff when it fails for a
transient upstream reason (rate limiting, temporary unavailability).
Terminal failures, and the last failure once the attempt budget is
exhausted, propagate unchanged.
"""

from __future__ import annotations

__all__ = ["RetryExecutor", "retryable", "with_retry"]

import asyncio
import functools
import logging
import time
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from logoforge.core.config import DEFAULT_INITIAL_DELAY, DEFAULT_MAX_RETRIES, RetryConfig
from logoforge.retry.decider import EXHAUSTED_REASON, RetryDecider
from logoforge.retry.manager import CallbackManager
from logoforge.retry.state import RetryState
from logoforge.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from logoforge.callbacks import AttemptInfo, FailureInfo, RetryInfo, SuccessInfo

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")
P = ParamSpec("P")


def _operation_name(operation: Callable[..., object]) -> str:
    return getattr(operation, "__qualname__", None) or type(operation).__name__


class RetryExecutor:
    """Runs async operations with automatic retry logic.

    The executor only holds configuration. The attempt counter, the
    current delay and the last failure live in a :class:`RetryState`
    created by each :meth:`execute` call, so one executor can serve any
    number of concurrent invocations.

    The executor orchestrates the following components:
    - RetryDecider: Classifies failures and decides whether to retry
    - CallbackManager: Invokes user-defined callbacks at lifecycle events

    Args:
        config: Retry configuration. Defaults to ``RetryConfig()``
            (3 attempts, 2 seconds initial delay).

    Example:
        ```pycon
        >>> import asyncio
        >>> from logoforge.core.config import RetryConfig
        >>> from logoforge.retry import RetryExecutor
        >>> async def fetch() -> str:
        ...     return "OK"
        ...
        >>> executor = RetryExecutor(RetryConfig(max_retries=3, initial_delay=2.0))
        >>> asyncio.run(executor.execute(fetch))
        'OK'

        ```
    """

    def __init__(self, config: RetryConfig | None = None) -> None:
        self.config = config if config is not None else RetryConfig()
        self.decider: RetryDecider = RetryDecider(self.config.retry_if)
        self.callbacks: CallbackManager = CallbackManager(self.config)

    async def execute(self, operation: Callable[[], Awaitable[T]], *, name: str | None = None) -> T:
        """Execute an async operation with automatic retry logic.

        Attempts the operation up to ``max_retries`` times. The retry loop
        handles:
        - Success: Returns the result immediately, without any delay
        - Transient failure (quota or availability) with attempts left:
          waits the current delay, doubles it, retries
        - Terminal failure: Re-raises it immediately
        - Transient failure on the last attempt: Re-raises it

        Note:
            Failures are re-raised as the same exception object, never
            wrapped. Only ``Exception`` subclasses are inspected, so
            cancellation propagates untouched.

        Args:
            operation: Zero-argument callable returning an awaitable.
                It is called once per attempt.
            name: Name used in logs and callbacks. Defaults to the
                operation's qualified name.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The terminal failure, or the last transient failure
                once all attempts are used.
        """
        operation_name = name or _operation_name(operation)
        max_retries = self.config.max_retries
        state = RetryState(max_retries=max_retries, current_delay=self.config.initial_delay)
        start_time = time.time()

        while True:
            self.callbacks.on_attempt(operation_name, state.attempt)
            try:
                result = await operation()
            except Exception as exc:
                state.record_failure(exc)
                kind = self.decider.classify(exc)
                should_retry, reason = self.decider.should_retry(exc, kind, state)

                if not should_retry:
                    exhausted = reason == EXHAUSTED_REASON
                    logger.debug(
                        f"{operation_name} failed on attempt {state.attempt + 1}/{max_retries} "
                        f"({reason}): {type(exc).__name__}: {exc}"
                    )
                    self.callbacks.on_failure(
                        operation_name, state.attempt, exc, kind, exhausted, start_time
                    )
                    raise

                delay = state.current_delay
                log_structured(
                    logger,
                    logging.WARNING,
                    f"{operation_name} failed ({reason}), retrying in {delay:.2f}s "
                    f"(attempt {state.attempt + 2}/{max_retries})",
                    operation=operation_name,
                    attempt=state.attempt + 1,
                    max_retries=max_retries,
                    delay=delay,
                    failure_kind=kind.value,
                )
                self.callbacks.on_retry(operation_name, state.attempt, delay, exc, kind)
                await asyncio.sleep(delay)
                state.advance()
                continue

            if state.attempt > 0:
                logger.debug(f"{operation_name} succeeded on attempt {state.attempt + 1}")
            self.callbacks.on_success(operation_name, state.attempt, result, start_time)
            return result


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    retry_if: Callable[[BaseException], bool] | None = None,
    on_attempt: Callable[[AttemptInfo], None] | None = None,
    on_retry: Callable[[RetryInfo], None] | None = None,
    on_success: Callable[[SuccessInfo], None] | None = None,
    on_failure: Callable[[FailureInfo], None] | None = None,
    name: str | None = None,
) -> T:
    """Run an async operation with automatic retry logic.

    Functional shortcut for ``RetryExecutor(RetryConfig(...)).execute``.

    Args:
        operation: Zero-argument callable returning an awaitable.
        max_retries: Maximum number of attempts, the first one included.
        initial_delay: Seconds to wait before the first retry.
        retry_if: Optional predicate replacing the default classification.
        on_attempt: Optional callback called before each attempt.
        on_retry: Optional callback called before each backoff delay.
        on_success: Optional callback called on success.
        on_failure: Optional callback called on the final failure.
        name: Name used in logs and callbacks.

    Returns:
        The value returned by the first successful attempt.

    Example:
        ```pycon
        >>> from logoforge.retry import with_retry
        >>> image = await with_retry(
        ...     lambda: client.aio.models.generate_content(model=model, contents=prompt),
        ...     max_retries=5,
        ... )  # doctest: +SKIP

        ```
    """
    config = RetryConfig(
        max_retries=max_retries,
        initial_delay=initial_delay,
        retry_if=retry_if,
        on_attempt=on_attempt,
        on_retry=on_retry,
        on_success=on_success,
        on_failure=on_failure,
    )
    return await RetryExecutor(config).execute(operation, name=name)


def retryable(
    config: RetryConfig | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Decorate an ``async def`` so every call runs through the retry
    executor.

    Args:
        config: Retry configuration. Defaults to ``RetryConfig()``.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> from logoforge.core.config import RetryConfig
        >>> from logoforge.retry import retryable
        >>> @retryable(RetryConfig(max_retries=5))
        ... async def generate(prompt: str) -> str:
        ...     return prompt.upper()
        ...

        ```
    """
    executor = RetryExecutor(config)

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await executor.execute(lambda: func(*args, **kwargs), name=func.__qualname__)

        return wrapper

    return decorator

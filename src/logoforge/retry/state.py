r"""Per-invocation loop state of the retry executor."""

from __future__ import annotations

__all__ = ["RetryState"]

from dataclasses import dataclass


@dataclass
class RetryState:
    """Attempt record of a single executor invocation.

    A new record is created by every call to
    :meth:`logoforge.retry.RetryExecutor.execute` and discarded when the
    call settles, so concurrent invocations never share it.

    Attributes:
        max_retries: Maximum number of attempts, the first one included.
        current_delay: Seconds to wait before the next retry. Doubles
            after each retryable failure.
        attempt: Index of the attempt in progress (0-indexed).
        last_error: The most recent failure, if any. Kept for inspection
            only; the executor re-raises the exception it caught.

    Example:
        ```pycon
        >>> from logoforge.retry.state import RetryState
        >>> state = RetryState(max_retries=3, current_delay=2.0)
        >>> state.has_attempts_left
        True
        >>> state.advance()
        >>> state.attempt, state.current_delay
        (1, 4.0)
        >>> state.advance()
        >>> state.has_attempts_left
        False

        ```
    """

    max_retries: int
    current_delay: float
    attempt: int = 0
    last_error: BaseException | None = None

    @property
    def has_attempts_left(self) -> bool:
        """Whether another attempt may follow the one in progress."""
        return self.attempt + 1 < self.max_retries

    def record_failure(self, error: BaseException) -> None:
        self.last_error = error

    def advance(self) -> None:
        """Move to the next attempt and double the delay."""
        self.attempt += 1
        self.current_delay *= 2

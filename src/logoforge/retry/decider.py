r"""Retry decision logic for the retry executor.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether a failed attempt should be retried, based on the
failure classification, the remaining attempt budget and an optional
custom predicate.
"""

from __future__ import annotations

__all__ = ["EXHAUSTED_REASON", "RetryDecider"]

import logging
from typing import TYPE_CHECKING

from logoforge.retry.classifier import FailureKind, classify_exception

if TYPE_CHECKING:
    from collections.abc import Callable

    from logoforge.retry.state import RetryState

logger: logging.Logger = logging.getLogger(__name__)

EXHAUSTED_REASON = "max retries exhausted"


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        retry_if: Optional predicate replacing the default classification
            when deciding retryability. The failure is still classified for
            reporting.
        classifier: Function classifying an exception.

    Example:
        ```pycon
        >>> from logoforge.exceptions import GenerationError
        >>> from logoforge.retry.decider import RetryDecider
        >>> from logoforge.retry.state import RetryState
        >>> decider = RetryDecider()
        >>> error = GenerationError("rate limited", status_code=429)
        >>> kind = decider.classify(error)
        >>> decider.should_retry(error, kind, RetryState(max_retries=3, current_delay=2.0))
        (True, 'transient_quota')

        ```
    """

    def __init__(
        self,
        retry_if: Callable[[BaseException], bool] | None = None,
        classifier: Callable[[BaseException], FailureKind] = classify_exception,
    ) -> None:
        self.retry_if = retry_if
        self.classifier = classifier

    def classify(self, error: BaseException) -> FailureKind:
        return self.classifier(error)

    def should_retry(
        self,
        error: BaseException,
        kind: FailureKind,
        state: RetryState,
    ) -> tuple[bool, str]:
        """Determine if a failure should trigger a retry.

        Args:
            error: The exception raised by the attempt.
            kind: The classification of ``error``.
            state: The loop state of the current invocation.

        Returns:
            Tuple of (should_retry, reason).
        """
        if self.retry_if is not None:
            if not self.retry_if(error):
                return (False, "retry_if returned False")
            reason = "retry_if predicate"
        elif not kind.is_transient:
            logger.debug(f"Non-retryable failure: {type(error).__name__}: {error}")
            return (False, kind.value)
        else:
            reason = kind.value

        if not state.has_attempts_left:
            return (False, EXHAUSTED_REASON)
        return (True, reason)

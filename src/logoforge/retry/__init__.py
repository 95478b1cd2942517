r"""Retry package implementing the resilient operation executor.

Public API:
    - RetryExecutor: Asynchronous retry executor
    - with_retry: Functional shortcut around RetryExecutor
    - retryable: Decorator form of RetryExecutor
    - RetryDecider: Logic for deciding whether to retry
    - CallbackManager: Manager for callback invocations
    - RetryState: Per-invocation attempt record
    - FailureKind, FailureDescriptor: Failure classification types
    - classify_failure, classify_exception, describe_failure:
      Failure classification functions
"""

from __future__ import annotations

__all__ = [
    "CallbackManager",
    "FailureDescriptor",
    "FailureKind",
    "RetryDecider",
    "RetryExecutor",
    "RetryState",
    "classify_exception",
    "classify_failure",
    "describe_failure",
    "retryable",
    "with_retry",
]

from logoforge.retry.classifier import (
    FailureDescriptor,
    FailureKind,
    classify_exception,
    classify_failure,
    describe_failure,
)
from logoforge.retry.decider import RetryDecider
from logoforge.retry.executor import RetryExecutor, retryable, with_retry
from logoforge.retry.manager import CallbackManager
from logoforge.retry.state import RetryState

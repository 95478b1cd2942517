r"""Unit tests for callback manager."""

from __future__ import annotations

from unittest.mock import Mock, patch

from logoforge.core.config import RetryConfig
from logoforge.retry import CallbackManager, FailureKind


def test_callback_manager_creation() -> None:
    """Test CallbackManager initialization."""
    config = RetryConfig()
    manager = CallbackManager(config)

    assert manager.config is config


def test_on_attempt_callback_invoked() -> None:
    """Test on_attempt callback is invoked correctly."""
    mock_callback = Mock()
    manager = CallbackManager(RetryConfig(on_attempt=mock_callback))

    manager.on_attempt(operation="create_logo", attempt=0)

    mock_callback.assert_called_once()
    call_args = mock_callback.call_args[0][0]
    assert call_args.operation == "create_logo"
    assert call_args.attempt == 1  # Converted from 0-indexed to 1-indexed
    assert call_args.max_retries == 3


def test_callbacks_none_do_nothing() -> None:
    """Test every hook does nothing when no callback is configured."""
    manager = CallbackManager(RetryConfig())
    error = ValueError("bad")

    # Should not raise
    manager.on_attempt(operation="op", attempt=0)
    manager.on_retry(
        operation="op", attempt=0, delay=2.0, error=error, failure_kind=FailureKind.TERMINAL
    )
    manager.on_success(operation="op", attempt=0, result=None, start_time=0.0)
    manager.on_failure(
        operation="op",
        attempt=0,
        error=error,
        failure_kind=FailureKind.TERMINAL,
        exhausted=False,
        start_time=0.0,
    )


def test_on_retry_callback_invoked() -> None:
    """Test on_retry callback is invoked correctly."""
    mock_callback = Mock()
    manager = CallbackManager(RetryConfig(max_retries=4, on_retry=mock_callback))
    error = ValueError("busy")

    manager.on_retry(
        operation="brand_kit",
        attempt=1,
        delay=4.0,
        error=error,
        failure_kind=FailureKind.TRANSIENT_AVAILABILITY,
    )

    call_args = mock_callback.call_args[0][0]
    assert call_args.operation == "brand_kit"
    assert call_args.attempt == 3  # Next attempt (0-indexed + 2)
    assert call_args.max_retries == 4
    assert call_args.delay == 4.0
    assert call_args.error is error
    assert call_args.failure_kind is FailureKind.TRANSIENT_AVAILABILITY


def test_on_success_callback_invoked() -> None:
    """Test on_success callback receives the result and total time."""
    mock_callback = Mock()
    manager = CallbackManager(RetryConfig(on_success=mock_callback))

    with patch("time.time", return_value=12.5):
        manager.on_success(operation="op", attempt=1, result="logo", start_time=10.0)

    call_args = mock_callback.call_args[0][0]
    assert call_args.attempt == 2
    assert call_args.result == "logo"
    assert call_args.total_time == 2.5


def test_on_failure_callback_invoked() -> None:
    """Test on_failure callback receives the final failure."""
    mock_callback = Mock()
    manager = CallbackManager(RetryConfig(on_failure=mock_callback))
    error = ValueError("quota")

    with patch("time.time", return_value=16.0):
        manager.on_failure(
            operation="op",
            attempt=2,
            error=error,
            failure_kind=FailureKind.TRANSIENT_QUOTA,
            exhausted=True,
            start_time=10.0,
        )

    call_args = mock_callback.call_args[0][0]
    assert call_args.attempt == 3
    assert call_args.max_retries == 3
    assert call_args.error is error
    assert call_args.failure_kind is FailureKind.TRANSIENT_QUOTA
    assert call_args.exhausted
    assert call_args.total_time == 6.0

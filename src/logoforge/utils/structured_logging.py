r"""Structured logging utilities for machine-readable log output.

This module provides utilities for structured logging with JSON formatting
and correlation IDs. The retry executor logs every backoff with structured
fields (operation, attempt, delay, failure kind), and the brand studio tags
all the model calls of one design session with the same correlation ID.

The structured logging system is opt-in and can be enabled by configuring
Python's logging system to use the provided formatter.

Example:
    Enable structured logging for logoforge:

    ```python
    import logging
    from logoforge.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("logoforge")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Use correlation IDs to group the calls of one design session:

    ```python
    from logoforge.utils.structured_logging import correlation_scope

    with correlation_scope("session-123"):
        kit = await studio.brand_kit("Café Luna", "Coffee shop")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
import uuid
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

# Context variable for correlation ID (thread-safe and task-safe)
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

_RESERVED_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "msecs",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "sinfo",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
    }
)


def get_correlation_id() -> str | None:
    """Get the current correlation ID.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    The ID is stored in a context variable, so each asyncio task keeps
    its own value.

    Args:
        correlation_id: The correlation ID to set (e.g., a session ID).

    Example:
        ```pycon
        >>> from logoforge.utils.structured_logging import (
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("session-456")
        >>> get_correlation_id()
        'session-456'

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Generator[str, None, None]:
    """Set a correlation ID for the duration of a block.

    An already set ID is kept and yielded unchanged, so nested scopes
    share the outer ID. Otherwise ``correlation_id`` (or a random one) is
    set and the previous value is restored on exit.

    Args:
        correlation_id: The ID to use when none is set.

    Yields:
        The active correlation ID.

    Example:
        ```pycon
        >>> from logoforge.utils.structured_logging import (
        ...     correlation_scope,
        ...     get_correlation_id,
        ... )
        >>> with correlation_scope("outer") as outer:
        ...     with correlation_scope("inner") as inner:
        ...         print(outer, inner)
        ...
        outer outer
        >>> get_correlation_id() is None
        True

        ```
    """
    current = _correlation_id.get()
    if current is not None:
        yield current
        return
    token = _correlation_id.set(correlation_id or uuid.uuid4().hex)
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    This formatter outputs log records as JSON objects with consistent field
    names. It automatically includes correlation IDs if set, and preserves
    any extra fields added to the log record.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - correlation_id: Optional correlation ID
        - module, function, line: Where the log originated

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from logoforge.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("test_logger")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Retrying", extra={"attempt": 2})
        >>> '"attempt": 2' in stream.getvalue()
        True

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format timestamp as ISO 8601 with millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    The extra fields are included in the JSON output when using
    StructuredFormatter.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    logger.log(level, message, extra=extra)

r"""Failure classification for the retry executor.

This module turns an exception raised by any transport into a normalized
:class:`FailureDescriptor` and classifies it as transient (quota or
availability) or terminal.

Classification is strict first: when the failure carries a structured
status code or status string, only that is inspected. The message text is
matched only when no structured status exists.
"""

from __future__ import annotations

__all__ = [
    "FailureDescriptor",
    "FailureKind",
    "classify_exception",
    "classify_failure",
    "describe_failure",
]

import logging
import re
from dataclasses import dataclass
from enum import Enum

import httpx
from google.genai import errors as genai_errors

from logoforge.core.config import QUOTA_STATUS_CODES, UNAVAILABLE_STATUS_CODES

logger: logging.Logger = logging.getLogger(__name__)

_QUOTA_STATUSES = frozenset({"RESOURCE_EXHAUSTED", "TOO_MANY_REQUESTS"})
_UNAVAILABLE_STATUSES = frozenset({"UNAVAILABLE", "SERVICE_UNAVAILABLE"})

# Only used when the failure has no structured status
_QUOTA_PATTERN = re.compile(r"\b429\b|too many requests|\bresource_exhausted\b|\bquota\b", re.IGNORECASE)
_UNAVAILABLE_PATTERN = re.compile(r"\b503\b|\bunavailable\b", re.IGNORECASE)


class FailureKind(Enum):
    """Classification of a failure.

    Attributes:
        TRANSIENT_QUOTA: Upstream rate limiting or exhausted quota.
        TRANSIENT_AVAILABILITY: Upstream temporarily unavailable.
        TERMINAL: Any other failure, not expected to resolve on retry.
    """

    TRANSIENT_QUOTA = "transient_quota"
    TRANSIENT_AVAILABILITY = "transient_availability"
    TERMINAL = "terminal"

    @property
    def is_transient(self) -> bool:
        return self is not FailureKind.TERMINAL


@dataclass(frozen=True)
class FailureDescriptor:
    """Transport-independent description of a failure.

    Attributes:
        status_code: Numeric status (HTTP or API code), if any.
        status: Symbolic status such as ``"RESOURCE_EXHAUSTED"``, if any.
        message: The failure message.
    """

    status_code: int | None = None
    status: str | None = None
    message: str = ""

    @property
    def is_structured(self) -> bool:
        return self.status_code is not None or self.status is not None


def _int_attr(error: BaseException, name: str) -> int | None:
    value = getattr(error, name, None)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def describe_failure(error: BaseException) -> FailureDescriptor:
    """Normalize an exception into a :class:`FailureDescriptor`.

    Args:
        error: The exception raised by the wrapped operation.

    Returns:
        The failure descriptor.

    Example:
        ```pycon
        >>> from logoforge.exceptions import GenerationError
        >>> from logoforge.retry.classifier import describe_failure
        >>> describe_failure(GenerationError("overloaded", status_code=503))
        FailureDescriptor(status_code=503, status=None, message='overloaded')
        >>> describe_failure(ValueError("bad input"))
        FailureDescriptor(status_code=None, status=None, message='bad input')

        ```
    """
    if isinstance(error, genai_errors.APIError):
        return FailureDescriptor(
            status_code=error.code,
            status=error.status,
            message=error.message or str(error),
        )
    if isinstance(error, httpx.HTTPStatusError):
        return FailureDescriptor(status_code=error.response.status_code, message=str(error))

    status_code = _int_attr(error, "status_code")
    if status_code is None:
        status_code = _int_attr(error, "code")
    status = getattr(error, "status", None)
    if isinstance(status, int) and not isinstance(status, bool):
        status_code = status if status_code is None else status_code
        status = None
    elif not isinstance(status, str):
        status = None
    return FailureDescriptor(status_code=status_code, status=status, message=str(error))


def classify_failure(descriptor: FailureDescriptor) -> FailureKind:
    """Classify a normalized failure.

    Args:
        descriptor: The failure descriptor.

    Returns:
        The failure kind.

    Example:
        ```pycon
        >>> from logoforge.retry.classifier import FailureDescriptor, classify_failure
        >>> classify_failure(FailureDescriptor(status_code=429))
        <FailureKind.TRANSIENT_QUOTA: 'transient_quota'>
        >>> classify_failure(FailureDescriptor(status="UNAVAILABLE"))
        <FailureKind.TRANSIENT_AVAILABILITY: 'transient_availability'>
        >>> classify_failure(FailureDescriptor(status_code=400, message="503 mentioned"))
        <FailureKind.TERMINAL: 'terminal'>

        ```
    """
    if descriptor.is_structured:
        status = (descriptor.status or "").upper()
        if descriptor.status_code in QUOTA_STATUS_CODES or status in _QUOTA_STATUSES:
            return FailureKind.TRANSIENT_QUOTA
        if descriptor.status_code in UNAVAILABLE_STATUS_CODES or status in _UNAVAILABLE_STATUSES:
            return FailureKind.TRANSIENT_AVAILABILITY
        return FailureKind.TERMINAL

    if _QUOTA_PATTERN.search(descriptor.message):
        logger.debug(f"Classified unstructured failure as quota from its message: {descriptor.message!r}")
        return FailureKind.TRANSIENT_QUOTA
    if _UNAVAILABLE_PATTERN.search(descriptor.message):
        logger.debug(
            f"Classified unstructured failure as unavailability from its message: {descriptor.message!r}"
        )
        return FailureKind.TRANSIENT_AVAILABILITY
    return FailureKind.TERMINAL


def classify_exception(error: BaseException) -> FailureKind:
    """Describe and classify an exception in one step."""
    return classify_failure(describe_failure(error))

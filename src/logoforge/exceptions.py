r"""Exceptions raised by logoforge.

Transient upstream failures (rate limiting, temporary unavailability) are
raised by the model client itself and re-raised unchanged by the retry
executor. The exceptions below cover the terminal failures produced by
logoforge: unusable model responses, invalid requests and missing
credentials.
"""

from __future__ import annotations

__all__ = [
    "GenerationError",
    "InvalidRequestError",
    "LogoForgeError",
    "MissingCredentialsError",
    "NoImageGeneratedError",
    "ResponseParseError",
]


class LogoForgeError(RuntimeError):
    """Base exception for logoforge errors.

    Args:
        message: A descriptive error message.
        status_code: Optional status code associated with the failure.
            The retry classifier reads it like any transport status.
        cause: Optional underlying exception.

    Example:
        ```pycon
        >>> from logoforge.exceptions import LogoForgeError
        >>> error = LogoForgeError("model overloaded", status_code=503)
        >>> error.status_code
        503

        ```
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause


class GenerationError(LogoForgeError):
    """Raised when the model returns a response that cannot be used."""


class NoImageGeneratedError(GenerationError):
    """Raised when an image response carries no inline image data."""


class ResponseParseError(GenerationError):
    """Raised when a structured (JSON) response cannot be parsed.

    Args:
        message: A descriptive error message.
        text: The raw response text that failed to parse.
        cause: Optional underlying exception.
    """

    def __init__(self, message: str, text: str = "", cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)
        self.text = text


class MissingCredentialsError(LogoForgeError):
    """Raised when no API key is available and degraded mode is not
    allowed."""


class InvalidRequestError(LogoForgeError, ValueError):
    """Raised when a generation request misses required inputs."""

r"""Construction of the Gemini client from an injected credential.

The client is built once, at process start, and handed explicitly to the
components issuing model calls (see :class:`logoforge.studio.BrandStudio`).
"""

from __future__ import annotations

__all__ = ["PLACEHOLDER_API_KEY", "create_genai_client"]

import logging
from typing import TYPE_CHECKING

from google import genai

from logoforge.core.config import API_KEY_ENV_VARS
from logoforge.exceptions import MissingCredentialsError

if TYPE_CHECKING:
    from logoforge.core.config import StudioConfig

logger: logging.Logger = logging.getLogger(__name__)

# Lets the client be built without a credential; calls then fail with an
# authentication error, which is terminal for the retry executor.
PLACEHOLDER_API_KEY = "missing-api-key"


def create_genai_client(config: StudioConfig, *, strict: bool = False) -> genai.Client:
    """Create the Gemini client.

    Args:
        config: The studio configuration holding the API key.
        strict: If ``True``, a missing API key raises instead of
            building a degraded client.

    Returns:
        The Gemini client.

    Raises:
        MissingCredentialsError: If the API key is missing and ``strict``
            is ``True``.

    Example:
        ```pycon
        >>> from logoforge.client import create_genai_client
        >>> from logoforge.core.config import StudioConfig
        >>> client = create_genai_client(StudioConfig.from_env())  # doctest: +SKIP

        ```
    """
    if config.has_api_key:
        return genai.Client(api_key=config.api_key)

    names = " or ".join(API_KEY_ENV_VARS)
    if strict:
        msg = f"No Gemini API key configured, set {names}"
        raise MissingCredentialsError(msg)
    logger.warning(f"No Gemini API key configured ({names} is not set), model calls will fail")
    return genai.Client(api_key=PLACEHOLDER_API_KEY)

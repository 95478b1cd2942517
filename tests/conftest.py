from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest
from google.genai import types

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep so backoff delays are recorded, not waited."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()


@pytest.fixture
def mock_genai_client() -> Mock:
    """Create a mock google-genai client with an async models API."""
    client = Mock()
    client.aio.models.generate_content = AsyncMock()
    client.aio.aclose = AsyncMock()
    return client


@pytest.fixture
def text_response() -> Callable[[str], types.GenerateContentResponse]:
    """Build a model response holding a single text part."""

    def build(text: str) -> types.GenerateContentResponse:
        return types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(parts=[types.Part(text=text)]))]
        )

    return build


@pytest.fixture
def image_response() -> Callable[..., types.GenerateContentResponse]:
    """Build a model response holding a single inline image part."""

    def build(data: bytes = b"\x89PNG", mime_type: str = "image/png") -> types.GenerateContentResponse:
        return types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(
                        parts=[types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))]
                    )
                )
            ]
        )

    return build

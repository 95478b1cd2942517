r"""Parsers turning generative model responses into domain types.

Every parse failure raises a terminal
:class:`logoforge.exceptions.GenerationError` subclass, which the retry
executor never retries.
"""

from __future__ import annotations

__all__ = [
    "MAX_SLOGANS",
    "clean_json",
    "extract_image",
    "parse_brand_kit",
    "parse_guidelines",
    "parse_json",
    "parse_slogans",
    "response_text",
]

import json
import re
from typing import Any

from google.genai import types

from logoforge.exceptions import GenerationError, NoImageGeneratedError, ResponseParseError
from logoforge.models import BrandGuidelines, BrandKit, ColorSwatch, GeneratedImage, Typography

MAX_SLOGANS = 5

_CODE_FENCE = re.compile(r"```(?:json)?\n?")


def clean_json(text: str) -> str:
    r"""Strip Markdown code fences around a JSON answer.

    Example:
        ```pycon
        >>> from logoforge.parsing import clean_json
        >>> clean_json('```json\n["a", "b"]\n```')
        '["a", "b"]'

        ```
    """
    return _CODE_FENCE.sub("", text).strip()


def parse_json(text: str) -> Any:
    """Parse a JSON answer, tolerating Markdown code fences.

    Raises:
        ResponseParseError: If the text is not valid JSON.
    """
    cleaned = clean_json(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        msg = f"Model returned invalid JSON: {exc}"
        raise ResponseParseError(msg, text=text, cause=exc) from exc


def response_text(response: types.GenerateContentResponse) -> str:
    """Return the text of a response.

    Raises:
        GenerationError: If the response has no text.
    """
    text = response.text
    if not text:
        msg = "Model returned an empty text response"
        raise GenerationError(msg)
    return text


def extract_image(response: types.GenerateContentResponse) -> GeneratedImage:
    """Return the first inline image of a response.

    Raises:
        NoImageGeneratedError: If no candidate part carries image data.
    """
    for candidate in response.candidates or []:
        if candidate.content is None:
            continue
        for part in candidate.content.parts or []:
            if part.inline_data is not None and part.inline_data.data:
                return GeneratedImage(
                    data=part.inline_data.data,
                    mime_type=part.inline_data.mime_type or "image/png",
                )
    msg = "Model response contains no image"
    raise NoImageGeneratedError(msg)


def parse_slogans(payload: Any) -> list[str]:
    """Keep at most ``MAX_SLOGANS`` non-empty slogans of a JSON array.

    Example:
        ```pycon
        >>> from logoforge.parsing import parse_slogans
        >>> parse_slogans(["One", "", "Two", "Three", "Four", "Five", "Six"])
        ['One', 'Two', 'Three', 'Four', 'Five']

        ```
    """
    if not isinstance(payload, list):
        msg = f"Expected a JSON array of slogans, got {type(payload).__name__}"
        raise ResponseParseError(msg)
    slogans = [str(item).strip() for item in payload if str(item).strip()]
    return slogans[:MAX_SLOGANS]


def _string_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def parse_brand_kit(payload: Any) -> BrandKit:
    """Build a :class:`BrandKit` from the model JSON.

    Expected shape: ``{"colors": [{"hex": ..., "name": ...}], "typography":
    {"headingFont": ..., "bodyFont": ...}}``.

    Raises:
        ResponseParseError: If a required field is missing.
    """
    try:
        colors = tuple(ColorSwatch(hex=c["hex"], name=c.get("name")) for c in payload["colors"])
        typography = Typography(
            heading_font=payload["typography"]["headingFont"],
            body_font=payload["typography"]["bodyFont"],
        )
    except (KeyError, TypeError, AttributeError) as exc:
        msg = f"Brand kit response is missing fields: {exc!r}"
        raise ResponseParseError(msg, text=json.dumps(payload, default=str), cause=exc) from exc
    if not colors:
        msg = "Brand kit response has an empty colour palette"
        raise ResponseParseError(msg, text=json.dumps(payload, default=str))
    return BrandKit(colors=colors, typography=typography)


def parse_guidelines(payload: Any) -> BrandGuidelines:
    """Build :class:`BrandGuidelines` from the model JSON (camelCase keys).

    Raises:
        ResponseParseError: If the payload is not an object or a required
            text field is missing.
    """
    if not isinstance(payload, dict):
        msg = f"Expected a JSON object of guidelines, got {type(payload).__name__}"
        raise ResponseParseError(msg)
    try:
        return BrandGuidelines(
            logo_philosophy=payload["logoPhilosophy"],
            clear_space_rule=payload["clearSpaceRule"],
            minimum_size=payload["minimumSize"],
            color_usage=_string_tuple(payload.get("colorUsage")),
            logo_misuse=_string_tuple(payload.get("logoMisuse")),
            tone_of_voice=_string_tuple(payload.get("toneOfVoice")),
        )
    except (KeyError, TypeError) as exc:
        msg = f"Guidelines response is missing fields: {exc!r}"
        raise ResponseParseError(msg, text=json.dumps(payload, default=str), cause=exc) from exc

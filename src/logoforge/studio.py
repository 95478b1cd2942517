r"""Asynchronous brand studio issuing all generative model calls.

This module provides an async context manager wrapping a Gemini client.
Every model call goes through a shared
:class:`logoforge.retry.RetryExecutor`, so rate limiting and temporary
unavailability are retried with exponential backoff while any other
failure reaches the caller unchanged. The suggestion operations (brand
name, slogans, brand kit) substitute a placeholder on failure here, in
the caller, never in the executor.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BRAND_KIT",
    "DEFAULT_SOCIAL_TOPIC",
    "EDITED_LOGO_INDUSTRY",
    "EDITED_LOGO_NAME",
    "FALLBACK_BRAND_NAME",
    "BrandStudio",
    "default_slogans",
    "default_slogans_for",
]

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.genai import types

from logoforge import prompts
from logoforge.client import create_genai_client
from logoforge.core.config import StudioConfig
from logoforge.exceptions import NoImageGeneratedError
from logoforge.models import (
    BrandKit,
    ColorSwatch,
    DesignResult,
    MockupKind,
    SocialPost,
    Typography,
)
from logoforge.parsing import (
    extract_image,
    parse_brand_kit,
    parse_guidelines,
    parse_json,
    parse_slogans,
    response_text,
)
from logoforge.retry import RetryExecutor
from logoforge.utils.structured_logging import correlation_scope

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from google import genai

    from logoforge.models import (
        BrandGuidelines,
        EditRequest,
        GeneratedImage,
        ImageInput,
        LogoRequest,
    )

logger: logging.Logger = logging.getLogger(__name__)

FALLBACK_BRAND_NAME = "Your Brand"
DEFAULT_SOCIAL_TOPIC = "Brand launch"
EDITED_LOGO_NAME = "Edited logo"
EDITED_LOGO_INDUSTRY = "General"

DEFAULT_BRAND_KIT = BrandKit(
    colors=(
        ColorSwatch("#1C1C1E"),
        ColorSwatch("#F59E0B"),
        ColorSwatch("#FFFFFF"),
        ColorSwatch("#E0E0E0"),
        ColorSwatch("#4A4A4C"),
    ),
    typography=Typography(heading_font="Inter", body_font="Roboto"),
)

_JSON_CONFIG = types.GenerateContentConfig(response_mime_type="application/json")
_SLOGANS_CONFIG = types.GenerateContentConfig(
    response_mime_type="application/json",
    response_schema=types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
)
_IMAGE_CONFIG = types.GenerateContentConfig(response_modalities=["IMAGE"])


def default_slogans() -> list[str]:
    return [
        "The best choice for your business",
        "Quality and service guaranteed",
        "Innovation and excellence",
        "Your ideal solution",
        "Live the experience",
    ]


def default_slogans_for(brand_name: str) -> list[str]:
    return [
        f"{brand_name}: a unique style",
        f"Innovation at {brand_name}",
        f"Discover {brand_name}",
        f"Your world at {brand_name}",
        f"{brand_name} is for you",
    ]


def _image_part(image: ImageInput) -> types.Part:
    return types.Part.from_bytes(data=image.data, mime_type=image.mime_type)


class BrandStudio:
    r"""Asynchronous context manager for logo and brand asset generation.

    The studio either borrows a Gemini client passed by the caller (left
    open on exit) or creates one from ``config`` when entering the context
    (closed on exit).

    Args:
        config: Studio configuration. Defaults to
            ``StudioConfig.from_env()``.
        client: Optional Gemini client shared with the rest of the
            process.

    Example:
        ```pycon
        >>> import asyncio
        >>> from logoforge import BrandStudio, LogoRequest
        >>> async def main():  # doctest: +SKIP
        ...     async with BrandStudio() as studio:
        ...         result = await studio.design_logo(
        ...             LogoRequest("Café Luna", "Coffee shop", "Minimalist")
        ...         )
        ...         mockups = await studio.all_mockups(result.logo.as_input())
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        *,
        config: StudioConfig | None = None,
        client: genai.Client | None = None,
    ) -> None:
        self._config = config if config is not None else StudioConfig.from_env()
        self._client = client
        self._owns_client = client is None
        self._executor = RetryExecutor(self._config.retry)
        self._entered = False

    @property
    def config(self) -> StudioConfig:
        return self._config

    async def __aenter__(self) -> Self:
        if self._client is None:
            self._client = create_genai_client(self._config)
        self._entered = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aio.aclose()
            self._client = None
        self._entered = False

    def _ensure_client(self) -> genai.Client:
        """Ensure the client is available for use.

        Raises:
            RuntimeError: If the studio is used outside of a context
                manager.
        """
        if not self._entered or self._client is None:
            msg = "BrandStudio must be used within an async context manager (async with statement)"
            raise RuntimeError(msg)
        return self._client

    async def _generate(
        self,
        name: str,
        *,
        model: str,
        contents: Any,
        config: types.GenerateContentConfig | None = None,
    ) -> types.GenerateContentResponse:
        client = self._ensure_client()
        return await self._executor.execute(
            lambda: client.aio.models.generate_content(
                model=model, contents=contents, config=config
            ),
            name=name,
        )

    async def _generate_image(self, name: str, contents: Any) -> GeneratedImage:
        response = await self._generate(
            name, model=self._config.image_model, contents=contents, config=_IMAGE_CONFIG
        )
        return extract_image(response)

    async def suggest_name_from_logo(self, logo: ImageInput) -> str:
        """Read (or invent) the brand name of a logo.

        Falls back to ``FALLBACK_BRAND_NAME`` on any failure or a blank
        answer.
        """
        try:
            response = await self._generate(
                "suggest_name_from_logo",
                model=self._config.text_model,
                contents=[_image_part(logo), prompts.name_from_logo_prompt()],
            )
            name = response_text(response).strip()
        except Exception:
            logger.exception("Could not extract the brand name from the logo")
            return FALLBACK_BRAND_NAME
        if not name:
            logger.warning("Model returned a blank brand name")
            return FALLBACK_BRAND_NAME
        return name

    async def suggest_slogans(
        self, business_name: str, industry: str, description: str = ""
    ) -> list[str]:
        """Suggest up to five slogans, falling back to generic ones on
        failure."""
        try:
            response = await self._generate(
                "suggest_slogans",
                model=self._config.text_model,
                contents=prompts.slogans_prompt(
                    business_name, industry, description, self._config.language
                ),
                config=_SLOGANS_CONFIG,
            )
            return parse_slogans(parse_json(response_text(response)))
        except Exception:
            logger.exception("Could not generate slogans")
            return default_slogans()

    async def suggest_slogans_from_logo(self, brand_name: str, logo: ImageInput) -> list[str]:
        try:
            response = await self._generate(
                "suggest_slogans_from_logo",
                model=self._config.text_model,
                contents=[
                    _image_part(logo),
                    prompts.slogans_from_logo_prompt(brand_name, self._config.language),
                ],
                config=_SLOGANS_CONFIG,
            )
            return parse_slogans(parse_json(response_text(response)))
        except Exception:
            logger.exception("Could not generate slogans from the logo")
            return default_slogans_for(brand_name)

    async def create_logo(self, request: LogoRequest) -> GeneratedImage:
        """Create a logo from scratch.

        Raises:
            InvalidRequestError: If the business name or industry is blank.
            NoImageGeneratedError: If the model returns no image.
        """
        request.validate()
        return await self._generate_image("create_logo", prompts.create_logo_prompt(request))

    async def edit_logo(self, logo: ImageInput, edit: EditRequest) -> GeneratedImage:
        return await self._generate_image(
            "edit_logo", [_image_part(logo), prompts.edit_logo_prompt(edit)]
        )

    async def brand_kit(
        self, business_name: str, industry: str, logo: ImageInput | None = None
    ) -> BrandKit:
        """Suggest a colour palette and font pairing.

        The logo, when given, is analysed instead of the business
        attributes. Falls back to ``DEFAULT_BRAND_KIT`` on any failure.
        """
        prompt = prompts.brand_kit_prompt(business_name, industry, from_logo=logo is not None)
        contents: Any = [_image_part(logo), prompt] if logo is not None else prompt
        try:
            response = await self._generate(
                "brand_kit", model=self._config.text_model, contents=contents, config=_JSON_CONFIG
            )
            return parse_brand_kit(parse_json(response_text(response)))
        except Exception:
            logger.exception("Could not generate the brand kit")
            return DEFAULT_BRAND_KIT

    async def mockup(self, logo: ImageInput, kind: MockupKind) -> GeneratedImage:
        return await self._generate_image(
            f"mockup[{kind.value}]", [_image_part(logo), prompts.mockup_prompt(kind)]
        )

    async def all_mockups(self, logo: ImageInput) -> dict[MockupKind, GeneratedImage]:
        """Generate every kind of mockup concurrently.

        Each mockup runs its own retry loop. The first failure propagates
        once the other mockups are cancelled and settled.
        """
        kinds = list(MockupKind)
        tasks = [asyncio.ensure_future(self.mockup(logo, kind)) for kind in kinds]
        try:
            images = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return dict(zip(kinds, images))

    async def social_post(
        self, brand_name: str, logo: ImageInput, topic: str = DEFAULT_SOCIAL_TOPIC
    ) -> SocialPost:
        """Write a social media caption, then illustrate it.

        A missing illustration is not an error: the post is returned with
        ``image=None``.
        """
        caption_response = await self._generate(
            "social_post.caption",
            model=self._config.text_model,
            contents=prompts.social_caption_prompt(brand_name, topic, self._config.language),
        )
        caption = response_text(caption_response)
        try:
            image = await self._generate_image(
                "social_post.image",
                [_image_part(logo), prompts.social_image_prompt(brand_name, topic)],
            )
        except NoImageGeneratedError:
            logger.warning(f"No image generated for the social post of {brand_name!r}")
            image = None
        return SocialPost(caption=caption, image=image)

    async def brand_guidelines(self, brand_name: str, logo: ImageInput) -> BrandGuidelines:
        response = await self._generate(
            "brand_guidelines",
            model=self._config.text_model,
            contents=[_image_part(logo), prompts.guidelines_prompt(brand_name, self._config.language)],
            config=_JSON_CONFIG,
        )
        return parse_guidelines(parse_json(response_text(response)))

    async def design_logo(self, request: LogoRequest) -> DesignResult:
        """Create a logo, then derive its brand kit from the image."""
        with correlation_scope():
            logo = await self.create_logo(request)
            kit = await self.brand_kit(request.business_name, request.industry, logo.as_input())
        return DesignResult(logo=logo, brand_kit=kit)

    async def redesign_logo(self, logo: ImageInput, edit: EditRequest) -> DesignResult:
        """Edit an uploaded logo, then derive the brand kit of the result."""
        with correlation_scope():
            edited = await self.edit_logo(logo, edit)
            kit = await self.brand_kit(EDITED_LOGO_NAME, EDITED_LOGO_INDUSTRY, edited.as_input())
        return DesignResult(logo=edited, brand_kit=kit)

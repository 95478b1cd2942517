r"""Domain types exchanged between the brand studio and its callers."""

from __future__ import annotations

__all__ = [
    "KEEP_ORIGINAL_STYLE",
    "LOGO_STYLES",
    "BrandGuidelines",
    "BrandKit",
    "ColorSwatch",
    "DesignResult",
    "EditRequest",
    "GeneratedImage",
    "ImageInput",
    "LogoRequest",
    "MockupKind",
    "SocialPost",
    "Typography",
]

from dataclasses import dataclass
from enum import Enum

from logoforge.exceptions import InvalidRequestError

LOGO_STYLES = (
    "Minimalist",
    "Modern",
    "Vintage",
    "Geometric",
    "3D",
    "Abstract",
    "Luxury",
    "Organic",
    "Tech",
    "Retro",
)

# Edit style meaning "keep the colours, typography and look of the original"
KEEP_ORIGINAL_STYLE = "Keep Original"


@dataclass(frozen=True)
class ImageInput:
    """Raw image bytes sent to the model (an uploaded or generated logo)."""

    data: bytes
    mime_type: str = "image/png"


@dataclass(frozen=True)
class GeneratedImage:
    """Raw image bytes returned by the model."""

    data: bytes
    mime_type: str = "image/png"

    def as_input(self) -> ImageInput:
        return ImageInput(data=self.data, mime_type=self.mime_type)


@dataclass(frozen=True)
class ColorSwatch:
    hex: str
    name: str | None = None


@dataclass(frozen=True)
class Typography:
    heading_font: str
    body_font: str


@dataclass(frozen=True)
class BrandKit:
    """Colour palette and font pairing of a brand."""

    colors: tuple[ColorSwatch, ...]
    typography: Typography


@dataclass(frozen=True)
class BrandGuidelines:
    """Short brand identity manual.

    Attributes:
        logo_philosophy: Meaning of the logo, about forty words.
        clear_space_rule: Clear space rule, one sentence.
        minimum_size: Minimum recommended size, e.g. ``"20px"``.
        color_usage: Colour usage rules.
        logo_misuse: Things not to do with the logo.
        tone_of_voice: Adjectives describing the brand voice.
    """

    logo_philosophy: str
    clear_space_rule: str
    minimum_size: str
    color_usage: tuple[str, ...] = ()
    logo_misuse: tuple[str, ...] = ()
    tone_of_voice: tuple[str, ...] = ()


@dataclass(frozen=True)
class SocialPost:
    caption: str
    image: GeneratedImage | None = None


@dataclass(frozen=True)
class DesignResult:
    """A logo with the brand kit derived from it."""

    logo: GeneratedImage
    brand_kit: BrandKit


class MockupKind(Enum):
    """Kinds of product mockup."""

    T_SHIRT = "t-shirt"
    BUSINESS_CARD = "business-card"
    SIGNAGE = "signage"


@dataclass(frozen=True)
class LogoRequest:
    """Inputs of a logo created from scratch.

    Args:
        business_name: Name rendered as the central element of the logo.
        industry: Industry or line of business.
        style: Visual style, usually one of ``LOGO_STYLES``.
        description: Optional extra visual instructions.
        slogan: Optional slogan rendered under or next to the name.

    Example:
        ```pycon
        >>> from logoforge.models import LogoRequest
        >>> LogoRequest("Café Luna", "Coffee shop", "Minimalist").validate()
        >>> LogoRequest("", "Coffee shop", "Minimalist").validate()  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        logoforge.exceptions.InvalidRequestError: business_name is required

        ```
    """

    business_name: str
    industry: str
    style: str = LOGO_STYLES[0]
    description: str = ""
    slogan: str | None = None

    def validate(self) -> None:
        """Check the required inputs.

        Raises:
            InvalidRequestError: If the business name or the industry is
                blank.
        """
        if not self.business_name.strip():
            msg = "business_name is required"
            raise InvalidRequestError(msg)
        if not self.industry.strip():
            msg = "industry is required"
            raise InvalidRequestError(msg)


@dataclass(frozen=True)
class EditRequest:
    """Changes applied to an existing logo.

    Args:
        new_name: Optional text that replaces the visible name.
        style: ``KEEP_ORIGINAL_STYLE`` or a new visual style.
        instructions: Optional free-form instructions.
    """

    new_name: str = ""
    style: str = KEEP_ORIGINAL_STYLE
    instructions: str = ""

    @property
    def keeps_original_style(self) -> bool:
        return self.style == KEEP_ORIGINAL_STYLE

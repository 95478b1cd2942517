r"""Prompt builders for the generative model.

Every function is pure and returns the text part of one model request.
"""

from __future__ import annotations

__all__ = [
    "BRAND_KIT_JSON_INSTRUCTIONS",
    "brand_kit_prompt",
    "create_logo_prompt",
    "edit_logo_prompt",
    "guidelines_prompt",
    "mockup_prompt",
    "name_from_logo_prompt",
    "slogans_from_logo_prompt",
    "slogans_prompt",
    "social_caption_prompt",
    "social_image_prompt",
]

from typing import TYPE_CHECKING

from logoforge.models import MockupKind

if TYPE_CHECKING:
    from logoforge.models import EditRequest, LogoRequest

BRAND_KIT_JSON_INSTRUCTIONS = (
    "Return a JSON object with:\n"
    '1. "colors": an array of 5 objects {"hex": "#RRGGBB", "name": "<colour name>"}.\n'
    '2. "typography": an object with "headingFont" and "bodyFont", both popular font names.\n'
    "Answer with clean JSON only."
)

_MOCKUP_SCENES = {
    MockupKind.T_SHIRT: (
        "A realistic photograph of a high-quality folded t-shirt on a wooden table, "
        "with this logo printed on the chest. Cinematic lighting."
    ),
    MockupKind.BUSINESS_CARD: (
        "A professional macro photograph of a stack of business cards on an elegant desk, "
        "showing this logo clearly in the centre. Shallow depth of field."
    ),
    MockupKind.SIGNAGE: (
        "A photograph of a modern sign on a building or shop front showing this logo. "
        "Urban style, natural light."
    ),
}


def name_from_logo_prompt() -> str:
    return (
        "Look at this logo. What is the brand name shown in it? If there is no text, "
        "invent a suitable name based on the symbol. Return ONLY the name."
    )


def slogans_prompt(business_name: str, industry: str, description: str, language: str) -> str:
    """Build the prompt asking for five slogans from business attributes.

    Blank inputs are left out instead of producing an empty quoted value.
    """
    subject = f'the business "{business_name}"' if business_name else "a business"
    if industry:
        subject += f' in the "{industry}" industry'
    context = f" (Extra context: {description})" if description else ""
    return (
        f"Write 5 catchy, short, commercial slogans in {language} for {subject}{context}. "
        "Return the answer as a plain JSON array of strings."
    )


def slogans_from_logo_prompt(brand_name: str, language: str) -> str:
    return (
        f'Based on the visual style of this logo and the brand name "{brand_name}", '
        f"write 5 creative, commercial slogans in {language} that match the mood of the image. "
        "Return a plain JSON array of strings."
    )


def create_logo_prompt(request: LogoRequest) -> str:
    """Build the prompt of a logo created from scratch."""
    name = request.business_name
    lines = [
        f'Professional logo design for the business called "{name}".',
        f"Industry: {request.industry}.",
        f"Visual style: {request.style}.",
    ]
    if request.description:
        lines.append(f"Specific visual instructions: {request.description}.")
    if request.slogan:
        lines.append(
            f'IMPORTANT: the design must include the slogan "{request.slogan}" legibly '
            "below or next to the brand name."
        )
    slogan_rule = (
        f'The slogan "{request.slogan}" must be smaller but legible.'
        if request.slogan
        else "Do not include any text other than the name."
    )
    lines.extend(
        [
            "",
            "Requirements:",
            f'1. The text "{name}" must be the central, legible element.',
            f"2. {slogan_rule}",
            "3. Clean, minimalist white background.",
            "4. High resolution, vector look, aesthetic and professional.",
            "5. The design must be fully coherent with the stated industry.",
        ]
    )
    return "\n".join(lines)


def edit_logo_prompt(edit: EditRequest) -> str:
    """Build the instructions applied to an existing logo.

    Example:
        ```pycon
        >>> from logoforge.models import EditRequest
        >>> from logoforge.prompts import edit_logo_prompt
        >>> print(edit_logo_prompt(EditRequest(style="Retro")))
        Follow these instructions to modify or recreate this logo: Apply a Retro visual style. Keep its essence but apply the changes. High quality, white background.

        ```
    """
    parts = []
    if edit.new_name:
        parts.append(f'Change the visible text of the logo so it reads exactly: "{edit.new_name}".')
    if edit.keeps_original_style:
        parts.append(
            "IMPORTANT: keep EXACTLY the same colours, typography and graphic style as the "
            "original logo. Only change the text if requested, or improve the definition."
        )
    else:
        parts.append(f"Apply a {edit.style} visual style.")
    if edit.instructions:
        parts.append(f"Additional instructions: {edit.instructions}.")
    return (
        f"Follow these instructions to modify or recreate this logo: {' '.join(parts)} "
        "Keep its essence but apply the changes. High quality, white background."
    )


def brand_kit_prompt(business_name: str, industry: str, from_logo: bool) -> str:
    if from_logo:
        intro = "Analyse this logo, extract its main colour palette and suggest matching fonts."
    else:
        intro = (
            f'For the business "{business_name}" in the "{industry}" industry, suggest a '
            "professional colour palette and suitable typography."
        )
    return f"{intro}\n{BRAND_KIT_JSON_INSTRUCTIONS}"


def mockup_prompt(kind: MockupKind) -> str:
    return _MOCKUP_SCENES[kind]


def social_caption_prompt(brand_name: str, topic: str, language: str) -> str:
    return (
        f'Write an engaging, professional Instagram post in {language} for the brand "{brand_name}". '
        f'Topic: "{topic}". Include relevant emojis and hashtags. The tone must be inspiring. '
        "Maximum length: 280 characters."
    )


def social_image_prompt(brand_name: str, topic: str) -> str:
    return (
        f'Create a square social media (Instagram) image for the brand "{brand_name}". '
        f'Topic: "{topic}". The image must be aesthetically pleasing, lifestyle or product '
        "photography, and subtly include the logo or its colours."
    )


def guidelines_prompt(brand_name: str, language: str) -> str:
    return (
        f'Act as an expert Creative Director. For the brand "{brand_name}" (logo attached), '
        f"write a short identity manual as JSON in {language}.\n\n"
        "Required fields:\n"
        "- logoPhilosophy: short explanation (40 words) of the meaning of the logo.\n"
        "- clearSpaceRule: clear space rule (1 sentence).\n"
        '- minimumSize: minimum recommended size (e.g. "20px").\n'
        "- colorUsage: array of 2 strings with colour usage rules.\n"
        "- logoMisuse: array of 3 things NOT to do with the logo.\n"
        "- toneOfVoice: array of 3 adjectives describing the brand voice.\n\n"
        "Answer with clean JSON only."
    )

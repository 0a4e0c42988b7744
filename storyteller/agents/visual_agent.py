"""Visual agent: watercolor painting and landscape photo generation."""
from __future__ import annotations

from typing import Optional

from storyteller.models.story import ImagePayload
from storyteller.tools.genai_tools import generate_image
from storyteller.utils.config import settings


def build_watercolor_prompt(visual_prompt: str) -> str:
    return (
        "Create a soft, artistic watercolor painting. "
        "Technique: wet-on-wet, pastel tones, dreamy and emotional, hand-painted texture on paper. "
        f"Subject: {visual_prompt} "
        "The image should evoke memory and history."
    )


def build_landscape_prompt(location: str) -> str:
    return (
        f'Photorealistic, high-resolution travel photograph of "{location}" in {settings.region}, '
        "as taken by a professional photographer. Daytime, clear weather, wide angle, "
        "capturing the essence of the place. No text, no filters, just the scenery."
    )


async def generate_watercolor_image(visual_prompt: str) -> Optional[ImagePayload]:
    return await generate_image(build_watercolor_prompt(visual_prompt))


async def generate_landscape_image(location: str) -> Optional[ImagePayload]:
    return await generate_image(build_landscape_prompt(location))

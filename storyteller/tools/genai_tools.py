"""Request modes used against the Gemini API.

Three capabilities are consumed: search-grounded free text, schema-constrained
JSON, and text-to-image. Each call is a single request with no retry.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from google.genai import types

from storyteller.models.story import ImagePayload
from storyteller.utils.config import settings
from storyteller.utils.genai_client import get_genai_client

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    pass


async def search_text(prompt: str) -> str:
    """Free-text generation grounded with Google Search. Returns "" when the model says nothing."""
    client = get_genai_client()
    response = await client.aio.models.generate_content(
        model=settings.text_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
        ),
    )
    return (response.text or "").strip()


async def generate_structured(prompt: str, schema: Dict[str, Any]) -> str:
    """Schema-constrained generation; returns the raw JSON text for validation."""
    client = get_genai_client()
    response = await client.aio.models.generate_content(
        model=settings.text_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
        ),
    )
    text = response.text
    if not text:
        raise GenerationError("No structured response generated")
    return text


def _first_inline_image(response: Any) -> Optional[ImagePayload]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return ImagePayload.from_bytes(inline.mime_type or "image/png", inline.data)
    return None


async def generate_image(prompt: str) -> Optional[ImagePayload]:
    """Text-to-image generation. ``None`` when the model returned no image part."""
    client = get_genai_client()
    response = await client.aio.models.generate_content(
        model=settings.image_model,
        contents=[types.Part.from_text(text=prompt)],
    )
    image = _first_inline_image(response)
    if image is None:
        logger.info("Image model returned no inline image", extra={"model": settings.image_model})
    return image

"""Gemini client utilities."""
from __future__ import annotations

from functools import lru_cache

from google import genai
from google.genai import types

from storyteller.utils.config import settings


def _build_http_options() -> types.HttpOptions | None:
    """Only override the transport timeout when one is configured."""
    if settings.request_timeout_ms is None:
        return None
    return types.HttpOptions(timeout=settings.request_timeout_ms)


@lru_cache(maxsize=1)
def get_genai_client() -> genai.Client:
    """Return a shared Gemini client built from the current settings."""
    if not settings.gemini_api_key:
        raise ValueError("GEMINI_API_KEY is not set")
    return genai.Client(api_key=settings.gemini_api_key, http_options=_build_http_options())

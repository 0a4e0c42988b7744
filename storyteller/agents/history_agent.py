"""History research agent (search-grounded)."""
from __future__ import annotations

from storyteller.locales import Locale, language_name
from storyteller.tools.genai_tools import GenerationError, search_text
from storyteller.utils.config import settings


def build_history_prompt(location: str, locale: Locale) -> str:
    return (
        f'Look up verified historical facts about "{location}" in {settings.region}. '
        "Summarize its origins, the key historical events that shaped it and its cultural "
        f"significance, written in {language_name(locale)}. "
        "Favor facts that can stir an emotional response."
    )


async def research_history(location: str, locale: Locale) -> str:
    text = await search_text(build_history_prompt(location, locale))
    if not text:
        raise GenerationError(f"No historical summary returned for {location!r}")
    return text

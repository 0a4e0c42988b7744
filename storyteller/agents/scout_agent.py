"""Scout agent: nearby places and dietary-restricted dining.

Both lookups run in two phases: a search-grounded free-text query, then a
structured extraction of that text into the declared schema.
"""
from __future__ import annotations

from storyteller.locales import Locale, language_name
from storyteller.models.story import DietaryPlaces, NearbyInfo
from storyteller.tools.genai_tools import generate_structured, search_text
from storyteller.tools.response_schemas import DIETARY_SCHEMA, NEARBY_SCHEMA
from storyteller.tools.schema_validator import validate_dietary_places, validate_nearby_info
from storyteller.utils.config import settings

NO_PLACES_FOUND = "No specific places found."
NO_DIETARY_PLACES_FOUND = "No specific dietary places found."


def build_nearby_search_prompt(location: str, locale: Locale) -> str:
    limit = settings.max_places_per_category
    return (
        f'Find recommended places near "{location}" in {settings.region}. '
        f"I need {limit} of each:\n"
        "1. Popular restaurants or cafes.\n"
        "2. Accommodations (hotels, motels, guesthouses), with the approximate price per night.\n"
        "3. Other tourist attractions or things to do.\n"
        f"Return detailed information in {language_name(locale)}."
    )


def build_nearby_extract_prompt(source_text: str, locale: Locale) -> str:
    lang = language_name(locale)
    limit = settings.max_places_per_category
    return (
        "Extract the nearby place information from the text below as JSON.\n"
        f"Language: {lang}.\n\n"
        f"[Source Text]\n{source_text}\n\n"
        "Requirements:\n"
        f"- restaurants: at most {limit} items\n"
        f"- accommodations: at most {limit} items. Fill 'price' when the text mentions one "
        f"(e.g. \"approx $50\" or \"about 50,000 KRW\"); if unknown, say so in {lang}.\n"
        f"- attractions: at most {limit} items\n"
        "Do not invent places that are not in the source text."
    )


def build_dietary_search_prompt(location: str, locale: Locale) -> str:
    return (
        f'Find vegan, halal and kosher options near "{location}" in {settings.region}. '
        "Include both restaurants and grocery stores. "
        f"If nothing is found near the location itself, find the closest ones in {settings.region}. "
        f"Return detailed information in {language_name(locale)}."
    )


def build_dietary_extract_prompt(source_text: str, locale: Locale) -> str:
    limit = settings.max_places_per_category
    return (
        "Extract the dietary place information from the text below as JSON.\n"
        f"Language: {language_name(locale)}.\n\n"
        f"[Source Text]\n{source_text}\n\n"
        "Requirements:\n"
        f"- vegan: vegan restaurants or groceries found (max {limit})\n"
        f"- halal: halal restaurants or groceries found (max {limit})\n"
        f"- kosher: kosher restaurants or groceries found (max {limit})\n"
        "- Put the website URL or Google Maps link in 'url' when available.\n"
        "If nothing was found for a category, return an empty array for it."
    )


async def find_nearby_places(location: str, locale: Locale) -> NearbyInfo:
    source = await search_text(build_nearby_search_prompt(location, locale)) or NO_PLACES_FOUND
    raw = await generate_structured(build_nearby_extract_prompt(source, locale), NEARBY_SCHEMA)
    return validate_nearby_info(raw)


async def find_dietary_places(location: str, locale: Locale) -> DietaryPlaces:
    source = await search_text(build_dietary_search_prompt(location, locale)) or NO_DIETARY_PLACES_FOUND
    raw = await generate_structured(build_dietary_extract_prompt(source, locale), DIETARY_SCHEMA)
    return validate_dietary_places(raw)

"""Response schemas declared to the model for structured generation.

Written in the OpenAPI subset accepted by ``GenerateContentConfig.response_schema``.
"""
from __future__ import annotations

from typing import Any, Dict

PLAN_FIELDS = (
    "location",
    "emotion",
    "history",
    "contentType",
    "contentTitle",
    "targetAudience",
    "plot",
    "effect",
    "consolationMessage",
    "posterSlogan",
    "visualPrompt",
)

_PLAN_DESCRIPTIONS = {
    "history": "Summary of the historical facts the content is built on.",
    "contentType": "Format of the content, e.g. documentary, immersive exhibition, webtoon, play.",
    "plot": "Detailed content structure or plot synopsis.",
    "effect": "Expected emotional or cultural effect on the audience.",
    "consolationMessage": "Message that validates the user's emotion through the place's history.",
    "posterSlogan": "Short, punchy, witty poster slogan, under 20 characters.",
    "visualPrompt": "Detailed scene description for a watercolor painting. MUST BE IN ENGLISH.",
}


def _string(description: str | None = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "STRING"}
    if description:
        schema["description"] = description
    return schema


def _place_list(price_hint: str | None = None, with_url: bool = False) -> Dict[str, Any]:
    properties: Dict[str, Any] = {
        "name": _string(),
        "category": _string(),
        "description": _string(),
        "price": _string(price_hint),
    }
    if with_url:
        properties["url"] = _string("Website URL or Google Maps link if available.")
    return {
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "properties": properties,
            "required": ["name", "category", "description"],
        },
    }


PLAN_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {name: _string(_PLAN_DESCRIPTIONS.get(name)) for name in PLAN_FIELDS},
    "required": list(PLAN_FIELDS),
}

NEARBY_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "restaurants": _place_list("Price range or average price if available."),
        "accommodations": _place_list("Approximate price per night."),
        "attractions": _place_list("Ticket price if applicable."),
    },
    "required": ["restaurants", "accommodations", "attractions"],
}

DIETARY_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "vegan": _place_list(with_url=True),
        "halal": _place_list(with_url=True),
        "kosher": _place_list(with_url=True),
    },
    "required": ["vegan", "halal", "kosher"],
}

"""Schema validation tool for structured model output."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Iterable

from pydantic import ValidationError

from storyteller.models.story import DietaryPlaces, NearbyInfo, StoryContent
from storyteller.utils.config import settings

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class StructuredOutputError(ValueError):
    pass


def parse_json_object(text: str | None) -> Dict[str, Any]:
    """Decode the model's JSON text, tolerating a markdown code fence."""
    if not text or not text.strip():
        raise StructuredOutputError("Empty structured response")
    raw = _FENCE_RE.sub("", text.strip())
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        match = re.search(r"\{[\s\S]*\}", raw)
        if not match:
            raise StructuredOutputError("No JSON object found in model output") from exc
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as inner:
            raise StructuredOutputError(f"Invalid JSON in model output: {inner}") from inner
    if not isinstance(data, dict):
        raise StructuredOutputError("Structured response is not a JSON object")
    return data


def _require_keys(data: Dict[str, Any], keys: Iterable[str]) -> None:
    missing = [key for key in keys if key not in data]
    if missing:
        raise StructuredOutputError(f"Missing required fields: {', '.join(missing)}")


def _cap_lists(data: Dict[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    limit = settings.max_places_per_category
    capped = dict(data)
    for key in keys:
        items = capped.get(key)
        if isinstance(items, list) and len(items) > limit:
            logger.info("Truncating %s from %d to %d entries", key, len(items), limit)
            capped[key] = items[:limit]
    return capped


def validate_story_content(data: Dict[str, Any] | str | None) -> StoryContent:
    payload = parse_json_object(data) if not isinstance(data, dict) else data
    try:
        return StoryContent.model_validate(payload)
    except ValidationError as exc:
        raise StructuredOutputError(f"Plan does not match schema: {exc}") from exc


def validate_nearby_info(data: Dict[str, Any] | str | None) -> NearbyInfo:
    payload = parse_json_object(data) if not isinstance(data, dict) else data
    keys = ("restaurants", "accommodations", "attractions")
    _require_keys(payload, keys)
    payload = _cap_lists(payload, keys)
    try:
        return NearbyInfo.model_validate(payload)
    except ValidationError as exc:
        raise StructuredOutputError(f"Nearby places do not match schema: {exc}") from exc


def validate_dietary_places(data: Dict[str, Any] | str | None) -> DietaryPlaces:
    payload = parse_json_object(data) if not isinstance(data, dict) else data
    keys = ("vegan", "halal", "kosher")
    _require_keys(payload, keys)
    payload = _cap_lists(payload, keys)
    try:
        return DietaryPlaces.model_validate(payload)
    except ValidationError as exc:
        raise StructuredOutputError(f"Dietary places do not match schema: {exc}") from exc

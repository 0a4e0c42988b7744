from __future__ import annotations

import pytest

from storyteller.utils import config


def story_payload(**overrides):
    payload = {
        "location": "Gamcheon Culture Village",
        "emotion": "nostalgia",
        "history": "Founded in 1950s by refugees of the Korean War.",
        "contentType": "Immersive exhibition",
        "contentTitle": "Stairs of Memory",
        "targetAudience": "Young adults far from home",
        "plot": "A walk through painted alleys where each step recalls a refugee family.",
        "effect": "Comfort through shared memory.",
        "consolationMessage": "Missing home means you once belonged somewhere.",
        "posterSlogan": "Home, one step up",
        "visualPrompt": "Pastel hillside houses above the harbor at dusk",
    }
    payload.update(overrides)
    return payload


def place(name: str, **extra):
    return {"name": name, "category": "Cafe", "description": f"{name} near the village", **extra}


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(config.settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(config.settings, "max_places_per_category", 3)
    monkeypatch.setattr(config.settings, "request_timeout_ms", None)
    monkeypatch.setattr(config.settings, "output_dir", str(tmp_path / "outputs"))
    yield

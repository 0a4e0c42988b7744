from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import place, story_payload
from storyteller import server
from storyteller.locales import error_message
from storyteller.models.story import DietaryPlaces, ImagePayload, NearbyInfo, PipelineResult, StoryContent
from storyteller.orchestrator.pipeline import PipelineError
from storyteller.progress import LoadingState


def _result(**overrides):
    fields = {
        "story": StoryContent.model_validate(story_payload()),
        "watercolor_image": ImagePayload.from_bytes("image/png", b"wc"),
        "landscape_image": None,
        "nearby_info": NearbyInfo(restaurants=[place("Cafe A")]),
    }
    fields.update(overrides)
    return PipelineResult(**fields)


class FakePipeline:
    def __init__(self, *, fail_run=False, dietary=None):
        self.fail_run = fail_run
        self.dietary = dietary
        self.calls = []

    async def run(self, location, emotion, locale, tracker=None):
        self.calls.append(("run", location, emotion, locale))
        for state in (LoadingState.RESEARCHING, LoadingState.PLANNING):
            tracker.transition(state)
        if self.fail_run:
            tracker.transition(LoadingState.ERROR)
            raise PipelineError(error_message(locale), stage="planning")
        tracker.transition(LoadingState.SCOUTING)
        tracker.transition(LoadingState.COMPLETE)
        return _result()

    async def load_dietary(self, result, locale, tracker=None):
        self.calls.append(("dietary", locale))
        if result is None or self.dietary is None:
            return None
        return result.with_dietary(self.dietary)


def _client(monkeypatch, fake):
    monkeypatch.setattr(server, "pipeline", fake)
    return TestClient(server.app)


def test_health(monkeypatch):
    client = _client(monkeypatch, FakePipeline())
    assert client.get("/health").json() == {"status": "ok"}


def test_locales_endpoint(monkeypatch):
    client = _client(monkeypatch, FakePipeline())
    locales = client.get("/api/locales").json()["locales"]
    assert len(locales) == 9
    assert {"code": "ar", "name": "Arabic", "rtl": True} in locales


def test_create_story_returns_camel_case_result(monkeypatch):
    fake = FakePipeline()
    client = _client(monkeypatch, fake)

    response = client.post(
        "/api/stories",
        json={"location": "Gamcheon Culture Village", "emotion": "nostalgia", "locale": "en"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "complete"
    assert body["result"]["story"]["posterSlogan"] == "Home, one step up"
    assert body["result"]["landscape_image"] is None
    assert body["result"]["dietary_places"] is None
    assert fake.calls == [("run", "Gamcheon Culture Village", "nostalgia", "en")]


def test_create_story_fatal_error_is_localized(monkeypatch):
    client = _client(monkeypatch, FakePipeline(fail_run=True))

    response = client.post("/api/stories", json={"location": "Taejongdae", "emotion": "grief", "locale": "ko"})

    assert response.status_code == 502
    assert response.json()["detail"] == error_message("ko")


def test_create_story_rejects_blank_fields(monkeypatch):
    fake = FakePipeline()
    client = _client(monkeypatch, fake)

    response = client.post("/api/stories", json={"location": "  ", "emotion": "joy"})

    assert response.status_code == 422
    assert fake.calls == []


def test_dietary_round_trip(monkeypatch):
    fake = FakePipeline(dietary=DietaryPlaces(halal=[place("Halal House")]))
    client = _client(monkeypatch, fake)
    story = client.post("/api/stories", json={"location": "Busan Station", "emotion": "curious"}).json()["result"]

    response = client.post("/api/stories/dietary", json={"result": story, "locale": "ar"})

    body = response.json()
    assert body["updated"] is True
    assert body["result"]["dietary_places"]["halal"][0]["name"] == "Halal House"
    assert body["result"]["story"] == story["story"]


def test_dietary_without_result_is_noop(monkeypatch):
    client = _client(monkeypatch, FakePipeline(dietary=DietaryPlaces()))

    body = client.post("/api/stories/dietary", json={"result": None}).json()

    assert body == {"updated": False, "result": None}


def test_dietary_failure_echoes_result(monkeypatch):
    client = _client(monkeypatch, FakePipeline(dietary=None))
    story = client.post("/api/stories", json={"location": "Busan Station", "emotion": "curious"}).json()["result"]

    body = client.post("/api/stories/dietary", json={"result": story}).json()

    assert body["updated"] is False
    assert body["result"] == story

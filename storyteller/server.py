"""REST API server.

Stateless: the client keeps the ``PipelineResult`` it received from
``POST /api/stories`` and sends it back for the dietary follow-up.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from storyteller.locales import list_locales
from storyteller.orchestrator.pipeline import PipelineError, StoryPipeline
from storyteller.progress import ProgressTracker
from storyteller.schemas import (
    DietaryRequest,
    DietaryResponse,
    LocaleListResponse,
    LocaleResponse,
    StoryRequest,
    StoryResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Busan History Storyteller API")
pipeline = StoryPipeline()


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/locales", response_model=LocaleListResponse)
async def locales_api():
    return LocaleListResponse(locales=[LocaleResponse(**entry) for entry in list_locales()])


@app.post("/api/stories", response_model=StoryResponse)
async def create_story_api(payload: StoryRequest):
    tracker = ProgressTracker()
    try:
        result = await pipeline.run(payload.location, payload.emotion, payload.locale, tracker=tracker)
    except PipelineError as exc:
        raise HTTPException(status_code=502, detail=exc.message)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return StoryResponse(state=tracker.state, result=result)


@app.post("/api/stories/dietary", response_model=DietaryResponse)
async def dietary_api(payload: DietaryRequest):
    updated = await pipeline.load_dietary(payload.result, payload.locale)
    if updated is None:
        return DietaryResponse(updated=False, result=payload.result)
    return DietaryResponse(updated=True, result=updated)

"""Pydantic schemas for API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from storyteller.models.story import PipelineResult
from storyteller.progress import LoadingState


class StoryRequest(BaseModel):
    location: str = Field(..., min_length=1, pattern=r"\S")
    emotion: str = Field(..., min_length=1, pattern=r"\S")
    locale: str = "en"


class StoryResponse(BaseModel):
    state: LoadingState
    result: PipelineResult


class DietaryRequest(BaseModel):
    result: Optional[PipelineResult] = None
    locale: str = "en"


class DietaryResponse(BaseModel):
    updated: bool
    result: Optional[PipelineResult] = None


class LocaleResponse(BaseModel):
    code: str
    name: str
    rtl: bool


class LocaleListResponse(BaseModel):
    locales: List[LocaleResponse]

"""Core story models (framework-agnostic)."""
from __future__ import annotations

import base64
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Place(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    description: str
    price: Optional[str] = None
    url: Optional[str] = None


class StoryContent(BaseModel):
    """Structured content plan. ``visual_prompt`` feeds the image model only."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    location: str
    emotion: str
    history: str
    content_type: str = Field(..., alias="contentType")
    content_title: str = Field(..., alias="contentTitle")
    target_audience: str = Field(..., alias="targetAudience")
    plot: str
    effect: str
    consolation_message: str = Field(..., alias="consolationMessage")
    poster_slogan: str = Field(..., alias="posterSlogan")
    visual_prompt: str = Field(..., alias="visualPrompt")


class NearbyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    restaurants: Tuple[Place, ...] = ()
    accommodations: Tuple[Place, ...] = ()
    attractions: Tuple[Place, ...] = ()


class DietaryPlaces(BaseModel):
    model_config = ConfigDict(frozen=True)

    vegan: Tuple[Place, ...] = ()
    halal: Tuple[Place, ...] = ()
    kosher: Tuple[Place, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.vegan or self.halal or self.kosher)


class ImagePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: str  # base64

    @classmethod
    def from_bytes(cls, mime_type: str, raw: bytes) -> "ImagePayload":
        return cls(mime_type=mime_type, data=base64.b64encode(raw).decode("ascii"))

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    @property
    def extension(self) -> str:
        subtype = self.mime_type.split("/")[-1].lower()
        return "jpg" if subtype == "jpeg" else subtype

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


class PipelineResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    story: StoryContent
    watercolor_image: Optional[ImagePayload] = None
    landscape_image: Optional[ImagePayload] = None
    nearby_info: Optional[NearbyInfo] = None
    dietary_places: Optional[DietaryPlaces] = None

    def with_dietary(self, dietary_places: DietaryPlaces) -> "PipelineResult":
        return self.model_copy(update={"dietary_places": dietary_places})

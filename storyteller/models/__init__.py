"""Story, place and pipeline result models."""
from storyteller.models.story import (
    DietaryPlaces,
    ImagePayload,
    NearbyInfo,
    PipelineResult,
    Place,
    StoryContent,
)

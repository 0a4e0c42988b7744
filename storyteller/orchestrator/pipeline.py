"""Story pipeline orchestration.

Stage A (history) and stage B (plan) are sequential and fatal on failure.
Stage C fans out the two image requests and the nearby-places lookup and
settles each slot on its own. The dietary lookup is a separate follow-up that
only runs against a finished result and never disturbs it.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Tuple

from storyteller.agents.history_agent import research_history
from storyteller.agents.planner_agent import plan_content
from storyteller.agents.scout_agent import find_dietary_places, find_nearby_places
from storyteller.agents.visual_agent import generate_landscape_image, generate_watercolor_image
from storyteller.locales import Locale, error_message, resolve_locale
from storyteller.models.story import ImagePayload, NearbyInfo, PipelineResult, StoryContent
from storyteller.progress import LoadingState, ProgressTracker

logger = logging.getLogger(__name__)

SCOUTING_SLOTS = ("watercolor_image", "landscape_image", "nearby_info")


class PipelineError(Exception):
    """Fatal pipeline failure. ``message`` is the localized text shown to users."""

    def __init__(self, message: str, *, stage: str) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage


class StoryPipeline:
    """Orchestrate research, planning and scouting for one place and emotion."""

    async def run(
        self,
        location: str,
        emotion: str,
        locale: str | Locale = Locale.EN,
        tracker: Optional[ProgressTracker] = None,
    ) -> PipelineResult:
        location = (location or "").strip()
        emotion = (emotion or "").strip()
        if not location:
            raise ValueError("location must not be empty")
        if not emotion:
            raise ValueError("emotion must not be empty")
        loc = resolve_locale(locale)
        tracker = tracker or ProgressTracker()

        tracker.transition(LoadingState.RESEARCHING)
        try:
            history = await research_history(location, loc)
        except Exception as exc:
            raise self._fail(tracker, loc, location, exc) from exc

        tracker.transition(LoadingState.PLANNING)
        try:
            story = await plan_content(location, emotion, history, loc)
        except Exception as exc:
            raise self._fail(tracker, loc, location, exc) from exc

        tracker.transition(LoadingState.SCOUTING)
        watercolor, landscape, nearby = await self._scout(story, location, loc)
        result = PipelineResult(
            story=story,
            watercolor_image=watercolor,
            landscape_image=landscape,
            nearby_info=nearby,
        )
        tracker.transition(LoadingState.COMPLETE)
        logger.info(
            "Pipeline complete",
            extra={
                "location": location,
                "locale": loc.value,
                "absent_slots": [slot for slot in SCOUTING_SLOTS if getattr(result, slot) is None],
            },
        )
        return result

    async def _scout(
        self, story: StoryContent, location: str, locale: Locale
    ) -> Tuple[Optional[ImagePayload], Optional[ImagePayload], Optional[NearbyInfo]]:
        outcomes = await asyncio.gather(
            generate_watercolor_image(story.visual_prompt),
            generate_landscape_image(location),
            find_nearby_places(location, locale),
            return_exceptions=True,
        )
        settled = []
        for slot, outcome in zip(SCOUTING_SLOTS, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(
                    "Scouting call for %s failed; leaving it empty",
                    slot,
                    exc_info=outcome,
                    extra={"location": location},
                )
                settled.append(None)
            else:
                settled.append(outcome)
        watercolor, landscape, nearby = settled
        return watercolor, landscape, nearby

    def _fail(
        self, tracker: ProgressTracker, locale: Locale, location: str, exc: Exception
    ) -> PipelineError:
        stage = tracker.state.value
        logger.error(
            "Pipeline aborted during %s",
            stage,
            exc_info=exc,
            extra={"location": location, "locale": locale.value},
        )
        tracker.transition(LoadingState.ERROR)
        return PipelineError(error_message(locale), stage=stage)

    async def load_dietary(
        self,
        result: Optional[PipelineResult],
        locale: str | Locale = Locale.EN,
        tracker: Optional[ProgressTracker] = None,
    ) -> Optional[PipelineResult]:
        """Attach vegan/halal/kosher places to a finished result.

        Returns the updated copy, or ``None`` when no update occurred: either
        there is no finished result yet or the lookup failed. The given result
        is never modified.
        """
        if result is None:
            logger.info("Dietary lookup skipped: no finished result")
            return None
        if tracker is not None and tracker.state is not LoadingState.COMPLETE:
            logger.info("Dietary lookup skipped: pipeline is %s", tracker.state.value)
            return None
        loc = resolve_locale(locale)
        location = result.story.location

        if tracker is not None:
            tracker.transition(LoadingState.DIETARY_LOADING)
        try:
            dietary = await find_dietary_places(location, loc)
        except Exception:
            logger.warning("Dietary lookup failed", exc_info=True, extra={"location": location})
            return None
        finally:
            if tracker is not None:
                tracker.transition(LoadingState.COMPLETE)
        return result.with_dietary(dietary)

"""Content planner agent: history + emotion into a structured story plan."""
from __future__ import annotations

from storyteller.locales import Locale, language_name
from storyteller.models.story import StoryContent
from storyteller.tools.genai_tools import generate_structured
from storyteller.tools.response_schemas import PLAN_SCHEMA
from storyteller.tools.schema_validator import validate_story_content
from storyteller.utils.config import settings

PLANNER_INSTRUCTION = (
    "You are a cultural content planner who turns local history into stories. "
    "Connect the history of the location with the user's emotion and design a piece of "
    "cultural content around it.\n"
    "Style guide: witty, concise, punchy and current in tone. The slogan must be short and "
    "land an emotional punch or a smile.\n"
)


def build_plan_prompt(location: str, emotion: str, history: str, locale: Locale) -> str:
    lang = language_name(locale)
    return (
        PLANNER_INSTRUCTION
        + "\n[INPUTS]\n"
        + f"Location: {location} ({settings.region})\n"
        + f"Emotion: {emotion}\n"
        + f"History context: {history}\n"
        + f"Target language: {lang}\n"
        + "\n[REQUIREMENTS]\n"
        + f"1. Choose a content type and a content title, in {lang}.\n"
        + f"2. Write a plot synopsis that links the history and the emotion, in {lang}.\n"
        + f"3. Describe the target audience and the expected effect, in {lang}.\n"
        + f"4. Write a consolation message addressed to the user, in {lang}.\n"
        + f"5. Write a 'posterSlogan' under 20 characters, in {lang}.\n"
        + "6. Write a 'visualPrompt' describing a beautiful watercolor painting of the scene. "
        + "The visualPrompt MUST be written in ENGLISH regardless of the target language, "
        + "because it is sent to an image generator.\n"
        + f"Every field except visualPrompt must be written in {lang}.\n"
        + "Output strictly in JSON."
    )


async def plan_content(location: str, emotion: str, history: str, locale: Locale) -> StoryContent:
    raw = await generate_structured(build_plan_prompt(location, emotion, history, locale), PLAN_SCHEMA)
    return validate_story_content(raw)

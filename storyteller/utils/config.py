"""Application configuration."""
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORYTELLER_",
        extra="ignore",
    )

    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY"),
    )
    text_model: str = "gemini-2.5-flash"
    image_model: str = "gemini-2.5-flash-image"
    region: str = "Busan, South Korea"
    # None keeps the transport defaults of the Gemini client.
    request_timeout_ms: int | None = None
    max_places_per_category: int = Field(default=3, ge=1)
    output_dir: str = "outputs"


settings = Settings()

"""
Gemini text-generation settings.

Model selection, sampling and the bounded wait applied to every generation call.

Dependencies: pydantic_settings
System role: Generative backend configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Configuration for the Gemini generation backend."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
        description="Google API key used for Gemini access",
    )
    model: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model identifier",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for one generation call before treating it as failed",
    )

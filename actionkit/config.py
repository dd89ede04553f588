"""Provider configuration."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from actionkit.errors import ConfigurationError


class Settings(BaseSettings):
    """Environment-driven settings for the bundled LLM provider."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    openrouter_api_key: str = Field(..., alias="OPENROUTER_API_KEY")
    openrouter_model: str = Field(..., alias="OPENROUTER_MODEL")
    openrouter_base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        alias="OPENROUTER_BASE_URL",
    )
    request_timeout_seconds: float = Field(default=30.0, alias="REQUEST_TIMEOUT_SECONDS")
    llm_max_retries: int = Field(default=3, ge=0, le=3, alias="LLM_MAX_RETRIES")


def load_settings() -> Settings:
    """Load and validate settings."""

    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid provider settings: {exc}") from exc

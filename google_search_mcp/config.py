"""Application configuration."""
import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

GOOGLE_SEARCH_ENDPOINT = "https://www.googleapis.com/customsearch/v1"


class ConfigurationError(Exception):
    """Required startup configuration is missing or invalid."""


class Settings(BaseSettings):
    """App settings from env."""

    google_api_key: str = ""
    google_search_engine_id: str = ""
    google_search_endpoint: str = GOOGLE_SEARCH_ENDPOINT

    search_rate_limit_per_minute: int = Field(default=10, ge=1)
    search_request_timeout: float = Field(default=10.0, gt=0)  # seconds

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    class Config:
        env_file = ".env"
        extra = "ignore"


def load_settings(settings: Settings | None = None) -> Settings:
    """Read settings and fail fast when the Google credentials are absent or a value is invalid."""
    if settings is None:
        try:
            settings = Settings()
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']).upper()}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {problems}") from e
    if not settings.google_api_key:
        raise ConfigurationError("GOOGLE_API_KEY environment variable is not set")
    if not settings.google_search_engine_id:
        raise ConfigurationError("GOOGLE_SEARCH_ENGINE_ID environment variable is not set")
    return settings

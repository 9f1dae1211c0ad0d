"""Application settings loaded from environment variables and `.env`."""

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chainlinked.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Runtime settings for carousel generation and style refresh."""

    model_config = SettingsConfigDict(
        env_prefix="CHAINLINKED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Log level for the package logger")
    generation_max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="LLM attempts before giving up on an unparseable response",
    )
    generation_retry_min_wait: float = Field(default=1.0, ge=0.0)
    generation_retry_max_wait: float = Field(default=8.0, ge=0.0)
    style_refresh_post_growth: float = Field(
        default=0.2,
        gt=0.0,
        description="Fraction of new posts that makes a style profile stale",
    )
    style_refresh_max_age_days: float = Field(
        default=7.0,
        gt=0.0,
        description="Days after which a style profile is stale regardless of post count",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance.

    Raises:
        ConfigurationError: If an environment value fails validation.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid CHAINLINKED_* settings", str(e)) from e


def clear_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()

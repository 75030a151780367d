"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_name: str = Field(
        default="greetings-api",
        description="Title reported by the OpenAPI document",
        min_length=1,
    )
    app_version: str = Field(
        default="0.1.0",
        description="Version reported by the OpenAPI document",
        min_length=1,
    )
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP listener binds to",
        min_length=1,
    )
    port: int = Field(
        default=8080,
        description="TCP port the HTTP listener binds to",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level for the process",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                "LOG_LEVEL must be one of %s" % ", ".join(LOG_LEVELS)
            )
        return level


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]

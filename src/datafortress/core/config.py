# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from datafortress.core.exceptions import ConfigurationError

LOG_FORMATS = ("json", "text")
OUTPUT_FORMATS = ("console", "json", "json-summary", "text")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DATAFORTRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Report
    client_name: str = "Acme Corp"
    default_format: str = "console"

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v

    @field_validator("default_format")
    @classmethod
    def _check_default_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"default_format must be one of {', '.join(OUTPUT_FORMATS)}")
        return v


def get_settings() -> Settings:
    """Load settings from the environment and any .env file.

    Raises:
        ConfigurationError: If a DATAFORTRESS_* value is invalid.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc

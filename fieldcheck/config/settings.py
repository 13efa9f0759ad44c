"""Library settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = {"text", "json"}


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Library (hardcoded constants)
    app_name: str = "fieldcheck"
    app_version: str = "0.1.0"

    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    model_config = SettingsConfigDict(
        env_prefix="FIELDCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level against the standard logging level names."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Log level must be a standard logging level, got {level}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        fmt = str(v).lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Log format must be one of {LOG_FORMATS}, got {fmt}")
        return fmt


settings = Settings()

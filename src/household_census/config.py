"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from household_census.localization import Locale


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults for development. Override via
    environment variables (prefixed with CENSUS_) or .env file.

    Examples:
        CENSUS_LOCALE=en
        CENSUS_LOG_LEVEL=DEBUG
        CENSUS_ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_prefix="CENSUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Household Census"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.WARNING
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        description="Log output format; json in production, console elsewhere when unset",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Presentation
    locale: Locale = Field(
        default=Locale.MARATHI,
        description="Language used for age strings, gender names and headings",
    )
    date_format: str = Field(
        default="%Y-%m-%d",
        description="strptime format tried first for birth dates on the command line and in rosters",
    )

    @model_validator(mode="after")
    def resolve_log_format(self) -> "Settings":
        """Default to JSON logging in production."""
        if self.log_format is None:
            self.log_format = (
                "json" if self.environment == Environment.PRODUCTION else "console"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()

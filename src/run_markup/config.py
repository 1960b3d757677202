"""Configuration management for Run Markup."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output settings
    output_encoding: str = Field(
        default="utf-8",
        alias="RUN_MARKUP_ENCODING",
    )
    fragment: bool = Field(
        default=False,
        alias="RUN_MARKUP_FRAGMENT",
    )

    # Extraction settings
    skip_empty_paragraphs: bool = Field(
        default=True,
        alias="RUN_MARKUP_SKIP_EMPTY",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings

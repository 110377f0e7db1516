"""
Configuration management for Mushaf.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the MUSHAF_ prefix.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MushafSettings(BaseSettings):
    """
    Configuration settings for the Mushaf service.

    All settings can be overridden via environment variables with MUSHAF_ prefix.

    Example:
        export MUSHAF_CORPUS_PATH="/srv/data/quran_v2.json"
        export MUSHAF_PORT="8080"
        export MUSHAF_LOG_FORMAT="text"
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSHAF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Corpus ============

    corpus_path: Path = Field(
        default=Path("data/quran_v2.json"),
        description="Path of the JSON document holding the surahs and ayahs",
    )

    # ============ Server ============

    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )

    port: int = Field(
        default=3000,
        description="Port the HTTP server listens on",
        ge=1,
        le=65535,
    )

    # ============ Logging ============

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level",
    )

    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log record format",
    )

    # ============ Validators ============

    @field_validator("corpus_path", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


# Default settings instance
_default_settings: MushafSettings | None = None


def get_settings() -> MushafSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        MushafSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = MushafSettings()
    return _default_settings


def configure(**kwargs) -> MushafSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        MushafSettings: The new settings instance
    """
    global _default_settings
    _default_settings = MushafSettings(**kwargs)
    return _default_settings

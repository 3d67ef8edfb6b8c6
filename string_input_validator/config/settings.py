"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all string-input-validator settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhoneSettings(BaseSettings):
    """Phone number detection configuration."""

    model_config = SettingsConfigDict(env_prefix="PHONE_", extra="ignore")

    default_region: str = Field(
        default="DE",
        description="ISO 3166-1 region used for numbers without an international prefix",
    )
    leniency: Literal["POSSIBLE", "VALID", "STRICT_GROUPING", "EXACT_GROUPING"] = (
        Field(
            default="POSSIBLE",
            description="How strictly a candidate must look like a phone number",
        )
    )

    @field_validator("default_region", "leniency", mode="before")
    @classmethod
    def uppercase(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for the string_input_validator namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from string_input_validator.config import get_settings

        settings = get_settings()
        region = settings.phone.default_region
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    phone: PhoneSettings = Field(default_factory=PhoneSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None

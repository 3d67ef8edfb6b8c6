"""Configuration module for string-input-validator.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from string_input_validator.config import get_settings

    settings = get_settings()

    # Access phone detection settings
    region = settings.phone.default_region

    # Access logging settings
    level = settings.logging.log_level
"""

from string_input_validator.config.settings import (
    LoggingSettings,
    PhoneSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "PhoneSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]

"""Composable validators for single string inputs."""

from string_input_validator.validation import (
    ALPHANUMERIC,
    NUMERIC,
    CompositeValidator,
    Invalid,
    LengthPolicy,
    LengthValidator,
    NotEmptyValidator,
    Outcome,
    PatternCompileError,
    PatternValidator,
    PhoneNumberValidator,
    StringValidator,
    Valid,
    ValidationFlag,
    ValidationService,
    ValidatorConfigurationError,
)

__all__ = [
    "ALPHANUMERIC",
    "NUMERIC",
    "CompositeValidator",
    "Invalid",
    "LengthPolicy",
    "LengthValidator",
    "NotEmptyValidator",
    "Outcome",
    "PatternCompileError",
    "PatternValidator",
    "PhoneNumberValidator",
    "StringValidator",
    "Valid",
    "ValidationFlag",
    "ValidationService",
    "ValidatorConfigurationError",
]

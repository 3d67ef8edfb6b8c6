"""Composable string validation.

Validators take an optional string and return an Outcome (Valid or Invalid).
CompositeValidator merges several validators into a single decision that
reports every reason the input failed.
"""

from string_input_validator.validation.composite import CompositeValidator
from string_input_validator.validation.errors import (
    PatternCompileError,
    ValidatorConfigurationError,
)
from string_input_validator.validation.flags import ValidationFlag
from string_input_validator.validation.results import Invalid, Outcome, Valid
from string_input_validator.validation.service import ValidationService
from string_input_validator.validation.validators import (
    ALPHANUMERIC,
    NUMERIC,
    LengthPolicy,
    LengthValidator,
    NotEmptyValidator,
    PatternValidator,
    PhoneNumberValidator,
    StringValidator,
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

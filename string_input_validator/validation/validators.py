"""Concrete validator implementations.

Every validator follows the StringValidator protocol: it takes an optional
string and returns an Outcome. Validators hold no mutable state, so one
instance can be shared by any number of callers.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

import phonenumbers

from string_input_validator.config import get_settings
from string_input_validator.utils.logging import get_logger
from string_input_validator.validation.errors import (
    PatternCompileError,
    ValidatorConfigurationError,
)
from string_input_validator.validation.flags import ValidationFlag
from string_input_validator.validation.results import Invalid, Outcome, Valid

logger = get_logger(__name__)


@runtime_checkable
class StringValidator(Protocol):
    """Anything that turns an optional string into an Outcome."""

    @property
    def description(self) -> str: ...

    def validate(self, value: str | None) -> Outcome: ...


class _BaseValidator:
    """Shared validate() entry point; subclasses implement _check()."""

    def validate(self, value: str | None) -> Outcome:
        outcome = self._check(value)
        logger.debug(
            "Validation finished",
            validator=self.description,
            outcome=outcome.description,
        )
        return outcome

    def __str__(self) -> str:
        return self.description


class LengthPolicy(str, Enum):
    """How LengthValidator treats a string shorter than its limit."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class NotEmptyValidator(_BaseValidator):
    """Checks that a string exists and contains at least one character."""

    def _check(self, value: str | None) -> Outcome:
        if not value:
            return Invalid(ValidationFlag.EMPTY_STRING)
        return Valid()

    @property
    def description(self) -> str:
        return "NotEmpty"


@dataclass(frozen=True)
class LengthValidator(_BaseValidator):
    """Compares the character count of a string with ``length_limit``.

    A longer string reports both LENGTH_EXCEEDED and LENGTH_MISMATCH. A
    shorter one reports LENGTH_MISMATCH, as a failure under
    ``LengthPolicy.STRICT`` or as an informational flag on a Valid outcome
    under ``LengthPolicy.LENIENT``.
    """

    length_limit: int
    policy: LengthPolicy = LengthPolicy.STRICT

    def __post_init__(self):
        if isinstance(self.length_limit, bool) or not isinstance(self.length_limit, int):
            raise ValidatorConfigurationError(
                f"length_limit must be an int, got {type(self.length_limit).__name__}"
            )
        if self.length_limit < 0:
            raise ValidatorConfigurationError(
                f"length_limit must be >= 0, got {self.length_limit}"
            )
        object.__setattr__(self, "policy", LengthPolicy(self.policy))

    def _check(self, value: str | None) -> Outcome:
        if value is None:
            return Invalid(ValidationFlag.LENGTH_MISMATCH)

        count = len(value)
        if count > self.length_limit:
            return Invalid(
                ValidationFlag.of(
                    ValidationFlag.LENGTH_EXCEEDED, ValidationFlag.LENGTH_MISMATCH
                )
            )
        if count < self.length_limit:
            if self.policy is LengthPolicy.LENIENT:
                return Valid(ValidationFlag.LENGTH_MISMATCH)
            return Invalid(ValidationFlag.LENGTH_MISMATCH)
        return Valid()

    @property
    def description(self) -> str:
        return f"LengthLimit: {self.length_limit}"


class PatternValidator(_BaseValidator):
    """Validates a string against a regular expression.

    The whole string has to match. An empty string always passes; combine
    with NotEmptyValidator to reject it.
    """

    def __init__(self, pattern: str):
        if not isinstance(pattern, str):
            raise ValidatorConfigurationError(
                f"pattern must be a str, got {type(pattern).__name__}"
            )
        try:
            self.regex = re.compile(pattern)
        except re.error as e:
            raise PatternCompileError(pattern, str(e)) from e

    @classmethod
    def from_pattern(cls, pattern: str) -> "PatternValidator | None":
        """Build a validator, or return None if the pattern does not compile."""
        try:
            return cls(pattern)
        except PatternCompileError as e:
            logger.warning(
                "Creating regular expression failed", pattern=pattern, error=e.reason
            )
            return None

    @classmethod
    def numeric(cls) -> "PatternValidator":
        """Digits only."""
        return NUMERIC

    @classmethod
    def alphanumeric(cls) -> "PatternValidator":
        """Digits and ASCII letters only."""
        return ALPHANUMERIC

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    def _check(self, value: str | None) -> Outcome:
        if value is None:
            return Invalid(ValidationFlag.INVALID_FORMAT)
        if value and self.regex.fullmatch(value) is None:
            return Invalid(ValidationFlag.INVALID_FORMAT)
        return Valid()

    @property
    def description(self) -> str:
        return f"RegEX: {self.pattern}"

    def __repr__(self) -> str:
        return f"PatternValidator({self.pattern!r})"

    def __eq__(self, other):
        if not isinstance(other, PatternValidator):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self):
        return hash((PatternValidator, self.pattern))


NUMERIC = PatternValidator("^[0-9]*$")
ALPHANUMERIC = PatternValidator("^[0-9a-zA-Z]*$")

_LENIENCIES = {
    "POSSIBLE": phonenumbers.Leniency.POSSIBLE,
    "VALID": phonenumbers.Leniency.VALID,
    "STRICT_GROUPING": phonenumbers.Leniency.STRICT_GROUPING,
    "EXACT_GROUPING": phonenumbers.Leniency.EXACT_GROUPING,
}


@dataclass(frozen=True)
class PhoneNumberValidator(_BaseValidator):
    """Validates that a string is exactly one phone number (E.164 style).

    Detection is delegated to ``phonenumbers.PhoneNumberMatcher``. The input
    passes only if the matcher finds a single number spanning the whole
    string. ``region`` and ``leniency`` default to the PhoneSettings values.
    """

    region: str | None = None
    leniency: str | None = None

    def __post_init__(self):
        settings = get_settings().phone
        region = (self.region or settings.default_region).upper()
        if region not in phonenumbers.SUPPORTED_REGIONS:
            raise ValidatorConfigurationError(f"Unknown phone number region {region!r}")
        leniency = (self.leniency or settings.leniency).upper()
        if leniency not in _LENIENCIES:
            raise ValidatorConfigurationError(
                f"Unknown phone number leniency {leniency!r}, "
                f"expected one of {', '.join(_LENIENCIES)}"
            )
        object.__setattr__(self, "region", region)
        object.__setattr__(self, "leniency", leniency)

    def _check(self, value: str | None) -> Outcome:
        if not value:
            return Invalid(ValidationFlag.EMPTY_STRING)

        matches = list(
            phonenumbers.PhoneNumberMatcher(
                value, self.region, leniency=_LENIENCIES[self.leniency]
            )
        )
        if len(matches) == 1 and matches[0].start == 0 and matches[0].end == len(value):
            return Valid()
        return Invalid(ValidationFlag.INVALID_FORMAT)

    @property
    def description(self) -> str:
        return "PhoneNumberValidator"

"""Validation result types.

A validation call returns exactly one of two immutable value objects:
``Valid`` (optionally annotated with non-fatal flags) or ``Invalid``
(carrying every reason the input failed). Both share the ``Outcome``
query helpers, so callers never have to branch on the concrete type.
"""

from dataclasses import dataclass

from string_input_validator.validation.flags import ValidationFlag


class Outcome:
    """Query helpers shared by Valid and Invalid."""

    @property
    def flags(self) -> ValidationFlag:
        """Flags carried by this outcome; the empty set if there are none."""
        raise NotImplementedError

    @property
    def is_valid(self) -> bool:
        raise NotImplementedError

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.is_valid

    @property
    def is_empty(self) -> bool:
        return self.flags.contains(ValidationFlag.EMPTY_STRING)

    @property
    def has_max_length_exceeded(self) -> bool:
        return self.flags.contains(ValidationFlag.LENGTH_EXCEEDED)

    @property
    def has_length_mismatch(self) -> bool:
        return self.flags.contains(ValidationFlag.LENGTH_MISMATCH)

    @property
    def contains_only_valid_characters(self) -> bool:
        return not self.flags.contains(ValidationFlag.INVALID_FORMAT)


@dataclass(frozen=True)
class Valid(Outcome):
    """Validation passed.

    ``extra`` holds informational flags that did not fail the input. An
    empty set is stored as ``None`` so that ``Valid()`` and
    ``Valid(ValidationFlag.none())`` compare equal.
    """

    extra: ValidationFlag | None = None

    def __post_init__(self):
        if self.extra is not None and self.extra.is_empty:
            object.__setattr__(self, "extra", None)

    @property
    def flags(self) -> ValidationFlag:
        return self.extra if self.extra is not None else ValidationFlag.none()

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def description(self) -> str:
        if self.extra is None:
            return "Valid"
        return f"Valid {self.extra.render()}"


@dataclass(frozen=True)
class Invalid(Outcome):
    """Validation failed for every reason listed in ``error``."""

    error: ValidationFlag

    def __post_init__(self):
        if self.error.is_empty:
            raise ValueError("Invalid outcome requires at least one error flag")

    @property
    def flags(self) -> ValidationFlag:
        return self.error

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def description(self) -> str:
        return f"Invalid {self.error.render()}"

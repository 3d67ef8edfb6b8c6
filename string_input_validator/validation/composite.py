"""Composite validator.

A CompositeValidator chains or nests other validators. Every member is asked
for its outcome, independent of what earlier members reported, and the
results are merged: any failure makes the composite fail with the union of
all failure flags; otherwise informational flags of the members are kept on
the Valid outcome.
"""

from collections.abc import Sequence

from string_input_validator.utils.logging import get_logger
from string_input_validator.validation.flags import ValidationFlag
from string_input_validator.validation.results import Invalid, Outcome, Valid
from string_input_validator.validation.validators import StringValidator

logger = get_logger(__name__)


class CompositeValidator:
    """Runs an ordered list of validators and merges their outcomes."""

    def __init__(self, validators: Sequence[StringValidator]):
        """Initialize with the member validators.

        Args:
            validators: Ordered, non-empty sequence of validators. Members may
                be composites themselves.
        """
        self.validators = tuple(validators)
        if not self.validators:
            raise ValueError("CompositeValidator requires at least one validator")

    @classmethod
    def of(cls, *validators: StringValidator) -> "CompositeValidator":
        return cls(validators)

    def validate(self, value: str | None) -> Outcome:
        """Validate ``value`` with every member validator.

        Returns:
            Invalid with every member's error flags if any member failed,
            otherwise Valid with the union of the members' extra flags.
        """
        error_flags = ValidationFlag.none()
        success_flags = ValidationFlag.none()

        for validator in self.validators:
            outcome = validator.validate(value)
            if isinstance(outcome, Invalid):
                error_flags |= outcome.error
            elif outcome.extra is not None:
                success_flags |= outcome.extra

        result = Invalid(error_flags) if error_flags else Valid(success_flags)
        logger.debug(
            "Composite validation finished",
            validators=len(self.validators),
            outcome=result.description,
        )
        return result

    @property
    def description(self) -> str:
        desc = f"{type(self).__name__}:"
        return "".join([desc, *(f" {v.description}," for v in self.validators)])

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"CompositeValidator({list(self.validators)!r})"

    def __eq__(self, other):
        if not isinstance(other, CompositeValidator):
            return NotImplemented
        return self.validators == other.validators

    def __hash__(self):
        return hash((CompositeValidator, self.validators))

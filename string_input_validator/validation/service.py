"""Validation service for validating several named inputs at once.

This module provides a service layer that maps form fields to validators
and aggregates their outcomes into reports.
"""

from collections.abc import Mapping

from string_input_validator.utils.logging import get_logger
from string_input_validator.validation.results import Outcome
from string_input_validator.validation.validators import StringValidator

logger = get_logger(__name__)


class ValidationService:
    """Orchestrates validators per field and aggregates results.

    The service runs every registered validator and provides methods to
    check for errors and format reports for display.
    """

    def __init__(self, validators: Mapping[str, StringValidator]):
        """Initialize service with validators keyed by field name.

        Args:
            validators: Mapping of field name to validator (a composite for
                fields with several checks)
        """
        self.validators = dict(validators)

    def validate_all(self, values: Mapping[str, str | None]) -> dict[str, Outcome]:
        """Validate every registered field.

        Args:
            values: Field values by name. Missing fields are validated as None.

        Returns:
            Dictionary mapping field name to Outcome, in registration order
        """
        unknown = set(values) - set(self.validators)
        if unknown:
            logger.debug("Ignoring fields without validator", fields=sorted(unknown))

        return {
            field: validator.validate(values.get(field))
            for field, validator in self.validators.items()
        }

    def has_errors(self, results: Mapping[str, Outcome]) -> bool:
        """Check if any field failed validation."""
        return any(not r.is_valid for r in results.values())

    def failed_fields(self, results: Mapping[str, Outcome]) -> list[str]:
        """Names of the fields that failed, in result order."""
        return [field for field, r in results.items() if not r.is_valid]

    def format_error_report(self, results: Mapping[str, Outcome]) -> str:
        """Format errors as one ``field: [Flags]`` line per failed field.

        Returns:
            Formatted error report, or an empty string if nothing failed
        """
        return "\n".join(
            f"{field}: {results[field].flags.render()}"
            for field in self.failed_fields(results)
        )

    def get_success_message(self, results: Mapping[str, Outcome]) -> str:
        """Format success message including any warnings.

        Args:
            results: Dictionary of validation outcomes

        Returns:
            Success message, listing fields that passed with extra flags
        """
        messages = [
            f"{field}: {result.flags.render()}"
            for field, result in results.items()
            if result.is_valid and not result.flags.is_empty
        ]

        if messages:
            return "Validation passed with warnings:\n" + "\n".join(messages)
        return "All validations passed"

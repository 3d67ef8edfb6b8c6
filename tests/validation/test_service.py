"""Tests for ValidationService."""

from unittest.mock import Mock

from string_input_validator.validation.composite import CompositeValidator
from string_input_validator.validation.flags import ValidationFlag
from string_input_validator.validation.results import Invalid, Valid
from string_input_validator.validation.service import ValidationService
from string_input_validator.validation.validators import (
    NUMERIC,
    LengthPolicy,
    LengthValidator,
    NotEmptyValidator,
)


class TestValidationService:
    """Tests for ValidationService orchestration."""

    def test_validate_all_success(self):
        """Test validation when all fields pass."""
        service = ValidationService(
            {
                "zip": CompositeValidator.of(LengthValidator(5), NUMERIC),
                "name": NotEmptyValidator(),
            }
        )

        results = service.validate_all({"zip": "80331", "name": "Ada"})

        assert not service.has_errors(results)
        assert list(results) == ["zip", "name"]
        assert service.get_success_message(results) == "All validations passed"
        assert service.format_error_report(results) == ""

    def test_validate_all_one_fails(self):
        """Test validation when one field fails."""
        service = ValidationService(
            {
                "zip": CompositeValidator.of(LengthValidator(5), NUMERIC),
                "name": NotEmptyValidator(),
            }
        )

        results = service.validate_all({"zip": "80x", "name": "Ada"})

        assert service.has_errors(results)
        assert service.failed_fields(results) == ["zip"]
        assert service.format_error_report(results) == (
            "zip: [InvalidFormat, LengthMismatch]"
        )

    def test_missing_field_is_validated_as_none(self):
        """Test that an absent value is passed to the validator as None."""
        validator = Mock()
        validator.validate.return_value = Invalid(ValidationFlag.EMPTY_STRING)
        service = ValidationService({"name": validator})

        results = service.validate_all({})

        validator.validate.assert_called_once_with(None)
        assert results["name"].is_empty

    def test_unknown_fields_are_ignored(self):
        service = ValidationService({"name": NotEmptyValidator()})

        results = service.validate_all({"name": "Ada", "extra": ""})

        assert list(results) == ["name"]

    def test_multiple_failures_reported(self):
        """Test error report with several failed fields."""
        service = ValidationService(
            {"a": NotEmptyValidator(), "b": NUMERIC, "c": NotEmptyValidator()}
        )

        results = service.validate_all({"a": "", "b": "x", "c": "ok"})

        report = service.format_error_report(results)
        assert report.splitlines() == ["a: [EmptyString]", "b: [InvalidFormat]"]

    def test_success_message_with_warnings(self):
        """Test that informational flags on valid results show as warnings."""
        service = ValidationService(
            {"pin": LengthValidator(4, LengthPolicy.LENIENT), "name": NotEmptyValidator()}
        )

        results = service.validate_all({"pin": "12", "name": "Ada"})

        assert not service.has_errors(results)
        assert results["pin"] == Valid(ValidationFlag.LENGTH_MISMATCH)
        message = service.get_success_message(results)
        assert message.startswith("Validation passed with warnings:")
        assert "pin: [LengthMismatch]" in message
        assert "name" not in message

"""Tests for Valid and Invalid outcomes."""

import pytest

from string_input_validator.validation.flags import ValidationFlag
from string_input_validator.validation.results import Invalid, Valid


class TestValid:
    """Tests for the Valid outcome."""

    def test_clean_valid_queries(self):
        result = Valid()

        assert result.is_valid
        assert result.failed is False
        assert not result.is_empty
        assert not result.has_max_length_exceeded
        assert not result.has_length_mismatch
        assert result.contains_only_valid_characters
        assert result.flags == ValidationFlag.none()

    def test_empty_extra_is_normalised(self):
        assert Valid(ValidationFlag.none()) == Valid()
        assert Valid(ValidationFlag.none()).extra is None

    def test_extra_flags_are_queryable(self):
        result = Valid(ValidationFlag.LENGTH_MISMATCH)

        assert result.is_valid
        assert result.has_length_mismatch
        assert not result.has_max_length_exceeded

    def test_description(self):
        assert Valid().description == "Valid"
        assert Valid(ValidationFlag.LENGTH_MISMATCH).description == (
            "Valid [LengthMismatch]"
        )


class TestInvalid:
    """Tests for the Invalid outcome."""

    def test_queries(self):
        result = Invalid(
            ValidationFlag.of(ValidationFlag.EMPTY_STRING, ValidationFlag.INVALID_FORMAT)
        )

        assert not result.is_valid
        assert result.failed
        assert result.is_empty
        assert not result.contains_only_valid_characters
        assert not result.has_length_mismatch

    def test_length_queries(self):
        result = Invalid(
            ValidationFlag.of(
                ValidationFlag.LENGTH_EXCEEDED, ValidationFlag.LENGTH_MISMATCH
            )
        )

        assert result.has_max_length_exceeded
        assert result.has_length_mismatch
        assert result.contains_only_valid_characters

    def test_requires_flags(self):
        with pytest.raises(ValueError):
            Invalid(ValidationFlag.none())

    def test_description(self):
        result = Invalid(
            ValidationFlag.LENGTH_MISMATCH | ValidationFlag.INVALID_FORMAT
        )
        assert result.description == "Invalid [InvalidFormat, LengthMismatch]"


class TestEquality:
    """Tests for structural equality."""

    def test_same_case_same_flags(self):
        assert Invalid(ValidationFlag.EMPTY_STRING) == Invalid(
            ValidationFlag.EMPTY_STRING
        )

    def test_different_flags(self):
        assert Invalid(ValidationFlag.EMPTY_STRING) != Invalid(
            ValidationFlag.INVALID_FORMAT
        )

    def test_different_case(self):
        assert Valid(ValidationFlag.LENGTH_MISMATCH) != Invalid(
            ValidationFlag.LENGTH_MISMATCH
        )

    def test_outcomes_are_immutable(self):
        result = Valid()
        with pytest.raises(AttributeError):
            result.extra = ValidationFlag.EMPTY_STRING

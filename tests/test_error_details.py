"""Tests for user-facing error messages."""

import pytest
from pydantic import ValidationError

from string_input_validator.config import PhoneSettings
from string_input_validator.error_details import get_error_human_message
from string_input_validator.validation.errors import (
    PatternCompileError,
    ValidatorConfigurationError,
)


class TestGetErrorHumanMessage:
    def test_pattern_compile_error(self):
        message = get_error_human_message(PatternCompileError("[a-", "unterminated"))

        assert "'[a-'" in message
        assert "unterminated" in message

    def test_configuration_error(self):
        message = get_error_human_message(ValidatorConfigurationError("bad limit"))
        assert message == "Invalid validator configuration: bad limit"

    def test_settings_error(self, monkeypatch):
        monkeypatch.setenv("PHONE_LENIENCY", "nope")
        with pytest.raises(ValidationError) as exc_info:
            PhoneSettings()

        message = get_error_human_message(exc_info.value)

        assert message.startswith("Invalid configuration:")
        assert "leniency" in message

    def test_unknown_error_falls_back_to_str(self):
        assert get_error_human_message(RuntimeError("boom")) == "boom"

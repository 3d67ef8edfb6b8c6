"""Error message formatting for user-friendly exception handling."""

from pydantic import ValidationError

from string_input_validator.validation.errors import (
    PatternCompileError,
    ValidatorConfigurationError,
)


def _format_settings_error(error: ValidationError) -> str:
    """Format pydantic-settings validation errors."""
    lines = [
        f"  {'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in error.errors()
    ]
    return "Invalid configuration:\n" + "\n".join(lines)


ERROR_TYPES = {
    PatternCompileError: lambda e: (
        f"Pattern {e.pattern!r} is not a valid regular expression: {e.reason}"
    ),
    ValidatorConfigurationError: lambda e: f"Invalid validator configuration: {e!s}",
    ValidationError: _format_settings_error,
    ValueError: lambda e: str(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)

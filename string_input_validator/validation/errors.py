"""Configuration errors raised while building validators.

Validation failures are never exceptions; they are returned as ``Invalid``
outcomes. Only a validator that cannot be built raises.
"""


class ValidatorConfigurationError(ValueError):
    """Raised when a validator cannot be constructed from its arguments."""


class PatternCompileError(ValidatorConfigurationError):
    """Raised when a regular expression pattern does not compile."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid regular expression {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason

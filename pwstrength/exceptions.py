"""Exceptions raised by the pwstrength hosting layer.

The scorer itself never raises for string input.
"""


class PasswordStrengthError(Exception):
    """Base class for pwstrength errors."""


class MissingPasswordError(PasswordStrengthError, ValueError):
    """No password was supplied."""

    def __init__(self, message: str = "Password field must be present."):
        super().__init__(message)


class WeakPasswordError(PasswordStrengthError, ValueError):
    """Password scored below the accepted minimum."""

    def __init__(self, score: int, minimum: int,
                 message: str = "Password strength is too weak."):
        super().__init__(message)
        self.score = score
        self.minimum = minimum


class ConfigError(PasswordStrengthError):
    """Invalid or unreadable configuration."""


class PasswordFileError(PasswordStrengthError):
    """Batch input file that cannot be decoded."""

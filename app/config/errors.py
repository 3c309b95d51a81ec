"""Project-native exceptions for configuration loading failures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigurationViolation:
    """One failed constraint for one environment variable.

    Attributes:
        path: Location of the offending value, starting with the variable name.
        message: Human-readable constraint description.
    """

    path: tuple[str, ...]
    message: str

    def __str__(self) -> str:
        return f"{'.'.join(self.path)}: {self.message}"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ConfigurationValidationError(SettingsLoadError):
    """Raised when one or more environment variables violate the schema.

    Attributes:
        violations: Every violation found in the validated input.
    """

    def __init__(self, violations: tuple[ConfigurationViolation, ...]):
        self.violations = violations
        details = "; ".join(str(violation) for violation in violations)
        super().__init__(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {details}"
        )

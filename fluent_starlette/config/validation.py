"""
Settings validation.

Checks a parsed settings mapping against the fields of AssertionSettings
and collects every rejected entry instead of stopping at the first.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .models import AssertionSettings


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """One rejected setting, or a problem with the settings source itself."""
    setting: str  # setting name, or the file the settings came from
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        line = f"{self.setting}: {self.message}"
        if self.value is not None:
            line += f" (got {self.value!r})"
        if self.suggestion:
            line += f"; {self.suggestion}"
        return line


@dataclass
class ValidationResult:
    """Outcome of checking a settings mapping; valid when nothing was rejected."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        setting: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(setting, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "Assertion settings are valid"
        lines = [f"Rejected {len(self.errors)} assertion setting(s):"]
        lines.extend(f"  - {e}" for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Settings Validator
# ─────────────────────────────────────────────────────────────────────────────

class SettingsValidator:
    """Checks each known setting and rejects keys AssertionSettings does not have."""

    VALID_KEYS = {f.name for f in fields(AssertionSettings)}
    MIN_VALUE_LENGTH = 10

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_keys()
        self._validate_key_name("model_key")
        self._validate_key_name("session_key")
        self._validate_max_value_length()
        return self.result

    def _validate_keys(self) -> None:
        """Check for unknown keys."""
        for key in set(self.data.keys()) - self.VALID_KEYS:
            self.result.add_error(
                str(key),
                f"Unknown setting '{key}'",
                suggestion=f"Valid settings are: {', '.join(sorted(self.VALID_KEYS))}"
            )

    def _validate_key_name(self, name: str) -> None:
        if name not in self.data:
            return
        value = self.data[name]
        if not isinstance(value, str) or not value.strip():
            self.result.add_error(
                name,
                "Must be a non-empty string",
                value=value
            )

    def _validate_max_value_length(self) -> None:
        if "max_value_length" not in self.data:
            return
        value = self.data["max_value_length"]
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            self.result.add_error(
                "max_value_length",
                "Must be an integer",
                value=value,
                suggestion="Use 'max_value_length: 100'"
            )
        elif value < self.MIN_VALUE_LENGTH:
            self.result.add_error(
                "max_value_length",
                f"Must be >= {self.MIN_VALUE_LENGTH}",
                value=value
            )

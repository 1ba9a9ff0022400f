"""
Assertion result models.

This module defines the structured record produced by every check,
including the field under test, expected and actual values, and the
reason phrase supplied by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any

from rich.pretty import pretty_repr

# Shortest length a truncated value can be rendered at
MIN_VALUE_LENGTH = 10


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # e.g., invalid JSONPath, check could not be evaluated


@dataclass
class AssertionResult:
    """
    Result of a single assertion check.

    Attributes:
        status: Whether the assertion passed, failed, or errored
        message: Fully rendered failure message (empty when passed)
        field: Name of the response field that was inspected
        expected: What the caller expected
        actual: What was actually found on the response
        reason: The " because ..." phrase, already normalised
        details: Additional context for debugging
    """
    status: AssertionStatus
    message: str
    field: str | None = None
    expected: Any = None
    actual: Any = None
    reason: str = ""
    details: dict[str, Any] = dataclass_field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.status == AssertionStatus.PASSED:
            return f"PASS: {self.message}" if self.message else "PASS"

        lines = [f"{self.status.value.upper()}: {self.message}"]

        if self.field:
            lines.append(f"   Field:    {self.field}")

        if self.expected is not None:
            lines.append(f"   Expected: {format_value(self.expected)}")

        if self.actual is not None:
            lines.append(f"   Actual:   {format_value(self.actual)}")

        for key, value in self.details.items():
            lines.append(f"   {key}: {format_value(value)}")

        return "\n".join(lines)

    @classmethod
    def passed_result(
        cls,
        field: str | None = None,
        actual: Any = None,
    ) -> AssertionResult:
        """Create a passing result."""
        return cls(
            status=AssertionStatus.PASSED,
            message="",
            field=field,
            actual=actual,
        )

    @classmethod
    def failed_result(
        cls,
        message: str,
        field: str | None = None,
        expected: Any = None,
        actual: Any = None,
        reason: str = "",
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create a failing result."""
        return cls(
            status=AssertionStatus.FAILED,
            message=message,
            field=field,
            expected=expected,
            actual=actual,
            reason=reason,
            details=details or {},
        )

    @classmethod
    def error_result(
        cls,
        message: str,
        field: str | None = None,
        reason: str = "",
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create an error result (assertion couldn't be evaluated)."""
        return cls(
            status=AssertionStatus.ERROR,
            message=message,
            field=field,
            reason=reason,
            details=details or {},
        )


def format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display in a failure message, truncating if too long."""
    max_length = max(max_length, MIN_VALUE_LENGTH)

    if value is None:
        return "None"

    if isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, dict, tuple, set)):
        formatted = pretty_repr(value, max_width=max_length)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted

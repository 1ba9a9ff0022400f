"""
Assertion execution for response checks.

This package provides the failure-reporting mechanism shared by all
response wrappers: a per-check Assertion object, the structured
AssertionResult record, and the AssertionFailedError raised on mismatch.

Usage:
    from fluent_starlette.execution import Assertion

    (
        Assertion()
        .for_condition(actual == expected)
        .because_of("we asked for {0}", expected)
        .fail_with(
            "Expected {field} to be {expected}{reason}, but found {actual}.",
            field="status code",
            expected=expected,
            actual=actual,
        )
    )
"""

# Models
from .models import AssertionResult, AssertionStatus, format_value

# Execution
from .assertion import Assertion, AssertionFailedError, format_reason

__all__ = [
    # Models
    "AssertionResult",
    "AssertionStatus",
    "format_value",
    # Execution
    "Assertion",
    "AssertionFailedError",
    "format_reason",
]

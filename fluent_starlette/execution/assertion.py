"""
Assertion execution for response checks.

An Assertion is created for every individual check. It holds the
condition, the caller's reason phrase and the settings used to render
values, and raises AssertionFailedError when the condition does not hold.
"""

from __future__ import annotations

import logging
import string
from typing import Any

from ..config import AssertionSettings, get_settings
from .models import AssertionResult, AssertionStatus, format_value

logger = logging.getLogger(__name__)


class AssertionFailedError(AssertionError):
    """
    Raised when a response assertion fails.

    Subclasses AssertionError so test runners report it as a normal
    test failure. The structured record is available as ``result``.
    """

    def __init__(self, result: AssertionResult):
        super().__init__(result.message)
        self.result = result

    @property
    def status(self) -> AssertionStatus:
        return self.result.status


class Assertion:
    """
    A single conditional check with a templated failure message.

    Example:
        (
            Assertion()
            .for_condition(actual == expected)
            .because_of("the {0} endpoint returns JSON", "items")
            .fail_with(
                "Expected {field} to be {expected}{reason}, but found {actual}.",
                field="content type",
                expected=expected,
                actual=actual,
            )
        )

    Calling fail_with() without a prior for_condition() fails
    unconditionally.
    """

    def __init__(self, settings: AssertionSettings | None = None):
        self.settings = settings if settings is not None else get_settings()
        self._condition = False
        self._reason = ""

    def for_condition(self, condition: bool) -> Assertion:
        """Set the condition that must hold for the check to pass."""
        self._condition = bool(condition)
        return self

    def because_of(self, reason: str = "", *reason_args: Any) -> Assertion:
        """
        Attach a reason phrase explaining why the check is needed.

        The phrase is formatted with ``str.format(*reason_args)``. If it
        does not start with the word "because", it is prepended.
        """
        self._reason = format_reason(reason, *reason_args)
        return self

    def fail_with(
        self,
        template: str,
        *,
        field: str | None = None,
        expected: Any = None,
        actual: Any = None,
        **args: Any,
    ) -> AssertionResult:
        """
        Raise AssertionFailedError with a rendered message unless the condition holds.

        Args:
            template: Message with {field}, {expected}, {actual}, {reason}
                and any extra named placeholders
            field: Name of the response field being checked
            expected: The expected value
            actual: The value found on the response
            **args: Values for extra placeholders

        Returns:
            A passing AssertionResult
        """
        if self._condition:
            return AssertionResult.passed_result(field=field, actual=actual)

        message = self._render(template, field=field, expected=expected, actual=actual, **args)
        result = AssertionResult.failed_result(
            message=message,
            field=field,
            expected=expected,
            actual=actual,
            reason=self._reason,
            details=dict(args),
        )
        logger.debug(f"Assertion failed on {field or 'response'}: {message}")
        raise AssertionFailedError(result)

    def error_with(self, template: str, field: str | None = None, **details: Any) -> None:
        """Raise AssertionFailedError for a check that could not be evaluated."""
        result = AssertionResult.error_result(
            message=self._render(template, field=field, **details),
            field=field,
            reason=self._reason,
            details=details,
        )
        logger.debug(f"Assertion error on {field or 'response'}: {result.message}")
        raise AssertionFailedError(result)

    def _render(self, template: str, **values: Any) -> str:
        max_length = self.settings.max_value_length
        rendered = {}
        for name, value in values.items():
            # Field names are labels, not values
            if name == "field":
                rendered[name] = value if value is not None else "response"
            else:
                rendered[name] = format_value(value, max_length)
        rendered["reason"] = self._reason
        return _TemplateFormatter().format(template, **rendered)


class _TemplateFormatter(string.Formatter):
    """Leaves unknown placeholders untouched instead of raising KeyError."""

    def get_value(self, key, args, kwargs):
        if isinstance(key, str) and key not in kwargs:
            return "{" + key + "}"
        return super().get_value(key, args, kwargs)


def format_reason(reason: str = "", *reason_args: Any) -> str:
    """
    Normalise a reason phrase into " because ..." form.

    Returns an empty string when no reason was given.
    """
    if not reason or not reason.strip():
        return ""

    text = reason.format(*reason_args) if reason_args else reason
    text = text.strip()
    if not text.lower().startswith("because"):
        text = f"because {text}"
    return f" {text}"

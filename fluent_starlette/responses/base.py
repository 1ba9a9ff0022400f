"""
Base class for response assertion wrappers.

Every wrapper holds exactly one response and never mutates it. Derived
values are read lazily, so a malformed response only surfaces when the
property that needs the missing piece is accessed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from .. import messages
from ..config import AssertionSettings, get_settings
from ..execution import Assertion

SubjectT = TypeVar("SubjectT")
ValueT = TypeVar("ValueT")

_MISSING = object()


class ResponseAssertionsBase(Generic[SubjectT]):
    """
    Shared plumbing for the response wrappers.

    Subclasses expose read-only properties for the fields of their
    response type and chainable with_* methods that return self.
    """

    def __init__(self, subject: SubjectT, settings: AssertionSettings | None = None):
        self.subject = subject
        self.settings = settings if settings is not None else get_settings()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.subject!r})"

    def _assertion(self) -> Assertion:
        return Assertion(self.settings)

    def _check_equal_ignoring_case(
        self,
        template: str,
        field: str,
        expected: str | None,
        actual: str | None,
        reason: str,
        reason_args: tuple[Any, ...],
    ) -> None:
        (
            self._assertion()
            .for_condition(_equals_ignoring_case(expected, actual))
            .because_of(reason, *reason_args)
            .fail_with(template, field=field, expected=expected, actual=actual)
        )

    def _check_mapping_entry(
        self,
        field: str,
        mapping: Mapping[str, Any],
        key: str,
        expected: Any,
        reason: str,
        reason_args: tuple[Any, ...],
    ) -> None:
        actual = mapping.get(key, _MISSING)

        # Missing keys are reported before any value comparison
        (
            self._assertion()
            .for_condition(actual is not _MISSING)
            .because_of(reason, *reason_args)
            .fail_with(messages.MAPPING_CONTAINS_KEY, field=field, key=key)
        )

        (
            self._assertion()
            .for_condition(actual == expected)
            .because_of(reason, *reason_args)
            .fail_with(
                messages.MAPPING_HAVE_VALUE,
                field=field,
                key=key,
                expected=expected,
                actual=actual,
            )
        )

    def _cast(self, field: str, value: Any, expected_type: type[ValueT]) -> ValueT:
        """Return ``value`` unchanged if it is an instance of ``expected_type``."""
        type_name = expected_type.__name__

        if value is None:
            self._assertion().fail_with(
                messages.COMMON_NULL_SUPPLIED, field=field, expected=type_name
            )

        (
            self._assertion()
            .for_condition(isinstance(value, expected_type))
            .fail_with(
                messages.COMMON_TYPE_FAIL,
                field=field,
                expected=type_name,
                actual=type(value).__name__,
            )
        )

        return value


def _equals_ignoring_case(expected: str | None, actual: str | None) -> bool:
    if expected is None or actual is None:
        return expected is actual
    return expected.casefold() == actual.casefold()


def read_header(response: Any, name: str) -> str | None:
    """
    Read a header from a response's raw headers without touching its
    cached ``headers`` view.
    """
    wanted = name.lower().encode("latin-1")
    for key, value in getattr(response, "raw_headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None

"""Assertions for redirect responses."""

from __future__ import annotations

from typing import Any

from starlette.responses import RedirectResponse

from .. import messages
from .base import ResponseAssertionsBase, read_header

PERMANENT_STATUS_CODES = frozenset({301, 308})


class RedirectResponseAssertions(ResponseAssertionsBase[RedirectResponse]):
    """
    Contains a number of methods to assert that a RedirectResponse is in the expected state.
    """

    @property
    def url(self) -> str | None:
        """The location header of the redirect."""
        return read_header(self.subject, "location")

    @property
    def status_code(self) -> int:
        return self.subject.status_code

    @property
    def permanent(self) -> bool:
        """Whether the redirect uses a permanent status code (301 or 308)."""
        return self.status_code in PERMANENT_STATUS_CODES

    def with_url(self, expected_url: str, reason: str = "", *reason_args: Any) -> RedirectResponseAssertions:
        """Asserts that the redirect points at ``expected_url`` (case-sensitive)."""
        actual_url = self.url
        (
            self._assertion()
            .for_condition(actual_url == expected_url)
            .because_of(reason, *reason_args)
            .fail_with(
                messages.COMMON_FAIL,
                field="RedirectResponse.url",
                expected=expected_url,
                actual=actual_url,
            )
        )
        return self

    def with_permanent(self, expected: bool, reason: str = "", *reason_args: Any) -> RedirectResponseAssertions:
        """Asserts whether the redirect is permanent."""
        actual = self.permanent
        (
            self._assertion()
            .for_condition(actual == expected)
            .because_of(reason, *reason_args)
            .fail_with(
                messages.COMMON_FAIL,
                field="RedirectResponse.permanent",
                expected=expected,
                actual=actual,
                status_code=self.status_code,
            )
        )
        return self

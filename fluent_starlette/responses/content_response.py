"""Assertions for responses with a text body (plain text, HTML or a bare Response)."""

from __future__ import annotations

from typing import Any

from starlette.responses import Response

from .. import messages
from .base import ResponseAssertionsBase, read_header


class ContentResponseAssertions(ResponseAssertionsBase[Response]):
    """
    Contains a number of methods to assert that a text response is in the expected state.
    """

    @property
    def content(self) -> str:
        """The body decoded with the response charset."""
        return self.subject.body.decode(self.subject.charset)

    @property
    def content_type(self) -> str | None:
        return read_header(self.subject, "content-type")

    def with_content(self, expected_content: str, reason: str = "", *reason_args: Any) -> ContentResponseAssertions:
        """Asserts that the body is exactly ``expected_content``."""
        actual = self.content
        (
            self._assertion()
            .for_condition(actual == expected_content)
            .because_of(reason, *reason_args)
            .fail_with(
                messages.COMMON_FAIL,
                field=f"{type(self.subject).__name__}.content",
                expected=expected_content,
                actual=actual,
            )
        )
        return self

    def with_content_type(
        self, expected_content_type: str, reason: str = "", *reason_args: Any
    ) -> ContentResponseAssertions:
        """Asserts that the content type is the expected content type, ignoring case."""
        self._check_equal_ignoring_case(
            messages.COMMON_FAIL,
            f"{type(self.subject).__name__}.content_type",
            expected_content_type,
            self.content_type,
            reason,
            reason_args,
        )
        return self

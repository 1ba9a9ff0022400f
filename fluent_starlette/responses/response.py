"""
Entry point assertions for any Starlette response.

Usage:
    should(response).be_json_response().with_content_type("application/json")
    should(response).have_status_code(200).be_template_response().with_view_name("index.html")
"""

from __future__ import annotations

from typing import Any

from starlette.responses import (
    JSONResponse,
    RedirectResponse,
    Response,
)
from starlette.templating import _TemplateResponse

from .. import messages
from ..config import AssertionSettings
from .base import ResponseAssertionsBase
from .content_response import ContentResponseAssertions
from .json_response import JsonResponseAssertions
from .redirect_response import RedirectResponseAssertions
from .template_response import TemplateResponseAssertions

# Responses that have a dedicated wrapper of their own
NON_CONTENT_RESPONSES = (JSONResponse, RedirectResponse, _TemplateResponse)


class ResponseAssertions(ResponseAssertionsBase[Response]):
    """
    Asserts the kind and status of a response and hands off to the
    wrapper for that kind.
    """

    def have_status_code(self, expected: int, reason: str = "", *reason_args: Any) -> ResponseAssertions:
        """Asserts the response status code."""
        self._require_subject("Response", reason, reason_args)
        actual = self.subject.status_code
        (
            self._assertion()
            .for_condition(actual == expected)
            .because_of(reason, *reason_args)
            .fail_with(messages.STATUS_CODE, field="status code", expected=expected, actual=actual)
        )
        return self

    def be_json_response(self, reason: str = "", *reason_args: Any) -> JsonResponseAssertions:
        """Asserts the response is a JSONResponse."""
        self._check_type(JSONResponse, "JSONResponse", reason, reason_args)
        return JsonResponseAssertions(self.subject, self.settings)

    def be_template_response(self, reason: str = "", *reason_args: Any) -> TemplateResponseAssertions:
        """Asserts the response was rendered from a template."""
        self._check_type(_TemplateResponse, "TemplateResponse", reason, reason_args)
        return TemplateResponseAssertions(self.subject, self.settings)

    # Partial views are ordinary template responses in Starlette
    be_partial_view_response = be_template_response

    def be_redirect_response(self, reason: str = "", *reason_args: Any) -> RedirectResponseAssertions:
        """Asserts the response is a RedirectResponse."""
        self._check_type(RedirectResponse, "RedirectResponse", reason, reason_args)
        return RedirectResponseAssertions(self.subject, self.settings)

    def be_content_response(self, reason: str = "", *reason_args: Any) -> ContentResponseAssertions:
        """Asserts the response carries a text body and is not a JSON, template or redirect response."""
        expected_name = "content response"
        self._require_subject(expected_name, reason, reason_args)
        is_content = (
            isinstance(self.subject, Response)
            and isinstance(getattr(self.subject, "body", None), bytes)
            and not isinstance(self.subject, NON_CONTENT_RESPONSES)
        )
        self._fail_unless_type(is_content, expected_name, reason, reason_args)
        return ContentResponseAssertions(self.subject, self.settings)

    def _check_type(
        self,
        expected_type: type,
        expected_name: str,
        reason: str,
        reason_args: tuple[Any, ...],
    ) -> None:
        self._require_subject(expected_name, reason, reason_args)
        self._fail_unless_type(isinstance(self.subject, expected_type), expected_name, reason, reason_args)

    def _fail_unless_type(
        self,
        condition: bool,
        expected_name: str,
        reason: str,
        reason_args: tuple[Any, ...],
    ) -> None:
        (
            self._assertion()
            .for_condition(condition)
            .because_of(reason, *reason_args)
            .fail_with(
                messages.RESPONSE_TYPE,
                field="response",
                expected=expected_name,
                actual=type(self.subject).__name__,
            )
        )

    def _require_subject(self, expected_name: str, reason: str, reason_args: tuple[Any, ...]) -> None:
        (
            self._assertion()
            .for_condition(self.subject is not None)
            .because_of(reason, *reason_args)
            .fail_with(messages.COMMON_NULL_SUPPLIED, field="response", expected=expected_name)
        )


def should(response: Any, settings: AssertionSettings | None = None) -> ResponseAssertions:
    """Start an assertion chain on ``response``."""
    return ResponseAssertions(response, settings)

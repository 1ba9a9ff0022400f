"""
Assertions for JSON responses.

Usage:
    response = JSONResponse({"id": 1})

    (
        JsonResponseAssertions(response)
        .with_content_type("application/json")
        .with_value_at("$.id", 1)
    )

    payload = JsonResponseAssertions(response).value_as(dict)
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathParserError
from starlette.responses import JSONResponse

from .. import messages
from .base import ResponseAssertionsBase, read_header

logger = logging.getLogger(__name__)

ValueT = TypeVar("ValueT")


class JsonResponseAssertions(ResponseAssertionsBase[JSONResponse]):
    """
    Contains a number of methods to assert that a JSONResponse is in the expected state.
    """

    @property
    def content_type(self) -> str | None:
        """The content type header of the JSONResponse."""
        return read_header(self.subject, "content-type")

    @property
    def serializer_settings(self) -> dict[str, Any]:
        """The render configuration of the JSONResponse."""
        return {
            "media_type": self.subject.media_type,
            "charset": self.subject.charset,
        }

    @property
    def value(self) -> Any:
        """The decoded body of the JSONResponse, or None when the body is empty."""
        body = self.subject.body
        if not body:
            return None
        return json.loads(body)

    def with_content_type(
        self, expected_content_type: str, reason: str = "", *reason_args: Any
    ) -> JsonResponseAssertions:
        """
        Asserts that the content type is the expected content type.

        Args:
            expected_content_type: The expected content type, compared ignoring case
            reason: A phrase explaining why the assertion is needed. If it does
                not start with "because", it is prepended automatically.
            *reason_args: Values to format into ``reason``
        """
        self._check_equal_ignoring_case(
            messages.COMMON_FAIL,
            "JSONResponse.content_type",
            expected_content_type,
            self.content_type,
            reason,
            reason_args,
        )
        return self

    def with_value(self, expected: Any, reason: str = "", *reason_args: Any) -> JsonResponseAssertions:
        """Asserts that the decoded value equals ``expected``."""
        actual = self.value
        (
            self._assertion()
            .for_condition(actual == expected)
            .because_of(reason, *reason_args)
            .fail_with(
                messages.COMMON_FAIL,
                field="JSONResponse.value",
                expected=expected,
                actual=actual,
            )
        )
        return self

    def with_value_at(
        self, path: str, expected: Any, reason: str = "", *reason_args: Any
    ) -> JsonResponseAssertions:
        """
        Asserts that the value at a JSONPath equals ``expected``.

        Args:
            path: JSONPath expression, e.g. "$.items[0].id"
            expected: The expected value of the first match
        """
        field = f"JSONResponse.value at {path}"
        matches = self._evaluate_path(path, reason, reason_args)

        (
            self._assertion()
            .for_condition(bool(matches))
            .because_of(reason, *reason_args)
            .fail_with(messages.JSON_PATH_NOT_FOUND, field="JSONResponse.value", path=path)
        )

        actual = matches[0].value
        (
            self._assertion()
            .for_condition(actual == expected)
            .because_of(reason, *reason_args)
            .fail_with(messages.COMMON_FAIL, field=field, expected=expected, actual=actual)
        )
        return self

    def value_as(self, expected_type: type[ValueT]) -> ValueT:
        """
        Asserts the value is of the expected type.

        Args:
            expected_type: The expected type

        Returns:
            The typed value
        """
        return self._cast("value", self.value, expected_type)

    def _evaluate_path(self, path: str, reason: str, reason_args: tuple[Any, ...]) -> list:
        """Evaluate a JSONPath expression on the decoded value."""
        try:
            jsonpath_expr = parse_jsonpath(path)
        except JsonPathParserError as e:
            self._assertion().because_of(reason, *reason_args).error_with(
                messages.JSON_PATH_INVALID, field="JSONResponse.value", path=path, error=str(e)
            )
        except Exception as e:
            # jsonpath-ng raises lexer errors as plain Exception subclasses
            self._assertion().because_of(reason, *reason_args).error_with(
                messages.JSON_PATH_INVALID,
                field="JSONResponse.value",
                path=path,
                error=f"{type(e).__name__}: {e}",
            )

        matches = jsonpath_expr.find(self.value)
        logger.debug(f"JSONPath {path} matched {len(matches)} value(s)")
        return matches

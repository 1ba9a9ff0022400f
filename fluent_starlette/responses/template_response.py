"""
Assertions for template responses.

A template response is what ``Jinja2Templates.TemplateResponse`` returns:
the rendered template plus the context it was rendered with. The
context plays the role of view data, the value stored under the
configured model key is the model, and the session attached to the
request is the temp data carried across a redirect.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from starlette.templating import _TemplateResponse

from .. import messages
from .base import ResponseAssertionsBase

ModelT = TypeVar("ModelT")


class TemplateResponseAssertions(ResponseAssertionsBase[_TemplateResponse]):
    """
    Contains a number of methods to assert that a template response is in the expected state.
    """

    @property
    def model(self) -> Any:
        """The model, or None when the context has no model entry."""
        context = self.view_data
        if context is None:
            return None
        return context.get(self.settings.model_key)

    @property
    def view_name(self) -> str:
        """The template name; empty for a template compiled from a string."""
        template = self.subject.template
        return getattr(template, "name", None) or ""

    @property
    def view_data(self) -> Mapping[str, Any]:
        """The context the template was rendered with."""
        return self.subject.context

    @property
    def temp_data(self) -> Mapping[str, Any]:
        """The session of the rendering request, or an empty mapping without one."""
        request = (self.view_data or {}).get("request")
        scope = getattr(request, "scope", None) or {}
        return scope.get(self.settings.session_key) or {}

    def with_view_name(
        self, expected_view_name: str, reason: str = "", *reason_args: Any
    ) -> TemplateResponseAssertions:
        """
        Asserts that the template name is the expected name, ignoring case.

        Args:
            expected_view_name: The template name, e.g. "partials/row.html"
            reason: A phrase explaining why the assertion is needed. If it does
                not start with "because", it is prepended automatically.
            *reason_args: Values to format into ``reason``
        """
        self._check_equal_ignoring_case(
            messages.TEMPLATE_NAME,
            "template name",
            expected_view_name,
            self.view_name,
            reason,
            reason_args,
        )
        return self

    def with_view_data(
        self, key: str, expected_value: Any, reason: str = "", *reason_args: Any
    ) -> TemplateResponseAssertions:
        """
        Asserts that the template context contains the expected entry.

        Args:
            key: The expected context key
            expected_value: The expected value under ``key``
        """
        self._check_mapping_entry("view data", self.view_data, key, expected_value, reason, reason_args)
        return self

    def with_temp_data(
        self, key: str, expected_value: Any, reason: str = "", *reason_args: Any
    ) -> TemplateResponseAssertions:
        """
        Asserts that the session of the rendering request contains the expected entry.

        Args:
            key: The expected session key
            expected_value: The expected value under ``key``
        """
        self._check_mapping_entry("temp data", self.temp_data, key, expected_value, reason, reason_args)
        return self

    def model_as(self, expected_type: type[ModelT]) -> ModelT:
        """
        Asserts the model is of the expected type.

        Returns:
            The typed model
        """
        return self._cast("model", self.model, expected_type)

    def with_default_view_name(self, reason: str = "", *reason_args: Any) -> TemplateResponseAssertions:
        """Asserts that the default (unnamed) template was used."""
        view_name = self.view_name
        (
            self._assertion()
            .for_condition(view_name == "")
            .because_of(reason, *reason_args)
            .fail_with(messages.DEFAULT_TEMPLATE_NAME, field="template name", actual=view_name)
        )
        return self

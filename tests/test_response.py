"""Tests for the should() entry point."""

import pytest
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, RedirectResponse, Response

from fluent_starlette import (
    AssertionFailedError,
    AssertionSettings,
    ContentResponseAssertions,
    JsonResponseAssertions,
    RedirectResponseAssertions,
    TemplateResponseAssertions,
    should,
)


def test_be_json_response_end_to_end():
    response = JSONResponse({"id": 1})

    wrapper = should(response).have_status_code(200).be_json_response()

    assert isinstance(wrapper, JsonResponseAssertions)
    assert wrapper.with_content_type("APPLICATION/JSON").value_as(dict) == {"id": 1}


def test_be_json_response_wrong_type():
    with pytest.raises(AssertionFailedError) as exc_info:
        should(PlainTextResponse("hi")).be_json_response("the API speaks {0}", "JSON")

    assert str(exc_info.value) == (
        "Expected response to be 'JSONResponse' because the API speaks JSON, "
        "but found 'PlainTextResponse'."
    )


def test_be_template_response(partial_response):
    wrapper = should(partial_response).be_template_response()
    assert isinstance(wrapper, TemplateResponseAssertions)
    wrapper.with_view_name("partials/item.html")


def test_be_partial_view_response_alias(partial_response):
    assert isinstance(should(partial_response).be_partial_view_response(), TemplateResponseAssertions)


def test_be_redirect_response():
    wrapper = should(RedirectResponse("/login")).have_status_code(307).be_redirect_response()
    assert isinstance(wrapper, RedirectResponseAssertions)
    wrapper.with_url("/login")


@pytest.mark.parametrize("response", [PlainTextResponse("hi"), HTMLResponse("<p>hi</p>")])
def test_be_content_response(response):
    assert isinstance(should(response).be_content_response(), ContentResponseAssertions)


def test_template_response_is_not_content_response(partial_response):
    with pytest.raises(AssertionFailedError) as exc_info:
        should(partial_response).be_content_response()

    assert str(exc_info.value) == "Expected response to be 'content response', but found '_TemplateResponse'."


def test_bare_response_with_text_body_is_content_response():
    wrapper = should(Response("hello", media_type="text/plain")).be_content_response()

    wrapper.with_content("hello").with_content_type("text/plain; charset=utf-8")


@pytest.mark.parametrize("response", [JSONResponse({"id": 1}), RedirectResponse("/login")])
def test_json_and_redirect_are_not_content_responses(response):
    with pytest.raises(AssertionFailedError):
        should(response).be_content_response()


def test_have_status_code_fail():
    with pytest.raises(AssertionFailedError) as exc_info:
        should(JSONResponse({"error": "missing"}, status_code=404)).have_status_code(200)

    assert str(exc_info.value) == "Expected status code to be 200, but found 404."


def test_none_response_is_reported_as_null():
    with pytest.raises(AssertionFailedError) as exc_info:
        should(None).be_json_response()

    assert str(exc_info.value) == (
        "Expected response to be of type 'JSONResponse', but no response was supplied."
    )


def test_settings_are_passed_to_wrappers(partial_response):
    settings = AssertionSettings(model_key="title")
    wrapper = should(partial_response, settings).be_template_response()

    assert wrapper.settings is settings
    assert wrapper.model_as(str) == "Items"

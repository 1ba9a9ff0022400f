"""Tests for RedirectResponseAssertions and ContentResponseAssertions."""

import pytest
from starlette.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from fluent_starlette import (
    AssertionFailedError,
    ContentResponseAssertions,
    RedirectResponseAssertions,
)


# --- RedirectResponseAssertions ---


def test_redirect_properties():
    wrapper = RedirectResponseAssertions(RedirectResponse("/items/1"))
    assert wrapper.url == "/items/1"
    assert wrapper.status_code == 307
    assert wrapper.permanent is False


@pytest.mark.parametrize("status_code", [301, 308])
def test_permanent_redirect(status_code):
    wrapper = RedirectResponseAssertions(RedirectResponse("/new", status_code=status_code))
    assert wrapper.with_permanent(True) is wrapper


def test_with_url_pass():
    RedirectResponseAssertions(RedirectResponse("/items/1")).with_url("/items/1").with_permanent(False)


def test_with_url_is_case_sensitive():
    with pytest.raises(AssertionFailedError) as exc_info:
        RedirectResponseAssertions(RedirectResponse("/items/1")).with_url("/Items/1")

    assert str(exc_info.value) == (
        "Expected RedirectResponse.url to be '/Items/1', but found '/items/1'."
    )


def test_with_permanent_fail():
    with pytest.raises(AssertionFailedError) as exc_info:
        RedirectResponseAssertions(RedirectResponse("/items/1")).with_permanent(True, "the old URL is gone")

    assert str(exc_info.value) == (
        "Expected RedirectResponse.permanent to be True because the old URL is gone, but found False."
    )
    assert exc_info.value.result.details == {"status_code": 307}


# --- ContentResponseAssertions ---


def test_content_properties():
    wrapper = ContentResponseAssertions(PlainTextResponse("hello"))
    assert wrapper.content == "hello"
    assert wrapper.content_type == "text/plain; charset=utf-8"


def test_with_content_pass():
    (
        ContentResponseAssertions(HTMLResponse("<p>Hi</p>"))
        .with_content("<p>Hi</p>")
        .with_content_type("TEXT/HTML; charset=UTF-8")
    )


def test_with_content_fail():
    with pytest.raises(AssertionFailedError) as exc_info:
        ContentResponseAssertions(PlainTextResponse("hello")).with_content("Hello")

    assert str(exc_info.value) == "Expected PlainTextResponse.content to be 'Hello', but found 'hello'."


def test_with_content_type_fail():
    with pytest.raises(AssertionFailedError) as exc_info:
        ContentResponseAssertions(PlainTextResponse("hello")).with_content_type("text/html")

    assert exc_info.value.result.field == "PlainTextResponse.content_type"
    assert exc_info.value.result.actual == "text/plain; charset=utf-8"

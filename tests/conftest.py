"""Pytest configuration and fixtures."""

from dataclasses import dataclass

import jinja2
import pytest
from starlette.requests import Request
from starlette.templating import Jinja2Templates, _TemplateResponse

from fluent_starlette import configure


TEMPLATES = {
    "index.html": "<h1>{{ title }}</h1>",
    "partials/item.html": "<li>{{ model.name }}</li>",
}


@dataclass
class Item:
    id: int
    name: str


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore default settings after each test."""
    yield
    configure()


@pytest.fixture
def env():
    return jinja2.Environment(loader=jinja2.DictLoader(TEMPLATES), autoescape=True)


@pytest.fixture
def templates(env):
    return Jinja2Templates(env=env)


def _make_request(session=None):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/items/1",
        "headers": [],
        "query_string": b"",
    }
    if session is not None:
        scope["session"] = session
    return Request(scope)


@pytest.fixture
def make_request():
    """Factory for bare HTTP requests, optionally carrying a session."""
    return _make_request


@pytest.fixture
def item():
    return Item(id=1, name="Widget")


@pytest.fixture
def partial_response(templates, item):
    """A partial template response with a model, a title and a flashed message."""
    request = _make_request(session={"flash": "Saved", "count": 3})
    return templates.TemplateResponse(
        request,
        "partials/item.html",
        {"model": item, "title": "Items"},
    )


@pytest.fixture
def default_template_response(env):
    """A template response rendered from an unnamed template."""
    request = _make_request()
    template = env.from_string("<p>{{ title }}</p>")
    return _TemplateResponse(template, {"request": request, "title": "Inline"})

"""
Fluent assertion wrappers for Starlette responses.

One wrapper per response kind:
    - JsonResponseAssertions: JSONResponse
    - TemplateResponseAssertions: Jinja2Templates.TemplateResponse results
    - RedirectResponseAssertions: RedirectResponse
    - ContentResponseAssertions: any other response with a text body
    - ResponseAssertions: entry point returned by should()
"""

from .base import ResponseAssertionsBase
from .content_response import ContentResponseAssertions
from .json_response import JsonResponseAssertions
from .redirect_response import RedirectResponseAssertions
from .response import ResponseAssertions, should
from .template_response import TemplateResponseAssertions

__all__ = [
    "ResponseAssertionsBase",
    "ContentResponseAssertions",
    "JsonResponseAssertions",
    "RedirectResponseAssertions",
    "ResponseAssertions",
    "TemplateResponseAssertions",
    "should",
]

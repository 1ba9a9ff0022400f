"""
fluent_starlette - Fluent Assertions for Starlette Responses

This package lets tests assert on the responses returned by Starlette
endpoints with readable, chainable checks and descriptive failures.

Subpackages:
    - responses: One assertion wrapper per response kind
    - execution: Failure reporting (Assertion, AssertionResult)
    - config: Settings and their YAML loader

Usage:
    from fluent_starlette import should

    response = await endpoint(request)

    (
        should(response).be_json_response()
        .with_content_type("application/json")
        .with_value_at("$.id", 1)
    )

    item = (
        should(response).be_template_response()
        .with_view_name("partials/item.html")
        .model_as(Item)
    )
"""

__version__ = "0.1.0"

# Re-export config for convenience
from .config import (
    AssertionSettings,
    ValidationError,
    ValidationResult,
    configure,
    get_settings,
    load_settings,
    validate_settings_yaml,
)

# Re-export execution for convenience
from .execution import (
    Assertion,
    AssertionFailedError,
    AssertionResult,
    AssertionStatus,
)

# Re-export responses for convenience
from .responses import (
    ContentResponseAssertions,
    JsonResponseAssertions,
    RedirectResponseAssertions,
    ResponseAssertions,
    TemplateResponseAssertions,
    should,
)

__all__ = [
    # Package info
    "__version__",
    # Config
    "AssertionSettings",
    "ValidationError",
    "ValidationResult",
    "configure",
    "get_settings",
    "load_settings",
    "validate_settings_yaml",
    # Execution
    "Assertion",
    "AssertionFailedError",
    "AssertionResult",
    "AssertionStatus",
    # Responses
    "ContentResponseAssertions",
    "JsonResponseAssertions",
    "RedirectResponseAssertions",
    "ResponseAssertions",
    "TemplateResponseAssertions",
    "should",
]

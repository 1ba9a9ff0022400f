"""
Failure message templates.

Placeholders:
    {field}     name of the inspected response field
    {expected}  the expected value, rendered with format_value
    {actual}    the actual value, rendered with format_value
    {reason}    the caller's " because ..." phrase, or empty
"""

# ─────────────────────────────────────────────────────────────────────────────
# Common
# ─────────────────────────────────────────────────────────────────────────────

COMMON_FAIL = "Expected {field} to be {expected}{reason}, but found {actual}."

COMMON_NULL_SUPPLIED = (
    "Expected {field} to be of type {expected}{reason}, but no {field} was supplied."
)

COMMON_TYPE_FAIL = "Expected {field} to be of type {expected}{reason}, but found {actual}."

# ─────────────────────────────────────────────────────────────────────────────
# Responses
# ─────────────────────────────────────────────────────────────────────────────

RESPONSE_TYPE = "Expected response to be {expected}{reason}, but found {actual}."

STATUS_CODE = "Expected status code to be {expected}{reason}, but found {actual}."

# ─────────────────────────────────────────────────────────────────────────────
# Templates
# ─────────────────────────────────────────────────────────────────────────────

TEMPLATE_NAME = "Expected template name to be {expected}{reason}, but found {actual}."

DEFAULT_TEMPLATE_NAME = "Expected the default template to be used{reason}, but found {actual}."

MAPPING_CONTAINS_KEY = "Expected {field} to contain key {key}{reason}, but the key was not found."

MAPPING_HAVE_VALUE = "Expected {field}[{key}] to be {expected}{reason}, but found {actual}."

# ─────────────────────────────────────────────────────────────────────────────
# JSON
# ─────────────────────────────────────────────────────────────────────────────

JSON_PATH_NOT_FOUND = "Expected {field} to contain path {path}{reason}, but no match was found."

JSON_PATH_INVALID = "Cannot evaluate JSONPath {path} on {field}{reason}: {error}"

"""
Settings for Response Assertions

Usage:
    from fluent_starlette.config import load_settings, configure

    settings, result = load_settings("tests/assertions.yaml")
    if not result.is_valid:
        print(result)
    else:
        configure(settings)
"""

# Public API
from .loader import configure, get_settings, load_settings, validate_settings_yaml

# Models
from .models import AssertionSettings

# Validation
from .validation import SettingsValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_settings",
    "validate_settings_yaml",
    "get_settings",
    "configure",
    # Models
    "AssertionSettings",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SettingsValidator",
]

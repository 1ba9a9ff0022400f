"""
Settings loader.

Loads AssertionSettings from YAML and holds the process-wide default used
by wrappers that are created without explicit settings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import AssertionSettings
from .validation import SettingsValidator, ValidationResult

logger = logging.getLogger(__name__)

_current_settings = AssertionSettings()


def load_settings(path: str | Path) -> tuple[AssertionSettings | None, ValidationResult]:
    """
    Read assertion settings from a YAML file, usually kept next to the tests.

    This is the only place the package touches the filesystem; the wrappers
    themselves only ever see the settings object passed to configure().

    Returns:
        (settings, result); settings is None unless result.is_valid.

    Example:
        settings, result = load_settings("tests/assertions.yaml")
        if not result.is_valid:
            raise SystemExit(str(result))
        configure(settings)
    """
    path = Path(path)

    try:
        text = path.read_text()
    except OSError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Cannot read assertion settings: {e.strerror or e}",
            suggestion="load_settings() needs a YAML file such as tests/assertions.yaml"
        )
        return None, result

    return _parse_settings(str(path), text)


def validate_settings_yaml(yaml_string: str) -> tuple[AssertionSettings | None, ValidationResult]:
    """Same checks as load_settings(), on YAML text already in memory."""
    return _parse_settings("<string>", yaml_string)


def get_settings() -> AssertionSettings:
    """Return the settings used by wrappers created without explicit settings."""
    return _current_settings


def configure(settings: AssertionSettings | None = None, **overrides: Any) -> AssertionSettings:
    """
    Replace the process-wide default settings.

    Args:
        settings: New settings (defaults to a fresh AssertionSettings)
        **overrides: Individual fields to override on top of ``settings``

    Returns:
        The settings now in effect
    """
    global _current_settings

    base = settings if settings is not None else AssertionSettings()
    if overrides:
        base = AssertionSettings(**{**vars(base), **overrides})
    _current_settings = base
    logger.debug(f"Assertion settings configured: {_current_settings}")
    return _current_settings


def _parse_settings(source: str, text: str) -> tuple[AssertionSettings | None, ValidationResult]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            source,
            f"Assertion settings are not valid YAML: {e}",
            suggestion="Write one 'setting: value' pair per line, e.g. 'model_key: item'"
        )
        return None, result
    return _build_settings(source, data)


def _build_settings(source: str, data: Any) -> tuple[AssertionSettings | None, ValidationResult]:
    # An empty file means "all defaults"
    if data is None:
        return AssertionSettings(), ValidationResult()

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Assertion settings must be a mapping of setting names to values",
            value=type(data).__name__
        )
        return None, result

    validator = SettingsValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    return AssertionSettings(**data), result

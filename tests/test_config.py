"""Tests for settings loading and validation."""

from fluent_starlette.config import (
    AssertionSettings,
    configure,
    get_settings,
    load_settings,
    validate_settings_yaml,
)


def test_defaults():
    settings = AssertionSettings()
    assert settings.model_key == "model"
    assert settings.session_key == "session"
    assert settings.max_value_length == 100


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "assertions.yaml"
    path.write_text("model_key: item\nmax_value_length: 200\n")

    settings, result = load_settings(path)

    assert result.is_valid
    assert settings == AssertionSettings(model_key="item", max_value_length=200)


def test_load_settings_missing_file(tmp_path):
    settings, result = load_settings(tmp_path / "nope.yaml")
    assert settings is None
    assert not result.is_valid
    assert "Cannot read assertion settings" in str(result)
    assert str(result).startswith("Rejected 1 assertion setting(s):")


def test_load_settings_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("model_key: [unclosed\n")

    settings, result = load_settings(path)

    assert settings is None
    assert "not valid YAML" in str(result)
    assert result.errors[0].setting == str(path)


def test_empty_yaml_gives_defaults():
    settings, result = validate_settings_yaml("")
    assert result.is_valid
    assert settings == AssertionSettings()


def test_non_mapping_yaml_rejected():
    settings, result = validate_settings_yaml("- model_key\n")
    assert settings is None
    assert "must be a mapping of setting names" in str(result)


def test_unknown_setting_rejected():
    settings, result = validate_settings_yaml("model_key: model\ncolour: blue\n")
    assert settings is None
    assert len(result.errors) == 1
    assert result.errors[0].setting == "colour"
    assert "Valid settings are" in result.errors[0].suggestion


def test_bad_values_rejected():
    settings, result = validate_settings_yaml("model_key: ''\nmax_value_length: 3\nsession_key: 5\n")
    assert settings is None
    names = sorted(e.setting for e in result.errors)
    assert names == ["max_value_length", "model_key", "session_key"]


def test_max_value_length_must_be_int():
    _, result = validate_settings_yaml("max_value_length: true\n")
    assert not result.is_valid
    assert result.errors[0].message == "Must be an integer"


def test_configure_replaces_default():
    configured = configure(model_key="item")
    assert configured.model_key == "item"
    assert get_settings() is configured


def test_configure_with_settings_and_overrides():
    configured = configure(AssertionSettings(session_key="flash"), max_value_length=40)
    assert configured == AssertionSettings(session_key="flash", max_value_length=40)


def test_configure_without_arguments_resets():
    configure(model_key="item")
    assert configure() == AssertionSettings()


def test_validation_error_str_is_one_line():
    _, result = validate_settings_yaml("max_value_length: 3\n")
    assert str(result.errors[0]) == "max_value_length: Must be >= 10 (got 3)"
    assert str(validate_settings_yaml("")[1]) == "Assertion settings are valid"

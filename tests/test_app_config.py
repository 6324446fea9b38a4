from __future__ import annotations

"""Configuration loading: defaults, partial YAML documents and bad values."""

from pathlib import Path

import pytest
import yaml

from user_directory.app_config import AppConfig, ConfigError, app_config_from_dict, load_app_config
from user_directory.io_paths import DEFAULT_CONFIG_FILE


def test_defaults():
    cfg = AppConfig()
    assert cfg.validation.name.min_length == 2
    assert cfg.validation.name.max_length == 50
    assert cfg.validation.pin_max_length == 6
    assert cfg.features.editable_users and cfg.features.deletable_users
    assert cfg.label("errors.required") == "This field is required"


def test_label_missing_key_returns_default():
    cfg = AppConfig()
    assert cfg.label("errors.nope", "fallback") == "fallback"
    assert cfg.label("tableHeaders", "x") == "x"  # not a string leaf


def test_shipped_config_file_loads():
    cfg = load_app_config(DEFAULT_CONFIG_FILE)
    assert cfg.validation.email_pattern.search("ann@x.com")
    assert cfg.validation.linkedin_url_pattern.search("https://linkedin.com/in/ann")
    assert not cfg.validation.pin_pattern.search("56a001")


def test_missing_file_falls_back_to_defaults(tmp_path: Path):
    cfg = load_app_config(tmp_path / "absent.yaml")
    assert cfg.validation.name.max_length == 50


def test_partial_yaml_merges_over_defaults(tmp_path: Path):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump({
        "validation": {"name": {"maxLength": 10}},
        "features": {"deletableUsers": False},
        "text": {"errors": {"required": "Required!"}},
    }))
    cfg = load_app_config(path)
    assert cfg.validation.name.min_length == 2
    assert cfg.validation.name.max_length == 10
    assert cfg.features.editable_users is True
    assert cfg.features.deletable_users is False
    assert cfg.label("errors.required") == "Required!"
    assert cfg.label("errors.digits") == "Only digits are allowed"


def test_invalid_regex_raises():
    with pytest.raises(ConfigError):
        app_config_from_dict({"validation": {"email": {"pattern": "(unclosed"}}})


@pytest.mark.parametrize("value", ["false", 0, None])
def test_non_boolean_feature_toggle_raises(value):
    with pytest.raises(ConfigError):
        app_config_from_dict({"features": {"deletableUsers": value}})


def test_patterns_match_whole_ascii_value():
    pin = AppConfig().validation.pin_pattern
    assert pin.fullmatch("560001")
    assert not pin.fullmatch("560001\n")
    assert not pin.fullmatch("５６０００１")


def test_min_above_max_raises():
    with pytest.raises(ConfigError):
        app_config_from_dict({"validation": {"name": {"minLength": 9, "maxLength": 3}}})


def test_non_mapping_document_raises(tmp_path: Path):
    path = tmp_path / "cfg.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_app_config(path)

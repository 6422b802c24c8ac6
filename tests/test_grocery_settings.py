#!/usr/bin/env python3
"""
Tests for settings loading from the environment and settings files.
"""

import json

import pytest

from grocery_errors import ConfigurationError, GroceryListError
from grocery_settings import GrocerySettings, load_settings

ENV_VARS = (
    "GROCERY_LIST_NAME",
    "GROCERY_DEFAULT_PACKAGE",
    "GROCERY_EXPORT_STYLE",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings == GrocerySettings()
    assert settings.list_name == "My Grocery List"
    assert settings.default_package == "standard package"
    assert settings.export_style == "share"


def test_environment(monkeypatch):
    monkeypatch.setenv("GROCERY_LIST_NAME", "Week 12")
    monkeypatch.setenv("GROCERY_EXPORT_STYLE", "NOTES")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = GrocerySettings.from_env()
    assert settings.list_name == "Week 12"
    assert settings.export_style == "notes"
    assert settings.log_level == "DEBUG"


def test_yaml_file_overrides_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("GROCERY_LIST_NAME", "From env")
    config = tmp_path / "grocery.yaml"
    config.write_text("list_name: Party\ndefault_package: ask the store\n", encoding="utf-8")

    settings = load_settings(str(config))
    assert settings.list_name == "Party"
    assert settings.default_package == "ask the store"


def test_json_file(tmp_path):
    config = tmp_path / "grocery.json"
    config.write_text(json.dumps({"export_style": "json", "log_format": "json"}), encoding="utf-8")

    settings = load_settings(str(config))
    assert settings.export_style == "json"
    assert settings.log_format == "json"


def test_file_values_are_case_folded_like_environment(tmp_path):
    config = tmp_path / "grocery.yaml"
    config.write_text("export_style: JSON\nlog_level: debug\nlog_format: Text\n", encoding="utf-8")

    settings = load_settings(str(config))
    assert settings.export_style == "json"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"


def test_empty_file_keeps_defaults(tmp_path):
    config = tmp_path / "empty.yml"
    config.write_text("", encoding="utf-8")
    assert load_settings(str(config)) == GrocerySettings()


def test_unknown_keys_ignored(tmp_path):
    config = tmp_path / "grocery.yaml"
    config.write_text("list_name: Party\ncolour: blue\n", encoding="utf-8")
    assert load_settings(str(config)).list_name == "Party"


def test_invalid_export_style(tmp_path):
    config = tmp_path / "grocery.yaml"
    config.write_text("export_style: poster\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(str(config))
    assert exc_info.value.details["allowed"] == ["share", "notes", "json"]
    assert exc_info.value.error_code == "ConfigurationError"


def test_invalid_log_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize("filename, content", [
    ("broken.yaml", "list_name: [unclosed\n"),
    ("broken.json", "{not json"),
    ("list.yaml", "- a\n- b\n"),
])
def test_malformed_files(tmp_path, filename, content):
    config = tmp_path / filename
    config.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(str(config))


def test_missing_file(tmp_path):
    with pytest.raises(GroceryListError) as exc_info:
        load_settings(str(tmp_path / "missing.yaml"))
    assert exc_info.value.to_dict()["error_code"] == "ConfigurationError"

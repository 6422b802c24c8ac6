#!/usr/bin/env python3
"""
Tests for where log output goes.

These run in a fresh interpreter: the autouse fixture in conftest.py
configures logging for every in-process test.
"""

import os
import sys
import json
import subprocess
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def run_python(args, cwd):
    env = {
        key: value for key, value in os.environ.items()
        if not key.startswith("GROCERY_") and key not in ("LOG_LEVEL", "LOG_FORMAT")
    }
    env["PYTHONPATH"] = str(SRC_DIR)
    return subprocess.run(
        [sys.executable] + args,
        cwd=str(cwd),
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_library_calls_write_nothing_without_configuration(tmp_path):
    script = (
        "from measurement_parser import parse_measurement\n"
        "from package_recommender import recommend_package\n"
        "from grocery_list_builder import GroceryListBuilder\n"
        "from grocery_models import IngredientOccurrence\n"
        "parse_measurement('a pinch of salt')\n"
        "recommend_package('dragon fruit', '1')\n"
        "GroceryListBuilder().build([\n"
        "    IngredientOccurrence('salt', 'a pinch of salt'),\n"
        "    IngredientOccurrence('', '1 cup'),\n"
        "])\n"
    )
    result = run_python(["-c", script], tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    assert "unrecognized" not in result.stderr.lower()


def test_cli_settings_warning_goes_to_stderr(tmp_path):
    recipes = tmp_path / "recipes.json"
    recipes.write_text(json.dumps([
        {"id": "r1", "name": "Toast", "ingredients": [{"item": "Bread", "measurement": "2 slices"}]},
    ]), encoding="utf-8")
    config = tmp_path / "settings.yaml"
    config.write_text("list_name: Pantry run\nshelf: dry\n", encoding="utf-8")

    result = run_python(
        [str(SRC_DIR / "grocery_cli.py"), str(recipes), "--config", str(config), "--format", "json"],
        tmp_path,
    )

    assert result.returncode == 0, result.stderr
    document = json.loads(result.stdout)
    assert document["name"] == "Pantry run"
    assert [item["formatted_measurement"] for item in document["items"]] == ["2"]
    assert "unknown_settings_ignored" in result.stderr


@pytest.mark.parametrize("fmt", ["text", "json"])
def test_configured_logging_uses_stderr(tmp_path, fmt):
    script = (
        "import structlog\n"
        "from logging_config import configure_logging\n"
        f"configure_logging('INFO', {fmt!r})\n"
        "structlog.get_logger('grocery').info('hello_event', items=3)\n"
    )
    result = run_python(["-c", script], tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    assert "hello_event" in result.stderr
    if fmt == "json":
        assert json.loads(result.stderr.strip().splitlines()[-1])["items"] == 3

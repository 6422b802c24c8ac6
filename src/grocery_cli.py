#!/usr/bin/env python3
"""
Command-line grocery list builder.
Reads selected recipes from a JSON file and prints the consolidated list.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Any, List, Optional

import structlog

from grocery_errors import GroceryListError, InputFormatError
from grocery_list_builder import GroceryListBuilder
from grocery_settings import EXPORT_STYLES, GrocerySettings, load_settings
from logging_config import configure_logging

logger = structlog.wrap_logger(logging.getLogger(__name__))


def load_recipes(path: str) -> List[Any]:
    """
    Read recipes from a JSON file.

    Accepts either a list of recipes or an object with a 'recipes' list.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise InputFormatError(f"Cannot read recipes file: {e}", source=path) from e
    except json.JSONDecodeError as e:
        raise InputFormatError(f"Recipes file is not valid JSON: {e}", source=path) from e

    if isinstance(data, dict):
        data = data.get('recipes')
    if not isinstance(data, list):
        raise InputFormatError("Expected a list of recipes", source=path)
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Build a consolidated grocery list from recipes')
    parser.add_argument('recipes', help='JSON file with the selected recipes')
    parser.add_argument('--name', '-n', help='Grocery list name')
    parser.add_argument('--format', '-f', choices=EXPORT_STYLES, help='Output format')
    parser.add_argument('--exclude', '-x', action='append', default=[],
                        help='Ingredient to leave off the list (repeatable)')
    parser.add_argument('--config', '-c', help='Settings file (YAML or JSON)')
    parser.add_argument('--log-level', help='Logging level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main grocery list script."""
    args = build_parser().parse_args(argv)

    # Logging must be on stderr before the settings file is read
    env_settings = GrocerySettings.from_env()
    configure_logging(args.log_level or env_settings.log_level, env_settings.log_format)

    try:
        settings = load_settings(args.config)
    except GroceryListError as e:
        logger.error("settings_failed", error=e.message, error_code=e.error_code)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    configure_logging(args.log_level or settings.log_level, settings.log_format)

    try:
        recipes = load_recipes(args.recipes)
        builder = GroceryListBuilder(settings)
        grocery_list = builder.build_from_recipes(recipes, name=args.name, exclude=args.exclude)
    except GroceryListError as e:
        logger.error("grocery_list_failed", error=e.message, error_code=e.error_code,
                     source=Path(args.recipes).name)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    output = builder.export(grocery_list, args.format)
    if isinstance(output, dict):
        output = json.dumps(output, indent=2, ensure_ascii=False) + "\n"
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

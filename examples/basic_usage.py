#!/usr/bin/env python3
"""
Grocery List Consolidation - Basic Usage Examples
Demonstrates parsing measurements and building a consolidated grocery list.
"""

import sys
import json
from pathlib import Path

# Add src to path
sys.path.append(str(Path(__file__).parent.parent / 'src'))

from grocery_list_builder import GroceryListBuilder
from grocery_settings import GrocerySettings
from logging_config import configure_logging
from measurement_formatter import format_measurement
from measurement_parser import parse_measurement
from unit_standardizer import standardize


RECIPES = [
    {
        "id": "r1",
        "name": "Pancakes",
        "ingredients": [
            {"item": "Flour", "measurement": "1 cup"},
            {"item": "Milk", "measurement": "1 1/2 cups"},
            {"item": "Eggs", "measurement": "2"},
            {"item": "Vanilla", "measurement": "1 tsp"},
            {"item": "Salt", "measurement": "a pinch of salt"},
        ],
    },
    {
        "id": "r2",
        "name": "Garlic Bread",
        "ingredients": [
            {"item": "flour", "measurement": "2 tbsp"},
            {"item": "Garlic", "measurement": "2 cloves"},
            {"item": "Butter", "measurement": "4 tbsp"},
            {"item": "Salt", "measurement": "1 tsp"},
        ],
    },
]


def example_1_measurements():
    """Example 1: Parse, standardize and format single measurements."""
    print("🔸 Example 1: Measurements")
    print("-" * 50)

    for text in ["1 1/2 cups", "2 tbsp", "1-2 lbs", "250 ml", "3", "2 cloves"]:
        parsed = parse_measurement(text)
        standardized = standardize(parsed.quantity, parsed.unit, parsed.group)
        group = parsed.group.value if parsed.group else "unrecognized"
        print(f"   {text!r:14} -> {standardized.quantity:.4g} {standardized.unit or '(count)'} "
              f"[{group}] -> {format_measurement(standardized.quantity, standardized.unit)}")


def example_2_grocery_list():
    """Example 2: Build a grocery list from two recipes."""
    print("\n🔸 Example 2: Grocery List")
    print("-" * 50)

    builder = GroceryListBuilder()
    grocery_list = builder.build_from_recipes(RECIPES)
    print(grocery_list.to_text("share"))

    print("📦 Package recommendations:")
    for item in grocery_list.items():
        print(f"   - {item.display_name}: {item.recommended_package}")


def example_3_custom_settings():
    """Example 3: Custom settings, exclusions and JSON export."""
    print("\n🔸 Example 3: Custom Settings")
    print("-" * 50)

    settings = GrocerySettings(list_name="Weekend Shopping", export_style="json")
    builder = GroceryListBuilder(settings)
    grocery_list = builder.build_from_recipes(RECIPES, exclude=["salt"])
    print(json.dumps(builder.export(grocery_list), indent=2, ensure_ascii=False))


def main():
    """Run all examples."""
    configure_logging("WARNING")

    print("🛒 Grocery List Consolidation - Usage Examples")
    print("=" * 60)

    example_1_measurements()
    example_2_grocery_list()
    example_3_custom_settings()

    print("\n✨ All examples completed!")


if __name__ == "__main__":
    main()

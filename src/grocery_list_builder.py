#!/usr/bin/env python3
"""
Grocery List Builder
Complete pipeline from selected recipes to a consolidated grocery list.

Pipeline stages:
1. Recipe ingredients -> ingredient occurrences
2. Categorization
3. Measurement parsing and unit standardization
4. Consolidation by ingredient name
5. Display formatting and package recommendation
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

import structlog

from grocery_errors import InputFormatError
from grocery_models import GroceryList, GroceryListItem, IngredientOccurrence
from grocery_settings import GrocerySettings
from ingredient_categorizer import IngredientCategorizer
from ingredient_consolidator import IngredientConsolidator
from measurement_formatter import MeasurementFormatter
from package_recommender import PackageSizeRecommender

logger = structlog.wrap_logger(logging.getLogger(__name__))


def occurrences_from_recipes(recipes: Iterable[Mapping[str, Any]]) -> List[IngredientOccurrence]:
    """
    Flatten recipes into ingredient occurrences.

    Args:
        recipes: Mappings with 'id', 'name' and 'ingredients', each
            ingredient a mapping with 'item' and 'measurement'

    Returns:
        Occurrences in recipe order, then ingredient order. Recipes without
        an ingredient list are skipped.
    """
    occurrences = []
    for recipe in recipes:
        if not recipe:
            continue
        if not isinstance(recipe, Mapping):
            raise InputFormatError(
                f"Recipes must be objects, got {type(recipe).__name__}"
            )
        if not recipe.get('ingredients'):
            continue

        recipe_id = str(recipe.get('id', ''))
        recipe_name = str(recipe.get('name', ''))
        for ingredient in recipe['ingredients']:
            if not isinstance(ingredient, Mapping):
                raise InputFormatError(
                    f"Ingredient entries must be objects, got {type(ingredient).__name__}",
                    details={"recipe_id": recipe_id}
                )
            occurrences.append(IngredientOccurrence(
                name=str(ingredient.get('item') or ''),
                measurement_text=str(ingredient.get('measurement') or ''),
                recipe_id=recipe_id,
                recipe_name=recipe_name
            ))
    return occurrences


class GroceryListBuilder:
    """Builds consolidated grocery lists from ingredient occurrences."""

    def __init__(self, settings: Optional[GrocerySettings] = None):
        """
        Initialize builder.

        Args:
            settings: Grocery list settings; defaults when omitted
        """
        self.settings = settings or GrocerySettings()
        self.categorizer = IngredientCategorizer()
        self.formatter = MeasurementFormatter()
        self.recommender = PackageSizeRecommender(default_package=self.settings.default_package)
        self.consolidator = IngredientConsolidator(
            categorizer=self.categorizer,
            recommender=self.recommender
        )

    def build(self, occurrences: Iterable[IngredientOccurrence], name: Optional[str] = None,
              exclude: Iterable[str] = ()) -> GroceryList:
        """
        Build a grocery list.

        Args:
            occurrences: Ingredient occurrences from the selected recipes
            name: List title, defaults to the configured list name
            exclude: Ingredient names removed by the user

        Returns:
            Grocery list grouped by category
        """
        valid = []
        for occurrence in occurrences:
            if not occurrence.name or not occurrence.name.strip():
                logger.warning("skipping_unnamed_ingredient",
                               measurement=occurrence.measurement_text,
                               recipe_id=occurrence.recipe_id)
                continue
            valid.append(occurrence)

        consolidated = self.consolidator.consolidate(valid)

        categories: Dict[str, List[GroceryListItem]] = {}
        for category, ingredients in consolidated.items():
            categories[category] = [
                GroceryListItem(
                    display_name=ingredient.display_name,
                    formatted_measurement=ingredient.display_line(self.formatter),
                    recommended_package=ingredient.recommended_package,
                    category=category,
                    recipe_id=ingredient.recipe_id,
                    recipe_name=ingredient.recipe_name
                )
                for ingredient in ingredients
            ]

        grocery_list = GroceryList(name=name or self.settings.list_name, categories=categories)
        exclude = list(exclude)
        if exclude:
            grocery_list = grocery_list.without(exclude)

        logger.info("built_grocery_list",
                    occurrences=len(valid),
                    items=len(grocery_list),
                    categories=len(grocery_list.categories))
        return grocery_list

    def build_from_recipes(self, recipes: Iterable[Mapping[str, Any]], name: Optional[str] = None,
                           exclude: Iterable[str] = ()) -> GroceryList:
        """Build a grocery list straight from recipe mappings."""
        return self.build(occurrences_from_recipes(recipes), name=name, exclude=exclude)

    def export(self, grocery_list: GroceryList, style: Optional[str] = None):
        """
        Export a grocery list.

        Args:
            grocery_list: List to export
            style: 'share', 'notes' or 'json'; defaults to the configured style

        Returns:
            Text for the text styles, a dictionary for 'json'
        """
        style = style or self.settings.export_style
        if style == 'json':
            return grocery_list.to_dict()
        return grocery_list.to_text(style)

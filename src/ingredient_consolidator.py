#!/usr/bin/env python3
"""
Ingredient Consolidator
Merges ingredient occurrences from several recipes into one entry per
ingredient name, summing quantities only within the same unit group.
"""

import logging
from typing import Dict, List, Iterable, Optional

from grocery_models import ConsolidatedIngredient, IngredientOccurrence
from measurement_parser import MeasurementParser
from unit_standardizer import UnitStandardizer
from ingredient_categorizer import IngredientCategorizer
from package_recommender import PackageSizeRecommender

logger = logging.getLogger(__name__)


class IngredientConsolidator:
    """Groups occurrences by category and name and accumulates their quantities."""

    def __init__(self, parser: Optional[MeasurementParser] = None,
                 standardizer: Optional[UnitStandardizer] = None,
                 categorizer: Optional[IngredientCategorizer] = None,
                 recommender: Optional[PackageSizeRecommender] = None):
        """
        Initialize consolidator.

        Args:
            parser: Measurement parser
            standardizer: Unit standardizer
            categorizer: Used for occurrences without a precomputed category
            recommender: When given, each ingredient gets the package
                recommendation of its first occurrence
        """
        self.parser = parser or MeasurementParser()
        self.standardizer = standardizer or UnitStandardizer()
        self.categorizer = categorizer or IngredientCategorizer()
        self.recommender = recommender

    def consolidate(self, occurrences: Iterable[IngredientOccurrence]
                    ) -> Dict[str, List[ConsolidatedIngredient]]:
        """
        Consolidate occurrences.

        Args:
            occurrences: Ingredient occurrences in recipe order

        Returns:
            Category name -> ingredients in first-seen order. Categories are
            in first-seen order too; sorting is left to rendering.
        """
        by_category: Dict[str, Dict[str, ConsolidatedIngredient]] = {}

        for occurrence in occurrences:
            category = occurrence.category or self.categorizer.categorize(occurrence.name)
            ingredients = by_category.setdefault(category, {})

            key = occurrence.key
            consolidated = ingredients.get(key)
            if consolidated is None:
                consolidated = self._start(occurrence, key, category)
                ingredients[key] = consolidated

            parsed = self.parser.parse(occurrence.measurement_text)
            standardized = self.standardizer.standardize(parsed.quantity, parsed.unit, parsed.group)
            consolidated.add(parsed, standardized, occurrence.measurement_text)

        ingredient_count = sum(len(items) for items in by_category.values())
        logger.debug(f"Consolidated {ingredient_count} ingredients in {len(by_category)} categories")
        return {category: list(items.values()) for category, items in by_category.items()}

    def _start(self, occurrence: IngredientOccurrence, key: str,
               category: str) -> ConsolidatedIngredient:
        recommended = ""
        if self.recommender is not None:
            recommended = self.recommender.recommend(occurrence.name, occurrence.measurement_text)
        return ConsolidatedIngredient(
            name=key,
            display_name=occurrence.name,
            category=category,
            recommended_package=recommended,
            recipe_id=occurrence.recipe_id,
            recipe_name=occurrence.recipe_name
        )


_default_consolidator = IngredientConsolidator()


def consolidate(occurrences: Iterable[IngredientOccurrence]) -> Dict[str, List[ConsolidatedIngredient]]:
    """Consolidate with the default parser, standardizer and categorizer."""
    return _default_consolidator.consolidate(occurrences)

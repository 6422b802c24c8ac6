#!/usr/bin/env python3
"""
Ingredient Categorizer
Assigns a shopping category to an ingredient name by keyword containment.
"""

from types import MappingProxyType

from grocery_models import Category


# Checked in order; the first category with a keyword contained in the
# lower-cased name wins, so order matters ("pepper" is Produce, not Pantry).
CATEGORY_KEYWORDS = MappingProxyType({
    Category.MEAT_SEAFOOD: (
        'chicken', 'beef', 'pork', 'turkey', 'lamb', 'fish', 'salmon', 'tuna',
        'shrimp', 'bacon', 'sausage', 'steak',
    ),
    Category.PRODUCE: (
        'apple', 'banana', 'orange', 'lemon', 'lime', 'avocado', 'tomato', 'potato',
        'onion', 'garlic', 'lettuce', 'spinach', 'kale', 'carrot', 'broccoli',
        'pepper', 'cucumber', 'zucchini', 'mushroom', 'berry', 'strawberry',
        'blueberry', 'grape', 'melon',
    ),
    Category.DAIRY_EGGS: (
        'milk', 'cream', 'cheese', 'butter', 'yogurt', 'egg', 'sour cream',
        'cream cheese', 'feta',
    ),
    Category.GRAINS_BAKERY: (
        'bread', 'rice', 'pasta', 'flour', 'oats', 'cereal', 'tortilla', 'noodle',
        'bagel', 'roll', 'bun', 'cracker', 'quinoa', 'couscous',
    ),
    Category.PANTRY: (
        'oil', 'vinegar', 'salt', 'pepper', 'sugar', 'spice', 'herb', 'sauce',
        'broth', 'stock', 'bean', 'lentil', 'nut', 'seed', 'canned', 'condiment',
        'syrup',
    ),
    Category.FROZEN: ('frozen', 'ice cream'),
    Category.BEVERAGES: (
        'water', 'juice', 'soda', 'coffee', 'tea', 'beer', 'wine', 'alcohol', 'drink',
    ),
    Category.SNACKS_SWEETS: (
        'chocolate', 'candy', 'cookie', 'cracker', 'chip', 'snack', 'dessert',
        'cake', 'pie', 'honey',
    ),
})


class IngredientCategorizer:
    """Keyword-based shopping category lookup."""

    def __init__(self, category_keywords=CATEGORY_KEYWORDS):
        self.category_keywords = category_keywords

    def categorize(self, ingredient_name: str) -> str:
        """
        Categorize an ingredient name.

        Args:
            ingredient_name: Ingredient name as written in the recipe

        Returns:
            Category name, "Other" when no keyword matches
        """
        lowered = (ingredient_name or "").lower()
        for category, keywords in self.category_keywords.items():
            for keyword in keywords:
                if keyword in lowered:
                    return category.value
        return Category.OTHER.value


_default_categorizer = IngredientCategorizer()


def categorize(ingredient_name: str) -> str:
    """Categorize with the default keyword table."""
    return _default_categorizer.categorize(ingredient_name)

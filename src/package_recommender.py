#!/usr/bin/env python3
"""
Package-Size Recommender
Suggests a real-world retail package for a recipe ingredient, e.g.
"flour" -> "5 lb bag". Works per raw recipe line, independently of the
consolidated totals.
"""

import re
import logging
from typing import Optional
from types import MappingProxyType

logger = logging.getLogger(__name__)


# Common purchase sizes; the first entry is the default, the last the smallest.
STANDARD_PACKAGE_SIZES = MappingProxyType({
    # Baking & Dry Goods
    'flour': ('5 lb bag', '2 lb bag'),
    'sugar': ('4 lb bag', '2 lb bag'),
    'brown sugar': ('1 lb box', '2 lb box'),
    'powdered sugar': ('1 lb box', '2 lb box'),
    'baking powder': ('8 oz can',),
    'baking soda': ('1 lb box',),
    'cocoa powder': ('8 oz container',),
    'chocolate chips': ('12 oz bag',),
    'oats': ('18 oz container', '42 oz container'),
    'breadcrumbs': ('15 oz container',),
    'cornstarch': ('16 oz box',),
    'vanilla': ('4 oz bottle', '1 oz bottle'),

    # Dairy & Refrigerated
    'milk': ('half gallon', 'gallon'),
    'heavy cream': ('1 pint carton',),
    'half and half': ('1 pint carton',),
    'buttermilk': ('1 quart carton',),
    'sour cream': ('16 oz container',),
    'yogurt': ('32 oz container', '6 oz container'),
    'cream cheese': ('8 oz package',),
    'butter': ('1 lb package (4 sticks)',),
    'eggs': ('dozen', 'half dozen'),
    'cheese': ('8 oz block', '16 oz block'),
    'shredded cheese': ('8 oz bag',),

    # Oils & Vinegars
    'olive oil': ('16 oz bottle', '32 oz bottle'),
    'vegetable oil': ('48 oz bottle',),
    'canola oil': ('48 oz bottle',),
    'vinegar': ('16 oz bottle',),
    'apple cider vinegar': ('16 oz bottle',),
    'balsamic vinegar': ('16 oz bottle',),

    # Condiments & Sauces
    'ketchup': ('20 oz bottle',),
    'mustard': ('8 oz bottle',),
    'mayonnaise': ('30 oz jar',),
    'soy sauce': ('15 oz bottle',),
    'hot sauce': ('5 oz bottle',),
    'salsa': ('16 oz jar',),
    'bbq sauce': ('18 oz bottle',),
    'pasta sauce': ('24 oz jar',),

    # Canned Goods
    'tomato sauce': ('15 oz can', '8 oz can'),
    'tomato paste': ('6 oz can',),
    'diced tomatoes': ('14.5 oz can',),
    'chicken broth': ('32 oz carton', '14.5 oz can'),
    'beef broth': ('32 oz carton', '14.5 oz can'),
    'vegetable broth': ('32 oz carton', '14.5 oz can'),
    'beans': ('15 oz can',),
    'tuna': ('5 oz can',),

    # Spices & Herbs
    'salt': ('26 oz container',),
    'pepper': ('4 oz container',),
    'cinnamon': ('2.5 oz container',),
    'oregano': ('0.75 oz container',),
    'basil': ('0.75 oz container',),
    'thyme': ('0.75 oz container',),
    'rosemary': ('0.75 oz container',),
    'cumin': ('2 oz container',),
    'chili powder': ('2.5 oz container',),
    'paprika': ('2.5 oz container',),
    'garlic powder': ('3 oz container',),
    'onion powder': ('2.5 oz container',),

    # Produce
    'onion': ('1 onion', '3 lb bag'),
    'garlic': ('1 head', '3 pack'),
    'potato': ('5 lb bag', '1 potato'),
    'carrot': ('1 lb bag', '2 lb bag'),
    'celery': ('1 bunch',),
    'lettuce': ('1 head',),
    'tomato': ('1 tomato', '4 pack'),
    'lemon': ('1 lemon', '4 pack'),
    'lime': ('1 lime', '4 pack'),
    'apple': ('1 apple', '3 lb bag'),
    'banana': ('1 banana', 'bunch'),
    'avocado': ('1 avocado',),

    # Meat & Seafood
    'chicken breast': ('1 lb package', '3 lb package'),
    'chicken thighs': ('1 lb package',),
    'ground beef': ('1 lb package',),
    'steak': ('1 lb steak',),
    'pork chops': ('1 lb package',),
    'bacon': ('1 lb package',),
    'sausage': ('1 lb package',),
    'salmon': ('1 lb fillet',),
    'shrimp': ('1 lb bag',),

    # Grains & Pasta
    'rice': ('2 lb bag', '5 lb bag'),
    'pasta': ('16 oz box',),
    'bread': ('1 loaf',),
    'tortillas': ('10 count package',),
})

DEFAULT_PACKAGE_SIZE = 'standard package'

# Multi-word names resolved before the generic table scan
SPECIAL_CASE_NAMES = (
    'chicken breast',
    'ground beef',
    'olive oil',
    'vegetable oil',
)

# Measurement keywords that indicate a small amount
SMALL_QUANTITY_UNITS = ('teaspoon', 'tsp', 'tablespoon', 'tbsp', 'pinch', 'dash')
SMALL_QUANTITY_THRESHOLD = 4

# Measurement words stripped from ingredient names
NAME_MEASUREMENT_WORDS = frozenset({
    'cup', 'cups', 'tbsp', 'tsp', 'teaspoon', 'tablespoon', 'ounce', 'oz', 'pound', 'lb',
})

NAME_NUMBER_PATTERN = re.compile(r'^\d+([./]\d+)?$')
FIRST_NUMBER_PATTERN = re.compile(r'(\d+([./]\d+)?)')


def normalize_ingredient_name(ingredient: str) -> str:
    """
    Normalize an ingredient name to a package-size table key.

    Args:
        ingredient: Ingredient name, possibly with stray quantities or units

    Returns:
        Table key when one is contained in the name, otherwise the cleaned name
    """
    words = (ingredient or "").lower().strip().split(' ')
    kept = [
        word for word in words
        if not NAME_NUMBER_PATTERN.match(word) and word not in NAME_MEASUREMENT_WORDS
    ]
    cleaned = ' '.join(kept).strip()

    for name in SPECIAL_CASE_NAMES:
        if name in cleaned:
            return name

    # Strips adjectives like "fresh" or "chopped" by matching the core ingredient
    for key in STANDARD_PACKAGE_SIZES:
        if key in cleaned:
            return key

    return cleaned


def _number_value(token: str) -> float:
    if '/' in token:
        numerator, denominator = token.split('/')
        try:
            return float(numerator) / float(denominator)
        except ZeroDivisionError:
            return float('inf')
    return float(token)


def is_small_quantity(measurement: str) -> bool:
    """
    Check if a measurement is a small amount.

    Only the first number in the text is considered, regardless of which
    unit it belongs to.
    """
    lowered = (measurement or "").lower()
    for unit in SMALL_QUANTITY_UNITS:
        if unit in lowered:
            match = FIRST_NUMBER_PATTERN.search(lowered)
            if match:
                return _number_value(match.group(1)) <= SMALL_QUANTITY_THRESHOLD
            return True
    return False


class PackageSizeRecommender:
    """Recommends retail package sizes for ingredients."""

    def __init__(self, package_sizes=STANDARD_PACKAGE_SIZES,
                 default_package: str = DEFAULT_PACKAGE_SIZE):
        self.package_sizes = package_sizes
        self.default_package = default_package

    def recommend(self, ingredient_name: str, measurement_text: str) -> str:
        """
        Recommend a package size.

        Args:
            ingredient_name: Ingredient name from the recipe
            measurement_text: Raw measurement from the recipe

        Returns:
            Smallest listed package for small amounts, the first listed
            package otherwise, or the default package for unknown ingredients
        """
        normalized = normalize_ingredient_name(ingredient_name)
        sizes: Optional[tuple] = self.package_sizes.get(normalized)

        if not sizes:
            logger.debug(f"No package size for ingredient: {ingredient_name!r}")
            return self.default_package

        if is_small_quantity(measurement_text):
            return sizes[-1]
        return sizes[0]


_default_recommender = PackageSizeRecommender()


def recommend_package(ingredient_name: str, measurement_text: str) -> str:
    """Recommend with the default package table."""
    return _default_recommender.recommend(ingredient_name, measurement_text)

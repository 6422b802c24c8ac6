#!/usr/bin/env python3
"""
Tests for retail package-size recommendations.
"""

import pytest

from package_recommender import (
    DEFAULT_PACKAGE_SIZE,
    PackageSizeRecommender,
    is_small_quantity,
    normalize_ingredient_name,
    recommend_package,
)


class TestNormalizeIngredientName:

    @pytest.mark.parametrize("name, expected", [
        ("2 cups all-purpose flour", "flour"),
        ("Fresh Basil", "basil"),
        ("1 lb extra virgin olive oil", "olive oil"),
        ("boneless chicken breast", "chicken breast"),
        ("vanilla extract", "vanilla"),
        ("dragon fruit", "dragon fruit"),
    ])
    def test_normalize(self, name, expected):
        assert normalize_ingredient_name(name) == expected


class TestSmallQuantity:

    @pytest.mark.parametrize("measurement, expected", [
        ("1 tsp", True),
        ("4 tbsp", True),
        ("6 tablespoons", False),
        ("a pinch", True),
        ("dash of hot sauce", True),
        ("2 cups", False),
        ("", False),
        ("1/0 tsp", False),
    ])
    def test_is_small_quantity(self, measurement, expected):
        assert is_small_quantity(measurement) is expected

    def test_first_number_is_used(self):
        # The 12 belongs to the ounces, the 1 to the tablespoon
        assert is_small_quantity("12 oz can plus 1 tbsp") is False


class TestRecommend:

    def test_small_amount_gets_smallest_package(self):
        assert recommend_package("vanilla", "1 tsp") == "1 oz bottle"

    def test_regular_amount_gets_default_package(self):
        assert recommend_package("flour", "2 cups") == "5 lb bag"
        assert recommend_package("Eggs", "2") == "dozen"

    def test_special_case_names(self):
        assert recommend_package("boneless chicken breast", "1 lb") == "1 lb package"

    def test_list_order_decides_small_package(self):
        # Small amounts always take the last listed size
        assert recommend_package("olive oil", "2 tbsp") == "32 oz bottle"
        assert recommend_package("olive oil", "10 tbsp") == "16 oz bottle"

    def test_unknown_ingredient(self):
        assert recommend_package("dragon fruit", "1") == DEFAULT_PACKAGE_SIZE

    def test_custom_default_package(self):
        recommender = PackageSizeRecommender(default_package="ask the store")
        assert recommender.recommend("dragon fruit", "1") == "ask the store"
        assert recommender.recommend("butter", "4 tbsp") == "1 lb package (4 sticks)"

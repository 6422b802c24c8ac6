#!/usr/bin/env python3
"""
Tests for conversion into canonical units.
"""

import pytest

from grocery_models import UnitGroup
from unit_standardizer import UnitStandardizer, standardize


class TestStandardize:
    """Conversion factors and pass-through behaviour."""

    @pytest.mark.parametrize("quantity, unit, expected", [
        (2, "tbsp", 0.125),
        (1, "tsp", 1 / 48),
        (3, "teaspoons", 1 / 16),
        (4, "fl oz", 0.5),
        (1, "pint", 2),
        (1, "quart", 4),
        (1, "gallon", 16),
        (1, "l", 4.22675),
        (236.588, "ml", 1.0),
    ])
    def test_volume_to_cups(self, quantity, unit, expected):
        result = standardize(quantity, unit, UnitGroup.VOLUME)
        assert result.unit == "cups"
        assert result.quantity == pytest.approx(expected)

    @pytest.mark.parametrize("quantity, unit, expected", [
        (1, "lb", 16),
        (1.5, "pounds", 24),
        (100, "g", 3.5274),
        (1, "kg", 35.274),
        (8, "oz", 8),
    ])
    def test_weight_to_ounces(self, quantity, unit, expected):
        result = standardize(quantity, unit, UnitGroup.WEIGHT)
        assert result.unit == "ounces"
        assert result.quantity == pytest.approx(expected)

    def test_canonical_unit_unchanged(self):
        result = standardize(1.5, "cups", UnitGroup.VOLUME)
        assert (result.quantity, result.unit) == (1.5, "cups")

    def test_count_units_collapse_to_empty_unit(self):
        assert standardize(2, "", UnitGroup.COUNT).unit == ""
        result = standardize(3, "slices", UnitGroup.COUNT)
        assert (result.quantity, result.unit) == (3, "")

    def test_unrecognized_group_passes_through(self):
        result = standardize(2, "cloves", None)
        assert (result.quantity, result.unit) == (2, "cloves")

    def test_unknown_unit_in_known_group_keeps_quantity(self):
        standardizer = UnitStandardizer(conversions={})
        result = standardizer.standardize(3, "tbsp", UnitGroup.VOLUME)
        assert (result.quantity, result.unit) == (3, "cups")

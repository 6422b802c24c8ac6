#!/usr/bin/env python3
"""
Unit Standardizer
Converts parsed quantities into the canonical unit of their group
(cups for volume, ounces for weight, no unit for counts).
"""

from typing import Optional
from types import MappingProxyType

from grocery_models import StandardizedQuantity, UnitGroup


# Factor to multiply a quantity by to express it in the canonical unit.
UNIT_CONVERSIONS = MappingProxyType({
    # Volume (to cups)
    'tablespoon': 1 / 16,
    'tablespoons': 1 / 16,
    'tbsp': 1 / 16,
    'teaspoon': 1 / 48,
    'teaspoons': 1 / 48,
    'tsp': 1 / 48,
    'fluid ounce': 1 / 8,
    'fluid ounces': 1 / 8,
    'fl oz': 1 / 8,
    'pint': 2,
    'pints': 2,
    'quart': 4,
    'quarts': 4,
    'gallon': 16,
    'gallons': 16,
    'cup': 1,
    'cups': 1,
    'ml': 1 / 236.588,
    'milliliter': 1 / 236.588,
    'milliliters': 1 / 236.588,
    'l': 4.22675,
    'liter': 4.22675,
    'liters': 4.22675,

    # Weight (to ounces)
    'pound': 16,
    'pounds': 16,
    'lb': 16,
    'lbs': 16,
    'ounce': 1,
    'ounces': 1,
    'oz': 1,
    'gram': 0.035274,
    'grams': 0.035274,
    'g': 0.035274,
    'kg': 35.274,
    'kilogram': 35.274,
    'kilograms': 35.274,
})


class UnitStandardizer:
    """Converts quantities to the canonical unit of their unit group."""

    def __init__(self, conversions=UNIT_CONVERSIONS):
        self.conversions = conversions

    def standardize(self, quantity: float, unit: str,
                    group: Optional[UnitGroup]) -> StandardizedQuantity:
        """
        Express a quantity in its group's canonical unit.

        Args:
            quantity: Parsed quantity
            unit: Parsed unit spelling
            group: Unit group, or None for unrecognized units

        Returns:
            Standardized quantity; unrecognized units pass through unchanged
        """
        if group is None:
            return StandardizedQuantity(quantity=quantity, unit=unit)

        canonical = group.canonical_unit
        if unit == canonical or unit == "":
            return StandardizedQuantity(quantity=quantity, unit=canonical)

        factor = self.conversions.get(unit, 1)
        return StandardizedQuantity(quantity=quantity * factor, unit=canonical)


_default_standardizer = UnitStandardizer()


def standardize(quantity: float, unit: str, group: Optional[UnitGroup]) -> StandardizedQuantity:
    """Standardize with the default conversion table."""
    return _default_standardizer.standardize(quantity, unit, group)

#!/usr/bin/env python3
"""
Measurement Parser
Parses free-text recipe measurements ("1/2 cup", "1 1/2 lbs", "1-2 tbsp")
into a quantity, a unit and the unit group the unit belongs to.
"""

import re
import math
import logging
from typing import Optional, Tuple
from types import MappingProxyType

from grocery_models import ParsedMeasurement, UnitGroup

logger = logging.getLogger(__name__)


# Recognized unit spellings per group. Group order and spelling order are the
# match order: the first spelling the remaining text starts with wins.
UNIT_SYNONYMS = MappingProxyType({
    UnitGroup.VOLUME: (
        "cup", "cups", "tbsp", "tablespoon", "tablespoons", "tsp", "teaspoon",
        "teaspoons", "fluid ounce", "fluid ounces", "fl oz", "pint", "pints",
        "quart", "quarts", "gallon", "gallons", "ml", "milliliter", "milliliters",
        "l", "liter", "liters",
    ),
    UnitGroup.WEIGHT: (
        "pound", "pounds", "lb", "lbs", "ounce", "ounces", "oz", "gram", "grams",
        "g", "kg", "kilogram", "kilograms",
    ),
    UnitGroup.COUNT: (
        "", "piece", "pieces", "whole", "slice", "slices", "count", "counts",
    ),
})

QUANTITY_PATTERN = re.compile(r'^([\d./\s-]+)')
NUMBER_PREFIX_PATTERN = re.compile(r'^\s*(\d+\.?\d*|\.\d+)')

DEFAULT_QUANTITY = 1.0


class MeasurementParser:
    """Parser for free-text ingredient measurements."""

    def __init__(self, unit_synonyms=UNIT_SYNONYMS):
        """
        Initialize measurement parser.

        Args:
            unit_synonyms: Ordered mapping of unit group to recognized spellings
        """
        self.unit_synonyms = unit_synonyms

    def parse(self, text: str) -> ParsedMeasurement:
        """
        Parse a measurement string.

        Never raises: an unrecognized unit yields group=None and the original
        text is kept for verbatim display.

        Args:
            text: Measurement text, e.g. "1 1/2 cups"

        Returns:
            Parsed measurement
        """
        original_text = text
        lowered = (text or "").lower().strip()

        quantity = DEFAULT_QUANTITY
        remaining = lowered

        match = QUANTITY_PATTERN.match(lowered)
        if match:
            quantity = self._resolve_quantity(match.group(1).strip())
            remaining = lowered[match.end():].strip()

        unit, group = self._match_unit(remaining)
        if group is None:
            logger.debug(f"Unrecognized unit in measurement: {original_text!r}")

        return ParsedMeasurement(
            quantity=quantity,
            unit=unit,
            group=group,
            original_text=original_text
        )

    def _resolve_quantity(self, token: str) -> float:
        """Turn the leading numeric token into a float."""
        if '-' in token:
            # Range: average of both ends
            sides = token.split('-')[:2]
            values = [self._parse_range_side(side) for side in sides]
            if len(values) == 2 and None not in values:
                value = (values[0] + values[1]) / 2
            else:
                value = None
        elif '/' in token:
            parts = token.split()
            if len(parts) > 1 and _parse_float_prefix(parts[0]) is not None:
                # Mixed number: "1 1/2"
                fraction = _parse_fraction(parts[1])
                whole = _parse_float_prefix(parts[0])
                value = whole + fraction if fraction is not None else None
            else:
                value = _parse_fraction(token)
        else:
            value = _parse_float_prefix(token)

        if value is None or not math.isfinite(value) or value == 0:
            return DEFAULT_QUANTITY
        return value

    def _parse_range_side(self, side: str) -> Optional[float]:
        side = side.strip()
        if '/' in side:
            return _parse_fraction(side)
        return _parse_float_prefix(side)

    def _match_unit(self, remaining: str) -> Tuple[str, Optional[UnitGroup]]:
        """Find the first known unit the remaining text starts with."""
        for group, units in self.unit_synonyms.items():
            for known_unit in units:
                if known_unit == "":
                    if remaining == "":
                        return "", group
                    continue
                if (remaining == known_unit
                        or remaining.startswith(known_unit + ' ')
                        or remaining.startswith(known_unit + '.')):
                    return known_unit, group
        return "", None


def _parse_float_prefix(text: str) -> Optional[float]:
    """Parse the leading decimal number of text, like JavaScript's parseFloat."""
    match = NUMBER_PREFIX_PATTERN.match(text)
    if not match:
        return None
    return float(match.group(1))


def _parse_fraction(text: str) -> Optional[float]:
    """Parse "num/denom"; None when malformed or dividing by zero."""
    pieces = text.strip().split('/')
    if len(pieces) != 2:
        return None
    try:
        numerator = float(pieces[0])
        denominator = float(pieces[1])
        return numerator / denominator
    except (ValueError, ZeroDivisionError):
        return None


_default_parser = MeasurementParser()


def parse_measurement(text: str) -> ParsedMeasurement:
    """Parse a measurement with the default unit table."""
    return _default_parser.parse(text)

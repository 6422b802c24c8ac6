#!/usr/bin/env python3
"""
Measurement Formatter
Turns an accumulated canonical quantity back into a shopping-list string,
promoting to a friendlier unit and rounding to kitchen fractions.
"""

import math
from typing import Callable, Dict, Optional, Tuple
from decimal import Decimal, ROUND_HALF_UP


FRACTION_TOLERANCE = 0.01

# Eighths, in the order they are tried
EIGHTHS = (
    (0.25, '1/4'),
    (0.5, '1/2'),
    (0.75, '3/4'),
    (0.125, '1/8'),
    (0.375, '3/8'),
    (0.625, '5/8'),
    (0.875, '7/8'),
)


def _promote_cups(qty: float) -> Tuple[float, str]:
    if qty >= 4:
        return qty / 4, 'quarts'
    elif qty >= 1:
        return qty, 'cups'
    elif qty >= 1 / 4:
        return qty, 'cups'
    elif qty >= 1 / 16:
        return qty * 16, 'tablespoons'
    else:
        return qty * 48, 'teaspoons'


def _promote_ounces(qty: float) -> Tuple[float, str]:
    if qty >= 16:
        return qty / 16, 'pounds'
    return qty, 'ounces'


# Unit promotion per canonical unit. Units are always plural ("1 quarts").
DISPLAY_UNITS: Dict[str, Callable[[float], Tuple[float, str]]] = {
    'cups': _promote_cups,
    'ounces': _promote_ounces,
    '': lambda qty: (qty, ''),
}


def _to_fixed(value: float, places: int) -> str:
    """Fixed-point string with half-up rounding of the exact binary value."""
    if abs(value) >= 1e15:
        # Beyond Decimal's default precision
        return f"{value:.{places}f}"
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def _round_to_eighth(value: float) -> float:
    eighths = Decimal(value * 8).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(eighths) / 8


def _fraction_label(fraction: float) -> Optional[str]:
    for target, label in EIGHTHS:
        if abs(fraction - target) < FRACTION_TOLERANCE:
            return label
    return None


class MeasurementFormatter:
    """Formats canonical quantities for display."""

    def __init__(self, display_units: Optional[Dict[str, Callable]] = None):
        self.display_units = display_units or DISPLAY_UNITS

    def promote(self, quantity: float, canonical_unit: str) -> Tuple[float, str]:
        """Convert to the display unit; unknown units pass through."""
        converter = self.display_units.get(canonical_unit)
        if converter is None:
            return quantity, canonical_unit
        return converter(quantity)

    def format(self, quantity: float, canonical_unit: str) -> str:
        """
        Format a quantity for the shopping list.

        Args:
            quantity: Quantity in the canonical unit
            canonical_unit: 'cups', 'ounces', '' or an unrecognized unit

        Returns:
            Display string such as "1 1/8 cups" or "2.33 ounces"
        """
        qty, unit = self.promote(quantity, canonical_unit)

        if qty < 10:
            rounded = _round_to_eighth(qty)
            if rounded == math.floor(rounded):
                formatted_qty = str(int(rounded))
            else:
                label = None
                if abs(qty - rounded) < FRACTION_TOLERANCE:
                    whole = math.floor(rounded)
                    label = _fraction_label(rounded - whole)
                if label is None:
                    # Not close to an eighth
                    return f"{_to_fixed(qty, 2)} {unit}".strip()
                formatted_qty = label if whole == 0 else f"{whole} {label}"
        else:
            formatted_qty = _to_fixed(qty, 1)
            if formatted_qty.endswith('.0'):
                formatted_qty = formatted_qty[:-2]

        return f"{formatted_qty} {unit}".strip()


_default_formatter = MeasurementFormatter()


def format_measurement(quantity: float, canonical_unit: str) -> str:
    """Format with the default display units."""
    return _default_formatter.format(quantity, canonical_unit)

#!/usr/bin/env python3
"""
Grocery List Data Model
Structured types shared by the measurement parser, the consolidator
and the grocery list output boundary.
"""

from typing import Dict, List, Optional, Any, Iterable, Iterator, Tuple
from dataclasses import dataclass, field, asdict, replace
from enum import Enum


class UnitGroup(Enum):
    """Families of units that can be converted into each other and summed."""
    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"

    @property
    def canonical_unit(self) -> str:
        """Base unit quantities of this group are accumulated in."""
        return _CANONICAL_UNITS[self]


_CANONICAL_UNITS = {
    UnitGroup.VOLUME: "cups",
    UnitGroup.WEIGHT: "ounces",
    UnitGroup.COUNT: "",
}


class Category(str, Enum):
    """Shopping categories, in the order they are matched against ingredient names."""
    MEAT_SEAFOOD = "Meat & Seafood"
    PRODUCE = "Produce"
    DAIRY_EGGS = "Dairy & Eggs"
    GRAINS_BAKERY = "Grains & Bakery"
    PANTRY = "Pantry"
    FROZEN = "Frozen"
    BEVERAGES = "Beverages"
    SNACKS_SWEETS = "Snacks & Sweets"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IngredientOccurrence:
    """One ingredient line of one selected recipe."""
    name: str
    measurement_text: str
    category: Optional[str] = None
    recipe_id: str = ""
    recipe_name: str = ""

    @property
    def key(self) -> str:
        """Grouping key: lower-cased, trimmed name."""
        return self.name.strip().lower()


@dataclass(frozen=True)
class ParsedMeasurement:
    """Quantity and unit extracted from free-text measurement."""
    quantity: float
    unit: str
    group: Optional[UnitGroup]
    original_text: str

    def is_parsed(self) -> bool:
        """Check if the unit was recognized."""
        return self.group is not None


@dataclass(frozen=True)
class StandardizedQuantity:
    """Quantity expressed in the canonical unit of its group."""
    quantity: float
    unit: str


@dataclass
class GroupTotal:
    """Running total of one unit group for one ingredient."""
    quantity: float
    unit: str
    original_texts: List[str] = field(default_factory=list)


@dataclass
class ConsolidatedIngredient:
    """All occurrences of one ingredient name merged together."""
    name: str
    display_name: str
    category: str
    per_group_totals: Dict[UnitGroup, GroupTotal] = field(default_factory=dict)
    unparsed_texts: List[str] = field(default_factory=list)
    recommended_package: str = ""
    recipe_id: str = ""
    recipe_name: str = ""

    def add(self, parsed: ParsedMeasurement, standardized: StandardizedQuantity,
            measurement_text: str):
        """Accumulate one occurrence into the matching group bucket."""
        if parsed.group is None:
            self.unparsed_texts.append(measurement_text)
            return

        bucket = self.per_group_totals.get(parsed.group)
        if bucket is None:
            self.per_group_totals[parsed.group] = GroupTotal(
                quantity=standardized.quantity,
                unit=standardized.unit,
                original_texts=[parsed.original_text]
            )
        else:
            bucket.quantity += standardized.quantity
            bucket.original_texts.append(parsed.original_text)

    def segments(self, formatter) -> List[str]:
        """Formatted group totals in first-populated order, then unparsed texts."""
        formatted = [
            formatter.format(total.quantity, total.unit)
            for total in self.per_group_totals.values()
        ]
        formatted.extend(self.unparsed_texts)
        return formatted

    def display_line(self, formatter) -> str:
        """Comma-joined display measurement."""
        return ", ".join(self.segments(formatter))


@dataclass
class GroceryListItem:
    """One rendered shopping-list line."""
    display_name: str
    formatted_measurement: str
    recommended_package: str
    category: str = Category.OTHER.value
    recipe_id: str = ""
    recipe_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class GroceryList:
    """Consolidated grocery list grouped by category."""
    name: str
    categories: Dict[str, List[GroceryListItem]] = field(default_factory=dict)

    def ordered_categories(self) -> List[Tuple[str, List[GroceryListItem]]]:
        """Categories sorted alphabetically, ignoring case."""
        return sorted(self.categories.items(), key=lambda entry: entry[0].lower())

    def items(self) -> Iterator[GroceryListItem]:
        """Iterate items in display order."""
        for _, items in self.ordered_categories():
            yield from items

    def __len__(self) -> int:
        return sum(len(items) for items in self.categories.values())

    def without(self, names: Iterable[str]) -> "GroceryList":
        """
        Copy of the list without the given ingredients.

        Args:
            names: Ingredient names to drop, compared case-insensitively

        Returns:
            New grocery list; categories left empty are dropped
        """
        removed = {name.strip().lower() for name in names}
        categories = {}
        for category, items in self.categories.items():
            kept = [item for item in items if item.display_name.strip().lower() not in removed]
            if kept:
                categories[category] = kept
        return replace(self, categories=categories)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable document."""
        return {
            "name": self.name,
            "items": [item.to_dict() for item in self.items()],
        }

    def to_text(self, style: str = "share") -> str:
        """
        Render the list as plain text.

        Args:
            style: 'share' for dashed lines, 'notes' for checkbox lines

        Returns:
            Text with a title line followed by one block per category
        """
        if style not in TEXT_BULLETS:
            raise ValueError(f"Unknown text style: {style}")
        bullet = TEXT_BULLETS[style]

        lines = [self.name, ""]
        for category, items in self.ordered_categories():
            lines.append(f"{category}:")
            for item in items:
                lines.append(f"{bullet} {item.formatted_measurement} {item.display_name}")
            lines.append("")
        return "\n".join(lines) + "\n"


TEXT_BULLETS = {
    "share": "-",
    "notes": "□",
}

"""
Catalog data models.

These models describe the motorcycles a dealership can sell and the
categories they are grouped under. Entries are frozen dataclasses so the
same instance can be handed to any handler without copying concerns.

Pricing:
    formatted_price truncates the base price to the thousand and adds 999,
    the usual dealership sticker price. It may land above or below the
    base price depending on its last three digits.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional


class Category(Enum):
    """
    Motorcycle categories served by the store.

    The value is the display label used in inventory listings.
    """

    CRUISER = "Cruisers"
    """Low, long-wheelbase cruisers."""

    SPORT = "Sport Bikes"
    """Track-oriented sport bikes."""

    TOURING = "Touring Bikes"
    """Long-distance touring bikes."""

    @property
    def label(self) -> str:
        """Human-readable name for listings (e.g., 'Sport Bikes')."""
        return self.value

    @classmethod
    def from_label(cls, label: str) -> Optional["Category"]:
        """
        Find a category by label or member name.

        Args:
            label: Display label ('Cruisers') or member name ('cruiser'),
                case-insensitive

        Returns:
            Category if found, None otherwise
        """
        wanted = label.strip().lower()
        for category in cls:
            if category.value.lower() == wanted or category.name.lower() == wanted:
                return category
        return None


def round_half_up(value: float, places: int = 2) -> float:
    """Round to `places` decimals, halves away from zero."""
    factor = 10 ** places
    scaled = abs(value) * factor
    rounded = math.floor(scaled + 0.5) / factor
    return math.copysign(rounded, value)


def dealer_price(price: float) -> int:
    """Truncate a price to the thousand and add 999 (18000 -> 17999)."""
    thousands = int(price / 1000)
    return thousands * 1000 + 999


@dataclass(frozen=True)
class CatalogEntry:
    """
    A single motorcycle in a category catalog.

    Immutable; equality compares all four stored fields. Derived values
    are recomputed on every access.
    """

    name: str
    """Model name (e.g., 'Harley Low Rider')."""

    engine_size: int
    """Engine displacement in cc."""

    base_price: float
    """List price before dealership rounding."""

    prep_rate: float
    """Preparation minutes per cc."""

    @property
    def prep_time(self) -> float:
        """Minutes needed to prepare the bike, rounded to 2 decimals."""
        return round_half_up(self.engine_size * self.prep_rate, 2)

    @property
    def formatted_price(self) -> int:
        """Sticker price: thousands of base_price * 1000 + 999."""
        return dealer_price(self.base_price)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for catalog files."""
        return {
            "name": self.name,
            "engine_size": self.engine_size,
            "base_price": self.base_price,
            "prep_rate": self.prep_rate,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogEntry":
        """
        Create from a catalog file record.

        Args:
            data: Mapping with name, engine_size, base_price and prep_rate

        Raises:
            KeyError: If a field is missing
            ValueError: If a numeric field cannot be converted, or engine_size
                has a fractional part
        """
        engine_size = data["engine_size"]
        if isinstance(engine_size, float) and not engine_size.is_integer():
            raise ValueError(f"engine_size must be a whole number of cc, got {engine_size}")

        return cls(
            name=str(data["name"]),
            engine_size=int(engine_size),
            base_price=float(data["base_price"]),
            prep_rate=float(data["prep_rate"]),
        )

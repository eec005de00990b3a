"""Display-line builders for store output."""

from __future__ import annotations

from typing import List

from models.catalog import Category, CatalogEntry, round_half_up

SEPARATOR = "-" * 20


def format_price(value: float) -> str:
    """Dollar amount truncated to an integer (17099.05 -> '$17099')."""
    return f"${int(value)}"


def format_prep_time(minutes: float) -> str:
    """Prep time rounded to 2 decimals with a 'mins' suffix."""
    return f"{round_half_up(minutes, 2)} mins"


def category_heading(category: Category) -> str:
    return f"Available {category.label}:"


def inventory_line(entry: CatalogEntry) -> str:
    return (
        f"{entry.name} - Engine Size: {entry.engine_size}cc, "
        f"Price: {format_price(entry.formatted_price)}"
    )


def receipt_lines(entry: CatalogEntry, prep_time: float, cost: float) -> List[str]:
    """Purchase confirmation, followed by a blank spacer line."""
    return [
        f"Purchased {entry.name}.",
        f"Prep Time: {format_prep_time(prep_time)}",
        f"Cost: {format_price(cost)}",
        "",
    ]


def out_of_inventory_line(entry: CatalogEntry) -> str:
    return f"{entry.name} is out of our inventory."

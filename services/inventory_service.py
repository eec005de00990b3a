"""
Category inventory handler.

One CategoryInventory serves one motorcycle category. It owns an immutable
tuple of catalog entries and prices purchases against it.

Stock Model:
    - The entry tuple is fixed at construction
    - Purchases never decrement stock; the same bike can be sold any
      number of times. This is a known limitation of the simulation.

Usage:
    cruisers = CategoryInventory(Category.CRUISER, entries)

    outcome = cruisers.purchase(entry, discount=0.05)
    if outcome.ok:
        print(outcome.cost)

    # Or, when an exception is preferred
    outcome = cruisers.purchase_or_raise(entry)
"""

from __future__ import annotations

from typing import Iterable, Protocol, Tuple

from core.exceptions import NotAvailableError
from models.catalog import Category, CatalogEntry
from models.purchase import PurchaseOutcome
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


class InventoryHandler(Protocol):
    """Capabilities the store relies on for any category handler."""

    @property
    def category(self) -> Category: ...

    def list_entries(self) -> Tuple[CatalogEntry, ...]: ...

    def purchase(self, entry: CatalogEntry, discount: float = 0.0) -> PurchaseOutcome: ...


class CategoryInventory:
    """
    Inventory handler for a single category.

    Attributes:
        category: The category this handler serves
    """

    def __init__(self, category: Category, entries: Iterable[CatalogEntry]):
        """
        Initialize the handler.

        Args:
            category: Category tag for this handler
            entries: Catalog entries in display order (copied)

        Raises:
            ValueError: If entries is empty
        """
        self._category = category
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)

        if not self._entries:
            raise ValueError(f"{category.label} inventory needs at least one entry")

        logger.debug(f"CategoryInventory for {category.label} created with {len(self._entries)} entries")

    def __repr__(self) -> str:
        return f"CategoryInventory({self._category.name}, {len(self._entries)} entries)"

    @property
    def category(self) -> Category:
        """Category this handler serves."""
        return self._category

    def list_entries(self) -> Tuple[CatalogEntry, ...]:
        """Current inventory, in construction order."""
        return self._entries

    def contains(self, entry: CatalogEntry) -> bool:
        """Whether an equal entry is part of this inventory."""
        return entry in self._entries

    def purchase(self, entry: CatalogEntry, discount: float = 0.0) -> PurchaseOutcome:
        """
        Price a purchase of one entry.

        The discount is applied as given; values outside [0, 1] are not
        clamped and yield negative or inflated costs.

        Args:
            entry: Entry to buy (matched structurally)
            discount: Fraction taken off the sticker price

        Returns:
            PurchaseOutcome with SOLD status, prep time and cost, or
            NOT_AVAILABLE status if the entry is not in this inventory
        """
        if not self.contains(entry):
            logger.debug(f"{entry.name} not in {self._category.label} inventory")
            return PurchaseOutcome.not_available(entry)

        cost = entry.formatted_price * (1 - discount)
        logger.debug(
            f"Priced {entry.name}: sticker={entry.formatted_price}, "
            f"discount={discount}, cost={cost}"
        )
        return PurchaseOutcome.sold(entry, entry.prep_time, cost)

    def purchase_or_raise(self, entry: CatalogEntry, discount: float = 0.0) -> PurchaseOutcome:
        """
        Price a purchase, raising if the entry is not in this inventory.

        Returns:
            PurchaseOutcome with SOLD status

        Raises:
            NotAvailableError: If the entry is not in this inventory
        """
        outcome = self.purchase(entry, discount)
        if not outcome.ok:
            raise NotAvailableError(entry.name, self._category.label)
        return outcome

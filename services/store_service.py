"""
Store coordinator.

The Store aggregates the category handlers and drives the customer-facing
operations: listing inventory, buying a single bike and buying a batch.
All customer-facing text goes through the injected `emit` sink, one line
per call; diagnostics go to the logger.

Stock-out Simulation:
    buy_multiple() flips a coin for every requested bike. When the coin
    comes up True and the bike is in the handler's catalog, the bike is
    reported out of inventory even though a purchase would succeed.
    The coin is a zero-argument callable so tests can force it.

Usage:
    store = Store([cruisers, sport_bikes, touring_bikes])
    store.show_inventory()
    store.buy(entry, cruisers, discount=0.05)

    # Deterministic batch (never simulate a stock-out)
    store = Store(handlers, emit=lines.append, coin_flip=lambda: False)
    result = store.buy_multiple([a, b], touring_bikes)
"""

from __future__ import annotations

import random
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from config import Config
from models.catalog import Category, CatalogEntry
from models.purchase import BatchPurchaseResult
from modules.formatting import (
    SEPARATOR,
    category_heading,
    inventory_line,
    out_of_inventory_line,
    receipt_lines,
)
from services.inventory_service import InventoryHandler
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


def make_coin_flip(
    probability: float = 0.5,
    seed: Optional[int] = None,
) -> Callable[[], bool]:
    """
    Build a coin flip returning True with the given probability.

    Args:
        probability: Chance of True (0.5 is a fair coin)
        seed: Seed for a private random.Random (None = unseeded)

    Returns:
        Zero-argument callable returning bool
    """
    rng = random.Random(seed)

    def flip() -> bool:
        return rng.random() < probability

    return flip


class Store:
    """
    Top-level coordinator over the category handlers.

    Handlers are owned by the caller; the store only keeps references
    and never mutates them.
    """

    def __init__(
        self,
        handlers: Iterable[InventoryHandler],
        emit: Callable[[str], None] = print,
        coin_flip: Optional[Callable[[], bool]] = None,
    ):
        """
        Initialize the store.

        Args:
            handlers: Category handlers, in listing order
            emit: Line sink for customer-facing output (default: print)
            coin_flip: Stock-out coin; defaults to one built from
                Config.STOCKOUT_PROBABILITY and Config.RANDOM_SEED
        """
        self._handlers: Tuple[InventoryHandler, ...] = tuple(handlers)
        self._emit = emit
        if coin_flip is None:
            coin_flip = make_coin_flip(Config.STOCKOUT_PROBABILITY, Config.RANDOM_SEED)
        self._coin_flip = coin_flip

        logger.info(
            "Store initialized with categories: "
            + ", ".join(h.category.label for h in self._handlers)
        )

    @property
    def handlers(self) -> Tuple[InventoryHandler, ...]:
        """Handlers in listing order."""
        return self._handlers

    def get_handler(self, category: Category) -> Optional[InventoryHandler]:
        """
        Find the handler serving a category.

        Args:
            category: Category to look up

        Returns:
            First handler with that category, None otherwise
        """
        for handler in self._handlers:
            if handler.category is category:
                return handler
        return None

    def show_inventory(self) -> None:
        """Emit every category's bikes with engine size and sticker price."""
        for handler in self._handlers:
            self._emit(category_heading(handler.category))
            for entry in handler.list_entries():
                self._emit(inventory_line(entry))
            self._emit(SEPARATOR)

    def buy(self, entry: CatalogEntry, handler: InventoryHandler, discount: float = 0.0) -> bool:
        """
        Buy one bike from a handler and emit the receipt.

        Args:
            entry: Bike to buy
            handler: Handler expected to stock the bike
            discount: Fraction taken off the sticker price (not validated)

        Returns:
            True if sold, False if the handler does not stock the bike
            (nothing is emitted in that case)
        """
        if entry not in handler.list_entries():
            logger.debug(f"Rejected {entry.name}: not listed by {handler.category.label}")
            return False

        outcome = handler.purchase(entry, discount)
        if not outcome.ok:
            logger.debug(f"Purchase of {entry.name} reported {outcome.status.value}")
            return False

        for line in receipt_lines(entry, outcome.prep_time, outcome.cost):
            self._emit(line)

        logger.debug(f"Sold {entry.name}: {outcome.to_dict()}")
        return True

    def buy_multiple(
        self,
        entries: Sequence[CatalogEntry],
        handler: InventoryHandler,
        discount: float = 0.0,
    ) -> BatchPurchaseResult:
        """
        Buy several bikes from one handler.

        Each bike, in order, is either reported out of inventory by the
        stock-out coin (only if the handler lists it) or bought via buy().
        Unavailable bikes are listed after all receipts, preceded by a
        separator when some bikes sold, and a separator always closes
        the output.

        Args:
            entries: Bikes to buy
            handler: Handler all bikes are bought from
            discount: Fraction taken off each sticker price

        Returns:
            BatchPurchaseResult partitioning entries into sold and unavailable
        """
        sold: List[CatalogEntry] = []
        out_of_inventory: List[CatalogEntry] = []

        for entry in entries:
            if self._coin_flip() and entry in handler.list_entries():
                logger.debug(f"Simulated stock-out for {entry.name}")
                out_of_inventory.append(entry)
            elif self.buy(entry, handler, discount):
                sold.append(entry)
            else:
                out_of_inventory.append(entry)

        if sold and out_of_inventory:
            self._emit(SEPARATOR)

        for entry in out_of_inventory:
            self._emit(out_of_inventory_line(entry))
        self._emit(SEPARATOR)

        logger.info(
            f"Batch purchase from {handler.category.label}: "
            f"{len(sold)} sold, {len(out_of_inventory)} unavailable"
        )
        return BatchPurchaseResult(sold=tuple(sold), unavailable=tuple(out_of_inventory))

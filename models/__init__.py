"""
Data models for the motorcycle store.

This module contains immutable dataclasses for:
- CatalogEntry: A motorcycle with derived prep time and sticker price
- Category: The fixed set of catalog categories
- PurchaseOutcome: Result of a single purchase attempt
- BatchPurchaseResult: Sold / unavailable partition of a batch purchase
"""

from .catalog import Category, CatalogEntry, dealer_price, round_half_up
from .purchase import PurchaseStatus, PurchaseOutcome, BatchPurchaseResult

__all__ = [
    # Catalog models
    "Category",
    "CatalogEntry",
    "dealer_price",
    "round_half_up",
    # Purchase models
    "PurchaseStatus",
    "PurchaseOutcome",
    "BatchPurchaseResult",
]

"""
Services layer for the motorcycle store.

This module contains the business logic services:
- CategoryInventory: Per-category handler that prices purchases
- Store: Coordinator for listing, single and batch purchases

Each Store holds references to handlers created at startup.
Handlers never change after construction.
"""

from .inventory_service import CategoryInventory, InventoryHandler
from .store_service import Store, make_coin_flip

__all__ = [
    "CategoryInventory",
    "InventoryHandler",
    "Store",
    "make_coin_flip",
]

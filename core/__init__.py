"""
Core module for the motorcycle store.

Contains fundamental infrastructure components:
- exceptions: Custom exception hierarchy
"""

from .exceptions import (
    StoreError,
    CatalogConfigError,
    NotAvailableError,
)

__all__ = [
    "StoreError",
    "CatalogConfigError",
    "NotAvailableError",
]

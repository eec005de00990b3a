"""
Custom exceptions for the motorcycle store.

Exception Hierarchy:
    StoreError (base)
    ├── CatalogConfigError - Catalog data missing or malformed (startup failure)
    └── NotAvailableError  - Entry not in the handler's inventory (runtime, graceful)

Usage:
    Startup errors (CatalogConfigError) cause the app to fail fast.
    NotAvailableError is raised only by CategoryInventory.purchase_or_raise();
    the store works with PurchaseOutcome values and never lets it escape.
"""

from typing import Optional, Dict, Any


class StoreError(Exception):
    """
    Base exception for all motorcycle store errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all application-specific errors with a single except clause if needed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# STARTUP ERRORS - Application will not start if these occur
# =============================================================================

class CatalogConfigError(StoreError):
    """
    Catalog data could not be loaded.

    Typical causes:
    - CATALOG_PATH in .env points to a missing file
    - File is not valid JSON
    - Unknown category label or an empty category
    - Non-positive engine size, price or prep rate
    """

    def __init__(self, message: str, path: Optional[str] = None):
        details = {}
        if path:
            details["path"] = path
        details["resolution"] = "Fix the catalog file or unset CATALOG_PATH to use built-in catalogs"
        super().__init__(message, details)
        self.path = path


# =============================================================================
# RUNTIME ERRORS - Operation fails gracefully
# =============================================================================

class NotAvailableError(StoreError):
    """
    The requested motorcycle is not part of the handler's inventory.

    Raised when a purchase names an entry the handler was never built with,
    e.g. a cruiser offered to the touring handler.
    """

    def __init__(self, entry_name: str, category: Optional[str] = None):
        message = f"{entry_name} is not available"
        details = {"entry": entry_name}
        if category:
            message = f"{entry_name} is not available in {category}"
            details["category"] = category
        super().__init__(message, details)
        self.entry_name = entry_name
        self.category = category

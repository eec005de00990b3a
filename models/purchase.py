"""
Purchase result data models.

A handler reports the outcome of a purchase as a PurchaseOutcome value
rather than raising, so the store can branch on status without any
exception handling. Batch purchases are summarised by BatchPurchaseResult.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional, Tuple

from .catalog import CatalogEntry


class PurchaseStatus(Enum):
    """Status of a single purchase attempt."""

    SOLD = "sold"
    """The entry is in the handler's inventory and was priced."""

    NOT_AVAILABLE = "not_available"
    """The entry is not part of the handler's inventory."""


@dataclass(frozen=True)
class PurchaseOutcome:
    """
    Result of CategoryInventory.purchase().

    prep_time and cost are only meaningful when status is SOLD.
    """

    entry: CatalogEntry
    status: PurchaseStatus
    prep_time: float = 0.0
    cost: float = 0.0

    @property
    def ok(self) -> bool:
        """Whether the purchase succeeded."""
        return self.status is PurchaseStatus.SOLD

    @classmethod
    def sold(cls, entry: CatalogEntry, prep_time: float, cost: float) -> "PurchaseOutcome":
        return cls(entry=entry, status=PurchaseStatus.SOLD, prep_time=prep_time, cost=cost)

    @classmethod
    def not_available(cls, entry: CatalogEntry) -> "PurchaseOutcome":
        return cls(entry=entry, status=PurchaseStatus.NOT_AVAILABLE)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        result: Dict[str, Any] = {
            "name": self.entry.name,
            "status": self.status.value,
        }
        if self.ok:
            result["prep_time"] = self.prep_time
            result["cost"] = self.cost
        return result


@dataclass(frozen=True)
class BatchPurchaseResult:
    """
    Partition produced by Store.buy_multiple().

    Every requested entry lands in exactly one of the two tuples,
    in request order.
    """

    sold: Tuple[CatalogEntry, ...] = ()
    unavailable: Tuple[CatalogEntry, ...] = ()

    @property
    def total(self) -> int:
        """Number of entries processed."""
        return len(self.sold) + len(self.unavailable)

    def find(self, name: str) -> Optional[CatalogEntry]:
        """
        Find a processed entry by name.

        Args:
            name: Entry name (exact match)

        Returns:
            The first matching entry from either partition, None otherwise
        """
        for entry in self.sold + self.unavailable:
            if entry.name == name:
                return entry
        return None

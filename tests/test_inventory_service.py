"""
Unit tests for CategoryInventory.
"""

import pytest

from core.exceptions import NotAvailableError, StoreError
from models.catalog import Category, CatalogEntry
from models.purchase import PurchaseStatus
from modules.catalogs import DEFAULT_CATALOGS
from services.inventory_service import CategoryInventory


# Fixtures

@pytest.fixture
def cruisers():
    return CategoryInventory(Category.CRUISER, DEFAULT_CATALOGS[Category.CRUISER])


@pytest.fixture
def touring_bikes():
    return CategoryInventory(Category.TOURING, DEFAULT_CATALOGS[Category.TOURING])


@pytest.fixture
def low_rider():
    return CatalogEntry(name="Harley Low Rider", engine_size=1746, base_price=18000, prep_rate=0.01)


class TestCategoryInventory:
    """Construction and listing."""

    def test_category(self, cruisers):
        assert cruisers.category is Category.CRUISER

    def test_list_entries_keeps_order(self, cruisers):
        names = [entry.name for entry in cruisers.list_entries()]
        assert names == ["Harley Low Rider", "Indian Scout"]

    def test_entries_are_copied(self):
        source = list(DEFAULT_CATALOGS[Category.SPORT])
        handler = CategoryInventory(Category.SPORT, source)
        source.clear()

        assert len(handler.list_entries()) == 2
        assert isinstance(handler.list_entries(), tuple)

    def test_accepts_generator(self):
        handler = CategoryInventory(Category.SPORT, (e for e in DEFAULT_CATALOGS[Category.SPORT]))
        assert len(handler.list_entries()) == 2

    def test_empty_inventory_rejected(self):
        with pytest.raises(ValueError, match="Cruisers"):
            CategoryInventory(Category.CRUISER, [])

    def test_contains_is_structural(self, cruisers, low_rider):
        assert cruisers.contains(low_rider)
        assert not cruisers.contains(DEFAULT_CATALOGS[Category.TOURING][0])

    def test_repr(self, cruisers):
        assert repr(cruisers) == "CategoryInventory(CRUISER, 2 entries)"


class TestPurchase:
    """Pricing and availability checks."""

    def test_purchase_with_discount(self, cruisers, low_rider):
        outcome = cruisers.purchase(low_rider, 0.05)

        assert outcome.ok
        assert outcome.entry == low_rider
        assert outcome.prep_time == 17.46
        assert outcome.cost == pytest.approx(17099.05)
        assert int(outcome.cost) == 17099

    def test_purchase_without_discount(self, cruisers):
        scout = cruisers.list_entries()[1]
        outcome = cruisers.purchase(scout)

        assert outcome.cost == 14999
        assert outcome.prep_time == 11.33

    @pytest.mark.parametrize("discount", [0.0, 0.1, 0.25, 0.5, 1.0])
    def test_cost_follows_formula(self, touring_bikes, discount):
        for entry in touring_bikes.list_entries():
            outcome = touring_bikes.purchase(entry, discount)
            assert outcome.cost == pytest.approx(entry.formatted_price * (1 - discount))
            assert outcome.prep_time == entry.prep_time

    def test_discount_is_not_clamped(self, cruisers, low_rider):
        assert cruisers.purchase(low_rider, 1.5).cost == pytest.approx(-8999.5)
        assert cruisers.purchase(low_rider, -0.5).cost == pytest.approx(26998.5)

    def test_other_category_entry_not_available(self, touring_bikes, low_rider):
        outcome = touring_bikes.purchase(low_rider)

        assert not outcome.ok
        assert outcome.status is PurchaseStatus.NOT_AVAILABLE
        assert outcome.cost == 0.0

    def test_near_match_not_available(self, cruisers, low_rider):
        cheaper = CatalogEntry(name=low_rider.name, engine_size=1746, base_price=17000, prep_rate=0.01)
        assert cruisers.purchase(cheaper).status is PurchaseStatus.NOT_AVAILABLE

    def test_repeat_purchases_do_not_deplete_stock(self, cruisers, low_rider):
        for _ in range(5):
            assert cruisers.purchase(low_rider).ok
        assert len(cruisers.list_entries()) == 2


class TestPurchaseOrRaise:
    """Exception-raising purchase variant."""

    def test_returns_outcome_when_available(self, cruisers, low_rider):
        outcome = cruisers.purchase_or_raise(low_rider, 0.05)
        assert outcome.cost == pytest.approx(17099.05)

    def test_raises_not_available(self, touring_bikes, low_rider):
        with pytest.raises(NotAvailableError) as exc_info:
            touring_bikes.purchase_or_raise(low_rider)

        error = exc_info.value
        assert isinstance(error, StoreError)
        assert error.entry_name == "Harley Low Rider"
        assert error.category == "Touring Bikes"
        assert "Harley Low Rider is not available in Touring Bikes" in str(error)

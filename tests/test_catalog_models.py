"""
Unit tests for the catalog and purchase models.
"""

import dataclasses

import pytest

from models.catalog import Category, CatalogEntry, dealer_price, round_half_up
from models.purchase import BatchPurchaseResult, PurchaseOutcome, PurchaseStatus


# Fixtures

@pytest.fixture
def low_rider():
    return CatalogEntry(name="Harley Low Rider", engine_size=1746, base_price=18000, prep_rate=0.01)


class TestCatalogEntry:
    """Derived fields and value semantics of CatalogEntry."""

    def test_low_rider_pricing(self, low_rider):
        assert low_rider.formatted_price == 17999
        assert low_rider.prep_time == 17.46

    def test_formatted_price_truncates_to_thousand(self):
        entry = CatalogEntry(name="Indian Scout", engine_size=1133, base_price=15000, prep_rate=0.01)
        assert entry.formatted_price == 14999

    @pytest.mark.parametrize("base_price,expected", [
        (16500, 16999),   # rounds up
        (25500, 25999),
        (999, 999),       # below one thousand
        (1000.75, 1999),  # fractional part ignored
    ])
    def test_formatted_price_can_exceed_or_fall_below_base(self, base_price, expected):
        entry = CatalogEntry(name="Test", engine_size=500, base_price=base_price, prep_rate=0.01)
        assert entry.formatted_price == expected

    @pytest.mark.parametrize("price", [18000, 15000, 16500, 23000, 999, 42424.42])
    def test_dealer_price_is_idempotent(self, price):
        once = dealer_price(price)
        assert dealer_price(once) == once

    def test_prep_time_rounds_to_two_places(self):
        gold_wing = CatalogEntry(name="Honda Gold Wing", engine_size=1833, base_price=23000, prep_rate=0.012)
        bmw = CatalogEntry(name="BMW K1600", engine_size=1649, base_price=25500, prep_rate=0.012)
        r1 = CatalogEntry(name="Yamaha R1", engine_size=998, base_price=16500, prep_rate=0.008)

        assert gold_wing.prep_time == 22.0
        assert bmw.prep_time == 19.79
        assert r1.prep_time == 7.98

    def test_equality_is_structural(self, low_rider):
        twin = CatalogEntry(name="Harley Low Rider", engine_size=1746, base_price=18000.0, prep_rate=0.01)
        assert twin == low_rider
        assert twin is not low_rider
        assert dataclasses.replace(low_rider, prep_rate=0.02) != low_rider
        assert dataclasses.replace(low_rider, name="Harley Street Bob") != low_rider

    def test_entry_is_frozen(self, low_rider):
        with pytest.raises(dataclasses.FrozenInstanceError):
            low_rider.base_price = 1

    def test_dict_round_trip(self, low_rider):
        assert CatalogEntry.from_dict(low_rider.to_dict()) == low_rider

    def test_from_dict_rejects_fractional_engine_size(self):
        with pytest.raises(ValueError, match="whole number"):
            CatalogEntry.from_dict({"name": "Odd", "engine_size": 1746.7, "base_price": 18000, "prep_rate": 0.01})

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            CatalogEntry.from_dict({"name": "No Engine", "base_price": 1000, "prep_rate": 0.1})


class TestRoundHalfUp:
    """Half-away-from-zero rounding used for prep times."""

    def test_halves_round_away_from_zero(self):
        assert round_half_up(0.125) == 0.13
        assert round_half_up(-0.125) == -0.13

    def test_other_values(self):
        assert round_half_up(7.984) == 7.98
        assert round_half_up(3.0) == 3.0
        assert round_half_up(1.23456, 3) == 1.235


class TestCategory:
    """Category labels and lookup."""

    def test_labels(self):
        assert Category.CRUISER.label == "Cruisers"
        assert Category.SPORT.label == "Sport Bikes"
        assert Category.TOURING.label == "Touring Bikes"

    @pytest.mark.parametrize("text,expected", [
        ("Cruisers", Category.CRUISER),
        ("sport bikes", Category.SPORT),
        ("touring", Category.TOURING),
        ("  SPORT ", Category.SPORT),
    ])
    def test_from_label(self, text, expected):
        assert Category.from_label(text) is expected

    def test_from_label_unknown(self):
        assert Category.from_label("Scooters") is None


class TestPurchaseModels:
    """PurchaseOutcome and BatchPurchaseResult."""

    def test_sold_outcome(self, low_rider):
        outcome = PurchaseOutcome.sold(low_rider, 17.46, 17099.05)
        assert outcome.ok
        assert outcome.status is PurchaseStatus.SOLD
        assert outcome.to_dict() == {
            "name": "Harley Low Rider",
            "status": "sold",
            "prep_time": 17.46,
            "cost": 17099.05,
        }

    def test_not_available_outcome(self, low_rider):
        outcome = PurchaseOutcome.not_available(low_rider)
        assert not outcome.ok
        assert outcome.status is PurchaseStatus.NOT_AVAILABLE
        assert outcome.to_dict() == {"name": "Harley Low Rider", "status": "not_available"}

    def test_batch_result(self, low_rider):
        scout = CatalogEntry(name="Indian Scout", engine_size=1133, base_price=15000, prep_rate=0.01)
        result = BatchPurchaseResult(sold=(low_rider,), unavailable=(scout,))

        assert result.total == 2
        assert result.find("Indian Scout") == scout
        assert result.find("BMW K1600") is None

    def test_empty_batch_result(self):
        assert BatchPurchaseResult().total == 0

"""
Unit Tests for the Zone Pricing Table

Tests fare table loading, lookups and configuration errors.

Run with: pytest fares/tests/test_pricing.py -v
"""

import pytest
import polars as pl

from fares.data import load_zone_fares, ZONE_FARE_COLUMNS
from fares.errors import ConfigurationError
from fares.pricing import ZoneFare, ZonePricingTable


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def three_zone_fares():
    """Fare table with a third zone, to check nothing assumes zones 1 and 2."""
    return pl.DataFrame({
        "from_zone": [1, 1, 3, 3],
        "to_zone": [1, 3, 1, 3],
        "peak_fare": [30.0, 45.0, 45.0, 15.0],
        "off_peak_fare": [25.0, 40.0, 40.0, 10.0],
        "daily_cap": [100.0, 150.0, 150.0, 50.0],
        "weekly_cap": [500.0, 700.0, 700.0, 250.0],
    })


@pytest.fixture
def pricing():
    return ZonePricingTable.from_frame(load_zone_fares())


# =============================================================================
# REFERENCE TABLE
# =============================================================================

class TestReferenceTable:
    """Tests for the bundled zone_fares.csv."""

    def test_columns(self):
        df = load_zone_fares()
        assert df.columns == ZONE_FARE_COLUMNS

    def test_all_pairs_configured(self, pricing):
        assert set(pricing.zone_pairs) == {(1, 1), (1, 2), (2, 1), (2, 2)}
        assert pricing.zones == frozenset({1, 2})

    @pytest.mark.parametrize("pair,peak,off_peak", [
        ((1, 1), 30, 25),
        ((1, 2), 35, 30),
        ((2, 1), 35, 30),
        ((2, 2), 25, 20),
    ])
    def test_fares(self, pricing, pair, peak, off_peak):
        assert pricing.peak_fare(pair) == peak
        assert pricing.off_peak_fare(pair) == off_peak
        assert pricing.fare(pair, peak=True) == peak
        assert pricing.fare(pair, peak=False) == off_peak

    @pytest.mark.parametrize("pair,daily,weekly", [
        ((1, 1), 100, 500),
        ((1, 2), 120, 600),
        ((2, 1), 120, 600),
        ((2, 2), 80, 400),
    ])
    def test_caps(self, pricing, pair, daily, weekly):
        assert pricing.daily_cap(pair) == daily
        assert pricing.weekly_cap(pair) == weekly


# =============================================================================
# LOOKUP ERRORS
# =============================================================================

class TestLookupErrors:
    """Unknown or invalid zones must fail instead of defaulting."""

    def test_unlisted_pair(self, pricing):
        with pytest.raises(ConfigurationError, match="1 -> 3"):
            pricing.daily_cap((1, 3))

    @pytest.mark.parametrize("pair", [(0, 1), (1, -2), (True, 1), ("1", 1)])
    def test_invalid_zone(self, pricing, pair):
        with pytest.raises(ConfigurationError):
            pricing.fare(pair, peak=False)

    def test_contains(self, pricing):
        assert (1, 2) in pricing
        assert (3, 3) not in pricing


# =============================================================================
# OTHER ZONE SETS
# =============================================================================

class TestOtherZoneSets:
    """Zone sets come from configuration."""

    def test_three_zone_table(self, three_zone_fares):
        pricing = ZonePricingTable.from_frame(three_zone_fares)
        assert pricing.zones == frozenset({1, 3})
        assert pricing.weekly_cap((1, 3)) == 700
        with pytest.raises(ConfigurationError):
            pricing.fare((2, 2), peak=True)

    def test_from_entries(self):
        pricing = ZonePricingTable({(4, 5): ZoneFare(5, 4, 20, 90)})
        assert pricing.off_peak_fare((4, 5)) == 4
        assert len(pricing) == 1


# =============================================================================
# TABLE VALIDATION
# =============================================================================

class TestTableValidation:
    """Tests for rejecting malformed fare tables."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_zone_fares(tmp_path / "missing.csv")

    def test_missing_column(self, tmp_path):
        path = tmp_path / "fares.csv"
        path.write_text("from_zone,to_zone,peak_fare\n1,1,30\n")
        with pytest.raises(ConfigurationError, match="off_peak_fare"):
            load_zone_fares(path)

    def test_custom_file(self, tmp_path):
        path = tmp_path / "fares.csv"
        path.write_text(
            "from_zone,to_zone,peak_fare,off_peak_fare,daily_cap,weekly_cap\n"
            "1,1,3.5,2.75,10,40\n"
        )
        pricing = ZonePricingTable.from_frame(load_zone_fares(path))
        assert pricing.peak_fare((1, 1)) == pytest.approx(3.5)
        assert pricing.off_peak_fare((1, 1)) == pytest.approx(2.75)

    def test_null_values(self, three_zone_fares):
        df = three_zone_fares.with_columns(
            pl.when(pl.col("from_zone") == 3)
            .then(None)
            .otherwise(pl.col("daily_cap"))
            .alias("daily_cap")
        )
        with pytest.raises(ConfigurationError, match="daily_cap"):
            ZonePricingTable.from_frame(df)

    def test_duplicate_pair(self, three_zone_fares):
        df = pl.concat([three_zone_fares, three_zone_fares.head(1)])
        with pytest.raises(ConfigurationError, match="Duplicate"):
            ZonePricingTable.from_frame(df)

    def test_non_positive_zone(self):
        df = pl.DataFrame({
            "from_zone": [0],
            "to_zone": [1],
            "peak_fare": [30.0],
            "off_peak_fare": [25.0],
            "daily_cap": [100.0],
            "weekly_cap": [500.0],
        })
        with pytest.raises(ConfigurationError, match="positive"):
            ZonePricingTable.from_frame(df)

    def test_negative_fare(self):
        with pytest.raises(ConfigurationError, match="Negative"):
            ZonePricingTable({(1, 1): ZoneFare(30, -1, 100, 500)})

    def test_fractional_zone_in_file(self, tmp_path):
        path = tmp_path / "fares.csv"
        path.write_text(
            "from_zone,to_zone,peak_fare,off_peak_fare,daily_cap,weekly_cap\n"
            "1,1,30,25,100,500\n"
            "2.5,2.5,25,20,80,400\n"
        )
        with pytest.raises(ConfigurationError, match="non-integer"):
            load_zone_fares(path)

    def test_fractional_zone_in_frame(self, three_zone_fares):
        df = three_zone_fares.with_columns(pl.col("to_zone").cast(pl.Float64) + 0.5)
        with pytest.raises(ConfigurationError, match="positive integer"):
            ZonePricingTable.from_frame(df)

    def test_whole_float_zones_accepted(self, three_zone_fares):
        df = three_zone_fares.with_columns(pl.col("from_zone").cast(pl.Float64))
        pricing = ZonePricingTable.from_frame(df)
        assert pricing.zone_pairs == ((1, 1), (1, 3), (3, 1), (3, 3))

    def test_nan_fare_in_file(self, tmp_path):
        path = tmp_path / "fares.csv"
        path.write_text(
            "from_zone,to_zone,peak_fare,off_peak_fare,daily_cap,weekly_cap\n"
            "1,1,NaN,25,100,500\n"
        )
        with pytest.raises(ConfigurationError, match="Non-finite"):
            ZonePricingTable.from_frame(load_zone_fares(path))

    @pytest.mark.parametrize("amount", [float("nan"), float("inf")])
    def test_non_finite_amount(self, amount):
        with pytest.raises(ConfigurationError, match="Non-finite"):
            ZonePricingTable({(1, 1): ZoneFare(30, 25, amount, 500)})

    def test_frame_missing_column(self):
        df = pl.DataFrame({"from_zone": [1], "to_zone": [1]})
        with pytest.raises(ConfigurationError, match="peak_fare"):
            ZonePricingTable.from_frame(df)

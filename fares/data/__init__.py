"""
Fare Data

Reference data and loaders for fares, caps, peak hours and journeys.

Structure:
    - reference/: Static reference data (zone fares, peak hours, cap zones)
    - loaders/: Journey loaders (JSON, CSV, in-memory records)
"""

import polars as pl
from pathlib import Path

from ..errors import ConfigurationError
from .reference import (
    PEAK_HOURS,
    WEEKEND_DAYS,
    DEFAULT_CAP_ZONE_PAIR,
    PREFERRED_ZONE,
)

# Re-export loaders for convenience
from .loaders import (
    load_journeys,
    journeys_from_records,
    parse_timestamp,
)


REFERENCE_DIR = Path(__file__).parent / "reference"

ZONE_FARE_COLUMNS = [
    "from_zone",
    "to_zone",
    "peak_fare",
    "off_peak_fare",
    "daily_cap",
    "weekly_cap",
]


def load_zone_fares(path: Path | str | None = None) -> pl.DataFrame:
    """
    Load zone pair fares and caps from CSV.

    One row per (from_zone, to_zone) pair. Zones are integers; amounts are
    read as floats so fractional fares are allowed.

    Args:
        path: CSV to read (defaults to reference/zone_fares.csv)

    Returns:
        DataFrame with columns:
            - from_zone, to_zone: Zone pair
            - peak_fare, off_peak_fare: Single trip fares
            - daily_cap, weekly_cap: Caps applied when this pair governs

    Raises:
        ConfigurationError: If the file is missing, lacks a required column or
            has a non-integer zone
    """
    path = Path(path) if path is not None else REFERENCE_DIR / "zone_fares.csv"
    if not path.exists():
        raise ConfigurationError(f"Zone fare table not found: {path}")

    df = pl.read_csv(path)

    missing = [c for c in ZONE_FARE_COLUMNS if c not in df.columns]
    if missing:
        raise ConfigurationError(
            f"Zone fare table {path.name} is missing columns: {', '.join(missing)}"
        )

    for col in ("from_zone", "to_zone"):
        zones = df[col].drop_nulls()
        whole = zones.dtype.is_integer() or (
            zones.dtype.is_float() and bool((zones % 1 == 0).all())
        )
        if not whole:
            raise ConfigurationError(
                f"Zone fare table {path.name} has non-integer zones in {col}"
            )

    return df.select(ZONE_FARE_COLUMNS).with_columns([
        pl.col("from_zone").cast(pl.Int64),
        pl.col("to_zone").cast(pl.Int64),
        pl.col("peak_fare").cast(pl.Float64),
        pl.col("off_peak_fare").cast(pl.Float64),
        pl.col("daily_cap").cast(pl.Float64),
        pl.col("weekly_cap").cast(pl.Float64),
    ])


__all__ = [
    # Reference data loaders
    "load_zone_fares",
    "REFERENCE_DIR",
    "ZONE_FARE_COLUMNS",
    # Journey loaders
    "load_journeys",
    "journeys_from_records",
    "parse_timestamp",
    # Peak hours and cap zone config
    "PEAK_HOURS",
    "WEEKEND_DAYS",
    "DEFAULT_CAP_ZONE_PAIR",
    "PREFERRED_ZONE",
]

"""
Zone Pricing Table

Peak and off-peak fares plus daily and weekly caps, keyed by (from, to) zone
pair. Any finite set of positive integer zones is supported; the zones come
from configuration.
"""

import math
from types import MappingProxyType
from typing import Mapping, NamedTuple

import polars as pl

from .data import ZONE_FARE_COLUMNS
from .errors import ConfigurationError
from .journeys import ZonePair


class ZoneFare(NamedTuple):
    """Fares and caps for one zone pair."""
    peak: float
    off_peak: float
    daily_cap: float
    weekly_cap: float


def _check_zone(zone) -> None:
    # bool is an int subclass but never a zone
    if isinstance(zone, bool) or not isinstance(zone, int) or zone <= 0:
        raise ConfigurationError(f"Zone must be a positive integer, got {zone!r}")


def _as_zone(value):
    # 2.0 -> 2; 2.5 is left as is and rejected by _check_zone
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class ZonePricingTable:
    """
    Read-only lookup of fares and caps by zone pair.

    Lookups for a pair that is not configured raise ConfigurationError
    instead of falling back to a default.
    """

    def __init__(self, entries: Mapping[ZonePair, ZoneFare]):
        checked = {}
        for pair, fare in entries.items():
            from_zone, to_zone = pair
            _check_zone(from_zone)
            _check_zone(to_zone)
            if not all(math.isfinite(amount) for amount in fare):
                raise ConfigurationError(f"Non-finite fare or cap for zones {pair}: {fare}")
            if min(fare) < 0:
                raise ConfigurationError(f"Negative fare or cap for zones {pair}: {fare}")
            checked[(from_zone, to_zone)] = ZoneFare(*fare)
        self._entries = MappingProxyType(checked)

    @classmethod
    def from_frame(cls, df: pl.DataFrame) -> "ZonePricingTable":
        """
        Build the table from a zone fare DataFrame (see fares.data.load_zone_fares).

        Raises:
            ConfigurationError: On missing columns, null values, non-integer
                zones or duplicate zone pairs
        """
        missing = [c for c in ZONE_FARE_COLUMNS if c not in df.columns]
        if missing:
            raise ConfigurationError(
                f"Zone fare table is missing columns: {', '.join(missing)}"
            )

        null_counts = df.null_count().row(0, named=True)
        with_nulls = [col for col, count in null_counts.items() if count]
        if with_nulls:
            raise ConfigurationError(
                f"Zone fare table has empty values in: {', '.join(with_nulls)}"
            )

        entries = {}
        for row in df.iter_rows(named=True):
            pair = (_as_zone(row["from_zone"]), _as_zone(row["to_zone"]))
            if pair in entries:
                raise ConfigurationError(f"Duplicate zone pair in fare table: {pair}")
            entries[pair] = ZoneFare(
                peak=row["peak_fare"],
                off_peak=row["off_peak_fare"],
                daily_cap=row["daily_cap"],
                weekly_cap=row["weekly_cap"],
            )
        return cls(entries)

    @property
    def zones(self) -> frozenset[int]:
        """All zones appearing in any configured pair."""
        return frozenset(zone for pair in self._entries for zone in pair)

    @property
    def zone_pairs(self) -> tuple[ZonePair, ...]:
        return tuple(self._entries)

    def entry(self, zone_pair: ZonePair) -> ZoneFare:
        from_zone, to_zone = zone_pair
        _check_zone(from_zone)
        _check_zone(to_zone)
        try:
            return self._entries[(from_zone, to_zone)]
        except KeyError:
            raise ConfigurationError(
                f"No fare data configured for zones {from_zone} -> {to_zone}"
            ) from None

    def peak_fare(self, zone_pair: ZonePair) -> float:
        return self.entry(zone_pair).peak

    def off_peak_fare(self, zone_pair: ZonePair) -> float:
        return self.entry(zone_pair).off_peak

    def fare(self, zone_pair: ZonePair, peak: bool) -> float:
        entry = self.entry(zone_pair)
        return entry.peak if peak else entry.off_peak

    def daily_cap(self, zone_pair: ZonePair) -> float:
        return self.entry(zone_pair).daily_cap

    def weekly_cap(self, zone_pair: ZonePair) -> float:
        return self.entry(zone_pair).weekly_cap

    def __contains__(self, zone_pair) -> bool:
        return tuple(zone_pair) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ZonePricingTable(zone_pairs={list(self._entries)})"

"""
Transit Fare Calculator

Journeys in, fare breakdown out. The journeys can come from any source (JSON
file, CSV, manual creation) as long as each is a Journey record.

OUTPUT
------
    trip_fares  - One record per journey, daily cap applied, grouped by day
                  in the order days first appear in the input
    day_fares   - One record per day, daily then weekly cap applied, grouped
                  by week in the order weeks first appear in the input

USAGE
-----
    from fares.calculate_fares import calculate_fares
    result = calculate_fares(journeys)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

import polars as pl

from .capping import apply_weekly_cap, calculate_day_fare, calculate_trip_fares
from .grouping import group_by_day, group_by_week
from .journeys import DayFareRecord, Journey, TripFareRecord
from .rules import FareRules, default_rules
from .version import VERSION

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================

@dataclass
class FareBreakdown:
    """Per-trip and per-day fares for one rider."""
    trip_fares: list[TripFareRecord] = field(default_factory=list)
    day_fares: list[DayFareRecord] = field(default_factory=list)

    @property
    def total_fare(self) -> float:
        """Amount charged after daily and weekly caps."""
        return sum(d.fare for d in self.day_fares)

    def as_dict(self) -> dict:
        """Plain dict of labels, fares and zone pairs (JSON friendly)."""
        def _record(r):
            return {"label": r.label, "fare": r.fare, "zone_pair": list(r.zone_pair)}

        return {
            "trip_fares": [_record(t) for t in self.trip_fares],
            "day_fares": [_record(d) for d in self.day_fares],
        }

    def to_frames(self) -> tuple[pl.DataFrame, pl.DataFrame]:
        """
        Trip and day fares as DataFrames, stamped with the calculator version.

        Returns:
            (trips, days) with columns label, fare, from_zone, to_zone,
            timestamp / day, calculator_version
        """
        trips = pl.DataFrame(
            [
                (t.label, float(t.fare), *t.zone_pair, t.timestamp)
                for t in self.trip_fares
            ],
            schema={
                "label": pl.Utf8,
                "fare": pl.Float64,
                "from_zone": pl.Int64,
                "to_zone": pl.Int64,
                "timestamp": pl.Datetime,
            },
            orient="row",
        )
        days = pl.DataFrame(
            [
                (d.label, float(d.fare), *d.zone_pair, d.day)
                for d in self.day_fares
            ],
            schema={
                "label": pl.Utf8,
                "fare": pl.Float64,
                "from_zone": pl.Int64,
                "to_zone": pl.Int64,
                "day": pl.Date,
            },
            orient="row",
        )
        return _stamp_version(trips), _stamp_version(days)


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_fares(
    journeys: Iterable[Journey],
    rules: FareRules | None = None,
) -> FareBreakdown:
    """
    Calculate capped fares for one rider's journeys.

    Args:
        journeys: Journeys in any order
        rules: Fare rules (bundled reference rules if not provided)

    Returns:
        FareBreakdown with trip fares and day fares

    Raises:
        ConfigurationError: If a travelled zone pair has no fare or cap data

    Processing order:
        1. Group journeys by day
        2. Per day: trip fares with the daily cap, and the capped day total
        3. Group day totals by week
        4. Per week: apply the weekly cap to the day totals
    """
    if rules is None:
        rules = default_rules()

    journeys_by_day = group_by_day(journeys)
    logger.debug("Calculating fares for %d day(s)", len(journeys_by_day))

    trip_fares = []
    day_fares = []
    for day, day_journeys in journeys_by_day.items():
        trips, _ = calculate_trip_fares(day_journeys, rules)
        trip_fares.extend(trips)
        day_fares.append(calculate_day_fare(day, day_journeys, rules))

    days_by_week = group_by_week(day_fares)
    logger.debug("Applying weekly caps across %d week(s)", len(days_by_week))

    weekly_capped = []
    for week_days in days_by_week.values():
        apply_weekly_cap(week_days, rules)
        weekly_capped.extend(week_days)

    return FareBreakdown(trip_fares=trip_fares, day_fares=weekly_capped)


__all__ = [
    "FareBreakdown",
    "calculate_fares",
]

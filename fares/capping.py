"""
Daily and Weekly Capping

Trip fares are capped per day, day fares are capped per week. Both scopes
use the same cap rule (CapState.apply) with a fresh accumulator per pass.

CAP ZONE PAIR
-------------
The cap for a day (or week) comes from its dominant zone pair. Starting from
the configured default, every cross-zone pair replaces the choice, and so
does same-zone travel inside the preferred zone. The last qualifying pair
wins, so [1,2] then [2,2] then [1,1] ends with [1,1].

CAP RULE
--------
Once the cap is reached every later fare in the scope is 0. A fare that
would take the total past the cap is clamped to the remaining headroom. A
fare that lands exactly on the cap is charged 0 and marks the cap reached.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from .data.reference import DEFAULT_CAP_ZONE_PAIR, PREFERRED_ZONE
from .journeys import (
    DayFareRecord,
    Journey,
    TripFareRecord,
    ZonePair,
    day_label,
    trip_label,
)
from .rules import FareRules

logger = logging.getLogger(__name__)


# =============================================================================
# CAP STATE
# =============================================================================

@dataclass(slots=True)
class CapState:
    """Running total for one day or one week."""
    cap: float
    total: float = 0
    reached: bool = False

    def apply(self, fare: float) -> float:
        """Return the fare to charge and add it to the running total."""
        running = self.total + fare
        if self.reached:
            fare = 0
        elif running > self.cap:
            fare = self.cap - self.total
            self.reached = True
        elif running == self.cap:
            fare = 0
            self.reached = True
        self.total += fare
        return fare


def dominant_zone_pair(
    zone_pairs: Iterable[ZonePair],
    default: ZonePair = DEFAULT_CAP_ZONE_PAIR,
    preferred_zone: int = PREFERRED_ZONE,
) -> ZonePair:
    """Pick the zone pair whose cap governs a day or week (last qualifying wins)."""
    dominant = tuple(default)
    for from_zone, to_zone in zone_pairs:
        if from_zone != to_zone:
            dominant = (from_zone, to_zone)
        elif from_zone == preferred_zone:
            dominant = (from_zone, to_zone)
    return dominant


def _dominant_pair(zone_pairs: Iterable[ZonePair], rules: FareRules) -> ZonePair:
    return dominant_zone_pair(zone_pairs, rules.default_zone_pair, rules.preferred_zone)


# =============================================================================
# DAILY CAP
# =============================================================================

def calculate_trip_fares(
    journeys: Sequence[Journey],
    rules: FareRules,
) -> tuple[list[TripFareRecord], ZonePair]:
    """
    Price one day's journeys and apply the daily cap.

    Args:
        journeys: All journeys of a single day, in input order
        rules: Fare rules

    Returns:
        (trip fare records in input order, the day's dominant zone pair)

    Raises:
        ConfigurationError: If a journey's zone pair or the cap pair is not configured
    """
    zone_pair = _dominant_pair((j.zone_pair for j in journeys), rules)
    state = CapState(cap=rules.pricing.daily_cap(zone_pair))

    trip_fares = []
    for journey in journeys:
        fare = state.apply(rules.raw_fare(journey))
        trip_fares.append(TripFareRecord(
            label=trip_label(journey.timestamp),
            fare=fare,
            zone_pair=zone_pair,
            timestamp=journey.timestamp,
        ))

    if state.reached:
        logger.debug("Daily cap %s reached for zones %s", state.cap, zone_pair)

    return trip_fares, zone_pair


def calculate_day_fare(
    day: date | None,
    journeys: Sequence[Journey],
    rules: FareRules,
) -> DayFareRecord:
    """
    Daily capped total for one day's journeys.

    Accumulates raw fares separately from calculate_trip_fares, clamping the
    running total at the daily cap, i.e. min(cap, sum of raw fares). This
    differs from the sum of trip fares when a trip lands exactly on the cap
    (that trip is charged 0 there).
    """
    zone_pair = _dominant_pair((j.zone_pair for j in journeys), rules)
    max_daily_cap = rules.pricing.daily_cap(zone_pair)

    total = 0
    for journey in journeys:
        total = min(max_daily_cap, total + rules.raw_fare(journey))

    return DayFareRecord(
        label=day_label(day),
        fare=total,
        zone_pair=zone_pair,
        day=day,
    )


# =============================================================================
# WEEKLY CAP
# =============================================================================

def apply_weekly_cap(day_fares: Sequence[DayFareRecord], rules: FareRules) -> ZonePair:
    """
    Apply the weekly cap across one week's day fares, in place.

    Args:
        day_fares: Daily capped fares of a single week, in input order
        rules: Fare rules

    Returns:
        The week's dominant zone pair
    """
    zone_pair = _dominant_pair((d.zone_pair for d in day_fares), rules)
    state = CapState(cap=rules.pricing.weekly_cap(zone_pair))

    for record in day_fares:
        record.fare = state.apply(record.fare)

    if state.reached:
        logger.debug("Weekly cap %s reached for zones %s", state.cap, zone_pair)

    return zone_pair


__all__ = [
    "CapState",
    "dominant_zone_pair",
    "calculate_trip_fares",
    "calculate_day_fare",
    "apply_weekly_cap",
]

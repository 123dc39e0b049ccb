"""
Journey and Fare Records

Input journeys are immutable. Fare records are emitted once per trip or day;
capping only ever changes their fare.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import NamedTuple


ZonePair = tuple[int, int]

INVALID_DATE = "Invalid Date"
DAY_LABEL_FORMAT = "%a %b %d %Y"            # Tue Jul 29 2025
TRIP_LABEL_FORMAT = "%a %b %d %Y %H:%M:%S"  # Tue Jul 29 2025 16:50:00


class Journey(NamedTuple):
    """
    A single journey.

    timestamp is None when the source value could not be parsed. Such
    journeys are still priced and surface as "Invalid Date" in labels.
    """
    timestamp: datetime | None
    from_zone: int
    to_zone: int

    @property
    def zone_pair(self) -> ZonePair:
        return (self.from_zone, self.to_zone)


@dataclass(slots=True)
class TripFareRecord:
    """Fare for one trip after the daily cap."""
    label: str
    fare: float
    zone_pair: ZonePair
    timestamp: datetime | None = None


@dataclass(slots=True)
class DayFareRecord:
    """Fare for one day after the daily cap, reduced in place by the weekly cap."""
    label: str
    fare: float
    zone_pair: ZonePair
    day: date | None = None


def trip_label(timestamp: datetime | None) -> str:
    if timestamp is None:
        return INVALID_DATE
    return timestamp.strftime(TRIP_LABEL_FORMAT)


def day_label(day: date | None) -> str:
    if day is None:
        return INVALID_DATE
    return day.strftime(DAY_LABEL_FORMAT)


__all__ = [
    "ZonePair",
    "Journey",
    "TripFareRecord",
    "DayFareRecord",
    "INVALID_DATE",
    "trip_label",
    "day_label",
]

"""
Journey Grouping

Partitions journeys into days and day fares into weeks. Keys keep the order
in which they are first encountered and members keep their input order, so
output follows the rider's input rather than sorted dates.

Day key:  calendar date of the timestamp (carries the year).
Week key: ISO (year, week) of the day, Monday to Sunday. A week that starts
          in late December and ends in January is a single group.
Invalid timestamps share the None key at both levels.
"""

from datetime import date, datetime
from typing import Iterable

from .journeys import DayFareRecord, Journey


DayKey = date | None
WeekKey = tuple[int, int] | None


def day_key(timestamp: datetime | None) -> DayKey:
    return timestamp.date() if timestamp is not None else None


def week_key(day: date | None) -> WeekKey:
    if day is None:
        return None
    iso = day.isocalendar()
    return (iso[0], iso[1])


def group_by_day(journeys: Iterable[Journey]) -> dict[DayKey, list[Journey]]:
    groups: dict[DayKey, list[Journey]] = {}
    for journey in journeys:
        groups.setdefault(day_key(journey.timestamp), []).append(journey)
    return groups


def group_by_week(day_fares: Iterable[DayFareRecord]) -> dict[WeekKey, list[DayFareRecord]]:
    groups: dict[WeekKey, list[DayFareRecord]] = {}
    for record in day_fares:
        groups.setdefault(week_key(record.day), []).append(record)
    return groups


__all__ = [
    "DayKey",
    "WeekKey",
    "day_key",
    "week_key",
    "group_by_day",
    "group_by_week",
]

"""
Peak Window Classifier

Decides whether a timestamp falls in a peak window. Weekdays and weekends
have separate schedules (see data/reference/peak_hours.py).

Timestamps and window bounds are compared on the same millisecond-of-day
scale, so window bounds given as clock strings line up with timestamp times.
"""

import logging
from datetime import datetime, time
from typing import Mapping

from .data.reference import PEAK_HOURS, WEEKEND_DAYS, PeakSchedule
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


def ms_of_day(value: datetime | time | str) -> int:
    """
    Milliseconds since midnight for a timestamp, time, or "HH:MM[:SS]" string.

    Sub-second parts are ignored so a bound of "10:30:00" still covers
    10:30:00.500.

    Raises:
        ValueError: If a clock string cannot be parsed
    """
    if isinstance(value, (datetime, time)):
        hours, minutes, seconds = value.hour, value.minute, value.second
    else:
        parts = str(value).strip().split(":")
        if len(parts) not in (2, 3):
            raise ValueError(f"Invalid clock time: {value!r}")
        hours, minutes = int(parts[0]), int(parts[1])
        seconds = int(parts[2]) if len(parts) == 3 else 0
        if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60):
            raise ValueError(f"Clock time out of range: {value!r}")

    return hours * MS_PER_HOUR + minutes * MS_PER_MINUTE + seconds * MS_PER_SECOND


def is_weekend(timestamp: datetime, weekend_days: tuple[int, ...] = WEEKEND_DAYS) -> bool:
    return timestamp.weekday() in weekend_days


def is_peak(
    timestamp: datetime | None,
    peak_hours: Mapping[str, PeakSchedule] = PEAK_HOURS,
    weekend_days: tuple[int, ...] = WEEKEND_DAYS,
) -> bool:
    """
    Check if a timestamp falls in a peak window, inclusive on both ends.

    An invalid (None) timestamp is treated as off-peak.
    """
    if timestamp is None:
        logger.debug("Invalid timestamp classified as off-peak")
        return False

    schedule = peak_hours["weekend" if is_weekend(timestamp, weekend_days) else "weekday"]
    now = ms_of_day(timestamp)

    return any(
        ms_of_day(window.start) <= now <= ms_of_day(window.end)
        for window in (schedule.morning, schedule.evening)
    )


def validate_peak_hours(peak_hours: Mapping[str, PeakSchedule]) -> None:
    """
    Check that both day classes are configured with parseable windows.

    Raises:
        ConfigurationError: On a missing day class or malformed window bound
    """
    for day_class in ("weekday", "weekend"):
        if day_class not in peak_hours:
            raise ConfigurationError(f"No peak schedule configured for {day_class}")
        for window in peak_hours[day_class]:
            try:
                start, end = ms_of_day(window.start), ms_of_day(window.end)
            except ValueError as e:
                raise ConfigurationError(f"Bad {day_class} peak window {window}: {e}") from e
            if start > end:
                raise ConfigurationError(
                    f"Peak window {window} for {day_class} ends before it starts"
                )


__all__ = [
    "ms_of_day",
    "is_weekend",
    "is_peak",
    "validate_peak_hours",
]

"""
Peak Hours Configuration

Peak fares apply inside the morning and evening windows of the schedule for
the day class (weekday or weekend). Both ends of a window are inclusive.
Times are wall-clock "HH:MM:SS" strings.
"""

from typing import NamedTuple


class PeakWindow(NamedTuple):
    """A single peak window within a day."""
    start: str
    end: str


class PeakSchedule(NamedTuple):
    """Morning and evening peak windows for one day class."""
    morning: PeakWindow
    evening: PeakWindow


# =============================================================================
# SCHEDULES
# =============================================================================

PEAK_HOURS = {
    "weekday": PeakSchedule(
        morning=PeakWindow("07:00:00", "10:30:00"),
        evening=PeakWindow("17:00:00", "20:00:00"),
    ),
    "weekend": PeakSchedule(
        morning=PeakWindow("09:00:00", "11:00:00"),
        evening=PeakWindow("18:00:00", "22:00:00"),
    ),
}

# Python weekday numbering (Mon=0, Sun=6)
WEEKEND_DAYS = (5, 6)

"""
Fare Reference Data

Static configuration for peak hours and cap zone selection.
"""

from .peak_hours import PEAK_HOURS, WEEKEND_DAYS, PeakSchedule, PeakWindow
from .caps import DEFAULT_CAP_ZONE_PAIR, PREFERRED_ZONE

__all__ = [
    "PEAK_HOURS",
    "WEEKEND_DAYS",
    "PeakSchedule",
    "PeakWindow",
    "DEFAULT_CAP_ZONE_PAIR",
    "PREFERRED_ZONE",
]

"""
Fare Rules

Bundles everything a calculation reads: the zone pricing table, peak
schedules, weekend days and the cap zone selection settings. Rules are
immutable once built and may be shared between calculations.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .data import (
    load_zone_fares,
    PEAK_HOURS,
    WEEKEND_DAYS,
    DEFAULT_CAP_ZONE_PAIR,
    PREFERRED_ZONE,
)
from .data.reference import PeakSchedule
from .errors import ConfigurationError
from .journeys import Journey, ZonePair
from .peak import is_peak, validate_peak_hours
from .pricing import ZonePricingTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FareRules:
    """Pricing and schedule configuration for fare calculations."""
    pricing: ZonePricingTable
    peak_hours: Mapping[str, PeakSchedule] = field(default_factory=lambda: PEAK_HOURS)
    weekend_days: tuple[int, ...] = WEEKEND_DAYS
    default_zone_pair: ZonePair = DEFAULT_CAP_ZONE_PAIR
    preferred_zone: int = PREFERRED_ZONE

    def __post_init__(self):
        validate_peak_hours(self.peak_hours)
        if not set(self.weekend_days) <= set(range(7)):
            raise ConfigurationError(f"Weekend days must be 0-6, got {self.weekend_days}")
        object.__setattr__(self, "peak_hours", MappingProxyType(dict(self.peak_hours)))
        object.__setattr__(self, "weekend_days", tuple(self.weekend_days))
        object.__setattr__(self, "default_zone_pair", tuple(self.default_zone_pair))

    def is_peak(self, journey: Journey) -> bool:
        return is_peak(journey.timestamp, self.peak_hours, self.weekend_days)

    def raw_fare(self, journey: Journey) -> float:
        """Uncapped fare for a single journey."""
        return self.pricing.fare(journey.zone_pair, self.is_peak(journey))


def load_fare_rules(fares_path: Path | str | None = None, **overrides) -> FareRules:
    """
    Build fare rules from a zone fare CSV and the reference schedules.

    Args:
        fares_path: Zone fare CSV (defaults to the bundled reference table)
        **overrides: Any other FareRules field (peak_hours, weekend_days, ...)

    Raises:
        ConfigurationError: If the fare table or schedules are invalid
    """
    pricing = ZonePricingTable.from_frame(load_zone_fares(fares_path))
    logger.debug("Loaded fares for %d zone pairs", len(pricing))
    return FareRules(pricing=pricing, **overrides)


@lru_cache(maxsize=1)
def default_rules() -> FareRules:
    """Process-wide rules from the bundled reference data, loaded once."""
    return load_fare_rules()


__all__ = [
    "FareRules",
    "load_fare_rules",
    "default_rules",
]

"""
Transit Fares

Fare calculator for zone-based transit with peak pricing and daily / weekly caps.
"""

from .calculate_fares import calculate_fares, FareBreakdown
from .errors import ConfigurationError
from .journeys import Journey
from .rules import FareRules, load_fare_rules
from .version import VERSION

__all__ = [
    "calculate_fares",
    "FareBreakdown",
    "ConfigurationError",
    "Journey",
    "FareRules",
    "load_fare_rules",
    "VERSION",
]

"""
Journey Loaders

Loaders for rider journey files and in-memory records.
"""

from .journeys import (
    load_journeys,
    journeys_from_records,
    parse_timestamp,
    TIMESTAMP_FIELDS,
    FROM_ZONE_FIELDS,
    TO_ZONE_FIELDS,
)

__all__ = [
    "load_journeys",
    "journeys_from_records",
    "parse_timestamp",
    "TIMESTAMP_FIELDS",
    "FROM_ZONE_FIELDS",
    "TO_ZONE_FIELDS",
]

"""
Journey Loaders

Turns raw journey records (JSON, CSV, in-memory dicts) into Journey tuples.

Timestamps that cannot be parsed become None instead of raising, so the
journey is still priced and reported as "Invalid Date". Offset-aware
timestamps keep their own wall-clock time.
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

import polars as pl

from ...journeys import Journey

logger = logging.getLogger(__name__)


# Accepted field names, first match wins
TIMESTAMP_FIELDS = ("dateTime", "date_time", "timestamp")
FROM_ZONE_FIELDS = ("from", "from_zone")
TO_ZONE_FIELDS = ("to", "to_zone")


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse an ISO-8601 timestamp, returning None if it is not valid.

    Accepts datetime and date values as well as strings.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    return parsed.replace(tzinfo=None)


def _field(record: Mapping, names: tuple[str, ...], position: Any) -> Any:
    for name in names:
        if name in record:
            return record[name]
    raise ValueError(f"Journey {position} is missing field '{names[0]}'")


def _zone(value: Any, position: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Journey {position} has non-integer zone {value!r}")
    try:
        zone = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Journey {position} has non-integer zone {value!r}") from None
    if zone != value and not isinstance(value, str):
        raise ValueError(f"Journey {position} has non-integer zone {value!r}")
    return zone


def journeys_from_records(records: Iterable[Mapping] | Mapping[Any, Mapping]) -> list[Journey]:
    """
    Build journeys from raw records.

    Args:
        records: A list of journey mappings, or a mapping of id -> journey
                 mapping (values are taken in order)

    Returns:
        Journeys in record order

    Raises:
        ValueError: If a record lacks a field or has a non-integer zone
    """
    if isinstance(records, Mapping):
        items = list(records.items())
    else:
        items = list(enumerate(records))

    journeys = []
    invalid = 0
    for position, record in items:
        raw_timestamp = _field(record, TIMESTAMP_FIELDS, position)
        timestamp = parse_timestamp(raw_timestamp)
        if timestamp is None:
            invalid += 1
            logger.warning("Journey %s has invalid timestamp %r", position, raw_timestamp)

        journeys.append(Journey(
            timestamp=timestamp,
            from_zone=_zone(_field(record, FROM_ZONE_FIELDS, position), position),
            to_zone=_zone(_field(record, TO_ZONE_FIELDS, position), position),
        ))

    logger.debug("Parsed %d journey(s), %d with invalid timestamps", len(journeys), invalid)
    return journeys


def load_journeys(path: Path | str) -> list[Journey]:
    """
    Load journeys from a JSON or CSV file.

    JSON files hold either a list of journeys or an object of id -> journey.
    CSV files need a timestamp column and from / to zone columns (see
    TIMESTAMP_FIELDS, FROM_ZONE_FIELDS, TO_ZONE_FIELDS).
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
    elif suffix == ".csv":
        # Everything as strings so invalid timestamps reach parse_timestamp
        df = pl.read_csv(path, infer_schema=False)
        records = df.to_dicts()
    else:
        raise ValueError(f"Unsupported journey file type: {path.name} (expected .json or .csv)")

    journeys = journeys_from_records(records)
    logger.info("Loaded %d journey(s) from %s", len(journeys), path)
    return journeys

"""
Transit Fare Calculator
=======================

Calculates capped fares for a rider's journey file and prints the breakdown.

Usage:
    python -m fares.scripts.calculator journeys.json
    python -m fares.scripts.calculator journeys.csv --output-dir out/
    python -m fares.scripts.calculator journeys.json --fares my_fares.csv --json
"""

import argparse
import json
import sys
from pathlib import Path

from fares.calculate_fares import FareBreakdown, calculate_fares
from fares.data import load_journeys
from fares.errors import ConfigurationError
from fares.rules import default_rules, load_fare_rules
from fares.version import VERSION
from shared import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Calculate daily and weekly capped transit fares"
    )
    parser.add_argument("journeys", type=Path, help="Journey file (.json or .csv)")
    parser.add_argument(
        "--fares", type=Path, default=None,
        help="Zone fare CSV (default: bundled reference table)"
    )
    parser.add_argument(
        "--output-dir", type=Path, default=None,
        help="Write trip_fares.csv and day_fares.csv to this directory"
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the breakdown as JSON instead of a table"
    )
    parser.add_argument(
        "--log-level", default="WARNING", type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )
    return parser.parse_args(argv)


def print_results(result: FareBreakdown) -> None:
    """Print trip and day breakdown."""
    print("\n" + "=" * 50)
    print(f"FARE BREAKDOWN (calculator {VERSION})")
    print("=" * 50)

    print("\n--- Trips (daily cap applied) ---")
    for trip in result.trip_fares:
        zones = f"{trip.zone_pair[0]}-{trip.zone_pair[1]}"
        print(f"{trip.label:<28} cap zones {zones:<5} {trip.fare:>8.2f}")

    print("\n--- Days (weekly cap applied) ---")
    for day in result.day_fares:
        zones = f"{day.zone_pair[0]}-{day.zone_pair[1]}"
        print(f"{day.label:<28} cap zones {zones:<5} {day.fare:>8.2f}")

    print(f"{'':<44}{'=' * 9}")
    print(f"{'TOTAL':<44}{result.total_fare:>9.2f}")
    print()


def write_results(result: FareBreakdown, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    trips, days = result.to_frames()
    trips.write_csv(output_dir / "trip_fares.csv")
    days.write_csv(output_dir / "day_fares.csv")
    print(f"Results saved to: {output_dir}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        rules = load_fare_rules(args.fares) if args.fares else default_rules()
        journeys = load_journeys(args.journeys)
        result = calculate_fares(journeys, rules)
    except (ConfigurationError, ValueError, OSError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.as_dict(), indent=2))
    else:
        print_results(result)

    if args.output_dir:
        write_results(result, args.output_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())

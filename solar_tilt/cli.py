#!/usr/bin/env python3
"""Command-line front end for the panel tilt planner.

Resolves a location (named city or coordinates) and a date, prints the
optimal tilt with the recommended mounting position and then the yearly
timeline of positions.

Usage:
    solar-tilt --city Paris --date 2026-01-01
    solar-tilt --lat 45.2 --lon 5.7 --positions 20,30,40,50
    solar-tilt --list-cities
"""

import argparse
import datetime
import logging
import sys
from collections.abc import Sequence

from ._types import (
    DEFAULT_POSITIONS,
    AngleResult,
    CalendarSegment,
    Location,
    PlannerConfig,
)
from .angles import compute_optimal_angle
from .errors import (
    InputError,
    MissingInputError,
    parse_date,
    validate_latitude,
    validate_year,
)
from .locations import CITIES, coordinates_location, find_city
from .seasonal_calendar import build_yearly_calendar, season_tag, segment_dates

_LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="solar-tilt",
        description="Recommend a solar panel tilt among fixed mounting positions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  solar-tilt --city Lyon
      Today's tilt for Lyon and the yearly calendar

  solar-tilt --lat 48.8566 --lon 2.3522 --date 2026-01-01
      Tilt for explicit coordinates on a given day

  solar-tilt --city Lille --positions 20,30,40,50 --no-calendar
      Use a custom bracket with four positions
""",
    )

    loc_group = parser.add_argument_group("Location Options")
    where = loc_group.add_mutually_exclusive_group()
    where.add_argument("--city", "-c", help="Name of a reference city")
    where.add_argument("--lat", help="Latitude in degrees (positive = North)")
    loc_group.add_argument(
        "--lon",
        type=float,
        default=0.0,
        help="Longitude in degrees, used for the label only (default: 0)",
    )

    calc_group = parser.add_argument_group("Calculation Options")
    calc_group.add_argument(
        "--date",
        "-d",
        default=datetime.date.today().isoformat(),
        help="Date as YYYY-MM-DD (default: today)",
    )
    calc_group.add_argument(
        "--positions",
        "-p",
        type=parse_positions,
        default=DEFAULT_POSITIONS,
        help="Comma-separated mounting positions in degrees (default: 27,35,42)",
    )
    calc_group.add_argument(
        "--year",
        "-y",
        type=int,
        default=None,
        help="Reference year for the calendar (default: current year)",
    )
    calc_group.add_argument(
        "--no-calendar",
        action="store_true",
        help="Skip the yearly calendar",
    )

    parser.add_argument(
        "--list-cities",
        action="store_true",
        help="List the reference cities and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def parse_positions(value: str) -> tuple[float, ...]:
    """Parse "27,35,42" into a tuple of degrees, keeping the given order."""
    try:
        positions = tuple(float(p) for p in value.split(",") if p.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid positions {value!r}") from e
    if not positions:
        raise argparse.ArgumentTypeError("At least one position is required")
    return positions


def resolve_location(args: argparse.Namespace) -> Location:
    """Turn the location arguments into a Location, validating them."""
    if args.city:
        return find_city(args.city)
    if args.lat is None:
        raise MissingInputError("Please select a city or enter a latitude")
    return coordinates_location(validate_latitude(args.lat), args.lon)


def format_day_month(date: datetime.date) -> str:
    return f"{date.day} {date.strftime('%B')}"


def format_result(
    result: AngleResult, location: Location, date: datetime.date
) -> str:
    """Render the tilt for one day."""
    lines = [
        f"{location.name} - {format_day_month(date)} {date.year}",
        f"Recommended position: {result.recommended_position:g}°",
        f"Exact angle: {result.display_angle:.1f}°",
    ]
    return "\n".join(lines)


def format_calendar(
    segments: Sequence[CalendarSegment], year: int, positions: Sequence[float]
) -> str:
    """Render the yearly timeline, one line per segment."""
    lines = [f"Calendar {year}"]
    for segment in segments:
        start, end = segment_dates(segment, year)
        lines.append(
            f"  {segment.position:>5g}°  "
            f"{format_day_month(start)} - {format_day_month(end)}  "
            f"({season_tag(segment.position, positions)})"
        )
    return "\n".join(lines)


def run(args: argparse.Namespace) -> str:
    """Validate the arguments and build the report text."""
    location = resolve_location(args)
    date = parse_date(args.date)
    if args.year is None:
        config = PlannerConfig(positions=args.positions)
    else:
        config = PlannerConfig(
            positions=args.positions, year=validate_year(args.year)
        )
    _LOGGER.debug("Computing tilt for %s on %s with %s", location, date, config)

    result = compute_optimal_angle(location.latitude, date, config.positions)
    report = [format_result(result, location, date)]
    if not args.no_calendar:
        segments = build_yearly_calendar(location.latitude, config.year, config.positions)
        report.append(format_calendar(segments, config.year, config.positions))
    return "\n\n".join(report)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_cities:
        for city in CITIES:
            print(f"{city.name:<18} {city.latitude:>8.4f} {city.longitude:>8.4f}")
        return 0

    try:
        print(run(args))
    except InputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

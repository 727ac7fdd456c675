"""Input validation errors raised before the tilt calculations run.

The calculations themselves never raise for in-domain input; everything
here belongs to the layer that collects a location and a date from a user.
"""

import datetime


class InputError(ValueError):
    """Base exception for rejected user input."""


class MissingInputError(InputError):
    """A required value (location, latitude, date) was not supplied."""


class UnknownLocationError(InputError):
    """A named location is not in the city table."""


def validate_latitude(value: float | str | None) -> float:
    """Parse a latitude and check it lies within [-90, 90]."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingInputError("Please enter a latitude")
    try:
        latitude = float(value)
    except (TypeError, ValueError) as e:
        raise InputError(f"Invalid latitude {value!r}") from e
    if not -90.0 <= latitude <= 90.0:
        raise InputError(f"Latitude must be -90 to 90, got {latitude}")
    return latitude


def parse_date(value: str | None) -> datetime.date:
    """Parse an ISO date (YYYY-MM-DD)."""
    if not value:
        raise MissingInputError("Please select a date")
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise InputError(f"Invalid date '{value}': {e}") from e


def validate_year(year: int) -> int:
    """Check a calendar year lies within the range datetime supports."""
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        raise InputError(
            f"Year must be {datetime.MINYEAR} to {datetime.MAXYEAR}, got {year}"
        )
    return year

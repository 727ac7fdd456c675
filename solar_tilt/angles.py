"""Noon-altitude panel tilt calculations for discrete mounting positions.

Uses the simplified solar-noon model: the sun's altitude at noon is
90 - latitude + declination and the best tilt is its complement.
All angles in degrees unless otherwise noted.
"""

import datetime
import math
from collections.abc import Sequence

from ._types import DEFAULT_POSITIONS, AngleResult

EARTH_AXIAL_TILT = 23.45
DAYS_PER_YEAR = 365
MIN_TILT = 0.0
MAX_TILT = 90.0


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def days_in_months(year: int) -> list[int]:
    """Returns a list of days per month for the given year."""
    return [31, 29 if leap_year(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def day_of_year(year: int, month: int, day: int) -> int:
    """Calculate day of year (1-366) from year, month, day."""
    return sum(days_in_months(year)[: month - 1]) + day


def date_day_of_year(date: datetime.date) -> int:
    """Day of year for a date or datetime. Time of day is ignored."""
    return day_of_year(date.year, date.month, date.day)


def solar_declination(n: int) -> float:
    """Calculate solar declination angle (Cooper's approximation).

    Input: n = day of year (1-365)
    Output: declination in degrees

    Ranges from -23.45 deg (winter solstice) to +23.45 deg (summer solstice).
    """
    angle = (360.0 / DAYS_PER_YEAR) * (n + 284)
    return EARTH_AXIAL_TILT * math.sin(deg_to_rad(angle))


def noon_altitude(latitude: float, declination: float) -> float:
    """Solar altitude at solar noon."""
    return 90.0 - latitude + declination


def clamp_tilt(tilt: float) -> float:
    """Saturate a tilt into the physically meaningful [0, 90] range."""
    return max(MIN_TILT, min(MAX_TILT, tilt))


def optimal_tilt(latitude: float, declination: float) -> float:
    """Tilt that faces the noon sun, clamped to [0, 90]."""
    return clamp_tilt(90.0 - noon_altitude(latitude, declination))


def nearest_position(tilt: float, positions: Sequence[float]) -> float:
    """Pick the mounting position closest to tilt.

    Positions are scanned in order and only a strictly smaller difference
    replaces the current candidate, so ties go to the first-declared one.
    """
    if not positions:
        raise ValueError("positions must not be empty")
    best = positions[0]
    best_diff = abs(tilt - best)
    for position in positions:
        diff = abs(tilt - position)
        if diff < best_diff:
            best = position
            best_diff = diff
    return best


def compute_optimal_angle(
    latitude: float,
    date: datetime.date,
    positions: Sequence[float] = DEFAULT_POSITIONS,
) -> AngleResult:
    """Calculate the optimal tilt and recommended position for a day.

    Latitude is not range-checked; callers validate input first.
    """
    n = date_day_of_year(date)
    decl = solar_declination(n)
    tilt = optimal_tilt(latitude, decl)
    return AngleResult(
        day_of_year=n,
        declination=decl,
        solar_altitude=noon_altitude(latitude, decl),
        exact_angle=tilt,
        recommended_position=nearest_position(tilt, positions),
    )

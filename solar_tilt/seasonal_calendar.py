"""Yearly calendar of mounting positions.

Walks the days of a reference year, picks the recommended position for
each and groups consecutive days sharing a position into segments.
Segments are expressed as day-of-year ordinals; convert them with
segment_dates for display.
"""

import datetime
import functools
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from . import angles
from ._types import DEFAULT_POSITIONS, CalendarSegment, SeasonTag

_LOGGER = logging.getLogger(__name__)

# Fixed length of the walk. Day 366 of a leap year is never evaluated.
CALENDAR_DAYS = 365


@dataclass(frozen=True)
class _SegmentFold:
    """Accumulator for the segmentation fold."""

    closed: tuple[CalendarSegment, ...] = ()
    open_position: float | None = None
    open_start: int = 0


def doy_to_month_day(year: int, doy: int) -> tuple[int, int]:
    """Convert day-of-year to (month, day) for a given year."""
    remaining = doy
    for month_idx, dim in enumerate(angles.days_in_months(year)):
        if remaining <= dim:
            return (month_idx + 1, remaining)
        remaining -= dim
    raise ValueError(f"Day {doy} is outside year {year}")


def day_to_date(year: int, doy: int) -> datetime.date:
    """Calendar date of a day-of-year ordinal."""
    month, day = doy_to_month_day(year, doy)
    return datetime.date(year, month, day)


def segment_dates(
    segment: CalendarSegment, year: int
) -> tuple[datetime.date, datetime.date]:
    """Inclusive (start, end) calendar dates of a segment in year."""
    return day_to_date(year, segment.start_day), day_to_date(year, segment.end_day)


def season_tag(position: float, positions: Sequence[float]) -> SeasonTag:
    """Label a position by where it sits in the configured set."""
    if position == min(positions):
        return SeasonTag.SUMMER
    if position == max(positions):
        return SeasonTag.WINTER
    return SeasonTag.SHOULDER


def _fold_day(acc: _SegmentFold, day_position: tuple[int, float]) -> _SegmentFold:
    day, position = day_position
    if acc.open_position is None:
        return _SegmentFold(acc.closed, position, day)
    if position != acc.open_position:
        finished = CalendarSegment(
            position=acc.open_position, start_day=acc.open_start, end_day=day - 1
        )
        return _SegmentFold(acc.closed + (finished,), position, day)
    return acc


def daily_positions(
    latitude: float,
    year: int,
    positions: Sequence[float] = DEFAULT_POSITIONS,
) -> list[tuple[int, float]]:
    """Recommended position for each of the calendar days of year."""
    return [
        (
            doy,
            angles.compute_optimal_angle(
                latitude, day_to_date(year, doy), positions
            ).recommended_position,
        )
        for doy in range(1, CALENDAR_DAYS + 1)
    ]


def build_yearly_calendar(
    latitude: float,
    year: int,
    positions: Sequence[float] = DEFAULT_POSITIONS,
) -> list[CalendarSegment]:
    """Group consecutive days with the same recommended position.

    The last open segment is closed on day 365 regardless of what the
    next year's first day would recommend; segments never wrap around.
    """
    acc = functools.reduce(
        _fold_day, daily_positions(latitude, year, positions), _SegmentFold()
    )
    last = CalendarSegment(
        position=acc.open_position, start_day=acc.open_start, end_day=CALENDAR_DAYS
    )
    segments = list(acc.closed) + [last]
    _LOGGER.debug(
        "Built %d calendar segments for latitude %.4f in %d",
        len(segments),
        latitude,
        year,
    )
    return segments

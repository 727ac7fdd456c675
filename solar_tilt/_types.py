"""Frozen dataclasses for all structured return types."""

import datetime
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

DEFAULT_POSITIONS: tuple[float, ...] = (27, 35, 42)


class SeasonTag(StrEnum):
    SUMMER = "summer optimization"
    WINTER = "winter optimization"
    SHOULDER = "shoulder season"


@dataclass(frozen=True)
class AngleResult:
    day_of_year: int
    declination: float
    solar_altitude: float
    exact_angle: float
    recommended_position: float

    @property
    def display_angle(self) -> float:
        """Exact angle rounded half-up to one decimal place."""
        return float(
            Decimal(self.exact_angle).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        )


@dataclass(frozen=True)
class CalendarSegment:
    position: float
    start_day: int
    end_day: int

    @property
    def length(self) -> int:
        return self.end_day - self.start_day + 1


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float = 0.0


def _current_year() -> int:
    return datetime.date.today().year


@dataclass(frozen=True)
class PlannerConfig:
    positions: tuple[float, ...] = DEFAULT_POSITIONS
    year: int = field(default_factory=_current_year)

    def __post_init__(self):
        if not self.positions:
            raise ValueError("positions must not be empty")
        # Lists are accepted but stored as a tuple to keep the config hashable
        object.__setattr__(self, "positions", tuple(self.positions))

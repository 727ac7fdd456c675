"""Yearly position calendar tests."""

import datetime

import pytest

from solar_tilt._types import CalendarSegment, PlannerConfig, SeasonTag
from solar_tilt.angles import day_of_year
from solar_tilt.seasonal_calendar import (
    CALENDAR_DAYS,
    build_yearly_calendar,
    daily_positions,
    day_to_date,
    doy_to_month_day,
    season_tag,
    segment_dates,
)

LATITUDES = [-90.0, -45.0, -10.0, 0.0, 23.45, 43.2965, 48.8566, 66.5, 90.0]


class TestConfig:
    def test_default_config_has_correct_defaults(self):
        c = PlannerConfig()
        assert c.positions == (27, 35, 42)
        assert c.year == datetime.date.today().year

    def test_list_positions_stored_as_tuple(self):
        c = PlannerConfig(positions=[20, 30], year=2026)
        assert c.positions == (20, 30)

    def test_empty_positions_rejected(self):
        with pytest.raises(ValueError):
            PlannerConfig(positions=())


class TestDoyMonthDay:
    @pytest.mark.parametrize(
        "year,month,day",
        [
            (2026, 1, 1),
            (2026, 3, 21),
            (2026, 6, 21),
            (2026, 12, 31),
            (2024, 2, 29),
            (2024, 3, 1),
            (2026, 11, 15),
        ],
    )
    def test_roundtrip(self, year, month, day):
        doy = day_of_year(year, month, day)
        assert doy_to_month_day(year, doy) == (month, day)

    def test_boundary_days(self):
        assert doy_to_month_day(2026, 1) == (1, 1)
        assert doy_to_month_day(2026, 365) == (12, 31)
        assert doy_to_month_day(2024, 366) == (12, 31)

    def test_outside_year(self):
        with pytest.raises(ValueError):
            doy_to_month_day(2026, 366)

    def test_day_to_date(self):
        assert day_to_date(2026, 32) == datetime.date(2026, 2, 1)
        assert day_to_date(2024, 365) == datetime.date(2024, 12, 30)


class TestSeasonTag:
    def test_reference_positions(self):
        positions = (27, 35, 42)
        assert season_tag(27, positions) == SeasonTag.SUMMER
        assert season_tag(35, positions) == SeasonTag.SHOULDER
        assert season_tag(42, positions) == SeasonTag.WINTER

    def test_declaration_order_irrelevant(self):
        assert season_tag(42, (42, 27, 35)) == SeasonTag.WINTER

    def test_single_position_is_summer(self):
        assert season_tag(30, (30,)) == SeasonTag.SUMMER

    def test_four_positions(self):
        positions = (20, 30, 40, 50)
        tags = [season_tag(p, positions) for p in positions]
        assert tags == [
            SeasonTag.SUMMER,
            SeasonTag.SHOULDER,
            SeasonTag.SHOULDER,
            SeasonTag.WINTER,
        ]


class TestParisCalendar:
    @pytest.fixture
    def segments(self):
        return build_yearly_calendar(48.8566, 2026)

    def test_position_sequence(self, segments):
        assert [s.position for s in segments] == [42, 35, 27, 35, 42]

    def test_starts_and_ends_with_winter(self, segments):
        assert segments[0].start_day == 1
        assert segments[-1].end_day == 365

    def test_summer_segment_contains_solstice(self, segments):
        summer = segments[2]
        assert summer.start_day <= 172 <= summer.end_day

    def test_no_wraparound_merge(self, segments):
        # Jan 1 and Dec 31 share a position but stay separate segments
        assert segments[0].position == segments[-1].position
        assert len(segments) == 5

    def test_segment_dates(self, segments):
        start, end = segment_dates(segments[-1], 2026)
        assert end == datetime.date(2026, 12, 31)
        assert start.year == 2026
        first_start, _ = segment_dates(segments[0], 2026)
        assert first_start == datetime.date(2026, 1, 1)

    def test_matches_daily_positions(self, segments):
        by_day = dict(daily_positions(48.8566, 2026))
        for segment in segments:
            for doy in range(segment.start_day, segment.end_day + 1):
                assert by_day[doy] == segment.position


class TestCalendarInvariants:
    @pytest.mark.parametrize("latitude", LATITUDES)
    def test_contiguous_cover(self, latitude):
        segments = build_yearly_calendar(latitude, 2026)
        assert len(segments) >= 1
        assert segments[0].start_day == 1
        assert segments[-1].end_day == CALENDAR_DAYS
        for prev, nxt in zip(segments, segments[1:]):
            assert prev.end_day + 1 == nxt.start_day
            assert prev.position != nxt.position
        assert sum(s.length for s in segments) == CALENDAR_DAYS

    @pytest.mark.parametrize("latitude", [38.0, 43.2965, 45.764, 48.8566, 50.6292, 55.0])
    def test_segment_count_bounded(self, latitude):
        segments = build_yearly_calendar(latitude, 2026)
        assert 1 <= len(segments) <= 6

    def test_equator_single_segment(self):
        segments = build_yearly_calendar(0.0, 2026)
        assert segments == [CalendarSegment(position=27, start_day=1, end_day=365)]

    def test_south_pole_single_segment(self):
        segments = build_yearly_calendar(-90.0, 2026)
        assert segments == [CalendarSegment(position=27, start_day=1, end_day=365)]

    def test_custom_positions(self):
        positions = (10, 20, 30, 40, 50, 60, 70)
        segments = build_yearly_calendar(48.8566, 2026, positions)
        assert {s.position for s in segments} <= set(positions)
        assert len(segments) > 5

    def test_single_position(self):
        segments = build_yearly_calendar(48.8566, 2026, (30,))
        assert segments == [CalendarSegment(position=30, start_day=1, end_day=365)]

    def test_deterministic(self):
        assert build_yearly_calendar(45.0, 2026) == build_yearly_calendar(45.0, 2026)


class TestLeapYear:
    @pytest.fixture
    def segments(self):
        return build_yearly_calendar(48.8566, 2024)

    def test_day_366_not_evaluated(self, segments):
        assert segments[-1].end_day == 365
        assert len(daily_positions(48.8566, 2024)) == 365

    def test_last_segment_ends_december_30(self, segments):
        _, end = segment_dates(segments[-1], 2024)
        assert end == datetime.date(2024, 12, 30)

    def test_same_segments_as_common_year(self, segments):
        # Day-of-year ordinals do not depend on the year
        assert segments == build_yearly_calendar(48.8566, 2026)

"""Demonstrate the tilt recommendation and yearly calendar for Paris."""

import datetime

from solar_tilt._types import DEFAULT_POSITIONS
from solar_tilt.angles import compute_optimal_angle
from solar_tilt.locations import find_city
from solar_tilt.seasonal_calendar import build_yearly_calendar, season_tag, segment_dates


def main():
    city = find_city("Paris")
    date = datetime.date(2026, 1, 1)

    result = compute_optimal_angle(city.latitude, date, DEFAULT_POSITIONS)

    print("=== Panel Tilt Example ===")
    print(f"Location: {city.name} ({city.latitude:.4f}°N, {city.longitude:.4f}°E)")
    print(f"Date: {date}")
    print()
    print("--- Noon Sun ---")
    print(f"Day of year: {result.day_of_year}")
    print(f"Declination: {result.declination:.2f}°")
    print(f"Noon altitude: {result.solar_altitude:.2f}°")
    print()
    print("--- Recommendation ---")
    print(f"Exact angle: {result.display_angle:.1f}°")
    print(f"Recommended position: {result.recommended_position}°")
    print()
    print(f"--- Calendar {date.year} ---")
    for segment in build_yearly_calendar(city.latitude, date.year, DEFAULT_POSITIONS):
        start, end = segment_dates(segment, date.year)
        tag = season_tag(segment.position, DEFAULT_POSITIONS)
        print(f"{segment.position}°: {start:%d %b} - {end:%d %b} ({tag})")


if __name__ == "__main__":
    main()

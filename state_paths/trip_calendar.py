"""
Simulated calendar used while walking a path.

The cursor starts on the first day of the trip's start month and moves
forward by the stay interval each time a state is visited.
"""

import calendar
from datetime import date, timedelta
from typing import List

from state_paths.path_types import Interval, TripSettings


def add_interval(day: date, interval: Interval) -> date:
    """
    Move a date forward by an interval.

    Month and year steps keep the day of month, clamped to the length of
    the target month (Jan 31 + 1 month is Feb 28/29).
    """
    if interval.unit == "day":
        return day + timedelta(days=interval.amount)
    if interval.unit == "week":
        return day + timedelta(weeks=interval.amount)

    months = interval.amount * (12 if interval.unit == "year" else 1)
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class SimulatedCalendar:
    """Month cursor for a single path; call reset() before each path."""

    def __init__(self, settings: TripSettings):
        self.settings = settings
        self.start = settings.start_date()
        self.current = self.start

    def reset(self) -> None:
        self.current = self.start

    @property
    def month(self) -> int:
        return self.current.month

    def advance(self) -> None:
        self.current = add_interval(self.current, self.settings.interval)


def visited_months(stops: int, settings: TripSettings) -> List[int]:
    """Calendar month of each stop for a path with `stops` states."""
    cursor = SimulatedCalendar(settings)
    months = []
    for _ in range(stops):
        months.append(cursor.month)
        cursor.advance()
    return months

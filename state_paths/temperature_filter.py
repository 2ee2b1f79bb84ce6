"""
Temperature filtering of enumerated paths.

Each path is walked with its own simulated calendar: the traveller arrives
in the first state on day 1 of the start month and spends one interval in
every state. A path survives only if the average temperature of every
state, in the month the traveller arrives there, lies inside the comfort
range for that state.
"""

from typing import Iterable, List, Optional

from state_paths.climate_data import monthly_temperature
from state_paths.path_types import (
    AcceptedPath,
    FilterResult,
    MonthlyTemperatures,
    Path,
    TripSettings,
)
from state_paths.trip_calendar import SimulatedCalendar


def walk_path(
    path: Path,
    monthly_temps: MonthlyTemperatures,
    settings: TripSettings,
    cursor: Optional[SimulatedCalendar] = None,
) -> Optional[AcceptedPath]:
    """
    Simulate one trip along a path.

    Returns:
        AcceptedPath with the temperature at each stop, or None as soon as
        one stop falls outside its comfort range

    Raises:
        AttributeLookupGap: if a visited state/month has no temperature
    """
    cursor = cursor or SimulatedCalendar(settings)
    cursor.reset()

    temperatures = []
    for state in path:
        temp = monthly_temperature(monthly_temps, state, cursor.month)
        if not settings.range_for(state).contains(temp):
            return None
        temperatures.append(temp)
        cursor.advance()

    return AcceptedPath(path=tuple(path), temperatures=tuple(temperatures))


def filter_by_temp_range(
    paths: Iterable[Path],
    monthly_temps: MonthlyTemperatures,
    settings: TripSettings,
) -> FilterResult:
    """
    Keep the paths whose every stop is within its comfort range.

    Per-state ranges in `settings.state_ranges` take precedence over the
    global range. Surviving paths keep their input order.

    Args:
        paths: Paths to check, e.g. EnumerationResult.paths; already
            accepted paths are re-checked from scratch
        monthly_temps: {state code: 12 monthly temperatures}
        settings: Start month, stay interval and comfort ranges

    Returns:
        FilterResult with the accepted paths and their temperatures
    """
    cursor = SimulatedCalendar(settings)
    accepted: List[AcceptedPath] = []
    rejected = 0

    for path in paths:
        if isinstance(path, AcceptedPath):
            path = path.path
        result = walk_path(path, monthly_temps, settings, cursor)
        if result is None:
            rejected += 1
        else:
            accepted.append(result)

    return FilterResult(accepted=accepted, rejected=rejected)

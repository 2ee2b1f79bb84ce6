"""
Main orchestration module for planning trips through states.

This module composes the data tables, path search and temperature filter
into the workflow: pick states, enumerate paths, filter by temperature,
list what is left.
"""

from pathlib import Path as FilePath
from typing import Iterable, List, Optional, Union

from state_paths.climate_data import load_climate_data
from state_paths.graph_data import STATE_BORDERS, get_states_by_region
from state_paths.path_display import PathFormatter, ProgressReporter
from state_paths.path_generator import enumerate_paths
from state_paths.path_types import (
    ComfortRange,
    EnumerationResult,
    FilterResult,
    Interval,
    MonthlyTemperatures,
    NodeCode,
    Path,
    PathRequest,
    TripSettings,
)
from state_paths.subgraph import build_bounded_adjacency, normalize_code
from state_paths.temperature_filter import filter_by_temp_range


class StatePathPlanner:
    """
    High-level orchestrator for finding comfortable trips through states.

    Settings are held as an immutable TripSettings and replaced on every
    change. Results of the last enumeration and filter are kept so the
    steps can be run one after the other, but each step also returns its
    result.

    Example:
        planner = StatePathPlanner.from_climate_file("climatedata")
        states = planner.get_states_by_region("W", "M")
        planner.set_start_state("NM")
        planner.get_paths_by_states(states)
        planner.set_start_month(4)
        planner.set_interval("1 month")
        planner.set_temp_range(40, 68)
        planner.filter_by_temp_range()
        print("\\n\\n".join(planner.list_paths(with_temps=True)))
    """

    def __init__(
        self,
        monthly_temps: Optional[MonthlyTemperatures] = None,
        settings: Optional[TripSettings] = None,
        verbose: bool = True,
    ):
        self.monthly_temps = monthly_temps or {}
        self.settings = settings or TripSettings.create()
        self.reporter = ProgressReporter(verbose)
        self.start_state: Optional[NodeCode] = None
        self.end_state: Optional[NodeCode] = None
        self.max_paths: Optional[int] = None
        self.enumeration: Optional[EnumerationResult] = None
        self.filtered: Optional[FilterResult] = None

    @classmethod
    def from_climate_file(
        cls, climate_file: Union[str, FilePath], verbose: bool = True, **settings
    ) -> "StatePathPlanner":
        """Load the climate table and build settings from keyword arguments."""
        return cls(
            monthly_temps=load_climate_data(climate_file),
            settings=TripSettings.create(**settings),
            verbose=verbose,
        )

    # Configuration

    def set_start_month(self, month: int) -> None:
        self.settings = TripSettings.create(
            start_month=month,
            interval=self.settings.interval,
            min_temp=self.settings.comfort_range.min_temp,
            max_temp=self.settings.comfort_range.max_temp,
            state_ranges=self.settings.state_ranges,
            year=self.settings.year,
        )

    def set_interval(self, interval: Union[str, Interval]) -> None:
        self.settings = self.settings._replace(interval=Interval.parse(interval))

    def set_temp_range(
        self, min_temp: Optional[float] = None, max_temp: Optional[float] = None
    ) -> None:
        """Set the global comfort range; a bound left as None is unchanged."""
        current = self.settings.comfort_range
        comfort_range = ComfortRange(
            current.min_temp if min_temp is None else min_temp,
            current.max_temp if max_temp is None else max_temp,
        ).validate()
        self.settings = self.settings._replace(comfort_range=comfort_range)

    def set_state_temp_range(self, state: NodeCode, min_temp: float, max_temp: float) -> None:
        """Override the comfort range for one state."""
        overrides = dict(self.settings.state_ranges)
        overrides[normalize_code(state)] = ComfortRange(min_temp, max_temp).validate()
        self.settings = self.settings._replace(state_ranges=overrides)

    def set_start_state(self, state: Optional[NodeCode]) -> None:
        self.start_state = normalize_code(state)

    def set_end_state(self, state: Optional[NodeCode]) -> None:
        self.end_state = normalize_code(state)

    def set_max_paths(self, max_paths: Optional[int]) -> None:
        self.max_paths = max_paths

    # Workflow

    def get_states_by_region(self, top: str, sub: Optional[str] = None) -> List[NodeCode]:
        return get_states_by_region(top, sub)

    def get_paths_by_states(self, states: Iterable[NodeCode]) -> EnumerationResult:
        """
        Enumerate every path through exactly the given states.

        Unknown states and a bad start state are reported and returned in
        the result's errors; they never raise.
        """
        states = list(states)
        bounded = build_bounded_adjacency(states)
        result = enumerate_paths(
            states,
            bounded.adjacency,
            start_node=self.start_state,
            end_node=self.end_state,
            max_paths=self.max_paths,
            full_adjacency=STATE_BORDERS,
        )

        # Unknown states are found both while bounding and while picking roots
        errors = list(dict.fromkeys(bounded.errors + result.errors))
        result = result._replace(errors=errors)

        self.reporter.report_errors(errors)
        self.reporter.report_paths_found(result.count, result.total_states)
        if result.truncated:
            self.reporter.report(f"Stopped after {result.count:,} paths (max paths reached)")

        self.enumeration = result
        self.filtered = None
        return result

    def get_paths_for_request(self, request: PathRequest) -> EnumerationResult:
        """Apply the request's endpoints and cap, then enumerate its states."""
        self.set_start_state(request.start_state)
        self.set_end_state(request.end_state)
        self.set_max_paths(request.max_paths)
        return self.get_paths_by_states(request.states)

    def filter_by_temp_range(self, paths: Optional[Iterable[Path]] = None) -> FilterResult:
        """
        Filter paths (default: the last enumeration) by the comfort ranges.

        Raises:
            ValueError: if no paths were given and nothing was enumerated yet
            AttributeLookupGap: if the climate table lacks a visited state
        """
        if paths is None:
            if self.enumeration is None:
                raise ValueError("No paths to filter; call get_paths_by_states first")
            paths = self.enumeration.paths

        result = filter_by_temp_range(paths, self.monthly_temps, self.settings)
        self.reporter.report_paths_filtered(result.count)

        self.filtered = result
        return result

    def list_paths(self, with_temps: bool = False, full_names: bool = False) -> List[str]:
        """
        Render the current paths, one string per path.

        Filtered paths are listed when a filter has run, otherwise the
        enumerated ones (which carry no temperatures).
        """
        if self.filtered is not None:
            return PathFormatter.format_paths(self.filtered.accepted, with_temps, full_names)
        if self.enumeration is not None:
            return PathFormatter.format_paths(self.enumeration.paths, False, full_names)
        return []

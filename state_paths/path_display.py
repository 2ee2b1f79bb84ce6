"""
Display and formatting utilities for path results.

This module handles all presentation concerns, keeping them separate
from the search and filtering logic.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from state_paths.constants import PATH_SEPARATOR
from state_paths.graph_data import STATE_NAMES
from state_paths.path_analyzer import temperature_spread
from state_paths.path_types import (
    AcceptedPath,
    ConfigError,
    CountingResult,
    Path,
    PathStatistics,
)


def _format_temp(temp: float) -> str:
    return f"{temp:g}"


class PathFormatter:
    """Responsible for formatting paths in various ways."""

    @staticmethod
    def format_stop(state: str, temp: Optional[float] = None, full_names: bool = False) -> str:
        # KeyError here means a path holds a code that never came from the tables
        label = STATE_NAMES[state] if full_names else state
        if temp is None:
            return label
        return f"{label}({_format_temp(temp)})"

    @staticmethod
    def format_path(
        item: Union[AcceptedPath, Path],
        with_temps: bool = False,
        full_names: bool = False,
    ) -> str:
        """
        Format a path as a string with arrows.

        Args:
            item: An accepted path, or a bare path when with_temps is False
            with_temps: Suffix each state with its temperature
            full_names: Use full state names instead of codes
        """
        if isinstance(item, AcceptedPath):
            path, temps = item.path, item.temperatures
        else:
            path, temps = item, None

        if with_temps and temps is None:
            raise ValueError("Temperatures are only available for filtered paths")

        stops = [
            PathFormatter.format_stop(
                state, temps[i] if with_temps else None, full_names
            )
            for i, state in enumerate(path)
        ]
        return PATH_SEPARATOR.join(stops)

    @staticmethod
    def format_paths(
        items: Iterable[Union[AcceptedPath, Path]],
        with_temps: bool = False,
        full_names: bool = False,
    ) -> List[str]:
        return [PathFormatter.format_path(item, with_temps, full_names) for item in items]

    @staticmethod
    def format_path_with_metadata(item: AcceptedPath) -> str:
        """Format a path with its temperature spread."""
        return (
            f"{len(item.path)} states, spread {_format_temp(temperature_spread(item))}F\n"
            f"  {PathFormatter.format_path(item, with_temps=True)}"
        )


def to_records(accepted: Sequence[AcceptedPath]) -> List[Dict[str, Any]]:
    """Machine-readable form of accepted paths, e.g. for json.dump."""
    return [
        {"path": list(item.path), "temperatures": list(item.temperatures)}
        for item in accepted
    ]


class StatisticsDisplay:
    """Responsible for displaying statistics in a readable format."""

    @staticmethod
    def display_header(title: str, width: int = 70) -> None:
        """Display a formatted header."""
        print(f"\n{title}")
        print("=" * width)

    @staticmethod
    def display_counting_comparison(counting: CountingResult, dfs_count: int) -> None:
        """Display comparison between counting methods."""
        StatisticsDisplay.display_header("COUNTING METHOD COMPARISON")

        print(f"\nMethod Results:")
        print(f"  Bitmask DP:     {counting.count:,}")
        print(f"  DFS Generation: {dfs_count:,}")

        match = counting.count == dfs_count
        status = "✓ VALID" if match else "✗ MISMATCH"
        print(f"  Status: {status}")

        if not match:
            print(f"\n  WARNING: Counts differ by {abs(counting.count - dfs_count):,}")

    @staticmethod
    def display_path_statistics(stats: PathStatistics) -> None:
        """Display path statistics."""
        StatisticsDisplay.display_header("PATH ANALYSIS")

        print(f"\nTotal paths: {stats.total_paths:,}")
        if not stats.total_paths:
            return

        print("\nPaths by first state:")
        for state, count in sorted(stats.start_distribution.items()):
            percentage = (count / stats.total_paths) * 100
            bar = "█" * int(percentage / 2)
            print(f"  {state}: {count:,} ({percentage:.1f}%) {bar}")

        print("\nPaths by last state:")
        for state, count in sorted(stats.end_distribution.items()):
            percentage = (count / stats.total_paths) * 100
            print(f"  {state}: {count:,} ({percentage:.1f}%)")

        print(
            f"\nTemperatures: min {_format_temp(stats.temperature_min)}, "
            f"max {_format_temp(stats.temperature_max)}, "
            f"mean {_format_temp(stats.temperature_mean)}"
        )

    @staticmethod
    def display_example_paths(
        accepted: List[AcceptedPath], title: str, max_examples: int = 3
    ) -> None:
        """Display example paths with a title."""
        print(f"\n{title}:")
        for i, item in enumerate(accepted[:max_examples], 1):
            print(f"\n{i}. {PathFormatter.format_path_with_metadata(item)}")


class ProgressReporter:
    """Handles progress and diagnostic messages for a run."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def report(self, message: str) -> None:
        if self.verbose:
            print(message)

    def report_errors(self, errors: Iterable[ConfigError]) -> None:
        for error in errors:
            self.report(error.message())

    def report_paths_found(self, count: int, total_states: int) -> None:
        self.report(f"Found {count:,} possible paths through {total_states} states")

    def report_paths_filtered(self, count: int) -> None:
        self.report(f"Found {count:,} paths suitable for temp range.")


def create_summary_report(stats: PathStatistics, accepted: Sequence[AcceptedPath]) -> str:
    """
    Create a summary report as a string.

    Useful for saving results to a file.
    """
    lines = []

    lines.append("STATE PATH SUMMARY")
    lines.append("=" * 70)
    lines.append(f"\nTotal suitable paths: {stats.total_paths:,}")

    if not stats.total_paths:
        return "\n".join(lines)

    lines.append(
        f"Temperature range seen: {_format_temp(stats.temperature_min)} to "
        f"{_format_temp(stats.temperature_max)} (mean {_format_temp(stats.temperature_mean)})"
    )

    most_common_start = max(stats.start_distribution.items(), key=lambda x: x[1])
    lines.append(
        f"Most common first state: {most_common_start[0]} "
        f"({most_common_start[1]:,} paths)"
    )

    lines.append("\nFirst path:")
    lines.append(f"  {PathFormatter.format_path(accepted[0], with_temps=True)}")

    return "\n".join(lines)

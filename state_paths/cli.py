#!/usr/bin/env python3
"""
Find trips through neighbouring U.S. states that stay within a comfortable
temperature range.

Example:
    state-paths --climate-data climatedata --region W --sub-region M \\
        --start-state NM --start-month 4 --interval "1 month" \\
        --min-temp 40 --max-temp 68 --with-temps
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from state_paths.constants import (
    DEFAULT_INTERVAL,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    DEFAULT_START_MONTH,
)
from state_paths.path_analyzer import analyze_paths
from state_paths.path_counter import MAX_COUNTABLE_STATES, count_hamiltonian_paths
from state_paths.path_display import (
    StatisticsDisplay,
    create_summary_report,
    to_records,
)
from state_paths.path_types import PathRequest, TripSettings
from state_paths.planner import StatePathPlanner
from state_paths.subgraph import build_bounded_adjacency


def _parse_state_range(text: str) -> Tuple[str, float, float]:
    """Parse "NC:40:70" into ("NC", 40.0, 70.0)."""
    try:
        state, low, high = text.split(":")
        return state.strip().upper(), float(low), float(high)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"State range must look like NC:40:70, got '{text}'"
        ) from None


def _parse_states(text: str) -> List[str]:
    return [state.strip().upper() for state in text.split(",") if state.strip()]


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a whole number, got '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"Must be 0 or more, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find paths through bordering states filtered by monthly temperature"
    )
    parser.add_argument(
        "--climate-data",
        type=str,
        help="NOAA state climatology file; without it paths are listed unfiltered",
    )

    states = parser.add_mutually_exclusive_group(required=True)
    states.add_argument(
        "--states", type=_parse_states, help="Comma separated state codes, e.g. OR,WA,CA"
    )
    states.add_argument("--region", type=str, help="Census region code (NE, MW, S, W)")
    parser.add_argument(
        "--sub-region", type=str, help="Census division code within --region (e.g. M, P)"
    )

    parser.add_argument("--start-state", type=str, help="State every path starts in")
    parser.add_argument("--end-state", type=str, help="State every path ends in")
    parser.add_argument(
        "--start-month", type=int, default=DEFAULT_START_MONTH, help="Month the trip starts (1-12)"
    )
    parser.add_argument(
        "--interval",
        type=str,
        default=DEFAULT_INTERVAL,
        help='Time spent in each state, e.g. "1 week" or "2 months"',
    )
    parser.add_argument("--min-temp", type=float, default=DEFAULT_MIN_TEMP)
    parser.add_argument("--max-temp", type=float, default=DEFAULT_MAX_TEMP)
    parser.add_argument(
        "--state-range",
        type=_parse_state_range,
        action="append",
        default=[],
        help="Per-state comfort range STATE:MIN:MAX (repeatable)",
    )
    parser.add_argument("--max-paths", type=_non_negative_int, help="Stop after this many paths")
    parser.add_argument("--with-temps", action="store_true", help="Show temperatures")
    parser.add_argument("--full-names", action="store_true", help="Show full state names")
    parser.add_argument("--output-json", type=str, help="Write accepted paths to a JSON file")
    parser.add_argument(
        "--verify-count",
        action="store_true",
        help="Cross-check the number of paths with an independent count",
    )
    parser.add_argument("--stats", action="store_true", help="Show path statistics")
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar while filtering"
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the paths")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = dict(
            start_month=args.start_month,
            interval=args.interval,
            min_temp=args.min_temp,
            max_temp=args.max_temp,
            state_ranges={state: (low, high) for state, low, high in args.state_range},
        )
        if args.climate_data:
            planner = StatePathPlanner.from_climate_file(
                args.climate_data, verbose=not args.quiet, **settings
            )
        else:
            planner = StatePathPlanner(
                settings=TripSettings.create(**settings), verbose=not args.quiet
            )
    except (OSError, ValueError) as e:
        parser.error(str(e))

    if args.states:
        states = args.states
    else:
        sub_region = args.sub_region.upper() if args.sub_region else None
        states = planner.get_states_by_region(args.region.upper(), sub_region)
        if not states:
            parser.error(f"No states in region {args.region} {args.sub_region or ''}".strip())

    request = PathRequest(
        states=states,
        start_state=args.start_state,
        end_state=args.end_state,
        max_paths=args.max_paths,
    )
    enumeration = planner.get_paths_for_request(request)
    if enumeration.errors and not enumeration.paths:
        return 1

    if args.verify_count and not enumeration.truncated:
        if enumeration.total_states > MAX_COUNTABLE_STATES:
            print(f"Skipping count check: more than {MAX_COUNTABLE_STATES} states")
        else:
            bounded = build_bounded_adjacency(states)
            counting = count_hamiltonian_paths(
                bounded.adjacency, states, planner.start_state, planner.end_state
            )
            StatisticsDisplay.display_counting_comparison(counting, enumeration.count)

    if not args.climate_data:
        for line in planner.list_paths(full_names=args.full_names):
            print(line + "\n")
        return 0

    paths = enumeration.paths
    if args.progress:
        paths = tqdm(paths, desc="Filtering paths", unit="path")
    filtered = planner.filter_by_temp_range(paths)

    for line in planner.list_paths(with_temps=args.with_temps, full_names=args.full_names):
        print(line + "\n")

    if args.stats:
        stats = analyze_paths(filtered.accepted)
        StatisticsDisplay.display_path_statistics(stats)
        StatisticsDisplay.display_example_paths(filtered.accepted, "Example paths")
        print("\n" + create_summary_report(stats, filtered.accepted))

    if args.output_json:
        output = {
            "states": list(states),
            "start_month": planner.settings.start_month,
            "interval": str(planner.settings.interval),
            "paths": to_records(filtered.accepted),
        }
        with open(Path(args.output_json), "w") as f:
            json.dump(output, f, indent=2)
        if not args.quiet:
            print(f"Saved {filtered.count:,} paths to {args.output_json}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

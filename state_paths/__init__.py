"""
State Paths

Enumerates every path through a set of bordering U.S. states and keeps the
ones whose monthly average temperatures stay within a comfort range for
the duration of the trip.
"""

from .path_types import (
    AcceptedPath,
    ComfortRange,
    EnumerationResult,
    FilterResult,
    Interval,
    NodeCode,
    Path,
    PathRequest,
    TripSettings,
)

from .errors import (
    AttributeLookupGap,
    ClimateDataError,
    InvalidStartConstraint,
    UnknownNodeError,
    UnknownStateError,
)

from .graph_data import (
    STATE_BORDERS,
    STATE_NAMES,
    classify,
    get_states_by_region,
    neighbors,
)

from .climate_data import load_climate_data, parse_climate_data

from .subgraph import build_bounded_adjacency

from .path_generator import enumerate_paths, generate_paths_lazy

from .path_counter import count_hamiltonian_paths

from .temperature_filter import filter_by_temp_range

from .path_display import PathFormatter

from .planner import StatePathPlanner

__version__ = "1.0.0"

__all__ = [
    # Types
    "AcceptedPath",
    "ComfortRange",
    "EnumerationResult",
    "FilterResult",
    "Interval",
    "NodeCode",
    "Path",
    "PathRequest",
    "TripSettings",
    # Errors
    "AttributeLookupGap",
    "ClimateDataError",
    "InvalidStartConstraint",
    "UnknownNodeError",
    "UnknownStateError",
    # Data
    "STATE_BORDERS",
    "STATE_NAMES",
    "classify",
    "get_states_by_region",
    "neighbors",
    "load_climate_data",
    "parse_climate_data",
    # Search and filtering
    "build_bounded_adjacency",
    "enumerate_paths",
    "generate_paths_lazy",
    "count_hamiltonian_paths",
    "filter_by_temp_range",
    # High-level
    "PathFormatter",
    "StatePathPlanner",
]

"""
Path analysis and statistics computation.
"""

from collections import Counter
from typing import Any, Callable, Dict, List, Sequence

import numpy as np

from state_paths.path_types import AcceptedPath, NodeCode, PathStatistics


def analyze_paths(accepted: Sequence[AcceptedPath]) -> PathStatistics:
    """
    Compute statistics about a collection of accepted paths.

    Temperature figures are taken over every stop of every path and are
    None when there are no paths.
    """
    start_counter = Counter(item.path[0] for item in accepted)
    end_counter = Counter(item.path[-1] for item in accepted)

    temps = np.array(
        [temp for item in accepted for temp in item.temperatures], dtype=float
    )
    if temps.size:
        temp_min, temp_max = float(temps.min()), float(temps.max())
        temp_mean = round(float(temps.mean()), 2)
    else:
        temp_min = temp_max = temp_mean = None

    return PathStatistics(
        total_paths=len(accepted),
        start_distribution=dict(start_counter),
        end_distribution=dict(end_counter),
        temperature_min=temp_min,
        temperature_max=temp_max,
        temperature_mean=temp_mean,
    )


def temperature_spread(item: AcceptedPath) -> float:
    """Difference between the warmest and coldest stop of a trip."""
    temps = np.asarray(item.temperatures, dtype=float)
    return float(np.ptp(temps)) if temps.size else 0.0


def paths_through(accepted: Sequence[AcceptedPath], state: NodeCode) -> List[AcceptedPath]:
    """Accepted paths that visit a specific state."""
    return [item for item in accepted if state in item.path]


def group_paths_by_feature(
    accepted: Sequence[AcceptedPath], feature_extractor: Callable[[AcceptedPath], Any]
) -> Dict[Any, List[AcceptedPath]]:
    """
    Group paths by a custom feature extraction function.

    This is a higher-order function that enables flexible grouping.

    Example:
        by_end = group_paths_by_feature(paths, lambda p: p.path[-1])
    """
    groups: Dict[Any, List[AcceptedPath]] = {}
    for item in accepted:
        groups.setdefault(feature_extractor(item), []).append(item)
    return groups

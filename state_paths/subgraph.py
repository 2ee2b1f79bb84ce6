"""
Restrict the border table to a working set of states.
"""

from typing import Iterable, List, Optional

from state_paths.errors import UnknownNodeError
from state_paths.graph_data import STATE_BORDERS
from state_paths.path_types import Adjacency, BoundedAdjacencyResult, NodeCode


def normalize_code(code: Optional[NodeCode]) -> Optional[NodeCode]:
    """Strip and upper-case a single code; None stays None."""
    return code.strip().upper() if code else None


def normalize_states(states: Iterable[NodeCode]) -> List[NodeCode]:
    """Upper-case codes and drop repeats, keeping first occurrence order."""
    seen = {}
    for state in states:
        seen.setdefault(state.strip().upper(), None)
    return list(seen)


def build_bounded_adjacency(
    states: Iterable[NodeCode], full_adjacency: Optional[Adjacency] = None
) -> BoundedAdjacencyResult:
    """
    Keep only borders whose both ends are in `states`.

    Each known state maps to its in-set neighbours in source order (possibly
    an empty list). Unknown states are left out of the table and reported in
    `errors` instead.

    Args:
        states: The working set of state codes
        full_adjacency: Border table to restrict (defaults to STATE_BORDERS)

    Returns:
        BoundedAdjacencyResult with the restricted table and unknown codes
    """
    borders = STATE_BORDERS if full_adjacency is None else full_adjacency
    members = normalize_states(states)
    member_set = set(members)

    adjacency = {}
    errors = []
    for state in members:
        if state not in borders:
            errors.append(UnknownNodeError(state))
            continue
        adjacency[state] = [border for border in borders[state] if border in member_set]

    return BoundedAdjacencyResult(adjacency=adjacency, errors=errors)

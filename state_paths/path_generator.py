"""
Path generation using depth-first search.

Generates every simple path that visits each of the requested states
exactly once, moving only between bordering states.

IMPORTANT: The search is exhaustive and its cost grows factorially with
the number of states. It is meant for a handful of states up to a few
dozen in sparse regions; piece longer trips together from smaller ones.
"""

from itertools import islice
from typing import Generator, Iterable, List, Optional

from state_paths.errors import InvalidStartConstraint, UnknownNodeError
from state_paths.graph_data import STATE_BORDERS
from state_paths.path_types import (
    Adjacency,
    ConfigError,
    EnumerationResult,
    NodeCode,
    Path,
)
from state_paths.subgraph import normalize_code, normalize_states


def _depth_first_search(
    adjacency: Adjacency,
    current_node: NodeCode,
    current_path: List[NodeCode],
    total_states: int,
) -> Generator[Path, None, None]:
    """
    Generator that yields all complete paths extending current_path.

    current_path doubles as the visited set; each frame appends its node on
    entry and pops it on exit.
    """
    current_path.append(current_node)

    if len(current_path) == total_states:
        yield tuple(current_path)
    else:
        for next_node in adjacency.get(current_node, []):
            if next_node not in current_path:
                yield from _depth_first_search(
                    adjacency, next_node, current_path, total_states
                )

    current_path.pop()


def generate_paths_lazy(
    adjacency: Adjacency, start_node: NodeCode, total_states: int
) -> Generator[Path, None, None]:
    """
    Lazily generate paths of `total_states` states rooted at start_node.

    Use this when you don't need all paths in memory at once. Paths come
    out depth-first in the neighbour order of the adjacency table.
    """
    yield from _depth_first_search(adjacency, start_node, [], total_states)


def _validate_endpoint(
    code: Optional[NodeCode],
    role: str,
    members: List[NodeCode],
    full_adjacency: Adjacency,
) -> Optional[ConfigError]:
    if code is None:
        return None
    if code not in full_adjacency:
        return UnknownNodeError(code, role)
    if role == "start" and code not in members:
        return InvalidStartConstraint(code)
    return None


def _iter_roots(
    adjacency: Adjacency,
    roots: Iterable[NodeCode],
    total_states: int,
    full_adjacency: Adjacency,
    errors: List[ConfigError],
) -> Generator[Path, None, None]:
    for root in roots:
        if root not in full_adjacency:
            errors.append(UnknownNodeError(root))
            continue
        yield from generate_paths_lazy(adjacency, root, total_states)


def enumerate_paths(
    states: Iterable[NodeCode],
    adjacency: Adjacency,
    start_node: Optional[NodeCode] = None,
    end_node: Optional[NodeCode] = None,
    max_paths: Optional[int] = None,
    full_adjacency: Optional[Adjacency] = None,
) -> EnumerationResult:
    """
    Enumerate every path that visits each state in `states` exactly once.

    Without a start node, a separate search is rooted at every state in
    order, so reversals and other orderings of the same states are all
    produced. The end node is applied as a filter on the last state.

    Args:
        states: The working set; the path length equals its size
        adjacency: Border table restricted to `states`
        start_node: Optional fixed first state (must be one of `states`)
        end_node: Optional fixed last state
        max_paths: Optional cap on the number of paths returned
        full_adjacency: Table used to decide whether a code is known
            (defaults to STATE_BORDERS)

    Returns:
        EnumerationResult with the paths in generation order and any
        configuration errors. A bad start or end node yields no paths.

    Raises:
        ValueError: if max_paths is negative
    """
    if max_paths is not None and max_paths < 0:
        raise ValueError(f"max_paths must be non-negative, got {max_paths}")

    known = STATE_BORDERS if full_adjacency is None else full_adjacency
    members = normalize_states(states)
    total_states = len(members)
    start_node = normalize_code(start_node)
    end_node = normalize_code(end_node)

    errors: List[ConfigError] = []
    for code, role in ((start_node, "start"), (end_node, "end")):
        error = _validate_endpoint(code, role, members, known)
        if error is not None:
            errors.append(error)
    if errors or total_states == 0:
        return EnumerationResult(paths=[], total_states=total_states, errors=errors)

    roots = [start_node] if start_node else members
    candidates = _iter_roots(adjacency, roots, total_states, known, errors)
    if end_node:
        candidates = (path for path in candidates if path[-1] == end_node)

    if max_paths is None:
        paths = list(candidates)
        truncated = False
    else:
        paths = list(islice(candidates, max_paths))
        truncated = next(candidates, None) is not None

    return EnumerationResult(
        paths=paths, total_states=total_states, errors=errors, truncated=truncated
    )


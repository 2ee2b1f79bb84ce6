"""
Path counting without enumeration.

Counts the paths the depth-first search should produce using a bitmask
dynamic program over an adjacency matrix, so the two methods can be
checked against each other. Also answers reachability questions, which
tell early whether a set of states can be covered by a single path at all.
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from state_paths.path_types import Adjacency, CountingResult, NodeCode
from state_paths.subgraph import normalize_code, normalize_states

# Memory for the table grows as 2**n * n
MAX_COUNTABLE_STATES = 18


def _build_adjacency_matrix(
    adjacency: Adjacency, nodes: Sequence[NodeCode]
) -> Tuple[np.ndarray, Dict[NodeCode, int]]:
    """
    Build adjacency matrix and node index mapping.

    Args:
        adjacency: Border table restricted to `nodes`
        nodes: Node order for the matrix rows and columns

    Returns:
        Tuple of (adjacency_matrix, node_to_index_mapping)
    """
    node_to_idx = {node: i for i, node in enumerate(nodes)}

    matrix = np.zeros((len(nodes), len(nodes)), dtype=np.int64)
    for node in nodes:
        for next_node in adjacency.get(node, []):
            if next_node in node_to_idx:
                matrix[node_to_idx[node], node_to_idx[next_node]] = 1

    return matrix, node_to_idx


def _count_from_root(matrix: np.ndarray, root: int) -> np.ndarray:
    """
    Number of paths from root covering every node, by final node.

    table[mask, v] holds the number of paths that start at root, visit
    exactly the nodes in mask and end at v.
    """
    n = len(matrix)
    full_mask = (1 << n) - 1
    table = np.zeros((1 << n, n), dtype=np.int64)
    table[1 << root, root] = 1

    for mask in range(1 << n):
        row = table[mask]
        if not row.any():
            continue
        extensions = row @ matrix
        for node in np.nonzero(extensions)[0]:
            bit = 1 << int(node)
            if not mask & bit:
                table[mask | bit, node] += extensions[node]

    return table[full_mask]


def count_hamiltonian_paths(
    adjacency: Adjacency,
    states: Sequence[NodeCode],
    start_node: Optional[NodeCode] = None,
    end_node: Optional[NodeCode] = None,
) -> CountingResult:
    """
    Count paths visiting every state exactly once, honouring fixed endpoints.

    This is a pure function and gives the same total as enumerate_paths
    for valid inputs. States missing from the adjacency table make the
    count zero, since no path can visit them.

    Raises:
        ValueError: if there are more states than MAX_COUNTABLE_STATES
    """
    nodes = normalize_states(states)
    if len(nodes) > MAX_COUNTABLE_STATES:
        raise ValueError(
            f"Counting supports at most {MAX_COUNTABLE_STATES} states, got {len(nodes)}"
        )
    if not nodes or any(node not in adjacency for node in nodes):
        return CountingResult(count=0, by_start={})

    matrix, node_to_idx = _build_adjacency_matrix(adjacency, nodes)
    start_node = normalize_code(start_node)
    roots = [start_node] if start_node else nodes

    by_start = {}
    for root in roots:
        if root not in node_to_idx:
            continue
        ends = _count_from_root(matrix, node_to_idx[root])
        if end_node:
            end_idx = node_to_idx.get(normalize_code(end_node))
            count = int(ends[end_idx]) if end_idx is not None else 0
        else:
            count = int(ends.sum())
        if count > 0:
            by_start[root] = count

    return CountingResult(count=sum(by_start.values()), by_start=by_start)


def get_reachable_nodes(
    adjacency: Adjacency, start_node: NodeCode, max_steps: Optional[int] = None
) -> Set[NodeCode]:
    """
    Find all nodes reachable from start_node within max_steps borders.

    Useful for understanding why a set of states yields no paths.
    """
    nodes = list(adjacency)
    matrix, node_to_idx = _build_adjacency_matrix(adjacency, nodes)
    steps = len(nodes) if max_steps is None else max_steps

    # Sum powers of adjacency matrix up to max_steps
    reachability = np.eye(len(matrix), dtype=bool)
    current = np.eye(len(matrix), dtype=bool)

    for _ in range(steps):
        current = (current.astype(np.int64) @ matrix).astype(bool)
        reachability |= current

    idx_to_node = {v: k for k, v in node_to_idx.items()}
    reachable_indices = np.where(reachability[node_to_idx[start_node]])[0]

    return {idx_to_node[int(idx)] for idx in reachable_indices}


def is_connected(adjacency: Adjacency) -> bool:
    """Whether every state in the table can reach every other one."""
    nodes = list(adjacency)
    if not nodes:
        return True
    return get_reachable_nodes(adjacency, nodes[0]) == set(nodes)


def isolated_states(adjacency: Adjacency) -> List[NodeCode]:
    """States with no border inside the working set."""
    return [node for node, borders in adjacency.items() if not borders]

"""Path searches over a ``DirectedGraph``.

Every search takes the graph plus start and target vertex keys and returns a
``Path`` or None. None covers both an unknown key and an unreachable target;
check membership with ``key in graph`` to tell them apart.
"""

from routegraph.algorithms.bfs import bfs
from routegraph.algorithms.dfs import dfs
from routegraph.algorithms.search import find_path
from routegraph.algorithms.spf import (
    a_star,
    dijkstra,
    dijkstra_by_a_star,
    zero_heuristic,
)

__all__ = [
    "a_star",
    "bfs",
    "dfs",
    "dijkstra",
    "dijkstra_by_a_star",
    "find_path",
    "zero_heuristic",
]

"""Single entry point dispatching to the individual search algorithms."""

from __future__ import annotations

from typing import Hashable, Optional, Union

from routegraph.algorithms.bfs import bfs
from routegraph.algorithms.dfs import dfs
from routegraph.algorithms.spf import a_star, dijkstra
from routegraph.graph.directed_graph import DirectedGraph
from routegraph.model.path import Path
from routegraph.types.base import HeuristicFunc, SearchAlgorithm, WeightFunc


def find_path(
    graph: DirectedGraph,
    start_id: Hashable,
    target_id: Hashable,
    algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.DIJKSTRA,
    weight_func: Optional[WeightFunc] = None,
    heuristic: Optional[HeuristicFunc] = None,
) -> Optional[Path]:
    """Search ``graph`` with the chosen algorithm.

    Args:
        graph: Graph to search.
        start_id: Key of the start vertex.
        target_id: Key of the target vertex.
        algorithm: A ``SearchAlgorithm`` member or its name (case-insensitive).
        weight_func: Edge weight function, weighted algorithms only.
        heuristic: Remaining-cost estimate, A* only.

    Returns:
        The path found, or None when there is none.

    Raises:
        ValueError: If the algorithm name is unknown, or a weight function or
            heuristic is passed to an algorithm that does not use it.
    """
    if isinstance(algorithm, str):
        algorithm = SearchAlgorithm.from_string(algorithm)

    if heuristic is not None and algorithm != SearchAlgorithm.A_STAR:
        raise ValueError(f"{algorithm.name} does not take a heuristic")

    if algorithm in (SearchAlgorithm.DFS, SearchAlgorithm.BFS):
        if weight_func is not None:
            raise ValueError(
                f"{algorithm.name} counts hops and takes no weight function"
            )
        search = dfs if algorithm == SearchAlgorithm.DFS else bfs
        return search(graph, start_id, target_id)

    if algorithm == SearchAlgorithm.DIJKSTRA:
        return dijkstra(graph, start_id, target_id, weight_func)
    return a_star(graph, start_id, target_id, weight_func, heuristic)

"""Shortest-path-first (SPF) searches: Dijkstra and A*.

Both searches share one label-setting loop. Each discovered vertex gets a
progress record holding its best known weight from the start, the edge that
achieved it and whether it is settled. The loop settles the open vertex with
the lowest priority, then relaxes its outgoing edges. Dijkstra's priority is
the best weight; A* adds a heuristic estimate of the remaining cost.

Notes:
    Ties in priority go to the candidate queued first: the open set is a heap
    of ``(priority, insertion sequence, vertex id)`` entries.

    Weight and heuristic functions are trusted. Negative weights or a
    heuristic that overestimates give wrong paths, not errors. A settled
    vertex is never reopened, so A* is only guaranteed optimal for a
    consistent heuristic (``h(u) <= w(u, v) + h(v)`` for every edge), such
    as straight-line distance on a map.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Hashable, List, Optional, Set, Tuple

from routegraph.algorithms.path_utils import trace_back
from routegraph.config import SEARCH_CONFIG
from routegraph.graph.directed_graph import DirectedGraph
from routegraph.graph.elements import Edge, Vertex, VertexID
from routegraph.logging import get_logger
from routegraph.model.path import Path
from routegraph.types.base import Cost, HeuristicFunc, WeightFunc

logger = get_logger(__name__)


def zero_heuristic(vertex: Vertex, target: Vertex) -> float:
    """Heuristic that knows nothing. A* with it behaves exactly like Dijkstra."""
    return 0.0


@dataclass
class _SearchNode:
    """Progress record of one discovered vertex."""

    vertex: Vertex
    best_weight: Cost = math.inf
    via_edge: Optional[Edge] = None
    settled: bool = False
    # Heuristic estimate to the target; computed once, A* only.
    estimate: Optional[float] = None

    @property
    def priority(self) -> float:
        if self.estimate is None:
            return self.best_weight
        return self.best_weight + self.estimate


def _label_setting(
    algorithm: str,
    graph: DirectedGraph,
    start_id: Hashable,
    target_id: Hashable,
    weight_func: Optional[WeightFunc],
    heuristic: Optional[HeuristicFunc],
) -> Optional[Path]:
    start = graph.get_vertex(start_id)
    target = graph.get_vertex(target_id)
    if start is None or target is None:
        logger.debug("%s %r -> %r: unknown vertex", algorithm, start_id, target_id)
        return None

    if start is target:
        return Path.trivial(start)

    weight_of = weight_func or SEARCH_CONFIG.edge_weight
    records: Dict[VertexID, _SearchNode] = {}
    visited: Set[Vertex] = {start}
    sequence = count()

    def discover(vertex: Vertex) -> _SearchNode:
        node = records.get(vertex.id)
        if node is None:
            node = _SearchNode(vertex)
            if heuristic is not None:
                node.estimate = heuristic(vertex, target)
            records[vertex.id] = node
        return node

    origin = discover(start)
    origin.best_weight = 0.0
    open_heap: List[Tuple[float, int, VertexID]] = [
        (origin.priority, next(sequence), start.id)
    ]

    while open_heap:
        _, _, vertex_id = heappop(open_heap)
        current = records[vertex_id]
        if current.settled:
            # Superseded heap entry
            continue
        current.settled = True
        if current.vertex is target:
            break

        for edge in current.vertex.edges:
            nxt = edge.target
            visited.add(nxt)
            node = discover(nxt)
            if node.settled:
                continue
            candidate = current.best_weight + weight_of(edge)
            if candidate < node.best_weight:
                node.best_weight = candidate
                node.via_edge = edge
                heappush(open_heap, (node.priority, next(sequence), nxt.id))

    goal = records.get(target.id)
    if goal is None or not goal.settled:
        logger.debug(
            "%s %r -> %r: no route, %d visited",
            algorithm,
            start_id,
            target_id,
            len(visited),
        )
        return None

    edges = trace_back(start, target, lambda vid: records[vid].via_edge)
    logger.debug(
        "%s %r -> %r: weight=%s hops=%d settled=%d visited=%d",
        algorithm,
        start_id,
        target_id,
        goal.best_weight,
        len(edges),
        sum(1 for n in records.values() if n.settled),
        len(visited),
    )
    return Path.from_edges(start, edges, goal.best_weight, visited)


def dijkstra(
    graph: DirectedGraph,
    start_id: Hashable,
    target_id: Hashable,
    weight_func: Optional[WeightFunc] = None,
) -> Optional[Path]:
    """Compute the minimum-weight path with Dijkstra's algorithm.

    Args:
        graph: Graph to search. Not modified.
        start_id: Key of the start vertex.
        target_id: Key of the target vertex.
        weight_func: Maps an edge to a non-negative, finite weight. Defaults
            to ``SEARCH_CONFIG.edge_weight``, which reads the edge payload.

    Returns:
        The shortest path, its ``weight`` being the summed edge weight, or
        None if either key is unknown or the target cannot be reached.
    """
    return _label_setting("dijkstra", graph, start_id, target_id, weight_func, None)


def a_star(
    graph: DirectedGraph,
    start_id: Hashable,
    target_id: Hashable,
    weight_func: Optional[WeightFunc] = None,
    heuristic: Optional[HeuristicFunc] = None,
) -> Optional[Path]:
    """Compute the minimum-weight path with A*.

    Vertices are settled in order of ``best_weight + heuristic(vertex,
    target)``. The heuristic is called at most once per vertex, when the
    vertex is first discovered.

    Args:
        graph: Graph to search. Not modified.
        start_id: Key of the start vertex.
        target_id: Key of the target vertex.
        weight_func: Maps an edge to a non-negative, finite weight. Defaults
            to ``SEARCH_CONFIG.edge_weight``.
        heuristic: Lower bound on the remaining weight from a vertex to the
            target. Defaults to :func:`zero_heuristic`.

    Returns:
        The shortest path, or None if either key is unknown or the target
        cannot be reached.
    """
    return _label_setting(
        "a_star",
        graph,
        start_id,
        target_id,
        weight_func,
        heuristic or zero_heuristic,
    )


def dijkstra_by_a_star(
    graph: DirectedGraph,
    start_id: Hashable,
    target_id: Hashable,
    weight_func: Optional[WeightFunc] = None,
) -> Optional[Path]:
    """Run :func:`a_star` with :func:`zero_heuristic`."""
    return a_star(graph, start_id, target_id, weight_func, zero_heuristic)

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Hashable, Optional, Set

from routegraph.algorithms.path_utils import trace_back
from routegraph.graph.directed_graph import DirectedGraph
from routegraph.graph.elements import Edge, Vertex, VertexID
from routegraph.logging import get_logger
from routegraph.model.path import Path

logger = get_logger(__name__)


def bfs(
    graph: DirectedGraph,
    start_id: Hashable,
    target_id: Hashable,
) -> Optional[Path]:
    """
    Breadth-first search for a path with the fewest edges.

    Vertices are expanded level by level; within a level, in the order they
    were discovered, and their edges in insertion order. The search stops as
    soon as the target is discovered, so ``Path.visited`` holds every vertex
    reached up to that moment.

    Args:
        graph: Graph to search. Not modified.
        start_id: Key of the start vertex.
        target_id: Key of the target vertex.

    Returns:
        A minimum-hop path with ``weight`` equal to its number of edges, or
        None if either key is unknown or the target cannot be reached.
    """
    start = graph.get_vertex(start_id)
    target = graph.get_vertex(target_id)
    if start is None or target is None:
        logger.debug("bfs %r -> %r: unknown vertex", start_id, target_id)
        return None

    if start is target:
        return Path.trivial(start)

    visited: Set[Vertex] = {start}
    via: Dict[VertexID, Edge] = {}
    queue: Deque[Vertex] = deque([start])

    while queue:
        vertex = queue.popleft()
        for edge in vertex.edges:
            nxt = edge.target
            if nxt in visited:
                continue
            visited.add(nxt)
            via[nxt.id] = edge

            if nxt is target:
                edges = trace_back(start, target, via.get)
                logger.debug(
                    "bfs %r -> %r: %d hops, %d visited",
                    start_id,
                    target_id,
                    len(edges),
                    len(visited),
                )
                return Path.from_edges(start, edges, len(edges), visited)

            queue.append(nxt)

    logger.debug(
        "bfs %r -> %r: no route, %d visited", start_id, target_id, len(visited)
    )
    return None

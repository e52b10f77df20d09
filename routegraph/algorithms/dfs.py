"""Depth-first search between two vertices."""

from __future__ import annotations

from typing import Hashable, Iterator, List, Optional, Set

from routegraph.graph.directed_graph import DirectedGraph
from routegraph.graph.elements import Edge, Vertex
from routegraph.logging import get_logger
from routegraph.model.path import Path

logger = get_logger(__name__)


def dfs(
    graph: DirectedGraph,
    start_id: Hashable,
    target_id: Hashable,
) -> Optional[Path]:
    """Find a path from ``start_id`` to ``target_id`` depth-first.

    Outgoing edges are tried in insertion order and the search descends into
    the first target it has not seen yet. Every vertex touched, dead ends
    included, ends up in ``Path.visited``.

    The traversal keeps its own stack of edge iterators instead of recursing,
    so chains longer than the interpreter recursion limit are fine. It visits
    vertices in exactly the order a recursive formulation would.

    Args:
        graph: Graph to search. Not modified.
        start_id: Key of the start vertex.
        target_id: Key of the target vertex.

    Returns:
        The first path found, with ``weight`` equal to its number of edges,
        or None if either key is unknown or the target cannot be reached.
    """
    start = graph.get_vertex(start_id)
    target = graph.get_vertex(target_id)
    if start is None or target is None:
        logger.debug("dfs %r -> %r: unknown vertex", start_id, target_id)
        return None

    if start is target:
        return Path.trivial(start)

    visited: Set[Vertex] = {start}
    # stack[k] iterates the edges of the vertex reached through trail[k - 1]
    stack: List[Iterator[Edge]] = [iter(start.edges)]
    trail: List[Edge] = []

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            if trail:
                trail.pop()
            continue

        nxt = edge.target
        if nxt in visited:
            continue
        visited.add(nxt)
        trail.append(edge)

        if nxt is target:
            logger.debug(
                "dfs %r -> %r: %d hops, %d visited",
                start_id,
                target_id,
                len(trail),
                len(visited),
            )
            return Path.from_edges(start, trail, len(trail), visited)

        stack.append(iter(nxt.edges))

    logger.debug(
        "dfs %r -> %r: no route, %d visited", start_id, target_id, len(visited)
    )
    return None

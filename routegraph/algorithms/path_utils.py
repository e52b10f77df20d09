from __future__ import annotations

from typing import Callable, List, Optional

from routegraph.graph.elements import Edge, Vertex, VertexID


def trace_back(
    start: Vertex,
    target: Vertex,
    via_edge: Callable[[VertexID], Optional[Edge]],
) -> List[Edge]:
    """
    Rebuild the edge sequence from ``start`` to ``target`` out of back-pointers.

    Args:
        start: First vertex of the path.
        target: Last vertex of the path.
        via_edge: Returns the edge a search used to reach the given vertex id,
            or None for vertices it never reached.

    Returns:
        Edges in travel order, start first.

    Raises:
        ValueError: If the back-pointers do not lead from ``target`` to ``start``.
    """
    edges: List[Edge] = []
    seen = {target.id}
    at = target
    while at is not start:
        edge = via_edge(at.id)
        if edge is None or edge.source.id in seen:
            raise ValueError(
                f"No back-pointer chain from {target.id!r} to {start.id!r}."
            )
        edges.append(edge)
        at = edge.source
        seen.add(at.id)
    edges.reverse()
    return edges

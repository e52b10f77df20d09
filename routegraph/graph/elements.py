"""Vertex and edge types stored in a :class:`DirectedGraph`.

Vertices compare and hash by identity: two distinct objects that share a key
are different vertices, and the container refuses to link both of them (see
:class:`routegraph.graph.errors.InvariantViolation`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, List, Optional

VertexID = Hashable


class Vertex:
    """A uniquely keyed node owning its outgoing edges.

    Domain code may subclass ``Vertex`` to carry extra data (coordinates,
    names, ...). The key passed to the constructor never changes.

    Args:
        vertex_id: Key identifying the vertex inside a graph, usually a
            ``str`` or ``int``.
    """

    def __init__(self, vertex_id: VertexID) -> None:
        self._id = vertex_id
        self._edges: List[Edge] = []

    @property
    def id(self) -> VertexID:
        return self._id

    @property
    def edges(self) -> List[Edge]:
        """Outgoing edges in insertion order.

        The list is owned by the vertex; add edges through
        :meth:`DirectedGraph.add_or_get_edge` so the graph invariants hold.
        """
        return self._edges

    def find_edge_to(self, target_id: VertexID) -> Optional[Edge]:
        """Return the outgoing edge whose target has ``target_id``, if any."""
        for edge in self._edges:
            if edge.target.id == target_id:
                return edge
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"

    def __str__(self) -> str:
        targets = ", ".join(str(e.target.id) for e in self._edges)
        return f"{self._id}: [{targets}]"


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed arc between two registered vertices.

    Attributes:
        source: Vertex the edge leaves. The edge lives in ``source.edges``.
        target: Vertex the edge enters.
        data: Payload a weight function reads (a number, a mapping of
            attributes, or any domain object).
    """

    source: Vertex
    target: Vertex
    data: Any = None

    @property
    def source_id(self) -> VertexID:
        return self.source.id

    @property
    def target_id(self) -> VertexID:
        return self.target.id

    def __repr__(self) -> str:
        return f"Edge({self.source.id!r} -> {self.target.id!r}, data={self.data!r})"

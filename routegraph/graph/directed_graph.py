"""Directed graph container with strict vertex identity.

The container owns a mapping from vertex key to vertex. Edges are not stored
by the container itself; each edge lives in the outgoing list of its source
vertex and is reached through that vertex.

Invariants maintained by every mutating method:
  - Vertex keys are unique.
  - Every edge endpoint is the very instance registered under its key.
  - Every edge in ``v.edges`` has ``edge.source is v``.
  - A vertex holds at most one edge per target key.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set, Tuple, TypeVar

from routegraph.graph.elements import Edge, Vertex, VertexID
from routegraph.graph.errors import InvariantViolation
from routegraph.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V", bound=Vertex)
E = TypeVar("E", bound=Edge)


class DirectedGraph:
    """A directed graph of uniquely keyed vertices.

    Vertices are kept in insertion order. The graph performs no locking;
    callers must serialize mutations. Searches only read the graph.
    """

    def __init__(self) -> None:
        self._vertices: Dict[VertexID, Vertex] = {}

    #
    # Vertex management
    #
    def add_or_get_vertex(self, vertex: V) -> V:
        """Register ``vertex`` unless its key is already taken.

        Args:
            vertex: The vertex to add.

        Returns:
            The instance already registered under ``vertex.id``, unchanged,
            or ``vertex`` itself when it has just been added.
        """
        existing = self._vertices.get(vertex.id)
        if existing is not None:
            return existing  # type: ignore[return-value]
        self._vertices[vertex.id] = vertex
        return vertex

    def add_vertices(self, *vertices: Vertex) -> int:
        """Add several vertices.

        Args:
            *vertices: Vertices to add.

        Returns:
            The number of vertices that were actually inserted. Vertices whose
            key is already registered, including re-added instances, don't
            count.
        """
        added = 0
        for vertex in vertices:
            if vertex.id not in self._vertices:
                self._vertices[vertex.id] = vertex
                added += 1
        return added

    def get_vertex(self, vertex_id: VertexID) -> Optional[Vertex]:
        """Return the vertex registered under ``vertex_id``, or None."""
        return self._vertices.get(vertex_id)

    def vertices(self) -> List[Vertex]:
        """Return all vertices in insertion order."""
        return list(self._vertices.values())

    def vertex_count(self) -> int:
        return len(self._vertices)

    #
    # Edge management
    #
    def add_or_get_edge(self, edge: E) -> E:
        """Link ``edge`` into its source vertex.

        Missing endpoints are registered first. If the source vertex already
        has an edge to the same target key, that edge is returned and
        ``edge`` is discarded.

        Args:
            edge: The edge to add.

        Returns:
            The pre-existing edge between the same pair of keys, or ``edge``
            itself when it has just been added.

        Raises:
            InvariantViolation: If ``edge.source`` or ``edge.target`` shares a
                key with a different, already registered vertex instance. The
                graph is left unchanged.
        """
        linked, _ = self._link(edge)
        return linked  # type: ignore[return-value]

    def add_edges(self, *edges: Edge) -> int:
        """Add several edges.

        Args:
            *edges: Edges to add.

        Returns:
            The number of edges that were actually inserted.

        Raises:
            InvariantViolation: As for :meth:`add_or_get_edge`. Edges before
                the offending one remain inserted.
        """
        return sum(1 for e in edges if self._link(e)[1])

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by source vertex in insertion order."""
        for vertex in self._vertices.values():
            yield from vertex.edges

    def edge_count(self) -> int:
        return sum(len(v.edges) for v in self._vertices.values())

    def _link(self, edge: Edge) -> Tuple[Edge, bool]:
        """Insert ``edge`` unless its key pair is taken; report whether it was."""
        # Both endpoints are checked before either one is registered.
        self._check_endpoint(edge.source)
        self._check_endpoint(edge.target)
        source = self.add_or_get_vertex(edge.source)
        self.add_or_get_vertex(edge.target)

        existing = source.find_edge_to(edge.target.id)
        if existing is not None:
            return existing, False
        source.edges.append(edge)
        return edge, True

    def _check_endpoint(self, vertex: Vertex) -> None:
        registered = self._vertices.get(vertex.id)
        if registered is not None and registered is not vertex:
            logger.warning(
                "Rejected edge endpoint %r: key is bound to another instance",
                vertex.id,
            )
            raise InvariantViolation(vertex.id)

    #
    # Maintenance
    #
    def prune_unconnected(self) -> int:
        """Remove vertices that have no outgoing edges and no incoming edges.

        Connectivity is decided on the graph as it is before any removal.

        Returns:
            The number of vertices removed.
        """
        targets: Set[VertexID] = {e.target.id for e in self.edges()}
        doomed = [
            vid
            for vid, vertex in self._vertices.items()
            if not vertex.edges and vid not in targets
        ]
        for vid in doomed:
            del self._vertices[vid]
        logger.debug("Pruned %d unconnected vertices", len(doomed))
        return len(doomed)

    #
    # Container protocol
    #
    def __contains__(self, vertex_id: object) -> bool:
        try:
            return vertex_id in self._vertices
        except TypeError:
            # unhashable keys can never be registered
            return False

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )

    def __str__(self) -> str:
        body = ",\n  ".join(str(v) for v in self._vertices.values())
        return "{ " + body + "\n}"

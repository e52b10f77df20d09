"""Result of a successful search.

A ``Path`` records where a search started, the edges it took to reach the
target, the accumulated weight and every vertex the search touched on the
way. Searches build a fresh instance per call and never modify it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import FrozenSet, Iterable, Iterator, Tuple

from routegraph.graph.elements import Edge, Vertex, VertexID
from routegraph.types.base import Cost


@dataclass(frozen=True, eq=False)
class Path:
    """A route from ``start`` along ``edges``.

    Attributes:
        start: The vertex the path begins at.
        edges: Edges from start to target in travel order. Empty when the
            search started at its target.
        weight: Hop count for DFS/BFS, summed edge weight for Dijkstra/A*.
        visited: Vertices the search touched, a superset of the path's own
            vertices.

    Raises:
        ValueError: If the edges do not form a chain starting at ``start``.
    """

    start: Vertex
    edges: Tuple[Edge, ...] = ()
    weight: Cost = 0.0
    visited: FrozenSet[Vertex] = field(default_factory=frozenset, repr=False)

    def __post_init__(self) -> None:
        # Accept any iterable for convenience; store immutable containers.
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "visited", frozenset(self.visited))

        at = self.start
        for idx, edge in enumerate(self.edges):
            if edge.source is not at:
                raise ValueError(
                    f"Edge {idx} ({edge.source_id!r} -> {edge.target_id!r}) "
                    f"does not continue from {at.id!r}."
                )
            at = edge.target

    @classmethod
    def trivial(cls, start: Vertex) -> Path:
        """Return the zero-length path of a search whose start is its target."""
        return cls(start=start, edges=(), weight=0.0, visited=frozenset((start,)))

    @classmethod
    def from_edges(
        cls,
        start: Vertex,
        edges: Iterable[Edge],
        weight: Cost,
        visited: Iterable[Vertex],
    ) -> Path:
        """Build the result of a finished search.

        Searches pass their working containers; they are copied into a tuple
        and a frozenset here.
        """
        return cls(
            start=start, edges=tuple(edges), weight=weight, visited=frozenset(visited)
        )

    @property
    def target(self) -> Vertex:
        """The vertex the path ends at."""
        return self.edges[-1].target if self.edges else self.start

    @cached_property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Vertices along the path, start first."""
        return (self.start,) + tuple(e.target for e in self.edges)

    @cached_property
    def vertex_ids(self) -> Tuple[VertexID, ...]:
        return tuple(v.id for v in self.vertices)

    @cached_property
    def visited_ids(self) -> FrozenSet[VertexID]:
        return frozenset(v.id for v in self.visited)

    def __len__(self) -> int:
        """Number of edges (hops) in the path."""
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __str__(self) -> str:
        route = ", ".join(str(vid) for vid in self.vertex_ids)
        return (
            f"Weight={self.weight:f} Length={len(self.vertices)} "
            f"Visited={len(self.visited)} ({route})"
        )

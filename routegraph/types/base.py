"""Type aliases and enums shared by the search algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Union

from routegraph.graph.elements import Edge, Vertex

#: Numeric weight of an edge or of a whole path.
Cost = Union[int, float]

#: Maps an edge to its weight. Weights must be non-negative and finite; this
#: is not checked.
WeightFunc = Callable[[Edge], float]

#: Lower bound of the remaining cost from a vertex (first argument) to the
#: search target (second argument). Must never overestimate; not checked.
HeuristicFunc = Callable[[Vertex, Vertex], float]


class SearchAlgorithm(IntEnum):
    """Path search strategies available through ``find_path``."""

    #: Depth-first, insertion-order exploration. Weight is the hop count.
    DFS = 1
    #: Breadth-first. Minimum hop count.
    BFS = 2
    #: Minimum summed edge weight.
    DIJKSTRA = 3
    #: Minimum summed edge weight guided by a heuristic.
    A_STAR = 4

    @classmethod
    def from_string(cls, value: str) -> "SearchAlgorithm":
        """Parse a case-insensitive name such as ``"bfs"`` or ``"a-star"``.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid search algorithm '{value}'. Valid values are: {valid}"
            ) from None

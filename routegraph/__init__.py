"""routegraph: directed graphs with path searches.

routegraph stores caller-defined vertices and edges in a ``DirectedGraph``
and answers connectivity and shortest-route queries over them.

Primary API:
    DirectedGraph, Vertex, Edge - graph container and its elements
    dfs(), bfs() - hop-counting searches
    dijkstra(), a_star() - minimum-weight searches
    find_path() - dispatch by ``SearchAlgorithm``
    Path - search result
    to_networkx(), from_networkx() - NetworkX interop

Example:
    from routegraph import DirectedGraph, Edge, Vertex, dijkstra

    graph = DirectedGraph()
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    graph.add_edges(Edge(a, b, 1.0), Edge(b, c, 1.0), Edge(a, c, 5.0))

    path = dijkstra(graph, "A", "C")
    path.vertex_ids  # ('A', 'B', 'C')
    path.weight      # 2.0
"""

from __future__ import annotations

from routegraph import logging
from routegraph._version import __version__
from routegraph.algorithms import (
    a_star,
    bfs,
    dfs,
    dijkstra,
    dijkstra_by_a_star,
    find_path,
    zero_heuristic,
)
from routegraph.config import SEARCH_CONFIG, SearchConfig
from routegraph.graph import DirectedGraph, Edge, InvariantViolation, Vertex
from routegraph.graph.convert import from_networkx, to_networkx
from routegraph.model.path import Path
from routegraph.types.base import SearchAlgorithm

__all__ = [
    # Version
    "__version__",
    # Graph
    "DirectedGraph",
    "Vertex",
    "Edge",
    "InvariantViolation",
    # Searches
    "dfs",
    "bfs",
    "dijkstra",
    "a_star",
    "dijkstra_by_a_star",
    "find_path",
    "zero_heuristic",
    "SearchAlgorithm",
    # Results
    "Path",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # NetworkX integration
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]

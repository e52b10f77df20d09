"""Conversion between :class:`DirectedGraph` and NetworkX graphs.

Example:
    >>> import networkx as nx
    >>> from routegraph.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3.0)
    >>> graph = from_networkx(G)
    >>> graph.get_vertex("A").edges[0].data
    {'weight': 3.0}
    >>>
    >>> G_out = to_networkx(graph, weight_func=lambda e: e.data["weight"])
    >>> G_out.edges["A", "B"]["weight"]
    3.0
"""

from __future__ import annotations

from typing import Callable, Optional, Type

import networkx as nx

from routegraph.config import SEARCH_CONFIG
from routegraph.graph.directed_graph import DirectedGraph
from routegraph.graph.elements import Edge, Vertex, VertexID
from routegraph.types.base import WeightFunc


def to_networkx(
    graph: DirectedGraph,
    weight_func: Optional[WeightFunc] = None,
    weight_attr: Optional[str] = None,
) -> nx.DiGraph:
    """Build a NetworkX DiGraph mirroring ``graph``.

    Each node is keyed by vertex id and carries the vertex object under the
    ``vertex`` attribute. Each edge carries its :class:`Edge` under ``edge``.

    Args:
        graph: Graph to convert.
        weight_func: Optional weight function; when given, every edge also
            receives its weight under ``weight_attr``.
        weight_attr: Attribute name for the weight. Defaults to
            ``SEARCH_CONFIG.weight_attr``.

    Returns:
        A new ``networkx.DiGraph``. Vertex and edge objects are shared, not
        copied.
    """
    attr = weight_attr or SEARCH_CONFIG.weight_attr
    nx_graph = nx.DiGraph()
    for vertex in graph:
        nx_graph.add_node(vertex.id, vertex=vertex)
    for edge in graph.edges():
        edge_attrs = {"edge": edge}
        if weight_func is not None:
            edge_attrs[attr] = weight_func(edge)
        nx_graph.add_edge(edge.source_id, edge.target_id, **edge_attrs)
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    vertex_factory: Callable[[VertexID], Vertex] = Vertex,
    edge_factory: Type[Edge] = Edge,
) -> DirectedGraph:
    """Build a :class:`DirectedGraph` from a NetworkX graph.

    Nodes without edges are kept. For an undirected ``nx.Graph`` each edge is
    inserted in both directions. Edge payloads are shallow copies of the
    NetworkX attribute dicts, so the default weight lookup
    (``SEARCH_CONFIG.edge_weight``) reads their ``weight`` key.

    Args:
        nx_graph: A ``networkx.DiGraph`` or ``networkx.Graph``.
        vertex_factory: Callable creating a vertex from a node key.
        edge_factory: Edge class to instantiate as ``(source, target, data)``.

    Returns:
        The populated graph.

    Raises:
        TypeError: If ``nx_graph`` is a multigraph or not a NetworkX graph.
    """
    if isinstance(nx_graph, (nx.MultiGraph, nx.MultiDiGraph)):
        raise TypeError(
            "Multigraphs are not supported: a vertex holds at most one edge "
            "per target"
        )
    if not isinstance(nx_graph, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(nx_graph).__name__}")

    graph = DirectedGraph()
    for node in nx_graph.nodes():
        graph.add_or_get_vertex(vertex_factory(node))

    for u, v, data in nx_graph.edges(data=True):
        src = graph.get_vertex(u)
        dst = graph.get_vertex(v)
        graph.add_or_get_edge(edge_factory(src, dst, dict(data)))
        if not nx_graph.is_directed():
            graph.add_or_get_edge(edge_factory(dst, src, dict(data)))
    return graph

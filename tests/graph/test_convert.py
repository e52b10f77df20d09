import networkx as nx
import pytest

from routegraph.algorithms.spf import dijkstra
from routegraph.graph.convert import from_networkx, to_networkx
from routegraph.graph.directed_graph import DirectedGraph
from routegraph.graph.elements import Edge, Vertex


def test_from_networkx_digraph():
    G = nx.DiGraph()
    G.add_edge("A", "B", weight=2.0, label="ab")
    G.add_edge("B", "C", weight=3.0)
    G.add_node("Z")

    g = from_networkx(G)
    assert g.vertex_count() == 4
    assert g.edge_count() == 2
    assert "Z" in g
    edge = g.get_vertex("A").edges[0]
    assert edge.target is g.get_vertex("B")
    assert edge.data == {"weight": 2.0, "label": "ab"}


def test_from_networkx_copies_attributes():
    G = nx.DiGraph()
    G.add_edge("A", "B", weight=2.0)
    g = from_networkx(G)
    G.edges["A", "B"]["weight"] = 100.0
    assert g.get_vertex("A").edges[0].data["weight"] == 2.0


def test_from_networkx_undirected_adds_both_directions():
    G = nx.Graph()
    G.add_edge("A", "B", weight=1.0)
    g = from_networkx(G)
    assert g.edge_count() == 2
    assert g.get_vertex("B").find_edge_to("A") is not None


def test_from_networkx_vertex_factory():
    class Named(Vertex):
        pass

    G = nx.DiGraph()
    G.add_edge(1, 2)
    g = from_networkx(G, vertex_factory=Named)
    assert all(isinstance(v, Named) for v in g)


def test_from_networkx_rejects_multigraph():
    with pytest.raises(TypeError):
        from_networkx(nx.MultiDiGraph())


def test_from_networkx_rejects_non_graph():
    with pytest.raises(TypeError):
        from_networkx({"A": ["B"]})


def test_to_networkx_structure():
    g = DirectedGraph()
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    ab = Edge(a, b, 4)
    g.add_or_get_edge(ab)
    g.add_or_get_vertex(c)

    G = to_networkx(g)
    assert isinstance(G, nx.DiGraph)
    assert set(G.nodes) == {"A", "B", "C"}
    assert G.nodes["A"]["vertex"] is a
    assert G.edges["A", "B"]["edge"] is ab
    assert "weight" not in G.edges["A", "B"]


def test_to_networkx_weights():
    g = DirectedGraph()
    a, b = Vertex("A"), Vertex("B")
    g.add_or_get_edge(Edge(a, b, {"weight": 7}))
    G = to_networkx(g, weight_func=lambda e: e.data["weight"] * 2, weight_attr="cost")
    assert G.edges["A", "B"]["cost"] == 14


def test_roundtrip_preserves_shortest_weight():
    G = nx.DiGraph()
    G.add_weighted_edges_from(
        [("A", "B", 1), ("B", "C", 1), ("A", "C", 5), ("C", "D", 2)]
    )
    g = from_networkx(G)
    path = dijkstra(g, "A", "D")
    assert path.weight == nx.dijkstra_path_length(G, "A", "D")

    G2 = to_networkx(g, weight_func=lambda e: e.data["weight"])
    assert nx.dijkstra_path_length(G2, "A", "D") == path.weight

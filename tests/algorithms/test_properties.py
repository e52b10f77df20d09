"""Cross-checks between the searches and against NetworkX on random graphs."""

import itertools

import networkx as nx
import pytest

from routegraph.algorithms.bfs import bfs
from routegraph.algorithms.dfs import dfs
from routegraph.algorithms.spf import a_star, dijkstra, zero_heuristic
from routegraph.graph.convert import to_networkx
from tests.algorithms.sample_graphs import random_digraph

SEEDS = range(8)


def _pairs(graph):
    ids = [v.id for v in graph]
    return itertools.product(ids, ids)


def _assert_chained(path):
    at = path.start
    for edge in path:
        assert edge.source is at
        at = edge.target
    assert at is path.target


@pytest.mark.parametrize("seed", SEEDS)
def test_bfs_never_longer_than_dfs(seed):
    g = random_digraph(seed)
    for s, t in _pairs(g):
        deep = dfs(g, s, t)
        wide = bfs(g, s, t)
        assert (deep is None) == (wide is None)
        if wide is not None:
            assert wide.weight <= deep.weight
            assert wide.weight == len(wide)
            assert deep.weight == len(deep)


@pytest.mark.parametrize("seed", SEEDS)
def test_bfs_hops_match_networkx(seed):
    g = random_digraph(seed)
    G = to_networkx(g)
    for s, t in _pairs(g):
        path = bfs(g, s, t)
        if nx.has_path(G, s, t):
            assert path.weight == nx.shortest_path_length(G, s, t)
            _assert_chained(path)
        else:
            assert path is None


@pytest.mark.parametrize("seed", SEEDS)
def test_dijkstra_matches_networkx(seed):
    g = random_digraph(seed)
    G = to_networkx(g, weight_func=lambda e: e.data["weight"])
    for s, t in _pairs(g):
        path = dijkstra(g, s, t)
        if nx.has_path(G, s, t):
            assert path.weight == nx.dijkstra_path_length(G, s, t)
            assert path.weight == sum(e.data["weight"] for e in path)
            assert path.start.id == s
            assert path.target.id == t
            _assert_chained(path)
            assert set(path.vertices) <= path.visited
        else:
            assert path is None


@pytest.mark.parametrize("seed", SEEDS)
def test_zero_heuristic_a_star_equals_dijkstra(seed):
    g = random_digraph(seed)
    for s, t in _pairs(g):
        plain = dijkstra(g, s, t)
        guided = a_star(g, s, t, heuristic=zero_heuristic)
        if plain is None:
            assert guided is None
            continue
        assert guided.weight == plain.weight
        assert len(guided) == len(plain)


@pytest.mark.parametrize("seed", SEEDS)
def test_weighted_paths_not_heavier_than_hop_paths(seed):
    g = random_digraph(seed)
    for s, t in _pairs(g):
        shortest = dijkstra(g, s, t)
        fewest = bfs(g, s, t)
        if shortest is None:
            continue
        assert shortest.weight <= sum(e.data["weight"] for e in fewest)
        assert len(shortest) >= fewest.weight


@pytest.mark.parametrize("seed", SEEDS)
def test_searches_leave_graph_untouched(seed):
    g = random_digraph(seed)
    snapshot = [(e.source_id, e.target_id) for e in g.edges()]
    for s, t in _pairs(g):
        dfs(g, s, t)
        bfs(g, s, t)
        dijkstra(g, s, t)
    assert [(e.source_id, e.target_id) for e in g.edges()] == snapshot
    assert g.vertex_count() == 12

import networkx as nx
import pytest

from csp.colors import Color
from graph.protocol import ColorableGraph, NxGraphView, as_colorable
from graph.verify import conflicts_at, total_conflicts, is_complete, verify_coloring

R, G_, B = Color.RED, Color.GREEN, Color.BLUE


def test_conflicts_at(triangle):
    coloring = {0: R, 1: R, 2: G_}
    assert conflicts_at(triangle, 0, coloring) == 1
    assert conflicts_at(triangle, 2, coloring) == 0
    # unassigned node has no color to conflict with
    assert conflicts_at(triangle, 2, {0: R, 1: R}) == 0


def test_total_counts_each_edge_once(triangle):
    assert total_conflicts(triangle, {0: R, 1: R, 2: R}) == 3
    assert total_conflicts(triangle, {0: R, 1: R, 2: G_}) == 1
    assert total_conflicts(triangle, {}) == 0


def test_total_is_order_invariant():
    G = as_colorable(nx.petersen_graph())
    coloring = {v: [R, G_][v % 2] for v in range(10)}
    reordered = {v: coloring[v] for v in reversed(range(10))}
    assert total_conflicts(G, coloring) == total_conflicts(G, reordered)
    rep = verify_coloring(G, coloring)
    assert rep["num_conflicts"] == total_conflicts(G, coloring)


def test_is_complete(square):
    assert is_complete(square, {0: R, 1: G_, 2: R, 3: G_})
    assert not is_complete(square, {0: R, 1: G_, 2: R})
    assert not is_complete(square, {0: R, 1: R, 2: G_, 3: G_})


def test_verify_report(square):
    rep = verify_coloring(square, {0: R, 1: B, 2: R}, budget=2)
    assert rep["missing_nodes"] == [3]
    assert rep["out_of_range_nodes"] == [1]
    assert rep["num_used_colors"] == 2
    assert not rep["feasible"]


def test_view_exposes_interface():
    star = nx.star_graph(3)
    G = as_colorable(star)
    assert G.nx is star
    assert isinstance(G, ColorableGraph)
    assert G.node_count() == 4 and G.edge_count() == 3
    assert list(G.neighbors(0)) == [1, 2, 3]
    assert all(G.degree(v) == len(G.neighbors(v)) for v in range(4))


def test_view_rejects_bad_graphs():
    with pytest.raises(ValueError):
        NxGraphView(nx.grid_2d_graph(2, 2))
    assert as_colorable(nx.grid_2d_graph(2, 2), relabel=True).node_count() == 4
    loop = nx.path_graph(3)
    loop.add_edge(1, 1)
    with pytest.raises(ValueError):
        NxGraphView(loop)
    with pytest.raises(TypeError):
        as_colorable([[0, 1], [1, 0]])


def test_custom_graph_passes_through():
    class Adj:
        def __init__(self, adj):
            self.adj = adj

        def node_count(self):
            return len(self.adj)

        def edge_count(self):
            return sum(len(a) for a in self.adj) // 2

        def neighbors(self, node):
            return self.adj[node]

        def degree(self, node):
            return len(self.adj[node])

    g = Adj([[1], [0]])
    assert as_colorable(g) is g
    assert is_complete(g, {0: R, 1: G_})

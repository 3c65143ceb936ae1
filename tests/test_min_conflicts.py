import random

import networkx as nx
import pytest

from graph.loader import load_demo_graph
from graph.protocol import as_colorable
from graph.verify import is_complete, total_conflicts
from solvers.min_conflicts import min_conflicts_solve


def assert_proper(G, coloring):
    for u in range(G.node_count()):
        for v in G.neighbors(u):
            assert coloring[u] != coloring[v]


def test_bipartite_needs_no_repair(square):
    res = min_conflicts_solve(square, 2, random.Random(0))
    assert res["complete"] and res["stop_reason"] == "complete"
    assert res["iters"] == 0 and res["conflicts"] == 0


def test_gives_up_at_iteration_cap(triangle):
    res = min_conflicts_solve(triangle, 2, random.Random(0), max_iter=50)
    assert not res["complete"]
    assert res["stop_reason"] == "max_iter"
    assert res["iters"] == 50
    assert res["conflicts"] >= 1
    assert len(res["coloring"]) == 3
    assert res["conflicts"] == total_conflicts(triangle, res["coloring"])
    assert res["final_check"]["num_conflicts"] == res["conflicts"]
    assert len(res["final_check"]["conflicts_sample"]) == res["conflicts"]


def test_triangle_with_three_colors(triangle):
    res = min_conflicts_solve(triangle, 3, random.Random(0))
    assert res["complete"]
    assert_proper(triangle, res["coloring"])


def test_isolated_node(lone):
    res = min_conflicts_solve(lone, 2, random.Random(0))
    assert res["complete"] and res["iters"] == 0 and res["conflicts"] == 0


@pytest.mark.parametrize("seed", range(4))
def test_complete_means_proper(seed):
    G = as_colorable(load_demo_graph(seed=seed))
    res = min_conflicts_solve(G, 4, random.Random(seed))
    if res["complete"]:
        assert is_complete(G, res["coloring"])
        assert_proper(G, res["coloring"])


def test_reproducible_for_fixed_seed():
    G = as_colorable(nx.petersen_graph())
    a = min_conflicts_solve(G, 3, random.Random(7), max_iter=200)
    b = min_conflicts_solve(G, 3, random.Random(7), max_iter=200)
    assert a["coloring"] == b["coloring"]
    assert a["iters"] == b["iters"]

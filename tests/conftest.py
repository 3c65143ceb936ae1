import networkx as nx
import pytest

from graph.protocol import as_colorable


@pytest.fixture
def square():
    return as_colorable(nx.cycle_graph(4))


@pytest.fixture
def triangle():
    return as_colorable(nx.cycle_graph(3))


@pytest.fixture
def lone():
    return as_colorable(nx.empty_graph(1))

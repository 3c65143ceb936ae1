# graph/protocol.py
from typing import List, Protocol, Sequence, runtime_checkable

import networkx as nx


@runtime_checkable
class ColorableGraph(Protocol):
    """The only graph capabilities the solvers rely on."""

    def node_count(self) -> int: ...

    def edge_count(self) -> int: ...

    def neighbors(self, node: int) -> Sequence[int]: ...

    def degree(self, node: int) -> int: ...


class NxGraphView:
    """
    Read-only ColorableGraph over an undirected networkx graph.
    Node labels must be exactly 0..n-1 and the graph must not have self-loops.
    Neighbor lists are built once; later changes to the wrapped graph are not seen.
    """

    def __init__(self, G: nx.Graph):
        if G.is_directed():
            raise ValueError("graph must be undirected")
        n = G.number_of_nodes()
        if set(G.nodes()) != set(range(n)):
            raise ValueError("graph nodes must be labelled 0..n-1 (use relabel=True)")
        loops = [v for v in G.nodes() if G.has_edge(v, v)]
        if loops:
            raise ValueError(f"self-loops cannot be colored: {sorted(loops)[:10]}")
        self.nx = G
        self._adj: List[List[int]] = [sorted(G.neighbors(v)) for v in range(n)]
        self._m = G.number_of_edges()

    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return self._m

    def neighbors(self, node: int) -> Sequence[int]:
        return self._adj[node]

    def degree(self, node: int) -> int:
        return len(self._adj[node])

    def __repr__(self) -> str:
        return f"NxGraphView(|V|={self.node_count()}, |E|={self.edge_count()})"


def as_colorable(G, relabel: bool = False) -> ColorableGraph:
    """Wrap a networkx graph; anything already exposing the ColorableGraph methods passes through."""
    if isinstance(G, nx.Graph):
        if relabel:
            G = nx.convert_node_labels_to_integers(G)
        return NxGraphView(G)
    if isinstance(G, ColorableGraph):
        return G
    raise TypeError(f"not a colorable graph: {type(G).__name__}")

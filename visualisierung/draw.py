# visualisierung/draw.py
from __future__ import annotations
import os, re
from typing import Dict, List, Optional, Tuple
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from csp.colors import Color

# Füllfarbe je CSP-Farbe
FILL = {
    Color.RED: "#E63946",
    Color.GREEN: "#2A9D8F",
    Color.BLUE: "#457B9D",
    Color.YELLOW: "#F1C40F",
}
UNASSIGNED_FILL = "#DDDDDD"

# Layout-Cache pro Graph-Signatur
_POS_CACHE: Dict[int, Dict] = {}


def _graph_signature(G: nx.Graph) -> int:
    """Stabile Signatur aus Knoten- und Kantenmengen, um Layouts zu cachen."""
    nodes_sig = tuple(sorted(G.nodes()))
    edges_sig = tuple(sorted(tuple(sorted(e)) for e in G.edges()))
    return hash((nodes_sig, edges_sig))


def _sanitize(name: str) -> str:
    s = name.strip().lower()
    s = re.sub(r"[^a-z0-9\-_]+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "graph"


def _get_layout(G: nx.Graph, seed: int = 42) -> Dict:
    sig = _graph_signature(G)
    if sig in _POS_CACHE:
        return _POS_CACHE[sig]
    pos = nx.spring_layout(G, seed=seed)
    _POS_CACHE[sig] = pos
    return pos


def visualize_coloring(
    G: nx.Graph,
    coloring: Dict[int, Color],
    name: str,
    budget: int,
    out_dir: str = "visualisierung/picture",
    layout_seed: int = 42,
    pos: Optional[Dict] = None,
    labels: Optional[List[str]] = None,
    figure_size: Tuple[float, float] = (8.0, 6.0),
    dpi: int = 160,
) -> str:
    """
    Zeichnet die Färbung als PNG und gibt den Dateipfad zurück:
      - Kanten zwischen gleichfarbigen Nachbarn → schwarz und dick
      - ungefärbte Knoten → hellgrau
      - Knotentext: Label (falls vorhanden) sonst Knoten-ID
    """
    os.makedirs(out_dir, exist_ok=True)
    if pos is None:
        pos = _get_layout(G, seed=layout_seed)

    conflict_edges = [(u, v) for (u, v) in G.edges()
                      if coloring.get(u) is not None and coloring.get(u) == coloring.get(v)]
    conflict_set = set(conflict_edges)
    other_edges = [e for e in G.edges() if e not in conflict_set]

    plt.figure(figsize=figure_size, dpi=dpi)
    if other_edges:
        nx.draw_networkx_edges(G, pos, edgelist=other_edges, width=0.8, alpha=0.4, edge_color="#999999")
    if conflict_edges:
        nx.draw_networkx_edges(G, pos, edgelist=conflict_edges, width=2.0, alpha=0.95, edge_color="black")

    nodes_sorted = sorted(G.nodes())
    fills = [FILL.get(coloring.get(v), UNASSIGNED_FILL) for v in nodes_sorted]
    if nodes_sorted:
        nx.draw_networkx_nodes(G, pos, nodelist=nodes_sorted, node_color=fills,
                               edgecolors="#555555", linewidths=0.8, node_size=320)
        text = {v: (labels[v] if labels is not None and v < len(labels) else str(v)) for v in nodes_sorted}
        nx.draw_networkx_labels(G, pos, labels=text, font_size=7)

    colored = sum(1 for v in nodes_sorted if v in coloring)
    plt.title(f"{name} | budget={budget} | conflicts={len(conflict_edges)} "
              f"(colored {colored}/{G.number_of_nodes()})")
    plt.axis("off")
    plt.tight_layout()

    fpath = os.path.join(out_dir, f"{_sanitize(name)}_budget-{budget}_conflicts-{len(conflict_edges):03d}.png")
    plt.savefig(fpath, bbox_inches="tight")
    plt.close()
    return fpath

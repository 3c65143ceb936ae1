import os
from pathlib import Path
from typing import Iterator, Union

import networkx as nx
import numpy as np
import pandas as pd


class MalformedGraph(ValueError):
    """Adjacency file that cannot be turned into a colorable graph."""


def load_demo_graph(seed: int = 0, n: int = 30, p: float = 0.12) -> nx.Graph:
    # small random graph for quick tests; retried until connected so the seeder can reach every node
    for attempt in range(100):
        G = nx.erdos_renyi_graph(n=n, p=p, seed=seed + attempt)
        if nx.is_connected(G):
            return G
    raise RuntimeError(f"no connected ER({n},{p}) graph found from seed={seed}")


def load_adjacency_csv(path: Union[str, os.PathLike]) -> nx.Graph:
    """
    Read an adjacency matrix stored as CSV:
      - header row: an ignored corner cell, then one label per node,
      - one row per node: its label, then 0/1 cells.
    An edge (i, j) exists when either a[i][j] or a[j][i] is 1.
    Node ids are the row positions 0..n-1; labels go to G.graph["labels"].
    """
    path = Path(path)
    try:
        # header read as a data row so pandas keeps duplicate labels as written
        raw = pd.read_csv(path, header=None, index_col=0, skipinitialspace=True, dtype=str)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise MalformedGraph(f"{path}: unreadable CSV ({e})") from e

    labels = [c.strip() if isinstance(c, str) else "" for c in raw.iloc[0]] if len(raw) else []
    df = raw.iloc[1:]
    n = len(labels)
    if n < 1:
        raise MalformedGraph(f"{path}: no node labels in header")
    if "" in labels:
        raise MalformedGraph(f"{path}: empty node label in header")
    dupes = sorted({l for l in labels if labels.count(l) > 1})
    if dupes:
        raise MalformedGraph(f"{path}: duplicate node labels {dupes[:10]}")
    if df.shape != (n, n):
        raise MalformedGraph(f"{path}: expected {n}x{n} matrix, got {df.shape[0]}x{df.shape[1]}")

    cells = df.apply(lambda col: col.map(lambda x: x.strip() if isinstance(x, str) else x))
    bad = ~cells.isin(["0", "1"])
    if bad.to_numpy().any():
        r, c = np.argwhere(bad.to_numpy())[0]
        raise MalformedGraph(f"{path}: cell ({r},{c}) must be 0 or 1, got {df.iat[r, c]!r}")

    A = (cells.to_numpy() == "1")
    if np.diag(A).any():
        loops = np.flatnonzero(np.diag(A)).tolist()
        raise MalformedGraph(f"{path}: self-loops on nodes {loops[:10]}")

    sym = np.triu(A | A.T, k=1)
    G = nx.Graph(labels=labels, source=str(path))
    G.add_nodes_from(range(n))
    G.add_edges_from((int(i), int(j)) for i, j in np.argwhere(sym))
    return G


def iter_graph_files(path: Union[str, os.PathLike], pattern: str = "*.csv") -> Iterator[Path]:
    """Yield `path` itself if it is a file, else the sorted files in it matching `pattern`."""
    p = Path(path)
    if p.is_file():
        yield p
        return
    if not p.is_dir():
        raise FileNotFoundError(f"no such file or directory: {p}")
    for f in sorted(p.glob(pattern)):
        if f.is_file():
            yield f

# solvers/seeder.py
import random
from collections import deque
from typing import Dict, List

from csp.choices import choices_for
from csp.colors import Color, palette


class DisconnectedGraph(ValueError):
    """The breadth-first seed could not reach every node from node 0."""

    def __init__(self, unreached: List[int]):
        self.unreached = unreached
        super().__init__(f"graph is not connected; unreached from node 0: {unreached[:10]}"
                         + (" ..." if len(unreached) > 10 else ""))


def naive_seed(G, budget: int, rng: random.Random, verbose: bool = False) -> Dict[int, Color]:
    """
    Initial full assignment by breadth-first elimination from node 0:
      1) each visited node takes the first color (Red, Green, Blue, Yellow order)
         not used by an already-colored neighbor,
      2) if every color in the budget is taken, it gets a uniform draw from the whole
         budget instead, accepting a conflict.
    The graph must be connected; otherwise DisconnectedGraph is raised.
    """
    n = G.node_count()
    full = palette(budget)
    coloring: Dict[int, Color] = {}
    if n == 0:
        return coloring

    forced = 0
    dq = deque([0])
    while dq:
        v = dq.popleft()
        if v in coloring:
            continue
        choice = choices_for(G, v, coloring, budget).first()
        if choice is None:
            choice = rng.choice(full)
            forced += 1
        coloring[v] = choice
        for u in G.neighbors(v):
            if u not in coloring:
                dq.append(u)

    if len(coloring) < n:
        raise DisconnectedGraph([v for v in range(n) if v not in coloring])
    if verbose:
        print(f"[Seed] budget={budget} nodes={n} forced={forced}")
    return coloring

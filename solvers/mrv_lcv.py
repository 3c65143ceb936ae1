# solvers/mrv_lcv.py
import random
from typing import Any, Callable, Dict, List, Optional

from csp.choices import ChoiceSet
from csp.colors import Color
from graph.verify import is_complete, total_conflicts, verify_coloring


def _pick_mrv(choices: List[ChoiceSet], coloring: Dict[int, Color]) -> int:
    # fewest legal colors among unassigned nodes; strict < keeps the lowest id on ties
    best, best_amt = -1, None
    for v, cs in enumerate(choices):
        if v in coloring:
            continue
        amt = cs.amount()
        if best_amt is None or amt < best_amt:
            best, best_amt = v, amt
    return best


def _pick_lcv(G, choices: List[ChoiceSet], v: int) -> Color:
    """
    Legal color of v that leaves the largest total of legal colors over all nodes
    once it is removed from v's neighbors. Ties go to the earlier color.
    Removing c only changes neighbors that still allow c, each by exactly one,
    so the simulated total is the current total minus that count.
    """
    total = sum(cs.amount() for cs in choices)
    best, best_total = None, None
    for c in choices[v].legal_colors():
        lost = sum(1 for u in G.neighbors(v) if choices[u].allows(c))
        sim = total - lost
        if best_total is None or sim > best_total:
            best, best_total = c, sim
    return best


def mrv_lcv_solve(
    G,
    budget: int,
    rng: Optional[random.Random] = None,
    verbose: bool = False,
    on_commit: Optional[Callable[[int, Color], None]] = None,
) -> Dict[str, Any]:
    """
    Constructive coloring with most-constrained-variable / least-constraining-value.
    Commitments are final: the first node left without a legal color ends the
    attempt with stop_reason="stuck" and the partial coloring.
    `rng` is accepted for a uniform solver signature; the search is deterministic.
    """
    n = G.node_count()
    choices = [ChoiceSet(budget) for _ in range(n)]
    coloring: Dict[int, Color] = {}
    steps = 0
    stop_reason = "complete"
    stuck_node = None

    while len(coloring) < n:
        v = _pick_mrv(choices, coloring)
        if choices[v].stuck():
            stop_reason = "stuck"
            stuck_node = v
            break
        c = _pick_lcv(G, choices, v)
        coloring[v] = c
        for u in G.neighbors(v):
            choices[u].remove(c)
        steps += 1
        if on_commit is not None:
            on_commit(v, c)

    rep = verify_coloring(G, coloring, budget=budget)
    if verbose:
        extra = f" stuck_node={stuck_node}" if stuck_node is not None else ""
        print(f"[MRV-LCV] budget={budget} steps={steps}/{n} stop={stop_reason}{extra}")
    return dict(
        method="constructive",
        budget=budget,
        coloring=coloring,
        complete=is_complete(G, coloring),
        conflicts=total_conflicts(G, coloring),
        steps=steps,
        stop_reason=stop_reason,
        stuck_node=stuck_node,
        final_check=rep,
    )

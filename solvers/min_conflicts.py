# solvers/min_conflicts.py
import random
from typing import Any, Dict, Optional

from csp.choices import choices_for
from csp.colors import palette
from graph.verify import conflicted_nodes, is_complete, total_conflicts, verify_coloring
from solvers.seeder import naive_seed

MAX_ITER = 2048


def min_conflicts_solve(
    G,
    budget: int,
    rng: Optional[random.Random] = None,
    max_iter: int = MAX_ITER,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Min-conflicts repair of a naive seed:
      1) seed every node (BFS, first-fit),
      2) while some node is in conflict and fewer than `max_iter` moves were made:
         pick one conflicted node at random and give it a random color its
         neighbors leave free, or any budget color if none is free.
    Reaching `max_iter` is a normal outcome (stop_reason="max_iter"); the
    conflicting coloring is returned as-is.
    """
    rng = rng if rng is not None else random.Random(0)
    full = palette(budget)
    coloring = naive_seed(G, budget, rng, verbose=verbose)

    iters = 0
    stop_reason = "max_iter"
    while True:
        # seed assigns every node, so "no conflicted node" means complete
        bad = conflicted_nodes(G, coloring)
        if not bad:
            stop_reason = "complete"
            break
        if iters >= max_iter:
            break
        v = rng.choice(bad)
        choices = choices_for(G, v, coloring, budget)
        coloring[v] = rng.choice(full) if choices.stuck() else choices.sample_one(rng)
        iters += 1

    rep = verify_coloring(G, coloring, budget=budget)
    if verbose:
        print(f"[MinConflicts] budget={budget} iters={iters} conflicts={rep['num_conflicts']} stop={stop_reason}")
    return dict(
        method="local",
        budget=budget,
        coloring=coloring,
        complete=is_complete(G, coloring),
        conflicts=total_conflicts(G, coloring),
        iters=iters,
        stop_reason=stop_reason,
        final_check=rep,
    )

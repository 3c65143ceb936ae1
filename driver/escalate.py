# driver/escalate.py
import random
from typing import Any, Dict, Optional, Sequence

from csp.colors import BUDGETS, check_budget
import solvers.min_conflicts as mc
import solvers.mrv_lcv as mrv

METHODS = ("local", "constructive")


def _attempt_summary(res: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "budget": res["budget"],
        "complete": res["complete"],
        "conflicts": res["conflicts"],
        "iters": res.get("iters", res.get("steps", 0)),
        "stop_reason": res["stop_reason"],
    }


def solve_with_escalation(
    G,
    method: str = "local",
    seed: int = 0,
    rng: Optional[random.Random] = None,
    budgets: Sequence[int] = BUDGETS,
    max_iter: int = mc.MAX_ITER,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run one solver family over growing color budgets (2, 3, 4 by default).
    Returns the first complete result; if none completes, the result of the
    last budget. The same rng instance is threaded through every attempt.
    """
    if method not in METHODS:
        raise ValueError(f"unknown method {method!r}; choose from {METHODS}")
    if not budgets:
        raise ValueError("at least one budget is required")
    for b in budgets:
        check_budget(b)
    rng = rng if rng is not None else random.Random(seed)

    if verbose:
        print(f"[Escalate] method={method} |V|={G.node_count()} |E|={G.edge_count()} budgets={list(budgets)}")

    attempts = []
    res: Dict[str, Any] = {}
    for budget in budgets:
        # looked up on the module at call time so callers can patch the solvers
        if method == "local":
            res = mc.min_conflicts_solve(G, budget, rng=rng, max_iter=max_iter, verbose=verbose)
        else:
            res = mrv.mrv_lcv_solve(G, budget, rng=rng, verbose=verbose)
        attempts.append(_attempt_summary(res))
        if verbose:
            print(f"[Escalate] budget={budget} complete={res['complete']} conflicts={res['conflicts']} stop={res['stop_reason']}")
        if res["complete"]:
            break
    else:
        if verbose:
            print(f"[Escalate] no complete coloring up to budget={budgets[-1]}; returning last attempt")

    res["attempts"] = attempts
    return res

from typing import Dict, Any, List, Tuple, Optional

from csp.colors import Color, palette


def conflicts_at(G, node: int, coloring: Dict[int, Color]) -> int:
    """Number of colored neighbors sharing `node`'s color (0 when `node` is unassigned)."""
    c = coloring.get(node)
    if c is None:
        return 0
    return sum(1 for u in G.neighbors(node) if coloring.get(u) == c)


def total_conflicts(G, coloring: Dict[int, Color]) -> int:
    # each violated edge is seen from both endpoints
    return sum(conflicts_at(G, v, coloring) for v in coloring) // 2


def is_complete(G, coloring: Dict[int, Color]) -> bool:
    if any(v not in coloring for v in range(G.node_count())):
        return False
    return total_conflicts(G, coloring) == 0


def conflicted_nodes(G, coloring: Dict[int, Color]) -> List[int]:
    return [v for v in sorted(coloring) if conflicts_at(G, v, coloring) > 0]


def verify_coloring(
    G,
    coloring: Dict[int, Color],
    budget: Optional[int] = None,
    sample_conflicts: int = 10,
) -> Dict[str, Any]:

    report: Dict[str, Any] = {}
    n = G.node_count()

    # completeness check
    missing_nodes = [v for v in range(n) if v not in coloring]
    report["missing_nodes"] = missing_nodes

    used_colors = sorted(set(coloring.values()), key=lambda c: c.value)
    report["used_colors"] = used_colors
    report["num_used_colors"] = len(used_colors)

    # color bound check
    out_of_range_nodes: List[int] = []
    if budget is not None:
        allowed = set(palette(budget))
        out_of_range_nodes = [v for v in sorted(coloring) if coloring[v] not in allowed]
    report["out_of_range_nodes"] = out_of_range_nodes

    # conflicts check; the sample lists each violated edge once
    conflicts: List[Tuple[int, int, Color]] = []
    for u in range(n):
        cu = coloring.get(u)
        if cu is None:
            continue
        for v in G.neighbors(u):
            if u < v and coloring.get(v) == cu:
                conflicts.append((u, v, cu))
    report["num_conflicts"] = total_conflicts(G, coloring)
    report["conflicts_sample"] = conflicts[:sample_conflicts]

    feasible = (
        len(missing_nodes) == 0 and
        len(out_of_range_nodes) == 0 and
        report["num_conflicts"] == 0
    )
    report["feasible"] = feasible
    return report


def print_check_summary(report: Dict[str, Any], prefix: str = "[Check] ") -> None:

    feasible = report.get("feasible", False)
    num_conflicts = report.get("num_conflicts", -1)
    num_used = report.get("num_used_colors", -1)
    print(f"{prefix}feasible={feasible}|used_colors={num_used}|conflicts={num_conflicts}")
    if not feasible:
        miss = report.get("missing_nodes", [])
        oor = report.get("out_of_range_nodes", [])
        sample = report.get("conflicts_sample", [])
        if miss:
            print(f"{prefix}missing_nodes(sample) ={miss[:10]}")
        if oor:
            print(f"{prefix}out_of_range_nodes(sample) ={oor[:10]}")
        if num_conflicts > 0:
            shown = [(u, v, str(c)) for u, v, c in sample]
            print(f"{prefix}conflicts_sample ={shown}")

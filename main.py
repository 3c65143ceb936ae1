# main.py
import argparse, sys, time
from pathlib import Path

from graph.loader import load_demo_graph, load_adjacency_csv, iter_graph_files, MalformedGraph
from graph.protocol import as_colorable
from graph.verify import print_check_summary
from driver.escalate import solve_with_escalation
from driver.report import format_assignment, summarize, tee_to_file
from solvers.min_conflicts import MAX_ITER
from solvers.seeder import DisconnectedGraph


def run_one(G, name: str, method: str, args) -> dict:
    """Solve one graph with one solver family, logging to <out-dir>/<name>__<method>.txt."""
    labels = G.nx.graph.get("labels")
    log_path = Path(args.out_dir) / f"{name}__{method}.txt"
    with tee_to_file(log_path, echo=not args.quiet):
        print(f"[Main] graph={name} (node count: {G.node_count()}, edge count: {G.edge_count()}) method={method} seed={args.seed}")
        t0 = time.time()
        try:
            res = solve_with_escalation(G, method=method, seed=args.seed, max_iter=args.max_iter, verbose=True)
        except DisconnectedGraph as e:
            print(f"[Main] skipped: {e}")
            return {"name": name, "method": method, "complete": False, "skipped": str(e)}
        dt = time.time() - t0
        print(f"[Result] {summarize(res)} time={dt:.4f}s")
        print_check_summary(res["final_check"], prefix="[Check] ")
        print("[Result] assignment:")
        print(format_assignment(res["coloring"], G.node_count(), labels))

    if args.viz:
        from visualisierung.draw import visualize_coloring
        fpath = visualize_coloring(G.nx, res["coloring"], name=f"{name}-{method}", budget=res["budget"],
                                   out_dir=args.viz_out, labels=labels)
        print(f"[Main] picture -> {fpath}")
    return {"name": name, "method": method, "complete": res["complete"], "budget": res["budget"]}


def main() -> None:
    ap = argparse.ArgumentParser(description="Graph coloring with min-conflicts or MRV+LCV over budgets 2,3,4")
    ap.add_argument("input", nargs="?", default=None,
                    help="adjacency-matrix CSV file or a directory of them (default: random demo graph)")
    ap.add_argument("--method", default="both", choices=["local", "constructive", "both"])
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--max-iter", type=int, default=MAX_ITER)
    ap.add_argument("--pattern", default="*.csv")
    ap.add_argument("--out-dir", default="results")
    ap.add_argument("--viz", action="store_true")
    ap.add_argument("--viz-out", default="visualisierung/picture")
    ap.add_argument("--quiet", action="store_true", help="write logs to files only")
    args = ap.parse_args()

    methods = ["local", "constructive"] if args.method == "both" else [args.method]

    if args.input is None:
        graphs = [(f"demo-seed{args.seed}", load_demo_graph(seed=args.seed))]
    else:
        try:
            graphs = [(p.stem, load_adjacency_csv(p)) for p in iter_graph_files(args.input, args.pattern)]
        except (MalformedGraph, FileNotFoundError) as e:
            sys.exit(f"[Main] {e}")
        if not graphs:
            sys.exit(f"[Main] no files matching {args.pattern} in {args.input}")

    rows = []
    for name, G_nx in graphs:
        G = as_colorable(G_nx)
        for method in methods:
            rows.append(run_one(G, name, method, args))

    done = sum(1 for r in rows if r["complete"])
    print(f"[Main] Done. runs={len(rows)} complete={done} logs={args.out_dir}")


if __name__ == "__main__":
    main()

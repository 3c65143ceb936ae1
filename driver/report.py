# driver/report.py
import io
import sys
from contextlib import contextmanager, redirect_stdout
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Sequence

from csp.colors import Color


class Tee(io.TextIOBase):
    """Write-through stream: everything goes to the real stream and to a log file."""

    def __init__(self, real_stream, log_file):
        self.real = real_stream
        self.log = log_file

    def write(self, s):
        self.real.write(s)
        self.log.write(s)
        return len(s)

    def flush(self):
        self.real.flush()
        self.log.flush()


@contextmanager
def tee_to_file(path, echo: bool = True) -> Iterator[None]:
    """Duplicate stdout into `path` for the duration of the block (echo=False: file only)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        target = Tee(sys.stdout, f) if echo else f
        with redirect_stdout(target):
            yield
        f.flush()


def format_assignment(
    coloring: Dict[int, Color],
    n: int,
    labels: Optional[Sequence[str]] = None,
) -> str:
    """One line per node id 0..n-1; unassigned nodes are shown as '-'."""
    width = len(str(max(n - 1, 0)))
    lines = []
    for v in range(n):
        name = f" ({labels[v]})" if labels is not None and v < len(labels) else ""
        c = coloring.get(v)
        lines.append(f"  {v:>{width}}{name}: {c if c is not None else '-'}")
    return "\n".join(lines)


def summarize(res: Dict[str, Any]) -> str:
    if res.get("method") == "constructive":
        progress = f"steps={res.get('steps', 0)}"
        if res.get("stuck_node") is not None:
            progress += f" stuck_node={res['stuck_node']}"
    else:
        progress = f"iters={res.get('iters', 0)}"
    return (f"method={res.get('method')} budget={res.get('budget')} complete={res.get('complete')} "
            f"conflicts={res.get('conflicts')} {progress} stop={res.get('stop_reason')}")

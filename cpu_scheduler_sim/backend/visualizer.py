from __future__ import annotations

from typing import Optional, Dict
import os
import matplotlib.pyplot as plt

from .core import ProcessTable
from .utils import EventLogger


def ensure_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def plot_gantt(table: ProcessTable, logger: EventLogger, out_path: Optional[str] = None) -> None:
    fig, ax = plt.subplots(figsize=(12, 3 + 0.2 * max(1, len(table))))

    cmap = plt.get_cmap("tab20")
    pid_to_color: Dict[int, tuple] = {p.pid: cmap(p.pid % cmap.N) for p in table}
    y_positions: Dict[int, int] = {p.pid: i for i, p in enumerate(table)}

    for seg in logger.timeline:
        pid = seg["pid"]
        start = seg["start"]
        end = seg["end"]
        ax.barh(y_positions[pid], end - start, left=start, color=pid_to_color.get(pid, "#777777"), edgecolor="black", alpha=0.9)
        ax.text(start + (end - start) / 2, y_positions[pid], str(end - start), va="center", ha="center", fontsize=8)

    # mark completions
    for ev in logger.process_events:
        if ev["event"] == "complete":
            ax.plot(ev["time"], y_positions[ev["pid"]], marker="|", color="black", markersize=14)

    policy = logger.timeline[0]["policy"] if logger.timeline else ""
    ax.set_yticks(list(y_positions.values()))
    ax.set_yticklabels([f"P{pid}" for pid in y_positions])
    ax.invert_yaxis()
    ax.set_xlabel("Time")
    ax.set_title(f"Gantt Chart ({policy})" if policy else "Gantt Chart")
    ax.grid(True, axis="x", linestyle=":", alpha=0.5)
    fig.tight_layout()

    if out_path:
        ensure_dir(out_path)
        fig.savefig(out_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()

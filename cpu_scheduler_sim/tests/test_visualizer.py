from __future__ import annotations

from cpu_scheduler_sim.backend.core import init_procs
from cpu_scheduler_sim.backend.schedulers import fcfs_run
from cpu_scheduler_sim.backend.utils import EventLogger
from cpu_scheduler_sim.backend.visualizer import plot_gantt


def test_plot_gantt_saves_file(tmp_path):
    table = init_procs([5, 3, 8])
    logger = EventLogger()
    fcfs_run(table, logger=logger)

    out = tmp_path / "charts" / "gantt.png"
    plot_gantt(table, logger, str(out))
    assert out.exists()
    assert out.stat().st_size > 0

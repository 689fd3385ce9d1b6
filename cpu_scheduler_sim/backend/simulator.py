from __future__ import annotations

from typing import Dict, Optional, Sequence
from dataclasses import dataclass

from .core import ProcessTable, init_procs
from .schedulers import FCFSScheduler, RoundRobinScheduler
from .utils import EventLogger, compute_waiting_times, compute_turnaround_times, compute_avg, compute_throughput


class Scheduler:
    FCFS = "FCFS"  # non-preemptive, index order
    RR = "RR"      # preemptive by quantum expiry only


POLICIES = (Scheduler.FCFS, Scheduler.RR)


@dataclass
class SimulationConfig:
    policy: str = Scheduler.RR
    time_quantum: int = 2
    record_events: bool = True


@dataclass
class SimulationResult:
    table: ProcessTable
    policy: str
    time_quantum: Optional[int]
    total_time: int
    waiting_times: Dict[int, int]
    turnaround_times: Dict[int, int]
    avg_waiting_time: float
    avg_turnaround_time: float
    throughput: float
    logger: EventLogger


def simulate(
    bursts: Sequence[int],
    policy: str = Scheduler.RR,
    time_quantum: int = 2,
    logger: Optional[EventLogger] = None,
) -> SimulationResult:
    """Run one scheduling simulation over the given burst times.

    Raises ValueError for an unknown policy or when there are no processes.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown scheduling policy: {policy}")

    table = init_procs(bursts)
    if table is None:
        raise ValueError("no processes to schedule")

    if policy == Scheduler.FCFS:
        scheduler = FCFSScheduler(logger=logger)
    else:
        scheduler = RoundRobinScheduler(time_quantum=time_quantum, logger=logger)
    total_time = scheduler.run(table)

    waiting_times = compute_waiting_times(table)
    turnaround_times = compute_turnaround_times(table)

    return SimulationResult(
        table=table,
        policy=policy,
        time_quantum=time_quantum if policy == Scheduler.RR else None,
        total_time=total_time,
        waiting_times=waiting_times,
        turnaround_times=turnaround_times,
        avg_waiting_time=compute_avg(list(waiting_times.values())),
        avg_turnaround_time=compute_avg(list(turnaround_times.values())),
        throughput=compute_throughput(table, total_time),
        logger=logger if logger is not None else EventLogger(),
    )


def run_config(bursts: Sequence[int], config: SimulationConfig | None = None) -> SimulationResult:
    """Run `simulate` with the settings held in a SimulationConfig."""
    config = config or SimulationConfig()
    logger = EventLogger() if config.record_events else None
    return simulate(bursts, policy=config.policy, time_quantum=config.time_quantum, logger=logger)

"""
Scheduling engine: the step executor, the Round Robin selector and the
FCFS / Round Robin drivers.
"""

from abc import ABC, abstractmethod
from typing import Optional, Set

from .core import ProcessTable
from .utils import EventLogger


def run_proc(table: Optional[ProcessTable], current: int, amount: int) -> int:
    """Run process `current` for up to `amount` time units.

    Every other unfinished process waits for the time actually used.
    Invalid calls leave the table untouched. Returns the time used.
    """
    if not table or not table.in_range(current) or amount <= 0:
        return 0

    pcb = table[current]
    remaining = pcb.burst_left
    if remaining <= 0:
        return 0

    used = min(amount, remaining)
    for i, other in enumerate(table):
        if i != current and other.burst_left > 0:
            other.wait += used
    pcb.burst_left = remaining - used
    return used


def rr_next(previous: Optional[int], table: Optional[ProcessTable]) -> Optional[int]:
    """Index of the next process to run in Round Robin order.

    Scans forward cyclically from `previous + 1`. The previous process is
    picked again only when nothing else is runnable. Returns None once every
    process is finished.
    """
    if not table or not table.any_runnable():
        return None

    n = len(table)
    if not table.in_range(previous):
        return next(i for i in range(n) if not table.is_finished(i))

    i = (previous + 1) % n
    while i != previous:
        if not table.is_finished(i):
            return i
        i = (i + 1) % n

    if not table.is_finished(previous):
        return previous

    # unreachable while any_runnable() holds, kept as a last resort
    for j in range(n):
        if not table.is_finished(j):
            return j
    return None


class BaseScheduler(ABC):
    """Abstract base class for the table-driven schedulers."""

    name: str = ""

    def __init__(self, logger: Optional[EventLogger] = None):
        self.logger = logger
        self.clock: int = 0
        self._started: Set[int] = set()

    @abstractmethod
    def run(self, table: Optional[ProcessTable]) -> int:
        """Run every process in the table to completion; return elapsed time."""
        pass

    def step(self, table: ProcessTable, current: int, amount: int) -> int:
        """Advance the clock by running one process, recording the slice."""
        used = run_proc(table, current, amount)
        if used <= 0:
            return 0

        start = self.clock
        self.clock += used
        if self.logger is not None:
            if current not in self._started:
                self._started.add(current)
                self.logger.log_process_event(start, current, "start")
            self.logger.log_timeline_slice(start, self.clock, current, self.name)
            if table.is_finished(current):
                self.logger.log_process_event(self.clock, current, "complete")
        return used


class FCFSScheduler(BaseScheduler):
    """First Come First Serve: each process runs to completion in index order."""

    name = "FCFS"

    def run(self, table: Optional[ProcessTable]) -> int:
        if not table:
            return 0

        time = 0
        for i, pcb in enumerate(table):
            if pcb.finished:
                continue
            amount = pcb.burst_left
            self.step(table, i, amount)
            time += amount
        return time


class RoundRobinScheduler(BaseScheduler):
    """Round Robin scheduler with a fixed time quantum."""

    name = "RR"

    def __init__(self, time_quantum: int = 2, logger: Optional[EventLogger] = None):
        super().__init__(logger=logger)
        self.time_quantum = time_quantum

    def run(self, table: Optional[ProcessTable]) -> int:
        if not table or self.time_quantum <= 0:
            return 0

        time = 0
        previous: Optional[int] = None
        while True:
            current = rr_next(previous, table)
            if current is None:
                break
            remaining = table[current].burst_left
            if remaining <= 0:
                continue
            amount = min(self.time_quantum, remaining)
            self.step(table, current, amount)
            time += amount
            previous = current
        return time


def fcfs_run(table: Optional[ProcessTable], logger: Optional[EventLogger] = None) -> int:
    return FCFSScheduler(logger=logger).run(table)


def rr_run(table: Optional[ProcessTable], quantum: int, logger: Optional[EventLogger] = None) -> int:
    return RoundRobinScheduler(time_quantum=quantum, logger=logger).run(table)

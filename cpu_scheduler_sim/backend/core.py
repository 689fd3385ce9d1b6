"""
Core data structures for the CPU scheduler simulator.
Includes the PCB and the fixed-size process table.
"""

from dataclasses import dataclass
from typing import List, Optional, Iterator, Sequence


@dataclass
class PCB:
    """Process Control Block - bookkeeping for one simulated process."""
    pid: int
    burst_time: int
    burst_left: Optional[int] = None
    wait: int = 0

    def __post_init__(self):
        """Initialize derived attributes."""
        self.burst_left = self.burst_time if self.burst_left is None else self.burst_left

    @property
    def finished(self) -> bool:
        return self.burst_left <= 0


class ProcessTable:
    """Ordered, fixed-length table of PCBs.

    The index of a PCB never changes and equals its pid, so schedulers
    address processes by index only.
    """

    def __init__(self, pcbs: List[PCB]):
        self._items: List[PCB] = list(pcbs)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> PCB:
        return self._items[index]

    def __iter__(self) -> Iterator[PCB]:
        return iter(self._items)

    def in_range(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._items)

    def is_finished(self, index: int) -> bool:
        return self._items[index].finished

    def any_runnable(self) -> bool:
        """True while at least one process still needs CPU time."""
        return any(not p.finished for p in self._items)

    def total_burst_left(self) -> int:
        return sum(max(0, p.burst_left) for p in self._items)

    def total_wait(self) -> int:
        return sum(p.wait for p in self._items)

    def waits(self) -> List[int]:
        return [p.wait for p in self._items]

    def dump(self) -> List[str]:
        """Debug view of the table, one line per PCB."""
        return [f"P{p.pid}: burst_left={p.burst_left} wait={p.wait}" for p in self._items]


def init_procs(bursts: Optional[Sequence[int]]) -> Optional[ProcessTable]:
    """Build a process table from burst times given in arrival order.

    Returns None when there is nothing to schedule. Burst values are taken
    as given; a non-positive burst is simply a process that is already done.
    """
    if not bursts:
        return None
    return ProcessTable([PCB(pid=i, burst_time=int(b)) for i, b in enumerate(bursts)])

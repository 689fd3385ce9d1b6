"""
Backend package for the CPU scheduler simulator.
Contains the process table, the scheduling engine and reporting helpers.
"""

from .core import PCB, ProcessTable, init_procs
from .schedulers import (
    run_proc, rr_next, fcfs_run, rr_run,
    BaseScheduler, FCFSScheduler, RoundRobinScheduler,
)
from .simulator import simulate, run_config, Scheduler, SimulationConfig, SimulationResult
from .utils import EventLogger

__all__ = [
    'PCB', 'ProcessTable', 'init_procs',
    'run_proc', 'rr_next', 'fcfs_run', 'rr_run',
    'BaseScheduler', 'FCFSScheduler', 'RoundRobinScheduler',
    'simulate', 'run_config', 'Scheduler', 'SimulationConfig', 'SimulationResult',
    'EventLogger',
]

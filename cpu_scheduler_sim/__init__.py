"""
CPU scheduling simulator: FCFS and Round Robin over a fixed process table.
"""

__version__ = "0.1.0"

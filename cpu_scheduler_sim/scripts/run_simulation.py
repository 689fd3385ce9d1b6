from __future__ import annotations

import argparse
from typing import List, Optional, Tuple
import os
import sys

# Ensure project root is on sys.path when running as a script
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from cpu_scheduler_sim.backend.simulator import simulate, Scheduler
from cpu_scheduler_sim.backend.utils import EventLogger, parse_burst
from cpu_scheduler_sim.backend.visualizer import plot_gantt


MISSING_ARGUMENTS = "ERROR: Missing arguments"

# option flag -> number of values it takes; any other token is a number
OPTION_FLAGS = {"--trace": 0, "--show-table": 0, "--log": 1, "--out": 1}
# algorithm -> minimum count of numeric tokens
ALGORITHMS = {"fcfs": 1, "rr": 2}


class _ArgumentParser(argparse.ArgumentParser):
    """Reports every usage error with the single fixed message."""

    def error(self, message: str):
        print(MISSING_ARGUMENTS)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(prog="cpu-sched", description="FCFS / Round Robin CPU scheduling simulator", add_help=False)
    p.add_argument("--trace", action="store_true", help="Print the execution order")
    p.add_argument("--show-table", action="store_true", help="Print the final process table")
    p.add_argument("--log", type=str, default=None, help="Export the event log to <LOG>.json and <LOG>_*.csv")
    p.add_argument("--out", type=str, default=None, help="Save a Gantt chart to this path")
    return p


def split_tokens(tokens: List[str]) -> Tuple[List[str], List[str]]:
    """Separate option flags from numeric tokens, keeping the numbers in order."""
    numbers: List[str] = []
    flags: List[str] = []
    it = iter(tokens)
    for token in it:
        if token not in OPTION_FLAGS:
            numbers.append(token)
        elif OPTION_FLAGS[token] == 0:
            flags.append(token)
        else:
            value = next(it, None)
            # '=' form so values starting with '-' are not read as options
            flags.append(token if value is None else f"{token}={value}")
    return numbers, flags


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse `<algorithm> [<quantum>] <burst>...` plus option flags.

    Numeric tokens never reach argparse, so text like `-x`, `-h` or `--`
    is taken as a number (0) instead of an option.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    if not argv or argv[0] not in ALGORITHMS:
        parser.error("unknown algorithm")

    algorithm = argv[0]
    numbers, flags = split_tokens(argv[1:])
    if len(numbers) < ALGORITHMS[algorithm]:
        parser.error("too few arguments")

    args = parser.parse_args(flags)
    args.algorithm = algorithm
    if algorithm == "rr":
        args.quantum, args.bursts = numbers[0], numbers[1:]
    else:
        args.quantum, args.bursts = None, numbers
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    bursts = [parse_burst(b) for b in args.bursts]

    if args.algorithm == "fcfs":
        policy, quantum = Scheduler.FCFS, 0
        print("Using FCFS\n")
    else:
        policy, quantum = Scheduler.RR, parse_burst(args.quantum)
        print(f"Using RR({quantum}).\n")

    for i, burst in enumerate(bursts):
        print(f"Accepted P{i}: Burst {burst}")

    logger = EventLogger()
    result = simulate(bursts, policy=policy, time_quantum=quantum, logger=logger)

    print(f"Average wait time: {result.avg_waiting_time:.2f}")

    if args.trace:
        print(f"Trace: {logger.trace()}")
    if args.show_table:
        for line in result.table.dump():
            print(line)
    if args.log:
        logger.export_json(f"{args.log}.json")
        logger.export_csv(args.log)
        print(f"Logs written to {args.log}.json and {args.log}_*.csv")
    if args.out:
        plot_gantt(result.table, logger, args.out)
        print(f"Saved plot to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

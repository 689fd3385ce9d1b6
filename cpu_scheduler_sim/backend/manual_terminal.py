from __future__ import annotations

import shlex
from typing import Callable, Dict, List, Optional
from colorama import Fore, Style, init as colorama_init

from .simulator import simulate, Scheduler, SimulationResult
from .utils import EventLogger, parse_burst
from .visualizer import plot_gantt


class ManualTerminal:
    """Line-oriented front end that collects bursts and runs simulations."""

    def __init__(self) -> None:
        colorama_init(autoreset=True)
        self.bursts: List[int] = []
        self.last_result: Optional[SimulationResult] = None
        self.commands: Dict[str, Callable[[List[str]], None]] = {
            "help": self._help,
            "add": self._add,
            "list": self._list,
            "run": self._run,
            "stats": self._stats,
            "clear": self._clear,
            "exit": self._exit,
            "quit": self._exit,
        }

    def prompt(self) -> None:
        print(Fore.CYAN + "Scheduler Terminal. Type 'help' for commands.")
        try:
            while True:
                raw = input(Fore.GREEN + "> ")
                if raw.strip():
                    self.handle_command(raw)
        except (EOFError, KeyboardInterrupt):
            print()

    def handle_command(self, raw: str) -> None:
        try:
            cmd, *args = shlex.split(raw) or [""]
        except ValueError as e:
            print(Fore.RED + f"Parse error: {e}")
            return
        if not cmd:
            return
        handler = self.commands.get(cmd.lower())
        if handler is None:
            print(Fore.YELLOW + "Unknown command. Type 'help'.")
            return
        handler(args)

    def _help(self, args: List[str]) -> None:
        print("Commands:")
        print("  add <burst> [<burst> ...]")
        print("  list")
        print("  run fcfs|rr [<quantum>] [--out path]")
        print("  stats")
        print("  clear")
        print("  exit")

    def _clear(self, args: List[str]) -> None:
        self.bursts = []
        self.last_result = None
        print(Fore.CYAN + "Process list cleared")

    def _exit(self, args: List[str]) -> None:
        raise SystemExit(0)

    def _add(self, args: List[str]) -> None:
        if not args:
            print(Fore.RED + "Usage: add <burst> [<burst> ...]")
            return
        for token in args:
            burst = parse_burst(token)
            pid = len(self.bursts)
            self.bursts.append(burst)
            print(Fore.CYAN + f"Accepted P{pid}: Burst {burst}")

    def _list(self, args: List[str]) -> None:
        if not self.bursts:
            print("No processes yet")
            return
        for pid, burst in enumerate(self.bursts):
            print(f"P{pid}: burst={burst}")

    def _run(self, args: List[str]) -> None:
        if not args:
            print(Fore.RED + "Usage: run fcfs|rr [<quantum>] [--out path]")
            return
        if not self.bursts:
            print(Fore.RED + "No processes to schedule")
            return

        algorithm, *rest = args
        algorithm = algorithm.lower()
        out_path: Optional[str] = None
        quantum: Optional[int] = None
        it = iter(rest)
        for token in it:
            if token == "--out":
                out_path = next(it, None)
            elif quantum is None:
                quantum = parse_burst(token)

        logger = EventLogger()
        if algorithm == "fcfs":
            result = simulate(self.bursts, policy=Scheduler.FCFS, logger=logger)
            print(Style.BRIGHT + "Using FCFS")
        elif algorithm == "rr":
            if quantum is None:
                print(Fore.RED + "Usage: run rr <quantum>")
                return
            result = simulate(self.bursts, policy=Scheduler.RR, time_quantum=quantum, logger=logger)
            print(Style.BRIGHT + f"Using RR({quantum}).")
        else:
            print(Fore.RED + "Unknown algorithm")
            return

        self.last_result = result
        print(f"Trace: {logger.trace() or '(nothing ran)'}")
        print(Style.BRIGHT + f"Average wait time: {result.avg_waiting_time:.2f}")
        if out_path:
            plot_gantt(result.table, logger, out_path)
            print(Fore.CYAN + f"Saved plot to {out_path}")

    def _stats(self, args: List[str]) -> None:
        if not self.last_result:
            print("No simulation yet")
            return
        r = self.last_result
        for line in r.table.dump():
            print(line)
        print(f"Total time: {r.total_time}")
        print(f"Avg waiting time: {r.avg_waiting_time:.3f}")
        print(f"Avg turnaround time: {r.avg_turnaround_time:.3f}")
        print(f"Throughput: {r.throughput:.3f} jobs/unit")


def main() -> None:
    ManualTerminal().prompt()


if __name__ == "__main__":
    main()

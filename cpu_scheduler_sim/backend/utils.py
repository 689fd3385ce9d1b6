from __future__ import annotations

from typing import List, Dict, Optional, Any
import json
import csv
import re

from .core import ProcessTable


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EventLogger:
    def __init__(self) -> None:
        self.process_events: List[Dict[str, Any]] = []
        self.timeline: List[Dict[str, Any]] = []

    def log_process_event(self, time_s: int, pid: int, event: str) -> None:
        self.process_events.append({
            "time": time_s,
            "pid": pid,
            "event": event,
        })

    def log_timeline_slice(self, start: int, end: int, pid: Optional[int], policy: str) -> None:
        self.timeline.append({
            "start": start,
            "end": end,
            "pid": pid,
            "policy": policy,
        })

    def trace(self) -> str:
        """Execution order as P<pid>(<amount>) tokens."""
        return "->".join(f"P{seg['pid']}({seg['end'] - seg['start']})" for seg in self.timeline)

    def events_for(self, pid: int) -> List[Dict[str, Any]]:
        return [e for e in self.process_events if e["pid"] == pid]

    def export_json(self, path: str) -> None:
        data = {
            "process_events": self.process_events,
            "timeline": self.timeline,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def export_csv(self, base_path_no_ext: str) -> None:
        with open(f"{base_path_no_ext}_events.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["time", "pid", "event"])
            writer.writeheader()
            for row in self.process_events:
                writer.writerow(row)
        with open(f"{base_path_no_ext}_timeline.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["start", "end", "pid", "policy"])
            writer.writeheader()
            for row in self.timeline:
                writer.writerow(row)


def parse_burst(text: str) -> int:
    """Parse the leading decimal integer of text; anything else is 0."""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


def compute_waiting_times(table: ProcessTable) -> Dict[int, int]:
    return {p.pid: p.wait for p in table}


def compute_turnaround_times(table: ProcessTable) -> Dict[int, int]:
    # every process arrives at t=0, so turnaround is wait plus service
    return {p.pid: p.wait + max(0, p.burst_time) for p in table}


def compute_avg(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_throughput(table: ProcessTable, total_time: int) -> float:
    if total_time <= 0:
        return 0.0
    return len(table) / total_time

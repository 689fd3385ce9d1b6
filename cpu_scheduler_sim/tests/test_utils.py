from __future__ import annotations

import csv
import json

import pytest

from cpu_scheduler_sim.backend.core import init_procs
from cpu_scheduler_sim.backend.schedulers import rr_run
from cpu_scheduler_sim.backend.utils import EventLogger, parse_burst, compute_avg, compute_throughput


@pytest.mark.parametrize("text,expected", [
    ("5", 5),
    ("  12", 12),
    ("-3", -3),
    ("+4", 4),
    ("7abc", 7),
    ("abc", 0),
    ("", 0),
    ("3.9", 3),
])
def test_parse_burst(text, expected):
    assert parse_burst(text) == expected


def test_compute_avg():
    assert compute_avg([]) == 0.0
    assert compute_avg([1, 2, 3]) == 2.0


def test_compute_throughput():
    table = init_procs([2, 2])
    assert compute_throughput(table, 4) == 0.5
    assert compute_throughput(table, 0) == 0.0


def test_export_json_and_csv(tmp_path):
    logger = EventLogger()
    rr_run(init_procs([5, 3, 8]), 4, logger=logger)

    json_path = tmp_path / "run.json"
    logger.export_json(str(json_path))
    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert len(data["timeline"]) == 5
    assert data["timeline"][0] == {"start": 0, "end": 4, "pid": 0, "policy": "RR"}

    base = tmp_path / "run"
    logger.export_csv(str(base))
    with open(f"{base}_timeline.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["pid"] for r in rows] == ["0", "1", "2", "0", "2"]
    with open(f"{base}_events.csv", newline="", encoding="utf-8") as f:
        events = list(csv.DictReader(f))
    assert {r["event"] for r in events} == {"start", "complete"}


def test_events_for_pid():
    logger = EventLogger()
    logger.log_process_event(0, 1, "start")
    logger.log_process_event(3, 1, "complete")
    logger.log_process_event(3, 2, "start")
    assert [e["event"] for e in logger.events_for(1)] == ["start", "complete"]


def test_empty_trace():
    assert EventLogger().trace() == ""

import os
import sys

# headless plotting for visualizer tests
os.environ.setdefault("MPLBACKEND", "Agg")


def pytest_sessionstart(session):
    # Ensure repository root is on sys.path so 'cpu_scheduler_sim' can be imported
    here = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.abspath(os.path.join(here, os.pardir, os.pardir))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)

#!/usr/bin/env python3
"""Launch the interactive scheduler terminal."""

from __future__ import annotations
import os, sys
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from cpu_scheduler_sim.backend.manual_terminal import main


if __name__ == '__main__':
    main()

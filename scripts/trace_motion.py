#!/usr/bin/env python
"""Print a motion trace for the default circuit lineup.

Each row of the trace gives one vehicle's step count, offset and
direction at one sampled millisecond.  The table can also be written to a
CSV file for plotting elsewhere.

Usage
-----
::

    python scripts/trace_motion.py
    python scripts/trace_motion.py --until 5000 --every 50 --csv trace.csv

Requirements
------------
- ``pandas>=2.0.0``, ``numpy>=1.26`` and ``pyyaml>=6.0`` must be installed.
"""

from __future__ import annotations

import argparse
import os
import sys

# Ensure the project root is on the import path when running as a script.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from circuit_engine.analysis.trace import motion_trace  # noqa: E402
from circuit_engine.cli import build_track  # noqa: E402
from circuit_engine.config import load_circuit_config  # noqa: E402


def main() -> None:
    """Trace the configured lineup and print a per-vehicle summary."""
    parser = argparse.ArgumentParser(description="Tabulate circuit motion.")
    parser.add_argument("--until", type=int, default=2000, help="Last sample (ms).")
    parser.add_argument("--every", type=int, default=100, help="Sample spacing (ms).")
    parser.add_argument("--csv", help="Optional path to write the full trace to.")
    args = parser.parse_args()

    config = load_circuit_config()
    track = build_track(config, config.name, config.length, config.lanes)
    trace = motion_trace(track, range(0, args.until + 1, args.every))

    print("=" * 60)
    print(f"MOTION TRACE: {track.name} (length {track.length}, {track.lane_count} lanes)")
    print("=" * 60)
    print(trace.to_string(index=False))
    print()

    # ---- Per-lane summary --------------------------------------------------
    summary = trace.groupby("lane").agg(
        vehicle=("vehicle", "first"),
        cadence=("cadence", "first"),
        min_position=("position", "min"),
        max_position=("position", "max"),
        reversals=("forward", lambda s: int((s != s.shift()).sum()) - 1),
    )
    print(summary.to_string())

    if args.csv:
        trace.to_csv(args.csv, index=False)
        print(f"\nTrace written to {args.csv}")


if __name__ == "__main__":
    main()

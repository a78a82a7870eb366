"""Tabulate vehicle motion over time without drawing frames.

Useful for checking where each vehicle turns around and how often the
render loop would fire for a given lineup.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from circuit_engine.core.motion import (
    cadence,
    is_forward,
    position,
    runnable_length,
    step_count,
)
from circuit_engine.core.track import Track

TRACE_COLUMNS: tuple[str, ...] = (
    "elapsed_ms",
    "lane",
    "vehicle",
    "speed",
    "cadence",
    "step",
    "position",
    "forward",
)


def motion_trace(track: Track, elapsed_values: Iterable[int]) -> pd.DataFrame:
    """Build a long-format table of vehicle positions.

    Args:
        track: Track whose vehicles are traced.
        elapsed_values: Milliseconds since start at which to sample.

    Returns:
        A :class:`pandas.DataFrame` with one row per (elapsed, vehicle) pair
        and the columns in ``TRACE_COLUMNS``.
    """
    rows: list[dict[str, object]] = []
    for elapsed in elapsed_values:
        for lane, vehicle in enumerate(track.vehicles):
            span = runnable_length(track.length, vehicle.body)
            step = step_count(elapsed, vehicle.speed)
            rows.append(
                {
                    "elapsed_ms": elapsed,
                    "lane": lane,
                    "vehicle": type(vehicle).__name__,
                    "speed": vehicle.speed,
                    "cadence": cadence(vehicle.speed),
                    "step": step,
                    "position": position(elapsed, vehicle.speed, span),
                    "forward": span <= 0 or is_forward(step, span),
                }
            )
    return pd.DataFrame(rows, columns=list(TRACE_COLUMNS))

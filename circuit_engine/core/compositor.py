"""Frame compositor: stamps vehicle sprites onto a copy of the background."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from circuit_engine.core.grid import LANE_WIDTH
from circuit_engine.core.motion import position, runnable_length
from circuit_engine.core.vehicle import Vehicle


def vehicle_offsets(
    vehicles: Sequence[Vehicle],
    elapsed_ms: int,
    track_length: int,
) -> list[int]:
    """Return the horizontal offset of every vehicle, in lane order.

    The first row of each body stands in for the sprite width.
    """
    offsets: list[int] = []
    for vehicle in vehicles:
        span = runnable_length(track_length, vehicle.body)
        offsets.append(position(elapsed_ms, vehicle.speed, span))
    return offsets


def compose_frame(
    background: NDArray[np.str_],
    vehicles: Sequence[Vehicle],
    elapsed_ms: int,
    track_length: int,
) -> NDArray[np.str_]:
    """Build one frame for the given elapsed time.

    Vehicle ``i`` occupies lane ``i``.  Row ``r`` of its body lands on grid
    row ``i * LANE_WIDTH + r + 1`` starting at column ``offset + 1``; the
    ``+ 1`` on both axes skips the border.

    Args:
        background: Bordered template grid.  Never modified.
        vehicles: Vehicles in lane order.  Assumed to have passed
            :meth:`Track.add_vehicle` validation.
        elapsed_ms: Milliseconds since the animation started.
        track_length: Usable interior width of the track.

    Returns:
        A new writable grid with the sprites drawn in.
    """
    frame = background.copy()
    offsets = vehicle_offsets(vehicles, elapsed_ms, track_length)
    for lane, (vehicle, offset) in enumerate(zip(vehicles, offsets)):
        for r, row in enumerate(vehicle.body):
            grid_row = lane * LANE_WIDTH + r + 1
            frame[grid_row, offset + 1 : offset + 1 + len(row)] = list(row)
    return frame

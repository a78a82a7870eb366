"""Static bordered background for the circuit.

The grid has one row of border above and below the lanes and one column of
border on each side of the usable track::

    ┌──────────┐
    │..........│
    │..........│
    │..........│
    └──────────┘

Row index is the vertical axis; ``grid[0]`` is the top border.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LANE_WIDTH: int = 3  # rows per lane
BACKGROUND_CHAR: str = "."

TOP_LEFT: str = "┌"
TOP_RIGHT: str = "┐"
BOTTOM_LEFT: str = "└"
BOTTOM_RIGHT: str = "┘"
VERTICAL: str = "│"
HORIZONTAL: str = "─"


def grid_shape(length: int, lane_count: int) -> tuple[int, int]:
    """Return ``(rows, columns)`` of the grid including its border."""
    return lane_count * LANE_WIDTH + 2, length + 2


def build_background(length: int, lane_count: int) -> NDArray[np.str_]:
    """Build the bordered background grid.

    Args:
        length: Usable interior width of the track (>= 1).
        lane_count: Number of lanes (>= 1).

    Returns:
        A read-only ``<U1`` array of shape ``grid_shape(length, lane_count)``.

    Raises:
        ValueError: If *length* or *lane_count* is not positive.
    """
    if length < 1:
        raise ValueError("length must be >= 1.")
    if lane_count < 1:
        raise ValueError("lane_count must be >= 1.")

    grid = np.full(grid_shape(length, lane_count), BACKGROUND_CHAR, dtype="<U1")

    grid[0, 1:-1] = HORIZONTAL
    grid[-1, 1:-1] = HORIZONTAL
    grid[1:-1, 0] = VERTICAL
    grid[1:-1, -1] = VERTICAL

    grid[0, 0] = TOP_LEFT
    grid[0, -1] = TOP_RIGHT
    grid[-1, 0] = BOTTOM_LEFT
    grid[-1, -1] = BOTTOM_RIGHT

    grid.setflags(write=False)
    return grid


def grid_to_lines(grid: NDArray[np.str_]) -> list[str]:
    """Join each grid row into a display line."""
    return ["".join(row) for row in grid.tolist()]

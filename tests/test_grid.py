"""Tests for the bordered background grid."""

import numpy as np
import pytest

from circuit_engine.core.grid import (
    BACKGROUND_CHAR,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    HORIZONTAL,
    LANE_WIDTH,
    TOP_LEFT,
    TOP_RIGHT,
    VERTICAL,
    build_background,
    grid_to_lines,
)


def test_single_lane_grid_layout() -> None:
    """length=5, one lane: 5 rows by 7 columns with a full border."""
    grid = build_background(5, 1)
    assert grid.shape == (5, 7), "5 rows by 7 columns expected"

    assert grid[0, 0] == TOP_LEFT
    assert grid[0, -1] == TOP_RIGHT
    assert grid[-1, 0] == BOTTOM_LEFT
    assert grid[-1, -1] == BOTTOM_RIGHT
    assert len({TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT}) == 4, "corner glyphs must be distinct"

    assert (grid[0, 1:-1] == HORIZONTAL).all()
    assert (grid[-1, 1:-1] == HORIZONTAL).all()
    assert (grid[1:-1, 0] == VERTICAL).all()
    assert (grid[1:-1, -1] == VERTICAL).all()
    assert (grid[1:-1, 1:-1] == BACKGROUND_CHAR).all(), "interior must be background"


def test_grid_rows_scale_with_lanes() -> None:
    """Each lane adds three rows between the border rows."""
    grid = build_background(20, 4)
    assert grid.shape == (4 * LANE_WIDTH + 2, 22), "rows must be lanes * 3 + 2"


def test_grid_is_read_only() -> None:
    """The template cannot be written to."""
    grid = build_background(5, 1)
    with pytest.raises(ValueError):
        grid[1, 1] = "x"


@pytest.mark.parametrize("length,lanes", [(0, 1), (5, 0), (-3, 2)])
def test_grid_rejects_non_positive_dimensions(length: int, lanes: int) -> None:
    """Length and lane count must be positive."""
    with pytest.raises(ValueError):
        build_background(length, lanes)


def test_grid_to_lines() -> None:
    """Rows join into display lines, border included."""
    lines = grid_to_lines(build_background(3, 1))
    assert lines == [
        "┌───┐",
        "│...│",
        "│...│",
        "│...│",
        "└───┘",
    ]


def test_grid_dtype_holds_single_characters() -> None:
    """Every cell holds exactly one character."""
    grid = build_background(4, 2)
    assert grid.dtype == np.dtype("<U1"), "cells must be single characters"

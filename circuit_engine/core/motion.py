"""Deterministic motion model for vehicles on the circuit.

A vehicle advances one cell every ``cadence`` milliseconds, where

    cadence = MAX_SPEED // speed

The number of cells advanced since the animation started is

    step = elapsed_ms // cadence

and the vehicle sweeps back and forth over its runnable length: even
phases (``step // runnable_length``) move left to right, odd phases move
right to left.  Step 0 is always a forward phase.  Offsets cover
``[0, runnable_length]``; the backward phase begins at ``runnable_length``.
"""

from __future__ import annotations

from collections.abc import Sequence

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_SPEED: int = 1000


def cadence(speed: int) -> int:
    """Milliseconds between two one-cell moves of a vehicle.

    Raises:
        ValueError: If *speed* is outside ``[1, MAX_SPEED]``.
    """
    if not 1 <= speed <= MAX_SPEED:
        raise ValueError(f"speed must be between 1 and {MAX_SPEED}, got {speed}.")
    return MAX_SPEED // speed


def step_count(elapsed_ms: int, speed: int) -> int:
    """Number of cells a vehicle has advanced after *elapsed_ms*."""
    if elapsed_ms < 0:
        raise ValueError("elapsed_ms must be >= 0.")
    return elapsed_ms // cadence(speed)


def runnable_length(track_length: int, body: Sequence[str]) -> int:
    """Cells a sprite can travel: track length minus the width of its first row."""
    return track_length - len(body[0])


def is_forward(step: int, runnable_length: int) -> bool:
    """Whether *step* falls in a left-to-right sweep."""
    if step == 0:
        return True
    return (step // runnable_length) % 2 == 0


def position(elapsed_ms: int, speed: int, runnable_length: int) -> int:
    """Horizontal offset of a vehicle within its lane.

    Args:
        elapsed_ms: Milliseconds since the animation started.
        speed: Vehicle speed in ``[1, MAX_SPEED]``.
        runnable_length: Track length minus the sprite width.  A sprite as
            wide as the track has nowhere to go and stays at 0.

    Returns:
        Offset from the left edge of the usable track.
    """
    if runnable_length <= 0:
        return 0
    step = step_count(elapsed_ms, speed)
    if is_forward(step, runnable_length):
        return step % runnable_length
    return runnable_length - (step % runnable_length)

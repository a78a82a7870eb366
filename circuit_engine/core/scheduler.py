"""Render loop that repaints the circuit in place.

The loop busy-polls the clock.  A frame is drawn only on milliseconds that
are a multiple of at least one vehicle cadence; every frame is followed by
a control sequence that moves the cursor back to the top-left corner of the
circuit so the next frame overwrites it.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, TextIO

from circuit_engine.core.grid import grid_to_lines

if TYPE_CHECKING:
    from circuit_engine.core.track import Track

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

POLL_INTERVAL: float = 0.0005  # seconds slept after each frame


def control_sequence(row_count: int) -> str:
    """Cursor up *row_count* lines to column 1, then carriage return."""
    return f"\x1b[{row_count}F\r"


def should_render(elapsed_ms: int, cadences: Iterable[int]) -> bool:
    """True if any vehicle is due to move at *elapsed_ms*."""
    return any(elapsed_ms % c == 0 for c in cadences)


def monotonic_ms() -> int:
    """Monotonic clock in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class RenderLoop:
    """Drives the animation of a :class:`Track`.

    Attributes:
        track: The track to draw.
        stream: Text stream frames are written to.
        clock: Zero-argument callable returning the time in milliseconds.
        sleep: Callable used to yield between frames (seconds).
        poll_interval: Pause after each frame, in seconds.
    """

    __slots__ = ("track", "stream", "clock", "sleep", "poll_interval")

    def __init__(
        self,
        track: Track,
        stream: TextIO | None = None,
        clock: Callable[[], int] = monotonic_ms,
        sleep: Callable[[float], None] = time.sleep,
        poll_interval: float = POLL_INTERVAL,
    ) -> None:
        if poll_interval < 0.0:
            raise ValueError("poll_interval must be >= 0.")
        self.track: Track = track
        self.stream: TextIO = stream if stream is not None else sys.stdout
        self.clock: Callable[[], int] = clock
        self.sleep: Callable[[float], None] = sleep
        self.poll_interval: float = poll_interval

    def frame_text(self, elapsed_ms: int) -> str:
        """Rows of the frame for *elapsed_ms* followed by the control sequence."""
        lines = grid_to_lines(self.track.compose(elapsed_ms))
        return "\n".join(lines) + "\n" + control_sequence(self.track.row_count)

    def run(self, max_frames: int | None = None) -> int:
        """Run the animation.

        Args:
            max_frames: Stop after this many frames.  ``None`` runs until the
                process is interrupted or the stream fails.

        Returns:
            Number of frames written.

        Raises:
            ValueError: If the track carries no vehicles.
        """
        cadences = self.track.cadences
        if not cadences:
            raise ValueError(f"Track '{self.track.name}' has no vehicles to animate.")
        self.stream.write(f"[{self.track.name}]\n")
        self.stream.flush()
        logger.debug(
            "Starting render loop for %r with cadences %s",
            self.track.name,
            sorted(cadences),
        )

        frames = 0
        start = self.clock()
        while max_frames is None or frames < max_frames:
            elapsed = self.clock() - start
            if not should_render(elapsed, cadences):
                continue
            # One write per frame keeps rows and control sequence together.
            self.stream.write(self.frame_text(elapsed))
            self.stream.flush()
            frames += 1
            self.sleep(self.poll_interval)
        return frames

"""Track aggregate: configuration, vehicles, and the static background.

A track holds at most one vehicle per lane.  Vehicles are validated when
they are added so that the render loop never has to bounds-check a sprite.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO

import numpy as np
from numpy.typing import NDArray

from circuit_engine.core.compositor import compose_frame
from circuit_engine.core.errors import (
    InvalidDimensionsError,
    InvalidSpeedError,
    NullInputError,
)
from circuit_engine.core.grid import LANE_WIDTH, build_background, grid_shape, grid_to_lines
from circuit_engine.core.motion import MAX_SPEED, cadence
from circuit_engine.core.scheduler import POLL_INTERVAL, RenderLoop, monotonic_ms
from circuit_engine.core.vehicle import Vehicle

logger = logging.getLogger(__name__)


class Track:
    """A bordered multi-lane circuit.

    Attributes:
        name: Circuit name shown above the animation.
        length: Usable interior width in characters.
        lane_count: Number of lanes, which is also the vehicle capacity.
    """

    __slots__ = ("name", "length", "lane_count", "_vehicles", "_cadences", "_background")

    def __init__(self, name: str, length: int, lane_count: int) -> None:
        """Initialise the track and build its background.

        Args:
            name: Circuit name.
            length: Usable interior width (>= 1).
            lane_count: Number of lanes (>= 1).

        Raises:
            ValueError: If *name* is empty or a dimension is not positive.
        """
        if not name:
            raise ValueError("Track name must not be empty.")
        self.name: str = name
        self.length: int = length
        self.lane_count: int = lane_count
        self._vehicles: list[Vehicle] = []
        self._cadences: set[int] = set()
        self._background: NDArray[np.str_] = build_background(length, lane_count)

    # -- Read-only views ------------------------------------------------------

    @property
    def lane_width(self) -> int:
        return LANE_WIDTH

    @property
    def row_count(self) -> int:
        """Grid rows including the top and bottom border."""
        return grid_shape(self.length, self.lane_count)[0]

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return tuple(self._vehicles)

    @property
    def cadences(self) -> frozenset[int]:
        """Distinct move cadences (ms) of the vehicles on the track."""
        return frozenset(self._cadences)

    @property
    def background(self) -> NDArray[np.str_]:
        return self._background

    @property
    def is_full(self) -> bool:
        return len(self._vehicles) >= self.lane_count

    # -- Mutation -------------------------------------------------------------

    def add_vehicle(self, vehicle: Vehicle | None) -> bool:
        """Place *vehicle* on the next free lane.

        Args:
            vehicle: Vehicle to add.  Lanes are assigned in arrival order.

        Returns:
            ``True`` if the vehicle was added, ``False`` if every lane is
            already taken.

        Raises:
            NullInputError: If the vehicle, its body, or a body row is missing.
            InvalidDimensionsError: If the body has no rows, more rows than
                the lane width, an empty row, a row longer than the track, or
                rows of unequal width.
            InvalidSpeedError: If the speed is not an integer in ``[1, MAX_SPEED]``.
        """
        if vehicle is None:
            raise NullInputError("A vehicle must be given.")
        if self.is_full:
            logger.debug("Track '%s' is full; rejected %r", self.name, vehicle)
            return False

        body = vehicle.body
        if body is None:
            raise NullInputError("A vehicle body must not be None.")
        if not 0 < len(body) <= LANE_WIDTH:
            raise InvalidDimensionsError(
                f"Body height must be between 1 and the lane width {LANE_WIDTH}, "
                f"got {len(body)}."
            )
        for row in body:
            if row is None:
                raise NullInputError("A vehicle body row must not be None.")
            if not 0 < len(row) <= self.length:
                raise InvalidDimensionsError(
                    f"Body length must be between 1 and the track length "
                    f"{self.length}, got {len(row)}."
                )
            if len(row) != len(body[0]):
                raise InvalidDimensionsError(
                    f"Body rows must share one width, got {len(body[0])} "
                    f"and {len(row)}."
                )

        speed = vehicle.speed
        # bool is an int subclass; reject it explicitly
        if isinstance(speed, bool) or not isinstance(speed, int):
            raise InvalidSpeedError(
                f"Speed must be an integer, got {type(speed).__name__}."
            )
        if speed < 1:
            raise InvalidSpeedError(f"Speed must be >= 1, got {speed}.")
        if speed > MAX_SPEED:
            raise InvalidSpeedError(f"Speed must be <= {MAX_SPEED}, got {speed}.")

        self._cadences.add(cadence(speed))
        self._vehicles.append(vehicle)
        logger.debug(
            "Added %r to lane %d of '%s'", vehicle, len(self._vehicles) - 1, self.name
        )
        return True

    # -- Rendering ------------------------------------------------------------

    def compose(self, elapsed_ms: int) -> NDArray[np.str_]:
        """Return a fresh frame for *elapsed_ms* milliseconds into the run."""
        return compose_frame(self._background, self._vehicles, elapsed_ms, self.length)

    def render(self, elapsed_ms: int) -> str:
        """Frame for *elapsed_ms* as newline-joined text."""
        return "\n".join(grid_to_lines(self.compose(elapsed_ms)))

    def start(
        self,
        stream: TextIO | None = None,
        clock: Callable[[], int] = monotonic_ms,
        max_frames: int | None = None,
    ) -> int:
        """Animate the track in place on *stream* (stdout by default).

        Runs forever unless *max_frames* is given.  Returns the number of
        frames written.
        """
        loop = RenderLoop(self, stream=stream, clock=clock, poll_interval=POLL_INTERVAL)
        return loop.run(max_frames=max_frames)

    def __repr__(self) -> str:
        return (
            f"Track(name={self.name!r}, length={self.length}, "
            f"lane_count={self.lane_count}, vehicles={len(self._vehicles)})"
        )

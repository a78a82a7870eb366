"""Command-line entrypoint for the ASCII circuit animation.

Usage
-----
::

    ascii-circuit [name [length [lanes]]]

All three arguments are optional; missing ones fall back to
``circuit_engine/data/circuit.yaml``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from circuit_engine import __version__
from circuit_engine.config import CircuitConfig, load_circuit_config
from circuit_engine.core.errors import InvalidVehicleError
from circuit_engine.core.track import Track

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-circuit",
        description=f"Animated ASCII circuit v{__version__}",
    )
    parser.add_argument("name", nargs="?", help="Circuit name.")
    parser.add_argument("length", nargs="?", help="Circuit length (positive integer).")
    parser.add_argument("lanes", nargs="?", help="Number of lanes (positive integer).")
    return parser


def _parse_positive(value: str | None, default: int, label: str) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{label} must be an integer, got {value!r}") from None
    if number < 1:
        raise ValueError(f"{label} must be a positive integer, got {value!r}")
    return number


def build_track(config: CircuitConfig, name: str, length: int, lanes: int) -> Track:
    """Create a track and fill it from the configured lineup.

    Raises:
        InvalidVehicleError: If a lineup vehicle does not fit the track.
    """
    track = Track(name, length, lanes)
    for entry in config.lineup:
        vehicle = entry.build()
        if not track.add_vehicle(vehicle):
            logger.warning("No free lane on '%s' for %r; skipped", track.name, vehicle)
    return track


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, build the track, and run the animation.

    Returns:
        Process exit status.
    """
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_circuit_config()

    try:
        length = _parse_positive(args.length, config.length, "length")
        lanes = _parse_positive(args.lanes, config.lanes, "lanes")
    except ValueError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1

    name = args.name or config.name
    try:
        track = build_track(config, name, length, lanes)
    except InvalidVehicleError as exc:
        logger.error("Cannot place vehicle on '%s': %s", name, exc)
        return 1

    try:
        track.start()
    except KeyboardInterrupt:
        # Step past the frame the cursor was moved back over.
        sys.stdout.write("\n" * track.row_count)
        sys.stdout.flush()
    return 0

"""Core rendering modules for the circuit animation."""

from circuit_engine.core.compositor import compose_frame, vehicle_offsets
from circuit_engine.core.errors import (
    InvalidDimensionsError,
    InvalidSpeedError,
    InvalidVehicleError,
    NullInputError,
)
from circuit_engine.core.grid import LANE_WIDTH, build_background, grid_to_lines
from circuit_engine.core.motion import MAX_SPEED, cadence, position
from circuit_engine.core.scheduler import RenderLoop, control_sequence, should_render
from circuit_engine.core.track import Track
from circuit_engine.core.vehicle import (
    VEHICLE_KINDS,
    ModernCar,
    Sedan,
    SpriteVehicle,
    Vehicle,
    Wagon,
    make_vehicle,
)

__all__ = [
    "InvalidDimensionsError",
    "InvalidSpeedError",
    "InvalidVehicleError",
    "LANE_WIDTH",
    "MAX_SPEED",
    "ModernCar",
    "NullInputError",
    "RenderLoop",
    "Sedan",
    "SpriteVehicle",
    "Track",
    "VEHICLE_KINDS",
    "Vehicle",
    "Wagon",
    "build_background",
    "cadence",
    "compose_frame",
    "control_sequence",
    "grid_to_lines",
    "make_vehicle",
    "position",
    "should_render",
    "vehicle_offsets",
]

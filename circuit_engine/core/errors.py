"""Validation errors raised when a vehicle is added to a track."""


class InvalidVehicleError(ValueError):
    """Base class for vehicles a track refuses to carry."""


class NullInputError(InvalidVehicleError):
    """The vehicle, its body, or one of its rows is missing."""


class InvalidDimensionsError(InvalidVehicleError):
    """The sprite does not fit in a lane or on the track."""


class InvalidSpeedError(InvalidVehicleError):
    """The speed is outside ``[1, MAX_SPEED]``."""

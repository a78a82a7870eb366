"""Vehicle sprites for the circuit renderer.

A vehicle is anything exposing a fixed multi-row ``body`` and an integer
``speed``.  The built-in variants hard-code a three-row glyph and a
default speed which can be overridden at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Vehicle(Protocol):
    """Capability every sprite placed on a :class:`Track` must provide.

    Attributes:
        body: Rows of display characters, top row first.  Constant for the
            lifetime of the vehicle.
        speed: Movement speed in ``[1, MAX_SPEED]``.
    """

    @property
    def body(self) -> tuple[str, ...]: ...

    @property
    def speed(self) -> int: ...


# ---------------------------------------------------------------------------
# Built-in variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Sedan:
    """Compact three-box car."""

    speed: int = 7

    @property
    def body(self) -> tuple[str, ...]:
        return (
            "   ┌───┐  ",
            "┌──    ──┐",
            "└ ◉    ◉ ┘",
        )


@dataclass(frozen=True)
class Wagon:
    """Long-roofed estate car."""

    speed: int = 4

    @property
    def body(self) -> tuple[str, ...]:
        return (
            "╭┉┉┉┉┉┉┉╮  ",
            "┊     □ ╰┉╮",
            "╰┉ⓞ     ⓞ┉╯",
        )


@dataclass(frozen=True)
class ModernCar:
    """Rounded coupe."""

    speed: int = 20

    @property
    def body(self) -> tuple[str, ...]:
        return (
            "   ╭┉┉╮    ",
            "╭┉┉╯  ╰┉┉┉╮",
            "╰┉ⓞ     ⓞ┉╯",
        )


@dataclass(frozen=True)
class SpriteVehicle:
    """Vehicle with an arbitrary body, typically declared in configuration.

    Attributes:
        body: Rows of display characters.
        speed: Movement speed.
    """

    body: tuple[str, ...]
    speed: int


VEHICLE_KINDS: dict[str, type] = {
    "sedan": Sedan,
    "wagon": Wagon,
    "modern": ModernCar,
}


def make_vehicle(kind: str, speed: int | None = None) -> Vehicle:
    """Build a built-in vehicle by kind name.

    Args:
        kind: One of the keys of ``VEHICLE_KINDS`` (case-insensitive).
        speed: Optional speed override.  ``None`` keeps the variant default.

    Returns:
        The constructed vehicle.

    Raises:
        ValueError: If *kind* is not a known variant.
    """
    try:
        cls = VEHICLE_KINDS[kind.lower()]
    except KeyError:
        known = ", ".join(sorted(VEHICLE_KINDS))
        raise ValueError(f"Unknown vehicle kind '{kind}' (known: {known})") from None
    if speed is None:
        return cls()
    return cls(speed=speed)

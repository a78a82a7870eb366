"""Configuration loader for the circuit renderer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from circuit_engine.core.vehicle import VEHICLE_KINDS, SpriteVehicle, Vehicle, make_vehicle

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
CIRCUIT_PATH: Path = DATA_DIR / "circuit.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "length", "lanes", "lineup")


@dataclass(frozen=True)
class LineupEntry:
    """One vehicle of the default lineup.

    Attributes:
        kind: Built-in variant name, or ``None`` for an inline sprite.
        speed: Speed override; ``None`` keeps the variant default.
        body: Inline sprite rows, used when ``kind`` is ``None``.
    """

    kind: str | None = None
    speed: int | None = None
    body: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.kind is None and (self.body is None or self.speed is None):
            raise ValueError("An inline sprite needs both 'body' and 'speed'.")

    def build(self) -> Vehicle:
        """Construct the vehicle this entry describes."""
        if self.kind is not None:
            return make_vehicle(self.kind, self.speed)
        return SpriteVehicle(body=self.body, speed=self.speed)  # type: ignore[arg-type]


@dataclass(frozen=True)
class CircuitConfig:
    """Defaults for the command-line animation.

    Attributes:
        name: Circuit name.
        length: Usable track length.
        lanes: Number of lanes.
        lineup: Vehicles to place, in lane order.
    """

    name: str
    length: int
    lanes: int
    lineup: tuple[LineupEntry, ...]


def _positive_int(value: object, label: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{label}' must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"'{label}' must be >= 1, got {value}")
    return value


def _parse_entry(idx: int, entry: object) -> LineupEntry:
    if not isinstance(entry, dict):
        raise ValueError(f"Lineup entry {idx} must be a mapping")

    speed = entry.get("speed")
    if speed is not None:
        speed = _positive_int(speed, f"lineup[{idx}].speed")

    if "kind" in entry:
        kind = str(entry["kind"]).lower()
        if kind not in VEHICLE_KINDS:
            raise ValueError(f"Lineup entry {idx}: unknown vehicle kind '{kind}'")
        return LineupEntry(kind=kind, speed=speed)

    body = entry.get("body")
    if not isinstance(body, list) or not all(isinstance(row, str) for row in body):
        raise ValueError(
            f"Lineup entry {idx} needs either 'kind' or a 'body' list of strings"
        )
    if speed is None:
        raise ValueError(f"Lineup entry {idx}: an inline sprite needs a 'speed'")
    return LineupEntry(body=tuple(body), speed=speed)


def load_circuit_config(path: Path | None = None) -> CircuitConfig:
    """Load the default circuit and vehicle lineup from a YAML file.

    Args:
        path: Optional override for the config file path.

    Returns:
        The parsed :class:`CircuitConfig`.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If a field is missing, has the wrong type, or names an
            unknown vehicle kind.
    """
    config_path = path or CIRCUIT_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Circuit config not found: {config_path}")

    with open(config_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Circuit config {config_path} must be a mapping")

    # --- Validate required fields ---
    for field in _REQUIRED_FIELDS:
        if field not in data:
            raise ValueError(f"Circuit config is missing required field '{field}'")

    name = str(data["name"])
    if not name:
        raise ValueError("'name' must not be empty")

    lineup = data["lineup"]
    if not isinstance(lineup, list):
        raise ValueError("'lineup' must be a list")

    return CircuitConfig(
        name=name,
        length=_positive_int(data["length"], "length"),
        lanes=_positive_int(data["lanes"], "lanes"),
        lineup=tuple(_parse_entry(idx, entry) for idx, entry in enumerate(lineup)),
    )

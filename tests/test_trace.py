"""Tests for the tabular motion trace."""

from circuit_engine.analysis.trace import TRACE_COLUMNS, motion_trace
from circuit_engine.core.track import Track
from circuit_engine.core.vehicle import Sedan, SpriteVehicle


def _sample_track() -> Track:
    track = Track("Trace", 10, 2)
    track.add_vehicle(SpriteVehicle(body=("<>",), speed=1000))
    track.add_vehicle(SpriteVehicle(body=("[==]",), speed=100))
    return track


def test_trace_shape_and_columns() -> None:
    """One row per sample and vehicle, with the documented columns."""
    trace = motion_trace(_sample_track(), range(0, 20))
    assert tuple(trace.columns) == TRACE_COLUMNS, "unexpected trace columns"
    assert len(trace) == 20 * 2, "one row per sample and vehicle"


def test_trace_positions_match_motion_model() -> None:
    """Traced positions follow the motion model."""
    trace = motion_trace(_sample_track(), [0, 8, 9, 60])
    fast = trace[trace["lane"] == 0]
    assert fast["position"].tolist() == [0, 8, 7, 4], "fast sprite positions drifted"
    assert fast["forward"].tolist() == [True, False, False, False]

    slow = trace[trace["lane"] == 1]
    assert slow["cadence"].unique().tolist() == [10]
    assert slow["step"].tolist() == [0, 0, 0, 6]
    assert slow["position"].tolist() == [0, 0, 0, 6]


def test_trace_of_empty_track_is_empty() -> None:
    """An empty track yields an empty table with the same columns."""
    trace = motion_trace(Track("Empty", 10, 1), range(5))
    assert trace.empty, "empty track must give an empty trace"
    assert tuple(trace.columns) == TRACE_COLUMNS, "unexpected trace columns"


def test_trace_names_vehicle_types() -> None:
    """Vehicles are labelled by their class name."""
    track = Track("Named", 20, 1)
    track.add_vehicle(Sedan())
    trace = motion_trace(track, [0])
    assert trace["vehicle"].tolist() == ["Sedan"]

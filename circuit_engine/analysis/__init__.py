"""Offline inspection helpers for circuit motion."""

from circuit_engine.analysis.trace import TRACE_COLUMNS, motion_trace

__all__ = ["TRACE_COLUMNS", "motion_trace"]

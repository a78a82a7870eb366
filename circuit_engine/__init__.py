"""Animated ASCII circuit renderer."""

__version__ = "0.1.0"

"""Flood-fill micromouse controller for a line-protocol maze simulator."""

__version__ = "0.1.0"
__all__ = ["api", "maze", "mouse"]
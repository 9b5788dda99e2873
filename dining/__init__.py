"""Threaded console simulation of the dining philosophers problem."""

__version__ = "0.1.0"
__all__ = ["config", "table", "routine", "cli"]
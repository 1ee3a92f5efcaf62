"""Core utilities for a 2D game: geometry, colours, timers, hashing, config reading and logging."""

__version__ = "0.1.0"
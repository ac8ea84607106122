"""Unkindred Hearts — turn-based roguelike simulation core."""

__version__ = "0.1.0"

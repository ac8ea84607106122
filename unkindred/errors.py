"""Invariant violations raised by the simulation core.

These are never caught inside the core: a blocked move, a zero-damage attack
or a rejected room are ordinary return values, not exceptions.
"""

from __future__ import annotations


class InvariantViolation(RuntimeError):
    """The simulation reached a state its data model forbids."""


class AliasedEntityError(InvariantViolation):
    """Two entity views were requested for the same index."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Entity index {index} requested twice as two distinct entities")
        self.index = index


class OutOfBoundsError(InvariantViolation, IndexError):
    """A grid cell or entity index outside the fixed dimensions was addressed."""

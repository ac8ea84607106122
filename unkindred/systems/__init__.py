"""Engine systems: RNG, dungeon generation, field of view."""

from unkindred.systems.rng import DeterministicRNG, RngStream
from unkindred.systems.dungeon import Dungeon, DungeonGenerator
from unkindred.systems.fov import FieldOfView, RaycastFov

__all__ = ["DeterministicRNG", "RngStream", "Dungeon", "DungeonGenerator", "FieldOfView", "RaycastFov"]

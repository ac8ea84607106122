"""Core data models: Vector2, Fighter, Entity."""

from __future__ import annotations

import math
from dataclasses import dataclass

from unkindred.core.colors import Color
from unkindred.core.enums import AiKind, DeathCallback


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def distance(self, other: Vector2) -> float:
        """Euclidean distance."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Numpad layout: 7 8 9 / 4 . 6 / 1 2 3
DIRECTION_OFFSETS: dict[str, Vector2] = {
    "north": Vector2(0, -1),
    "south": Vector2(0, 1),
    "west": Vector2(-1, 0),
    "east": Vector2(1, 0),
    "north_west": Vector2(-1, -1),
    "north_east": Vector2(1, -1),
    "south_west": Vector2(-1, 1),
    "south_east": Vector2(1, 1),
}


@dataclass(slots=True)
class Fighter:
    """Combat capability: hit points and damage stats."""

    max_hp: int
    hp: int
    defense: int
    power: int
    magic: int = 0
    magic_defense: int = 0
    on_death: DeathCallback = DeathCallback.MONSTER


@dataclass(slots=True)
class Entity:
    """Any simulated actor: the player, a monster or a corpse.

    ``fighter`` and ``ai`` are optional capabilities; behaviour is dispatched
    on their presence rather than on the entity's type.
    """

    pos: Vector2
    glyph: str
    color: Color
    name: str
    blocks: bool = False
    alive: bool = False
    fighter: Fighter | None = None
    ai: AiKind | None = None
    kind: str = "object"

    @property
    def x(self) -> int:
        return self.pos.x

    @property
    def y(self) -> int:
        return self.pos.y

    def set_pos(self, x: int, y: int) -> None:
        self.pos = Vector2(x, y)

    def distance_to(self, other: Entity) -> float:
        return self.pos.distance(other.pos)

"""RGB colors used by entities, tiles and the message log."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """Immutable 24-bit RGB color."""

    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
ORANGE = Color(255, 127, 0)
YELLOW = Color(255, 255, 0)
DARK_RED = Color(191, 0, 0)
DESATURATED_GREEN = Color(63, 127, 63)
DARKER_GREEN = Color(0, 127, 0)

# Map tiles: dark = explored but out of view, light = in view
COLOR_DARK_WALL = Color(0, 0, 100)
COLOR_DARK_GROUND = Color(50, 50, 150)
COLOR_LIGHT_WALL = Color(130, 110, 50)
COLOR_LIGHT_GROUND = Color(200, 180, 50)

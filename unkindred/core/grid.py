"""Tile grid / map system."""

from __future__ import annotations

from dataclasses import dataclass

from unkindred.errors import OutOfBoundsError


@dataclass(slots=True)
class Tile:
    """One map cell. ``explored`` only ever goes from False to True."""

    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def empty(cls) -> Tile:
        return cls(blocked=False, block_sight=False)

    @classmethod
    def wall(cls) -> Tile:
        return cls(blocked=True, block_sight=True)

    @property
    def is_wall(self) -> bool:
        return self.blocked

    def mark_explored(self) -> None:
        self.explored = True


class TileGrid:
    """Fixed-size 2D tile grid backed by a flat list for cache-friendly access.

    Dimensions are set at construction and never change. Addressing a cell
    outside them raises :class:`OutOfBoundsError`.
    """

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, fill_walls: bool = True) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        factory = Tile.wall if fill_walls else Tile.empty
        self._tiles: list[Tile] = [factory() for _ in range(width * height)]

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        return self._tiles[self._idx(x, y)]

    def __getitem__(self, xy: tuple[int, int]) -> Tile:
        return self.tile(*xy)

    def is_wall(self, x: int, y: int) -> bool:
        return self.tile(x, y).blocked

    def is_transparent(self, x: int, y: int) -> bool:
        return not self.tile(x, y).block_sight

    def is_explored(self, x: int, y: int) -> bool:
        return self.tile(x, y).explored

    # -- mutation (generation + exploration only) --

    def carve(self, x: int, y: int) -> None:
        """Turn the cell into open floor. Carving twice is harmless."""
        idx = self._idx(x, y)
        explored = self._tiles[idx].explored
        self._tiles[idx] = Tile(blocked=False, block_sight=False, explored=explored)

    def set_wall(self, x: int, y: int) -> None:
        idx = self._idx(x, y)
        explored = self._tiles[idx].explored
        self._tiles[idx] = Tile(blocked=True, block_sight=True, explored=explored)

    def mark_explored(self, x: int, y: int) -> None:
        self.tile(x, y).mark_explored()

    # -- queries --

    def cells(self):
        """Yield every ``(x, y)`` in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def open_cells(self) -> list[tuple[int, int]]:
        return [(x, y) for x, y in self.cells() if not self.is_wall(x, y)]

    def explored_count(self) -> int:
        return sum(1 for t in self._tiles if t.explored)

    def has_line_of_sight(self, x0: int, y0: int, x1: int, y1: int) -> bool:
        """Check if there is a clear line of sight between two cells.

        Uses Bresenham's line algorithm. Returns False if any sight-blocking
        tile lies on the line between (x0,y0) and (x1,y1), exclusive of endpoints.
        """
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        cx, cy = x0, y0
        while True:
            if cx == x1 and cy == y1:
                return True
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                cx += sx
            if e2 < dx:
                err += dx
                cy += sy
            # Check intermediate tile (skip start and end)
            if (cx != x1 or cy != y1) and not self.is_transparent(cx, cy):
                return False

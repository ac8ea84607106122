"""Visibility collaborator.

The engine only relies on the two-call contract of :class:`FieldOfView`:
``compute`` once per tick when the observer moved, then ``is_in_fov`` per
cell. :class:`RaycastFov` is the BASIC algorithm: a cell is visible when it
lies within the radius and a Bresenham line to it crosses no opaque tile.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from unkindred.core.enums import FovAlgorithm

if TYPE_CHECKING:
    from unkindred.core.grid import TileGrid

logger = logging.getLogger(__name__)


class FieldOfView(Protocol):
    def compute(
        self,
        origin_x: int,
        origin_y: int,
        radius: int,
        light_walls: bool,
        algorithm: FovAlgorithm,
    ) -> None: ...

    def is_in_fov(self, x: int, y: int) -> bool: ...


class RaycastFov:
    """Line-of-sight field of view over a fixed tile grid."""

    __slots__ = ("_grid", "_visible", "compute_count")

    def __init__(self, grid: TileGrid) -> None:
        self._grid = grid
        self._visible: set[tuple[int, int]] = set()
        self.compute_count = 0

    def compute(
        self,
        origin_x: int,
        origin_y: int,
        radius: int,
        light_walls: bool = True,
        algorithm: FovAlgorithm = FovAlgorithm.BASIC,
    ) -> None:
        if algorithm != FovAlgorithm.BASIC:
            raise ValueError(f"Unsupported FOV algorithm: {algorithm!r}")
        grid = self._grid
        visible: set[tuple[int, int]] = {(origin_x, origin_y)}
        r2 = radius * radius
        if radius > 0:
            x_lo, x_hi = max(0, origin_x - radius), min(grid.width - 1, origin_x + radius)
            y_lo, y_hi = max(0, origin_y - radius), min(grid.height - 1, origin_y + radius)
        else:
            # radius 0 means unlimited
            x_lo, x_hi, y_lo, y_hi = 0, grid.width - 1, 0, grid.height - 1
        for y in range(y_lo, y_hi + 1):
            for x in range(x_lo, x_hi + 1):
                dx, dy = x - origin_x, y - origin_y
                if radius > 0 and dx * dx + dy * dy > r2:
                    continue
                if not light_walls and not grid.is_transparent(x, y):
                    continue
                if grid.has_line_of_sight(origin_x, origin_y, x, y):
                    visible.add((x, y))
        self._visible = visible
        self.compute_count += 1
        logger.debug("FOV computed at (%d, %d): %d cells visible", origin_x, origin_y, len(visible))

    def is_in_fov(self, x: int, y: int) -> bool:
        return (x, y) in self._visible

    def visible_cells(self) -> frozenset[tuple[int, int]]:
        return frozenset(self._visible)

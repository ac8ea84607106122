"""Tests for the raycast field of view."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unkindred.core.grid import TileGrid
from unkindred.systems.fov import RaycastFov


def _open_grid(width: int = 12, height: int = 12) -> TileGrid:
    grid = TileGrid(width, height)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            grid.carve(x, y)
    return grid


class TestRaycastFov:

    def test_nothing_visible_before_compute(self):
        fov = RaycastFov(_open_grid())
        assert not fov.is_in_fov(5, 5)
        assert fov.compute_count == 0

    def test_origin_is_always_visible(self):
        fov = RaycastFov(_open_grid())
        fov.compute(5, 5, radius=1)
        assert fov.is_in_fov(5, 5)

    def test_radius_is_euclidean(self):
        fov = RaycastFov(_open_grid())
        fov.compute(5, 5, radius=3)
        assert fov.is_in_fov(8, 5)
        assert not fov.is_in_fov(9, 5)
        # 3,3 diagonal is ~4.24 away
        assert not fov.is_in_fov(8, 8)
        assert fov.is_in_fov(7, 7)

    def test_walls_block_sight_but_are_lit(self):
        grid = _open_grid()
        grid.set_wall(5, 4)
        fov = RaycastFov(grid)
        fov.compute(5, 5, radius=8)
        assert fov.is_in_fov(5, 4)
        assert not fov.is_in_fov(5, 2)

    def test_unlit_walls_stay_hidden(self):
        grid = _open_grid()
        grid.set_wall(5, 4)
        fov = RaycastFov(grid)
        fov.compute(5, 5, radius=8, light_walls=False)
        assert not fov.is_in_fov(5, 4)
        assert fov.is_in_fov(5, 6)

    def test_zero_radius_is_unlimited(self):
        fov = RaycastFov(_open_grid())
        fov.compute(5, 5, radius=0)
        assert fov.is_in_fov(10, 10)
        assert fov.is_in_fov(0, 0)

    def test_recompute_replaces_previous_result(self):
        fov = RaycastFov(_open_grid(20, 5))
        fov.compute(2, 2, radius=2)
        assert fov.is_in_fov(3, 2)
        fov.compute(16, 2, radius=2)
        assert not fov.is_in_fov(3, 2)
        assert fov.is_in_fov(17, 2)
        assert fov.compute_count == 2

    def test_visible_cells_snapshot(self):
        fov = RaycastFov(_open_grid())
        fov.compute(5, 5, radius=1)
        cells = fov.visible_cells()
        assert (5, 5) in cells
        assert (6, 5) in cells
        assert (7, 5) not in cells

"""Dungeon generation: random rooms joined by L-shaped tunnels.

Rooms are proposed a fixed number of times (``max_rooms``). A proposal that
overlaps any accepted room is discarded, never retried, so a run can end with
fewer rooms than attempts, or none at all. Each accepted room after the first
is joined to the previously accepted one, which keeps the whole dungeon
connected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from unkindred.core.bestiary import make_orc, make_troll
from unkindred.core.enums import Domain
from unkindred.core.grid import TileGrid
from unkindred.core.models import Vector2
from unkindred.core.rect import Rect

if TYPE_CHECKING:
    from unkindred.config import GameConfig
    from unkindred.core.entity_store import EntityStore
    from unkindred.systems.rng import DeterministicRNG, RngStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Tunnel:
    """One L-shaped corridor between two room centers."""

    start: Vector2
    end: Vector2
    horizontal_first: bool

    def cells(self) -> list[tuple[int, int]]:
        """Every cell the corridor covers, both endpoints included."""
        if self.horizontal_first:
            corner = Vector2(self.end.x, self.start.y)
        else:
            corner = Vector2(self.start.x, self.end.y)
        return _segment(self.start, corner) + _segment(corner, self.end)


def _segment(a: Vector2, b: Vector2) -> list[tuple[int, int]]:
    if a.y == b.y:
        return [(x, a.y) for x in range(min(a.x, b.x), max(a.x, b.x) + 1)]
    return [(a.x, y) for y in range(min(a.y, b.y), max(a.y, b.y) + 1)]


@dataclass(slots=True)
class Dungeon:
    """Result of one generation run.

    ``rooms`` and ``tunnels`` describe how the map was built; the running game
    only keeps ``grid``, and the entities placed into the store.
    """

    grid: TileGrid
    rooms: list[Rect] = field(default_factory=list)
    tunnels: list[Tunnel] = field(default_factory=list)
    player_spawn: Vector2 | None = None
    monster_indices: list[int] = field(default_factory=list)
    attempts: int = 0


def carve_room(grid: TileGrid, room: Rect) -> None:
    for x, y in room.interior():
        grid.carve(x, y)


def carve_h_tunnel(grid: TileGrid, x1: int, x2: int, y: int) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.carve(x, y)


def carve_v_tunnel(grid: TileGrid, y1: int, y2: int, x: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.carve(x, y)


class DungeonGenerator:
    """Builds the tile grid and places the player and monsters."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def generate(
        self,
        store: EntityStore,
        width: int | None = None,
        height: int | None = None,
    ) -> Dungeon:
        """Generate a dungeon, moving the player (index 0) to its spawn and
        appending monsters to *store*."""
        cfg = self._config
        width = cfg.map_width if width is None else width
        height = cfg.map_height if height is None else height

        dungeon = Dungeon(grid=TileGrid(width, height, fill_walls=True))
        for attempt in range(cfg.max_rooms):
            dungeon.attempts += 1
            draws = self._rng.stream(Domain.MAP_GEN, attempt)
            room = self._propose_room(draws, attempt, width, height)
            if room is None:
                continue
            if any(room.intersects(other) for other in dungeon.rooms):
                logger.debug("Room attempt %d at (%d, %d) rejected: overlap", attempt, room.x1, room.y1)
                continue
            self._accept_room(dungeon, room, draws, store)

        if dungeon.player_spawn is None:
            # Degenerate dungeon: park the player mid-map so every neighbour
            # lookup stays inside the grid.
            centre = Vector2(width // 2, height // 2)
            store.player.set_pos(centre.x, centre.y)
            logger.warning("No room accepted after %d attempts; player parked at %s", cfg.max_rooms, centre)

        logger.info(
            "Dungeon generated: %dx%d, %d/%d rooms, %d monsters",
            width, height, len(dungeon.rooms), cfg.max_rooms, len(dungeon.monster_indices),
        )
        return dungeon

    # -- internals --

    def _propose_room(self, draws: RngStream, attempt: int, width: int, height: int) -> Rect | None:
        cfg = self._config
        w = draws.next_int(cfg.room_min_size, cfg.room_max_size)
        h = draws.next_int(cfg.room_min_size, cfg.room_max_size)
        # The far edge must stay inside the grid: x + w <= width - 1
        if w >= width or h >= height:
            logger.debug("Room attempt %d (%dx%d) does not fit the map", attempt, w, h)
            return None
        x = draws.next_int(0, width - w - 1)
        y = draws.next_int(0, height - h - 1)
        return Rect.from_size(x, y, w, h)

    def _accept_room(self, dungeon: Dungeon, room: Rect, draws: RngStream, store: EntityStore) -> None:
        grid = dungeon.grid
        carve_room(grid, room)
        center = room.center()

        if not dungeon.rooms:
            store.player.set_pos(center.x, center.y)
            dungeon.player_spawn = center
        else:
            prev = dungeon.rooms[-1].center()
            horizontal_first = draws.next_bool()
            if horizontal_first:
                carve_h_tunnel(grid, prev.x, center.x, prev.y)
                carve_v_tunnel(grid, prev.y, center.y, center.x)
            else:
                carve_v_tunnel(grid, prev.y, center.y, prev.x)
                carve_h_tunnel(grid, prev.x, center.x, center.y)
            dungeon.tunnels.append(Tunnel(prev, center, horizontal_first))
            self._place_monsters(dungeon, room, len(dungeon.rooms), store)

        dungeon.rooms.append(room)

    def _place_monsters(self, dungeon: Dungeon, room: Rect, room_no: int, store: EntityStore) -> None:
        if room.x2 - room.x1 < 2 or room.y2 - room.y1 < 2:
            return
        cfg = self._config
        draws = self._rng.stream(Domain.SPAWN, room_no)
        count = draws.next_int(0, cfg.max_room_monsters)
        for _ in range(count):
            x = draws.next_int(room.x1 + 1, room.x2 - 1)
            y = draws.next_int(room.y1 + 1, room.y2 - 1)
            is_orc = draws.next_bool(cfg.orc_chance)
            if store.is_blocked(dungeon.grid, x, y):
                # Occupied cell: this monster is simply not placed
                continue
            monster = make_orc(x, y) if is_orc else make_troll(x, y)
            dungeon.monster_indices.append(store.add(monster))

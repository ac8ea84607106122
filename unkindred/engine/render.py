"""Display collaborator: composes a frame from the map, FOV and entities.

Composition is where exploration happens: every cell seen in the field of
view is marked ``explored`` for good. Cells never explored are not drawn,
explored cells out of view are drawn dark, visible cells lit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from unkindred.core import colors

if TYPE_CHECKING:
    from unkindred.core.entity_store import EntityStore
    from unkindred.core.grid import TileGrid
    from unkindred.systems.fov import FieldOfView
    from unkindred.utils.event_log import LogEntry

WALL_GLYPH = "#"
GROUND_GLYPH = "."


@dataclass(frozen=True, slots=True)
class Glyph:
    char: str
    color: colors.Color


def tile_glyph(visible: bool, wall: bool) -> Glyph:
    """One of the four fixed tile looks."""
    if visible:
        return Glyph(WALL_GLYPH, colors.COLOR_LIGHT_WALL) if wall else Glyph(GROUND_GLYPH, colors.COLOR_LIGHT_GROUND)
    return Glyph(WALL_GLYPH, colors.COLOR_DARK_WALL) if wall else Glyph(GROUND_GLYPH, colors.COLOR_DARK_GROUND)


@dataclass(slots=True)
class Frame:
    """A composed screen: one optional glyph per map cell, plus the HUD."""

    width: int
    height: int
    cells: list[Glyph | None]
    status: str = ""
    messages: list[LogEntry] = field(default_factory=list)

    def at(self, x: int, y: int) -> Glyph | None:
        return self.cells[y * self.width + x]

    def rows(self) -> list[str]:
        return [
            "".join(g.char if g else " " for g in self.cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    def to_text(self) -> str:
        lines = self.rows()
        if self.status:
            lines.append(self.status)
        lines.extend(m.text for m in self.messages)
        return "\n".join(lines)


def compose_frame(
    grid: TileGrid,
    fov: FieldOfView,
    store: EntityStore,
    messages: list[LogEntry] | None = None,
) -> Frame:
    cells: list[Glyph | None] = []
    for y in range(grid.height):
        for x in range(grid.width):
            tile = grid.tile(x, y)
            visible = fov.is_in_fov(x, y)
            if visible:
                tile.mark_explored()
            if not tile.explored:
                cells.append(None)
                continue
            cells.append(tile_glyph(visible, tile.block_sight))

    # Corpses first so a living entity standing on one is drawn on top
    to_draw = sorted((e for e in store if fov.is_in_fov(e.x, e.y)), key=lambda e: e.blocks)
    for entity in to_draw:
        cells[entity.y * grid.width + entity.x] = Glyph(entity.glyph, entity.color)

    status = ""
    fighter = store.player.fighter
    if fighter is not None:
        status = f"HP: {fighter.hp}/{fighter.max_hp} "

    return Frame(
        width=grid.width,
        height=grid.height,
        cells=cells,
        status=status,
        messages=list(messages or []),
    )

"""EntityStore — the ordered entity collection shared by every system.

Index 0 is the player for the whole session. Entities are never removed:
death rewrites an entity in place, so indices stay stable and double as
entity handles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from unkindred.errors import AliasedEntityError, OutOfBoundsError

if TYPE_CHECKING:
    from unkindred.core.grid import TileGrid
    from unkindred.core.models import Entity

PLAYER = 0


class EntityStore:
    """Append-only, index-addressed list of entities."""

    __slots__ = ("_entities",)

    def __init__(self, player: Entity) -> None:
        self._entities: list[Entity] = [player]

    # -- access --

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __getitem__(self, index: int) -> Entity:
        return self._entities[self._check(index)]

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._entities):
            raise OutOfBoundsError(f"Entity index {index} outside store of {len(self._entities)}")
        return index

    @property
    def player(self) -> Entity:
        return self._entities[PLAYER]

    def add(self, entity: Entity) -> int:
        """Append *entity* and return its permanent index."""
        self._entities.append(entity)
        return len(self._entities) - 1

    def pair(self, first: int, second: int) -> tuple[Entity, Entity]:
        """Return two *distinct* entities, in argument order.

        Any operation that mutates two entities at once (attacker/defender)
        must go through here. Equal indices are an invariant violation.
        """
        self._check(first)
        self._check(second)
        if first == second:
            raise AliasedEntityError(first)
        return self._entities[first], self._entities[second]

    def non_player_indices(self) -> range:
        """Every index except the player's, in ascending creation order."""
        return range(PLAYER + 1, len(self._entities))

    # -- spatial queries --

    def find_object(self, x: int, y: int) -> int | None:
        """First entity index standing on ``(x, y)``, blocking or not."""
        for idx, entity in enumerate(self._entities):
            if entity.x == x and entity.y == y:
                return idx
        return None

    def fighter_at(self, x: int, y: int, exclude: int | None = None) -> int | None:
        """First index of an entity with a Fighter on ``(x, y)``, skipping *exclude*."""
        for idx, entity in enumerate(self._entities):
            if idx == exclude:
                continue
            if entity.fighter is not None and entity.x == x and entity.y == y:
                return idx
        return None

    def blocker_at(self, x: int, y: int, exclude: int | None = None) -> int | None:
        for idx, entity in enumerate(self._entities):
            if idx == exclude:
                continue
            if entity.blocks and entity.x == x and entity.y == y:
                return idx
        return None

    def is_blocked(self, grid: TileGrid, x: int, y: int, exclude: int | None = None) -> bool:
        """True if the tile is a wall or a blocking entity (other than *exclude*) stands there."""
        if grid.is_wall(x, y):
            return True
        return self.blocker_at(x, y, exclude) is not None

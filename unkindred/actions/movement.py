"""Movement: blocking-aware steps, pursuit, and the player's bump-to-attack."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from unkindred.actions.combat import AttackOutcome, attack_by_index
from unkindred.core.models import Vector2

if TYPE_CHECKING:
    from unkindred.core.entity_store import EntityStore
    from unkindred.core.grid import TileGrid
    from unkindred.utils.event_log import MessageLog

logger = logging.getLogger(__name__)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def move_by(store: EntityStore, grid: TileGrid, idx: int, dx: int, dy: int) -> bool:
    """Step entity *idx* by ``(dx, dy)`` unless the destination is blocked.

    The mover never blocks itself. A zero delta is a guaranteed no-op.
    Returns True if the entity moved.
    """
    if dx == 0 and dy == 0:
        return False
    entity = store[idx]
    target = entity.pos + Vector2(dx, dy)
    if store.is_blocked(grid, target.x, target.y, exclude=idx):
        logger.debug("Entity %d (%s) blocked at %s", idx, entity.name, target)
        return False
    entity.pos = target
    return True


def step_towards(from_x: int, from_y: int, target_x: int, target_y: int) -> tuple[int, int]:
    """Unit step along the rounded direction vector to the target."""
    dx = target_x - from_x
    dy = target_y - from_y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return 0, 0
    return _round_half_away(dx / distance), _round_half_away(dy / distance)


def move_towards(store: EntityStore, grid: TileGrid, idx: int, target_x: int, target_y: int) -> bool:
    entity = store[idx]
    dx, dy = step_towards(entity.x, entity.y, target_x, target_y)
    return move_by(store, grid, idx, dx, dy)


def player_move_or_attack(
    store: EntityStore,
    grid: TileGrid,
    actor: int,
    dx: int,
    dy: int,
    log: MessageLog | None = None,
) -> AttackOutcome | None:
    """Attack whatever fighter stands on the destination, otherwise move there.

    Returns the attack outcome, or None when the actor moved (or tried to).
    """
    entity = store[actor]
    x, y = entity.x + dx, entity.y + dy
    target = store.fighter_at(x, y, exclude=actor)
    if target is not None:
        return attack_by_index(store, actor, target, log)
    move_by(store, grid, actor, dx, dy)
    return None

"""Basic monster AI — stateless, recomputed from positions every tick.

A monster outside the player's field of view does nothing ("if you can see
it, it can see you"). Inside it:

  - SEEK:   distance >= 2           -> one step towards the player
  - ATTACK: distance < 2, player up -> melee the player
  - WANDER: player dead             -> one random step in [-1, 1]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unkindred.actions.combat import AttackOutcome, attack_by_index
from unkindred.actions.movement import move_by, move_towards
from unkindred.core.entity_store import PLAYER
from unkindred.core.enums import AIState, AiKind, Domain

if TYPE_CHECKING:
    from unkindred.core.entity_store import EntityStore
    from unkindred.core.grid import TileGrid
    from unkindred.core.models import Entity
    from unkindred.systems.fov import FieldOfView
    from unkindred.systems.rng import DeterministicRNG
    from unkindred.utils.event_log import MessageLog

logger = logging.getLogger(__name__)

ATTACK_RANGE = 2.0
WANDER_STEP = 1


@dataclass(frozen=True, slots=True)
class AIDecision:
    """What one monster did this tick."""

    index: int
    state: AIState
    moved: bool = False
    attack: AttackOutcome | None = None


def select_state(monster: Entity, player: Entity, in_fov: bool) -> AIState:
    """Pick this tick's state from current positions only."""
    if not in_fov:
        return AIState.IDLE
    if monster.distance_to(player) >= ATTACK_RANGE:
        return AIState.SEEK
    if player.alive:
        return AIState.ATTACK
    return AIState.WANDER


class AIBrain:
    """Runs the per-tick policy for entities carrying an ``AiKind``.

    Holds no per-monster memory; the only inputs are the store, the grid,
    the field of view, and the injected RNG.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: DeterministicRNG) -> None:
        self._rng = rng

    def take_turn(
        self,
        idx: int,
        store: EntityStore,
        grid: TileGrid,
        fov: FieldOfView,
        turn: int,
        log: MessageLog | None = None,
    ) -> AIDecision:
        monster = store[idx]
        match monster.ai:
            case AiKind.BASIC:
                return self._basic_turn(idx, store, grid, fov, turn, log)
            case None:
                return AIDecision(idx, AIState.IDLE)
        raise ValueError(f"Unknown AI kind: {monster.ai!r}")

    def _basic_turn(
        self,
        idx: int,
        store: EntityStore,
        grid: TileGrid,
        fov: FieldOfView,
        turn: int,
        log: MessageLog | None,
    ) -> AIDecision:
        monster = store[idx]
        player = store.player
        state = select_state(monster, player, fov.is_in_fov(monster.x, monster.y))
        logger.debug("Turn %d: entity %d (%s) -> %s", turn, idx, monster.name, state.name)

        match state:
            case AIState.IDLE:
                return AIDecision(idx, state)
            case AIState.SEEK:
                moved = move_towards(store, grid, idx, player.x, player.y)
                return AIDecision(idx, state, moved=moved)
            case AIState.ATTACK:
                outcome = attack_by_index(store, idx, PLAYER, log)
                return AIDecision(idx, state, attack=outcome)
            case AIState.WANDER:
                dx, dy = self.wander_step(idx, turn)
                moved = move_by(store, grid, idx, dx, dy)
                return AIDecision(idx, state, moved=moved)
        raise ValueError(f"Unhandled AI state: {state!r}")

    def wander_step(self, idx: int, turn: int) -> tuple[int, int]:
        dx = self._rng.next_int(Domain.AI_DECISION, idx, turn * 2, -WANDER_STEP, WANDER_STEP)
        dy = self._rng.next_int(Domain.AI_DECISION, idx, turn * 2 + 1, -WANDER_STEP, WANDER_STEP)
        return dx, dy

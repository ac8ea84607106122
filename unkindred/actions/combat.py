"""Melee combat: damage formula and damage application.

    damage = attacker.power - defender.defense // 4

A non-positive result is a defined "no effect" outcome: nothing is
subtracted, so an attack can never heal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unkindred.actions.death import DeathNotice, dispatch_death
from unkindred.core.colors import WHITE

if TYPE_CHECKING:
    from unkindred.core.entity_store import EntityStore
    from unkindred.core.models import Entity
    from unkindred.utils.event_log import MessageLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AttackOutcome:
    """What a single attack did."""

    attacker: str
    defender: str
    damage: int
    death: DeathNotice | None = None

    @property
    def hit(self) -> bool:
        return self.damage > 0

    @property
    def killed(self) -> bool:
        return self.death is not None

    @property
    def text(self) -> str:
        if self.hit:
            return f"{self.attacker} attacks {self.defender} for {self.damage} hit points."
        return f"{self.attacker} attacks {self.defender} but it has no effect!"


def compute_damage(attacker: Entity, defender: Entity) -> int:
    """Raw damage before clamping. A missing Fighter counts as zero stats."""
    power = attacker.fighter.power if attacker.fighter else 0
    defense = defender.fighter.defense if defender.fighter else 0
    return power - defense // 4


def take_damage(entity: Entity, damage: int, log: MessageLog | None = None) -> DeathNotice | None:
    """Subtract *damage* from the entity's HP and run its death transition
    the first time HP drops to zero or below."""
    fighter = entity.fighter
    if fighter is None:
        return None
    if damage > 0:
        fighter.hp -= damage
    if fighter.hp <= 0 and entity.alive:
        notice = dispatch_death(fighter.on_death, entity)
        if log is not None:
            log.add(notice.text, notice.color)
        return notice
    return None


def attack(attacker: Entity, defender: Entity, log: MessageLog | None = None) -> AttackOutcome:
    """Resolve one melee attack of *attacker* against *defender*.

    The two must be different entities; callers holding indices get them
    from :meth:`EntityStore.pair`.
    """
    raw = compute_damage(attacker, defender)
    damage = max(0, raw)
    # Names are captured before a death transition renames the defender
    outcome = AttackOutcome(attacker=attacker.name, defender=defender.name, damage=damage)
    if log is not None:
        log.add(outcome.text, WHITE)
    logger.debug("%s", outcome.text)
    if damage > 0:
        notice = take_damage(defender, damage, log)
        if notice is not None:
            outcome = AttackOutcome(outcome.attacker, outcome.defender, damage, notice)
    return outcome


def attack_by_index(
    store: EntityStore,
    attacker_idx: int,
    defender_idx: int,
    log: MessageLog | None = None,
) -> AttackOutcome:
    """Index-based entry point: raises AliasedEntityError on self-combat."""
    attacker, defender = store.pair(attacker_idx, defender_idx)
    return attack(attacker, defender, log)

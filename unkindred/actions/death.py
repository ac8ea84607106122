"""Death transitions.

The transition is chosen by the Fighter's ``on_death`` tag through an
exhaustive ``match``; each branch is a plain function of the dying entity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unkindred.core import colors
from unkindred.core.bestiary import CORPSE_COLOR, CORPSE_GLYPH
from unkindred.core.enums import DeathCallback

if TYPE_CHECKING:
    from unkindred.core.models import Entity

logger = logging.getLogger(__name__)

PLAYER_DEATH_TEXT = "You died!"


@dataclass(frozen=True, slots=True)
class DeathNotice:
    """Message produced by a death transition."""

    text: str
    color: colors.Color
    callback: DeathCallback


def player_death(player: Entity) -> DeathNotice:
    """The run is lost. The player keeps its Fighter so its HP stays readable."""
    player.alive = False
    player.glyph = CORPSE_GLYPH
    player.color = CORPSE_COLOR
    logger.info("Player died")
    return DeathNotice(PLAYER_DEATH_TEXT, colors.RED, DeathCallback.PLAYER)


def monster_death(monster: Entity) -> DeathNotice:
    """Turn the monster into a corpse: no longer blocks, fights or thinks."""
    text = f"{monster.name} dies!"
    monster.alive = False
    monster.glyph = CORPSE_GLYPH
    monster.color = CORPSE_COLOR
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.name = f"Corpse of {monster.name}"
    logger.info("%s", text)
    return DeathNotice(text, colors.ORANGE, DeathCallback.MONSTER)


def dispatch_death(callback: DeathCallback, entity: Entity) -> DeathNotice:
    match callback:
        case DeathCallback.PLAYER:
            return player_death(entity)
        case DeathCallback.MONSTER:
            return monster_death(entity)
    raise ValueError(f"Unknown death callback: {callback!r}")

"""Entity templates: the player and the two monster kinds."""

from __future__ import annotations

from unkindred.core import colors
from unkindred.core.enums import AiKind, DeathCallback
from unkindred.core.models import Entity, Fighter, Vector2

CORPSE_GLYPH = "%"
CORPSE_COLOR = colors.DARK_RED


def make_player(x: int = 0, y: int = 0) -> Entity:
    return Entity(
        pos=Vector2(x, y),
        glyph="@",
        color=colors.YELLOW,
        name="player",
        blocks=True,
        alive=True,
        fighter=Fighter(max_hp=30, hp=30, defense=2, power=5, on_death=DeathCallback.PLAYER),
        kind="player",
    )


def make_orc(x: int, y: int) -> Entity:
    return Entity(
        pos=Vector2(x, y),
        glyph="o",
        color=colors.DESATURATED_GREEN,
        name="orc",
        blocks=True,
        alive=True,
        fighter=Fighter(max_hp=10, hp=10, defense=0, power=3, on_death=DeathCallback.MONSTER),
        ai=AiKind.BASIC,
        kind="orc",
    )


def make_troll(x: int, y: int) -> Entity:
    return Entity(
        pos=Vector2(x, y),
        glyph="T",
        color=colors.DARKER_GREEN,
        name="troll",
        blocks=True,
        alive=True,
        fighter=Fighter(max_hp=16, hp=16, defense=1, power=4, on_death=DeathCallback.MONSTER),
        ai=AiKind.BASIC,
        kind="troll",
    )

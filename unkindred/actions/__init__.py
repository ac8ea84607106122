"""Action system: movement, combat, and death transitions."""

from unkindred.actions.combat import AttackOutcome, attack, attack_by_index, take_damage
from unkindred.actions.death import DeathNotice, dispatch_death
from unkindred.actions.movement import move_by, move_towards, player_move_or_attack

__all__ = [
    "AttackOutcome",
    "DeathNotice",
    "attack",
    "attack_by_index",
    "dispatch_death",
    "move_by",
    "move_towards",
    "player_move_or_attack",
    "take_damage",
]

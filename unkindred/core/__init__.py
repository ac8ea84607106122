"""Core data models and map representation."""

from unkindred.core.enums import AIState, AiKind, DeathCallback, Domain, GameStatus, IntentKind, PlayerAction
from unkindred.core.models import Entity, Fighter, Vector2
from unkindred.core.grid import Tile, TileGrid
from unkindred.core.rect import Rect
from unkindred.core.entity_store import PLAYER, EntityStore

__all__ = [
    "AIState",
    "AiKind",
    "DeathCallback",
    "Domain",
    "Entity",
    "EntityStore",
    "Fighter",
    "GameStatus",
    "IntentKind",
    "PLAYER",
    "PlayerAction",
    "Rect",
    "Tile",
    "TileGrid",
    "Vector2",
]

"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Domain(IntEnum):
    """RNG domains, so unrelated random draws never share a stream."""

    MAP_GEN = 0
    SPAWN = 1
    AI_DECISION = 2


@unique
class AIState(IntEnum):
    """Per-tick decision of the Basic AI. Recomputed every tick, never stored."""

    IDLE = 0        # outside the player's field of view
    SEEK = 1
    ATTACK = 2
    WANDER = 3


@unique
class AiKind(IntEnum):
    """Behaviour capability attached to an entity."""

    BASIC = 0


@unique
class DeathCallback(IntEnum):
    """Death transition bound to a Fighter when it is attached."""

    PLAYER = 0
    MONSTER = 1


@unique
class IntentKind(IntEnum):
    """What a single input event asks the engine to do."""

    NONE = 0
    MOVE = 1
    TOGGLE_FULLSCREEN = 2
    EXIT = 3


@unique
class PlayerAction(IntEnum):
    """Outcome of resolving one player intent."""

    TOOK_TURN = 0
    DIDNT_TAKE_TURN = 1
    EXIT = 2


@unique
class GameStatus(IntEnum):
    """Session lifecycle."""

    PLAYING = 0
    LOST = 1
    QUIT = 2


@unique
class FovAlgorithm(IntEnum):
    """Field-of-view algorithms understood by the visibility collaborator."""

    BASIC = 0

"""GameSession — builds every component of one run from a GameConfig."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unkindred.ai.brain import AIBrain
from unkindred.core import colors
from unkindred.core.bestiary import make_player
from unkindred.core.entity_store import EntityStore
from unkindred.engine.turn_engine import TurnEngine
from unkindred.systems.dungeon import DungeonGenerator
from unkindred.systems.fov import RaycastFov
from unkindred.systems.rng import DeterministicRNG
from unkindred.utils.event_log import MessageLog

if TYPE_CHECKING:
    from unkindred.config import GameConfig
    from unkindred.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings."


@dataclass(slots=True)
class GameSession:
    """One run: a generated dungeon driven by a turn engine."""

    config: GameConfig
    rng: DeterministicRNG
    engine: TurnEngine
    room_count: int = 0

    @classmethod
    def new(cls, config: GameConfig, recorder: ReplayRecorder | None = None) -> GameSession:
        rng = DeterministicRNG(config.seed)
        store = EntityStore(make_player())
        dungeon = DungeonGenerator(config, rng).generate(store)

        log = MessageLog()
        log.add(WELCOME_TEXT, colors.RED)

        engine = TurnEngine(
            config=config,
            grid=dungeon.grid,
            store=store,
            fov=RaycastFov(dungeon.grid),
            brain=AIBrain(rng),
            log=log,
            recorder=recorder,
        )
        engine.start()
        logger.info("Session ready (seed=%d, entities=%d)", config.seed, len(store))
        # Room rectangles are a generation detail and are dropped here
        return cls(config=config, rng=rng, engine=engine, room_count=len(dungeon.rooms))

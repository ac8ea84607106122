"""TurnEngine — the authoritative tick protocol.

One tick per input event:
  1. Input     — map exactly one key event to an intent
  2. Player    — quit leaves at once; a move resolves as move-or-attack
  3. Monsters  — only after a turn-taking action by a live player, every
                 non-player entity with an AI acts in ascending index order
  4. Render    — compose the frame, marking newly seen cells explored
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from unkindred.actions.movement import player_move_or_attack
from unkindred.core.entity_store import PLAYER
from unkindred.core.enums import GameStatus, IntentKind, PlayerAction
from unkindred.engine.input import intent_for
from unkindred.engine.render import compose_frame

if TYPE_CHECKING:
    from unkindred.ai.brain import AIBrain, AIDecision
    from unkindred.config import GameConfig
    from unkindred.core.entity_store import EntityStore
    from unkindred.core.grid import TileGrid
    from unkindred.core.models import Vector2
    from unkindred.engine.input import InputSource, Intent, KeyEvent
    from unkindred.engine.render import Frame
    from unkindred.systems.fov import FieldOfView
    from unkindred.utils.event_log import MessageLog
    from unkindred.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


class TurnEngine:
    """Single-threaded, synchronous driver of one game session.

    The entity store is the only shared mutable state; every system reaches
    it through indices handed out here.
    """

    __slots__ = (
        "_config",
        "_grid",
        "_store",
        "_fov",
        "_brain",
        "_log",
        "_recorder",
        "_turn",
        "_ticks",
        "_status",
        "_fullscreen",
        "_fov_origin",
        "_last_frame",
        "_last_decisions",
    )

    def __init__(
        self,
        config: GameConfig,
        grid: TileGrid,
        store: EntityStore,
        fov: FieldOfView,
        brain: AIBrain,
        log: MessageLog,
        recorder: ReplayRecorder | None = None,
    ) -> None:
        self._config = config
        self._grid = grid
        self._store = store
        self._fov = fov
        self._brain = brain
        self._log = log
        self._recorder = recorder
        self._turn = 0
        self._ticks = 0
        self._status = GameStatus.PLAYING
        self._fullscreen = False
        self._fov_origin: Vector2 | None = None
        self._last_frame: Frame | None = None
        self._last_decisions: list[AIDecision] = []

    # -- properties --

    @property
    def grid(self) -> TileGrid:
        return self._grid

    @property
    def store(self) -> EntityStore:
        return self._store

    @property
    def fov(self) -> FieldOfView:
        return self._fov

    @property
    def log(self) -> MessageLog:
        return self._log

    @property
    def turn(self) -> int:
        """Number of turn-taking player actions so far."""
        return self._turn

    @property
    def ticks(self) -> int:
        """Number of input events processed so far."""
        return self._ticks

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    @property
    def last_frame(self) -> Frame | None:
        return self._last_frame

    @property
    def last_decisions(self) -> list[AIDecision]:
        """AI decisions taken during the most recent tick."""
        return self._last_decisions

    # -- lifecycle --

    def start(self) -> Frame:
        """Compute the initial field of view and draw the first frame."""
        self.refresh_fov()
        return self.render()

    def run(self, source: InputSource) -> None:
        """Process events until quit or until *source* runs dry."""
        logger.info("=== Session started (turn=%d) ===", self._turn)
        if self._last_frame is None:
            self.start()
        while True:
            event = source.wait_for_keypress()
            if event is None:
                break
            if self.step(event) == PlayerAction.EXIT:
                break
        logger.info("=== Session finished at turn %d (%s) ===", self._turn, self._status.name)
        if self._recorder:
            self._recorder.flush()

    def step(self, event: KeyEvent) -> PlayerAction:
        """Execute one complete tick for a single input event."""
        if self._status == GameStatus.QUIT:
            # The session has ended; later events change nothing
            return PlayerAction.EXIT
        self._last_decisions = []
        intent = intent_for(event)
        self._ticks += 1

        if intent.kind == IntentKind.EXIT:
            self._status = GameStatus.QUIT
            self._record(intent, PlayerAction.EXIT)
            return PlayerAction.EXIT

        action = self.handle_intent(intent)
        player = self._store.player

        if action == PlayerAction.TOOK_TURN and player.alive:
            self.refresh_fov()
            self._last_decisions = self.run_monsters()

        if not player.alive:
            self._status = GameStatus.LOST

        self.render()
        self._record(intent, action)
        if action == PlayerAction.TOOK_TURN:
            self._turn += 1
        return action

    # -- phases --

    def handle_intent(self, intent: Intent) -> PlayerAction:
        """Resolve the player's part of the tick."""
        match intent.kind:
            case IntentKind.MOVE:
                if not self._store.player.alive:
                    return PlayerAction.DIDNT_TAKE_TURN
                player_move_or_attack(self._store, self._grid, PLAYER, intent.dx, intent.dy, self._log)
                return PlayerAction.TOOK_TURN
            case IntentKind.TOGGLE_FULLSCREEN:
                self._fullscreen = not self._fullscreen
                logger.debug("Fullscreen toggled: %s", self._fullscreen)
                return PlayerAction.DIDNT_TAKE_TURN
        return PlayerAction.DIDNT_TAKE_TURN

    def run_monsters(self) -> list[AIDecision]:
        """Every non-player entity with an AI acts, lowest index first."""
        decisions: list[AIDecision] = []
        for idx in self._store.non_player_indices():
            if self._store[idx].ai is None:
                continue
            decisions.append(
                self._brain.take_turn(idx, self._store, self._grid, self._fov, self._turn, self._log)
            )
        return decisions

    def refresh_fov(self) -> bool:
        """Recompute the field of view if the player moved since last time."""
        player = self._store.player
        if self._fov_origin == player.pos:
            return False
        cfg = self._config
        self._fov.compute(player.x, player.y, cfg.fov_radius, cfg.fov_light_walls, cfg.fov_algorithm)
        self._fov_origin = player.pos
        return True

    def render(self) -> Frame:
        cfg = self._config
        messages = self._log.visible_window(cfg.message_log_height, cfg.message_log_width)
        self._last_frame = compose_frame(self._grid, self._fov, self._store, messages)
        return self._last_frame

    def _record(self, intent: Intent, action: PlayerAction) -> None:
        if self._recorder is not None:
            self._recorder.record_tick(self._ticks, intent, action, self._store, self._last_decisions)

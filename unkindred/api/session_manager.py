"""SessionManager — owns the single game session served by the API.

The simulation is single-threaded; HTTP handlers may run on several threads,
so every access to the session goes through one lock.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterator

from unkindred.engine.session import GameSession

if TYPE_CHECKING:
    from unkindred.config import GameConfig
    from unkindred.core.enums import GameStatus, PlayerAction
    from unkindred.engine.input import KeyEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickResult:
    """Outcome of one key event, read under the lock that ran the tick."""

    action: PlayerAction
    turn: int
    status: GameStatus


class SessionManager:
    """Thread-safe wrapper around one :class:`GameSession`."""

    def __init__(self, config: GameConfig) -> None:
        self._config = config
        self.config = config
        self._lock = threading.Lock()
        self._session: GameSession | None = GameSession.new(config)

    @contextmanager
    def session(self) -> Iterator[GameSession | None]:
        """Hold the lock while the caller reads or drives the session."""
        with self._lock:
            yield self._session

    def send_key(self, event: KeyEvent) -> TickResult:
        """Feed one key event: exactly one tick. Once quit, input is ignored."""
        with self._lock:
            if self._session is None:
                raise RuntimeError("Session not initialized.")
            engine = self._session.engine
            action = engine.step(event)
            return TickResult(action=action, turn=engine.turn, status=engine.status)

    def reset(self, seed: int | None = None) -> None:
        """Discard the current run and generate a fresh one.

        The new session is built first; if that fails the current config and
        session are left untouched.
        """
        with self._lock:
            config = self._config if seed is None else replace(self._config, seed=seed)
            session = GameSession.new(config)
            self._config = config
            self.config = config
            self._session = session
        logger.info("SessionManager reset (seed=%d).", config.seed)

    def close(self) -> None:
        with self._lock:
            self._session = None
        logger.info("SessionManager closed.")

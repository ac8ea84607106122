"""Replay trace — records tick-by-tick outcomes for determinism checks."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unkindred.ai.brain import AIDecision
    from unkindred.core.entity_store import EntityStore
    from unkindred.core.enums import PlayerAction
    from unkindred.engine.input import Intent

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates tick records and flushes them to a JSON trace file."""

    __slots__ = ("_path", "_ticks", "_seed")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._ticks: list[dict[str, Any]] = []

    @property
    def ticks(self) -> list[dict[str, Any]]:
        return self._ticks

    def record_tick(
        self,
        tick: int,
        intent: Intent,
        action: PlayerAction,
        store: EntityStore,
        decisions: list[AIDecision],
    ) -> None:
        entities_snapshot = [
            {
                "index": idx,
                "name": e.name,
                "pos": [e.x, e.y],
                "hp": e.fighter.hp if e.fighter else None,
                "alive": e.alive,
            }
            for idx, e in enumerate(store)
        ]
        ai_log = [
            {
                "index": d.index,
                "state": d.state.name,
                "moved": d.moved,
                "damage": d.attack.damage if d.attack else None,
            }
            for d in decisions
        ]

        self._ticks.append(
            {
                "tick": tick,
                "intent": [intent.kind.name, intent.dx, intent.dy],
                "action": action.name,
                "ai": ai_log,
                "entities": entities_snapshot,
            }
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": "1.0",
            "seed": self._seed,
            "total_ticks": len(self._ticks),
            "ticks": self._ticks,
        }

    def flush(self) -> None:
        """Write accumulated data to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d ticks)", self._path, len(self._ticks))

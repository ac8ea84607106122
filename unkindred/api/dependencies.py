"""FastAPI dependency injection — the SessionManager singleton and a locked
view of its current session."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from fastapi import HTTPException

from unkindred.api.session_manager import SessionManager

if TYPE_CHECKING:
    from unkindred.engine.session import GameSession

_session_manager: SessionManager | None = None


def set_session_manager(manager: SessionManager | None) -> None:
    global _session_manager
    _session_manager = manager


def get_session_manager() -> SessionManager:
    if _session_manager is None:
        raise RuntimeError("SessionManager not initialized — server not started correctly.")
    return _session_manager


@contextmanager
def locked_session(manager: SessionManager) -> Iterator[GameSession]:
    """Hold the session lock for a handler; 503 if there is no session."""
    with manager.session() as session:
        if session is None:
            raise HTTPException(status_code=503, detail="Session not initialized yet.")
        yield session

"""POST /api/v1/input/{key} and /control/reset — drive the session."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from unkindred.api.dependencies import get_session_manager
from unkindred.api.schemas import ControlResponse, InputResponse
from unkindred.api.session_manager import SessionManager
from unkindred.engine.input import KeyEvent
from unkindred.systems.rng import SEED_MAX, SEED_MIN

router = APIRouter()


@router.post("/input/{key}", response_model=InputResponse)
def send_input(
    key: str,
    alt: bool = Query(False, description="Alt modifier held"),
    manager: SessionManager = Depends(get_session_manager),
) -> InputResponse:
    """One key event = one tick. Unbound keys are accepted as a no-op;
    after a quit every key answers ``exit`` and changes nothing."""
    try:
        result = manager.send_key(KeyEvent(code=key.lower(), alt=alt))
    except RuntimeError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return InputResponse(
        key=key,
        action=result.action.name.lower(),
        turn=result.turn,
        status=result.status.name.lower(),
    )


@router.post("/control/reset", response_model=ControlResponse)
def reset(
    seed: int | None = Query(
        None, ge=SEED_MIN, le=SEED_MAX,
        description="New dungeon seed (signed 64-bit); keeps the current one if omitted",
    ),
    manager: SessionManager = Depends(get_session_manager),
) -> ControlResponse:
    manager.reset(seed)
    with manager.session() as session:
        turn = session.engine.turn if session else 0
    return ControlResponse(status="ok", message=f"Session reset (seed={manager.config.seed}).", turn=turn)

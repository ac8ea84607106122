"""GET /api/v1/state and /frame — what the player currently sees."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from unkindred.api.dependencies import get_session_manager, locked_session
from unkindred.api.schemas import (
    EntitySchema,
    FighterSchema,
    FrameResponse,
    GameStateResponse,
    MessageSchema,
)
from unkindred.api.session_manager import SessionManager
from unkindred.core.entity_store import PLAYER

router = APIRouter()


def serialize_entity(index: int, e) -> EntitySchema:
    fighter = None
    if e.fighter is not None:
        f = e.fighter
        fighter = FighterSchema(
            hp=f.hp, max_hp=f.max_hp, defense=f.defense, power=f.power,
            magic=f.magic, magic_defense=f.magic_defense,
        )
    return EntitySchema(
        index=index,
        kind=e.kind,
        name=e.name,
        glyph=e.glyph,
        color=e.color.as_tuple(),
        x=e.x,
        y=e.y,
        blocks=e.blocks,
        alive=e.alive,
        fighter=fighter,
        ai=e.ai.name.lower() if e.ai is not None else None,
    )


@router.get("/state", response_model=GameStateResponse)
def get_state(manager: SessionManager = Depends(get_session_manager)) -> GameStateResponse:
    with locked_session(manager) as session:
        engine = session.engine
        store = engine.store
        cfg = session.config
        visible = [
            serialize_entity(idx, e)
            for idx, e in enumerate(store)
            if idx != PLAYER and engine.fov.is_in_fov(e.x, e.y)
        ]
        messages = [
            MessageSchema(text=m.text, color=m.color.as_tuple())
            for m in engine.log.visible_window(cfg.message_log_height, cfg.message_log_width)
        ]
        return GameStateResponse(
            turn=engine.turn,
            ticks=engine.ticks,
            status=engine.status.name.lower(),
            fullscreen=engine.fullscreen,
            player=serialize_entity(PLAYER, store.player),
            visible_entities=visible,
            messages=messages,
        )


@router.get("/frame", response_model=FrameResponse)
def get_frame(manager: SessionManager = Depends(get_session_manager)) -> FrameResponse:
    with locked_session(manager) as session:
        if session.engine.last_frame is None:
            raise HTTPException(status_code=503, detail="Session not initialized yet.")
        frame = session.engine.last_frame
        return FrameResponse(width=frame.width, height=frame.height, rows=frame.rows(), status=frame.status)

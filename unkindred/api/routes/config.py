"""GET /api/v1/config — expose the game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from unkindred.api.dependencies import get_session_manager
from unkindred.api.schemas import GameConfigResponse
from unkindred.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(
    manager: SessionManager = Depends(get_session_manager),
) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        seed=cfg.seed,
        map_width=cfg.map_width,
        map_height=cfg.map_height,
        room_min_size=cfg.room_min_size,
        room_max_size=cfg.room_max_size,
        max_rooms=cfg.max_rooms,
        max_room_monsters=cfg.max_room_monsters,
        fov_radius=cfg.fov_radius,
        fov_light_walls=cfg.fov_light_walls,
        fov_algorithm=cfg.fov_algorithm.name.lower(),
    )

"""GET /api/v1/map — explored map data, RLE-encoded."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from unkindred.api.dependencies import get_session_manager, locked_session
from unkindred.api.schemas import MapResponse
from unkindred.api.session_manager import SessionManager

router = APIRouter()

UNEXPLORED, WALL, FLOOR = 0, 1, 2


def encode_explored(grid) -> list[int]:
    """RLE encode: [value, count, value, count, ...]. Unexplored cells hide their terrain."""
    rle: list[int] = []
    cur_val = -1
    cur_count = 0
    for x, y in grid.cells():
        tile = grid.tile(x, y)
        if not tile.explored:
            v = UNEXPLORED
        else:
            v = WALL if tile.block_sight else FLOOR
        if v == cur_val:
            cur_count += 1
        else:
            if cur_count:
                rle.append(cur_val)
                rle.append(cur_count)
            cur_val = v
            cur_count = 1
    if cur_count:
        rle.append(cur_val)
        rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: SessionManager = Depends(get_session_manager)) -> MapResponse:
    with locked_session(manager) as session:
        grid = session.engine.grid
        return MapResponse(width=grid.width, height=grid.height, grid=encode_explored(grid))

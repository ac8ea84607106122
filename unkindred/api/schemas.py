"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Entity ---

class FighterSchema(BaseModel):
    hp: int
    max_hp: int
    defense: int
    power: int
    magic: int = 0
    magic_defense: int = 0


class EntitySchema(BaseModel):
    index: int
    kind: str
    name: str
    glyph: str
    color: tuple[int, int, int]
    x: int
    y: int
    blocks: bool
    alive: bool
    fighter: FighterSchema | None = None
    ai: str | None = None


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    grid: list[int] = Field(
        description="RLE pairs [value, count, ...] in row-major order (0=unexplored, 1=wall, 2=floor)",
    )


# --- Frame ---

class FrameResponse(BaseModel):
    width: int
    height: int
    rows: list[str]
    status: str = ""


# --- Game State ---

class MessageSchema(BaseModel):
    text: str
    color: tuple[int, int, int]


class GameStateResponse(BaseModel):
    turn: int
    ticks: int
    status: str
    fullscreen: bool = False
    player: EntitySchema
    visible_entities: list[EntitySchema] = Field(default_factory=list)
    messages: list[MessageSchema] = Field(default_factory=list)


# --- Input ---

class InputResponse(BaseModel):
    key: str
    action: str
    turn: int
    status: str


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    turn: int = 0


# --- Config ---

class GameConfigResponse(BaseModel):
    seed: int
    map_width: int
    map_height: int
    room_min_size: int
    room_max_size: int
    max_rooms: int
    max_room_monsters: int
    fov_radius: int
    fov_light_walls: bool
    fov_algorithm: str

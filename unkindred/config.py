"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from unkindred.core.enums import FovAlgorithm


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game session."""

    # World
    seed: int = 42
    map_width: int = 80
    map_height: int = 45

    # Dungeon generation
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30
    max_room_monsters: int = 3
    orc_chance: float = 0.8            # remainder spawns trolls

    # Field of view
    fov_radius: int = 8
    fov_light_walls: bool = True
    fov_algorithm: FovAlgorithm = FovAlgorithm.BASIC

    # Message log panel
    message_log_height: int = 5
    message_log_width: int = 60

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"

"""Engine layer: input mapping, turn protocol, rendering, session assembly."""

from unkindred.engine.input import Intent, KeyEvent, ScriptedInput, intent_for, parse_keys
from unkindred.engine.render import Frame, Glyph, compose_frame, tile_glyph
from unkindred.engine.turn_engine import TurnEngine
from unkindred.engine.session import GameSession

__all__ = [
    "Frame",
    "GameSession",
    "Glyph",
    "Intent",
    "KeyEvent",
    "ScriptedInput",
    "TurnEngine",
    "compose_frame",
    "intent_for",
    "parse_keys",
    "tile_glyph",
]

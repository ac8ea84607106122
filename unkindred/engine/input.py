"""Input collaborator: key events and their mapping to intents."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Protocol

from unkindred.core.enums import IntentKind
from unkindred.core.models import DIRECTION_OFFSETS


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """One keypress. ``code`` is a lowercase key name such as ``"numpad8"``."""

    code: str
    alt: bool = False


@dataclass(frozen=True, slots=True)
class Intent:
    kind: IntentKind
    dx: int = 0
    dy: int = 0

    @property
    def is_move(self) -> bool:
        return self.kind == IntentKind.MOVE


NO_OP = Intent(IntentKind.NONE)
EXIT = Intent(IntentKind.EXIT)
TOGGLE_FULLSCREEN = Intent(IntentKind.TOGGLE_FULLSCREEN)


def _move(direction: str) -> Intent:
    offset = DIRECTION_OFFSETS[direction]
    return Intent(IntentKind.MOVE, offset.x, offset.y)


MOVE_KEYS: dict[str, Intent] = {
    "numpad8": _move("north"),
    "numpad2": _move("south"),
    "numpad4": _move("west"),
    "numpad6": _move("east"),
    "numpad7": _move("north_west"),
    "numpad9": _move("north_east"),
    "numpad1": _move("south_west"),
    "numpad3": _move("south_east"),
    "up": _move("north"),
    "down": _move("south"),
    "left": _move("west"),
    "right": _move("east"),
}


def intent_for(event: KeyEvent) -> Intent:
    """Map a key event to an intent; unknown keys are a no-op."""
    if event.code == "enter" and event.alt:
        return TOGGLE_FULLSCREEN
    if event.code == "escape":
        return EXIT
    return MOVE_KEYS.get(event.code, NO_OP)


class InputSource(Protocol):
    def wait_for_keypress(self) -> KeyEvent | None:
        """Block for the next key event; None once the source is closed."""
        ...


class ScriptedInput:
    """Replays a fixed sequence of key events (headless runs and tests)."""

    __slots__ = ("_events",)

    def __init__(self, events: Iterable[KeyEvent]) -> None:
        self._events: deque[KeyEvent] = deque(events)

    def wait_for_keypress(self) -> KeyEvent | None:
        if not self._events:
            return None
        return self._events.popleft()

    def __len__(self) -> int:
        return len(self._events)


_SHORTHAND: dict[str, KeyEvent] = {
    "f": KeyEvent("enter", alt=True),
    "q": KeyEvent("escape"),
}


def parse_keys(script: str) -> list[KeyEvent]:
    """Parse the CLI shorthand: digits are numpad keys, ``f`` toggles
    fullscreen, ``q`` quits, whitespace is ignored, anything else is a key
    with no binding."""
    events: list[KeyEvent] = []
    for ch in script:
        if ch.isspace():
            continue
        if ch.isdigit():
            events.append(KeyEvent(f"numpad{ch}"))
        else:
            events.append(_SHORTHAND.get(ch.lower(), KeyEvent(ch.lower())))
    return events

"""Tests for key mapping and scripted input."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unkindred.core.enums import IntentKind
from unkindred.engine.input import (
    EXIT,
    NO_OP,
    TOGGLE_FULLSCREEN,
    KeyEvent,
    ScriptedInput,
    intent_for,
    parse_keys,
)


class TestIntentFor:

    def test_numpad_directions(self):
        assert (intent_for(KeyEvent("numpad8")).dx, intent_for(KeyEvent("numpad8")).dy) == (0, -1)
        assert (intent_for(KeyEvent("numpad3")).dx, intent_for(KeyEvent("numpad3")).dy) == (1, 1)
        assert (intent_for(KeyEvent("numpad7")).dx, intent_for(KeyEvent("numpad7")).dy) == (-1, -1)

    def test_arrow_keys(self):
        intent = intent_for(KeyEvent("left"))
        assert intent.is_move
        assert (intent.dx, intent.dy) == (-1, 0)

    def test_alt_enter_toggles_fullscreen(self):
        assert intent_for(KeyEvent("enter", alt=True)) == TOGGLE_FULLSCREEN
        assert intent_for(KeyEvent("enter")) == NO_OP

    def test_escape_exits(self):
        assert intent_for(KeyEvent("escape")) == EXIT

    def test_unbound_and_numpad5_are_no_op(self):
        assert intent_for(KeyEvent("numpad5")).kind == IntentKind.NONE
        assert intent_for(KeyEvent("z")).kind == IntentKind.NONE


class TestScriptedInput:

    def test_drains_then_returns_none(self):
        source = ScriptedInput([KeyEvent("up"), KeyEvent("down")])
        assert source.wait_for_keypress() == KeyEvent("up")
        assert len(source) == 1
        assert source.wait_for_keypress() == KeyEvent("down")
        assert source.wait_for_keypress() is None

    def test_parse_keys_shorthand(self):
        events = parse_keys("6 2f q x")
        assert events == [
            KeyEvent("numpad6"),
            KeyEvent("numpad2"),
            KeyEvent("enter", alt=True),
            KeyEvent("escape"),
            KeyEvent("x"),
        ]

"""Tests for the tick protocol of TurnEngine."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unkindred.ai.brain import AIBrain
from unkindred.actions.death import dispatch_death
from unkindred.config import GameConfig
from unkindred.core.bestiary import make_orc, make_player
from unkindred.core.entity_store import EntityStore
from unkindred.core.enums import AIState, DeathCallback, GameStatus, PlayerAction
from unkindred.core.grid import TileGrid
from unkindred.core.models import Vector2
from unkindred.engine.input import KeyEvent, ScriptedInput
from unkindred.engine.turn_engine import TurnEngine
from unkindred.systems.fov import RaycastFov
from unkindred.systems.rng import DeterministicRNG
from unkindred.utils.event_log import MessageLog


def _hall() -> TileGrid:
    """20x5 room with an open 18x3 interior."""
    grid = TileGrid(20, 5)
    for y in range(1, 4):
        for x in range(1, 19):
            grid.carve(x, y)
    return grid


def _make_engine(player_pos=(2, 2), monsters=()) -> TurnEngine:
    grid = _hall()
    store = EntityStore(make_player(*player_pos))
    for pos in monsters:
        store.add(make_orc(*pos))
    engine = TurnEngine(
        config=GameConfig(seed=3),
        grid=grid,
        store=store,
        fov=RaycastFov(grid),
        brain=AIBrain(DeterministicRNG(3)),
        log=MessageLog(),
    )
    engine.start()
    return engine


class TestTickProtocol:

    def test_quit_ends_before_monsters(self):
        engine = _make_engine(monsters=[(3, 2)])
        action = engine.step(KeyEvent("escape"))
        assert action == PlayerAction.EXIT
        assert engine.status == GameStatus.QUIT
        assert engine.store.player.fighter.hp == 30
        assert engine.last_decisions == []
        assert engine.turn == 0

    def test_unbound_key_does_not_take_a_turn(self):
        engine = _make_engine(monsters=[(3, 2)])
        action = engine.step(KeyEvent("numpad5"))
        assert action == PlayerAction.DIDNT_TAKE_TURN
        assert engine.store.player.fighter.hp == 30
        assert engine.last_decisions == []
        assert engine.turn == 0
        assert engine.ticks == 1

    def test_fullscreen_toggle_is_free(self):
        engine = _make_engine(monsters=[(3, 2)])
        engine.step(KeyEvent("enter", alt=True))
        assert engine.fullscreen
        engine.step(KeyEvent("enter", alt=True))
        assert not engine.fullscreen
        assert engine.store.player.fighter.hp == 30

    def test_move_then_monster_seeks(self):
        engine = _make_engine(player_pos=(2, 2), monsters=[(3, 2)])
        action = engine.step(KeyEvent("numpad4"))
        assert action == PlayerAction.TOOK_TURN
        assert engine.store.player.pos == Vector2(1, 2)
        assert engine.store[1].pos == Vector2(2, 2)
        assert engine.turn == 1

    def test_bump_attacks_instead_of_moving(self):
        engine = _make_engine(player_pos=(2, 2), monsters=[(3, 2)])
        engine.step(KeyEvent("numpad6"))
        assert engine.store.player.pos == Vector2(2, 2)
        assert engine.store[1].fighter.hp == 5
        texts = [m.text for m in engine.log]
        assert texts[0] == "player attacks orc for 5 hit points."
        # the orc strikes back in the same tick
        assert texts[1] == "orc attacks player for 3 hit points."

    def test_monsters_act_in_ascending_index_order(self):
        engine = _make_engine(player_pos=(2, 2), monsters=[(10, 2), (12, 2)])
        corpse = make_orc(15, 3)
        dispatch_death(DeathCallback.MONSTER, corpse)
        engine.store.add(corpse)
        engine.step(KeyEvent("numpad6"))
        decisions = engine.last_decisions
        assert [d.index for d in decisions] == [1, 2]
        assert decisions[0].state == AIState.SEEK
        assert decisions[1].state == AIState.IDLE

    def test_input_after_quit_changes_nothing(self):
        engine = _make_engine(player_pos=(2, 2), monsters=[(3, 2)])
        engine.step(KeyEvent("escape"))
        ticks = engine.ticks
        for key in ("numpad6", "numpad4", "enter"):
            assert engine.step(KeyEvent(key, alt=key == "enter")) == PlayerAction.EXIT
        assert engine.store.player.pos == Vector2(2, 2)
        assert engine.store[1].fighter.hp == 10
        assert engine.store.player.fighter.hp == 30
        assert engine.turn == 0
        assert engine.ticks == ticks
        assert not engine.fullscreen
        assert engine.status == GameStatus.QUIT


class TestPlayerDeath:

    def test_death_sets_lost_and_freezes_monsters(self):
        engine = _make_engine(player_pos=(2, 2), monsters=[(3, 2)])
        engine.store.player.fighter.hp = 1
        engine.step(KeyEvent("numpad8"))
        player = engine.store.player
        assert not player.alive
        assert engine.status == GameStatus.LOST
        assert "You died!" in [m.text for m in engine.log]

        orc_pos = engine.store[1].pos
        action = engine.step(KeyEvent("numpad2"))
        assert action == PlayerAction.DIDNT_TAKE_TURN
        assert engine.last_decisions == []
        assert engine.store[1].pos == orc_pos
        assert player.pos == Vector2(2, 1)

    def test_quit_still_works_after_death(self):
        engine = _make_engine(player_pos=(2, 2), monsters=[(3, 2)])
        engine.store.player.fighter.hp = 1
        engine.step(KeyEvent("numpad8"))
        assert engine.step(KeyEvent("escape")) == PlayerAction.EXIT
        assert engine.status == GameStatus.QUIT


class TestFovRefresh:

    def test_recomputed_only_when_player_moves(self):
        engine = _make_engine(player_pos=(1, 1))
        fov = engine.fov
        assert fov.compute_count == 1
        engine.step(KeyEvent("z"))
        assert fov.compute_count == 1
        # bump into the wall: a turn, but no movement
        engine.step(KeyEvent("numpad8"))
        assert engine.turn == 1
        assert fov.compute_count == 1
        engine.step(KeyEvent("numpad6"))
        assert fov.compute_count == 2

    def test_explored_grows_monotonically(self):
        engine = _make_engine(player_pos=(1, 2))
        counts = [engine.grid.explored_count()]
        for _ in range(12):
            engine.step(KeyEvent("numpad6"))
            counts.append(engine.grid.explored_count())
        assert counts == sorted(counts)
        assert counts[-1] > counts[0]
        assert engine.grid.is_explored(1, 2)


class TestRun:

    def test_run_stops_on_exit(self):
        engine = _make_engine()
        source = ScriptedInput([KeyEvent("numpad6"), KeyEvent("escape"), KeyEvent("numpad6")])
        engine.run(source)
        assert engine.status == GameStatus.QUIT
        assert engine.store.player.pos == Vector2(3, 2)
        assert len(source) == 1

    def test_run_stops_when_source_is_empty(self):
        engine = _make_engine()
        engine.run(ScriptedInput([KeyEvent("numpad6")] * 3))
        assert engine.status == GameStatus.PLAYING
        assert engine.turn == 3
        assert engine.last_frame is not None

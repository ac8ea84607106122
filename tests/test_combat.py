"""Tests for the melee damage formula and death transitions."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unkindred.actions.combat import attack, attack_by_index, compute_damage, take_damage
from unkindred.actions.death import dispatch_death
from unkindred.core import colors
from unkindred.core.bestiary import CORPSE_GLYPH, make_orc, make_player
from unkindred.core.entity_store import PLAYER, EntityStore
from unkindred.core.enums import AiKind, DeathCallback
from unkindred.core.models import Entity, Fighter, Vector2
from unkindred.errors import AliasedEntityError
from unkindred.utils.event_log import MessageLog


def _make_fighter(
    name: str = "B",
    hp: int = 10,
    power: int = 0,
    defense: int = 0,
    on_death: DeathCallback = DeathCallback.MONSTER,
    ai: AiKind | None = AiKind.BASIC,
) -> Entity:
    return Entity(
        pos=Vector2(0, 0),
        glyph="b",
        color=colors.WHITE,
        name=name,
        blocks=True,
        alive=True,
        fighter=Fighter(max_hp=hp, hp=hp, defense=defense, power=power, on_death=on_death),
        ai=ai,
    )


class TestDamageFormula:

    def test_defense_divided_by_four_truncates(self):
        a = _make_fighter("A", power=5)
        b = _make_fighter("B", hp=10, defense=2)
        outcome = attack(a, b)
        assert outcome.damage == 5
        assert b.fighter.hp == 5
        assert b.alive
        assert outcome.hit and not outcome.killed

    def test_lethal_hit_turns_monster_into_corpse(self):
        a = _make_fighter("A", power=20)
        b = _make_fighter("B", hp=10, defense=0)
        fighter = b.fighter
        outcome = attack(a, b)
        assert outcome.damage == 20
        assert fighter.hp == -10
        assert not b.alive
        assert not b.blocks
        assert b.fighter is None
        assert b.ai is None
        assert b.name == "Corpse of B"
        assert b.glyph == CORPSE_GLYPH
        assert outcome.killed

    def test_weak_attack_has_no_effect(self):
        a = _make_fighter("A", power=1)
        b = _make_fighter("B", hp=10, defense=20)
        assert compute_damage(a, b) < 0
        outcome = attack(a, b)
        assert outcome.damage == 0
        assert not outcome.hit
        assert b.fighter.hp == 10
        assert outcome.text == "A attacks B but it has no effect!"

    def test_exact_zero_damage_is_no_effect(self):
        a = _make_fighter("A", power=1)
        b = _make_fighter("B", hp=10, defense=4)
        assert attack(a, b).damage == 0
        assert b.fighter.hp == 10

    def test_attacker_without_fighter_deals_nothing(self):
        a = _make_fighter("A", power=9)
        a.fighter = None
        b = _make_fighter("B", hp=10)
        assert attack(a, b).damage == 0
        assert b.fighter.hp == 10


class TestTakeDamage:

    def test_non_positive_damage_never_heals(self):
        b = _make_fighter(hp=10)
        take_damage(b, -5)
        assert b.fighter.hp == 10

    def test_death_happens_once(self):
        player = _make_fighter("player", hp=3, on_death=DeathCallback.PLAYER, ai=None)
        log = MessageLog()
        first = take_damage(player, 5, log)
        second = take_damage(player, 5, log)
        assert first is not None
        assert second is None
        assert player.fighter.hp == -7
        assert [m.text for m in log].count("You died!") == 1

    def test_exactly_zero_hp_is_death(self):
        b = _make_fighter(hp=5)
        assert take_damage(b, 5) is not None
        assert not b.alive

    def test_entity_without_fighter_ignores_damage(self):
        b = _make_fighter()
        b.fighter = None
        assert take_damage(b, 100) is None
        assert b.alive


class TestDeathCallbacks:

    def test_player_death_keeps_fighter_and_position(self):
        player = make_player(3, 4)
        notice = dispatch_death(DeathCallback.PLAYER, player)
        assert not player.alive
        assert player.fighter is not None
        assert player.name == "player"
        assert player.pos == Vector2(3, 4)
        assert player.glyph == CORPSE_GLYPH
        assert notice.color == colors.RED

    def test_monster_death_rewrites_entity(self):
        orc = make_orc(1, 1)
        notice = dispatch_death(DeathCallback.MONSTER, orc)
        assert orc.name == "Corpse of orc"
        assert orc.color == colors.DARK_RED
        assert (orc.fighter, orc.ai, orc.blocks, orc.alive) == (None, None, False, False)
        assert notice.text == "orc dies!"

    def test_callback_comes_from_fighter_tag(self):
        # A player-tagged entity that is not index 0 still dies as a player
        decoy = _make_fighter("decoy", hp=1, on_death=DeathCallback.PLAYER)
        take_damage(decoy, 1)
        assert decoy.fighter is not None
        assert decoy.name == "decoy"


class TestMessages:

    def test_hit_and_death_are_logged_in_order(self):
        log = MessageLog()
        a = _make_fighter("A", power=20)
        b = _make_fighter("B", hp=10)
        attack(a, b, log)
        texts = [m.text for m in log]
        assert texts == ["A attacks B for 20 hit points.", "B dies!"]
        assert log.latest(1)[0].color == colors.ORANGE


class TestIndexedAttack:

    def test_self_attack_is_an_invariant_violation(self):
        store = EntityStore(make_player())
        with pytest.raises(AliasedEntityError):
            attack_by_index(store, PLAYER, PLAYER)

    def test_monster_attacks_player_by_index(self):
        store = EntityStore(make_player())
        idx = store.add(make_orc(1, 0))
        outcome = attack_by_index(store, idx, PLAYER)
        # orc power 3, player defense 2 → 3 - 0
        assert outcome.damage == 3
        assert store.player.fighter.hp == 27

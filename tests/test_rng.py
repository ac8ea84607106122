"""Tests for the domain-separated deterministic RNG."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unkindred.core.enums import Domain
from unkindred.systems.rng import DeterministicRNG


class TestDeterministicRNG:

    def test_same_coordinates_same_value(self):
        a, b = DeterministicRNG(42), DeterministicRNG(42)
        assert a.next_float(Domain.MAP_GEN, 3, 1) == b.next_float(Domain.MAP_GEN, 3, 1)

    def test_domains_are_separated(self):
        rng = DeterministicRNG(42)
        values = {rng.next_float(d, 0, 0) for d in Domain}
        assert len(values) == len(Domain)

    def test_seed_changes_values(self):
        assert DeterministicRNG(1).next_float(Domain.SPAWN, 0, 0) != DeterministicRNG(2).next_float(Domain.SPAWN, 0, 0)

    def test_float_range(self):
        rng = DeterministicRNG(7)
        for counter in range(500):
            assert 0.0 <= rng.next_float(Domain.AI_DECISION, 1, counter) < 1.0

    def test_int_range_is_inclusive(self):
        rng = DeterministicRNG(7)
        seen = {rng.next_int(Domain.SPAWN, 0, c, 0, 3) for c in range(500)}
        assert seen == {0, 1, 2, 3}

    def test_empty_int_range_rejected(self):
        with pytest.raises(ValueError):
            DeterministicRNG(7).next_int(Domain.SPAWN, 0, 0, 5, 4)

    def test_bool_extremes(self):
        rng = DeterministicRNG(7)
        assert not any(rng.next_bool(Domain.SPAWN, 0, c, 0.0) for c in range(50))
        assert all(rng.next_bool(Domain.SPAWN, 0, c, 1.0) for c in range(50))

    def test_large_counters_pack(self):
        rng = DeterministicRNG(7)
        assert 0.0 <= rng.next_float(Domain.AI_DECISION, 2, 10**12) < 1.0


class TestRngStream:

    def test_stream_walks_consecutive_counters(self):
        rng = DeterministicRNG(11)
        stream = rng.stream(Domain.MAP_GEN, 4)
        drawn = [stream.next_int(0, 100) for _ in range(3)]
        assert drawn == [rng.next_int(Domain.MAP_GEN, 4, c, 0, 100) for c in range(3)]
        assert stream.counter == 3

    def test_stream_start_offset(self):
        rng = DeterministicRNG(11)
        stream = rng.stream(Domain.SPAWN, 0, start=5)
        assert stream.next_bool(0.5) == rng.next_bool(Domain.SPAWN, 0, 5, 0.5)

"""Domain-separated deterministic RNG using xxhash.

Every draw is addressed by ``(seed, domain, key, counter)``: dungeon
generation keys its draws by room attempt, spawning by room number, and
wandering by entity index with the turn folded into the counter. Adding a
draw to one system therefore never shifts the values another system sees.
"""

from __future__ import annotations

import struct

import xxhash

from unkindred.core.enums import Domain


# Seeds are packed as signed 64-bit integers
SEED_MIN = -(1 << 63)
SEED_MAX = (1 << 63) - 1


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of its coordinates, so a fixed seed replays
    bit-for-bit regardless of call order.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, counter: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, counter)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, counter: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, counter) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, counter: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        f = self.next_float(domain, key, counter)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, key: int, counter: int, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, counter) < probability

    def stream(self, domain: Domain, key: int, start: int = 0) -> RngStream:
        """A cursor over consecutive counters of one ``(domain, key)``."""
        return RngStream(self, domain, key, start)


class RngStream:
    """Sequential draws for one ``(domain, key)``; each draw uses the next counter."""

    __slots__ = ("_rng", "_domain", "_key", "counter")

    def __init__(self, rng: DeterministicRNG, domain: Domain, key: int, start: int = 0) -> None:
        self._rng = rng
        self._domain = domain
        self._key = key
        self.counter = start

    def _advance(self) -> int:
        counter = self.counter
        self.counter += 1
        return counter

    def next_int(self, low: int, high: int) -> int:
        return self._rng.next_int(self._domain, self._key, self._advance(), low, high)

    def next_bool(self, probability: float = 0.5) -> bool:
        return self._rng.next_bool(self._domain, self._key, self._advance(), probability)

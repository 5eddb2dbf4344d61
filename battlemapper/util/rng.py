"""Deterministic random streams derived from a master seed.

Each generation run builds an RNGProvider from its master seed and draws
from one named domain stream. Streams are derived with crc32 so that the
same seed gives the same layout in every interpreter session, and drawing
from one domain never shifts another.

Usage:
    rng = RNGProvider(master_seed=12345).get("map.battlemap")
    offset = rng.randrange(0, 10)
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from battlemapper.types import RandomSeed

# Anything the generators draw from. Tests pass a bare Random.
RNG: TypeAlias = Random


def coin_flip(rng: RNG) -> bool:
    """Return a uniformly random boolean drawn from a single random bit."""
    return bool(rng.getrandbits(1))


class RNGProvider:
    """Hands out one Random per domain, seeded from the master seed.

    Without a master seed every domain draws from system entropy.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> Random:
        """Get the stream for a hierarchical domain name like "map.battlemap"."""
        if domain not in self._streams:
            self._streams[domain] = self._derive(domain)
        return self._streams[domain]

    def _derive(self, domain: str) -> Random:
        if self._master_seed is None:
            return Random()
        # hash() is salted per process; crc32 is stable across sessions
        return Random(zlib.crc32(f"{self._master_seed}:{domain}".encode()))

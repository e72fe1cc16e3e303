"""
Seeded pseudorandom sources for blob content.

Manifests are only comparable across implementations that share a
generator, so each source is a fixed algorithm selected by name.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import ClassVar

from ..core.exceptions import InvalidArgumentError
from ..core.models.config import MAX_SEED

MASK32 = 0xFFFFFFFF
_MODULUS = 2147483647  # 2**31 - 1
_MULTIPLIER = 16807
_DEGREE = 31
_SEPARATION = 3
_STATE_WORDS = 34
_DISCARD = 310


class RandomSource(ABC):
    """A reproducible stream of integers and bytes."""

    name: ClassVar[str]

    @abstractmethod
    def next_below(self, bound: int) -> int:
        """Draw an integer in [0, bound)."""

    def randbytes(self, n: int) -> bytes:
        """Draw n bytes, each in [0, 255]."""
        return bytes(self.next_below(256) for _ in range(n))


class GlibcRandom(RandomSource):
    """
    The TYPE_3 additive feedback generator behind glibc srand()/rand().

    Seeding fills 31 words with a Park-Miller sequence, copies the first
    three, then discards 310 outputs. Each step is
    r[i] = r[i-31] + r[i-3] (mod 2**32) and rand() returns r[i] >> 1.
    Draws use rand() % bound, so the same seed reproduces C fixtures
    byte for byte. Seeds are limited to 0..2**31-1: glibc keeps larger
    seeds in an int32 and its signed recurrence diverges from this one.
    """

    name = "glibc"

    def __init__(self, seed: int) -> None:
        if not 0 <= seed <= MAX_SEED:
            raise InvalidArgumentError(
                f"Seed must be between 0 and {MAX_SEED}", argument="seed", value=str(seed)
            )
        if seed == 0:
            seed = 1

        ring = [seed]
        for i in range(1, _DEGREE):
            ring.append((_MULTIPLIER * ring[i - 1]) % _MODULUS)
        for i in range(_DEGREE, _STATE_WORDS):
            ring.append(ring[i - _DEGREE])

        # ring[i % 34] holds r[i] for the 34 most recent i
        self._ring = ring
        self._pos = _STATE_WORDS
        for _ in range(_DISCARD):
            self._step()

    def _step(self) -> int:
        ring = self._ring
        i = self._pos
        value = (ring[(i - _DEGREE) % _STATE_WORDS] + ring[(i - _SEPARATION) % _STATE_WORDS]) & MASK32
        ring[i % _STATE_WORDS] = value
        self._pos = i + 1
        return value

    def rand(self) -> int:
        """Equivalent of one glibc rand() call, in [0, 2**31)."""
        return self._step() >> 1

    def next_below(self, bound: int) -> int:
        return self.rand() % bound

    def randbytes(self, n: int) -> bytes:
        out = bytearray(n)
        ring = self._ring
        i = self._pos
        for k in range(n):
            value = (ring[(i - _DEGREE) % _STATE_WORDS] + ring[(i - _SEPARATION) % _STATE_WORDS]) & MASK32
            ring[i % _STATE_WORDS] = value
            out[k] = (value >> 1) & 0xFF
            i += 1
        self._pos = i
        return bytes(out)


class PythonRandom(RandomSource):
    """Mersenne Twister via random.Random, for corpora not tied to glibc."""

    name = "python"

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    def next_below(self, bound: int) -> int:
        return self._rng.randrange(bound)

    def randbytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)


RANDOM_SOURCES: dict[str, type[RandomSource]] = {
    GlibcRandom.name: GlibcRandom,
    PythonRandom.name: PythonRandom,
}


def create_random_source(name: str, seed: int) -> RandomSource:
    """
    Create a seeded source by name.

    Raises:
        ValueError: If no source is registered under name
    """
    source_cls = RANDOM_SOURCES.get(name)
    if source_cls is None:
        raise ValueError(f"Unknown random source: {name}")
    return source_cls(seed)

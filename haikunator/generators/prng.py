#!/usr/bin/env python3
"""
Seeded Randomness
=================
Deterministic building blocks for reproducible name previews.

- ``fnv1a32``: FNV-1a string hash (32-bit)
- ``Mulberry32``: small seeded PRNG producing floats in [0, 1)
- ``rand_int``: bounded integer draw used for every index selection

All arithmetic is done modulo 2**32 so sequences match other
implementations of the same algorithms bit for bit.

Usage:
    stream = Mulberry32(fnv1a32("my-seed"))
    index = rand_int(stream, len(words))
"""

import math

MASK32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

MULBERRY_INCREMENT = 0x6D2B79F5
UINT32_RANGE = 4294967296  # 2**32


def fnv1a32(text: str) -> int:
    """
    Hash a string to an unsigned 32-bit integer (FNV-1a).

    The hash runs over UTF-16 code units, so characters outside the
    Basic Multilingual Plane contribute their surrogate pair.

    Args:
        text: Any string (the empty string is valid)

    Returns:
        Integer in [0, 2**32)
    """
    h = FNV_OFFSET_BASIS
    data = text.encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV_PRIME) & MASK32
    return h


class Mulberry32:
    """
    Mulberry32 pseudo-random number stream.

    Two streams built from the same seed yield identical sequences.
    Not suitable for secrets: the whole point is reproducibility.
    """

    __slots__ = ('_state',)

    def __init__(self, seed: int):
        self._state = int(seed) & MASK32

    @property
    def state(self) -> int:
        """Current internal 32-bit accumulator."""
        return self._state

    def next(self) -> float:
        """Advance the stream and return a float in [0.0, 1.0)."""
        self._state = (self._state + MULBERRY_INCREMENT) & MASK32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & MASK32)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / UINT32_RANGE

    # Aliases so a stream can be passed wherever a ``random()``-style
    # callable is expected.
    random = next

    def __call__(self) -> float:
        return self.next()

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.next()

    def __repr__(self) -> str:
        return f"Mulberry32(state=0x{self._state:08x})"


def rand_int(stream, n: int) -> int:
    """
    Draw an index in [0, n) from a stream.

    Args:
        stream: Object with a ``next()`` method returning floats in [0, 1)
        n: Exclusive upper bound

    Returns:
        floor(stream.next() * n), or 0 when n <= 0 (no draw is made)
    """
    if n <= 0:
        return 0
    return math.floor(stream.next() * n)


__all__ = [
    'fnv1a32',
    'Mulberry32',
    'rand_int',
    'MASK32',
    'FNV_OFFSET_BASIS',
    'FNV_PRIME',
]

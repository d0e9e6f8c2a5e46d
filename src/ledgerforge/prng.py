"""Seeded pseudo-random source: FNV-1a string hashing + 32-bit LCG.

Every random decision in profile building, generation and injection flows
through ``SeededRandom`` so identical seeds reproduce identical output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32
_MASK32 = 0xFFFFFFFF


def fnv1a(text: str) -> int:
    """32-bit FNV-1a over the UTF-8 bytes of ``text``."""
    h = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & _MASK32
    return h


def lcg_next(state: int) -> tuple[float, int]:
    """Advance the LCG once; return (value in [0, 1), new_state)."""
    new_state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
    return new_state / LCG_MODULUS, new_state


class SeededRandom:
    """Reproducible random stream seeded from an int or a string."""

    def __init__(self, seed: int | str) -> None:
        self.state = fnv1a(seed) if isinstance(seed, str) else int(seed) & _MASK32

    def next(self) -> float:
        value, self.state = lcg_next(self.state)
        return value

    def range(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi] inclusive."""
        return int(self.next() * (hi - lo + 1)) + lo

    def uniform(self, lo: float, hi: float) -> float:
        return self.next() * (hi - lo) + lo

    def pick(self, items: Sequence[T]) -> T:
        return items[int(self.next() * len(items))]

    def weighted_pick(self, items: Sequence[T], weights: Sequence[float]) -> T:
        if len(items) != len(weights) or not items:
            raise ValueError("items and weights must be non-empty and the same length")
        total = float(sum(weights))
        target = self.next() * total
        cumulative = 0.0
        for item, weight in zip(items, weights, strict=True):
            cumulative += weight
            if target < cumulative:
                return item
        return items[-1]

    def sample(self, items: Sequence[T], n: int) -> list[T]:
        """Fisher-Yates shuffle a copy, then take the first ``n`` (no replacement)."""
        pool = list(items)
        for i in range(len(pool) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            pool[i], pool[j] = pool[j], pool[i]
        return pool[: max(0, min(n, len(pool)))]

    def pick_distinct(self, items: Sequence[T], lo: int, hi: int) -> list[T]:
        """Draw a count in [lo, hi], then that many distinct items."""
        return self.sample(items, self.range(lo, hi))

"""Stateful seeded PRNG for content generation.

Unlike a per-call hash, generators need a stream: each draw advances a
single 32-bit state word, so the order of draws inside one generator is
part of its contract.  Independence between entities comes from giving
each entity its own instance seeded from stable identifiers
(see ``sub_seed`` / ``child`` and ``procgen.core.seeds``).

Algorithm: mulberry32.
"""

from __future__ import annotations

import re
from typing import MutableSequence, Sequence, TypeVar

from procgen.core.errors import (
    EmptyCollectionError,
    InvalidDiceNotationError,
    SampleSizeError,
    WeightMismatchError,
)
from procgen.core.seeds import MAX_SEED, combine_seeds, hash_string, normalize_seed

T = TypeVar("T")

_DICE_PATTERN = re.compile(r"^(\d+)d(\d+)([+-]\d+)?$")
_TWO_POW_32 = float(1 << 32)


def _imul(a: int, b: int) -> int:
    return (a * b) & MAX_SEED


class SeededRandom:
    """Deterministic pseudo-random generator over one uint32 state word."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = normalize_seed(seed)

    # -- state --

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = normalize_seed(value)

    def clone(self) -> SeededRandom:
        """Independent copy that will produce the exact same future sequence."""
        return SeededRandom(self._state)

    def __repr__(self) -> str:
        return f"SeededRandom(state=0x{self._state:08x})"

    # -- core draws --

    def next_uint32(self) -> int:
        self._state = (self._state + 0x6D2B79F5) & MAX_SEED
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MAX_SEED
        return (t ^ (t >> 14)) & MAX_SEED

    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self.next_uint32() / _TWO_POW_32

    def int(self, low: int, high: int) -> int:
        """Return an integer in [low, high] inclusive. Always one draw."""
        if low > high:
            raise ValueError(f"int(): low {low} is greater than high {high}")
        return low + int(self.random() * (high - low + 1))

    def float(self, low: float, high: float) -> float:
        """Return a float in [low, high]. Always one draw."""
        if low > high:
            raise ValueError(f"float(): low {low} is greater than high {high}")
        return low + self.random() * (high - low)

    def bool(self, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.random() < probability

    # -- collections --

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise EmptyCollectionError("Cannot pick from an empty collection")
        return items[self.int(0, len(items) - 1)]

    def pick_n(self, items: Sequence[T], n: int) -> list[T]:
        """Return *n* distinct elements (by position) in draw order."""
        if n < 0 or n > len(items):
            raise SampleSizeError(f"Cannot pick {n} unique items from {len(items)}")
        pool = list(items)
        for i in range(n):
            j = self.int(i, len(pool) - 1)
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:n]

    def weighted_pick(self, items: Sequence[T], weights: Sequence[float]) -> T:
        if len(items) != len(weights):
            raise WeightMismatchError("Items and weights must have the same length")
        if not items:
            raise EmptyCollectionError("Cannot pick from an empty collection")
        total = sum(weights)
        if total <= 0:
            raise WeightMismatchError("Weights must sum to a positive value")

        roll = self.random() * total
        for item, weight in zip(items, weights):
            roll -= weight
            if roll < 0:
                return item
        # float residue: fall back to the last positively weighted entry
        for item, weight in zip(reversed(items), reversed(weights)):
            if weight > 0:
                return item
        return items[-1]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates in place; returns the same container."""
        for i in range(len(items) - 1, 0, -1):
            j = self.int(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    # -- derivation --

    def sub_seed(self, identifier: str) -> int:
        """Seed derived from the current state and *identifier*. Does not advance state."""
        return combine_seeds(self._state, hash_string(identifier))

    def child(self, identifier: str) -> SeededRandom:
        return SeededRandom(self.sub_seed(identifier))

    # -- helpers --

    def roll(self, notation: str) -> int:
        """Roll dice written as ``NdM``, ``NdM+K`` or ``NdM-K``."""
        match = _DICE_PATTERN.match(notation.strip().lower())
        if match is None:
            raise InvalidDiceNotationError(f"Invalid dice notation: {notation!r}")
        count, sides = int(match.group(1)), int(match.group(2))
        if count < 1 or sides < 1:
            raise InvalidDiceNotationError(f"Invalid dice notation: {notation!r}")
        modifier = int(match.group(3)) if match.group(3) else 0
        return sum(self.int(1, sides) for _ in range(count)) + modifier

    def uuid(self) -> str:
        """Deterministic RFC-4122-shaped version 4 identifier."""
        words = [self.next_uint32() for _ in range(4)]
        words[1] = (words[1] & 0xFFFF0FFF) | 0x00004000
        words[2] = (words[2] & 0x3FFFFFFF) | 0x80000000
        h = "".join(f"{w:08x}" for w in words)
        return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"

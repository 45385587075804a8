"""Seed utilities: string hashing and order-sensitive seed combination.

Every sub-seed in the system is derived from stable identifiers through
these two functions, never from a call counter, so content for one entity
does not depend on which other entities were generated first.
"""

from __future__ import annotations

import struct

import xxhash

MAX_SEED = 0xFFFFFFFF


def normalize_seed(seed: int) -> int:
    """Fold any Python int (negative included) into unsigned 32-bit range."""
    return int(seed) & MAX_SEED


def hash_string(value: str) -> int:
    """Deterministic unsigned 32-bit hash of *value*. The empty string hashes to 0.

    Lone surrogates (ids decoded with ``surrogateescape``, say) are hashed
    as their raw code units rather than rejected.
    """
    if not value:
        return 0
    return xxhash.xxh32_intdigest(value.encode("utf-8", "surrogatepass"))


def combine_seeds(*seeds: int) -> int:
    """Mix two or more seeds into one. Argument order is significant."""
    if len(seeds) < 2:
        raise ValueError("combine_seeds() needs at least two seeds")
    payload = struct.pack(f"<{len(seeds)}I", *(normalize_seed(s) for s in seeds))
    return xxhash.xxh32_intdigest(payload)

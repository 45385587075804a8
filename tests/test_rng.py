"""Tests for SeededRandom: determinism, ranges, collections, derivation and dice."""

import re

import pytest

from procgen.core.errors import (
    EmptyCollectionError,
    InvalidDiceNotationError,
    SampleSizeError,
    WeightMismatchError,
)
from procgen.core.seeds import MAX_SEED
from procgen.systems.rng import SeededRandom


def _draws(rng: SeededRandom, n: int = 20) -> list[int]:
    return [rng.next_uint32() for _ in range(n)]


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------

class TestDeterminism:
    def test_same_seed_same_sequence(self):
        assert _draws(SeededRandom(12345)) == _draws(SeededRandom(12345))

    def test_different_seeds_differ(self):
        assert _draws(SeededRandom(1)) != _draws(SeededRandom(2))

    def test_negative_seed_folds_into_unsigned_range(self):
        rng = SeededRandom(-1)
        assert rng.state == MAX_SEED
        assert _draws(SeededRandom(-1)) == _draws(SeededRandom(MAX_SEED))

    def test_clone_reproduces_future(self):
        rng = SeededRandom(99)
        _draws(rng, 5)
        copy = rng.clone()
        assert _draws(rng) == _draws(copy)

    def test_state_roundtrip(self):
        rng = SeededRandom(7)
        _draws(rng, 3)
        saved = rng.state
        expected = _draws(rng, 10)
        rng.state = saved
        assert _draws(rng, 10) == expected


# ---------------------------------------------------------------------------
# Scalar draws
# ---------------------------------------------------------------------------

class TestScalarDraws:
    def test_random_in_unit_interval(self):
        rng = SeededRandom(3)
        for _ in range(1000):
            value = rng.random()
            assert 0.0 <= value < 1.0

    def test_int_inclusive_bounds(self):
        rng = SeededRandom(4)
        seen = {rng.int(1, 6) for _ in range(600)}
        assert seen == {1, 2, 3, 4, 5, 6}

    def test_int_single_value(self):
        assert SeededRandom(5).int(9, 9) == 9

    def test_int_reversed_bounds_raise(self):
        with pytest.raises(ValueError):
            SeededRandom(5).int(10, 1)

    def test_float_range(self):
        rng = SeededRandom(6)
        for _ in range(500):
            assert -2.0 <= rng.float(-2.0, 3.0) <= 3.0

    def test_each_scalar_draw_consumes_one_step(self):
        a, b = SeededRandom(11), SeededRandom(11)
        a.int(0, 100)
        a.float(0, 1)
        a.bool()
        _draws(b, 3)
        assert a.state == b.state

    def test_bool_extremes(self):
        rng = SeededRandom(8)
        assert not any(rng.bool(0.0) for _ in range(100))
        assert all(rng.bool(1.0) for _ in range(100))


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

class TestCollections:
    def test_pick_empty_raises(self):
        with pytest.raises(EmptyCollectionError):
            SeededRandom(1).pick([])

    def test_pick_returns_member(self):
        items = ["a", "b", "c"]
        rng = SeededRandom(1)
        for _ in range(50):
            assert rng.pick(items) in items

    def test_pick_n_distinct(self):
        rng = SeededRandom(2)
        picked = rng.pick_n(list(range(10)), 10)
        assert sorted(picked) == list(range(10))

    def test_pick_n_too_many_raises(self):
        with pytest.raises(SampleSizeError):
            SeededRandom(2).pick_n([1, 2, 3], 4)

    def test_pick_n_leaves_input_untouched(self):
        items = [1, 2, 3, 4, 5]
        SeededRandom(2).pick_n(items, 3)
        assert items == [1, 2, 3, 4, 5]

    def test_weighted_pick_mismatch_raises(self):
        with pytest.raises(WeightMismatchError):
            SeededRandom(1).weighted_pick(["a", "b"], [1.0])

    def test_weighted_pick_zero_total_raises(self):
        with pytest.raises(WeightMismatchError):
            SeededRandom(1).weighted_pick(["a", "b"], [0.0, 0.0])

    def test_weighted_pick_never_returns_zero_weight(self):
        rng = SeededRandom(13)
        for _ in range(300):
            assert rng.weighted_pick(["never", "always"], [0.0, 1.0]) == "always"

    def test_weighted_pick_follows_weights(self):
        rng = SeededRandom(21)
        hits = sum(rng.weighted_pick(["rare", "common"], [1, 9]) == "common" for _ in range(2000))
        assert 1600 < hits < 1950

    def test_shuffle_is_permutation_in_place(self):
        items = list(range(20))
        result = SeededRandom(5).shuffle(items)
        assert result is items
        assert sorted(items) == list(range(20))


# ---------------------------------------------------------------------------
# Derivation and helpers
# ---------------------------------------------------------------------------

class TestDerivation:
    def test_sub_seed_does_not_advance(self):
        rng = SeededRandom(77)
        before = rng.state
        rng.sub_seed("npc_1")
        assert rng.state == before

    def test_sub_seed_depends_on_identifier(self):
        rng = SeededRandom(77)
        assert rng.sub_seed("a") != rng.sub_seed("b")
        assert rng.sub_seed("a") == rng.sub_seed("a")

    def test_child_streams_are_reproducible(self):
        assert _draws(SeededRandom(5).child("x")) == _draws(SeededRandom(5).child("x"))


class TestDice:
    def test_roll_range(self):
        rng = SeededRandom(1)
        for _ in range(200):
            assert 3 <= rng.roll("3d6") <= 18

    def test_roll_modifier(self):
        rng = SeededRandom(1)
        for _ in range(100):
            assert 3 <= rng.roll("1d4+2") <= 6
            assert -1 <= rng.roll(" 1D4-2 ") <= 2

    @pytest.mark.parametrize("notation", ["d6", "2x6", "0d6", "1d0", "abc", "1d6+"])
    def test_malformed_notation_raises(self, notation):
        with pytest.raises(InvalidDiceNotationError):
            SeededRandom(1).roll(notation)


class TestUuid:
    def test_uuid_shape(self):
        value = SeededRandom(42).uuid()
        assert re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", value)

    def test_uuid_deterministic(self):
        assert SeededRandom(42).uuid() == SeededRandom(42).uuid()

"""Tests for seed utilities and ``{{token}}`` substitution."""

import pytest

from procgen.core.errors import TemplateSubstitutionError
from procgen.core.seeds import MAX_SEED, combine_seeds, hash_string
from procgen.core.text import extract_template_variables, substitute_template


class TestHashString:
    def test_empty_string_is_zero(self):
        assert hash_string("") == 0

    def test_stable(self):
        assert hash_string("Dustwater") == hash_string("Dustwater")

    def test_distinguishes_inputs(self):
        assert hash_string("loc_1") != hash_string("loc_2")

    def test_unsigned_32_bit(self):
        for text in ("a", "frontier", "ünïcode", "x" * 500):
            assert 0 <= hash_string(text) <= MAX_SEED

    def test_lone_surrogate_hashes(self):
        assert 0 <= hash_string("\ud800") <= MAX_SEED
        assert hash_string("loc_\ud800") == hash_string("loc_\ud800")
        assert hash_string("\ud800") != hash_string("\ud801")


class TestCombineSeeds:
    def test_order_sensitive(self):
        assert combine_seeds(1, 2) != combine_seeds(2, 1)

    def test_pure(self):
        assert combine_seeds(42, hash_string("town")) == combine_seeds(42, hash_string("town"))

    def test_accepts_many_and_negative(self):
        value = combine_seeds(-5, 7, 1 << 40)
        assert 0 <= value <= MAX_SEED

    def test_needs_two_seeds(self):
        with pytest.raises(ValueError):
            combine_seeds(1)


class TestSubstitution:
    def test_replaces_every_token(self):
        text = substitute_template("{{a}} and {{b}}, {{a}} again", {"a": "X", "b": 3})
        assert text == "X and 3, X again"

    def test_missing_variable_raises(self):
        with pytest.raises(TemplateSubstitutionError) as info:
            substitute_template("Hello {{name}} of {{town}}", {"name": "Ann"})
        assert "town" in str(info.value)

    def test_residual_delimiter_raises(self):
        with pytest.raises(TemplateSubstitutionError):
            substitute_template("{{a}}", {"a": "{{b"})

    def test_single_pass(self):
        # values are not themselves expanded
        with pytest.raises(TemplateSubstitutionError):
            substitute_template("{{a}}", {"a": "{{b}}", "b": "nope"})

    def test_extract_ordered_unique(self):
        assert extract_template_variables("{{b}} {{a}} {{b}} {{c}}") == ["b", "a", "c"]

"""Tests for NameGenerator: personal names, unique search, place names."""

import re

import pytest

from procgen.config import GenerationConfig
from procgen.core.enums import Gender
from procgen.core.errors import UnknownTemplateError
from procgen.core.registry import TemplateRegistry
from procgen.core.templates import NameOriginWeight
from procgen.data import build_default_registry
from procgen.generators.names import BRAND_LETTERS, NameGenerator
from procgen.systems.rng import SeededRandom

REGISTRY = build_default_registry()


def _tiny_registry() -> TemplateRegistry:
    registry = TemplateRegistry()
    registry.init_name_pools([
        {"origin": "tiny", "male_first": ["Abe"], "female_first": ["Ada"], "surnames": ["Stone"],
         "gender_weights": [1.0, 0.0, 0.0]},
    ])
    return registry


# ---------------------------------------------------------------------------
# Personal names
# ---------------------------------------------------------------------------

class TestPersonalNames:
    def test_deterministic(self):
        gen = NameGenerator(REGISTRY)
        a = [gen.generate(SeededRandom(s), "frontier_anglo").full_name for s in range(20)]
        b = [gen.generate(SeededRandom(s), "frontier_anglo").full_name for s in range(20)]
        assert a == b

    def test_name_parts_come_from_pool(self):
        gen = NameGenerator(REGISTRY)
        pool = REGISTRY.name_pool("frontier_hispanic")
        for seed in range(30):
            name = gen.generate(SeededRandom(seed), "frontier_hispanic", gender=Gender.FEMALE)
            assert name.gender is Gender.FEMALE
            assert name.first_name in pool.female_first
            assert name.last_name in pool.surnames
            assert "{{" not in name.full_name

    def test_nickname_and_title(self):
        gen = NameGenerator(REGISTRY)
        name = gen.generate(SeededRandom(3), "outlaw", include_nickname=True, include_title=True)
        assert name.nickname is not None
        assert name.title is not None
        assert f'"{name.nickname}"' in name.full_name
        assert name.full_name.startswith(name.title)

    def test_unknown_origin_raises(self):
        with pytest.raises(UnknownTemplateError):
            NameGenerator(REGISTRY).generate(SeededRandom(1), "atlantean")

    def test_weighted_origin(self):
        gen = NameGenerator(REGISTRY)
        origins = (NameOriginWeight(origin="frontier_chinese", weight=1.0),
                   NameOriginWeight(origin="frontier_native", weight=0.0))
        for seed in range(20):
            assert gen.generate_weighted(SeededRandom(seed), origins).origin == "frontier_chinese"

    def test_helpers(self):
        gen = NameGenerator(REGISTRY)
        alias = gen.generate_outlaw_alias(SeededRandom(5))
        assert '"' in alias
        designation = gen.generate_automaton_designation(SeededRandom(5))
        assert designation.split()[0] in REGISTRY.name_pool("mechanical").neutral_first

    def test_batch(self):
        names = NameGenerator(REGISTRY).generate_batch(SeededRandom(1), "frontier_european", 12)
        assert len(names) == 12


# ---------------------------------------------------------------------------
# Unique names
# ---------------------------------------------------------------------------

class TestUniqueNames:
    def test_avoids_existing_case_insensitive(self):
        gen = NameGenerator(REGISTRY)
        taken = set()
        rng = SeededRandom(10)
        for _ in range(30):
            name = gen.generate_unique(rng, "frontier_anglo", taken)
            assert name is not None
            assert name.full_name.lower() not in taken
            taken.add(name.full_name.lower())

    def test_exhausted_search_returns_none(self):
        gen = NameGenerator(_tiny_registry())
        assert gen.generate_unique(SeededRandom(1), "tiny", {"ABE STONE"}) is None

    def test_attempt_limit_defaults_to_config(self):
        assert NameGenerator(REGISTRY).max_unique_attempts == 20
        config = GenerationConfig(unique_name_max_attempts=3)
        assert NameGenerator(REGISTRY, config).max_unique_attempts == 3

    def test_exhaustion_consumes_every_attempt(self):
        gen = NameGenerator(_tiny_registry())
        rng = SeededRandom(1)
        gen.generate_unique(rng, "tiny", {"abe stone"}, max_attempts=4)
        reference = SeededRandom(1)
        for _ in range(4):
            gen.generate(reference, "tiny")
        assert rng.state == reference.state


# ---------------------------------------------------------------------------
# Place names
# ---------------------------------------------------------------------------

class TestPlaceNames:
    @pytest.mark.parametrize("pool_type", [
        "town_names", "ranch_names", "mine_names", "landmark_names", "outpost_names", "station_names",
    ])
    def test_no_residual_tokens(self, pool_type):
        gen = NameGenerator(REGISTRY)
        rng = SeededRandom(2024)
        for _ in range(100):
            name = gen.generate_place_name(rng, pool_type)
            assert name
            assert "{{" not in name and "}}" not in name

    def test_brand_letters(self):
        gen = NameGenerator(REGISTRY)
        rng = SeededRandom(7)
        brands = [n for n in (gen.generate_place_name(rng, "ranch_names") for _ in range(300))
                  if re.match(r"^[A-Z]-[A-Z] ", n)]
        assert brands
        for brand in brands:
            assert brand[0] in BRAND_LETTERS and brand[2] in BRAND_LETTERS

    def test_unknown_pool_raises(self):
        with pytest.raises(UnknownTemplateError):
            NameGenerator(REGISTRY).generate_place_name(SeededRandom(1), "moon_bases")

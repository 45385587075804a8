"""Tests for EncounterGenerator: stat scaling, filters, trigger chance."""

import pytest

from procgen.config import GenerationConfig
from procgen.core.context import GenerationContext
from procgen.core.registry import TemplateRegistry
from procgen.core.templates import EnemyStats, EnemyTemplate, LevelScaling
from procgen.data import build_default_registry
from procgen.data.encounters import ENEMY_TEMPLATES
from procgen.generators.encounters import EncounterGenerator, scale_enemy_stats
from procgen.systems.rng import SeededRandom

REGISTRY = build_default_registry()


def _make_context(**overrides) -> GenerationContext:
    defaults = dict(world_seed=42, player_level=3, location_name="Dry Gulch")
    defaults.update(overrides)
    return GenerationContext(**defaults)


# ---------------------------------------------------------------------------
# Stat scaling
# ---------------------------------------------------------------------------

class TestScaleEnemyStats:
    def test_level_one_is_base(self):
        template = REGISTRY.enemy_template("bandit_thug")
        assert scale_enemy_stats(template, 1) == template.base_stats

    def test_multiplicative_and_additive(self):
        stats = scale_enemy_stats(REGISTRY.enemy_template("bandit_thug"), 3)
        assert stats.health == 33      # 25 * 1.15^2 = 33.06
        assert stats.damage == 7       # 6 * 1.10^2 = 7.26
        assert stats.armor == 1
        assert stats.accuracy == 64
        assert stats.evasion == 7

    def test_accuracy_capped(self):
        template = EnemyTemplate(
            id="marksman", name="Marksman",
            base_stats=EnemyStats(health=10, damage=5, armor=0, accuracy=99, evasion=99),
            scaling=LevelScaling(accuracy_per_level=5.0, evasion_per_level=5.0),
        )
        stats = scale_enemy_stats(template, 4)
        assert stats.accuracy == 100
        assert stats.evasion == 100

    @pytest.mark.parametrize("template", ENEMY_TEMPLATES, ids=lambda t: t.id)
    def test_stats_never_shrink_with_level(self, template):
        previous = scale_enemy_stats(template, 1)
        for level in range(2, 16):
            stats = scale_enemy_stats(template, level)
            assert stats.health >= previous.health
            assert stats.damage >= previous.damage
            assert stats.armor >= previous.armor
            assert stats.accuracy >= previous.accuracy
            previous = stats


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

class TestGenerate:
    def test_enemy_health_never_drops_as_player_levels(self):
        gen = EncounterGenerator(REGISTRY)
        for template in REGISTRY.encounter_templates():
            previous = None
            for level in range(1, 11):
                encounter = gen.generate(SeededRandom(17), template, _make_context(player_level=level))
                health = [e.max_health for e in encounter.enemies]
                if previous is not None:
                    assert len(health) == len(previous)
                    assert all(h >= p for h, p in zip(health, previous)), (template.id, level)
                previous = health

    def test_deterministic(self):
        gen = EncounterGenerator(REGISTRY)
        a = gen.generate(SeededRandom(6), "bandit_ambush", _make_context())
        b = gen.generate(SeededRandom(6), "bandit_ambush", _make_context())
        assert a.to_dict() == b.to_dict()

    def test_every_template_fills_description(self):
        gen = EncounterGenerator(REGISTRY)
        for template in REGISTRY.encounter_templates():
            encounter = gen.generate(SeededRandom(31), template, _make_context())
            assert "{{" not in encounter.description
            assert encounter.id == f"enc_{encounter.seed:x}"

    def test_enemy_counts_and_difficulty(self):
        gen = EncounterGenerator(REGISTRY)
        for seed in range(20):
            encounter = gen.generate(SeededRandom(seed), "gang_raid", _make_context())
            assert 5 <= len(encounter.enemies) <= 8
            assert 0 <= encounter.difficulty <= 10
            for enemy in encounter.enemies:
                assert enemy.health == enemy.max_health >= 1
                assert enemy.accuracy <= 100

    def test_enemy_level_clamped_to_template(self):
        gen = EncounterGenerator(REGISTRY)
        encounter = gen.generate(SeededRandom(2), "rogue_machine", _make_context(player_level=1))
        automatons = [e for e in encounter.enemies if e.enemy_type == "rogue_automaton"]
        assert automatons
        assert all(e.level == 3 for e in automatons)

    def test_unregistered_enemy_uses_default(self):
        gen = EncounterGenerator(REGISTRY)
        drones = []
        for seed in range(30):
            encounter = gen.generate(SeededRandom(seed), "rogue_machine", _make_context())
            drones += [e for e in encounter.enemies if e.enemy_type == "scrap_drone"]
        assert drones
        assert {e.template_id for e in drones} == {"default"}
        assert {e.loot_table_id for e in drones} == {"generic_loot"}


class TestFilters:
    def test_time_of_day(self):
        ids = {t.id for t in EncounterGenerator(REGISTRY).for_time_of_day("night")}
        assert "wolf_pack" in ids
        assert "bandit_ambush" not in ids

    def test_difficulty_overlap(self):
        ids = {t.id for t in EncounterGenerator(REGISTRY).for_difficulty(6, 10)}
        assert "gang_raid" in ids
        assert "lone_bandit" not in ids

    def test_random_respects_filters(self):
        gen = EncounterGenerator(REGISTRY)
        for seed in range(15):
            encounter = gen.generate_random(
                SeededRandom(seed), _make_context(), biome="desert", time_of_day="night",
            )
            assert encounter is not None
            template = REGISTRY.encounter_template(encounter.template_id)
            assert not template.valid_biomes or "desert" in template.valid_biomes
            assert not template.valid_time_of_day or "night" in template.valid_time_of_day

    def test_random_none_when_filtered_out(self):
        registry = TemplateRegistry()
        registry.init_encounter_templates([
            {"id": "swamp_thing", "name": "Swamp Thing", "description_template": "It rises.",
             "enemies": [{"enemy_id_or_tag": "bog_beast"}], "valid_biomes": ["swamp"]},
        ])
        rng = SeededRandom(1)
        assert EncounterGenerator(registry).generate_random(rng, _make_context(), biome="desert") is None
        assert rng.state == SeededRandom(1).state


# ---------------------------------------------------------------------------
# Trigger chance
# ---------------------------------------------------------------------------

class TestEncounterChance:
    def test_daytime_base(self):
        assert EncounterGenerator(REGISTRY).encounter_chance(_make_context(game_hour=12)) == pytest.approx(0.15)

    def test_night_multiplier(self):
        gen = EncounterGenerator(REGISTRY)
        assert gen.encounter_chance(_make_context(game_hour=22)) == pytest.approx(0.225)
        assert gen.encounter_chance(_make_context(game_hour=3)) == pytest.approx(0.225)

    def test_events(self):
        gen = EncounterGenerator(REGISTRY)
        assert gen.encounter_chance(_make_context(active_events=("gang_war",))) == pytest.approx(0.3)
        assert gen.encounter_chance(_make_context(active_events=("law_crackdown",))) == pytest.approx(0.075)

    def test_tension_above_half(self):
        gen = EncounterGenerator(REGISTRY)
        assert gen.encounter_chance(_make_context(faction_tensions={"a": 0.9})) == pytest.approx(0.15 * 1.4)
        assert gen.encounter_chance(_make_context(faction_tensions={"a": 0.4})) == pytest.approx(0.15)

    def test_capped(self):
        context = _make_context(
            game_hour=23, active_events=("gang_war",), faction_tensions={"a": 1.0, "b": 1.0},
        )
        assert EncounterGenerator(REGISTRY).encounter_chance(context) == pytest.approx(0.8)

    def test_config_overrides(self):
        config = GenerationConfig(encounter_base_chance=0.5, max_encounter_chance=0.6)
        gen = EncounterGenerator(REGISTRY, config)
        assert gen.encounter_chance(_make_context()) == pytest.approx(0.5)
        assert gen.encounter_chance(_make_context(game_hour=1)) == pytest.approx(0.6)

    def test_should_trigger_bounds(self):
        gen = EncounterGenerator(REGISTRY)
        assert gen.should_trigger(SeededRandom(1), _make_context(), base_chance=0.0) is False

"""Tests for NPCGenerator: single NPCs, location batches, building staffing."""

import re

import pytest

from procgen.core.context import GenerationContext
from procgen.core.errors import UnknownTemplateError
from procgen.core.registry import TemplateRegistry
from procgen.core.templates import PERSONALITY_TRAITS
from procgen.data import build_default_registry
from procgen.data.names import NAME_POOLS, PLACE_NAME_POOLS
from procgen.generators.npcs import NPCGenerator, NPCSlot
from procgen.systems.rng import SeededRandom

REGISTRY = build_default_registry()


def _make_context(**overrides) -> GenerationContext:
    defaults = dict(world_seed=42, location_id="loc_test", location_name="Dry Gulch", region_name="Red Mesa")
    defaults.update(overrides)
    return GenerationContext(**defaults)


# ---------------------------------------------------------------------------
# Single NPC
# ---------------------------------------------------------------------------

class TestGenerate:
    def test_deterministic(self):
        gen = NPCGenerator(REGISTRY)
        a = gen.generate(SeededRandom(77), "sheriff", _make_context())
        b = gen.generate(SeededRandom(77), "sheriff", _make_context())
        assert a.to_dict() == b.to_dict()

    def test_parent_rng_advances_one_draw(self):
        gen = NPCGenerator(REGISTRY)
        rng = SeededRandom(5)
        gen.generate(rng, "gunsmith", _make_context())
        reference = SeededRandom(5)
        reference.next_uint32()
        assert rng.state == reference.state

    def test_id_and_fields(self):
        npc = NPCGenerator(REGISTRY).generate(SeededRandom(9), "sheriff", _make_context())
        assert re.fullmatch(r"npc_sheriff_[0-9a-f]+", npc.id)
        assert npc.id == f"npc_sheriff_{npc.seed:x}"
        assert npc.role == "sheriff"
        assert npc.faction == "law_enforcement"
        assert npc.location_id == "loc_test"
        assert npc.dialogue_tree_ids == ["sheriff_dialogue"]
        assert "{{" not in npc.backstory and "{{" not in npc.description

    def test_personality_within_template_ranges(self):
        gen = NPCGenerator(REGISTRY)
        template = REGISTRY.npc_template("sheriff")
        for seed in range(25):
            npc = gen.generate(SeededRandom(seed), template, _make_context())
            for trait in PERSONALITY_TRAITS:
                low, high = sorted(getattr(template.personality, trait))
                assert low <= getattr(npc.personality, trait) <= high

    def test_unknown_template_raises(self):
        with pytest.raises(UnknownTemplateError):
            NPCGenerator(REGISTRY).generate(SeededRandom(1), "astronaut", _make_context())

    def test_unknown_role_raises(self):
        with pytest.raises(UnknownTemplateError):
            NPCGenerator(REGISTRY).generate_for_role(SeededRandom(1), "astronaut", _make_context())

    def test_used_names_updated(self):
        used: set[str] = set()
        npc = NPCGenerator(REGISTRY).generate(SeededRandom(3), "deputy", _make_context(), used_names=used)
        assert used == {npc.name.lower()}


# ---------------------------------------------------------------------------
# Batches
# ---------------------------------------------------------------------------

class TestLocationBatch:
    def test_counts_and_unique_names(self):
        gen = NPCGenerator(REGISTRY)
        npcs = gen.generate_for_location(SeededRandom(11), "frontier_town", _make_context(), 8, 3)
        assert len(npcs) == 11
        names = [n.name.lower() for n in npcs]
        assert len(names) == len(set(names))

    def test_notables_come_first(self):
        gen = NPCGenerator(REGISTRY)
        npcs = gen.generate_for_location(SeededRandom(12), "frontier_town", _make_context(), 2, 3)
        for npc in npcs[:3]:
            assert REGISTRY.npc_template(npc.template_id).min_importance >= 0.5

    def test_existing_names_avoided(self):
        gen = NPCGenerator(REGISTRY)
        first = gen.generate_for_location(SeededRandom(13), "frontier_town", _make_context(), 4, 1)
        existing = [n.name for n in first]
        second = gen.generate_for_location(SeededRandom(13), "frontier_town", _make_context(), 4, 1,
                                           existing_names=existing)
        assert not {n.name.lower() for n in second} & {n.lower() for n in existing}

    def test_unknown_location_type_uses_unrestricted_templates(self):
        gen = NPCGenerator(REGISTRY)
        npcs = gen.generate_for_location(SeededRandom(1), "moon_base", _make_context(), 3, 1)
        assert npcs
        assert {n.template_id for n in npcs} == {"drifter"}

    def test_no_valid_templates_is_empty(self):
        registry = TemplateRegistry()
        registry.init_name_pools(NAME_POOLS, PLACE_NAME_POOLS)
        registry.init_npc_templates([
            {"id": "hand", "name": "Hand", "role": "ranch_hand", "valid_location_types": ["ranch"]},
        ])
        gen = NPCGenerator(registry)
        assert gen.generate_for_location(SeededRandom(1), "moon_base", _make_context(), 3, 3) == []

    def test_exhausted_names_skip_slots(self):
        registry = TemplateRegistry()
        registry.init_name_pools(
            [{"origin": "tiny", "male_first": ["Abe"], "female_first": ["Ada"], "surnames": ["Stone"]}],
            PLACE_NAME_POOLS,
        )
        registry.init_npc_templates([
            {"id": "hand", "name": "Hand", "role": "ranch_hand",
             "name_origins": [{"origin": "tiny"}], "gender_distribution": [1.0, 0.0, 0.0]},
        ])
        npcs = NPCGenerator(registry).generate_for_location(SeededRandom(1), "ranch", _make_context(), 3, 0)
        assert len(npcs) == 1
        assert npcs[0].name == "Abe Stone"


class TestBuildingStaff:
    def test_slots_filled(self):
        slots = [NPCSlot("bartender", count=2), NPCSlot("sheriff")]
        npcs = NPCGenerator(REGISTRY).generate_for_building(SeededRandom(4), slots, _make_context())
        assert [n.role for n in npcs] == ["bartender", "bartender", "sheriff"]

    def test_optional_missing_role_skipped(self):
        slots = [NPCSlot("astronaut"), NPCSlot("doctor")]
        npcs = NPCGenerator(REGISTRY).generate_for_building(SeededRandom(4), slots, _make_context())
        assert [n.role for n in npcs] == ["doctor"]

    def test_required_missing_role_raises(self):
        slots = [NPCSlot("astronaut", required=True)]
        with pytest.raises(UnknownTemplateError):
            NPCGenerator(REGISTRY).generate_for_building(SeededRandom(4), slots, _make_context())

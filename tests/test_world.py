"""Tests for WorldGenerator: setup, determinism, structure, stats and manifest."""

import pytest

from procgen.core.errors import NotInitializedError
from procgen.core.models import HexCoord
from procgen.core.registry import TemplateRegistry
from procgen.core.seeds import combine_seeds, hash_string, normalize_seed
from procgen.data import build_default_registry
from procgen.data.items import ITEMS, LOCATION_ITEM_POOLS, SHOP_TEMPLATES
from procgen.data.names import NAME_POOLS, PLACE_NAME_POOLS
from procgen.data.quests import QUEST_TEMPLATES
from procgen.generators.world import (
    LOCATION_TYPES,
    SCHEMA_VERSION,
    WorldGenerator,
    npc_counts_for_size,
    ring_coord,
    size_for_location_type,
)

REGISTRY = build_default_registry()


def _make_generator(seed: int = 42, **kwargs) -> WorldGenerator:
    kwargs.setdefault("region_count", 2)
    kwargs.setdefault("locations_per_region", (2, 3))
    gen = WorldGenerator(seed, **kwargs)
    gen.initialize(REGISTRY)
    return gen


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

class TestSetup:
    def test_generate_before_initialize_raises(self):
        with pytest.raises(NotInitializedError):
            WorldGenerator(1).generate_world()

    def test_initialize_requires_sections(self):
        gen = WorldGenerator(1)
        with pytest.raises(NotInitializedError):
            gen.initialize(TemplateRegistry())
        assert not gen.is_initialized()

    def test_initialize_requires_item_catalog(self):
        registry = TemplateRegistry()
        registry.init_name_pools(NAME_POOLS, PLACE_NAME_POOLS)
        registry.init_npc_templates([{"id": "barkeep", "name": "Barkeep", "role": "bartender"}])
        registry.init_quest_templates(QUEST_TEMPLATES)
        gen = WorldGenerator(1)
        with pytest.raises(NotInitializedError, match="items"):
            gen.initialize(registry)
        assert not gen.is_initialized()

    def test_world_name_folds_into_seed(self):
        gen = WorldGenerator(42, world_name="Copper Basin")
        assert gen.seed == normalize_seed(combine_seeds(42, hash_string("Copper Basin")))
        assert gen.world_name == "Copper Basin"
        assert WorldGenerator(42).seed == 42

    def test_default_name(self):
        assert WorldGenerator(42).world_name == "Dustwater Frontier"


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

class TestGenerateWorld:
    def test_deterministic_across_generators(self):
        a = _make_generator().generate_world()
        b = _make_generator().generate_world()
        assert [r.to_dict() for r in a.regions] == [r.to_dict() for r in b.regions]
        assert a.id == b.id == "world_2a"

    def test_repeatable_on_one_generator(self):
        gen = _make_generator()
        first = gen.generate_world()
        second = gen.generate_world()
        assert [r.to_dict() for r in first.regions] == [r.to_dict() for r in second.regions]

    def test_different_seeds_differ(self):
        a = _make_generator(1).generate_world()
        b = _make_generator(2).generate_world()
        assert [r.name for r in a.regions] != [r.name for r in b.regions]

    def test_structure(self):
        world = _make_generator(region_count=3, locations_per_region=(2, 4)).generate_world()
        assert len(world.regions) == 3
        for region in world.regions:
            assert region.name.endswith(" Territory")
            assert 2 <= len(region.locations) <= 4
            assert set(region.faction_presence) >= {"law_enforcement", "desperados"}
            for location in region.locations:
                assert location.type in LOCATION_TYPES
                assert location.size is size_for_location_type(location.type)
                assert location.tags == [location.type, location.size.value]
                assert "{{" not in location.name and "{{" not in location.description

    def test_residents_and_quests(self):
        world = _make_generator(7, region_count=3).generate_world()
        for location in world.iter_locations():
            background, notable = npc_counts_for_size(location.size)
            assert len(location.npcs) <= background + notable
            npc_ids = {n.id for n in location.npcs}
            names = [n.name.lower() for n in location.npcs]
            assert len(names) == len(set(names))
            for npc in location.npcs:
                assert npc.location_id == location.id
            for quest in location.quests:
                assert quest.giver_id in npc_ids

    def test_context_overrides_reach_quests(self):
        world = _make_generator(3, region_count=3, context_overrides={"player_level": 9}).generate_world()
        quests = [q for loc in world.iter_locations() for q in loc.quests]
        assert quests
        for quest in quests:
            low, high = sorted(REGISTRY.quest_template(quest.template_id).level_range)
            assert low <= 9 <= high


class TestManifestAndStats:
    def test_manifest(self):
        world = _make_generator().generate_world()
        locations = list(world.iter_locations())
        manifest = world.manifest
        assert manifest.schema_version == SCHEMA_VERSION
        assert manifest.world_seed == world.seed
        assert manifest.counts == {
            "regions": len(world.regions),
            "locations": len(locations),
            "npcs": sum(len(loc.npcs) for loc in locations),
            "quests": sum(len(loc.quests) for loc in locations),
        }
        assert manifest.templates_used == sorted(manifest.templates_used)
        assert manifest.warnings == []

    def test_stats_accumulate_and_reset(self):
        gen = _make_generator()
        world = gen.generate_world()
        snapshot = gen.get_stats()
        assert snapshot.regions_generated == 2
        assert snapshot.locations_generated == world.manifest.counts["locations"]
        assert snapshot.npcs_generated == world.manifest.counts["npcs"]

        gen.generate_world()
        assert snapshot.regions_generated == 2
        assert gen.get_stats().regions_generated == 4

        gen.reset_stats()
        assert gen.get_stats().to_dict() == {
            "npcs": 0, "quests": 0, "locations": 0, "regions": 0,
        }

    def test_missing_templates_recorded_as_warning(self):
        registry = TemplateRegistry()
        registry.init_name_pools(NAME_POOLS, PLACE_NAME_POOLS)
        registry.init_npc_templates([
            {"id": "barkeep", "name": "Barkeep", "role": "bartender", "valid_location_types": ["saloon"]},
        ])
        registry.init_quest_templates(QUEST_TEMPLATES)
        registry.init_item_data(ITEMS, LOCATION_ITEM_POOLS, SHOP_TEMPLATES)
        gen = WorldGenerator(5, region_count=1, locations_per_region=(2, 2))
        gen.initialize(registry)
        world = gen.generate_world()
        assert len(world.manifest.warnings) == 2
        assert all(not loc.npcs for loc in world.iter_locations())


class TestHelpers:
    def test_ring_coord(self):
        assert ring_coord(0, 4, 3) == HexCoord(3, 0)
        assert ring_coord(1, 4, 3) == HexCoord(0, 3)
        assert ring_coord(2, 4, 3) == HexCoord(-3, 0)

    def test_size_defaults(self):
        assert size_for_location_type("frontier_town").value == "large"
        assert size_for_location_type("lighthouse").value == "small"

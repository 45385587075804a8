"""Tests for ProceduralLocationManager: caching, seeding, lookups, merging."""

from types import SimpleNamespace

import pytest

from procgen.config import GenerationConfig
from procgen.core.context import LocationRef
from procgen.core.enums import SizeBucket, StructureState
from procgen.core.errors import NotInitializedError
from procgen.core.registry import TemplateRegistry
from procgen.data import build_default_registry
from procgen.generators.dialogue import validate_tree
from procgen.generators.world import npc_counts_for_size
from procgen.systems.location_manager import (
    ITEM_COUNTS,
    LOCATION_SIZES,
    ProceduralLocationManager,
    infer_location_type,
    location_seed,
    merge_location_items,
    merge_location_npcs,
)

REGISTRY = build_default_registry()


def _make_manager(seed: int | None = 42, **config) -> ProceduralLocationManager:
    return ProceduralLocationManager(REGISTRY, seed, GenerationConfig(**config) if config else None)


def _town(location_id: str = "loc_dry_gulch") -> LocationRef:
    return LocationRef(id=location_id, name="Dry Gulch", type="town")


def _assert_shop_matches_role(shop, role: str) -> None:
    template = REGISTRY.shop_for_role(role)
    assert shop.shop_type == template.shop_type
    staples = [line.item_id for line in shop.items[:len(template.entries)]]
    assert staples == [entry.item_id for entry in template.entries]
    for line in shop.items:
        assert line.base_price >= line.sell_price >= 0
        if line.item is not None:
            assert line.stock == 1
            assert line.item_id == line.item.id


# ---------------------------------------------------------------------------
# Type inference
# ---------------------------------------------------------------------------

class TestInferLocationType:
    def test_explicit_type_wins(self):
        assert infer_location_type(LocationRef(id="a", name="Old Mine", type="city", tags=("ranch",))) == "city"

    def test_tags_before_name(self):
        assert infer_location_type(LocationRef(id="a", name="Big Mine", tags=("cattle",))) == "ranch"

    def test_name_hints(self):
        assert infer_location_type(LocationRef(id="a", name="Lost Dutchman Mine")) == "mine"
        assert infer_location_type(LocationRef(id="a", name="Relay Station 9")) == "outpost"

    def test_default(self):
        assert infer_location_type(LocationRef(id="a", name="Nowhere")) == "town"


# ---------------------------------------------------------------------------
# Lifecycle and caching
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_uninitialized_raises(self):
        manager = _make_manager(None)
        assert not manager.is_initialized
        with pytest.raises(NotInitializedError):
            manager.generate_location_content(_town())

    def test_item_data_required_even_when_nothing_is_rolled(self):
        manager = ProceduralLocationManager(TemplateRegistry(), 42)
        with pytest.raises(NotInitializedError, match="item"):
            manager.generate_location_content(_town(), npc_counts=(0, 0), item_count=0)
        assert not manager.has_generated_content("loc_dry_gulch")

    def test_cached_by_reference(self):
        manager = _make_manager()
        first = manager.generate_location_content(_town())
        assert manager.generate_location_content(_town()) is first
        assert manager.has_generated_content("loc_dry_gulch")
        assert manager.cached_location_ids == ["loc_dry_gulch"]

    def test_same_seed_keeps_cache(self):
        manager = _make_manager()
        first = manager.generate_location_content(_town())
        manager.initialize(42)
        assert manager.generate_location_content(_town()) is first

    def test_new_seed_drops_cache(self):
        manager = _make_manager()
        first = manager.generate_location_content(_town())
        manager.initialize(43)
        assert not manager.has_generated_content("loc_dry_gulch")
        second = manager.generate_location_content(_town())
        assert second is not first
        assert second.seed == location_seed(43, "loc_dry_gulch")

    def test_deterministic_across_managers(self):
        a = _make_manager().generate_location_content(_town())
        b = _make_manager().generate_location_content(_town())
        assert [n.to_dict() for n in a.npcs] == [n.to_dict() for n in b.npcs]
        assert [i.to_dict() for i in a.world_items] == [i.to_dict() for i in b.world_items]
        assert {k: t.to_dict() for k, t in a.dialogue_trees.items()} == \
            {k: t.to_dict() for k, t in b.dialogue_trees.items()}

    def test_locations_independent_of_request_order(self):
        first = _make_manager()
        first.generate_location_content(_town("loc_a"))
        b_after_a = first.generate_location_content(_town("loc_b"))
        b_alone = _make_manager().generate_location_content(_town("loc_b"))
        assert [n.id for n in b_after_a.npcs] == [n.id for n in b_alone.npcs]


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

class TestContent:
    def test_item_count_by_type(self):
        content = _make_manager().generate_location_content(_town())
        assert len(content.world_items) == ITEM_COUNTS["town"]
        assert [i.id for i in content.world_items][:2] == ["proc_item_loc_dry_gulch_0", "proc_item_loc_dry_gulch_1"]
        assert all(i.quantity >= 1 for i in content.world_items)

    def test_overrides(self):
        content = _make_manager().generate_location_content(_town(), npc_counts=(2, 1), item_count=0)
        assert len(content.npcs) == 3
        assert content.world_items == []

    def test_world_location_types_keep_world_size(self):
        assert LOCATION_SIZES["frontier_town"] is SizeBucket.LARGE
        assert LOCATION_SIZES["homestead"] is SizeBucket.TINY
        ref = LocationRef(id="loc_big", name="Big Iron", type="frontier_town")
        content = _make_manager().generate_location_content(ref)
        small = sum(npc_counts_for_size(SizeBucket.SMALL))
        large = sum(npc_counts_for_size(SizeBucket.LARGE))
        assert small < len(content.npcs) <= large

    def test_npcs_placed(self):
        content = _make_manager().generate_location_content(_town())
        for npc in content.npcs:
            assert npc.location_id == "loc_dry_gulch"
            assert npc.is_procedural
            assert npc.primary_dialogue_id == f"proc_dialogue_{npc.id}"
            assert (npc.shop_id is not None) == npc.npc.has_shop

    def test_every_npc_has_valid_dialogue(self):
        content = _make_manager().generate_location_content(_town())
        assert set(content.dialogue_trees) == {n.id for n in content.npcs}
        for npc in content.npcs:
            tree = content.dialogue_trees[npc.id]
            assert tree.id == npc.primary_dialogue_id
            assert tree.tags[0] == "procedural"
            assert validate_tree(tree) == []

    def test_shops_only_for_shopkeepers(self):
        content = _make_manager(7).generate_location_content(_town())
        shopkeepers = {n.id for n in content.npcs if n.npc.has_shop}
        assert set(content.shop_inventories) == shopkeepers
        for shop in content.shop_inventories.values():
            assert 0.9 <= shop.price_modifier <= 1.2
            assert shop.items

    def test_shop_stock_is_priced_from_shop_template(self):
        checked = 0
        for seed in range(1, 21):
            content = _make_manager(seed).generate_location_content(_town())
            for npc in content.npcs:
                shop = content.shop_inventories.get(npc.id)
                if shop is None:
                    continue
                checked += 1
                _assert_shop_matches_role(shop, npc.role)
        assert checked

    def test_quests_from_givers(self):
        content = _make_manager().generate_location_content(_town())
        givers = {n.id for n in content.npcs if n.npc.is_quest_giver}
        assert {q.giver_id for q in content.quests} <= givers


# ---------------------------------------------------------------------------
# Cached lookups
# ---------------------------------------------------------------------------

class TestLookups:
    def test_empty_without_content(self):
        manager = _make_manager()
        assert manager.get_or_generate_npcs("loc_nowhere") == []
        assert manager.get_or_generate_items("loc_nowhere") == []
        assert manager.get_or_generate_dialogue("npc_x", "loc_nowhere") is None
        assert manager.get_or_generate_shop("npc_x", "loc_nowhere") is None

    def test_generates_when_ref_given(self):
        manager = _make_manager()
        npcs = manager.get_or_generate_npcs("loc_dry_gulch", _town())
        assert npcs
        assert manager.get_or_generate_items("loc_dry_gulch") is manager.generate_location_content(_town()).world_items

    def test_dialogue_and_shop(self):
        manager = _make_manager(7)
        content = manager.generate_location_content(_town())
        npc = content.npcs[0]
        assert manager.get_or_generate_dialogue(npc.id, "loc_dry_gulch") is content.dialogue_trees[npc.id]
        assert manager.get_or_generate_shop(npc.id, "loc_dry_gulch") is content.shop_inventories.get(npc.id)


class TestStructureState:
    def test_functional_without_content(self):
        assert _make_manager().get_or_generate_structure_state("loc_nowhere", "3,4") is StructureState.FUNCTIONAL

    def test_stable_and_deterministic(self):
        a = _make_manager()
        b = _make_manager()
        a.generate_location_content(_town())
        b.generate_location_content(_town())
        keys = [f"{q},{r}" for q in range(-5, 6) for r in range(-5, 6)]
        states_a = [a.get_or_generate_structure_state("loc_dry_gulch", k) for k in keys]
        assert states_a == [a.get_or_generate_structure_state("loc_dry_gulch", k) for k in keys]
        assert states_a == [b.get_or_generate_structure_state("loc_dry_gulch", k) for k in keys]
        assert StructureState.FUNCTIONAL in states_a
        assert set(states_a) - {StructureState.FUNCTIONAL}

    def test_damage_chance_from_config(self):
        manager = _make_manager(structure_damage_chance=0.0)
        manager.generate_location_content(_town())
        assert {manager.get_or_generate_structure_state("loc_dry_gulch", f"{i},0") for i in range(30)} == \
            {StructureState.FUNCTIONAL}


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------

class TestMerge:
    def test_static_npcs_first_and_kept(self):
        manager = _make_manager()
        procedural = manager.get_or_generate_npcs("loc_dry_gulch", _town())
        clash = SimpleNamespace(id=procedural[0].id, name="Hand-authored")
        extra = SimpleNamespace(id="npc_static", name="Old Pete")
        merged = merge_location_npcs([clash, extra], "loc_dry_gulch", manager)
        assert merged[0] is clash and merged[1] is extra
        assert len(merged) == 2 + len(procedural) - 1

    def test_items_merge_with_ref(self):
        manager = _make_manager()
        static = [SimpleNamespace(id="item_static")]
        merged = merge_location_items(static, "loc_dry_gulch", manager, _town())
        assert merged[0] is static[0]
        assert len(merged) == 1 + ITEM_COUNTS["town"]

    def test_nothing_generated_keeps_static(self):
        static = [SimpleNamespace(id="npc_static")]
        assert merge_location_npcs(static, "loc_nowhere", _make_manager()) == static

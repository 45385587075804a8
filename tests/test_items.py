"""Tests for ItemGenerator: rolled items, loot tables and shop stock."""

import math

import pytest

from procgen.core.enums import ItemRarity, ItemType
from procgen.core.errors import UnknownTemplateError
from procgen.data import build_default_registry
from procgen.data.encounters import DEFAULT_ENEMY_TEMPLATE, ENCOUNTER_TEMPLATES, ENEMY_TEMPLATES
from procgen.data.items import MATERIALS, QUALITIES
from procgen.generators.items import ItemGenerator, calculate_item_value, scale_stat_by_level
from procgen.systems.rng import SeededRandom

REGISTRY = build_default_registry()
MATERIAL = {m.id: m for m in MATERIALS}
QUALITY = {q.id: q for q in QUALITIES}


def _make_generator() -> ItemGenerator:
    return ItemGenerator(REGISTRY)


def _half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ---------------------------------------------------------------------------
# Value and stat scaling
# ---------------------------------------------------------------------------

class TestScaling:
    def test_level_one_is_base(self):
        assert scale_stat_by_level(10, 1) == 10

    def test_compounds_per_level(self):
        assert scale_stat_by_level(10, 3) == 13        # 10 * 1.15^2 = 13.2
        assert scale_stat_by_level(100, 2, 0.2) == 120

    def test_levels_below_one_clamp(self):
        assert scale_stat_by_level(10, 0) == 10
        assert scale_stat_by_level(10, -4) == 10

    def test_item_value_multiplies_every_factor(self):
        common = calculate_item_value(100, ItemRarity.COMMON, MATERIAL["iron"], QUALITY["standard"], 1)
        assert common == 100
        rare = calculate_item_value(100, ItemRarity.RARE, MATERIAL["steel"], QUALITY["fine"], 1)
        assert rare == 1125                            # 100 * 5 * 1.5 * 1.5
        assert calculate_item_value(100, ItemRarity.COMMON, MATERIAL["iron"], QUALITY["standard"], 2) == 120


# ---------------------------------------------------------------------------
# Single items
# ---------------------------------------------------------------------------

class TestGenerateItems:
    def test_same_seed_same_weapon(self):
        gen = _make_generator()
        first = gen.generate_weapon(SeededRandom(5), level=3)
        second = gen.generate_weapon(SeededRandom(5), level=3)
        assert first.to_dict() == second.to_dict()

    def test_id_carries_item_seed(self):
        item = _make_generator().generate_weapon(SeededRandom(11))
        assert item.id == f"gen_weapon_{item.seed:x}"
        assert 0 <= item.seed <= 0xFFFFFFFF

    def test_forced_rarity_limits_material_and_quality(self):
        gen = _make_generator()
        rng = SeededRandom(3)
        for _ in range(40):
            item = gen.generate_weapon(rng, rarity=ItemRarity.COMMON)
            assert item.rarity is ItemRarity.COMMON
            assert MATERIAL[item.material].min_rarity is ItemRarity.COMMON
            assert item.quality in {"rusty", "worn", "standard"}

    def test_explicit_template_is_used(self):
        item = _make_generator().generate_weapon(SeededRandom(1), template_id="rifle_template")
        assert item.template_id == "rifle_template"
        assert item.stats["weapon_type"] == "rifle"
        assert item.item_type is ItemType.WEAPON

    def test_template_of_wrong_type_rejected(self):
        with pytest.raises(ValueError):
            _make_generator().generate_weapon(SeededRandom(1), template_id="food_template")

    def test_unknown_template_raises(self):
        with pytest.raises(UnknownTemplateError):
            _make_generator().generate_armor(SeededRandom(1), template_id="plate_mail")

    def test_accuracy_capped(self):
        rng = SeededRandom(8)
        gen = _make_generator()
        for _ in range(30):
            assert gen.generate_weapon(rng, level=10, rarity=ItemRarity.LEGENDARY).stats["accuracy"] <= 100

    def test_armor_slot_selects_template(self):
        rng = SeededRandom(21)
        gen = _make_generator()
        for _ in range(20):
            item = gen.generate_armor(rng, slot="head")
            assert item.template_id == "hat_template"
            assert item.stats["slot"] == "head"
            assert 0.0 <= item.stats["movement_penalty"] <= 1.0

    def test_consumables_stack_and_have_no_material(self):
        item = _make_generator().generate_consumable(SeededRandom(4), consumable_type="food")
        assert item.item_type is ItemType.CONSUMABLE
        assert item.material == ""
        assert item.stackable and item.max_stack == 10
        assert item.stats["consumable_type"] == "food"

    def test_higher_level_weapons_hit_harder(self):
        gen = _make_generator()
        low = gen.generate_weapon(SeededRandom(9), level=1)
        high = gen.generate_weapon(SeededRandom(9), level=8)
        assert high.stats["damage"] >= low.stats["damage"]
        assert high.value >= low.value


# ---------------------------------------------------------------------------
# Loot tables
# ---------------------------------------------------------------------------

class TestLoot:
    def test_guaranteed_rolls_yield_items(self):
        gen = _make_generator()
        for seed in range(10):
            drops = gen.generate_loot(SeededRandom(seed), "treasure_chest", level=1)
            assert len(drops) >= 4
            assert all(d.item is not None and d.item.id == d.item_id for d in drops)

    def test_level_range_filters_entries(self):
        gen = _make_generator()
        for seed in range(20):
            for drop in gen.generate_loot(SeededRandom(seed), "treasure_chest", level=1):
                assert drop.item.template_id != "rifle_template"

    def test_catalog_entries_stack(self):
        gen = _make_generator()
        drops = [d for seed in range(20) for d in gen.generate_loot(SeededRandom(seed), "wildlife_pelt")]
        assert drops
        for drop in drops:
            assert drop.item is None
            assert drop.item_id in {"animal_hide", "jerky"}
            assert 1 <= drop.quantity <= 3

    def test_same_seed_same_loot(self):
        gen = _make_generator()
        first = [d.to_dict() for d in gen.generate_loot(SeededRandom(77), "outlaw_loot", level=4)]
        second = [d.to_dict() for d in gen.generate_loot(SeededRandom(77), "outlaw_loot", level=4)]
        assert first == second

    def test_unknown_table_raises(self):
        with pytest.raises(UnknownTemplateError):
            _make_generator().generate_loot(SeededRandom(1), "dragon_hoard")

    def test_every_referenced_table_exists(self):
        referenced = {t.loot_table_id for t in [DEFAULT_ENEMY_TEMPLATE, *ENEMY_TEMPLATES, *ENCOUNTER_TEMPLATES]}
        for table_id in referenced - {None}:
            assert REGISTRY.loot_table(table_id).id == table_id


# ---------------------------------------------------------------------------
# Shop stock
# ---------------------------------------------------------------------------

class TestShopInventory:
    def test_staples_come_first(self):
        shop = REGISTRY.shop_template("gunsmith")
        lines = _make_generator().generate_shop_inventory(SeededRandom(2), shop)
        staples = lines[:len(shop.entries)]
        for line, entry in zip(staples, shop.entries):
            assert line.item_id == entry.item_id
            assert entry.stock[0] <= line.stock <= entry.stock[1]
            assert line.item is None
            base = REGISTRY.item(entry.item_id).base_price
            assert line.base_price == _half_up(base * shop.buy_multiplier)
            assert line.sell_price == _half_up(base * shop.sell_multiplier)

    def test_generated_stock_priced_from_value(self):
        shop = REGISTRY.shop_template("gunsmith")
        lines = _make_generator().generate_shop_inventory(SeededRandom(6), "gunsmith", level=2)
        generated = lines[len(shop.entries):]
        assert len(generated) >= 3                     # pistol pool 2..4, rifle pool 1..3
        for line in generated:
            assert line.stock == 1
            assert line.item.item_type is ItemType.WEAPON
            assert line.base_price == _half_up(line.item.value * shop.buy_multiplier)
            assert line.base_price >= line.sell_price

    def test_catalog_pools_stack_repeats(self):
        shop = REGISTRY.shop_template("trading_post")
        for seed in range(15):
            lines = _make_generator().generate_shop_inventory(SeededRandom(seed), shop)
            catalog = [line for line in lines[len(shop.entries):] if line.item is None]
            ids = [line.item_id for line in catalog]
            assert len(ids) == len(set(ids))
            assert all(line.stock >= 1 for line in catalog)
            for line in catalog:
                tags = set(REGISTRY.item(line.item_id).tags)
                assert tags & {"valuable", "hide"}

    def test_same_seed_same_stock(self):
        gen = _make_generator()
        first = [line.to_dict() for line in gen.generate_shop_inventory(SeededRandom(13), "apothecary")]
        second = [line.to_dict() for line in gen.generate_shop_inventory(SeededRandom(13), "apothecary")]
        assert first == second

    def test_unknown_shop_raises(self):
        with pytest.raises(UnknownTemplateError):
            _make_generator().generate_shop_inventory(SeededRandom(1), "bookshop")

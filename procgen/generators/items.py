"""Item generator: rolled weapons, armor and consumables, loot tables and shop stock.

Every generated item draws one 32-bit seed from the caller's stream and
rolls everything else on its own ``SeededRandom(seed)``, so the item id
(``gen_<type>_<seed hex>``) is enough to regenerate it.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterable

from procgen.core.enums import RARITY_ORDER, ItemRarity, ItemType
from procgen.core.models import GeneratedItem, LootDrop, ShopItem
from procgen.core.seeds import MAX_SEED
from procgen.core.text import substitute_template
from procgen.data.items import DEFAULT_ARMOR_TEMPLATE, DEFAULT_CONSUMABLE_TEMPLATE, DEFAULT_WEAPON_TEMPLATE
from procgen.systems.rng import SeededRandom

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.registry import TemplateRegistry
    from procgen.core.templates import (
        ItemMaterial,
        ItemQuality,
        ItemStyle,
        ItemTemplate,
        RarityWeights,
        ShopTemplate,
    )

logger = logging.getLogger(__name__)

# Pool tags that route a shop pool to a generator; anything else is catalog stock
WEAPON_TAGS = frozenset({"weapon", "pistol", "revolver", "rifle", "shotgun"})
ARMOR_TAGS = frozenset({"armor", "clothing", "apparel"})
CONSUMABLE_TAGS = frozenset({"consumable", "food", "drink", "medicine", "tonic", "healing"})

RARITY_VALUE_MULTIPLIER = {
    ItemRarity.COMMON: 1.0,
    ItemRarity.UNCOMMON: 2.0,
    ItemRarity.RARE: 5.0,
    ItemRarity.LEGENDARY: 15.0,
}
CONSUMABLE_RARITY_MULTIPLIER = {
    ItemRarity.COMMON: 1.0,
    ItemRarity.UNCOMMON: 1.5,
    ItemRarity.RARE: 2.5,
    ItemRarity.LEGENDARY: 5.0,
}

# Materials left out of the display name
_PLAIN_WEAPON_MATERIALS = frozenset({"iron", "steel"})
_PLAIN_ARMOR_MATERIALS = frozenset({"leather", "cloth"})
_ARMOR_MATERIAL_TAGS = ("organic", "flexible")
_CONSUMABLE_KINDS = ("healing", "food", "drink")


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _int_in(rng: SeededRandom, bounds: tuple[float, float]) -> int:
    return rng.int(math.floor(bounds[0]), math.ceil(bounds[1]))


def _float_in(rng: SeededRandom, bounds: tuple[float, float]) -> float:
    return rng.float(bounds[0], bounds[1])


def scale_stat_by_level(base: float, level: int, factor: float = 0.15) -> int:
    """``base * (1 + factor) ** (level - 1)`` rounded; levels below 1 count as 1."""
    return _round(base * (1 + factor) ** (max(1, level) - 1))


def calculate_item_value(
    base_value: float,
    rarity: ItemRarity,
    material: ItemMaterial,
    quality: ItemQuality,
    level: int,
) -> int:
    scaled = scale_stat_by_level(base_value, level, 0.2)
    return _round(
        scaled * RARITY_VALUE_MULTIPLIER[rarity] * material.value_multiplier * quality.value_multiplier
    )


def roll_rarity(rng: SeededRandom, weights: RarityWeights) -> ItemRarity:
    return rng.weighted_pick(RARITY_ORDER, weights.as_tuple())


def _join_name(*parts: str) -> str:
    return " ".join(p for p in parts if p)


class ItemGenerator:
    """Rolls items from registry templates and resolves loot tables and shop stock."""

    __slots__ = ("_registry", "_config")

    def __init__(self, registry: TemplateRegistry, config: GenerationConfig | None = None) -> None:
        self._registry = registry
        self._config = config

    # ------------------------------------------------------------------
    # Pool selection
    # ------------------------------------------------------------------

    def _material(self, rng: SeededRandom, rarity: ItemRarity, tags: Iterable[str]) -> ItemMaterial:
        materials = self._registry.materials
        valid = [m for m in materials if m.min_rarity.rank <= rarity.rank]
        wanted = set(tags)
        preferred = [m for m in valid if wanted.intersection(m.tags)]
        if preferred:
            return rng.pick(preferred)
        return rng.pick(valid or materials)

    def _quality(self, rng: SeededRandom, rarity: ItemRarity) -> ItemQuality:
        """Qualities at or below *rarity*; the ones matching it weigh triple."""
        qualities = [q for q in self._registry.qualities if q.rarity.rank <= rarity.rank]
        if not qualities:
            qualities = list(self._registry.qualities)
        weights = [q.weight * (3 if q.rarity is rarity else 1) for q in qualities]
        return rng.weighted_pick(qualities, weights)

    def _style(self, rng: SeededRandom, tags: Iterable[str]) -> ItemStyle:
        styles = self._registry.styles
        wanted = set(tags)
        matching = [s for s in styles if wanted.intersection(s.tags)]
        if matching and rng.bool(0.7):
            return rng.pick(matching)
        return rng.pick(styles)

    def _template(
        self,
        rng: SeededRandom,
        item_type: ItemType,
        template_id: str | None,
        tags: Iterable[str],
        fallback: ItemTemplate,
    ) -> ItemTemplate:
        if template_id is not None:
            template = self._registry.item_template(template_id)
            if template.item_type is not item_type:
                raise ValueError(f"Item template {template_id!r} is {template.item_type.value}, not {item_type.value}")
            return template
        templates = self._registry.item_templates(item_type)
        if not templates:
            return fallback
        specific = set(tags) - {item_type.value}
        matching = [t for t in templates if specific.intersection(t.tags)]
        return rng.pick(matching or templates)

    # ------------------------------------------------------------------
    # Single items
    # ------------------------------------------------------------------

    def generate_weapon(
        self,
        rng: SeededRandom,
        level: int = 1,
        tags: Iterable[str] = (),
        *,
        template_id: str | None = None,
        weapon_type: str | None = None,
        rarity: ItemRarity | None = None,
    ) -> GeneratedItem:
        item_seed = rng.int(0, MAX_SEED)
        item_rng = SeededRandom(item_seed)

        template = None
        if template_id is None and weapon_type is not None:
            template = next(
                (t for t in self._registry.item_templates(ItemType.WEAPON) if t.weapon_type == weapon_type), None,
            )
        if template is None:
            template = self._template(item_rng, ItemType.WEAPON, template_id, tags, DEFAULT_WEAPON_TEMPLATE)

        rarity = rarity or roll_rarity(item_rng, template.rarity_weights)
        material = self._material(item_rng, rarity, template.tags)
        quality = self._quality(item_rng, rarity)
        style = self._style(item_rng, template.tags)

        kind = template.weapon_type or "revolver"
        affixes = self._registry.affixes
        prefixes = affixes.weapon_prefixes.get(kind) or affixes.weapon_prefixes.get("revolver") or (template.name,)
        prefix = item_rng.pick(prefixes)
        suffix = item_rng.pick(affixes.weapon_suffixes)
        material_name = "" if material.id in _PLAIN_WEAPON_MATERIALS else material.name
        name = _join_name(quality.adjective, material_name, prefix, suffix)

        stat_mult = material.stat_multiplier * quality.stat_multiplier
        base_damage = _int_in(item_rng, template.damage_range) if template.damage_range else 15
        damage = scale_stat_by_level(_round(base_damage * stat_mult), level)
        base_accuracy = _float_in(item_rng, template.accuracy_range) if template.accuracy_range else 70.0
        accuracy = min(100, _round(base_accuracy * (1 + (quality.stat_multiplier - 1) * 0.5)))
        reach = _int_in(item_rng, template.range_range) if template.range_range else 30
        fire_rate = _float_in(item_rng, template.fire_rate_range) if template.fire_rate_range else 1.0
        clip_size = _int_in(item_rng, template.clip_size_range) if template.clip_size_range else 6

        description = substitute_template(
            item_rng.pick(template.description_templates),
            {
                "material": material.name,
                "quality": quality.name,
                "style": style.name,
                "weapon_type": kind,
                "damage": str(damage),
                "accuracy": str(accuracy),
            },
        )
        description = _join_name(description, style.description_suffix)

        base_value = _int_in(item_rng, template.value_range)
        value = calculate_item_value(base_value, rarity, material, quality, level)
        weight = _float_in(item_rng, template.weight_range)

        return GeneratedItem(
            id=f"gen_weapon_{item_seed:x}",
            template_id=template.id,
            name=name,
            description=description,
            item_type=ItemType.WEAPON,
            rarity=rarity,
            value=value,
            weight=weight,
            material=material.id,
            quality=quality.id,
            style=style.id,
            seed=item_seed,
            tags=[*template.tags, kind, rarity.value, material.id, style.id],
            stats={
                "weapon_type": kind,
                "damage": damage,
                "range": reach,
                "accuracy": accuracy,
                "fire_rate": fire_rate,
                "ammo_type": template.ammo_type or "pistol",
                "clip_size": clip_size,
                "reload_time": 2 + clip_size / 6 if clip_size > 0 else 0,
            },
        )

    def generate_armor(
        self,
        rng: SeededRandom,
        level: int = 1,
        tags: Iterable[str] = (),
        *,
        template_id: str | None = None,
        slot: str | None = None,
        rarity: ItemRarity | None = None,
    ) -> GeneratedItem:
        item_seed = rng.int(0, MAX_SEED)
        item_rng = SeededRandom(item_seed)

        template = None
        if template_id is None and slot is not None:
            template = next(
                (t for t in self._registry.item_templates(ItemType.ARMOR) if t.armor_slot == slot), None,
            )
        if template is None:
            template = self._template(item_rng, ItemType.ARMOR, template_id, tags, DEFAULT_ARMOR_TEMPLATE)

        rarity = rarity or roll_rarity(item_rng, template.rarity_weights)
        material = self._material(item_rng, rarity, _ARMOR_MATERIAL_TAGS)
        quality = self._quality(item_rng, rarity)
        style = self._style(item_rng, template.tags)

        armor_slot = template.armor_slot or slot or "body"
        affixes = self._registry.affixes
        prefixes = affixes.armor_prefixes.get(armor_slot) or affixes.armor_prefixes.get("body") or (template.name,)
        prefix = item_rng.pick(prefixes)
        suffix = item_rng.pick(affixes.armor_suffixes)
        material_name = "" if material.id in _PLAIN_ARMOR_MATERIALS else material.name
        name = _join_name(quality.adjective, material_name, prefix, suffix)

        stat_mult = material.stat_multiplier * quality.stat_multiplier
        base_defense = _int_in(item_rng, template.defense_range) if template.defense_range else 5
        defense = scale_stat_by_level(_round(base_defense * stat_mult), level)
        if template.movement_penalty_range:
            movement_penalty = _float_in(item_rng, template.movement_penalty_range) / quality.stat_multiplier
        else:
            movement_penalty = 0.1

        description = substitute_template(
            item_rng.pick(template.description_templates),
            {
                "material": material.name,
                "quality": quality.name,
                "style": style.name,
                "defense": str(defense),
                "slot": armor_slot,
            },
        )
        description = _join_name(description, style.description_suffix)

        base_value = _int_in(item_rng, template.value_range)
        value = calculate_item_value(base_value, rarity, material, quality, level)
        weight = _float_in(item_rng, template.weight_range)

        return GeneratedItem(
            id=f"gen_armor_{item_seed:x}",
            template_id=template.id,
            name=name,
            description=description,
            item_type=ItemType.ARMOR,
            rarity=rarity,
            value=value,
            weight=weight,
            material=material.id,
            quality=quality.id,
            style=style.id,
            seed=item_seed,
            tags=[*template.tags, armor_slot, rarity.value, material.id, style.id],
            stats={
                "slot": armor_slot,
                "defense": defense,
                "movement_penalty": max(0.0, min(1.0, movement_penalty)),
            },
        )

    def generate_consumable(
        self,
        rng: SeededRandom,
        tags: Iterable[str] = (),
        *,
        template_id: str | None = None,
        consumable_type: str | None = None,
        rarity: ItemRarity | None = None,
    ) -> GeneratedItem:
        """Roll a consumable. Consumables carry no material and do not scale with level."""
        item_seed = rng.int(0, MAX_SEED)
        item_rng = SeededRandom(item_seed)

        template = None
        if template_id is None and consumable_type is not None:
            template = next(
                (t for t in self._registry.item_templates(ItemType.CONSUMABLE) if consumable_type in t.tags), None,
            )
        if template is None:
            template = self._template(
                item_rng, ItemType.CONSUMABLE, template_id, tags, DEFAULT_CONSUMABLE_TEMPLATE,
            )

        rarity = rarity or roll_rarity(item_rng, template.rarity_weights)
        quality = self._quality(item_rng, rarity)
        style = self._style(item_rng, template.tags)

        kind = consumable_type or next((k for k in _CONSUMABLE_KINDS if k in template.tags), "buff")
        affixes = self._registry.affixes
        prefixes = affixes.consumable_prefixes.get(kind) or affixes.consumable_prefixes.get("healing") or (template.name,)
        prefix = item_rng.pick(prefixes)
        suffix = "" if kind in ("food", "drink") else item_rng.pick(affixes.consumable_suffixes)
        adjective = quality.adjective if rarity is not ItemRarity.COMMON else ""
        name = _join_name(adjective, prefix, suffix)

        stat_mult = quality.stat_multiplier
        heal = _round(_int_in(item_rng, template.heal_range) * stat_mult) if template.heal_range else 20
        stamina = _round(_int_in(item_rng, template.stamina_range) * stat_mult) if template.stamina_range else 0
        buff_duration = (
            _round(_int_in(item_rng, template.buff_duration_range) * stat_mult) if template.buff_duration_range else 0
        )
        buff_strength = (
            _round(_int_in(item_rng, template.buff_strength_range) * stat_mult) if template.buff_strength_range else 0
        )

        description = substitute_template(
            item_rng.pick(template.description_templates),
            {
                "quality": quality.name,
                "style": style.name,
                "heal_amount": str(heal),
                "stamina_amount": str(stamina),
                "buff_duration": str(buff_duration),
                "buff_strength": str(buff_strength),
            },
        )

        base_value = _int_in(item_rng, template.value_range)
        value = _round(base_value * quality.value_multiplier * CONSUMABLE_RARITY_MULTIPLIER[rarity])
        weight = _float_in(item_rng, template.weight_range)

        return GeneratedItem(
            id=f"gen_consumable_{item_seed:x}",
            template_id=template.id,
            name=name,
            description=description,
            item_type=ItemType.CONSUMABLE,
            rarity=rarity,
            value=value,
            weight=weight,
            material="",
            quality=quality.id,
            style=style.id,
            seed=item_seed,
            stackable=True,
            max_stack=10,
            tags=[*template.tags, kind, rarity.value],
            stats={
                "consumable_type": kind,
                "heal_amount": heal,
                "stamina_amount": stamina,
                "buff_type": template.buff_type or "none",
                "buff_duration": buff_duration,
                "buff_strength": buff_strength,
            },
        )

    def generate(
        self,
        rng: SeededRandom,
        template: ItemTemplate,
        level: int = 1,
        tags: Iterable[str] = (),
        *,
        rarity: ItemRarity | None = None,
    ) -> GeneratedItem:
        """Roll one item from a registered *template*, whatever its type."""
        if template.item_type is ItemType.WEAPON:
            return self.generate_weapon(rng, level, tags, template_id=template.id, rarity=rarity)
        if template.item_type is ItemType.ARMOR:
            return self.generate_armor(rng, level, tags, template_id=template.id, rarity=rarity)
        return self.generate_consumable(rng, tags, template_id=template.id, rarity=rarity)

    # ------------------------------------------------------------------
    # Loot
    # ------------------------------------------------------------------

    def generate_loot(self, rng: SeededRandom, table_id: str, level: int = 1) -> list[LootDrop]:
        """Roll *table_id* ``rolls`` times.

        Each roll may come up empty, then picks one entry valid at *level*
        by weight. A template entry yields one generated item per unit of
        quantity; a catalog entry yields a single stacked drop.
        """
        table = self._registry.loot_table(table_id)
        drops: list[LootDrop] = []
        for _ in range(table.rolls):
            if rng.bool(table.empty_chance):
                continue
            valid = [e for e in table.entries if e.level_range[0] <= level <= e.level_range[1]]
            if not valid:
                continue
            entry = rng.weighted_pick(valid, [e.weight for e in valid])
            quantity = _int_in(rng, entry.quantity)
            if entry.template_id is not None:
                template = self._registry.item_template(entry.template_id)
                for _ in range(quantity):
                    generated = self.generate(rng, template, level, entry.tags)
                    drops.append(LootDrop(item_id=generated.id, item=generated))
            elif quantity > 0:
                item = self._registry.item(entry.item_id)
                drops.append(LootDrop(item_id=item.id, quantity=quantity))
        logger.debug("Loot table %s at level %d gave %d drops", table_id, level, len(drops))
        return drops

    # ------------------------------------------------------------------
    # Shops
    # ------------------------------------------------------------------

    def generate_shop_inventory(
        self, rng: SeededRandom, shop: ShopTemplate | str, level: int = 1,
    ) -> list[ShopItem]:
        """Staple lines first, then every pool in order.

        Generated stock is one unit per line priced from its rolled value;
        catalog pools stack repeats onto one line.
        """
        template = self._registry.shop_template(shop) if isinstance(shop, str) else shop
        buy, sell = template.buy_multiplier, template.sell_multiplier
        lines: list[ShopItem] = []

        for entry in template.entries:
            item = self._registry.item(entry.item_id)
            lines.append(ShopItem(
                item_id=item.id,
                stock=rng.int(*entry.stock),
                base_price=_round(item.base_price * buy),
                sell_price=_round(item.base_price * sell),
            ))

        catalog_lines: dict[str, ShopItem] = {}
        for pool in template.pools:
            tags = set(pool.tags)
            count = _int_in(rng, pool.count)
            for _ in range(count):
                rarity = roll_rarity(rng, pool.rarity_weights)
                if tags & WEAPON_TAGS:
                    generated = self.generate_weapon(rng, level, pool.tags, rarity=rarity)
                elif tags & ARMOR_TAGS:
                    generated = self.generate_armor(rng, level, pool.tags, rarity=rarity)
                elif tags & CONSUMABLE_TAGS:
                    generated = self.generate_consumable(rng, pool.tags, rarity=rarity)
                else:
                    self._add_catalog_line(rng, tags, lines, catalog_lines, buy, sell)
                    continue
                lines.append(ShopItem(
                    item_id=generated.id,
                    stock=1,
                    base_price=_round(generated.value * buy),
                    sell_price=_round(generated.value * sell),
                    item=generated,
                ))
        return lines

    def _add_catalog_line(
        self,
        rng: SeededRandom,
        tags: set[str],
        lines: list[ShopItem],
        catalog_lines: dict[str, ShopItem],
        buy: float,
        sell: float,
    ) -> None:
        matches = [item for item in self._registry.items() if tags.intersection(item.tags)]
        if not matches:
            logger.debug("No catalog items tagged %s", sorted(tags))
            return
        item = rng.pick(matches)
        line = catalog_lines.get(item.id)
        if line is None:
            line = ShopItem(
                item_id=item.id,
                stock=0,
                base_price=_round(item.base_price * buy),
                sell_price=_round(item.base_price * sell),
            )
            catalog_lines[item.id] = line
            lines.append(line)
        line.stock += 1

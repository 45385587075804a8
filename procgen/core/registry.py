"""Template registry: the in-memory store every generator reads from.

Data is injected once per section through explicit ``init_*`` calls and
indexed at load time, so lookups by role, location type, archetype or
category are plain dict reads.  Calling an ``init_*`` again with equal
data is a no-op; different data raises ``RegistryConflictError`` unless
``replace=True`` is passed.  Lookups against a section that was never
loaded raise ``NotInitializedError``; unknown ids raise
``UnknownTemplateError``.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Iterable, Mapping

from pydantic import TypeAdapter

from procgen.core.errors import NotInitializedError, RegistryConflictError, UnknownTemplateError
from procgen.core.templates import (
    DialogueSnippet,
    DialogueTreeTemplate,
    EncounterTemplate,
    EnemyTemplate,
    ItemAffixes,
    ItemDef,
    ItemMaterial,
    ItemQuality,
    ItemStyle,
    ItemTemplate,
    LocationItemPool,
    LootTable,
    NamePool,
    NPCTemplate,
    PlaceNamePool,
    QuestTemplate,
    ScheduleTemplate,
    ShopTemplate,
)

logger = logging.getLogger(__name__)

# Section names accepted by is_loaded() / require()
NAME_POOLS = "name_pools"
PLACE_NAME_POOLS = "place_name_pools"
NPC_TEMPLATES = "npc_templates"
QUEST_TEMPLATES = "quest_templates"
ENCOUNTER_TEMPLATES = "encounter_templates"
ENEMY_TEMPLATES = "enemy_templates"
DIALOGUE = "dialogue"
ITEMS = "items"
ITEM_GENERATION = "item_generation"
SCHEDULES = "schedules"
FLAVOR = "flavor"

_NAME_POOL_LIST = TypeAdapter(list[NamePool])
_PLACE_POOL_LIST = TypeAdapter(list[PlaceNamePool])
_NPC_LIST = TypeAdapter(list[NPCTemplate])
_QUEST_LIST = TypeAdapter(list[QuestTemplate])
_ENCOUNTER_LIST = TypeAdapter(list[EncounterTemplate])
_ENEMY_LIST = TypeAdapter(list[EnemyTemplate])
_SNIPPET_LIST = TypeAdapter(list[DialogueSnippet])
_TREE_LIST = TypeAdapter(list[DialogueTreeTemplate])
_ITEM_LIST = TypeAdapter(list[ItemDef])
_ITEM_POOL_LIST = TypeAdapter(list[LocationItemPool])
_SHOP_LIST = TypeAdapter(list[ShopTemplate])
_ITEM_TEMPLATE_LIST = TypeAdapter(list[ItemTemplate])
_LOOT_TABLE_LIST = TypeAdapter(list[LootTable])
_MATERIAL_LIST = TypeAdapter(list[ItemMaterial])
_QUALITY_LIST = TypeAdapter(list[ItemQuality])
_STYLE_LIST = TypeAdapter(list[ItemStyle])
_AFFIXES = TypeAdapter(ItemAffixes)
_SCHEDULE_LIST = TypeAdapter(list[ScheduleTemplate])
_FLAVOR = TypeAdapter(dict[str, tuple[str, ...]])


def _index_unique(records: Iterable[Any], key: str, kind: str) -> dict[str, Any]:
    index: dict[str, Any] = {}
    for record in records:
        value = getattr(record, key)
        if value in index:
            raise RegistryConflictError(f"Duplicate {kind} id {value!r}")
        index[value] = record
    return index


class TemplateRegistry:
    """Validated, indexed generation data for one host application."""

    def __init__(self) -> None:
        self._raw: dict[str, Any] = {}

        self._name_pools: dict[str, NamePool] = {}
        self._place_pools: dict[str, PlaceNamePool] = {}

        self._npc_templates: dict[str, NPCTemplate] = {}
        self._npc_by_role: dict[str, list[NPCTemplate]] = {}
        self._npc_by_location: dict[str, list[NPCTemplate]] = {}
        self._npc_everywhere: list[NPCTemplate] = []

        self._quest_templates: dict[str, QuestTemplate] = {}
        self._quest_by_archetype: dict[str, list[QuestTemplate]] = {}

        self._encounter_templates: dict[str, EncounterTemplate] = {}
        self._enemy_templates: dict[str, EnemyTemplate] = {}

        self._snippets_by_category: dict[str, list[DialogueSnippet]] = {}
        self._trees: dict[str, DialogueTreeTemplate] = {}

        self._items: dict[str, ItemDef] = {}
        self._item_pools: dict[str, LocationItemPool] = {}
        self._shops: dict[str, ShopTemplate] = {}
        self._shop_by_role: dict[str, ShopTemplate] = {}

        self._item_templates: dict[str, ItemTemplate] = {}
        self._loot_tables: dict[str, LootTable] = {}
        self._materials: tuple[ItemMaterial, ...] = ()
        self._qualities: tuple[ItemQuality, ...] = ()
        self._styles: tuple[ItemStyle, ...] = ()
        self._affixes = ItemAffixes()

        self._schedules: dict[str, ScheduleTemplate] = {}

        self._flavor: dict[str, tuple[str, ...]] = {}

    # -- load bookkeeping --

    def _check(self, section: str, payload: Any, replace: bool) -> bool:
        """Return True if *payload* should be (re)indexed for *section*. Changes nothing."""
        current = self._raw.get(section)
        if current is None or replace:
            return True
        if current == payload:
            logger.debug("Registry section %s reloaded with identical data", section)
            return False
        raise RegistryConflictError(
            f"Registry section {section!r} is already loaded with different data"
        )

    def _accept(self, section: str, payload: Any, replace: bool) -> bool:
        if not self._check(section, payload, replace):
            return False
        self._raw[section] = payload
        return True

    def is_loaded(self, section: str) -> bool:
        return section in self._raw

    def require(self, *sections: str) -> None:
        missing = [s for s in sections if s not in self._raw]
        if missing:
            raise NotInitializedError(f"Template registry sections not initialized: {missing}")

    # -- loaders --

    def init_name_pools(
        self,
        name_pools: Iterable[NamePool | Mapping[str, Any]],
        place_name_pools: Iterable[PlaceNamePool | Mapping[str, Any]] = (),
        *,
        replace: bool = False,
    ) -> None:
        names = _NAME_POOL_LIST.validate_python(list(name_pools))
        places = _PLACE_POOL_LIST.validate_python(list(place_name_pools))
        # both sections are checked before either index changes
        name_index = _index_unique(names, "origin", "name pool")
        place_index = _index_unique(places, "pool_type", "place name pool")
        load_names = self._check(NAME_POOLS, names, replace)
        load_places = self._check(PLACE_NAME_POOLS, places, replace)
        if load_names:
            self._raw[NAME_POOLS] = names
            self._name_pools = name_index
        if load_places:
            self._raw[PLACE_NAME_POOLS] = places
            self._place_pools = place_index
        logger.debug("Loaded %d name pools, %d place pools", len(names), len(places))

    def init_npc_templates(
        self, templates: Iterable[NPCTemplate | Mapping[str, Any]], *, replace: bool = False,
    ) -> None:
        records = _NPC_LIST.validate_python(list(templates))
        if not self._accept(NPC_TEMPLATES, records, replace):
            return
        self._npc_templates = _index_unique(records, "id", "NPC template")
        by_role: dict[str, list[NPCTemplate]] = defaultdict(list)
        by_location: dict[str, list[NPCTemplate]] = defaultdict(list)
        everywhere: list[NPCTemplate] = []
        for t in records:
            by_role[t.role].append(t)
            if t.valid_location_types:
                for location_type in t.valid_location_types:
                    by_location[location_type].append(t)
            else:
                everywhere.append(t)
        self._npc_by_role = dict(by_role)
        self._npc_by_location = dict(by_location)
        self._npc_everywhere = everywhere
        logger.debug("Loaded %d NPC templates", len(records))

    def init_quest_templates(
        self, templates: Iterable[QuestTemplate | Mapping[str, Any]], *, replace: bool = False,
    ) -> None:
        records = _QUEST_LIST.validate_python(list(templates))
        if not self._accept(QUEST_TEMPLATES, records, replace):
            return
        self._quest_templates = _index_unique(records, "id", "quest template")
        by_archetype: dict[str, list[QuestTemplate]] = defaultdict(list)
        for t in records:
            by_archetype[t.archetype].append(t)
        self._quest_by_archetype = dict(by_archetype)
        logger.debug("Loaded %d quest templates", len(records))

    def init_encounter_templates(
        self, templates: Iterable[EncounterTemplate | Mapping[str, Any]], *, replace: bool = False,
    ) -> None:
        records = _ENCOUNTER_LIST.validate_python(list(templates))
        if self._accept(ENCOUNTER_TEMPLATES, records, replace):
            self._encounter_templates = _index_unique(records, "id", "encounter template")

    def init_enemy_templates(
        self, templates: Iterable[EnemyTemplate | Mapping[str, Any]], *, replace: bool = False,
    ) -> None:
        records = _ENEMY_LIST.validate_python(list(templates))
        if self._accept(ENEMY_TEMPLATES, records, replace):
            self._enemy_templates = _index_unique(records, "id", "enemy template")

    def init_dialogue_data(
        self,
        snippets: Iterable[DialogueSnippet | Mapping[str, Any]],
        trees: Iterable[DialogueTreeTemplate | Mapping[str, Any]] = (),
        *,
        replace: bool = False,
    ) -> None:
        snippet_records = _SNIPPET_LIST.validate_python(list(snippets))
        tree_records = _TREE_LIST.validate_python(list(trees))
        if not self._accept(DIALOGUE, (snippet_records, tree_records), replace):
            return
        _index_unique(snippet_records, "id", "dialogue snippet")
        by_category: dict[str, list[DialogueSnippet]] = defaultdict(list)
        for s in snippet_records:
            by_category[s.category].append(s)
        self._snippets_by_category = dict(by_category)
        self._trees = _index_unique(tree_records, "id", "dialogue tree template")

    def init_item_data(
        self,
        items: Iterable[ItemDef | Mapping[str, Any]],
        location_pools: Iterable[LocationItemPool | Mapping[str, Any]] = (),
        shops: Iterable[ShopTemplate | Mapping[str, Any]] = (),
        *,
        replace: bool = False,
    ) -> None:
        item_records = _ITEM_LIST.validate_python(list(items))
        pool_records = _ITEM_POOL_LIST.validate_python(list(location_pools))
        shop_records = _SHOP_LIST.validate_python(list(shops))
        if not self._accept(ITEMS, (item_records, pool_records, shop_records), replace):
            return
        self._items = _index_unique(item_records, "id", "item")
        self._item_pools = _index_unique(pool_records, "location_type", "item pool")
        self._shops = _index_unique(shop_records, "shop_type", "shop template")
        self._shop_by_role = {}
        for shop in shop_records:
            for role in shop.roles:
                self._shop_by_role.setdefault(role, shop)

    def init_item_generation(
        self,
        templates: Iterable[ItemTemplate | Mapping[str, Any]],
        loot_tables: Iterable[LootTable | Mapping[str, Any]] = (),
        *,
        materials: Iterable[ItemMaterial | Mapping[str, Any]],
        qualities: Iterable[ItemQuality | Mapping[str, Any]],
        styles: Iterable[ItemStyle | Mapping[str, Any]],
        affixes: ItemAffixes | Mapping[str, Any] | None = None,
        replace: bool = False,
    ) -> None:
        """Load item templates, loot tables and the material/quality/style pools.

        Every loot entry must name a template in *templates*; catalog item
        references are checked when the loot is rolled.
        """
        template_records = _ITEM_TEMPLATE_LIST.validate_python(list(templates))
        table_records = _LOOT_TABLE_LIST.validate_python(list(loot_tables))
        material_records = tuple(_MATERIAL_LIST.validate_python(list(materials)))
        quality_records = tuple(_QUALITY_LIST.validate_python(list(qualities)))
        style_records = tuple(_STYLE_LIST.validate_python(list(styles)))
        affix_record = _AFFIXES.validate_python(affixes if affixes is not None else {})
        if not (material_records and quality_records and style_records):
            raise ValueError("Item generation needs at least one material, quality and style")

        template_index = _index_unique(template_records, "id", "item template")
        table_index = _index_unique(table_records, "id", "loot table")
        for table in table_records:
            for entry in table.entries:
                if entry.template_id is not None and entry.template_id not in template_index:
                    raise UnknownTemplateError("item template", entry.template_id)

        payload = (template_records, table_records, material_records, quality_records, style_records, affix_record)
        if not self._accept(ITEM_GENERATION, payload, replace):
            return
        self._item_templates = template_index
        self._loot_tables = table_index
        self._materials = material_records
        self._qualities = quality_records
        self._styles = style_records
        self._affixes = affix_record
        logger.debug("Loaded %d item templates, %d loot tables", len(template_records), len(table_records))

    def init_schedule_templates(
        self, templates: Iterable[ScheduleTemplate | Mapping[str, Any]], *, replace: bool = False,
    ) -> None:
        records = _SCHEDULE_LIST.validate_python(list(templates))
        index = _index_unique(records, "id", "schedule template")
        if self._accept(SCHEDULES, records, replace):
            self._schedules = index

    def init_flavor(self, words: Mapping[str, Iterable[str]], *, replace: bool = False) -> None:
        """Load flavor word lists (``hometown``, ``terrain``, ...) used to fill template tokens."""
        records = _FLAVOR.validate_python({k: tuple(v) for k, v in words.items()})
        if self._accept(FLAVOR, records, replace):
            self._flavor = records

    # -- names --

    def name_pool(self, origin: str) -> NamePool:
        self.require(NAME_POOLS)
        try:
            return self._name_pools[origin]
        except KeyError:
            raise UnknownTemplateError("name origin", origin) from None

    def place_name_pool(self, pool_type: str) -> PlaceNamePool:
        self.require(PLACE_NAME_POOLS)
        try:
            return self._place_pools[pool_type]
        except KeyError:
            raise UnknownTemplateError("place name pool", pool_type) from None

    @property
    def name_origins(self) -> list[str]:
        return list(self._name_pools)

    @property
    def place_pool_types(self) -> list[str]:
        return list(self._place_pools)

    # -- NPCs --

    def npc_template(self, template_id: str) -> NPCTemplate:
        self.require(NPC_TEMPLATES)
        try:
            return self._npc_templates[template_id]
        except KeyError:
            raise UnknownTemplateError("NPC template", template_id) from None

    def npc_templates(self) -> list[NPCTemplate]:
        self.require(NPC_TEMPLATES)
        return list(self._npc_templates.values())

    def npc_templates_for_role(self, role: str) -> list[NPCTemplate]:
        self.require(NPC_TEMPLATES)
        return list(self._npc_by_role.get(role, ()))

    def npc_templates_for_location(self, location_type: str) -> list[NPCTemplate]:
        """Templates valid at *location_type*, in registration order."""
        self.require(NPC_TEMPLATES)
        specific = self._npc_by_location.get(location_type, [])
        if not specific:
            return list(self._npc_everywhere)
        chosen = {id(t) for t in specific} | {id(t) for t in self._npc_everywhere}
        return [t for t in self._npc_templates.values() if id(t) in chosen]

    # -- quests --

    def quest_template(self, template_id: str) -> QuestTemplate:
        self.require(QUEST_TEMPLATES)
        try:
            return self._quest_templates[template_id]
        except KeyError:
            raise UnknownTemplateError("quest template", template_id) from None

    def quest_templates(self) -> list[QuestTemplate]:
        self.require(QUEST_TEMPLATES)
        return list(self._quest_templates.values())

    def quest_templates_by_archetype(self, archetype: str) -> list[QuestTemplate]:
        self.require(QUEST_TEMPLATES)
        return list(self._quest_by_archetype.get(archetype, ()))

    # -- encounters --

    def encounter_template(self, template_id: str) -> EncounterTemplate:
        self.require(ENCOUNTER_TEMPLATES)
        try:
            return self._encounter_templates[template_id]
        except KeyError:
            raise UnknownTemplateError("encounter template", template_id) from None

    def encounter_templates(self) -> list[EncounterTemplate]:
        self.require(ENCOUNTER_TEMPLATES)
        return list(self._encounter_templates.values())

    def enemy_template(self, template_id: str) -> EnemyTemplate | None:
        """Enemy lookup by id; ``None`` lets callers fall back to a default archetype."""
        self.require(ENEMY_TEMPLATES)
        return self._enemy_templates.get(template_id)

    # -- dialogue --

    def snippets_by_category(self, category: str) -> list[DialogueSnippet]:
        self.require(DIALOGUE)
        return list(self._snippets_by_category.get(category, ()))

    def dialogue_tree_template(self, template_id: str) -> DialogueTreeTemplate:
        self.require(DIALOGUE)
        try:
            return self._trees[template_id]
        except KeyError:
            raise UnknownTemplateError("dialogue tree template", template_id) from None

    def dialogue_tree_templates(self) -> list[DialogueTreeTemplate]:
        self.require(DIALOGUE)
        return list(self._trees.values())

    # -- items --

    def item(self, item_id: str) -> ItemDef:
        self.require(ITEMS)
        try:
            return self._items[item_id]
        except KeyError:
            raise UnknownTemplateError("item", item_id) from None

    def items(self) -> list[ItemDef]:
        self.require(ITEMS)
        return list(self._items.values())

    def item_pool(self, location_type: str, default: str = "town") -> LocationItemPool:
        self.require(ITEMS)
        pool = self._item_pools.get(location_type) or self._item_pools.get(default)
        if pool is None:
            raise UnknownTemplateError("item pool", location_type)
        return pool

    def shop_for_role(self, role: str, default: str = "general_store") -> ShopTemplate:
        self.require(ITEMS)
        shop = self._shop_by_role.get(role) or self._shops.get(default)
        if shop is None:
            raise UnknownTemplateError("shop template", role)
        return shop

    def shop_template(self, shop_type: str) -> ShopTemplate:
        self.require(ITEMS)
        try:
            return self._shops[shop_type]
        except KeyError:
            raise UnknownTemplateError("shop template", shop_type) from None

    # -- item generation --

    def item_template(self, template_id: str) -> ItemTemplate:
        self.require(ITEM_GENERATION)
        try:
            return self._item_templates[template_id]
        except KeyError:
            raise UnknownTemplateError("item template", template_id) from None

    def item_templates(self, item_type: str | None = None) -> list[ItemTemplate]:
        """Templates in registration order, optionally of one ``ItemType``."""
        self.require(ITEM_GENERATION)
        return [t for t in self._item_templates.values() if item_type is None or t.item_type == item_type]

    def loot_table(self, table_id: str) -> LootTable:
        self.require(ITEM_GENERATION)
        try:
            return self._loot_tables[table_id]
        except KeyError:
            raise UnknownTemplateError("loot table", table_id) from None

    def loot_tables_by_tag(self, tag: str) -> list[LootTable]:
        self.require(ITEM_GENERATION)
        return [t for t in self._loot_tables.values() if tag in t.tags]

    @property
    def materials(self) -> tuple[ItemMaterial, ...]:
        self.require(ITEM_GENERATION)
        return self._materials

    @property
    def qualities(self) -> tuple[ItemQuality, ...]:
        self.require(ITEM_GENERATION)
        return self._qualities

    @property
    def styles(self) -> tuple[ItemStyle, ...]:
        self.require(ITEM_GENERATION)
        return self._styles

    @property
    def affixes(self) -> ItemAffixes:
        self.require(ITEM_GENERATION)
        return self._affixes

    # -- schedules --

    def schedule_template(self, template_id: str) -> ScheduleTemplate:
        self.require(SCHEDULES)
        try:
            return self._schedules[template_id]
        except KeyError:
            raise UnknownTemplateError("schedule template", template_id) from None

    def schedule_templates(self) -> list[ScheduleTemplate]:
        self.require(SCHEDULES)
        return list(self._schedules.values())

    def schedules_for_role(self, role: str) -> list[ScheduleTemplate]:
        self.require(SCHEDULES)
        return [s for s in self._schedules.values() if role in s.valid_roles]

    def schedule_for_role(self, role: str) -> ScheduleTemplate | None:
        """First registered schedule listing *role*; ``None`` if there is none."""
        matches = self.schedules_for_role(role)
        return matches[0] if matches else None

    def schedules_by_tag(self, tag: str) -> list[ScheduleTemplate]:
        self.require(SCHEDULES)
        return [s for s in self._schedules.values() if tag in s.tags]

    # -- flavor --

    def flavor_words(self, key: str) -> tuple[str, ...]:
        self.require(FLAVOR)
        try:
            return self._flavor[key]
        except KeyError:
            raise UnknownTemplateError("flavor word list", key) from None

    def has_flavor(self, key: str) -> bool:
        return key in self._flavor

    # -- introspection --

    def summary(self) -> dict[str, list[str]]:
        """Registered ids per kind (sections not loaded are reported empty)."""
        snippets = [s.id for group in self._snippets_by_category.values() for s in group]
        return {
            "name_origins": list(self._name_pools),
            "place_name_pools": list(self._place_pools),
            "npc_templates": list(self._npc_templates),
            "quest_templates": list(self._quest_templates),
            "encounter_templates": list(self._encounter_templates),
            "enemy_templates": list(self._enemy_templates),
            "dialogue_snippets": snippets,
            "dialogue_trees": list(self._trees),
            "items": list(self._items),
            "shop_templates": list(self._shops),
            "item_templates": list(self._item_templates),
            "loot_tables": list(self._loot_tables),
            "schedules": list(self._schedules),
        }

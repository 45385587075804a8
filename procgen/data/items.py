"""Built-in item catalog, world spawn pools, shop stock, item generation pools and flavor words."""

from __future__ import annotations

from procgen.core.enums import ItemRarity, ItemType
from procgen.core.templates import (
    ItemAffixes,
    ItemDef,
    ItemMaterial,
    ItemPoolEntry,
    ItemQuality,
    ItemStyle,
    ItemTemplate,
    LocationItemPool,
    LootEntry,
    LootTable,
    RarityWeights,
    ShopItemPool,
    ShopStockEntry,
    ShopTemplate,
)

ITEMS: list[ItemDef] = [
    # consumables
    ItemDef(id="bandages", name="Bandages", base_price=5, tags=("medical", "consumable")),
    ItemDef(id="tonic", name="Snake Oil Tonic", base_price=8, tags=("medical", "consumable")),
    ItemDef(id="laudanum", name="Laudanum", base_price=15, tags=("medical", "consumable")),
    ItemDef(id="whiskey", name="Whiskey", base_price=4, tags=("drink", "consumable")),
    ItemDef(id="beans", name="Can of Beans", base_price=2, tags=("food", "consumable")),
    ItemDef(id="jerky", name="Jerky", base_price=3, tags=("food", "consumable")),
    ItemDef(id="coffee", name="Coffee", base_price=3, tags=("food", "consumable")),
    # ammunition
    ItemDef(id="revolver_ammo", name="Revolver Cartridges", base_price=6, tags=("ammo",)),
    ItemDef(id="rifle_ammo", name="Rifle Cartridges", base_price=8, tags=("ammo",)),
    ItemDef(id="shotgun_shells", name="Shotgun Shells", base_price=7, tags=("ammo",)),
    # weapons
    ItemDef(id="revolver", name="Single-Action Revolver", base_price=45, tags=("weapon", "pistol")),
    ItemDef(id="rifle", name="Lever-Action Rifle", base_price=80, tags=("weapon", "rifle")),
    ItemDef(id="shotgun", name="Double-Barrel Shotgun", base_price=65, tags=("weapon", "shotgun")),
    ItemDef(id="knife", name="Bowie Knife", base_price=12, tags=("weapon", "melee")),
    # tools and supplies
    ItemDef(id="rope", name="Rope", base_price=4, tags=("tool",)),
    ItemDef(id="lantern", name="Lantern", base_price=10, tags=("tool",)),
    ItemDef(id="pickaxe", name="Pickaxe", base_price=18, tags=("tool", "mining")),
    ItemDef(id="dynamite", name="Dynamite", base_price=25, tags=("explosive", "mining")),
    ItemDef(id="horseshoe", name="Horseshoe", base_price=3, tags=("tool", "ranch")),
    ItemDef(id="scrap_metal", name="Scrap Metal", base_price=2, tags=("material",)),
    ItemDef(id="gears", name="Brass Gears", base_price=9, tags=("material", "mechanical")),
    # valuables
    ItemDef(id="gold_nugget", name="Gold Nugget", base_price=40, tags=("valuable", "ore")),
    ItemDef(id="silver_ore", name="Silver Ore", base_price=20, tags=("valuable", "ore")),
    ItemDef(id="pocket_watch", name="Pocket Watch", base_price=30, tags=("valuable",)),
    ItemDef(id="old_map", name="Faded Map", base_price=15, tags=("document", "valuable")),
    ItemDef(id="wanted_poster", name="Wanted Poster", base_price=0, tags=("document", "evidence")),
    ItemDef(id="letter", name="Sealed Letter", base_price=0, tags=("document",)),
    # animal parts
    ItemDef(id="animal_hide", name="Animal Hide", base_price=6, tags=("hide", "material")),
    ItemDef(id="venom_gland", name="Venom Gland", base_price=11, tags=("venom", "material", "medical")),
]


LOCATION_ITEM_POOLS: list[LocationItemPool] = [
    LocationItemPool(
        location_type="town",
        entries=(
            ItemPoolEntry(item_id="bandages", weight=10, quantity=(1, 3)),
            ItemPoolEntry(item_id="whiskey", weight=8, quantity=(1, 2)),
            ItemPoolEntry(item_id="revolver_ammo", weight=6, quantity=(6, 12)),
            ItemPoolEntry(item_id="beans", weight=6, quantity=(1, 3)),
            ItemPoolEntry(item_id="rope", weight=3),
            ItemPoolEntry(item_id="pocket_watch", weight=1),
        ),
    ),
    LocationItemPool(
        location_type="city",
        entries=(
            ItemPoolEntry(item_id="bandages", weight=8, quantity=(1, 3)),
            ItemPoolEntry(item_id="tonic", weight=6),
            ItemPoolEntry(item_id="whiskey", weight=6, quantity=(1, 2)),
            ItemPoolEntry(item_id="revolver_ammo", weight=5, quantity=(6, 12)),
            ItemPoolEntry(item_id="letter", weight=3),
            ItemPoolEntry(item_id="pocket_watch", weight=2),
        ),
    ),
    LocationItemPool(
        location_type="mine",
        entries=(
            ItemPoolEntry(item_id="pickaxe", weight=6),
            ItemPoolEntry(item_id="lantern", weight=6),
            ItemPoolEntry(item_id="dynamite", weight=4, quantity=(1, 3)),
            ItemPoolEntry(item_id="silver_ore", weight=5, quantity=(1, 4)),
            ItemPoolEntry(item_id="gold_nugget", weight=1),
        ),
    ),
    LocationItemPool(
        location_type="ruin",
        entries=(
            ItemPoolEntry(item_id="scrap_metal", weight=10, quantity=(2, 6)),
            ItemPoolEntry(item_id="gears", weight=5, quantity=(1, 3)),
            ItemPoolEntry(item_id="old_map", weight=2),
            ItemPoolEntry(item_id="pocket_watch", weight=2),
            ItemPoolEntry(item_id="rifle_ammo", weight=4, quantity=(4, 10)),
        ),
    ),
    LocationItemPool(
        location_type="ranch",
        entries=(
            ItemPoolEntry(item_id="horseshoe", weight=10, quantity=(1, 4)),
            ItemPoolEntry(item_id="rope", weight=8),
            ItemPoolEntry(item_id="jerky", weight=6, quantity=(1, 3)),
            ItemPoolEntry(item_id="shotgun_shells", weight=4, quantity=(4, 8)),
        ),
    ),
    LocationItemPool(
        location_type="outpost",
        entries=(
            ItemPoolEntry(item_id="coffee", weight=8, quantity=(1, 2)),
            ItemPoolEntry(item_id="jerky", weight=8, quantity=(1, 3)),
            ItemPoolEntry(item_id="bandages", weight=5),
            ItemPoolEntry(item_id="rifle_ammo", weight=5, quantity=(4, 10)),
            ItemPoolEntry(item_id="wanted_poster", weight=2),
        ),
    ),
    LocationItemPool(
        location_type="camp",
        entries=(
            ItemPoolEntry(item_id="whiskey", weight=8),
            ItemPoolEntry(item_id="beans", weight=8, quantity=(1, 2)),
            ItemPoolEntry(item_id="revolver_ammo", weight=6, quantity=(3, 8)),
            ItemPoolEntry(item_id="knife", weight=2),
            ItemPoolEntry(item_id="dynamite", weight=1),
        ),
    ),
]



# Staples are fixed catalog lines; pools are generated per visit
SHOP_TEMPLATES: list[ShopTemplate] = [
    ShopTemplate(
        shop_type="general_store",
        roles=("merchant", "innkeeper", "stable_master"),
        entries=(
            ShopStockEntry(item_id="beans", stock=(5, 15)),
            ShopStockEntry(item_id="jerky", stock=(5, 15)),
            ShopStockEntry(item_id="coffee", stock=(3, 10)),
            ShopStockEntry(item_id="rope", stock=(2, 6)),
            ShopStockEntry(item_id="lantern", stock=(1, 4)),
            ShopStockEntry(item_id="bandages", stock=(3, 8)),
            ShopStockEntry(item_id="revolver_ammo", stock=(10, 30)),
        ),
        pools=(
            ShopItemPool(tags=("clothing", "apparel"), count=(1, 3)),
            ShopItemPool(tags=("consumable", "food"), count=(1, 3)),
            ShopItemPool(tags=("tool",), count=(0, 2)),
        ),
        buy_multiplier=1.15,
        sell_multiplier=0.45,
    ),
    ShopTemplate(
        shop_type="saloon",
        roles=("bartender",),
        entries=(
            ShopStockEntry(item_id="whiskey", stock=(10, 30)),
            ShopStockEntry(item_id="beans", stock=(2, 6)),
            ShopStockEntry(item_id="coffee", stock=(2, 6)),
        ),
        pools=(
            ShopItemPool(tags=("drink",), count=(2, 4), rarity_weights=RarityWeights(60, 30, 9, 1)),
            ShopItemPool(tags=("food",), count=(1, 2)),
        ),
        buy_multiplier=1.1,
        sell_multiplier=0.35,
    ),
    ShopTemplate(
        shop_type="blacksmith",
        roles=("blacksmith",),
        entries=(
            ShopStockEntry(item_id="horseshoe", stock=(5, 20)),
            ShopStockEntry(item_id="pickaxe", stock=(1, 3)),
            ShopStockEntry(item_id="scrap_metal", stock=(5, 15)),
        ),
        pools=(
            ShopItemPool(tags=("weapon", "melee", "blade"), count=(1, 3)),
            ShopItemPool(tags=("armor", "accessory"), count=(0, 2)),
        ),
        buy_multiplier=1.2,
        sell_multiplier=0.5,
    ),
    ShopTemplate(
        shop_type="gunsmith",
        roles=("gunsmith",),
        entries=(
            ShopStockEntry(item_id="revolver_ammo", stock=(20, 50)),
            ShopStockEntry(item_id="rifle_ammo", stock=(15, 40)),
            ShopStockEntry(item_id="shotgun_shells", stock=(10, 30)),
        ),
        pools=(
            ShopItemPool(tags=("weapon", "pistol"), count=(2, 4), rarity_weights=RarityWeights(50, 35, 12, 3)),
            ShopItemPool(tags=("weapon", "rifle"), count=(1, 3), rarity_weights=RarityWeights(50, 35, 12, 3)),
            ShopItemPool(tags=("weapon", "shotgun"), count=(0, 2)),
        ),
        buy_multiplier=1.25,
        sell_multiplier=0.55,
    ),
    ShopTemplate(
        shop_type="apothecary",
        roles=("doctor",),
        entries=(
            ShopStockEntry(item_id="bandages", stock=(5, 15)),
            ShopStockEntry(item_id="tonic", stock=(2, 8)),
            ShopStockEntry(item_id="laudanum", stock=(1, 4)),
        ),
        pools=(
            ShopItemPool(tags=("medicine", "healing"), count=(2, 4), rarity_weights=RarityWeights(55, 33, 10, 2)),
            ShopItemPool(tags=("tonic", "buff"), count=(1, 2), rarity_weights=RarityWeights(45, 38, 14, 3)),
        ),
        buy_multiplier=1.3,
        sell_multiplier=0.5,
    ),
    ShopTemplate(
        shop_type="trading_post",
        roles=("fence", "prospector"),
        entries=(
            ShopStockEntry(item_id="jerky", stock=(2, 8)),
            ShopStockEntry(item_id="rifle_ammo", stock=(5, 20)),
        ),
        pools=(
            ShopItemPool(tags=("valuable",), count=(1, 3)),
            ShopItemPool(tags=("hide",), count=(0, 2)),
            ShopItemPool(tags=("weapon",), count=(0, 2), rarity_weights=RarityWeights(40, 40, 15, 5)),
            ShopItemPool(tags=("armor",), count=(0, 1), rarity_weights=RarityWeights(40, 40, 15, 5)),
        ),
        buy_multiplier=1.5,
        sell_multiplier=0.6,
    ),
]


# ---------------------------------------------------------------------------
# Item generation pools
# ---------------------------------------------------------------------------

MATERIALS: list[ItemMaterial] = [
    ItemMaterial(id="iron", name="Iron", tags=("metal", "basic")),
    ItemMaterial(id="steel", name="Steel", value_multiplier=1.5, stat_multiplier=1.2, tags=("metal", "refined")),
    ItemMaterial(
        id="brass", name="Brass", value_multiplier=1.3, stat_multiplier=1.1,
        min_rarity=ItemRarity.UNCOMMON, tags=("metal", "steampunk"),
    ),
    ItemMaterial(
        id="silver", name="Silver", value_multiplier=2.5, stat_multiplier=1.3,
        min_rarity=ItemRarity.RARE, tags=("metal", "precious"),
    ),
    ItemMaterial(
        id="gold", name="Gold", value_multiplier=5.0, stat_multiplier=1.0,
        min_rarity=ItemRarity.RARE, tags=("metal", "precious", "decorative"),
    ),
    ItemMaterial(id="leather", name="Leather", value_multiplier=0.8, stat_multiplier=0.9, tags=("organic", "flexible")),
    ItemMaterial(id="cloth", name="Cloth", value_multiplier=0.5, stat_multiplier=0.7, tags=("organic", "light")),
    ItemMaterial(
        id="reinforced_leather", name="Reinforced Leather", value_multiplier=1.4, stat_multiplier=1.1,
        min_rarity=ItemRarity.UNCOMMON, tags=("organic", "reinforced"),
    ),
    ItemMaterial(
        id="damascus_steel", name="Damascus Steel", value_multiplier=3.0, stat_multiplier=1.5,
        min_rarity=ItemRarity.RARE, tags=("metal", "premium", "exotic"),
    ),
    ItemMaterial(
        id="clockwork_alloy", name="Clockwork Alloy", value_multiplier=4.0, stat_multiplier=1.4,
        min_rarity=ItemRarity.LEGENDARY, tags=("metal", "steampunk", "exotic"),
    ),
]

QUALITIES: list[ItemQuality] = [
    ItemQuality(id="rusty", name="Rusty", adjective="Rusty", value_multiplier=0.5, stat_multiplier=0.7, weight=15),
    ItemQuality(id="worn", name="Worn", adjective="Worn", value_multiplier=0.7, stat_multiplier=0.85, weight=25),
    ItemQuality(id="standard", name="Standard", weight=35),
    ItemQuality(
        id="fine", name="Fine", adjective="Fine", value_multiplier=1.5, stat_multiplier=1.15,
        rarity=ItemRarity.UNCOMMON, weight=18,
    ),
    ItemQuality(
        id="masterwork", name="Masterwork", adjective="Masterwork", value_multiplier=2.5, stat_multiplier=1.3,
        rarity=ItemRarity.RARE, weight=6,
    ),
    ItemQuality(
        id="legendary", name="Legendary", adjective="Legendary", value_multiplier=5.0, stat_multiplier=1.5,
        rarity=ItemRarity.LEGENDARY, weight=1,
    ),
]

STYLES: list[ItemStyle] = [
    ItemStyle(id="frontier", name="Frontier", description_suffix="Made for the harsh frontier life.",
              tags=("western", "practical")),
    ItemStyle(id="military", name="Military", description_suffix="Standard military issue.",
              value_multiplier=1.2, tags=("military", "regulation")),
    ItemStyle(id="ornate", name="Ornate", description_suffix="Decorated with intricate engravings.",
              value_multiplier=1.8, tags=("decorative", "fancy")),
    ItemStyle(id="rugged", name="Rugged", description_suffix="Built to last in the toughest conditions.",
              value_multiplier=1.1, tags=("durable", "practical")),
    ItemStyle(id="elegant", name="Elegant", description_suffix="A refined piece of craftsmanship.",
              value_multiplier=2.0, tags=("fancy", "sophisticated")),
    ItemStyle(id="steampunk", name="Steampunk", description_suffix="Enhanced with brass gears and steam mechanisms.",
              value_multiplier=2.5, tags=("steampunk", "mechanical")),
]

ITEM_AFFIXES = ItemAffixes(
    weapon_prefixes={
        "revolver": (
            "Peacemaker", "Six-Shooter", "Colt", "Remington", "Schofield", "Navy", "Army", "Frontier",
            "Gunslinger's",
        ),
        "rifle": (
            "Repeater", "Carbine", "Sharps", "Winchester", "Henry", "Lever-Action", "Bolt-Action", "Buffalo",
            "Scout's",
        ),
        "shotgun": ("Scattergun", "Coach Gun", "Double-Barrel", "Pump-Action", "Buckshot", "Sawed-Off", "Fowling"),
        "knife": ("Bowie", "Hunting", "Skinning", "Fighting", "Frontier", "Camp", "Trapper's", "Ranger's"),
        "explosive": ("Dynamite", "Blasting", "Mining", "Demolition"),
        "melee": ("Hatchet", "Tomahawk", "Club", "Pickaxe", "Shovel", "Crowbar", "Hammer"),
    },
    weapon_suffixes=(
        "", "of the West", "of Justice", "of the Frontier", "Special", "Deluxe", "Custom", "Mark II", "Express",
    ),
    armor_prefixes={
        "head": ("Cowboy Hat", "Stetson", "Bandana", "Cavalry Hat", "Derby", "Miner's Helmet", "Goggles"),
        "body": ("Duster", "Vest", "Poncho", "Jacket", "Coat", "Shirt", "Overalls", "Chaps"),
        "legs": ("Trousers", "Chaps", "Dungarees", "Riding Pants", "Work Pants"),
        "accessory": ("Belt", "Holster", "Bandolier", "Gloves", "Boots", "Spurs", "Watch", "Charm"),
    },
    armor_suffixes=("", "of Protection", "of the Trail", "of the Range", "Special", "Reinforced", "Padded"),
    consumable_prefixes={
        "healing": ("Dr. Thornton's", "Snake Oil", "Miracle", "Patent", "Frontier", "Healing"),
        "food": ("Trail", "Camp", "Frontier", "Cowboy", "Ranch", "Homemade"),
        "drink": ("Strong", "Smooth", "Aged", "Local", "Imported", "Frontier"),
        "buff": ("Invigorating", "Fortifying", "Energizing", "Stimulating", "Potent"),
    },
    consumable_suffixes=("Tonic", "Elixir", "Remedy", "Medicine", "Potion", "Brew", "Concoction"),
)


# Fallbacks for a registry that carries no template of the requested type
DEFAULT_WEAPON_TEMPLATE = ItemTemplate(
    id="default_weapon",
    name="Default Weapon",
    item_type=ItemType.WEAPON,
    description_templates=("A {{quality}} {{material}} weapon dealing {{damage}} damage.",),
    rarity_weights=RarityWeights(60, 30, 8, 2),
    value_range=(10, 100),
    weight_range=(1.0, 5.0),
    tags=("weapon",),
    weapon_type="revolver",
    damage_range=(10, 25),
    accuracy_range=(60, 85),
    range_range=(20, 50),
    fire_rate_range=(0.5, 2.0),
    ammo_type="pistol",
    clip_size_range=(5, 8),
)

DEFAULT_ARMOR_TEMPLATE = ItemTemplate(
    id="default_armor",
    name="Default Armor",
    item_type=ItemType.ARMOR,
    description_templates=("{{quality}} {{material}} protection with {{defense}} defense.",),
    rarity_weights=RarityWeights(65, 28, 6, 1),
    value_range=(5, 75),
    weight_range=(0.5, 3.0),
    tags=("armor",),
    armor_slot="body",
    defense_range=(3, 15),
    movement_penalty_range=(0.0, 0.2),
)

DEFAULT_CONSUMABLE_TEMPLATE = ItemTemplate(
    id="default_consumable",
    name="Default Consumable",
    item_type=ItemType.CONSUMABLE,
    description_templates=("Restores {{heal_amount}} health and {{stamina_amount}} stamina.",),
    value_range=(1, 20),
    weight_range=(0.1, 0.5),
    tags=("consumable", "healing"),
    heal_range=(10, 50),
    stamina_range=(0, 30),
)


ITEM_TEMPLATES: list[ItemTemplate] = [
    # -- weapons --
    ItemTemplate(
        id="revolver_template",
        name="Revolver",
        item_type=ItemType.WEAPON,
        description_templates=(
            "A {{material}} revolver with excellent balance. Deals {{damage}} damage at {{accuracy}}% accuracy.",
            "This trusty sidearm has seen many frontier battles.",
        ),
        rarity_weights=RarityWeights(55, 32, 10, 3),
        value_range=(20, 80),
        weight_range=(2.0, 3.0),
        tags=("weapon", "firearm", "pistol"),
        weapon_type="revolver",
        damage_range=(12, 25),
        accuracy_range=(65, 85),
        range_range=(25, 40),
        fire_rate_range=(1.2, 2.0),
        ammo_type="pistol",
        clip_size_range=(5, 8),
    ),
    ItemTemplate(
        id="rifle_template",
        name="Rifle",
        item_type=ItemType.WEAPON,
        description_templates=(
            "A precision {{material}} rifle for long-range work. {{damage}} damage at {{accuracy}}% accuracy.",
            "Perfect for hunting game or defending the homestead.",
        ),
        rarity_weights=RarityWeights(50, 35, 12, 3),
        value_range=(40, 150),
        weight_range=(3.5, 5.0),
        tags=("weapon", "firearm", "rifle", "long_gun"),
        weapon_type="rifle",
        damage_range=(20, 40),
        accuracy_range=(75, 92),
        range_range=(80, 150),
        fire_rate_range=(0.4, 1.2),
        ammo_type="rifle",
        clip_size_range=(5, 15),
    ),
    ItemTemplate(
        id="shotgun_template",
        name="Shotgun",
        item_type=ItemType.WEAPON,
        description_templates=(
            "A {{material}} {{weapon_type}} that clears a doorway. {{damage}} damage up close.",
            "Loud, heavy and hard to argue with.",
        ),
        rarity_weights=RarityWeights(55, 33, 10, 2),
        value_range=(30, 110),
        weight_range=(3.0, 4.5),
        tags=("weapon", "firearm", "shotgun", "long_gun"),
        weapon_type="shotgun",
        damage_range=(28, 45),
        accuracy_range=(55, 70),
        range_range=(10, 25),
        fire_rate_range=(0.5, 1.0),
        ammo_type="shotgun",
        clip_size_range=(2, 6),
    ),
    ItemTemplate(
        id="knife_template",
        name="Knife",
        item_type=ItemType.WEAPON,
        description_templates=(
            "A sharp {{material}} blade for close combat. {{damage}} damage.",
            "Every frontiersman needs a good knife.",
        ),
        rarity_weights=RarityWeights(60, 30, 8, 2),
        value_range=(5, 40),
        weight_range=(0.4, 1.2),
        tags=("weapon", "melee", "blade"),
        weapon_type="knife",
        damage_range=(6, 18),
        accuracy_range=(80, 95),
        range_range=(0, 0),
        fire_rate_range=(1.5, 2.5),
        ammo_type="none",
        clip_size_range=(0, 0),
    ),
    # -- armor --
    ItemTemplate(
        id="body_armor_template",
        name="Body Armor",
        item_type=ItemType.ARMOR,
        description_templates=(
            "A {{material}} garment providing {{defense}} defense against harm.",
            "Rugged protection for the frontier traveler.",
        ),
        rarity_weights=RarityWeights(55, 32, 10, 3),
        value_range=(15, 100),
        weight_range=(1.0, 3.0),
        tags=("armor", "body", "torso", "clothing"),
        armor_slot="body",
        defense_range=(5, 20),
        movement_penalty_range=(0.0, 0.15),
    ),
    ItemTemplate(
        id="hat_template",
        name="Hat",
        item_type=ItemType.ARMOR,
        description_templates=(
            "A {{quality}} {{slot}} piece that keeps the sun off. {{defense}} defense.",
            "Every rider on the trail wears one.",
        ),
        rarity_weights=RarityWeights(60, 30, 8, 2),
        value_range=(5, 40),
        weight_range=(0.2, 0.8),
        tags=("armor", "head", "clothing", "apparel"),
        armor_slot="head",
        defense_range=(1, 6),
        movement_penalty_range=(0.0, 0.0),
    ),
    ItemTemplate(
        id="accessory_template",
        name="Accessory",
        item_type=ItemType.ARMOR,
        description_templates=(
            "A {{quality}} accessory that provides subtle benefits.",
            "A lucky charm from the frontier.",
        ),
        rarity_weights=RarityWeights(50, 35, 12, 3),
        value_range=(10, 80),
        weight_range=(0.1, 0.5),
        tags=("armor", "accessory", "trinket", "apparel"),
        armor_slot="accessory",
        defense_range=(0, 5),
        movement_penalty_range=(0.0, 0.0),
    ),
    # -- consumables --
    ItemTemplate(
        id="healing_tonic_template",
        name="Healing Tonic",
        item_type=ItemType.CONSUMABLE,
        description_templates=(
            "A {{quality}} tonic that restores {{heal_amount}} health.",
            "Frontier medicine at its finest.",
        ),
        rarity_weights=RarityWeights(60, 30, 8, 2),
        value_range=(3, 25),
        weight_range=(0.2, 0.4),
        tags=("consumable", "healing", "medical", "medicine"),
        heal_range=(15, 60),
        stamina_range=(0, 10),
        buff_type="health_regen",
        buff_duration_range=(30, 120),
        buff_strength_range=(1, 5),
    ),
    ItemTemplate(
        id="food_template",
        name="Trail Food",
        item_type=ItemType.CONSUMABLE,
        description_templates=(
            "{{quality}} food that restores {{heal_amount}} health and {{stamina_amount}} stamina.",
            "Sustenance for the long trail ahead.",
        ),
        rarity_weights=RarityWeights(75, 22, 3, 0),
        value_range=(1, 10),
        weight_range=(0.2, 0.5),
        tags=("consumable", "food"),
        heal_range=(5, 25),
        stamina_range=(10, 40),
    ),
    ItemTemplate(
        id="drink_template",
        name="Saloon Pour",
        item_type=ItemType.CONSUMABLE,
        description_templates=(
            "A {{quality}} bottle that restores {{stamina_amount}} stamina.",
            "Burns going down and warms you through.",
        ),
        rarity_weights=RarityWeights(65, 27, 7, 1),
        value_range=(2, 15),
        weight_range=(0.5, 1.0),
        tags=("consumable", "drink"),
        heal_range=(0, 10),
        stamina_range=(10, 30),
        buff_type="courage",
        buff_duration_range=(30, 90),
        buff_strength_range=(1, 10),
    ),
    ItemTemplate(
        id="buff_elixir_template",
        name="Elixir",
        item_type=ItemType.CONSUMABLE,
        description_templates=(
            "A potent {{quality}} elixir providing {{buff_strength}}% boost for {{buff_duration}} seconds.",
            "Liquid courage from the frontier.",
        ),
        rarity_weights=RarityWeights(40, 40, 15, 5),
        value_range=(10, 50),
        weight_range=(0.2, 0.3),
        tags=("consumable", "buff", "tonic", "elixir"),
        heal_range=(0, 10),
        stamina_range=(20, 50),
        buff_type="damage_boost",
        buff_duration_range=(60, 300),
        buff_strength_range=(5, 25),
    ),
]


# ---------------------------------------------------------------------------
# Loot tables
# ---------------------------------------------------------------------------

# Every loot_table_id named by an enemy or encounter template resolves here
LOOT_TABLES: list[LootTable] = [
    LootTable(
        id="generic_loot",
        name="Scavenged Odds and Ends",
        entries=(
            LootEntry(item_id="bandages", weight=20, quantity=(1, 2)),
            LootEntry(item_id="revolver_ammo", weight=20, quantity=(3, 8)),
            LootEntry(template_id="food_template", weight=15),
            LootEntry(item_id="scrap_metal", weight=10, quantity=(1, 3)),
        ),
        rolls=1,
        empty_chance=0.3,
        tags=("enemy", "common"),
    ),
    LootTable(
        id="bandit_common",
        name="Bandit Pockets",
        entries=(
            LootEntry(item_id="revolver_ammo", weight=30, quantity=(4, 10)),
            LootEntry(item_id="whiskey", weight=20),
            LootEntry(template_id="healing_tonic_template", weight=15),
            LootEntry(template_id="knife_template", weight=10),
            LootEntry(item_id="wanted_poster", weight=5),
        ),
        rolls=2,
        empty_chance=0.25,
        tags=("enemy", "outlaw", "bandit"),
    ),
    LootTable(
        id="bandit_rare",
        name="Gunhand's Kit",
        entries=(
            LootEntry(template_id="revolver_template", weight=25),
            LootEntry(template_id="body_armor_template", weight=10),
            LootEntry(template_id="buff_elixir_template", weight=10),
            LootEntry(item_id="pocket_watch", weight=10),
            LootEntry(item_id="rifle_ammo", weight=15, quantity=(4, 10)),
        ),
        rolls=2,
        empty_chance=0.15,
        tags=("enemy", "outlaw", "bandit"),
    ),
    LootTable(
        id="bandit_boss",
        name="Gang Leader's Stash",
        entries=(
            LootEntry(template_id="revolver_template", weight=25),
            LootEntry(template_id="rifle_template", weight=15, level_range=(3, 10)),
            LootEntry(template_id="accessory_template", weight=15),
            LootEntry(item_id="gold_nugget", weight=15, quantity=(1, 3)),
            LootEntry(item_id="old_map", weight=5),
        ),
        rolls=3,
        tags=("enemy", "outlaw", "boss"),
    ),
    LootTable(
        id="wildlife_pelt",
        name="Animal Remains",
        entries=(
            LootEntry(item_id="animal_hide", weight=60, quantity=(1, 2)),
            LootEntry(item_id="jerky", weight=40, quantity=(1, 3)),
        ),
        rolls=1,
        empty_chance=0.2,
        tags=("wildlife",),
    ),
    LootTable(
        id="wildlife_venom",
        name="Venomous Remains",
        entries=(
            LootEntry(item_id="venom_gland", weight=70),
            LootEntry(item_id="animal_hide", weight=30),
        ),
        rolls=1,
        empty_chance=0.4,
        tags=("wildlife", "venom"),
    ),
    LootTable(
        id="scrap_parts",
        name="Salvaged Parts",
        entries=(
            LootEntry(item_id="scrap_metal", weight=50, quantity=(2, 6)),
            LootEntry(item_id="gears", weight=35, quantity=(1, 4)),
            LootEntry(template_id="accessory_template", weight=5, level_range=(4, 10)),
        ),
        rolls=2,
        empty_chance=0.1,
        tags=("automaton", "mechanical"),
    ),
    LootTable(
        id="common_enemy_loot",
        name="Common Enemy Loot",
        entries=(
            LootEntry(template_id="healing_tonic_template", weight=30, quantity=(1, 2)),
            LootEntry(template_id="food_template", weight=25, quantity=(1, 3)),
            LootEntry(template_id="knife_template", weight=10),
            LootEntry(template_id="revolver_template", weight=5),
        ),
        rolls=2,
        empty_chance=0.2,
        tags=("enemy", "common"),
    ),
    LootTable(
        id="outlaw_loot",
        name="Outlaw Loot",
        entries=(
            LootEntry(template_id="revolver_template", weight=25),
            LootEntry(template_id="knife_template", weight=20),
            LootEntry(template_id="healing_tonic_template", weight=20, quantity=(1, 2)),
            LootEntry(template_id="buff_elixir_template", weight=10),
            LootEntry(template_id="body_armor_template", weight=5),
        ),
        rolls=3,
        empty_chance=0.1,
        tags=("enemy", "outlaw", "bandit"),
    ),
    LootTable(
        id="treasure_chest",
        name="Treasure Chest",
        entries=(
            LootEntry(template_id="revolver_template", weight=20),
            LootEntry(template_id="rifle_template", weight=15, level_range=(3, 10)),
            LootEntry(template_id="body_armor_template", weight=15),
            LootEntry(template_id="accessory_template", weight=20),
            LootEntry(template_id="buff_elixir_template", weight=15, quantity=(1, 2)),
            LootEntry(template_id="healing_tonic_template", weight=15, quantity=(2, 4)),
        ),
        rolls=4,
        tags=("treasure", "chest", "hidden"),
    ),
    LootTable(
        id="mining_loot",
        name="Mining Area Loot",
        entries=(
            LootEntry(template_id="healing_tonic_template", weight=25, quantity=(1, 2)),
            LootEntry(template_id="food_template", weight=30, quantity=(1, 3)),
            LootEntry(template_id="knife_template", weight=15, tags=("mining",)),
            LootEntry(item_id="silver_ore", weight=20, quantity=(1, 3)),
        ),
        rolls=2,
        empty_chance=0.3,
        tags=("mining", "industrial"),
    ),
]


FLAVOR_WORDS: dict[str, tuple[str, ...]] = {
    "hometown": (
        "Baltimore", "St. Louis", "New Orleans", "Boston", "Sacramento", "Santa Fe",
        "Chicago", "Cork", "Hamburg", "Canton", "Monterrey", "Savannah",
    ),
    "relative": ("brother", "sister", "father", "mother", "cousin", "partner", "son", "daughter"),
    "event": (
        "the fire of '71", "a bad winter", "the war", "a bank failure",
        "a cattle drive gone wrong", "a claim dispute", "the cholera outbreak",
    ),
    "adjective": ("dusty", "ragged", "sun-scorched", "scowling", "masked", "nervous"),
    "terrain": ("ridge", "arroyo", "mesa", "scrub", "dry wash", "rocks", "tall grass"),
    "cover": ("a boulder", "a dead juniper", "an overturned wagon", "a rock ledge", "the brush"),
    "clothing": ("long dusters", "flour-sack masks", "faded bandanas", "cavalry coats"),
}

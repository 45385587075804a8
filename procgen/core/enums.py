"""Enumerations used throughout the generators."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Gender(str, Enum):
    """Gender drawn for generated names and NPCs.

    Order matters: gender weight tuples are (male, female, neutral).
    """

    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"


GENDERS: tuple[Gender, ...] = (Gender.MALE, Gender.FEMALE, Gender.NEUTRAL)


@unique
class SizeBucket(str, Enum):
    """Settlement size, drives how many NPCs a location receives."""

    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@unique
class TargetType(str, Enum):
    """Kind of entity a quest objective binds to."""

    NPC = "npc"
    ITEM = "item"
    LOCATION = "location"
    ENEMY = "enemy"
    ANY = "any"


@unique
class TimeOfDay(str, Enum):
    NIGHT = "night"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    @classmethod
    def from_hour(cls, hour: float) -> TimeOfDay:
        """Bucket a 0-24 game hour: <6 night, <12 morning, <18 afternoon."""
        if hour < 6:
            return cls.NIGHT
        if hour < 12:
            return cls.MORNING
        if hour < 18:
            return cls.AFTERNOON
        return cls.EVENING


@unique
class StructureState(str, Enum):
    FUNCTIONAL = "functional"
    BROKEN = "broken"
    LOCKED = "locked"


@unique
class ItemRarity(str, Enum):
    """Item rarity tiers, lowest first."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return RARITY_ORDER.index(self)


RARITY_ORDER: tuple[ItemRarity, ...] = (
    ItemRarity.COMMON,
    ItemRarity.UNCOMMON,
    ItemRarity.RARE,
    ItemRarity.LEGENDARY,
)


@unique
class ItemType(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    CONSUMABLE = "consumable"


@unique
class ScheduleActivity(str, Enum):
    SLEEP = "sleep"
    WORK = "work"
    EAT = "eat"
    PATROL = "patrol"
    SOCIALIZE = "socialize"
    PRAY = "pray"
    SHOP = "shop"
    TRAVEL = "travel"
    IDLE = "idle"

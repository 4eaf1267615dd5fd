"""Stat names, equipment slots, damage types, and other enumerations.

String-valued enums so that build data coming from UI or storage
collaborators (which use the plain camelCase names) maps straight onto them.
"""

from enum import Enum


GAME_VERSION = "0.1.0"


class StatName(str, Enum):
    """Primary attributes tracked on every build."""
    STRENGTH = "strength"
    AGILITY = "agility"
    WILL = "will"
    KNOWLEDGE = "knowledge"
    HEALTH = "health"
    RESOURCE = "resource"   # spells, stamina, etc.


class ItemSlot(str, Enum):
    """Where an item can be equipped. Declaration order is evaluation order."""
    WEAPON_MAIN = "weaponMain"
    WEAPON_OFF = "weaponOff"
    HELMET = "helmet"
    CHEST = "chest"
    GLOVES = "gloves"
    BOOTS = "boots"
    RING_1 = "ring1"
    RING_2 = "ring2"
    NECKLACE = "necklace"


class ItemRarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class DamageType(str, Enum):
    PHYSICAL = "physical"
    MAGICAL = "magical"


class DamageTypeFilter(str, Enum):
    """Perk applicability filter on the attack's damage type."""
    PHYSICAL = "physical"
    MAGICAL = "magical"
    BOTH = "both"


class AttackType(str, Enum):
    BASIC = "basic"
    CHARGED = "charged"
    SPECIAL = "special"


class StatusEffectType(str, Enum):
    BUFF = "buff"
    DEBUFF = "debuff"
    DOT = "dot"
    OTHER = "other"


# Friendly display names
STAT_DISPLAY_NAMES: dict[StatName, str] = {
    StatName.STRENGTH: "Strength",
    StatName.AGILITY: "Agility",
    StatName.WILL: "Will",
    StatName.KNOWLEDGE: "Knowledge",
    StatName.HEALTH: "Health",
    StatName.RESOURCE: "Resource",
}

# Base stats a freshly created build starts with, before the player edits them.
DEFAULT_BASE_STATS: dict[StatName, float] = {
    StatName.STRENGTH: 10,
    StatName.AGILITY: 10,
    StatName.WILL: 10,
    StatName.KNOWLEDGE: 10,
    StatName.HEALTH: 100,
    StatName.RESOURCE: 0,
}

DEFAULT_CLASS_ID = "fighter"

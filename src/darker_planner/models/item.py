"""Item data model: weapons, armor, and jewelry share one record type.

Weapon and armor fields are optional; an item is a weapon when it carries
base weapon damage and armor when it carries a base armor value. Fields left
as None mean "not set" and resolve to their defaults through the properties
below, so default policy lives in one place.
"""

from dataclasses import dataclass, field

from darker_planner.models.constants import DamageType, ItemRarity, ItemSlot
from darker_planner.models.stat_map import EMPTY_STATS, StatMap


@dataclass(frozen=True, slots=True)
class Item:
    """An equippable item."""
    id: str
    name: str
    slot: ItemSlot
    rarity: ItemRarity = ItemRarity.COMMON

    # Weapon stats
    base_weapon_damage: float | None = None
    weapon_damage_type: DamageType | None = None
    headshot_multiplier: float | None = None   # 1.5x, 2.0x, etc.

    # Damage scaling (0.5 = 50% of STR added to damage)
    strength_scaling: float | None = None
    agility_scaling: float | None = None

    # Armor
    base_armor: float | None = None

    stat_bonuses: StatMap = EMPTY_STATS
    tags: frozenset[str] = field(default_factory=frozenset)  # "bow", "dagger", ...

    @property
    def is_weapon(self) -> bool:
        return self.base_weapon_damage is not None

    @property
    def damage_type(self) -> DamageType:
        """Damage type of hits made with this item; physical unless set."""
        return self.weapon_damage_type or DamageType.PHYSICAL

    @property
    def armor_value(self) -> float:
        return self.base_armor or 0.0

    def scaling_bonus(self, strength: float, agility: float) -> float:
        """Flat damage added by attribute scaling; unset coefficients are 0."""
        return (
            strength * (self.strength_scaling or 0.0)
            + agility * (self.agility_scaling or 0.0)
        )

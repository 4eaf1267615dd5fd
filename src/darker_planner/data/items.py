"""Hand-made sample items so the engine can be exercised without scraped data."""

from darker_planner.models.constants import DamageType, ItemRarity, ItemSlot, StatName
from darker_planner.models.item import Item
from darker_planner.models.stat_map import StatMap


ITEMS: tuple[Item, ...] = (
    Item(
        id="longsword-common",
        name="Common Longsword",
        slot=ItemSlot.WEAPON_MAIN,
        rarity=ItemRarity.COMMON,
        base_weapon_damage=35,
        weapon_damage_type=DamageType.PHYSICAL,
        strength_scaling=0.5,
        stat_bonuses=StatMap({StatName.STRENGTH: 1}),
        tags=frozenset({"weapon", "sword", "melee"}),
    ),
    Item(
        id="recurve-bow-uncommon",
        name="Uncommon Recurve Bow",
        slot=ItemSlot.WEAPON_MAIN,
        rarity=ItemRarity.UNCOMMON,
        base_weapon_damage=20,
        weapon_damage_type=DamageType.PHYSICAL,
        headshot_multiplier=2.0,
        agility_scaling=0.5,
        tags=frozenset({"weapon", "bow", "ranged"}),
    ),
    Item(
        id="rondel-dagger-common",
        name="Common Rondel Dagger",
        slot=ItemSlot.WEAPON_MAIN,
        rarity=ItemRarity.COMMON,
        base_weapon_damage=22,
        weapon_damage_type=DamageType.PHYSICAL,
        agility_scaling=0.4,
        tags=frozenset({"weapon", "dagger", "melee"}),
    ),
    Item(
        id="spellbook-rare",
        name="Rare Spellbook",
        slot=ItemSlot.WEAPON_MAIN,
        rarity=ItemRarity.RARE,
        base_weapon_damage=28,
        weapon_damage_type=DamageType.MAGICAL,
        stat_bonuses=StatMap({StatName.KNOWLEDGE: 2, StatName.RESOURCE: 10}),
        tags=frozenset({"weapon", "magic"}),
    ),
    Item(
        id="rusty-helmet",
        name="Rusty Helmet",
        slot=ItemSlot.HELMET,
        rarity=ItemRarity.COMMON,
        base_armor=10,
        stat_bonuses=StatMap({StatName.HEALTH: 5}),
        tags=frozenset({"armor", "plate"}),
    ),
    Item(
        id="padded-tunic",
        name="Padded Tunic",
        slot=ItemSlot.CHEST,
        rarity=ItemRarity.COMMON,
        base_armor=25,
        tags=frozenset({"armor", "cloth"}),
    ),
    Item(
        id="leather-boots",
        name="Leather Boots",
        slot=ItemSlot.BOOTS,
        rarity=ItemRarity.COMMON,
        base_armor=5,
        tags=frozenset({"armor", "leather"}),
    ),
    Item(
        id="ring-of-vigor",
        name="Ring of Vigor",
        slot=ItemSlot.RING_1,
        rarity=ItemRarity.EPIC,
        stat_bonuses=StatMap({StatName.HEALTH: 10, StatName.STRENGTH: 2}),
        tags=frozenset({"jewelry"}),
    ),
)

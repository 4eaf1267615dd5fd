"""Example perk data."""

from darker_planner.models.constants import DamageTypeFilter, StatName
from darker_planner.models.perk import Perk
from darker_planner.models.stat_map import StatMap


PERKS: tuple[Perk, ...] = (
    Perk(
        id="mighty-strikes",
        name="Mighty Strikes",
        description="Increases physical weapon damage by 10%.",
        physical_damage_multiplier=1.10,
        applies_to_damage_type=DamageTypeFilter.PHYSICAL,
    ),
    Perk(
        id="sharpshooter",
        name="Sharpshooter",
        description="Increases headshot damage with bows by 25%.",
        headshot_damage_multiplier=1.25,
        applies_to_weapon_tag="bow",
    ),
    Perk(
        id="ambush",
        name="Ambush",
        description="Increases backstab damage with daggers by 20%.",
        backstab_damage_multiplier=1.20,
        applies_to_weapon_tag="dagger",
    ),
    Perk(
        id="arcane-mastery",
        name="Arcane Mastery",
        description="Increases magical damage by 15%.",
        magical_damage_multiplier=1.15,
        applies_to_damage_type=DamageTypeFilter.MAGICAL,
    ),
    Perk(
        id="thick-skin",
        name="Thick Skin",
        description="Grants +20 health.",
        stat_bonuses=StatMap({StatName.HEALTH: 20}),
    ),
)

"""Boundary validation for builds handed to the evaluator.

The pipeline itself is total: missing fields resolve to defaults. What it
cannot absorb is data that breaks the type contract (a string where a
number belongs, NaN, a negative armor value, an item in the wrong slot),
so that is rejected here with a BuildValidationError before any math runs.
"""

from __future__ import annotations

from typing import Any

from darker_planner.models.build import Build
from darker_planner.models.constants import (
    DamageType,
    DamageTypeFilter,
    ItemSlot,
    StatName,
)
from darker_planner.models.enemy import EnemyProfile
from darker_planner.models.errors import BuildValidationError
from darker_planner.models.item import Item
from darker_planner.models.perk import Perk
from darker_planner.models.stat_map import StatMap, check_number
from darker_planner.models.status_effect import StatusEffect


def _check_optional(value: Any, field: str, *, minimum: float | None = None,
                    positive: bool = False) -> None:
    if value is None:
        return
    number = check_number(value, field)
    if positive and number <= 0:
        raise BuildValidationError(field, f"must be > 0, got {number:g}")
    if minimum is not None and number < minimum:
        raise BuildValidationError(field, f"must be >= {minimum:g}, got {number:g}")


def _check_stat_map(stats: Any, field: str, *, allow_negative: bool = True) -> None:
    if not isinstance(stats, StatMap):
        raise BuildValidationError(field, f"expected a StatMap, got {type(stats).__name__}")
    for name, value in stats.items():
        if not isinstance(name, StatName):
            raise BuildValidationError(field, f"unknown stat {name!r}")
        check_number(value, f"{field}.{name.value}")
        if not allow_negative and value < 0:
            raise BuildValidationError(
                f"{field}.{name.value}", f"must be >= 0, got {value:g}"
            )


def validate_item(item: Item, field: str = "item") -> None:
    if not isinstance(item.slot, ItemSlot):
        raise BuildValidationError(f"{field}.slot", f"unknown slot {item.slot!r}")
    if item.weapon_damage_type is not None and not isinstance(item.weapon_damage_type, DamageType):
        raise BuildValidationError(
            f"{field}.weapon_damage_type", f"unknown damage type {item.weapon_damage_type!r}"
        )
    _check_optional(item.base_weapon_damage, f"{field}.base_weapon_damage", minimum=0)
    _check_optional(item.headshot_multiplier, f"{field}.headshot_multiplier", positive=True)
    _check_optional(item.strength_scaling, f"{field}.strength_scaling", minimum=0)
    _check_optional(item.agility_scaling, f"{field}.agility_scaling", minimum=0)
    _check_optional(item.base_armor, f"{field}.base_armor", minimum=0)
    _check_stat_map(item.stat_bonuses, f"{field}.stat_bonuses")


def validate_perk(perk: Perk, field: str = "perk") -> None:
    for name in (
        "global_damage_multiplier",
        "physical_damage_multiplier",
        "magical_damage_multiplier",
        "headshot_damage_multiplier",
        "backstab_damage_multiplier",
    ):
        _check_optional(getattr(perk, name), f"{field}.{name}", positive=True)
    if perk.applies_to_damage_type is not None and not isinstance(
        perk.applies_to_damage_type, DamageTypeFilter
    ):
        raise BuildValidationError(
            f"{field}.applies_to_damage_type",
            f"unknown damage type filter {perk.applies_to_damage_type!r}",
        )
    _check_stat_map(perk.stat_bonuses, f"{field}.stat_bonuses")


def validate_status_effect(effect: StatusEffect, field: str = "status_effect") -> None:
    _check_stat_map(effect.stat_bonuses, f"{field}.stat_bonuses")


def validate_enemy(enemy: EnemyProfile, field: str = "enemy") -> None:
    _check_optional(enemy.max_health, f"{field}.max_health", positive=True)
    _check_optional(enemy.armor_rating, f"{field}.armor_rating")


def validate_build(build: Build) -> None:
    """Raise BuildValidationError if *build* violates the data model."""
    if not isinstance(build.class_id, str):
        raise BuildValidationError("class_id", f"expected a string, got {build.class_id!r}")
    _check_stat_map(build.base_stats, "base_stats", allow_negative=False)

    for slot, item in build.equipped_items.items():
        if not isinstance(slot, ItemSlot):
            raise BuildValidationError("equipped_items", f"unknown slot {slot!r}")
        if item is None:
            continue
        field = f"equipped_items.{slot.value}"
        validate_item(item, field)
        if item.slot is not slot:
            raise BuildValidationError(
                field, f"item {item.id!r} belongs in {item.slot.value}, not {slot.value}"
            )

    seen: set[str] = set()
    for perk in build.perks:
        if perk.id in seen:
            raise BuildValidationError("perks", f"duplicate perk {perk.id!r}")
        seen.add(perk.id)
        validate_perk(perk, f"perks.{perk.id}")

    for effect in build.active_status_effects:
        validate_status_effect(effect, f"active_status_effects.{effect.id}")

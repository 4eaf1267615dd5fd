"""Perk data model with typed applicability conditions and damage modifiers.

A perk's optional fields are mirrored into two ordered tuples of small
records: ``conditions`` (all must match the attack for the perk to apply)
and ``modifiers`` (multipliers applied in declaration order). The damage
pipeline only ever folds over these records, so a new condition or
modifier kind is a new record type here, not a new branch there.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from darker_planner.models.constants import DamageType, DamageTypeFilter
from darker_planner.models.stat_map import EMPTY_STATS, StatMap

if TYPE_CHECKING:
    from darker_planner.models.combat import AttackProfile, HitContext


@dataclass(frozen=True, slots=True)
class DamageTypeCondition:
    """Applies only to attacks of the given damage type (or both)."""
    damage_type: DamageTypeFilter

    def matches(self, attack: AttackProfile) -> bool:
        if self.damage_type is DamageTypeFilter.BOTH:
            return True
        return self.damage_type.value == attack.damage_type.value


@dataclass(frozen=True, slots=True)
class WeaponTagCondition:
    """Applies only when the main-hand weapon carries ``tag``."""
    tag: str

    def matches(self, attack: AttackProfile) -> bool:
        return self.tag in attack.weapon_tags


PerkCondition = DamageTypeCondition | WeaponTagCondition


class ModifierKind(str, Enum):
    GLOBAL = "global"
    PHYSICAL = "physical"
    MAGICAL = "magical"
    HEADSHOT = "headshot"
    BACKSTAB = "backstab"


@dataclass(frozen=True, slots=True)
class DamageModifier:
    """A multiplicative damage factor gated by damage type or hit context."""
    kind: ModifierKind
    factor: float

    def applies(self, attack: AttackProfile, context: HitContext) -> bool:
        kind = self.kind
        if kind is ModifierKind.GLOBAL:
            return True
        if kind is ModifierKind.PHYSICAL:
            return attack.damage_type is DamageType.PHYSICAL
        if kind is ModifierKind.MAGICAL:
            return attack.damage_type is DamageType.MAGICAL
        if kind is ModifierKind.HEADSHOT:
            return context.is_headshot
        return context.is_backstab


@dataclass(frozen=True, slots=True)
class Perk:
    """An always-on passive chosen for a build."""
    id: str
    name: str
    description: str = ""

    stat_bonuses: StatMap = EMPTY_STATS

    # Generic damage multipliers (1.10 = +10%)
    global_damage_multiplier: float | None = None
    physical_damage_multiplier: float | None = None
    magical_damage_multiplier: float | None = None

    # Contextual multipliers
    headshot_damage_multiplier: float | None = None
    backstab_damage_multiplier: float | None = None

    # Applicability conditions
    applies_to_damage_type: DamageTypeFilter | None = None
    applies_to_weapon_tag: str | None = None

    @property
    def conditions(self) -> tuple[PerkCondition, ...]:
        conds: list[PerkCondition] = []
        if self.applies_to_damage_type is not None:
            conds.append(DamageTypeCondition(self.applies_to_damage_type))
        if self.applies_to_weapon_tag:
            conds.append(WeaponTagCondition(self.applies_to_weapon_tag))
        return tuple(conds)

    @property
    def modifiers(self) -> tuple[DamageModifier, ...]:
        """Set multipliers in application order: global, type, headshot, backstab."""
        ordered = (
            (ModifierKind.GLOBAL, self.global_damage_multiplier),
            (ModifierKind.PHYSICAL, self.physical_damage_multiplier),
            (ModifierKind.MAGICAL, self.magical_damage_multiplier),
            (ModifierKind.HEADSHOT, self.headshot_damage_multiplier),
            (ModifierKind.BACKSTAB, self.backstab_damage_multiplier),
        )
        return tuple(DamageModifier(kind, f) for kind, f in ordered if f is not None)

    def applies_to(self, attack: AttackProfile) -> bool:
        return all(cond.matches(attack) for cond in self.conditions)

    @property
    def has_damage_effect(self) -> bool:
        return bool(self.modifiers)

"""Hit context and per-attack profile used by the damage pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from darker_planner.models.constants import AttackType, DamageType
from darker_planner.models.item import Item


@dataclass(frozen=True, slots=True)
class HitContext:
    """How a single attack lands. Flags are independent and may combine."""
    is_headshot: bool = False
    is_backstab: bool = False
    is_stealth_attack: bool = False
    attack_type: AttackType = AttackType.BASIC


BODY = HitContext()
HEADSHOT = HitContext(is_headshot=True)
BACKSTAB = HitContext(is_backstab=True)

# Profiles summarised for every build, in display order.
HIT_PROFILES: dict[str, HitContext] = {
    "body": BODY,
    "headshot": HEADSHOT,
    "backstab": BACKSTAB,
}


@dataclass(frozen=True, slots=True)
class AttackProfile:
    """What a perk condition can see about the attack being made."""
    weapon: Item | None
    damage_type: DamageType = DamageType.PHYSICAL
    weapon_tags: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def for_weapon(cls, weapon: Item | None) -> AttackProfile:
        if weapon is None:
            return cls(weapon=None)
        return cls(
            weapon=weapon,
            damage_type=weapon.damage_type,
            weapon_tags=weapon.tags,
        )

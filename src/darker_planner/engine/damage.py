"""Damage pipeline for a single hit.

Stages run in a fixed order:

1. base damage        main-hand weapon damage, or the unarmed fallback
2. attribute scaling  STR/AGI coefficients against the *combined* stats
3. perk multipliers   fold over matching perks in activation order
4. hit context        weapon headshot multiplier, backstab, stealth
5. target armor       mitigation curve vs the target's flat defense

Every stage is a pure function of its inputs; the result is never negative.
"""

from __future__ import annotations

from darker_planner.data.catalog import GameData
from darker_planner.engine.mitigation import apply_mitigation
from darker_planner.engine.stats import combine_stats
from darker_planner.models.build import Build
from darker_planner.models.combat import BODY, AttackProfile, HitContext
from darker_planner.models.combat_settings import CombatSettings
from darker_planner.models.constants import StatName
from darker_planner.models.enemy import EnemyProfile
from darker_planner.models.item import Item
from darker_planner.models.perk import Perk
from darker_planner.models.stat_map import StatMap


_DEFAULT_SETTINGS = CombatSettings.defaults()


def base_weapon_damage(weapon: Item | None, settings: CombatSettings) -> float:
    if weapon is None or weapon.base_weapon_damage is None:
        return settings.unarmed_damage
    return weapon.base_weapon_damage


def apply_scaling(damage: float, weapon: Item | None, combined: StatMap) -> float:
    """Add STR/AGI scaling. Bare hands do not scale."""
    if weapon is None:
        return damage
    return damage + weapon.scaling_bonus(
        combined.get(StatName.STRENGTH),
        combined.get(StatName.AGILITY),
    )


def apply_perk_multipliers(
    damage: float,
    perks: list[Perk],
    attack: AttackProfile,
    context: HitContext,
) -> float:
    """Multiply in every applicable modifier of every matching perk.

    Perks compose multiplicatively in activation order, including several
    perks feeding the same modifier kind.
    """
    result = damage
    for perk in perks:
        if not perk.applies_to(attack):
            continue
        for modifier in perk.modifiers:
            if modifier.applies(attack, context):
                result *= modifier.factor
    return result


def apply_hit_context(
    damage: float,
    weapon: Item | None,
    context: HitContext,
    settings: CombatSettings,
) -> float:
    result = damage
    if context.is_headshot:
        mult = None if weapon is None else weapon.headshot_multiplier
        result *= settings.default_headshot_multiplier if mult is None else mult
    if context.is_backstab:
        result *= settings.backstab_multiplier
    if context.is_stealth_attack:
        result *= settings.stealth_multiplier
    return result


def apply_target_armor(
    damage: float,
    target: EnemyProfile | None,
    attack: AttackProfile,
    settings: CombatSettings,
) -> float:
    if target is None:
        return damage
    return apply_mitigation(damage, target.defense, attack.damage_type, settings)


def compute_damage_per_hit(
    build: Build,
    target: EnemyProfile | None = None,
    context: HitContext = BODY,
    *,
    combined: StatMap | None = None,
    game_data: GameData | None = None,
    settings: CombatSettings | None = None,
) -> float:
    """End-to-end damage for one hit of *build* against *target*.

    Pass *combined* when the caller already aggregated the build's stats;
    otherwise they are computed from *game_data*.
    """
    settings = settings or _DEFAULT_SETTINGS
    if combined is None:
        combined = combine_stats(build, game_data)

    weapon = build.main_weapon
    attack = AttackProfile.for_weapon(weapon)

    dmg = base_weapon_damage(weapon, settings)
    dmg = apply_scaling(dmg, weapon, combined)
    dmg = apply_perk_multipliers(dmg, build.perks, attack, context)
    dmg = apply_hit_context(dmg, weapon, context, settings)
    dmg = apply_target_armor(dmg, target, attack, settings)
    return max(dmg, 0.0)

"""Defense and offense summaries derived from combined stats."""

from __future__ import annotations

from types import MappingProxyType

from darker_planner.engine.damage import compute_damage_per_hit
from darker_planner.engine.mitigation import armor_mitigation
from darker_planner.models.build import Build
from darker_planner.models.combat import HIT_PROFILES
from darker_planner.models.combat_settings import CombatSettings
from darker_planner.models.constants import StatName
from darker_planner.models.derived_stats import DefenseSummary, OffenseSummary
from darker_planner.models.enemy import EnemyProfile
from darker_planner.models.stat_map import StatMap


_DEFAULT_SETTINGS = CombatSettings.defaults()


def armor_rating(build: Build) -> float:
    """Sum of flat armor over all equipped items."""
    return sum((item.armor_value for item in build.iter_equipped()), 0.0)


def effective_hit_points(
    hit_points: float,
    armor: float,
    settings: CombatSettings | None = None,
) -> float:
    """EHP = HP / (1 - reduction); plain HP when there is no armor."""
    settings = settings or _DEFAULT_SETTINGS
    reduction = armor_mitigation(armor, settings.effective_health_mitigation_k)
    if armor > 0 and reduction < 1:
        return hit_points / (1 - reduction)
    return hit_points


def compute_defense_summary(
    build: Build,
    combined: StatMap,
    settings: CombatSettings | None = None,
) -> DefenseSummary:
    hit_points = combined.get(StatName.HEALTH)
    armor = armor_rating(build)
    return DefenseSummary(
        hit_points=hit_points,
        armor_rating=armor,
        effective_hit_points=effective_hit_points(hit_points, armor, settings),
    )


def attacks_per_second(combined: StatMap, settings: CombatSettings | None = None) -> float:
    """APS = base + AGI * mult (1 attack/sec, +1% per agility point)."""
    settings = settings or _DEFAULT_SETTINGS
    return (
        settings.base_attacks_per_second
        + combined.get(StatName.AGILITY) * settings.attacks_per_second_agility_mult
    )


def compute_offense_summary(
    build: Build,
    combined: StatMap,
    target: EnemyProfile | None = None,
    settings: CombatSettings | None = None,
) -> OffenseSummary:
    """Per-profile damage per hit and DPS, pre-armor and vs *target*."""
    settings = settings or _DEFAULT_SETTINGS
    aps = attacks_per_second(combined, settings)

    per_hit: dict[str, float] = {}
    per_hit_vs: dict[str, float] = {}
    for name, context in HIT_PROFILES.items():
        per_hit[name] = compute_damage_per_hit(
            build, None, context, combined=combined, settings=settings
        )
        per_hit_vs[name] = compute_damage_per_hit(
            build, target, context, combined=combined, settings=settings
        )

    return OffenseSummary(
        weapon_damage_per_hit=per_hit["body"],
        attacks_per_second=aps,
        approx_dps=per_hit["body"] * aps,
        dps_vs_enemy=per_hit_vs["body"] * aps,
        body_dps=per_hit["body"] * aps,
        headshot_dps=per_hit["headshot"] * aps,
        backstab_dps=per_hit["backstab"] * aps,
        body_dps_vs_enemy=per_hit_vs["body"] * aps,
        headshot_dps_vs_enemy=per_hit_vs["headshot"] * aps,
        backstab_dps_vs_enemy=per_hit_vs["backstab"] * aps,
        damage_per_hit=MappingProxyType(per_hit),
        damage_per_hit_vs_enemy=MappingProxyType(per_hit_vs),
    )

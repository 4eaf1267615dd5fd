"""Evaluation output: combined stats plus defense and offense summaries.

All records are frozen so a DerivedStats can be handed to renderers or
serialisers as-is.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from darker_planner.models.stat_map import StatMap


def time_to_kill(max_health: float, dps: float) -> float | None:
    """Seconds to kill a target with *max_health* at *dps*; None if dps is 0."""
    if dps <= 0:
        return None
    return max_health / dps


@dataclass(frozen=True, slots=True)
class DefenseSummary:
    hit_points: float = 0.0
    armor_rating: float = 0.0          # flat sum of equipped armor
    effective_hit_points: float = 0.0  # raw damage absorbable through armor


@dataclass(frozen=True, slots=True)
class OffenseSummary:
    """Damage figures for the body/headshot/backstab hit profiles."""

    # Body shot, before enemy armor
    weapon_damage_per_hit: float = 0.0
    attacks_per_second: float = 0.0
    approx_dps: float = 0.0
    # Body shot vs selected enemy
    dps_vs_enemy: float = 0.0

    # Per-profile DPS, pre-armor
    body_dps: float = 0.0
    headshot_dps: float = 0.0
    backstab_dps: float = 0.0

    # Per-profile DPS vs selected enemy
    body_dps_vs_enemy: float = 0.0
    headshot_dps_vs_enemy: float = 0.0
    backstab_dps_vs_enemy: float = 0.0

    # Profile name → damage per hit (read-only views)
    damage_per_hit: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
    damage_per_hit_vs_enemy: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def dps_for(self, profile: str, *, vs_enemy: bool = False) -> float:
        hits = self.damage_per_hit_vs_enemy if vs_enemy else self.damage_per_hit
        if profile not in hits:
            raise KeyError(f"Unknown hit profile: {profile!r}")
        return hits[profile] * self.attacks_per_second

    def time_to_kill(self, max_health: float, profile: str = "body") -> float | None:
        """TTK against a target using the vs-enemy DPS of *profile*."""
        return time_to_kill(max_health, self.dps_for(profile, vs_enemy=True))


@dataclass(frozen=True, slots=True)
class DerivedStats:
    """Complete computed snapshot for a build."""

    combined_stats: StatMap
    defense: DefenseSummary
    offense: OffenseSummary
    target_enemy_id: str | None = None   # the enemy actually resolved, if any

    def to_dict(self) -> dict:
        """Plain-data view for JSON output."""
        off = self.offense
        return {
            "combinedStats": self.combined_stats.to_dict(),
            "defense": {
                "hitPoints": self.defense.hit_points,
                "armorRating": self.defense.armor_rating,
                "effectiveHitPoints": self.defense.effective_hit_points,
            },
            "offense": {
                "weaponDamagePerHit": off.weapon_damage_per_hit,
                "attacksPerSecond": off.attacks_per_second,
                "approxDps": off.approx_dps,
                "dpsVsEnemy": off.dps_vs_enemy,
                "bodyDps": off.body_dps,
                "headshotDps": off.headshot_dps,
                "backstabDps": off.backstab_dps,
                "bodyDpsVsEnemy": off.body_dps_vs_enemy,
                "headshotDpsVsEnemy": off.headshot_dps_vs_enemy,
                "backstabDpsVsEnemy": off.backstab_dps_vs_enemy,
                "damagePerHit": dict(off.damage_per_hit),
                "damagePerHitVsEnemy": dict(off.damage_per_hit_vs_enemy),
            },
            "targetEnemyId": self.target_enemy_id,
        }

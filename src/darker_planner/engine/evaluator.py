"""Top-level evaluation: Build → DerivedStats.

Resolves the target enemy, aggregates stats once, and feeds the combined
stats to both summarizers. Pure: the same build, catalogs and settings
always produce an identical result.
"""

from __future__ import annotations

import logging

from darker_planner.data.catalog import GameData
from darker_planner.engine.stats import combine_stats
from darker_planner.engine.summary import compute_defense_summary, compute_offense_summary
from darker_planner.engine.validation import validate_build, validate_enemy
from darker_planner.models.build import Build
from darker_planner.models.combat_settings import CombatSettings
from darker_planner.models.derived_stats import DerivedStats
from darker_planner.models.enemy import EnemyProfile


logger = logging.getLogger(__name__)


def resolve_target(build: Build, game_data: GameData) -> EnemyProfile | None:
    """Look up the build's selected enemy; an unknown id means no target."""
    if not build.target_enemy_id:
        return None
    enemy = game_data.enemy(build.target_enemy_id)
    if enemy is None:
        logger.debug("Target enemy %r not in catalog; evaluating without target",
                     build.target_enemy_id)
    return enemy


def evaluate(
    build: Build,
    game_data: GameData | None = None,
    settings: CombatSettings | None = None,
    *,
    validate: bool = True,
) -> DerivedStats:
    """Compute combined stats, defense and offense for *build*."""
    game_data = game_data or GameData.defaults()
    settings = settings or CombatSettings.defaults()
    if validate:
        validate_build(build)

    enemy = resolve_target(build, game_data)
    if enemy is not None and validate:
        validate_enemy(enemy, f"enemies.{enemy.id}")

    combined = combine_stats(build, game_data)
    defense = compute_defense_summary(build, combined, settings)
    offense = compute_offense_summary(build, combined, enemy, settings)
    logger.debug("Evaluated build %r: hp=%g dps=%g", build.id,
                 defense.hit_points, offense.approx_dps)

    return DerivedStats(
        combined_stats=combined,
        defense=defense,
        offense=offense,
        target_enemy_id=enemy.id if enemy is not None else None,
    )

"""Stat aggregation: merge every stat source of a build into one StatMap."""

from __future__ import annotations

import logging
from functools import reduce

from darker_planner.data.catalog import GameData
from darker_planner.models.build import Build
from darker_planner.models.stat_map import EMPTY_STATS, StatMap


logger = logging.getLogger(__name__)


def add_stat_maps(a: StatMap, b: StatMap) -> StatMap:
    """Per-key sum of two stat maps; keys from either side are kept."""
    return a + b


def stat_sources(build: Build, game_data: GameData) -> list[StatMap]:
    """Every stat contribution of *build*, in aggregation order.

    Class baseline, user base stats, equipped items (slot order), perks
    (activation order), then active status effects. An unknown class id
    contributes nothing.
    """
    class_base = game_data.class_base_stats(build.class_id)
    if class_base is None:
        logger.warning("Unknown class id %r; using empty baseline", build.class_id)
        class_base = EMPTY_STATS

    sources = [class_base, build.base_stats]
    sources.extend(item.stat_bonuses for item in build.iter_equipped())
    sources.extend(perk.stat_bonuses for perk in build.perks)
    sources.extend(effect.stat_bonuses for effect in build.active_status_effects)
    return sources


def combine_stats(build: Build, game_data: GameData | None = None) -> StatMap:
    """Aggregate class, base, gear, perk and status-effect stats.

    Debuffs may drive a sum below zero; each combined stat is floored at 0.
    """
    game_data = game_data or GameData.defaults()
    total = reduce(add_stat_maps, stat_sources(build, game_data), EMPTY_STATS)
    return total.clamped(0.0)

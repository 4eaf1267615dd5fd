"""Build evaluation interfaces."""

from darker_planner.engine.build_editor import BuildEditor
from darker_planner.engine.damage import compute_damage_per_hit
from darker_planner.engine.evaluator import evaluate, resolve_target
from darker_planner.engine.mitigation import apply_mitigation, armor_mitigation
from darker_planner.engine.stats import add_stat_maps, combine_stats
from darker_planner.engine.summary import (
    compute_defense_summary,
    compute_offense_summary,
)
from darker_planner.engine.validation import validate_build

__all__ = [
    "BuildEditor",
    "add_stat_maps",
    "apply_mitigation",
    "armor_mitigation",
    "combine_stats",
    "compute_damage_per_hit",
    "compute_defense_summary",
    "compute_offense_summary",
    "evaluate",
    "resolve_target",
    "validate_build",
]

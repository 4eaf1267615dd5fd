"""Status effects (buffs, debuffs, DoTs) active on a build.

Only the flat stat bonuses feed into evaluation. Duration and the damage
multipliers are carried for collaborators that display or simulate them.
"""

from dataclasses import dataclass

from darker_planner.models.constants import StatusEffectType
from darker_planner.models.stat_map import EMPTY_STATS, StatMap


@dataclass(frozen=True, slots=True)
class StatusEffect:
    id: str
    name: str
    effect_type: StatusEffectType = StatusEffectType.OTHER
    description: str = ""
    duration_seconds: float | None = None        # None = permanent while active
    damage_multiplier: float | None = None       # 1.10 = +10% weapon damage
    incoming_damage_multiplier: float | None = None  # 0.90 = -10% damage taken
    stat_bonuses: StatMap = EMPTY_STATS

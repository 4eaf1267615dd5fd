"""Base stats per class.

Placeholder values until they are matched against in-game data.
"""

from darker_planner.models.constants import StatName
from darker_planner.models.stat_map import StatMap


S = StatName


def _stats(strength: int, agility: int, will: int, knowledge: int, health: int) -> StatMap:
    return StatMap({
        S.STRENGTH: strength,
        S.AGILITY: agility,
        S.WILL: will,
        S.KNOWLEDGE: knowledge,
        S.HEALTH: health,
        S.RESOURCE: 0,
    })


CLASS_BASE_STATS: dict[str, StatMap] = {
    "fighter": _stats(14, 12, 8, 8, 100),
    "barbarian": _stats(18, 10, 8, 6, 120),
    "ranger": _stats(10, 16, 8, 8, 90),
    "wizard": _stats(6, 10, 16, 14, 80),
    "cleric": _stats(10, 10, 16, 10, 95),
    "rogue": _stats(10, 18, 6, 8, 85),
}

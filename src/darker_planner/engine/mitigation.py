"""Diminishing-returns mitigation curve.

    reduction = armor / (armor + K)

K determines how hard armor scales: at armor == K the reduction is 50%.
Physical and magical damage use different constants.
"""

from darker_planner.models.combat_settings import CombatSettings
from darker_planner.models.constants import DamageType


_DEFAULT_SETTINGS = CombatSettings.defaults()


def armor_mitigation(armor: float, k: float) -> float:
    """Fractional damage reduction in [0, 1); 0 for non-positive armor."""
    if armor <= 0:
        return 0.0
    return armor / (armor + k)


def mitigation_constant(
    damage_type: DamageType,
    settings: CombatSettings | None = None,
) -> float:
    settings = settings or _DEFAULT_SETTINGS
    if damage_type is DamageType.MAGICAL:
        return settings.magical_mitigation_k
    return settings.physical_mitigation_k


def apply_mitigation(
    raw_damage: float,
    armor: float,
    damage_type: DamageType,
    settings: CombatSettings | None = None,
) -> float:
    """Damage after armor reduction, floored at 0."""
    k = mitigation_constant(damage_type, settings)
    return max(raw_damage * (1 - armor_mitigation(armor, k)), 0.0)

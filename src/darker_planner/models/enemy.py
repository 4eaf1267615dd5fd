"""Target enemy profile used for DPS and time-to-kill figures."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EnemyProfile:
    id: str
    name: str
    max_health: float
    armor_rating: float | None = None   # flat defense; None = unarmored

    @property
    def defense(self) -> float:
        return self.armor_rating or 0.0

"""Basic enemy profiles used for DPS and time-to-kill figures."""

from darker_planner.models.enemy import EnemyProfile


ENEMIES: tuple[EnemyProfile, ...] = (
    EnemyProfile(
        id="dummy-light",
        name="Training Dummy (Light Armor)",
        max_health=100,
        armor_rating=10,
    ),
    EnemyProfile(
        id="dummy-medium",
        name="Training Dummy (Medium Armor)",
        max_health=120,
        armor_rating=40,
    ),
    EnemyProfile(
        id="dummy-heavy",
        name="Training Dummy (Heavy Armor)",
        max_health=140,
        armor_rating=70,
    ),
)

"""Tunable combat constants with typed accessors.

Provides a thin interface over a dict of named constants. Every accessor
takes a default so the engine works without any overrides; the shipped
values are available via CombatSettings.defaults(). The constants are
placeholders until they are matched against in-game measurements.
"""

from dataclasses import dataclass, field

from darker_planner.models.stat_map import check_number


# Shipped defaults for every constant the formulas use.
_DEFAULT_VALUES: dict[str, float] = {
    # Mitigation curve: reduction = armor / (armor + K)
    "physical_mitigation_k": 85.0,
    "magical_mitigation_k": 65.0,
    # EHP curve constant for the defender's own armor rating
    "effective_health_mitigation_k": 100.0,
    # Bare-hands base damage when no main-hand weapon is equipped
    "unarmed_damage": 5.0,
    # Hit-context multipliers
    "default_headshot_multiplier": 1.5,
    "backstab_multiplier": 1.3,
    "stealth_multiplier": 1.5,
    # Attack speed: base + AGI * mult
    "base_attacks_per_second": 1.0,
    "attacks_per_second_agility_mult": 0.01,
}

# Curve constants divide by (armor + K), so they must stay positive.
_POSITIVE_KEYS = frozenset({
    "physical_mitigation_k",
    "magical_mitigation_k",
    "effective_health_mitigation_k",
})


@dataclass(frozen=True)
class CombatSettings:
    """Typed accessor over tunable combat constants.

    Use defaults() for the shipped values, or with_overrides() to tweak a
    few constants for experimentation.
    """

    _values: dict[str, float] = field(default_factory=dict)

    def get_float(self, key: str, default: float) -> float:
        """Get a float constant, falling back to the provided default."""
        val = self._values.get(key)
        if val is None:
            return default
        return float(val)

    @classmethod
    def defaults(cls) -> "CombatSettings":
        return cls(_values=dict(_DEFAULT_VALUES))

    def with_overrides(self, overrides: dict[str, float]) -> "CombatSettings":
        """Return a copy with *overrides* applied.

        Values must be known, finite and non-negative. Mitigation constants
        must be strictly positive.
        """
        unknown = sorted(set(overrides) - set(_DEFAULT_VALUES))
        if unknown:
            raise ValueError(f"Unknown combat setting(s): {', '.join(unknown)}")
        checked: dict[str, float] = {}
        for key, value in overrides.items():
            number = check_number(value, f"settings.{key}")
            if key in _POSITIVE_KEYS and number <= 0:
                raise ValueError(f"Combat setting {key} must be > 0, got {number:g}")
            if number < 0:
                raise ValueError(f"Combat setting {key} must be >= 0, got {number:g}")
            checked[key] = number
        return CombatSettings(_values={**self._values, **checked})

    # --- Named accessors ---------------------------------------------------

    @property
    def physical_mitigation_k(self) -> float:
        return self.get_float("physical_mitigation_k", 85.0)

    @property
    def magical_mitigation_k(self) -> float:
        return self.get_float("magical_mitigation_k", 65.0)

    @property
    def effective_health_mitigation_k(self) -> float:
        return self.get_float("effective_health_mitigation_k", 100.0)

    @property
    def unarmed_damage(self) -> float:
        return self.get_float("unarmed_damage", 5.0)

    @property
    def default_headshot_multiplier(self) -> float:
        return self.get_float("default_headshot_multiplier", 1.5)

    @property
    def backstab_multiplier(self) -> float:
        return self.get_float("backstab_multiplier", 1.3)

    @property
    def stealth_multiplier(self) -> float:
        return self.get_float("stealth_multiplier", 1.5)

    @property
    def base_attacks_per_second(self) -> float:
        return self.get_float("base_attacks_per_second", 1.0)

    @property
    def attacks_per_second_agility_mult(self) -> float:
        return self.get_float("attacks_per_second_agility_mult", 0.01)

"""Immutable stat bag keyed by StatName.

Every stat source (class baseline, user base stats, gear, perks, status
effects) is expressed as a StatMap, and aggregation is a plain per-key sum.
Missing keys read as 0 but are not materialised, so a map only lists the
stats something actually contributed. Equality follows the same rule: an
explicit 0 entry compares equal to an absent key.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from typing import Any

from darker_planner.models.constants import StatName
from darker_planner.models.errors import BuildValidationError


def check_number(value: Any, field: str) -> float:
    """Return *value* as a float, rejecting bools, non-numbers, NaN and inf."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BuildValidationError(field, f"expected a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise BuildValidationError(field, f"expected a finite number, got {value!r}")
    return result


def parse_stat_name(key: Any, field: str = "stat") -> StatName:
    """Accept a StatName or its string value ("strength", "agility", ...)."""
    if isinstance(key, StatName):
        return key
    try:
        return StatName(key)
    except ValueError:
        raise BuildValidationError(field, f"unknown stat {key!r}") from None


class StatMap(Mapping[StatName, float]):
    """Read-only mapping of stat → value. ``a + b`` merges per key."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[StatName, float] | None = None) -> None:
        self._values: dict[StatName, float] = {}
        for key, value in (values or {}).items():
            name = parse_stat_name(key)
            self._values[name] = check_number(value, f"stat.{name.value}")

    @classmethod
    def from_dict(
        cls,
        data: Mapping[Any, Any] | None,
        field: str = "stats",
    ) -> StatMap:
        """Build from plain collaborator data (string keys, ``None`` = absent)."""
        values: dict[StatName, float] = {}
        for key, value in (data or {}).items():
            name = parse_stat_name(key, f"{field}.{key}")
            if value is None:
                continue
            values[name] = check_number(value, f"{field}.{name.value}")
        return cls(values)

    # --- Mapping protocol --------------------------------------------------

    def __getitem__(self, key: StatName) -> float:
        return self._values[key]

    def __iter__(self) -> Iterator[StatName]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def _nonzero(self) -> dict[StatName, float]:
        return {key: value for key, value in self._values.items() if value != 0}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StatMap):
            return self._nonzero() == other._nonzero()
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(frozenset(self._nonzero().items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k.value}={v:g}" for k, v in self._values.items())
        return f"StatMap({inner})"

    # --- Arithmetic ---------------------------------------------------------

    def get(self, key: StatName, default: float = 0.0) -> float:  # type: ignore[override]
        """Value for *key*; absent stats default to 0."""
        return self._values.get(key, default)

    def __add__(self, other: object) -> StatMap:
        if not isinstance(other, StatMap):
            return NotImplemented
        merged = dict(self._values)
        for key, value in other._values.items():
            merged[key] = merged.get(key, 0.0) + value
        return StatMap(merged)

    def with_value(self, key: StatName, value: float) -> StatMap:
        """Return a copy with *key* set to *value*."""
        updated = dict(self._values)
        updated[parse_stat_name(key)] = value
        return StatMap(updated)

    def clamped(self, minimum: float = 0.0) -> StatMap:
        """Return a copy with every value raised to at least *minimum*."""
        return StatMap({key: max(value, minimum) for key, value in self._values.items()})

    def to_dict(self) -> dict[str, float]:
        return {key.value: value for key, value in self._values.items()}


EMPTY_STATS = StatMap()

"""Build editor: field-by-field mutation of a build on behalf of UI/storage.

Wraps a Build together with the GameData it draws items and perks from,
and exposes the operations a planner front end needs: change class, edit
a base stat, equip/unequip, toggle a perk, select a target. Derived stats
are evaluated on demand and cached until the next mutation.

The evaluator never mutates a Build; this module is the only place that
does, and it always works on its own private copy.
"""

from __future__ import annotations

import itertools

from darker_planner.data.catalog import GameData
from darker_planner.engine.evaluator import evaluate
from darker_planner.models.build import Build
from darker_planner.models.combat_settings import CombatSettings
from darker_planner.models.constants import (
    DEFAULT_BASE_STATS,
    DEFAULT_CLASS_ID,
    ItemSlot,
    StatName,
)
from darker_planner.models.derived_stats import DerivedStats
from darker_planner.models.item import Item
from darker_planner.models.stat_map import StatMap, check_number, parse_stat_name
from darker_planner.models.status_effect import StatusEffect


_build_counter = itertools.count(1)


def _next_build_id() -> str:
    return f"build-{next(_build_counter)}"


class BuildEditor:
    """Owns one Build and applies collaborator edits to it.

    Consumes GameData and CombatSettings without modifying either.
    """

    __slots__ = ("_build", "_game_data", "_settings", "_derived_cache")

    def __init__(
        self,
        build: Build,
        game_data: GameData | None = None,
        settings: CombatSettings | None = None,
    ) -> None:
        self._build = build.clone()
        self._game_data = game_data or GameData.defaults()
        self._settings = settings or CombatSettings.defaults()
        self._derived_cache: DerivedStats | None = None

    # --- Factories ---------------------------------------------------------

    @classmethod
    def new_build(
        cls,
        game_data: GameData | None = None,
        settings: CombatSettings | None = None,
        *,
        class_id: str = DEFAULT_CLASS_ID,
        build_id: str | None = None,
        name: str = "New Build",
    ) -> BuildEditor:
        """Start an empty build with default base stats."""
        build = Build(
            id=build_id or _next_build_id(),
            name=name,
            class_id=class_id,
            base_stats=StatMap(DEFAULT_BASE_STATS),
        )
        return cls(build, game_data, settings)

    def copy(self, *, build_id: str | None = None) -> BuildEditor:
        """Duplicate the build under a new id ("Save as new")."""
        clone = BuildEditor(self._build, self._game_data, self._settings)
        clone._build.id = build_id or _next_build_id()
        clone._build.name = f"{self._build.name} (copy)"
        return clone

    # --- State -------------------------------------------------------------

    @property
    def build(self) -> Build:
        """Return a copy of the current build for rendering or storage."""
        return self._build.clone()

    @property
    def game_data(self) -> GameData:
        return self._game_data

    def _invalidate(self) -> None:
        self._derived_cache = None

    def derived(self) -> DerivedStats:
        """Evaluate the current build, reusing the last result if unchanged."""
        if self._derived_cache is None:
            self._derived_cache = evaluate(self._build, self._game_data, self._settings)
        return self._derived_cache

    # --- Character -----------------------------------------------------------

    def set_name(self, name: str) -> None:
        self._build.name = name

    def set_class(self, class_id: str) -> None:
        self._build.class_id = class_id
        self._invalidate()

    def set_base_stat(self, stat: StatName | str, value: float) -> None:
        """Set one user-edited base stat. Negative or non-numeric values raise."""
        name = parse_stat_name(stat, "base_stats")
        number = check_number(value, f"base_stats.{name.value}")
        if number < 0:
            raise ValueError(f"Base stat {name.value} must be >= 0, got {number:g}")
        self._build.base_stats = self._build.base_stats.with_value(name, number)
        self._invalidate()

    # --- Gear --------------------------------------------------------------

    def equip_item(self, slot: ItemSlot, item: Item) -> None:
        """Put *item* in *slot*, replacing whatever was there."""
        if item.slot is not slot:
            raise ValueError(
                f"Item {item.id!r} belongs in {item.slot.value}, not {slot.value}"
            )
        self._build.equipped_items[slot] = item
        self._invalidate()

    def equip(self, slot: ItemSlot, item_id: str | None) -> bool:
        """Equip a catalog item by id; None clears the slot.

        Returns False (and changes nothing) if the id is not in the catalog.
        """
        if item_id is None:
            self.unequip(slot)
            return True
        item = self._game_data.item(item_id)
        if item is None:
            return False
        self.equip_item(slot, item)
        return True

    def unequip(self, slot: ItemSlot) -> Item | None:
        removed = self._build.equipped_items.pop(slot, None)
        if removed is not None:
            self._invalidate()
        return removed

    # --- Perks and effects -------------------------------------------------

    def toggle_perk(self, perk_id: str) -> bool:
        """Remove the perk if active, otherwise add it from the catalog.

        Returns True if the toggle was applied; an unknown id is a no-op.
        """
        if self._build.has_perk(perk_id):
            self._build.perks = [p for p in self._build.perks if p.id != perk_id]
            self._invalidate()
            return True
        perk = self._game_data.perk(perk_id)
        if perk is None:
            return False
        self._build.perks.append(perk)
        self._invalidate()
        return True

    def add_status_effect(self, effect: StatusEffect) -> None:
        self._build.active_status_effects.append(effect)
        self._invalidate()

    def remove_status_effect(self, effect_id: str) -> bool:
        before = len(self._build.active_status_effects)
        self._build.active_status_effects = [
            e for e in self._build.active_status_effects if e.id != effect_id
        ]
        if len(self._build.active_status_effects) == before:
            return False
        self._invalidate()
        return True

    # --- Target ------------------------------------------------------------

    def select_target(self, enemy_id: str | None) -> None:
        self._build.target_enemy_id = enemy_id or None
        self._invalidate()

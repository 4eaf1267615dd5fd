"""Character build data model.

Represents a player's build choices: class, user-edited base stats,
equipped items, active perks and status effects, and the selected target.
This is the core input to the evaluator. UI and storage collaborators
mutate it field by field; the engine only ever reads it.
"""

from dataclasses import dataclass, field, replace

from darker_planner.models.constants import (
    DEFAULT_BASE_STATS,
    DEFAULT_CLASS_ID,
    GAME_VERSION,
    ItemSlot,
)
from darker_planner.models.item import Item
from darker_planner.models.perk import Perk
from darker_planner.models.stat_map import StatMap
from darker_planner.models.status_effect import StatusEffect


@dataclass
class Build:
    """A single character build."""

    # Identity
    id: str = "new-build"
    name: str = "New Build"
    game_version: str | None = GAME_VERSION

    class_id: str = DEFAULT_CLASS_ID

    base_stats: StatMap = field(default_factory=lambda: StatMap(DEFAULT_BASE_STATS))

    # Slot → item; a slot holds at most one item and may be empty
    equipped_items: dict[ItemSlot, Item] = field(default_factory=dict)

    # Active perks in activation order, unique by id
    perks: list[Perk] = field(default_factory=list)

    active_status_effects: list[StatusEffect] = field(default_factory=list)

    target_enemy_id: str | None = None

    @property
    def main_weapon(self) -> Item | None:
        return self.equipped_items.get(ItemSlot.WEAPON_MAIN)

    def iter_equipped(self) -> list[Item]:
        """Equipped items in slot declaration order, empty slots skipped."""
        return [
            self.equipped_items[slot]
            for slot in ItemSlot
            if self.equipped_items.get(slot) is not None
        ]

    def has_perk(self, perk_id: str) -> bool:
        return any(p.id == perk_id for p in self.perks)

    def clone(self) -> "Build":
        """Copy with fresh containers; items, perks and effects are immutable and shared."""
        return replace(
            self,
            equipped_items=dict(self.equipped_items),
            perks=list(self.perks),
            active_status_effects=list(self.active_status_effects),
        )

"""Read-only reference catalogs consulted by the engine.

GameData bundles the class baselines, enemy list, and item/perk libraries
behind fetch-by-id lookups. It is passed explicitly into the aggregator and
evaluator; use GameData.defaults() for the shipped data or build one from
fixture lists in tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from darker_planner.models.constants import ItemSlot
from darker_planner.models.enemy import EnemyProfile
from darker_planner.models.item import Item
from darker_planner.models.perk import Perk
from darker_planner.models.stat_map import StatMap


def _index(records: Iterable, kind: str) -> Mapping:
    by_id = {}
    for record in records:
        if record.id in by_id:
            raise ValueError(f"Duplicate {kind} id: {record.id!r}")
        by_id[record.id] = record
    return MappingProxyType(by_id)


@dataclass(frozen=True)
class GameData:
    """Lookup tables for classes, enemies, items and perks."""

    classes: Mapping[str, StatMap] = field(default_factory=dict)
    enemies: Mapping[str, EnemyProfile] = field(default_factory=dict)
    items: Mapping[str, Item] = field(default_factory=dict)
    perks: Mapping[str, Perk] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        classes: Mapping[str, StatMap] | None = None,
        enemies: Iterable[EnemyProfile] = (),
        items: Iterable[Item] = (),
        perks: Iterable[Perk] = (),
    ) -> GameData:
        """Index record lists by id. Duplicate ids raise ValueError."""
        return cls(
            classes=MappingProxyType(dict(classes or {})),
            enemies=_index(enemies, "enemy"),
            items=_index(items, "item"),
            perks=_index(perks, "perk"),
        )

    @classmethod
    def defaults(cls) -> GameData:
        """The shipped class, enemy, item and perk data."""
        from darker_planner.data.classes import CLASS_BASE_STATS
        from darker_planner.data.enemies import ENEMIES
        from darker_planner.data.items import ITEMS
        from darker_planner.data.perks import PERKS

        return cls.build(CLASS_BASE_STATS, ENEMIES, ITEMS, PERKS)

    # --- Lookups (None on miss) ---------------------------------------------

    def class_base_stats(self, class_id: str) -> StatMap | None:
        return self.classes.get(class_id)

    def enemy(self, enemy_id: str | None) -> EnemyProfile | None:
        if not enemy_id:
            return None
        return self.enemies.get(enemy_id)

    def item(self, item_id: str | None) -> Item | None:
        if not item_id:
            return None
        return self.items.get(item_id)

    def perk(self, perk_id: str | None) -> Perk | None:
        if not perk_id:
            return None
        return self.perks.get(perk_id)

    def items_for_slot(self, slot: ItemSlot) -> list[Item]:
        return [item for item in self.items.values() if item.slot is slot]

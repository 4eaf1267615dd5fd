"""Tests for GameData catalogs and the shipped reference data."""

import pytest

from darker_planner.data.catalog import GameData
from darker_planner.engine.validation import validate_enemy, validate_item, validate_perk
from darker_planner.models.constants import ItemSlot, StatName
from darker_planner.models.enemy import EnemyProfile
from darker_planner.models.stat_map import StatMap


@pytest.fixture
def data():
    """Shipped catalogs."""
    return GameData.defaults()


def test_all_classes_present(data):
    assert set(data.classes) == {"fighter", "barbarian", "ranger", "wizard", "cleric", "rogue"}


def test_class_baseline_values(data):
    rogue = data.class_base_stats("rogue")
    assert rogue[StatName.AGILITY] == 18
    assert rogue[StatName.HEALTH] == 85


def test_unknown_lookups_return_none(data):
    assert data.class_base_stats("necromancer") is None
    assert data.enemy("dragon") is None
    assert data.enemy(None) is None
    assert data.item("") is None
    assert data.perk("telekinesis") is None


def test_enemy_lookup(data):
    enemy = data.enemy("dummy-medium")
    assert enemy.max_health == 120
    assert enemy.defense == 40


def test_items_for_slot(data):
    weapons = data.items_for_slot(ItemSlot.WEAPON_MAIN)
    assert weapons
    assert all(item.slot is ItemSlot.WEAPON_MAIN for item in weapons)
    assert data.items_for_slot(ItemSlot.WEAPON_OFF) == []


def test_shipped_records_are_well_formed(data):
    for item in data.items.values():
        validate_item(item, item.id)
    for perk in data.perks.values():
        validate_perk(perk, perk.id)
    for enemy in data.enemies.values():
        validate_enemy(enemy, enemy.id)


def test_duplicate_ids_rejected():
    enemy = EnemyProfile(id="e", name="E", max_health=10)
    with pytest.raises(ValueError, match="Duplicate enemy id"):
        GameData.build(enemies=[enemy, enemy])


def test_catalog_is_read_only():
    data = GameData.build(classes={"x": StatMap()})
    with pytest.raises(TypeError):
        data.classes["y"] = StatMap()

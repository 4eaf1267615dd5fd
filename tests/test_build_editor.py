"""Tests for the build editor (collaborator-side mutation + cached evaluation)."""

import pytest

from darker_planner.data.catalog import GameData
from darker_planner.engine.build_editor import BuildEditor
from darker_planner.models.build import Build
from darker_planner.models.constants import (
    DEFAULT_BASE_STATS,
    ItemSlot,
    StatName,
)
from darker_planner.models.errors import BuildValidationError
from darker_planner.models.item import Item
from darker_planner.models.perk import Perk
from darker_planner.models.stat_map import StatMap
from darker_planner.models.status_effect import StatusEffect


S = StatName

RING = Item(id="ring", name="Ring", slot=ItemSlot.RING_1,
            stat_bonuses=StatMap({S.STRENGTH: 3, S.HEALTH: 10}))
BOOTS = Item(id="boots", name="Boots", slot=ItemSlot.BOOTS, base_armor=5)
THICK = Perk(id="thick-skin", name="Thick Skin", stat_bonuses=StatMap({S.HEALTH: 20}))
RAGE = Perk(id="rage", name="Rage", global_damage_multiplier=1.5)


def _data() -> GameData:
    return GameData.build(
        classes={"fighter": StatMap({S.STRENGTH: 4})},
        items=[RING, BOOTS],
        perks=[THICK, RAGE],
    )


def _editor() -> BuildEditor:
    return BuildEditor.new_build(_data(), build_id="b1")


# --- Creation ---

def test_new_build_defaults():
    build = _editor().build
    assert build.id == "b1"
    assert build.class_id == "fighter"
    assert build.base_stats == StatMap(DEFAULT_BASE_STATS)
    assert build.equipped_items == {}
    assert build.perks == []
    assert build.target_enemy_id is None


def test_new_build_ids_are_unique():
    a = BuildEditor.new_build(_data())
    b = BuildEditor.new_build(_data())
    assert a.build.id != b.build.id


def test_editor_does_not_alias_caller_build():
    original = Build(id="mine")
    editor = BuildEditor(original, _data())
    editor.equip_item(ItemSlot.RING_1, RING)
    assert original.equipped_items == {}


def test_build_property_returns_copy():
    editor = _editor()
    snapshot = editor.build
    snapshot.perks.append(RAGE)
    assert editor.build.perks == []


def test_copy_gets_new_identity():
    editor = _editor()
    editor.toggle_perk("rage")
    clone = editor.copy(build_id="b2")
    assert clone.build.id == "b2"
    assert clone.build.name == "New Build (copy)"
    assert clone.build.perks == [RAGE]
    clone.toggle_perk("rage")
    assert editor.build.perks == [RAGE]


# --- Stats ---

def test_set_base_stat():
    editor = _editor()
    editor.set_base_stat("strength", 15)
    assert editor.derived().combined_stats[S.STRENGTH] == 19


def test_set_base_stat_rejects_negative():
    with pytest.raises(ValueError, match="strength"):
        _editor().set_base_stat(S.STRENGTH, -1)


def test_set_base_stat_rejects_non_numeric():
    with pytest.raises(BuildValidationError):
        _editor().set_base_stat(S.STRENGTH, "lots")


def test_set_class_unknown_is_empty_baseline():
    editor = _editor()
    editor.set_class("necromancer")
    assert editor.derived().combined_stats[S.STRENGTH] == DEFAULT_BASE_STATS[S.STRENGTH]


# --- Gear ---

def test_equip_then_unequip_restores_stats():
    editor = _editor()
    before = editor.derived().combined_stats

    assert editor.equip(ItemSlot.RING_1, "ring") is True
    assert editor.derived().combined_stats[S.STRENGTH] == before[S.STRENGTH] + 3

    assert editor.unequip(ItemSlot.RING_1) == RING
    assert editor.derived().combined_stats == before


def test_equip_none_clears_slot():
    editor = _editor()
    editor.equip(ItemSlot.BOOTS, "boots")
    editor.equip(ItemSlot.BOOTS, None)
    assert ItemSlot.BOOTS not in editor.build.equipped_items


def test_equip_unknown_item_is_noop():
    editor = _editor()
    assert editor.equip(ItemSlot.BOOTS, "glass-slipper") is False
    assert editor.build.equipped_items == {}


def test_equip_replaces_slot():
    other = Item(id="boots2", name="Boots 2", slot=ItemSlot.BOOTS, base_armor=9)
    editor = _editor()
    editor.equip_item(ItemSlot.BOOTS, BOOTS)
    editor.equip_item(ItemSlot.BOOTS, other)
    assert editor.build.equipped_items == {ItemSlot.BOOTS: other}
    assert editor.derived().defense.armor_rating == 9


def test_equip_wrong_slot_raises():
    with pytest.raises(ValueError, match="belongs in boots"):
        _editor().equip_item(ItemSlot.HELMET, BOOTS)


def test_unequip_empty_slot():
    assert _editor().unequip(ItemSlot.HELMET) is None


# --- Perks ---

def test_toggle_perk_twice_is_idempotent():
    editor = _editor()
    baseline = editor.derived()

    assert editor.toggle_perk("thick-skin") is True
    assert editor.derived().defense.hit_points == baseline.defense.hit_points + 20

    assert editor.toggle_perk("thick-skin") is True
    assert editor.build.perks == []
    assert editor.derived() == baseline


def test_toggle_keeps_perks_unique():
    editor = _editor()
    editor.toggle_perk("rage")
    editor.toggle_perk("thick-skin")
    editor.toggle_perk("rage")
    editor.toggle_perk("rage")
    assert [p.id for p in editor.build.perks] == ["thick-skin", "rage"]


def test_toggle_unknown_perk_is_noop():
    editor = _editor()
    assert editor.toggle_perk("telekinesis") is False
    assert editor.build.perks == []


def test_status_effects():
    effect = StatusEffect(id="fed", name="Well Fed", stat_bonuses=StatMap({S.HEALTH: 5}))
    editor = _editor()
    editor.add_status_effect(effect)
    assert editor.derived().defense.hit_points == 105
    assert editor.remove_status_effect("fed") is True
    assert editor.remove_status_effect("fed") is False
    assert editor.derived().defense.hit_points == 100


# --- Target and caching ---

def test_select_target_unknown_is_no_target():
    editor = BuildEditor.new_build(GameData.defaults())
    editor.select_target("dummy-heavy")
    assert editor.derived().target_enemy_id == "dummy-heavy"
    editor.select_target("")
    assert editor.build.target_enemy_id is None
    assert editor.derived().target_enemy_id is None


def test_derived_is_cached_until_mutation():
    editor = _editor()
    first = editor.derived()
    assert editor.derived() is first
    editor.toggle_perk("rage")
    second = editor.derived()
    assert second is not first
    assert second.offense.approx_dps == pytest.approx(first.offense.approx_dps * 1.5)


def test_rename_does_not_invalidate():
    editor = _editor()
    first = editor.derived()
    editor.set_name("Renamed")
    assert editor.derived() is first
    assert editor.build.name == "Renamed"


def test_cached_per_hit_figures_are_read_only():
    editor = _editor()
    offense = editor.derived().offense
    assert offense.damage_per_hit["body"] == pytest.approx(5.0)
    with pytest.raises(TypeError):
        offense.damage_per_hit["body"] = -1.0
    with pytest.raises(TypeError):
        offense.damage_per_hit_vs_enemy["body"] = -1.0
    assert editor.derived().offense.damage_per_hit["body"] == pytest.approx(5.0)

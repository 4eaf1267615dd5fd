"""Dump derived stats for a sample build.

Creates a build from command-line choices and evaluates it to verify the
full pipeline: class baseline → stats → gear/perks → damage → summaries.

Usage:
    python -m scripts.dump_build [--class rogue] [--weapon rondel-dagger-common]
                                 [--armor padded-tunic] [--perk ambush]
                                 [--target dummy-medium] [--stat agility=20]
                                 [--json] [--verbose]
"""

from __future__ import annotations

import argparse
import json
import logging

from darker_planner.data.catalog import GameData
from darker_planner.engine.build_editor import BuildEditor
from darker_planner.models.constants import STAT_DISPLAY_NAMES, ItemSlot, StatName
from darker_planner.models.derived_stats import DerivedStats
from darker_planner.models.stat_map import parse_stat_name


def _parse_stat_override(raw: str) -> tuple[StatName, float]:
    name, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Expected STAT=VALUE, got: {raw!r}")
    return parse_stat_name(name.strip().lower(), "--stat"), float(value)


def _build_editor(args: argparse.Namespace, game_data: GameData) -> BuildEditor:
    editor = BuildEditor.new_build(game_data, class_id=args.class_id, name="CLI Build")
    for raw in args.stat or []:
        stat, value = _parse_stat_override(raw)
        editor.set_base_stat(stat, value)
    for item_id in [args.weapon, *(args.armor or [])]:
        if item_id is None:
            continue
        item = game_data.item(item_id)
        if item is None:
            raise ValueError(f"Unknown item id: {item_id!r}")
        editor.equip_item(item.slot, item)
    for perk_id in args.perk or []:
        if not editor.toggle_perk(perk_id):
            raise ValueError(f"Unknown perk id: {perk_id!r}")
    editor.select_target(args.target)
    return editor


def _print_summary(derived: DerivedStats, game_data: GameData) -> None:
    print("=== Combined stats ===")
    for stat in StatName:
        print(f"  {STAT_DISPLAY_NAMES[stat]:<10} {derived.combined_stats.get(stat):>8.1f}")

    d = derived.defense
    print("\n=== Defense ===")
    print(f"  HP:            {d.hit_points:.1f}")
    print(f"  Armor Rating:  {d.armor_rating:.1f}")
    print(f"  EHP (approx):  {d.effective_hit_points:.1f}")

    o = derived.offense
    print("\n=== Offense ===")
    print(f"  Damage/hit (body, pre-armor): {o.weapon_damage_per_hit:.1f}")
    print(f"  Attacks per second:           {o.attacks_per_second:.2f}")
    for profile in ("body", "headshot", "backstab"):
        print(f"  {profile:<9} DPS {o.dps_for(profile):>8.1f}"
              f"   vs enemy {o.dps_for(profile, vs_enemy=True):>8.1f}")

    enemy = game_data.enemy(derived.target_enemy_id)
    if enemy is not None:
        ttk = o.time_to_kill(enemy.max_health)
        ttk_text = "n/a" if ttk is None else f"{ttk:.2f}s"
        print(f"\n  TTK vs {enemy.name}: {ttk_text}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump derived stats for a sample build")
    parser.add_argument("--class", dest="class_id", default="fighter",
                        help="Class id (fighter, barbarian, ranger, wizard, cleric, rogue)")
    parser.add_argument("--weapon", help="Main-hand item id")
    parser.add_argument("--armor", action="append",
                        help="Armor/jewelry item id; repeat for more slots")
    parser.add_argument("--perk", action="append", help="Perk id; repeatable")
    parser.add_argument("--target", help="Target enemy id")
    parser.add_argument("--stat", action="append",
                        help="Base stat override STAT=VALUE; repeatable")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--list", action="store_true", help="List catalog ids and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    game_data = GameData.defaults()
    if args.list:
        print("Classes:", ", ".join(sorted(game_data.classes)))
        for slot in ItemSlot:
            ids = [item.id for item in game_data.items_for_slot(slot)]
            if ids:
                print(f"Items ({slot.value}):", ", ".join(ids))
        print("Perks:", ", ".join(game_data.perks))
        print("Enemies:", ", ".join(game_data.enemies))
        return 0

    try:
        editor = _build_editor(args, game_data)
    except ValueError as exc:
        parser.error(str(exc))

    derived = editor.derived()
    if args.json:
        print(json.dumps(derived.to_dict(), indent=2, sort_keys=True))
    else:
        _print_summary(derived, game_data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

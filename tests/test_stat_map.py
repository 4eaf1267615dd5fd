"""Tests for StatMap merging and boundary parsing."""

import math

import pytest

from darker_planner.engine.stats import add_stat_maps
from darker_planner.models.constants import StatName
from darker_planner.models.errors import BuildValidationError
from darker_planner.models.stat_map import EMPTY_STATS, StatMap


S = StatName


def test_sums_overlapping_and_keeps_non_overlapping():
    a = StatMap({S.STRENGTH: 10, S.AGILITY: 5})
    b = StatMap({S.STRENGTH: 2, S.HEALTH: 50})

    result = add_stat_maps(a, b)

    assert result[S.STRENGTH] == 12
    assert result[S.AGILITY] == 5
    assert result[S.HEALTH] == 50
    assert S.WILL not in result


def test_missing_key_reads_as_zero():
    assert StatMap({S.STRENGTH: 3}).get(S.KNOWLEDGE) == 0


def test_merge_is_commutative():
    a = StatMap({S.STRENGTH: 10, S.WILL: 3})
    b = StatMap({S.STRENGTH: 2, S.HEALTH: 50})
    assert a + b == b + a


def test_merge_is_associative():
    a = StatMap({S.STRENGTH: 10})
    b = StatMap({S.STRENGTH: 2, S.AGILITY: 4})
    c = StatMap({S.AGILITY: -1, S.RESOURCE: 7})
    assert (a + b) + c == a + (b + c)


def test_empty_map_is_identity():
    a = StatMap({S.STRENGTH: 10, S.HEALTH: 100})
    assert a + EMPTY_STATS == a
    assert EMPTY_STATS + a == a


def test_merge_returns_new_instance():
    a = StatMap({S.STRENGTH: 10})
    b = StatMap({S.STRENGTH: 1})
    result = a + b
    assert result is not a
    assert a[S.STRENGTH] == 10


def test_with_value_leaves_original_untouched():
    a = StatMap({S.STRENGTH: 10})
    b = a.with_value(S.STRENGTH, 20)
    assert a[S.STRENGTH] == 10
    assert b[S.STRENGTH] == 20


# --- from_dict ---

def test_from_dict_accepts_string_keys_and_skips_none():
    stats = StatMap.from_dict({"strength": 15, "agility": None, "health": 100.5})
    assert stats == StatMap({S.STRENGTH: 15, S.HEALTH: 100.5})
    assert S.AGILITY not in stats


def test_from_dict_round_trips_through_to_dict():
    data = {"strength": 15.0, "will": 3.0}
    assert StatMap.from_dict(data).to_dict() == data


@pytest.mark.parametrize("bad", ["10", True, object(), [1], math.nan, math.inf, -math.inf])
def test_from_dict_rejects_non_numeric(bad):
    with pytest.raises(BuildValidationError, match="strength"):
        StatMap.from_dict({"strength": bad})


def test_from_dict_rejects_unknown_stat():
    with pytest.raises(BuildValidationError, match="unknown stat 'luck'"):
        StatMap.from_dict({"luck": 1})


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        StatMap({"luck": 1})


def test_stat_map_is_hashable():
    assert hash(StatMap({S.STRENGTH: 1})) == hash(StatMap({S.STRENGTH: 1}))


def test_explicit_zero_equals_absent_key():
    assert StatMap({S.STRENGTH: 0}) == StatMap()
    assert StatMap({S.STRENGTH: 0, S.HEALTH: 5}) == StatMap({S.HEALTH: 5})
    assert hash(StatMap({S.STRENGTH: 0})) == hash(EMPTY_STATS)
    assert StatMap({S.STRENGTH: 1}) != StatMap()


def test_clamped_floors_each_value():
    stats = StatMap({S.STRENGTH: -4, S.AGILITY: 3})
    assert stats.clamped() == StatMap({S.STRENGTH: 0, S.AGILITY: 3})
    assert stats[S.STRENGTH] == -4

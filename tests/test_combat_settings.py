"""Tests for CombatSettings defaults and overrides."""

import pytest

from darker_planner.models.combat_settings import _DEFAULT_VALUES, CombatSettings


def test_defaults_has_all_keys():
    settings = CombatSettings.defaults()
    for key in _DEFAULT_VALUES:
        assert settings.get_float(key, -999.0) != -999.0, f"Missing setting: {key}"


def test_named_defaults():
    s = CombatSettings.defaults()
    assert s.physical_mitigation_k == pytest.approx(85.0)
    assert s.magical_mitigation_k == pytest.approx(65.0)
    assert s.effective_health_mitigation_k == pytest.approx(100.0)
    assert s.unarmed_damage == pytest.approx(5.0)
    assert s.default_headshot_multiplier == pytest.approx(1.5)
    assert s.backstab_multiplier == pytest.approx(1.3)
    assert s.stealth_multiplier == pytest.approx(1.5)
    assert s.base_attacks_per_second == pytest.approx(1.0)
    assert s.attacks_per_second_agility_mult == pytest.approx(0.01)


def test_empty_settings_fall_back_to_accessor_defaults():
    s = CombatSettings()
    assert s.backstab_multiplier == pytest.approx(1.3)
    assert s.get_float("nonexistent", 42.0) == pytest.approx(42.0)


def test_overrides_return_new_instance():
    base = CombatSettings.defaults()
    tuned = base.with_overrides({"backstab_multiplier": 2.0})
    assert tuned.backstab_multiplier == pytest.approx(2.0)
    assert base.backstab_multiplier == pytest.approx(1.3)


def test_unknown_override_rejected():
    with pytest.raises(ValueError, match="crit_multiplier"):
        CombatSettings.defaults().with_overrides({"crit_multiplier": 2.0})


def test_keys_match_accessor_names():
    s = CombatSettings.defaults()
    for key in _DEFAULT_VALUES:
        assert getattr(s, key) == pytest.approx(_DEFAULT_VALUES[key])


@pytest.mark.parametrize("k", [0.0, -10.0])
@pytest.mark.parametrize(
    "key", ["physical_mitigation_k", "magical_mitigation_k", "effective_health_mitigation_k"]
)
def test_mitigation_constant_must_be_positive(key, k):
    with pytest.raises(ValueError, match=key):
        CombatSettings.defaults().with_overrides({key: k})


def test_negative_override_rejected():
    with pytest.raises(ValueError, match="unarmed_damage"):
        CombatSettings.defaults().with_overrides({"unarmed_damage": -1.0})


@pytest.mark.parametrize("value", ["2.0", True, float("nan"), float("inf")])
def test_non_numeric_override_rejected(value):
    with pytest.raises(ValueError):
        CombatSettings.defaults().with_overrides({"backstab_multiplier": value})


def test_zero_multiplier_allowed():
    tuned = CombatSettings.defaults().with_overrides({"attacks_per_second_agility_mult": 0})
    assert tuned.attacks_per_second_agility_mult == 0.0

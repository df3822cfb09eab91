from dataclasses import FrozenInstanceError

import pytest

from unitbase.core.errors import MissingPreferenceError
from unitbase.core.families import UnitFamily
from unitbase.preferences import (
    DEFAULT_PREFERENCES,
    FALLBACK_UNIT,
    UnitPreferences,
    UnitRef,
    UnitsConfig,
    resolve_display_unit,
    resolve_from_unit_ref,
)

# -------------------------------
# UnitPreferences
# -------------------------------

def test_defaults():
    assert DEFAULT_PREFERENCES.as_dict() == {
        "mass": "kg", "distance": "m", "length": "cm", "time": "s", "speed": "m/s",
        "count": "count", "percent": "percent", "score": "score", "reps": "reps",
    }


@pytest.mark.parametrize("field, unit", [("mass", "m"), ("speed", "kg"), ("time", "h"), ("count", "reps")])
def test_unit_must_belong_to_its_family(field, unit):
    with pytest.raises(ValueError, match="is not a"):
        UnitPreferences(**{field: unit})


def test_percent_symbol_allowed_for_percent():
    assert UnitPreferences(percent="%").percent == "%"


def test_lookup_by_family_or_name(imperial_prefs):
    assert imperial_prefs[UnitFamily.MASS] == "lb"
    assert imperial_prefs["length"] == "in"
    with pytest.raises(MissingPreferenceError):
        imperial_prefs["volume"]


def test_preferences_are_immutable():
    with pytest.raises(FrozenInstanceError):
        DEFAULT_PREFERENCES.mass = "lb"  # type: ignore[misc]


def test_with_changes_validates():
    prefs = DEFAULT_PREFERENCES.with_changes(mass="lb")
    assert prefs.mass == "lb"
    assert DEFAULT_PREFERENCES.mass == "kg"
    with pytest.raises(ValueError):
        DEFAULT_PREFERENCES.with_changes(mass="ft")


def test_from_mapping():
    prefs = UnitPreferences.from_mapping({"mass": "lb", "length": "in"})
    assert (prefs.mass, prefs.length, prefs.distance) == ("lb", "in", "m")
    with pytest.raises(ValueError, match="Unknown unit families"):
        UnitPreferences.from_mapping({"volume": "l"})


# -------------------------------
# UnitsConfig
# -------------------------------

def test_config_update_bumps_version():
    config = UnitsConfig()
    assert config.version == 1
    assert config.preferences is DEFAULT_PREFERENCES

    updated = config.update(mass="lb", speed="mph")
    assert updated.version == 2
    assert updated.preferences.mass == "lb"
    assert updated.preferences.speed == "mph"
    # the original is untouched
    assert config.version == 1
    assert config.preferences.mass == "kg"


def test_config_staleness():
    config = UnitsConfig()
    assert config.is_stale(None)
    assert not config.is_stale(1)
    assert config.update(time="min").is_stale(1)


def test_invalid_update_does_not_bump_version():
    config = UnitsConfig()
    with pytest.raises(ValueError):
        config.update(mass="mph")
    assert config.version == 1


# -------------------------------
# resolve_display_unit
# -------------------------------

def test_resolve_by_family(imperial_prefs):
    assert resolve_display_unit(UnitFamily.SPEED, imperial_prefs) == "mph"
    assert resolve_display_unit("distance", imperial_prefs) == "ft"
    assert resolve_display_unit("length", imperial_prefs) == "in"


def test_resolve_by_metric_key(imperial_prefs):
    assert resolve_display_unit("body_weight", imperial_prefs) == "lb"
    assert resolve_display_unit("height", imperial_prefs) == "in"
    assert resolve_display_unit("vertical_jump", imperial_prefs) == "ft"
    assert resolve_display_unit("sprint_time", imperial_prefs) == "min"
    assert resolve_display_unit("push_ups", imperial_prefs) == "count"


def test_resolve_accepts_config_and_mapping(imperial_prefs):
    assert resolve_display_unit("body_weight", UnitsConfig(imperial_prefs)) == "lb"
    assert resolve_display_unit("body_weight", {"mass": "lb"}) == "lb"


def test_missing_preference_is_a_hard_failure():
    with pytest.raises(MissingPreferenceError) as exc:
        resolve_display_unit("height", {"mass": "kg"})
    assert exc.value.family == "length"
    assert "length" in str(exc.value)


# -------------------------------
# resolve_from_unit_ref
# -------------------------------

def _ref(key, family):
    return {
        "key": key, "family": family, "to_base": 1, "from_base": 1,
        "label": f"{key}", "is_default": True,
    }


@pytest.mark.parametrize(
    "key, family, prefs_kw, expected",
    [
        ("cm", "length", {"length": "in"}, "in"),
        ("in", "length", {"length": "cm"}, "cm"),
        ("m", "distance", {"distance": "ft", "length": "in"}, "ft"),
        ("kg", "mass", {"mass": "lb"}, "lb"),
        ("kg", "weight", {"mass": "lb"}, "lb"),
        ("s", "time", {"time": "min"}, "min"),
        ("m/s", "speed", {"speed": "mph"}, "mph"),
    ],
)
def test_family_based_selection(key, family, prefs_kw, expected):
    prefs = UnitPreferences(**prefs_kw)
    assert resolve_from_unit_ref(key, _ref(key, family), prefs) == expected


def test_length_and_distance_are_independent():
    prefs = UnitPreferences(distance="ft", length="cm")
    assert resolve_from_unit_ref("cm", _ref("cm", "length"), prefs) == "cm"
    assert resolve_from_unit_ref("m", _ref("m", "distance"), prefs) == "ft"


@pytest.mark.parametrize("unit", ["count", "percent", "score", "reps", "%", "level"])
def test_non_convertible_units_returned_verbatim(unit, imperial_prefs):
    assert resolve_from_unit_ref(unit, None, imperial_prefs) == unit
    # even when the descriptor names a convertible family
    assert resolve_from_unit_ref("x", _ref(unit, "mass"), imperial_prefs) == unit


def test_count_family_keeps_raw_key(metric_prefs):
    assert resolve_from_unit_ref("attempts", _ref("attempts", "count"), metric_prefs) == "attempts"
    assert resolve_from_unit_ref("pts", _ref("pts", "percent"), metric_prefs) == "pts"


def test_descriptor_key_wins_over_raw_unit(metric_prefs):
    assert resolve_from_unit_ref("kg", UnitRef(key="score"), metric_prefs) == "score"
    assert resolve_from_unit_ref("ft", UnitRef(key=None, family=None), metric_prefs) == "ft"


def test_no_descriptor_returns_registered_unit(imperial_prefs):
    assert resolve_from_unit_ref("cm", None, imperial_prefs) == "cm"


def test_fallbacks(metric_prefs):
    assert resolve_from_unit_ref("unknown", _ref("unknown", "unknown_family"), metric_prefs) == FALLBACK_UNIT
    assert resolve_from_unit_ref("", None, metric_prefs) == "m"
    assert resolve_from_unit_ref(None, None, metric_prefs) == "m"


def test_unit_ref_missing_preference_raises():
    with pytest.raises(MissingPreferenceError):
        resolve_from_unit_ref("cm", _ref("cm", "length"), {})


def test_unit_ref_from_mapping_ignores_extra_fields():
    ref = UnitRef.from_mapping({"key": "cm", "family": "length", "extra": 1})
    assert (ref.key, ref.family) == ("cm", "length")

# tests/conftest.py
import pytest

from unitbase.migration.records import LegacyTestResult
from unitbase.preferences import UnitPreferences
from unitbase.units.registry import DEFAULT_TABLE as _table


@pytest.fixture(scope="session")
def table():
    return _table


@pytest.fixture
def metric_prefs():
    return UnitPreferences(mass="kg", distance="m", length="cm", time="s", speed="m/s")


@pytest.fixture
def imperial_prefs():
    return UnitPreferences(mass="lb", distance="ft", length="in", time="min", speed="mph")


@pytest.fixture
def legacy_records():
    return [
        LegacyTestResult("1", "body_weight", 165.3, "lbs"),
        LegacyTestResult("2", "height", 180, None),
        LegacyTestResult("3", "vertical_jump", 24, "inches"),
        LegacyTestResult("4", "sprint_time", 4.5, "sec"),
        LegacyTestResult("5", "reach", 12, "cubits"),
    ]

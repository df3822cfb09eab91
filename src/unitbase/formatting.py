"""
unitbase.formatting
===================

Presentation helpers: turn stored base values into display records using a
preference set or a versioned `UnitsConfig`. These only call the conversion
engine and reshape its output.

A missing value (``None`` or NaN) never fails to format: it renders the
placeholder glyph and still reports the unit that would have been used.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from unitbase.core.conversion import format_value, from_base
from unitbase.preferences import (
    DEFAULT_PREFERENCES,
    PreferencesLike,
    UnitPreferences,
    UnitsConfig,
    resolve_display_unit,
)

PLACEHOLDER = "—"


@dataclass(frozen=True, slots=True)
class FormattedValue:
    display_value: Optional[float]
    formatted_value: str
    unit: str
    version: Optional[int] = None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def display_unit_for_metric(metric_key: str, preferences: PreferencesLike = DEFAULT_PREFERENCES) -> str:
    return resolve_display_unit(metric_key, preferences)


def format_base_value(
    base_value: Optional[float],
    metric_key: str,
    preferences: PreferencesLike = DEFAULT_PREFERENCES,
    precision: int = 2,
) -> FormattedValue:
    """Format a single base value for ``metric_key``."""
    version = preferences.version if isinstance(preferences, UnitsConfig) else None
    unit = display_unit_for_metric(metric_key, preferences)

    if _is_missing(base_value):
        return FormattedValue(None, PLACEHOLDER, unit, version)

    return FormattedValue(
        from_base(base_value, unit),
        format_value(base_value, unit, precision),
        unit,
        version,
    )


def format_base_values(
    values: Mapping[str, Optional[float]],
    preferences: PreferencesLike = DEFAULT_PREFERENCES,
    precision: int = 2,
) -> Dict[str, FormattedValue]:
    """Format a ``{metric_key: base_value}`` mapping."""
    return {
        key: format_base_value(value, key, preferences, precision)
        for key, value in values.items()
    }


def format_results(
    results: Iterable[Mapping[str, Any]],
    preferences: PreferencesLike = DEFAULT_PREFERENCES,
    precision: int = 2,
) -> List[Dict[str, Any]]:
    """Merge formatted fields into rows carrying ``metric_key`` and ``value_base``."""
    rows = []
    for row in results:
        fv = format_base_value(row["value_base"], row["metric_key"], preferences, precision)
        rows.append({
            **row,
            "display_value": fv.display_value,
            "formatted_value": fv.formatted_value,
            "unit": fv.unit,
        })
    return rows


def format_results_for_api(
    results: Iterable[Mapping[str, Any]],
    preferences: PreferencesLike = DEFAULT_PREFERENCES,
) -> List[Dict[str, Any]]:
    """API shape: rows carrying ``test_key`` and ``value_base`` gain ``display_*`` fields."""
    rows = []
    for row in results:
        fv = format_base_value(row["value_base"], row["test_key"], preferences)
        rows.append({
            **row,
            "display_value": fv.display_value,
            "formatted_value": fv.formatted_value,
            "display_unit": fv.unit,
        })
    return rows


class FormattedValueCache:
    """Memoizes formatted values for one config version.

    Handing it a config with a different version or different preferences
    drops every cached entry. Separately built configs can share a version
    number, so the preferences are compared too.
    """

    def __init__(self) -> None:
        self._version: Optional[int] = None
        self._preferences: Optional[UnitPreferences] = None
        self._entries: Dict[tuple, FormattedValue] = {}

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def version(self) -> Optional[int]:
        return self._version

    def get(self, base_value: Optional[float], metric_key: str, config: UnitsConfig, precision: int = 2) -> FormattedValue:
        if config.is_stale(self._version) or config.preferences != self._preferences:
            self._entries.clear()
            self._version = config.version
            self._preferences = config.preferences

        key = (metric_key, base_value, precision)
        cached = self._entries.get(key)
        if cached is None:
            cached = format_base_value(base_value, metric_key, config, precision)
            self._entries[key] = cached
        return cached


__all__ = [
    "PLACEHOLDER",
    "FormattedValue",
    "FormattedValueCache",
    "display_unit_for_metric",
    "format_base_value",
    "format_base_values",
    "format_results",
    "format_results_for_api",
]

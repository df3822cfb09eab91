"""
unitbase.preferences
====================

Display-unit preferences and the resolver that picks the unit a base value is
rendered in.

Preferences are plain immutable values. A change produces a new
`UnitsConfig` with an incremented ``version``; consumers holding cached
display strings compare versions to decide whether to recompute them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Mapping, Optional, Union

from unitbase.core.errors import MissingPreferenceError
from unitbase.core.families import FAMILY_MEMBERS, UnitFamily, is_member
from unitbase.metrics.classifier import classify
from unitbase.units import registry as _registry


@dataclass(frozen=True)
class UnitPreferences:
    """The display unit chosen for every unit family.

    Each unit must be a member of its family; anything else is a programming
    error and raises ``ValueError`` at construction.
    """

    mass: str = "kg"
    distance: str = "m"
    length: str = "cm"
    time: str = "s"
    speed: str = "m/s"
    count: str = "count"
    percent: str = "percent"
    score: str = "score"
    reps: str = "reps"

    def __post_init__(self) -> None:
        for f in fields(self):
            family = UnitFamily(f.name)
            unit = getattr(self, f.name)
            if not is_member(unit, family):
                allowed = ", ".join(FAMILY_MEMBERS[family])
                raise ValueError(
                    f"'{unit}' is not a {family} unit; expected one of: {allowed}"
                )

    def __getitem__(self, family: Union[UnitFamily, str]) -> str:
        parsed = UnitFamily.parse(family)
        if parsed is None:
            raise MissingPreferenceError(family)
        return getattr(self, parsed.value)

    def with_changes(self, **changes: str) -> UnitPreferences:
        return replace(self, **changes)

    def as_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> UnitPreferences:
        """Build preferences from a stored mapping; missing families keep their defaults."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown unit families: {', '.join(sorted(unknown))}")
        return cls(**{k: str(v) for k, v in data.items()})


DEFAULT_PREFERENCES = UnitPreferences()


@dataclass(frozen=True)
class UnitsConfig:
    """Versioned preference set passed explicitly to formatting calls."""

    preferences: UnitPreferences = field(default=DEFAULT_PREFERENCES)
    version: int = 1

    def update(self, **changes: str) -> UnitsConfig:
        """Return a new config with ``changes`` merged in and the version bumped."""
        return UnitsConfig(self.preferences.with_changes(**changes), self.version + 1)

    def is_stale(self, version: Optional[int]) -> bool:
        """True if something computed at ``version`` must be recomputed."""
        return version != self.version


PreferencesLike = Union[UnitPreferences, UnitsConfig, Mapping[str, str]]


def preferred_unit(preferences: PreferencesLike, family: UnitFamily) -> str:
    """Look up the display unit for ``family``.

    Raises `MissingPreferenceError` when a mapping has no entry for it.
    """
    if isinstance(preferences, UnitsConfig):
        preferences = preferences.preferences
    if isinstance(preferences, UnitPreferences):
        return preferences[family]

    unit = preferences.get(family.value)
    if unit is None:
        raise MissingPreferenceError(family.value)
    return unit


def resolve_display_unit(metric_key_or_family: Union[str, UnitFamily], preferences: PreferencesLike) -> str:
    """Return the display unit for a family, or for a metric key after classifying it."""
    family = UnitFamily.parse(metric_key_or_family)
    if family is None:
        family = classify(metric_key_or_family)
    return preferred_unit(preferences, family)


# ---------------------------------------------------------------------------
# Legacy API unit descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitRef:
    """Unit descriptor carried by legacy API payloads."""

    key: Optional[str] = None
    family: Optional[str] = None
    to_base: Optional[float] = None
    from_base: Optional[float] = None
    label: Optional[str] = None
    is_default: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UnitRef:
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# descriptor family -> preference family
_REF_FAMILIES: Mapping[str, UnitFamily] = {
    "length": UnitFamily.LENGTH,      # body measurements (height, reach)
    "distance": UnitFamily.DISTANCE,  # movement and sport distances
    "mass": UnitFamily.MASS,
    "weight": UnitFamily.MASS,
    "time": UnitFamily.TIME,
    "speed": UnitFamily.SPEED,
}

FALLBACK_UNIT = "m"


def resolve_from_unit_ref(
    raw_unit: Optional[str],
    unit_ref: Union[UnitRef, Mapping[str, Any], None],
    preferences: PreferencesLike,
) -> str:
    """Pick the display unit for a legacy payload carrying a ``{key, family}`` descriptor.

    The descriptor's key wins over ``raw_unit``. Pass-through units are
    returned verbatim, convertible families use the matching preference, and
    anything unresolvable falls back to metres.
    """
    if isinstance(unit_ref, Mapping):
        unit_ref = UnitRef.from_mapping(unit_ref)

    unit_key = (unit_ref.key if unit_ref is not None else None) or raw_unit
    family = unit_ref.family if unit_ref is not None else None

    if unit_key and _registry.is_non_convertible(unit_key):
        return unit_key

    pref_family = _REF_FAMILIES.get(family) if family else None
    if pref_family is not None:
        return preferred_unit(preferences, pref_family)

    if family in ("count", "percent") and unit_key:
        return unit_key

    if unit_key and _registry.DEFAULT_TABLE.has(unit_key):
        return unit_key

    return FALLBACK_UNIT


__all__ = [
    "UnitPreferences",
    "DEFAULT_PREFERENCES",
    "UnitsConfig",
    "UnitRef",
    "PreferencesLike",
    "FALLBACK_UNIT",
    "preferred_unit",
    "resolve_display_unit",
    "resolve_from_unit_ref",
]

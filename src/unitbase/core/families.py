# unitbase.core.families

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class UnitFamily(str, Enum):
    """
    Category of units a measured quantity belongs to.

    ``LENGTH`` (body measurements: height, reach) and ``DISTANCE`` (movement
    distances: jumps, sprints) convert through the same units and base unit but
    carry independent display preferences.
    """

    MASS = "mass"
    DISTANCE = "distance"
    LENGTH = "length"
    TIME = "time"
    SPEED = "speed"
    COUNT = "count"
    PERCENT = "percent"
    SCORE = "score"
    REPS = "reps"

    @property
    def is_convertible(self) -> bool:
        return self not in NON_CONVERTIBLE_FAMILIES

    @classmethod
    def parse(cls, value: "str | UnitFamily") -> "UnitFamily | None":
        """Return the family named by ``value`` or ``None`` when it names none."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


NON_CONVERTIBLE_FAMILIES = frozenset({
    UnitFamily.COUNT,
    UnitFamily.PERCENT,
    UnitFamily.SCORE,
    UnitFamily.REPS,
})

# --- Base units --------------------------------------------------------------

BASE_UNITS: Mapping[UnitFamily, str] = MappingProxyType({
    UnitFamily.MASS:     "kg",
    UnitFamily.DISTANCE: "m",
    UnitFamily.LENGTH:   "m",
    UnitFamily.TIME:     "s",
    UnitFamily.SPEED:    "m/s",
    UnitFamily.COUNT:    "count",
    UnitFamily.PERCENT:  "percent",
    UnitFamily.SCORE:    "score",
    UnitFamily.REPS:     "reps",
})

# Display units a preference may select for each family.
_LINEAR = ("m", "cm", "in", "ft")

FAMILY_MEMBERS: Mapping[UnitFamily, tuple[str, ...]] = MappingProxyType({
    UnitFamily.MASS:     ("kg", "lb"),
    UnitFamily.DISTANCE: _LINEAR,
    UnitFamily.LENGTH:   _LINEAR,
    UnitFamily.TIME:     ("s", "min"),
    UnitFamily.SPEED:    ("m/s", "km/h", "mph"),
    UnitFamily.COUNT:    ("count",),
    UnitFamily.PERCENT:  ("percent", "%"),
    UnitFamily.SCORE:    ("score",),
    UnitFamily.REPS:     ("reps",),
})


def is_member(unit: str, family: UnitFamily) -> bool:
    return unit in FAMILY_MEMBERS[family]


__all__ = [
    "UnitFamily",
    "NON_CONVERTIBLE_FAMILIES",
    "BASE_UNITS",
    "FAMILY_MEMBERS",
    "is_member",
]

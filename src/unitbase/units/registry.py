"""
unitbase.units.registry
=======================

The unit table: a fixed, immutable registry mapping every supported display
unit to its factor and base unit.

- Data-driven registration of the mass, distance, time and speed units.
- Identity (pass-through) entries for the non-convertible families.
- Read-only public API: `factor_of`, `has`, `all`, `units_in`.
- Multiple tables can be built for testing; `DEFAULT_TABLE` is the shared one.

The table has no mutation path after construction. Values are stored in a
`MappingProxyType` and the class exposes no `register` method.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from unitbase.core.errors import UnknownUnitError
from unitbase.core.families import UnitFamily
from unitbase.core.unit import UnitFactor


# ---------------------------------------------------------------------------
# Unit table
# ---------------------------------------------------------------------------
class UnitTable:
    """Immutable registry of `UnitFactor` entries keyed by unit name.

    Lookups are exact: the table does not normalize free text. Use
    `unitbase.units.normalizer.normalize_unit_string` first for raw input.
    """

    __slots__ = ("_units",)

    def __init__(self, entries: Iterable[UnitFactor]) -> None:
        units: dict[str, UnitFactor] = {}
        for unit in entries:
            if unit.name in units:
                raise ValueError(
                    f"Cannot register unit '{unit.name}': "
                    "a unit with this name already exists."
                )
            units[unit.name] = unit
        self._units: Mapping[str, UnitFactor] = MappingProxyType(units)

    def __contains__(self, unit: object) -> bool:
        return isinstance(unit, str) and unit in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    # -------------------------- public API ---------------------------------
    def factor_of(self, unit: str) -> UnitFactor:
        """Lookup a unit by name.

        Raises `UnknownUnitError` if the unit is not registered.
        """
        if not isinstance(unit, str):
            raise UnknownUnitError(unit)
        found = self._units.get(unit)
        if found is None:
            raise UnknownUnitError(unit)
        return found

    def has(self, unit: str) -> bool:
        return unit in self

    def all(self) -> Mapping[str, UnitFactor]:
        return self._units

    def units_in(self, family: UnitFamily) -> tuple[UnitFactor, ...]:
        return tuple(u for u in self._units.values() if u.family is family)

    def is_non_convertible(self, unit: str) -> bool:
        found = self._units.get(unit) if isinstance(unit, str) else None
        return found is not None and not found.is_convertible


# ---------------------------------------------------------------------------
# Bootstrap the default table
# ---------------------------------------------------------------------------

def _bootstrap_default_table() -> UnitTable:
    # (name, factor, base, family)
    convertible_units = (
        # Mass (base: kg)
        ("kg",   1.0,          "kg",  UnitFamily.MASS),
        ("lb",   0.45359237,   "kg",  UnitFamily.MASS),

        # Distance (base: m); length preferences select from the same units
        ("m",    1.0,          "m",   UnitFamily.DISTANCE),
        ("cm",   0.01,         "m",   UnitFamily.DISTANCE),
        ("in",   0.0254,       "m",   UnitFamily.DISTANCE),
        ("ft",   0.3048,       "m",   UnitFamily.DISTANCE),

        # Time (base: s)
        ("s",    1.0,          "s",   UnitFamily.TIME),
        ("min",  60.0,         "s",   UnitFamily.TIME),

        # Speed (base: m/s)
        ("m/s",  1.0,          "m/s", UnitFamily.SPEED),
        ("km/h", 1 / 3.6,      "m/s", UnitFamily.SPEED),  # exact: 1 km/h = 1/3.6 m/s
        ("mph",  0.44704,      "m/s", UnitFamily.SPEED),
    )

    identity_units = (
        ("count",   UnitFamily.COUNT),
        ("percent", UnitFamily.PERCENT),
        ("%",       UnitFamily.PERCENT),
        ("score",   UnitFamily.SCORE),
        ("level",   UnitFamily.SCORE),
        ("reps",    UnitFamily.REPS),
    )

    entries = [UnitFactor(name, factor, base, family) for name, factor, base, family in convertible_units]
    entries.extend(UnitFactor.identity(name, family) for name, family in identity_units)
    return UnitTable(entries)


# Public, shared default table
DEFAULT_TABLE: UnitTable = _bootstrap_default_table()


def factor_of(unit: str) -> UnitFactor:
    """Return the `UnitFactor` for ``unit`` from the default table."""
    return DEFAULT_TABLE.factor_of(unit)


def is_non_convertible(unit: str) -> bool:
    """True when ``unit`` is a registered pass-through unit (count, %, score, ...)."""
    return DEFAULT_TABLE.is_non_convertible(unit)


__all__ = [
    "UnitTable",
    "DEFAULT_TABLE",
    "factor_of",
    "is_non_convertible",
]

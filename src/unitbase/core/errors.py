"""
unitbase.core.errors
====================

Exception hierarchy for unit conversion and preference lookup.

Conversion primitives are strict and raise these; callers opt into leniency
through ``safe_to_base`` / ``safe_from_base``. Migration problems are never
raised, they are collected as report entries (see ``unitbase.migration``).
"""

from __future__ import annotations


class UnitsError(Exception):
    """Base class for every error raised by unitbase."""


class UnknownUnitError(UnitsError, ValueError):
    """Raised when a unit string is not registered in the unit table."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Unknown display unit: {unit}")


class IncompatibleUnitsError(UnitsError, TypeError):
    """Raised when a conversion crosses unit families (e.g. kg -> m)."""

    def __init__(self, from_unit: str, to_unit: str, from_base: str, to_base: str) -> None:
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f"Cannot convert between different base units: {from_base} -> {to_base}"
        )


class MissingPreferenceError(UnitsError, KeyError):
    """Raised when a preference set has no display unit for a needed family."""

    def __init__(self, family: object) -> None:
        self.family = family
        super().__init__(f"No display unit preference for family '{family}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


__all__ = [
    "UnitsError",
    "UnknownUnitError",
    "IncompatibleUnitsError",
    "MissingPreferenceError",
]

"""
unitbase.core.conversion
========================

The conversion engine: the only place in unitbase that branches on display
unit. Every other module works with base-unit values and asks this module to
convert at the edges.

Strict functions (`to_base`, `from_base`, `base_unit_of`, `convert_unit`,
`format_value`) raise `UnknownUnitError` for unregistered units and
`convert_unit` raises `IncompatibleUnitsError` across families. The `safe_*`
variants never raise: they return ``None`` for missing input or a failed
conversion, logging the failure.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from unitbase.core.errors import IncompatibleUnitsError, UnknownUnitError
from unitbase.units import registry as _registry

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _factor(unit: str):
    # Late lookup so a patched DEFAULT_TABLE is honoured.
    return _registry.DEFAULT_TABLE.factor_of(unit)


def to_base(value: Number, unit: str) -> float:
    """Convert a display value to its base-unit value."""
    return value * _factor(unit).factor


def from_base(base_value: Number, unit: str) -> float:
    """Convert a base-unit value to the given display unit."""
    return base_value / _factor(unit).factor


def base_unit_of(unit: str) -> str:
    """Return the base unit of the family ``unit`` belongs to."""
    return _factor(unit).base


def convert_unit(value: Number, from_unit: str, to_unit: str) -> float:
    """Convert between two display units that share a base unit.

    The base units are compared before any arithmetic happens, so a mass value
    can never silently turn into a distance.
    """
    src = _factor(from_unit)
    dst = _factor(to_unit)
    if src.base != dst.base:
        raise IncompatibleUnitsError(from_unit, to_unit, src.base, dst.base)
    return src.to_base(value) / dst.factor


def validate_round_trip(value: Number, unit: str, tolerance: float = 1e-10) -> bool:
    """True if display -> base -> display recovers ``value`` within ``tolerance``."""
    back = from_base(to_base(value, unit), unit)
    return abs(value - back) < tolerance


def format_value(base_value: Number, unit: str, precision: int = 2) -> str:
    """Render a base value in ``unit`` with fixed decimals, e.g. ``"165.35 lb"``.

    Precision only affects the rendered string, never the stored base value.
    """
    display = from_base(base_value, unit)
    return f"{display:.{precision}f} {unit}"


def _is_missing(value: Optional[Number]) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(value)
    except TypeError:
        return False


def safe_to_base(value: Optional[Number], unit: str) -> Optional[float]:
    """`to_base` that returns ``None`` instead of raising."""
    try:
        if _is_missing(value):
            return None
        return to_base(value, unit)
    except (UnknownUnitError, TypeError, OverflowError) as e:
        logger.error("Failed to convert %s %s to base: %s", value, unit, e)
        return None


def safe_from_base(base_value: Optional[Number], unit: str) -> Optional[float]:
    """`from_base` that returns ``None`` instead of raising."""
    try:
        if _is_missing(base_value):
            return None
        return from_base(base_value, unit)
    except (UnknownUnitError, TypeError, OverflowError) as e:
        logger.error("Failed to convert %s from base to %s: %s", base_value, unit, e)
        return None


__all__ = [
    "to_base",
    "from_base",
    "base_unit_of",
    "convert_unit",
    "validate_round_trip",
    "format_value",
    "safe_to_base",
    "safe_from_base",
]

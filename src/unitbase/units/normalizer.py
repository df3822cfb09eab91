"""
unitbase.units.normalizer
=========================

Maps free-text unit strings found in legacy records ("kilograms", "lbs", '"')
to the canonical display units of the unit table.
"""
from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping


# canonical unit -> accepted spellings (already lower-case)
_SPELLINGS: Mapping[str, tuple[str, ...]] = {
    # Mass
    "kg":   ("kg", "kilogram", "kilograms"),
    "lb":   ("lb", "lbs", "pound", "pounds"),

    # Distance
    "m":    ("m", "meter", "meters", "metre", "metres"),
    "cm":   ("cm", "centimeter", "centimeters", "centimetre", "centimetres"),
    "in":   ("in", "inch", "inches", '"'),
    "ft":   ("ft", "foot", "feet", "'"),

    # Time
    "s":    ("s", "sec", "second", "seconds"),
    "min":  ("min", "minute", "minutes"),

    # Speed
    "m/s":  ("m/s", "mps", "meters/second", "metres/second"),
    "km/h": ("km/h", "kmh", "kph", "kilometers/hour"),
    "mph":  ("mph", "miles/hour", "miles per hour"),

    # Pass-through
    "count":   ("count",),
    "percent": ("percent",),
    "%":       ("%",),
    "score":   ("score",),
    "level":   ("level",),
    "reps":    ("reps", "rep", "repetitions"),
}

ALIASES: Mapping[str, str] = MappingProxyType({
    spelling: canonical
    for canonical, spellings in _SPELLINGS.items()
    for spelling in spellings
})


def normalize_unit_string(raw: str) -> str:
    """Normalize a user-provided unit string to a canonical display unit.

    Rules:
    - Unicode normalize to NFC, strip surrounding whitespace, lower-case.
    - Look the result up in the alias table.
    - Unmatched input is returned unchanged (the original string), so that
      converting it afterwards fails with ``UnknownUnitError``.
    """
    if not raw:
        return raw

    key = unicodedata.normalize("NFC", raw).strip().lower()
    return ALIASES.get(key, raw)


__all__ = ["ALIASES", "normalize_unit_string"]

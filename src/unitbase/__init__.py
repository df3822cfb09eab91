"""
unitbase: base-unit normalization for measurement values.

unitbase stores every measured quantity in a canonical base unit (kg, m, s, m/s,
or an identity unit for counts, percentages, scores and repetitions) and converts
back to whatever display unit a user or organization prefers. It also classifies
metric keys into unit families and migrates legacy unlabeled results into the
base-unit scheme.

This module exposes a minimal, stable public API. The conversion engine and the
migration pipeline are imported lazily to keep import time low.
"""

from importlib import metadata as _metadata


__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("unitbase")
except _metadata.PackageNotFoundError:
    import tomllib
    from pathlib import Path
    _pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    with open(_pyproject, "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

from typing import Any

# Public name -> defining module. Resolved on first attribute access.
_LAZY_EXPORTS = {
    "UnitFamily": "unitbase.core.families",
    "UnitFactor": "unitbase.core.unit",
    "UnitsError": "unitbase.core.errors",
    "UnknownUnitError": "unitbase.core.errors",
    "IncompatibleUnitsError": "unitbase.core.errors",
    "MissingPreferenceError": "unitbase.core.errors",
    "DEFAULT_TABLE": "unitbase.units.registry",
    "factor_of": "unitbase.units.registry",
    "is_non_convertible": "unitbase.units.registry",
    "normalize_unit_string": "unitbase.units.normalizer",
    "to_base": "unitbase.core.conversion",
    "from_base": "unitbase.core.conversion",
    "base_unit_of": "unitbase.core.conversion",
    "convert_unit": "unitbase.core.conversion",
    "validate_round_trip": "unitbase.core.conversion",
    "format_value": "unitbase.core.conversion",
    "safe_to_base": "unitbase.core.conversion",
    "safe_from_base": "unitbase.core.conversion",
    "classify": "unitbase.metrics.classifier",
    "UnitPreferences": "unitbase.preferences",
    "DEFAULT_PREFERENCES": "unitbase.preferences",
    "UnitsConfig": "unitbase.preferences",
    "resolve_display_unit": "unitbase.preferences",
    "resolve_from_unit_ref": "unitbase.preferences",
    "format_base_value": "unitbase.formatting",
    "migrate_one": "unitbase.migration",
    "migrate_batch": "unitbase.migration",
    "validate_migration": "unitbase.migration",
}

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__license__", *_LAZY_EXPORTS]


def __getattr__(name: str) -> Any:
    """Lazy attribute access for the public API."""
    module_name = _LAZY_EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    # Import here to avoid import-time side-effects / circular imports.
    import importlib
    value = getattr(importlib.import_module(module_name), name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(set(globals().keys()) | set(_LAZY_EXPORTS))

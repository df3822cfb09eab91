"""
unitbase.migration.pipeline
===========================

Retrofits legacy results into the base-unit scheme.

Migration never fails an individual record. A missing unit means the value is
assumed to already be in base units; an unrecognized unit or a value that cannot
be converted (``None``, too large for a float) is logged and the value passed
through unchanged. Either way the original value and unit string
are copied verbatim into the audit fields.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from unitbase.core.conversion import to_base
from unitbase.core.errors import UnknownUnitError
from unitbase.migration.records import LegacyTestResult, MigratedResult
from unitbase.units.normalizer import normalize_unit_string

logger = logging.getLogger(__name__)


def migrate_one(record: LegacyTestResult) -> MigratedResult:
    """Convert one legacy result to base units."""
    units = record.units

    if not units or not units.strip():
        return MigratedResult(record.id, record.value, record.value, units)

    normalized = normalize_unit_string(units)
    try:
        value_base = to_base(record.value, normalized)
    except (UnknownUnitError, TypeError, OverflowError) as e:
        logger.warning(
            "Failed to convert %s %s for %s: %s. Using original value.",
            record.value, units, record.key, e,
        )
        value_base = record.value

    return MigratedResult(record.id, value_base, record.value, units)


def migrate_batch(records: Iterable[LegacyTestResult]) -> List[MigratedResult]:
    """Migrate ``records`` preserving their order."""
    return [migrate_one(r) for r in records]


__all__ = ["migrate_one", "migrate_batch"]

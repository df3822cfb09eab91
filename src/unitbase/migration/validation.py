"""
unitbase.migration.validation
=============================

Post-hoc integrity check of a migrated batch against its input.

Problems are collected, never raised: `MigrationError` entries make the
report unsuccessful, `MigrationWarning` entries are advisory only.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from unitbase.migration.records import LegacyTestResult, MigratedResult

logger = logging.getLogger(__name__)

UNCHANGED_TOLERANCE = 1e-10
MIN_PLAUSIBLE_RATIO = 0.001
MAX_PLAUSIBLE_RATIO = 1000


@dataclass(frozen=True, slots=True)
class MigrationError:
    kind: str  # "length_mismatch" | "id_mismatch" | "value_raw_mismatch" | "unit_raw_mismatch"
    message: str
    index: Optional[int] = None
    result_id: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class MigrationWarning:
    kind: str  # "suspicious_ratio"
    message: str
    index: Optional[int] = None
    result_id: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class MigrationStats:
    total: int = 0
    converted: int = 0
    unchanged: int = 0
    failed: int = 0


@dataclass(slots=True)
class MigrationReport:
    errors: List[MigrationError] = field(default_factory=list)
    warnings: List[MigrationWarning] = field(default_factory=list)
    stats: MigrationStats = field(default_factory=MigrationStats)

    @property
    def success(self) -> bool:
        return not self.errors


def _same_number(a: float, b: float) -> bool:
    if a == b:
        return True
    # NaN passed through untouched is still the same input
    return isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b)


def validate_migration(
    original: Sequence[LegacyTestResult],
    migrated: Sequence[MigratedResult],
) -> MigrationReport:
    """Check ``migrated`` against ``original`` position by position."""
    report = MigrationReport(stats=MigrationStats(total=len(original)))
    stats = report.stats

    if len(original) != len(migrated):
        report.errors.append(MigrationError(
            "length_mismatch",
            f"Length mismatch: original {len(original)}, migrated {len(migrated)}",
        ))
        stats.failed = len(original)
        logger.info("Migration validation failed: length mismatch")
        return report

    for i, (orig, mig) in enumerate(zip(original, migrated)):
        if orig.id != mig.id:
            report.errors.append(MigrationError(
                "id_mismatch",
                f"ID mismatch at index {i}: {orig.id} vs {mig.id}",
                i, orig.id,
            ))
            stats.failed += 1
            continue

        if abs(orig.value - mig.value_base) < UNCHANGED_TOLERANCE:
            stats.unchanged += 1
        else:
            stats.converted += 1
            ratio = mig.value_base / orig.value if orig.value else math.inf
            if ratio < MIN_PLAUSIBLE_RATIO or ratio > MAX_PLAUSIBLE_RATIO:
                report.warnings.append(MigrationWarning(
                    "suspicious_ratio",
                    f"Suspicious conversion for {orig.id}: {orig.value} {orig.units} "
                    f"-> {mig.value_base} (ratio: {ratio})",
                    i, orig.id,
                ))

        if not _same_number(mig.value_raw, orig.value):
            report.errors.append(MigrationError(
                "value_raw_mismatch",
                f"Audit trail mismatch for {orig.id}: value_raw {mig.value_raw} "
                f"should equal original value {orig.value}",
                i, orig.id,
            ))
            stats.failed += 1

        if mig.unit_raw != orig.units:
            report.errors.append(MigrationError(
                "unit_raw_mismatch",
                f"Audit trail mismatch for {orig.id}: unit_raw {mig.unit_raw} "
                f"should equal original units {orig.units}",
                i, orig.id,
            ))
            stats.failed += 1

    logger.info(
        "Migration validation: %d total, %d converted, %d unchanged, %d failed, %d warnings",
        stats.total, stats.converted, stats.unchanged, stats.failed, len(report.warnings),
    )
    return report


__all__ = [
    "MigrationError",
    "MigrationWarning",
    "MigrationStats",
    "MigrationReport",
    "validate_migration",
]

"""Legacy result migration: convert, validate, report."""

from unitbase.migration.pipeline import migrate_batch, migrate_one
from unitbase.migration.records import LegacyTestResult, MigratedResult
from unitbase.migration.report import generate_migration_sql, render_migration_report
from unitbase.migration.validation import (
    MigrationError,
    MigrationReport,
    MigrationStats,
    MigrationWarning,
    validate_migration,
)

__all__ = [
    "LegacyTestResult",
    "MigratedResult",
    "migrate_one",
    "migrate_batch",
    "validate_migration",
    "MigrationReport",
    "MigrationStats",
    "MigrationError",
    "MigrationWarning",
    "render_migration_report",
    "generate_migration_sql",
]

"""Markdown summary and SQL statements for a one-time base-unit migration."""

from __future__ import annotations

from typing import Iterable, List, Optional

from unitbase.migration.records import MigratedResult
from unitbase.migration.validation import MigrationReport


def render_migration_report(report: MigrationReport) -> str:
    stats = report.stats
    lines = [
        "# Test Results Migration Report",
        "",
        f"**Status:** {'✅ SUCCESS' if report.success else '❌ FAILED'}",
        "",
        "## Statistics",
        f"- **Total records:** {stats.total}",
        f"- **Converted:** {stats.converted}",
        f"- **Unchanged:** {stats.unchanged}",
        f"- **Failed:** {stats.failed}",
        "",
    ]

    if report.warnings:
        lines.append(f"## ⚠️ Warnings ({len(report.warnings)})")
        lines.extend(f"- {w}" for w in report.warnings)
        lines.append("")

    if report.errors:
        lines.append(f"## ❌ Errors ({len(report.errors)})")
        lines.extend(f"- {e}" for e in report.errors)
        lines.append("")

    if report.success:
        lines.append("## ✅ Migration completed successfully!")
        lines.append('Ready to run: `ALTER TABLE "TestResult" ALTER COLUMN "value_base" SET NOT NULL;`')
    else:
        lines.append("## ❌ Migration failed")
        lines.append("Please review and fix the errors before proceeding.")

    return "\n".join(lines) + "\n"


def _literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _quote(value: Optional[str]) -> str:
    if not value:
        return "NULL"
    return _literal(value)


def generate_migration_sql(migrated: Iterable[MigratedResult], table: str = "TestResult") -> List[str]:
    """One ``UPDATE`` statement per migrated result."""
    return [
        f'UPDATE "{table}" SET '
        f'"value_base" = {r.value_base!r}, '
        f'"value_raw" = {r.value_raw!r}, '
        f'"unit_raw" = {_quote(r.unit_raw)} '
        f'WHERE "result_id" = {_literal(str(r.id))};'
        for r in migrated
    ]


__all__ = ["render_migration_report", "generate_migration_sql"]

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class LegacyTestResult:
    """A historical result as read from legacy storage; units are free text or missing."""

    id: str
    key: str
    value: float
    units: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> LegacyTestResult:
        """Accept rows keyed ``id``/``key`` or ``result_id``/``test_key``."""
        return cls(
            id=row["id"] if "id" in row else row["result_id"],
            key=row["key"] if "key" in row else row["test_key"],
            value=row["value"],
            units=row.get("units"),
        )


@dataclass(frozen=True, slots=True)
class MigratedResult:
    """A result expressed in base units, with the original value and unit kept as an audit trail."""

    id: str
    value_base: float
    value_raw: float
    unit_raw: Optional[str]

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["LegacyTestResult", "MigratedResult"]

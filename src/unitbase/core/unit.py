from __future__ import annotations

from dataclasses import dataclass
from math import isfinite

from unitbase.core.families import UnitFamily


@dataclass(frozen=True, slots=True)
class UnitFactor:
    """A display unit with its multiplicative factor relative to its family's base unit."""

    name: str
    factor: float
    base: str
    family: UnitFamily

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("unit name must be a non-empty string")
        if not (self.factor > 0 and isfinite(self.factor)):
            raise ValueError("factor must be a positive, finite number")

    @classmethod
    def identity(cls, name: str, family: UnitFamily) -> UnitFactor:
        """Factory for pass-through units that are their own base."""
        return cls(name, 1.0, name, family)

    @property
    def is_base(self) -> bool:
        return self.name == self.base

    @property
    def is_convertible(self) -> bool:
        return self.family.is_convertible

    # Value conversions
    def to_base(self, value: float) -> float:
        return value * self.factor

    def from_base(self, value: float) -> float:
        return value / self.factor


__all__ = ["UnitFactor"]

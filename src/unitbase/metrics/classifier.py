"""
unitbase.metrics.classifier
===========================

Derives the unit family of a metric key ("body_weight", "vertical_jump") from
the key itself. Classification is a pure function of the string: it is
recomputed on every call and never cached or persisted.

The rules form one explicit, ordered sequence evaluated first-match-wins:

1. family keywords   ("score", "count", "percent", "reps", ...)
2. domain keywords   ("weight", "height", "jump", "time", "speed", ...)
3. exemplar keys     ("deep_squat", "push_ups", "body_weight", ...)
4. fallback          distance

Keys routinely contain several trigger words, so the order is part of the
contract. For example "height" hits the length keyword in stage 2 before any
distance exemplar in stage 3 is considered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from unitbase.core.families import UnitFamily

FALLBACK_FAMILY = UnitFamily.DISTANCE


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """Assigns ``family`` to any key containing one of ``needles``."""

    family: UnitFamily
    needles: tuple[str, ...]
    stage: str

    def matches(self, metric_key: str) -> bool:
        return any(needle in metric_key for needle in self.needles)


def _rules(stage: str, *pairs: tuple[UnitFamily, tuple[str, ...]]) -> tuple[ClassificationRule, ...]:
    return tuple(ClassificationRule(family, needles, stage) for family, needles in pairs)


_FAMILY_KEYWORDS = _rules(
    "family-keyword",
    (UnitFamily.SCORE,   ("score", "fms", "rating")),
    (UnitFamily.COUNT,   ("count", "number")),
    (UnitFamily.PERCENT, ("percent", "%")),
    (UnitFamily.REPS,    ("reps", "repetitions")),
)

_DOMAIN_KEYWORDS = _rules(
    "domain-keyword",
    (UnitFamily.MASS,     ("weight", "mass")),
    (UnitFamily.LENGTH,   ("height", "reach", "span")),
    (UnitFamily.DISTANCE, ("distance", "jump")),
    (UnitFamily.TIME,     ("time", "duration")),
    (UnitFamily.SPEED,    ("speed", "velocity")),
)

_EXEMPLARS = _rules(
    "exemplar",
    (UnitFamily.SCORE,    ("deep_squat", "overhead_squat", "shoulder_mobility",
                           "trunk_stability", "rotary_stability")),
    (UnitFamily.COUNT,    ("push_ups", "sit_ups", "attempts")),
    (UnitFamily.REPS,     ("max_reps", "total_reps")),
    (UnitFamily.MASS,     ("body_weight", "max_weight", "load")),
    (UnitFamily.LENGTH,   ("height", "reach", "arm_span", "leg_length", "torso_length")),
    (UnitFamily.DISTANCE, ("vertical_jump", "broad_jump", "sprint_distance", "throw_distance")),
    (UnitFamily.TIME,     ("sprint_time", "reaction_time", "hold_time")),
    (UnitFamily.SPEED,    ("max_speed", "average_speed")),
)

# Evaluation order is load-bearing; do not reorder.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = _FAMILY_KEYWORDS + _DOMAIN_KEYWORDS + _EXEMPLARS


def explain(metric_key: Optional[str]) -> Optional[ClassificationRule]:
    """Return the first rule matching ``metric_key``, or ``None`` if the fallback applies."""
    if not isinstance(metric_key, str) or not metric_key:
        return None
    for rule in CLASSIFICATION_RULES:
        if rule.matches(metric_key):
            return rule
    return None


def classify(metric_key: Optional[str]) -> UnitFamily:
    """Return the unit family of ``metric_key``. Never raises."""
    rule = explain(metric_key)
    return rule.family if rule is not None else FALLBACK_FAMILY


__all__ = [
    "ClassificationRule",
    "CLASSIFICATION_RULES",
    "FALLBACK_FAMILY",
    "classify",
    "explain",
]

import pytest

from unitbase.core.families import UnitFamily
from unitbase.metrics.classifier import (
    CLASSIFICATION_RULES,
    FALLBACK_FAMILY,
    classify,
    explain,
)


@pytest.mark.parametrize(
    "key, family",
    [
        ("body_weight", UnitFamily.MASS),
        ("height", UnitFamily.LENGTH),
        ("reach", UnitFamily.LENGTH),
        ("arm_span", UnitFamily.LENGTH),
        ("vertical_jump", UnitFamily.DISTANCE),
        ("broad_jump", UnitFamily.DISTANCE),
        ("sprint_time", UnitFamily.TIME),
        ("max_speed", UnitFamily.SPEED),
        ("push_ups", UnitFamily.COUNT),
        ("deep_squat", UnitFamily.SCORE),
        ("max_reps", UnitFamily.REPS),
        ("body_fat_percent", UnitFamily.PERCENT),
        ("unknown_metric", UnitFamily.DISTANCE),
    ],
)
def test_classify_known_keys(key, family):
    assert classify(key) is family


def test_family_keywords_beat_domain_keywords():
    # "score" (stage 1) wins over "jump" (stage 2)
    assert classify("jump_score") is UnitFamily.SCORE
    # "count" wins over "weight"
    assert classify("weight_count") is UnitFamily.COUNT
    # "%" is a percent trigger
    assert classify("vo2_%") is UnitFamily.PERCENT


def test_domain_keyword_order_within_stage():
    # mass is checked before length, length before distance
    assert classify("weight_height") is UnitFamily.MASS
    assert classify("standing_reach_jump") is UnitFamily.LENGTH
    assert classify("jump_time") is UnitFamily.DISTANCE


def test_length_wins_over_distance_for_body_measurements():
    rule = explain("height")
    assert rule.family is UnitFamily.LENGTH
    assert rule.stage == "domain-keyword"


def test_exemplar_stage_is_reached_only_without_keywords():
    rule = explain("push_ups")
    assert rule.stage == "exemplar"
    assert explain("leg_length").family is UnitFamily.LENGTH
    assert classify("total_load") is UnitFamily.MASS
    assert classify("attempts_made") is UnitFamily.COUNT


def test_matching_is_case_sensitive():
    assert classify("BODY_WEIGHT") is FALLBACK_FAMILY


@pytest.mark.parametrize("key", ["", None, 42])
def test_never_raises_and_falls_back(key):
    assert classify(key) is UnitFamily.DISTANCE
    assert explain(key) is None


def test_classification_is_recomputed_per_call():
    assert classify("body_weight") is classify("body_weight")
    assert not hasattr(classify, "cache_info")


def test_rule_order_is_declared():
    stages = [r.stage for r in CLASSIFICATION_RULES]
    assert stages == sorted(stages, key=["family-keyword", "domain-keyword", "exemplar"].index)
    first_families = [r.family for r in CLASSIFICATION_RULES[:4]]
    assert first_families == [UnitFamily.SCORE, UnitFamily.COUNT, UnitFamily.PERCENT, UnitFamily.REPS]

"""Tests for the bounded match score."""

from __future__ import annotations

import pytest

from aesthetic_engine.domain.aesthetic_score import AestheticScore, MatchLevel, round_half_up
from aesthetic_engine.domain.exceptions import InvalidScoreError


@pytest.mark.parametrize("value", [0, 1, 99, 100])
def test_in_range_values_are_accepted(value: int) -> None:
    assert AestheticScore(value).get_value() == value


@pytest.mark.parametrize("value", [-1, 101, 50.5, True, "50", None])
def test_out_of_range_or_non_integer_values_are_rejected(value: object) -> None:
    with pytest.raises(InvalidScoreError):
        AestheticScore(value)  # type: ignore[arg-type]


def test_is_greater_than_is_strict() -> None:
    assert AestheticScore(80).is_greater_than(AestheticScore(79))
    assert not AestheticScore(80).is_greater_than(AestheticScore(80))
    assert not AestheticScore(10).is_greater_than(AestheticScore(80))


@pytest.mark.parametrize(
    ("value", "level"),
    [
        (100, MatchLevel.HIGH),
        (75, MatchLevel.HIGH),
        (74, MatchLevel.MEDIUM),
        (40, MatchLevel.MEDIUM),
        (39, MatchLevel.LOW),
        (0, MatchLevel.LOW),
    ],
)
def test_classification_buckets(value: int, level: MatchLevel) -> None:
    score = AestheticScore(value)

    assert score.match_level is level
    assert score.is_high_match() is (level is MatchLevel.HIGH)
    assert score.is_medium_match() is (level is MatchLevel.MEDIUM)
    assert score.is_low_match() is (level is MatchLevel.LOW)


def test_scores_compare_by_value() -> None:
    assert AestheticScore(40) == AestheticScore(40)
    assert sorted([AestheticScore(75), AestheticScore(10), AestheticScore(100)]) == [
        AestheticScore(10),
        AestheticScore(75),
        AestheticScore(100),
    ]


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2
    assert round_half_up(27.642, 1) == pytest.approx(27.6)
    assert round_half_up(12.25, 1) == pytest.approx(12.3)

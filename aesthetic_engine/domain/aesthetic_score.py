"""Bounded integer score describing how well a product fits an aesthetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from aesthetic_engine.domain.exceptions import InvalidScoreError

MIN_SCORE = 0
MAX_SCORE = 100
HIGH_MATCH_THRESHOLD = 75
MEDIUM_MATCH_THRESHOLD = 40


class MatchLevel(str, Enum):
    """Coarse classification buckets for a match score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True, slots=True, order=True)
class AestheticScore:
    """Integer match score in the inclusive range 0-100."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidScoreError(self.value)
        if not MIN_SCORE <= self.value <= MAX_SCORE:
            raise InvalidScoreError(self.value)

    def get_value(self) -> int:
        return self.value

    def is_greater_than(self, other: "AestheticScore") -> bool:
        return self.value > other.value

    def is_high_match(self) -> bool:
        return self.value >= HIGH_MATCH_THRESHOLD

    def is_medium_match(self) -> bool:
        return MEDIUM_MATCH_THRESHOLD <= self.value < HIGH_MATCH_THRESHOLD

    def is_low_match(self) -> bool:
        return self.value < MEDIUM_MATCH_THRESHOLD

    @property
    def match_level(self) -> MatchLevel:
        if self.is_high_match():
            return MatchLevel.HIGH
        if self.is_medium_match():
            return MatchLevel.MEDIUM
        return MatchLevel.LOW


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` with halves going up, unlike the banker's rounding of ``round``."""

    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor

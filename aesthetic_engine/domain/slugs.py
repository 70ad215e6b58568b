"""Canonical aesthetic slugs shared by the quiz and the recommendation graph."""

from __future__ import annotations

import re
from enum import Enum

_WHITESPACE = re.compile(r"\s+")


class AestheticSlug(str, Enum):
    """Aesthetic archetypes known to the static quiz and relationship tables."""

    MINIMALIST = "minimalist"
    STREETWEAR = "streetwear"
    COTTAGECORE = "cottagecore"
    ATHLEISURE = "athleisure"
    DARK_ACADEMIA = "dark-academia"
    Y2K = "y2k"
    BOHEMIAN = "bohemian"
    GRUNGE = "grunge"
    COASTAL_GRANDMOTHER = "coastal-grandmother"
    GORPCORE = "gorpcore"
    OLD_MONEY = "old-money"
    CYBERPUNK = "cyberpunk"
    SOFT_GIRL = "soft-girl"
    AVANT_GARDE = "avant-garde"
    VINTAGE_AMERICANA = "vintage-americana"
    BALLETCORE = "balletcore"
    NORMCORE = "normcore"
    TECHWEAR = "techwear"
    ROMANTIC_ACADEMIA = "romantic-academia"
    SKATER = "skater"

    @classmethod
    def parse(cls, raw_value: str) -> "AestheticSlug":
        """Return the slug for ``raw_value`` or raise ``ValueError`` for unknown names."""

        return cls(normalize_slug(raw_value))


def normalize_slug(value: str) -> str:
    """Lower-case ``value`` and replace whitespace runs with a single hyphen."""

    return _WHITESPACE.sub("-", value.strip().lower())

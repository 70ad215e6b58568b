"""Core domain objects for aesthetics and match scores."""

from .aesthetic import Aesthetic
from .aesthetic_score import AestheticScore, MatchLevel, round_half_up
from .exceptions import (
    AestheticEngineError,
    AestheticNotFoundError,
    EmptyResultSetError,
    InvalidAestheticError,
    InvalidAnswersError,
    InvalidScoreError,
    InvalidThemePropertiesError,
)
from .slugs import AestheticSlug, normalize_slug
from .theme_properties import ThemeProperties

__all__ = [
    "Aesthetic",
    "AestheticEngineError",
    "AestheticNotFoundError",
    "AestheticScore",
    "AestheticSlug",
    "EmptyResultSetError",
    "InvalidAestheticError",
    "InvalidAnswersError",
    "InvalidScoreError",
    "InvalidThemePropertiesError",
    "MatchLevel",
    "ThemeProperties",
    "normalize_slug",
    "round_half_up",
]

"""Scoring and orchestration services."""

from .recommendation import (
    AestheticMatch,
    AestheticRecommendationService,
    ProductAestheticMatch,
    TaggedProduct,
)
from .style_quiz_service import DetailedQuizResult, StyleQuizService

__all__ = [
    "AestheticMatch",
    "AestheticRecommendationService",
    "DetailedQuizResult",
    "ProductAestheticMatch",
    "StyleQuizService",
    "TaggedProduct",
]

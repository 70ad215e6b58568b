"""Score and rank products against an aesthetic using their style tags."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from aesthetic_engine.config.settings import get_settings
from aesthetic_engine.domain.aesthetic import Aesthetic
from aesthetic_engine.domain.aesthetic_score import AestheticScore, round_half_up
from aesthetic_engine.domain.slugs import normalize_slug
from aesthetic_engine.domain.theme_properties import ThemeProperties
from aesthetic_engine.metrics.prometheus_exporter import product_rankings_total
from aesthetic_engine.services.relationships import AESTHETIC_RELATIONSHIPS

logger = logging.getLogger(__name__)

DIRECT_MATCH_SCORE = 100
RELATED_MATCH_SCORE = 75

KEYWORD_WEIGHT = 40
STYLE_WEIGHT = 30
COLOR_WEIGHT = 30


@dataclass(frozen=True, slots=True)
class TaggedProduct:
    """Product identifier with its free-form aesthetic tags."""

    id: str
    aesthetic_tags: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class ProductAestheticMatch:
    """Score of one product against one aesthetic; produced per ranking call."""

    product_id: str
    aesthetic_id: str
    score: AestheticScore


@dataclass(frozen=True, slots=True)
class AestheticMatch:
    """Score of one aesthetic for a fixed set of product tags."""

    aesthetic: Aesthetic
    score: AestheticScore


def _normalize_tags(tags: Iterable[Any] | None) -> list[str]:
    if not tags or isinstance(tags, str):
        return []
    return [normalize_slug(tag) for tag in tags if isinstance(tag, str) and tag.strip()]


def _normalize_terms(terms: Iterable[Any]) -> list[str]:
    return [normalize_slug(term) for term in terms if isinstance(term, str) and term.strip()]


def _product_fields(product: Any) -> tuple[str, Any] | None:
    """Read ``(id, tags)`` from a ``TaggedProduct`` or a snake/camelCase mapping."""

    if isinstance(product, TaggedProduct):
        product_id, tags = product.id, product.aesthetic_tags
    elif isinstance(product, Mapping):
        product_id = product.get("id")
        tags = product.get("aesthetic_tags", product.get("aestheticTags"))
    else:
        return None
    if not isinstance(product_id, str) or not product_id.strip():
        return None
    return product_id, tags


class AestheticRecommendationService:
    """
    Matches product tags to aesthetics.

    Scoring never raises: missing or malformed input scores 0 so one bad
    product cannot break a whole ranking.
    """

    def __init__(
        self,
        relationships: Mapping[str, frozenset[str]] | None = None,
        *,
        default_minimum_score: int | None = None,
    ) -> None:
        self._relationships = relationships if relationships is not None else AESTHETIC_RELATIONSHIPS
        if default_minimum_score is None:
            default_minimum_score = get_settings().default_minimum_score
        self._default_minimum_score = default_minimum_score

    def related_aesthetics(self, aesthetic_name: str) -> frozenset[str]:
        return self._relationships.get(normalize_slug(aesthetic_name), frozenset())

    def calculate_product_match(
        self,
        tags: Iterable[str] | None,
        aesthetic: Aesthetic | None,
    ) -> AestheticScore:
        """
        Return how well ``tags`` fit ``aesthetic``.

        A tag naming the aesthetic itself scores 100 and a tag naming a related
        aesthetic scores 75. Otherwise the score is the share of points earned
        on the keyword (40), style (30) and color (30) axes that apply.
        """

        normalized_tags = _normalize_tags(tags)
        if not normalized_tags or aesthetic is None:
            return AestheticScore(0)

        target = normalize_slug(aesthetic.name)
        if target in normalized_tags:
            return AestheticScore(DIRECT_MATCH_SCORE)

        related = self._relationships.get(target, frozenset())
        if any(tag in related for tag in normalized_tags):
            return AestheticScore(RELATED_MATCH_SCORE)

        return AestheticScore(self._composite_score(normalized_tags, aesthetic.theme_properties))

    def rank_products(
        self,
        products: Iterable[TaggedProduct | Mapping[str, Any]] | None,
        aesthetic: Aesthetic | None,
    ) -> list[ProductAestheticMatch]:
        """
        Score every product; highest first, equal scores keep input order.

        Products may be ``TaggedProduct`` instances or mappings with ``id`` and
        ``aesthetic_tags``/``aestheticTags``. Entries without a usable id are skipped.
        """

        product_rankings_total.inc()
        if aesthetic is None:
            return []

        matches = []
        for product in products or ():
            fields = _product_fields(product)
            if fields is None:
                logger.debug("Skipping product without a usable id: %r", product)
                continue
            product_id, tags = fields
            matches.append(
                ProductAestheticMatch(
                    product_id=product_id,
                    aesthetic_id=aesthetic.id,
                    score=self.calculate_product_match(tags, aesthetic),
                )
            )
        return sorted(matches, key=lambda match: match.score.value, reverse=True)

    def rank_aesthetics(
        self,
        tags: Iterable[str] | None,
        aesthetics: Iterable[Aesthetic],
    ) -> list[AestheticMatch]:
        """Score one product's tags against a whole catalog, best fit first."""

        tag_list = list(tags or [])
        matches = [
            AestheticMatch(aesthetic=aesthetic, score=self.calculate_product_match(tag_list, aesthetic))
            for aesthetic in aesthetics
        ]
        return sorted(matches, key=lambda match: match.score.value, reverse=True)

    def filter_by_minimum_score(
        self,
        matches: Iterable[ProductAestheticMatch],
        minimum_score: int | None = None,
    ) -> list[ProductAestheticMatch]:
        threshold = self._default_minimum_score if minimum_score is None else minimum_score
        return [match for match in matches if match.score.value >= threshold]

    def get_high_match_products(
        self, matches: Iterable[ProductAestheticMatch]
    ) -> list[ProductAestheticMatch]:
        return [match for match in matches if match.score.is_high_match()]

    def get_medium_match_products(
        self, matches: Iterable[ProductAestheticMatch]
    ) -> list[ProductAestheticMatch]:
        return [match for match in matches if match.score.is_medium_match()]

    def _composite_score(self, tags: list[str], theme: ThemeProperties) -> int:
        tag_set = set(tags)
        earned = 0.0
        possible = 0

        keywords = _normalize_terms(theme.keywords)
        if keywords:
            matched = sum(1 for keyword in keywords if keyword in tag_set)
            earned += matched / len(keywords) * KEYWORD_WEIGHT
            possible += KEYWORD_WEIGHT

        if normalize_slug(theme.style) in tag_set:
            earned += STYLE_WEIGHT
        possible += STYLE_WEIGHT

        colors = [color.lower() for color in theme.colors]
        if colors:
            # Fuzzy both ways: "blue" matches "navy-blue" and "navy-blue-denim" matches "navy-blue".
            if any(tag in color or color in tag for tag in tags for color in colors):
                earned += COLOR_WEIGHT
            possible += COLOR_WEIGHT

        if possible == 0:
            return 0
        score = int(round_half_up(earned / possible * 100))
        logger.debug("Composite score %s (earned %.2f of %s) for tags %s", score, earned, possible, tags)
        return min(max(score, 0), 100)

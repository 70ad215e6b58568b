"""Tests for product-to-aesthetic matching and ranking."""

from __future__ import annotations

from typing import Callable

import pytest
from prometheus_client import REGISTRY

from aesthetic_engine.domain.aesthetic import Aesthetic
from aesthetic_engine.services.recommendation import AestheticRecommendationService, TaggedProduct
from aesthetic_engine.services.relationships import load_relationships

AestheticFactory = Callable[..., Aesthetic]


@pytest.fixture
def service() -> AestheticRecommendationService:
    return AestheticRecommendationService(default_minimum_score=40)


@pytest.fixture
def minimalist(make_aesthetic: AestheticFactory) -> Aesthetic:
    return make_aesthetic("Minimalist", keywords=[], style="minimal", colors=["white"])


def test_direct_name_match_scores_100(
    service: AestheticRecommendationService, minimalist: Aesthetic
) -> None:
    assert service.calculate_product_match(["minimalist"], minimalist).value == 100
    assert service.calculate_product_match(["grunge", "  MINIMALIST "], minimalist).value == 100


def test_multi_word_names_are_normalized(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    dark_academia = make_aesthetic("Dark Academia")

    assert service.calculate_product_match(["dark  academia"], dark_academia).value == 100
    assert service.calculate_product_match(["Old Money"], dark_academia).value == 75


def test_related_match_scores_75(service: AestheticRecommendationService, minimalist: Aesthetic) -> None:
    assert service.calculate_product_match(["normcore"], minimalist).value == 75


def test_relationships_are_directional(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    # minimalist -> old-money exists, old-money -> normcore does not
    old_money = make_aesthetic("Old Money", style="refined", colors=["navy"])

    assert service.calculate_product_match(["normcore"], old_money).value == 0


@pytest.mark.parametrize("tags", [[], None, ["", "   "], [None, 42]])
def test_empty_or_unusable_tags_score_zero(
    service: AestheticRecommendationService, minimalist: Aesthetic, tags: object
) -> None:
    assert service.calculate_product_match(tags, minimalist).value == 0  # type: ignore[arg-type]


def test_missing_aesthetic_scores_zero(service: AestheticRecommendationService) -> None:
    assert service.calculate_product_match(["minimalist"], None).value == 0


def test_no_axis_matching_scores_zero(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    aesthetic = make_aesthetic("Minimalist", keywords=["clean", "simple"], style="minimal", colors=["white"])

    assert service.calculate_product_match(["unrelated-tag"], aesthetic).value == 0


def test_keyword_axis_is_proportional(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    aesthetic = make_aesthetic("Quiet Luxury", keywords=["clean", "simple"], style="minimal", colors=["white"])

    # 1 of 2 keywords -> 20 of 100 possible points
    assert service.calculate_product_match(["Clean"], aesthetic).value == 20
    assert service.calculate_product_match(["clean", "simple"], aesthetic).value == 40


def test_repeated_tag_counts_keyword_once(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    aesthetic = make_aesthetic("Quiet Luxury", keywords=["clean", "simple"], style="minimal", colors=["white"])

    assert service.calculate_product_match(["clean", "clean", "CLEAN"], aesthetic).value == 20


def test_multi_word_keywords_match_normalized_tags(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    aesthetic = make_aesthetic("Heritage", keywords=["quiet luxury", "tailored"], style="classic", colors=["navy"])

    assert service.calculate_product_match(["Quiet Luxury"], aesthetic).value == 20


def test_style_and_fuzzy_color_axes(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    aesthetic = make_aesthetic("Quiet Luxury", keywords=["clean", "simple"], style="minimal", colors=["white"])

    # style 30 + color 30 ("white" inside "off-white") of 100 possible
    assert service.calculate_product_match(["MINIMAL", "off-white"], aesthetic).value == 60


def test_color_matching_works_both_ways(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    aesthetic = make_aesthetic("Night Out", style="sleek", colors=["neon-blue"])

    # no keywords: only style and color are possible (60 points)
    assert service.calculate_product_match(["blue"], aesthetic).value == 50
    assert service.calculate_product_match(["neon-blue-denim"], aesthetic).value == 50


def test_without_keywords_only_style_and_color_count(
    service: AestheticRecommendationService, minimalist: Aesthetic
) -> None:
    assert service.calculate_product_match(["minimal"], minimalist).value == 50
    assert service.calculate_product_match(["minimal", "white"], minimalist).value == 100


def test_scoring_is_idempotent(service: AestheticRecommendationService, make_aesthetic: AestheticFactory) -> None:
    aesthetic = make_aesthetic("Quiet Luxury", keywords=["clean", "simple", "calm"], style="minimal", colors=["white"])
    tags = ["clean", "ivory"]

    scores = {service.calculate_product_match(tags, aesthetic).value for _ in range(5)}

    assert scores == {13}


def test_rank_products_sorts_descending_and_keeps_ties_stable(
    service: AestheticRecommendationService, minimalist: Aesthetic
) -> None:
    products = [
        TaggedProduct(id="p1", aesthetic_tags=["minimal"]),
        TaggedProduct(id="p2", aesthetic_tags=["minimalist"]),
        TaggedProduct(id="p3", aesthetic_tags=["normcore"]),
        TaggedProduct(id="p4", aesthetic_tags=["athleisure"]),
        TaggedProduct(id="p5", aesthetic_tags=[]),
    ]
    before = REGISTRY.get_sample_value("product_rankings_total") or 0.0

    ranked = service.rank_products(products, minimalist)

    assert [(match.product_id, match.score.value) for match in ranked] == [
        ("p2", 100),
        ("p3", 75),
        ("p4", 75),
        ("p1", 50),
        ("p5", 0),
    ]
    assert all(match.aesthetic_id == minimalist.id for match in ranked)
    assert REGISTRY.get_sample_value("product_rankings_total") == before + 1


def test_rank_products_accepts_mappings_and_skips_unusable_entries(
    service: AestheticRecommendationService, minimalist: Aesthetic
) -> None:
    products = [
        TaggedProduct(id="p1", aesthetic_tags=["minimal"]),
        None,
        {"id": "p2", "aestheticTags": ["minimalist"]},
        {"id": "p3", "aesthetic_tags": ["normcore"]},
        {"aestheticTags": ["minimalist"]},
        {"id": "  ", "aestheticTags": ["minimalist"]},
        {"id": "p4"},
        42,
    ]

    ranked = service.rank_products(products, minimalist)

    assert [(match.product_id, match.score.value) for match in ranked] == [
        ("p2", 100),
        ("p3", 75),
        ("p1", 50),
        ("p4", 0),
    ]


def test_rank_products_without_aesthetic_is_empty(service: AestheticRecommendationService) -> None:
    assert service.rank_products([TaggedProduct(id="p1", aesthetic_tags=["minimalist"])], None) == []
    assert service.rank_products(None, None) == []


def test_filters_and_buckets(service: AestheticRecommendationService, minimalist: Aesthetic) -> None:
    ranked = service.rank_products(
        [
            TaggedProduct(id="p1", aesthetic_tags=["minimal"]),
            TaggedProduct(id="p2", aesthetic_tags=["minimalist"]),
            TaggedProduct(id="p3", aesthetic_tags=["normcore"]),
            TaggedProduct(id="p4", aesthetic_tags=["grunge"]),
        ],
        minimalist,
    )

    assert [m.product_id for m in service.filter_by_minimum_score(ranked, 75)] == ["p2", "p3"]
    assert [m.product_id for m in service.filter_by_minimum_score(ranked, 50)] == ["p2", "p3", "p1"]
    assert [m.product_id for m in service.filter_by_minimum_score(ranked)] == ["p2", "p3", "p1"]
    assert [m.product_id for m in service.get_high_match_products(ranked)] == ["p2", "p3"]
    assert [m.product_id for m in service.get_medium_match_products(ranked)] == ["p1"]


def test_rank_aesthetics_orders_catalog_for_one_product(
    service: AestheticRecommendationService, make_aesthetic: AestheticFactory
) -> None:
    catalog = [
        make_aesthetic("Grunge", style="distressed", colors=["black"]),
        make_aesthetic("Normcore", style="plain", colors=["grey"]),
        make_aesthetic("Minimalist", style="minimal", colors=["white"]),
    ]

    matches = service.rank_aesthetics(["minimalist"], catalog)

    assert [(m.aesthetic.name, m.score.value) for m in matches] == [
        ("Minimalist", 100),
        ("Normcore", 75),
        ("Grunge", 0),
    ]


def test_custom_relationship_graph(make_aesthetic: AestheticFactory) -> None:
    service = AestheticRecommendationService(
        load_relationships({"grunge": ["y2k"]}),
        default_minimum_score=0,
    )
    grunge = make_aesthetic("Grunge", style="distressed", colors=["black"])

    assert service.calculate_product_match(["y2k"], grunge).value == 75
    assert service.calculate_product_match(["skater"], grunge).value == 0
    assert service.related_aesthetics("Grunge") == frozenset({"y2k"})


def test_unknown_relationship_slug_is_rejected() -> None:
    with pytest.raises(ValueError, match="grungy"):
        load_relationships({"grunge": ["grungy"]})

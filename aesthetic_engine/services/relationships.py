"""Hand-curated graph of related aesthetics used as a matching fallback."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from aesthetic_engine.domain.slugs import AestheticSlug

# Not symmetric: an edge a -> b does not imply b -> a.
_RAW_RELATIONSHIPS: dict[str, list[str]] = {
    "minimalist": ["normcore", "athleisure", "coastal-grandmother", "old-money"],
    "streetwear": ["skater", "grunge", "techwear", "y2k"],
    "cottagecore": ["romantic-academia", "balletcore", "bohemian", "soft-girl"],
    "athleisure": ["minimalist", "gorpcore", "techwear", "normcore"],
    "dark-academia": ["romantic-academia", "old-money", "vintage-americana"],
    "y2k": ["soft-girl", "streetwear", "cyberpunk"],
    "bohemian": ["cottagecore", "gorpcore", "romantic-academia"],
    "grunge": ["streetwear", "skater", "vintage-americana"],
    "coastal-grandmother": ["minimalist", "old-money", "bohemian"],
    "gorpcore": ["athleisure", "techwear", "vintage-americana"],
    "old-money": ["dark-academia", "coastal-grandmother", "minimalist"],
    "cyberpunk": ["techwear", "streetwear", "y2k", "avant-garde"],
    "soft-girl": ["cottagecore", "balletcore", "y2k", "romantic-academia"],
    "avant-garde": ["cyberpunk", "techwear", "bohemian"],
    "vintage-americana": ["dark-academia", "grunge", "gorpcore"],
    "balletcore": ["soft-girl", "romantic-academia", "cottagecore"],
    "normcore": ["minimalist", "athleisure", "coastal-grandmother"],
    "techwear": ["cyberpunk", "gorpcore", "athleisure", "streetwear"],
    "romantic-academia": ["dark-academia", "cottagecore", "balletcore"],
    "skater": ["streetwear", "grunge", "vintage-americana"],
}


def _parse_slug(raw_slug: str, context: str) -> str:
    try:
        return AestheticSlug(raw_slug).value
    except ValueError as exc:
        raise ValueError(f"Unknown aesthetic {raw_slug!r} in {context}") from exc


def load_relationships(raw: Mapping[str, Iterable[str]]) -> Mapping[str, frozenset[str]]:
    """Validate slugs in ``raw`` and freeze it into a read-only adjacency map."""

    graph: dict[str, frozenset[str]] = {}
    for raw_slug, related in raw.items():
        slug = _parse_slug(raw_slug, "relationship keys")
        graph[slug] = frozenset(_parse_slug(item, f"relationships of {slug!r}") for item in related)
    return MappingProxyType(graph)


AESTHETIC_RELATIONSHIPS: Mapping[str, frozenset[str]] = load_relationships(_RAW_RELATIONSHIPS)

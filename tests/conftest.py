"""Shared fixtures for engine tests."""

from __future__ import annotations

import uuid
from typing import Callable, Sequence

import pytest

from aesthetic_engine.catalog.memory import InMemoryAestheticCatalog
from aesthetic_engine.domain.aesthetic import Aesthetic
from aesthetic_engine.domain.slugs import AestheticSlug
from aesthetic_engine.domain.theme_properties import ThemeProperties

AestheticFactory = Callable[..., Aesthetic]


@pytest.fixture
def make_aesthetic() -> AestheticFactory:
    def _make(
        name: str,
        *,
        keywords: Sequence[str] = (),
        style: str = "clean",
        colors: Sequence[str] = ("white",),
        description: str | None = None,
        image_url: str | None = None,
    ) -> Aesthetic:
        return Aesthetic.create(
            str(uuid.uuid4()),
            name,
            description or f"{name} aesthetic.",
            ThemeProperties(colors=list(colors), style=style, keywords=list(keywords)),
            image_url,
        )

    return _make


def _display_name(slug: AestheticSlug) -> str:
    return slug.value.replace("-", " ").title()


@pytest.fixture
def full_catalog(make_aesthetic: AestheticFactory) -> InMemoryAestheticCatalog:
    """Catalog holding one aesthetic per known slug, named like "Dark Academia"."""

    return InMemoryAestheticCatalog(make_aesthetic(_display_name(slug)) for slug in AestheticSlug)

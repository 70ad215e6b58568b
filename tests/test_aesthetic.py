"""Tests for the aesthetic entity lifecycle."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
import pytest_mock

from aesthetic_engine.domain.aesthetic import Aesthetic
from aesthetic_engine.domain.exceptions import InvalidAestheticError
from aesthetic_engine.domain.theme_properties import ThemeProperties


@pytest.fixture
def theme() -> ThemeProperties:
    return ThemeProperties(colors=["black", "white"], style="clean", keywords=["simple"])


def test_create_trims_and_stamps(theme: ThemeProperties) -> None:
    aesthetic = Aesthetic.create("a-1", "  Minimalist ", " Less is more. ", theme)

    assert aesthetic.id == "a-1"
    assert aesthetic.name == "Minimalist"
    assert aesthetic.description == "Less is more."
    assert aesthetic.image_url is None
    assert aesthetic.created_at == aesthetic.updated_at
    assert aesthetic.created_at.tzinfo is not None


@pytest.mark.parametrize(
    ("name", "description", "field"),
    [
        ("", "desc", "name"),
        ("   ", "desc", "name"),
        ("x" * 101, "desc", "name"),
        ("Minimalist", "", "description"),
        ("Minimalist", "y" * 1001, "description"),
    ],
)
def test_create_rejects_invalid_text(
    theme: ThemeProperties, name: str, description: str, field: str
) -> None:
    with pytest.raises(InvalidAestheticError) as exc_info:
        Aesthetic.create("a-1", name, description, theme)

    assert exc_info.value.field == field


def test_create_accepts_boundary_lengths(theme: ThemeProperties) -> None:
    aesthetic = Aesthetic.create("a-1", "x" * 100, "y" * 1000, theme, "u" * 500)

    assert len(aesthetic.name) == 100
    assert len(aesthetic.description) == 1000


def test_create_rejects_long_image_url(theme: ThemeProperties) -> None:
    with pytest.raises(InvalidAestheticError) as exc_info:
        Aesthetic.create("a-1", "Minimalist", "desc", theme, "u" * 501)

    assert exc_info.value.field == "image_url"


def test_reconstitute_skips_validation(theme: ThemeProperties) -> None:
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    updated = datetime(2024, 2, 1, tzinfo=timezone.utc)

    aesthetic = Aesthetic.reconstitute("a-1", "", "", theme, None, created, updated)

    assert aesthetic.name == ""
    assert aesthetic.created_at == created
    assert aesthetic.updated_at == updated


def test_mutators_bump_updated_at_only(theme: ThemeProperties) -> None:
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    aesthetic = Aesthetic.reconstitute("a-1", "Old", "Old desc", theme, None, created, created)

    aesthetic.update_name("  New name ")
    first_bump = aesthetic.updated_at
    aesthetic.update_description(" New desc ")
    aesthetic.update_theme_properties(ThemeProperties(colors=["red"], style="bold"))
    aesthetic.update_image_url("https://cdn.example.com/new.jpg")

    assert aesthetic.name == "New name"
    assert aesthetic.description == "New desc"
    assert aesthetic.theme_properties.style == "bold"
    assert aesthetic.image_url == "https://cdn.example.com/new.jpg"
    assert aesthetic.created_at == created
    assert first_bump > created
    assert aesthetic.updated_at >= first_bump


def test_invalid_update_leaves_state_untouched(theme: ThemeProperties) -> None:
    aesthetic = Aesthetic.create("a-1", "Minimalist", "desc", theme)
    before = aesthetic.updated_at

    with pytest.raises(InvalidAestheticError):
        aesthetic.update_name(" ")
    with pytest.raises(InvalidAestheticError):
        aesthetic.update_image_url("u" * 501)

    assert aesthetic.name == "Minimalist"
    assert aesthetic.image_url is None
    assert aesthetic.updated_at == before


def test_updated_at_never_moves_backwards(
    theme: ThemeProperties, mocker: pytest_mock.MockerFixture
) -> None:
    aesthetic = Aesthetic.create("a-1", "Minimalist", "desc", theme)
    stamped = aesthetic.updated_at
    mocker.patch(
        "aesthetic_engine.domain.aesthetic._utcnow",
        return_value=stamped - timedelta(hours=1),
    )

    aesthetic.update_description("Clock went backwards.")

    assert aesthetic.updated_at == stamped

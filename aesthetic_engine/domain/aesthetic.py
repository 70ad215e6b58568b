"""Aesthetic entity: a named style archetype with its theme properties."""

from __future__ import annotations

from datetime import datetime, timezone

from aesthetic_engine.domain.exceptions import InvalidAestheticError
from aesthetic_engine.domain.theme_properties import ThemeProperties

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
IMAGE_URL_MAX_LENGTH = 500


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate_text(field: str, value: str, max_length: int) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidAestheticError(
            f"Aesthetic {field} cannot be empty",
            field=field,
            value=value,
        )
    trimmed = value.strip()
    if len(trimmed) > max_length:
        raise InvalidAestheticError(
            f"Aesthetic {field} cannot exceed {max_length} characters",
            field=field,
            value=value,
        )
    return trimmed


def _validate_image_url(image_url: str | None) -> None:
    if image_url and len(image_url) > IMAGE_URL_MAX_LENGTH:
        raise InvalidAestheticError(
            f"Image URL cannot exceed {IMAGE_URL_MAX_LENGTH} characters",
            field="image_url",
            value=image_url,
        )


class Aesthetic:
    """
    Style archetype exposed to quiz results and product ranking.

    Use ``create`` for new aesthetics (validated) and ``reconstitute`` when
    loading records that were validated before they were stored. Mutators only
    touch the in-memory object; persisting the change is up to the catalog.
    """

    def __init__(
        self,
        id: str,
        name: str,
        description: str,
        theme_properties: ThemeProperties,
        image_url: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        self._id = id
        self._name = name
        self._description = description
        self._theme_properties = theme_properties
        self._image_url = image_url
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        description: str,
        theme_properties: ThemeProperties,
        image_url: str | None = None,
    ) -> "Aesthetic":
        """Validate the attributes and build a new aesthetic stamped with the current time."""

        clean_name = _validate_text("name", name, NAME_MAX_LENGTH)
        clean_description = _validate_text("description", description, DESCRIPTION_MAX_LENGTH)
        _validate_image_url(image_url)

        now = _utcnow()
        return cls(id, clean_name, clean_description, theme_properties, image_url, now, now)

    @classmethod
    def reconstitute(
        cls,
        id: str,
        name: str,
        description: str,
        theme_properties: ThemeProperties,
        image_url: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Aesthetic":
        """Rebuild a stored aesthetic without re-validating it."""

        return cls(id, name, description, theme_properties, image_url, created_at, updated_at)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def theme_properties(self) -> ThemeProperties:
        return self._theme_properties

    @property
    def image_url(self) -> str | None:
        return self._image_url

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_name(self, name: str) -> None:
        self._name = _validate_text("name", name, NAME_MAX_LENGTH)
        self._touch()

    def update_description(self, description: str) -> None:
        self._description = _validate_text("description", description, DESCRIPTION_MAX_LENGTH)
        self._touch()

    def update_theme_properties(self, theme_properties: ThemeProperties) -> None:
        self._theme_properties = theme_properties
        self._touch()

    def update_image_url(self, image_url: str | None) -> None:
        _validate_image_url(image_url)
        self._image_url = image_url
        self._touch()

    def _touch(self) -> None:
        # updated_at never moves backwards, even if the wall clock does
        self._updated_at = max(_utcnow(), self._updated_at)

    def __repr__(self) -> str:
        return f"Aesthetic(id={self._id!r}, name={self._name!r})"

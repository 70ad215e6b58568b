"""Dictionary-backed catalog for tests and embedded use."""

from __future__ import annotations

from typing import Iterable

from aesthetic_engine.domain.aesthetic import Aesthetic
from aesthetic_engine.domain.exceptions import AestheticNotFoundError
from aesthetic_engine.domain.slugs import normalize_slug


class InMemoryAestheticCatalog:
    """Keeps aesthetics in memory, keyed by id."""

    def __init__(self, aesthetics: Iterable[Aesthetic] = ()) -> None:
        self._items: dict[str, Aesthetic] = {}
        for aesthetic in aesthetics:
            self._items[aesthetic.id] = aesthetic

    async def find_by_name(self, name: str) -> Aesthetic | None:
        wanted = normalize_slug(name)
        for aesthetic in self._items.values():
            if normalize_slug(aesthetic.name) == wanted:
                return aesthetic
        return None

    async def find_all(self) -> list[Aesthetic]:
        return sorted(self._items.values(), key=lambda aesthetic: aesthetic.name)

    async def find_by_id(self, aesthetic_id: str) -> Aesthetic | None:
        return self._items.get(aesthetic_id)

    async def get_by_id(self, aesthetic_id: str) -> Aesthetic:
        aesthetic = await self.find_by_id(aesthetic_id)
        if aesthetic is None:
            raise AestheticNotFoundError(aesthetic_id)
        return aesthetic

    async def save(self, aesthetic: Aesthetic) -> Aesthetic:
        self._items[aesthetic.id] = aesthetic
        return aesthetic

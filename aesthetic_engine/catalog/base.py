"""Contract for the catalog that stores aesthetics."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from aesthetic_engine.domain.aesthetic import Aesthetic


@runtime_checkable
class AestheticCatalog(Protocol):
    """Lookup surface the engine needs from the aesthetic store."""

    async def find_by_name(self, name: str) -> Aesthetic | None:
        """Return the aesthetic whose normalized name equals ``name``'s, if any."""

    async def find_all(self) -> list[Aesthetic]:
        """Return every stored aesthetic ordered by name."""

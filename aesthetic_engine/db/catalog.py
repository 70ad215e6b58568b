"""Aesthetic catalog backed by SQLAlchemy."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from aesthetic_engine.db.models import AestheticRecord
from aesthetic_engine.domain.aesthetic import Aesthetic
from aesthetic_engine.domain.exceptions import AestheticNotFoundError
from aesthetic_engine.domain.slugs import normalize_slug
from aesthetic_engine.domain.theme_properties import ThemeProperties


def _to_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def to_domain(record: AestheticRecord) -> Aesthetic:
    """Map a stored record onto the domain entity."""

    return Aesthetic.reconstitute(
        record.id,
        record.name,
        record.description,
        ThemeProperties.from_dict(record.theme_properties),
        record.image_url,
        _to_utc(record.created_at),
        _to_utc(record.updated_at),
    )


def to_record(aesthetic: Aesthetic) -> AestheticRecord:
    return AestheticRecord(
        id=aesthetic.id,
        slug=normalize_slug(aesthetic.name),
        name=aesthetic.name,
        description=aesthetic.description,
        theme_properties=aesthetic.theme_properties.to_dict(),
        image_url=aesthetic.image_url,
        created_at=aesthetic.created_at,
        updated_at=aesthetic.updated_at,
    )


class SqlAlchemyAestheticCatalog:
    """
    Catalog over the ``aesthetics`` table.

    Every call opens its own session, so concurrent lookups (such as the quiz
    fan-out) never share one ``AsyncSession``.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_by_name(self, name: str) -> Aesthetic | None:
        stmt = select(AestheticRecord).where(AestheticRecord.slug == normalize_slug(name))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
        return to_domain(record) if record else None

    async def find_all(self) -> list[Aesthetic]:
        stmt = select(AestheticRecord).order_by(AestheticRecord.name)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            records = result.scalars().all()
        return [to_domain(record) for record in records]

    async def find_by_id(self, aesthetic_id: str) -> Aesthetic | None:
        async with self._session_factory() as session:
            record = await session.get(AestheticRecord, aesthetic_id)
        return to_domain(record) if record else None

    async def get_by_id(self, aesthetic_id: str) -> Aesthetic:
        aesthetic = await self.find_by_id(aesthetic_id)
        if aesthetic is None:
            raise AestheticNotFoundError(aesthetic_id)
        return aesthetic

    async def exists_by_name(self, name: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(AestheticRecord)
            .where(AestheticRecord.slug == normalize_slug(name))
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one() > 0

    async def search_by_keyword(self, keyword: str) -> list[Aesthetic]:
        """Case-insensitive search across name, description and theme properties."""

        if not keyword or not keyword.strip():
            return []

        pattern = f"%{keyword.strip()}%"
        stmt = (
            select(AestheticRecord)
            .where(
                or_(
                    AestheticRecord.name.ilike(pattern),
                    AestheticRecord.description.ilike(pattern),
                    cast(AestheticRecord.theme_properties, String).ilike(pattern),
                )
            )
            .order_by(AestheticRecord.name)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            records = result.scalars().all()
        return [to_domain(record) for record in records]

    async def save(self, aesthetic: Aesthetic) -> Aesthetic:
        """Insert or update ``aesthetic`` and return it as stored."""

        async with self._session_factory() as session:
            record = await session.merge(to_record(aesthetic))
            await session.commit()
            await session.refresh(record)
            return to_domain(record)

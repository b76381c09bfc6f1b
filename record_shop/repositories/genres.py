"""Genre store."""

from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from record_shop.exceptions import DuplicateRecordError
from record_shop.models import Genre


class GenreRepository:
    """Genres keyed by id and by (unique) name."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def exists_by_name(self, name: str) -> bool:
        result = await self.db.execute(select(exists().where(Genre.name == name)))
        return bool(result.scalar())

    async def find_by_id(self, genre_id: UUID) -> Genre | None:
        return await self.db.get(Genre, genre_id)

    async def find_all(self) -> list[Genre]:
        """All genres in insertion order."""
        result = await self.db.execute(select(Genre).order_by(Genre.created_at))
        return list(result.scalars().all())

    async def save(self, genre: Genre) -> Genre:
        """Insert or update ``genre`` and commit.

        Raises:
            DuplicateRecordError: If another genre already has this name.
        """
        name = genre.name
        self.db.add(genre)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise DuplicateRecordError(f"Duplicate genre name: {name}") from exc
        await self.db.refresh(genre)
        return genre

    async def delete(self, genre: Genre) -> None:
        await self.db.delete(genre)
        await self.db.commit()

    async def delete_all(self) -> None:
        await self.db.execute(delete(Genre))
        await self.db.commit()

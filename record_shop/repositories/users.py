"""User store."""

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from record_shop.exceptions import DuplicateRecordError
from record_shop.models import User


class UserRepository:
    """Users keyed by id and by (unique) email."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def exists_by_email(self, email: str) -> bool:
        result = await self.db.execute(select(exists().where(User.email == email)))
        return bool(result.scalar())

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def save(self, user: User) -> User:
        """Insert or update ``user`` and commit.

        Raises:
            DuplicateRecordError: If the email already belongs to another user.
        """
        email = user.email
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise DuplicateRecordError(f"Duplicate user email: {email}") from exc
        await self.db.refresh(user)
        return user

    async def delete_all(self) -> None:
        await self.db.execute(delete(User))
        await self.db.commit()

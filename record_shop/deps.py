"""Common FastAPI dependencies for consistent type annotations.

Usage:
    from record_shop.deps import DbSession, GenreServiceDep

    async def my_endpoint(service: GenreServiceDep):
        ...
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from record_shop.database import get_db
from record_shop.repositories import GenreRepository, UserRepository
from record_shop.services import AuthService, GenreService

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_auth_service(db: DbSession) -> AuthService:
    return AuthService(UserRepository(db))


def get_genre_service(db: DbSession) -> GenreService:
    return GenreService(GenreRepository(db))


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
GenreServiceDep = Annotated[GenreService, Depends(get_genre_service)]

__all__ = ["AuthServiceDep", "DbSession", "GenreServiceDep"]

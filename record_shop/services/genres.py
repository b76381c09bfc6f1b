"""Genre management service."""

from uuid import UUID

from record_shop.exceptions import AlreadyExistsError, DuplicateRecordError, ResourceNotFoundError
from record_shop.logger import get_logger
from record_shop.models import Genre
from record_shop.repositories import GenreRepository
from record_shop.schemas.genre import GenreRequest

logger = get_logger(__name__)


def _already_exists(name: str) -> AlreadyExistsError:
    return AlreadyExistsError(f"A genre with this name already exists: {name}")


def _not_found(genre_id: UUID) -> ResourceNotFoundError:
    return ResourceNotFoundError(f"Genre not found with id: {genre_id}")


class GenreService:
    """CRUD over genres with name uniqueness and existence checks."""

    def __init__(self, genres: GenreRepository) -> None:
        self.genres = genres

    async def get_genres(self) -> list[Genre]:
        return await self.genres.find_all()

    async def get_genre_by_id(self, genre_id: UUID) -> Genre:
        genre = await self.genres.find_by_id(genre_id)
        if genre is None:
            raise _not_found(genre_id)
        return genre

    async def create_genre(self, request: GenreRequest) -> Genre:
        logger.info("Creating genre", name=request.name)
        if await self.genres.exists_by_name(request.name):
            raise _already_exists(request.name)

        try:
            return await self.genres.save(Genre(name=request.name))
        except DuplicateRecordError as exc:
            raise _already_exists(request.name) from exc

    async def update_genre(self, request: GenreRequest, genre_id: UUID) -> Genre:
        """Rename a genre.

        The name check runs against every genre, the target included, so
        renaming a genre to its current name is rejected as a duplicate.
        """
        if await self.genres.exists_by_name(request.name):
            raise _already_exists(request.name)

        genre = await self.get_genre_by_id(genre_id)
        genre.name = request.name
        try:
            return await self.genres.save(genre)
        except DuplicateRecordError as exc:
            raise _already_exists(request.name) from exc

    async def delete_genre(self, genre_id: UUID) -> None:
        genre = await self.get_genre_by_id(genre_id)
        await self.genres.delete(genre)
        logger.info("Genre deleted", genre_id=str(genre_id))

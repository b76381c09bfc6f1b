"""Genre API router.

Reads are public; writes need the ADMIN role (see ``record_shop.policy.ACCESS_RULES``).
"""

from uuid import UUID

from fastapi import APIRouter, Response, status

from record_shop.deps import GenreServiceDep
from record_shop.policy import AccessControlledRoute
from record_shop.schemas import ApiError, GenreRequest, GenreResponse

router = APIRouter(prefix="/genres", tags=["genres"], route_class=AccessControlledRoute)

_ADMIN_ERRORS = {
    400: {"model": ApiError},
    401: {"model": ApiError},
    403: {"model": ApiError},
}


@router.get("/", response_model=list[GenreResponse])
async def get_genres(service: GenreServiceDep) -> list[GenreResponse]:
    """Retrieve a list of all genres."""
    genres = await service.get_genres()
    return [GenreResponse.model_validate(genre) for genre in genres]


@router.get("/{genre_id}", response_model=GenreResponse, responses={404: {"model": ApiError}})
async def get_genre_by_id(genre_id: UUID, service: GenreServiceDep) -> GenreResponse:
    genre = await service.get_genre_by_id(genre_id)
    return GenreResponse.model_validate(genre)


@router.post(
    "/",
    response_model=GenreResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ADMIN_ERRORS,
)
async def create_genre(data: GenreRequest, service: GenreServiceDep) -> GenreResponse:
    genre = await service.create_genre(data)
    return GenreResponse.model_validate(genre)


@router.put(
    "/{genre_id}",
    response_model=GenreResponse,
    responses={**_ADMIN_ERRORS, 404: {"model": ApiError}},
)
async def update_genre(
    genre_id: UUID, data: GenreRequest, service: GenreServiceDep
) -> GenreResponse:
    genre = await service.update_genre(data, genre_id)
    return GenreResponse.model_validate(genre)


@router.delete(
    "/{genre_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_ADMIN_ERRORS, 404: {"model": ApiError}},
)
async def delete_genre(genre_id: UUID, service: GenreServiceDep) -> Response:
    """Remove a genre."""
    await service.delete_genre(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

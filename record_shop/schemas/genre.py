"""Pydantic schemas for genres."""

from typing import Annotated
from uuid import UUID

from pydantic import Field

from record_shop.models.genre import GENRE_NAME_MAX_LENGTH
from record_shop.schemas.base import CamelModel, max_length, required


class GenreRequest(CamelModel):
    """Body for creating or renaming a genre."""

    name: Annotated[
        str,
        Field(validate_default=True),
        required("Name is required"),
        max_length(GENRE_NAME_MAX_LENGTH, "Name cannot exceed 50 characters"),
    ] = None


class GenreResponse(CamelModel):
    id: UUID
    name: str

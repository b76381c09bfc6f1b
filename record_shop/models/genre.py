"""Genre model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from record_shop.database import Base
from record_shop.models.base import TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from record_shop.models.catalog import Album

GENRE_NAME_MAX_LENGTH = 50


class Genre(UUIDMixin, TimestampMixin, Base):
    """Music taxonomy label, unique by name."""

    __tablename__ = "genres"

    name: Mapped[str] = mapped_column(
        String(GENRE_NAME_MAX_LENGTH), unique=True, nullable=False, index=True
    )

    albums: Mapped[list[Album]] = relationship(back_populates="genre")

    def __repr__(self) -> str:
        return f"<Genre {self.name}>"

"""Catalog models: albums, artists, songs and record labels.

These tables are part of the schema but are not exposed through the API yet.
"""

from __future__ import annotations

import enum
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Date, Enum, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from record_shop.database import Base
from record_shop.models.base import UUIDMixin

if TYPE_CHECKING:
    from record_shop.models.genre import Genre


class ProductFormat(str, enum.Enum):
    """Physical or digital release format."""

    CD = "CD"
    VINYL = "VINYL"
    CASSETTE = "CASSETTE"
    DIGITAL = "DIGITAL"


class Artist(UUIDMixin, Base):
    __tablename__ = "artists"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    albums: Mapped[list[Album]] = relationship(
        back_populates="artist", cascade="all, delete-orphan"
    )
    songs: Mapped[list[Song]] = relationship(back_populates="artist")


class RecordLabel(UUIDMixin, Base):
    __tablename__ = "record_label"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(500), unique=True, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    albums: Mapped[list[Album]] = relationship(
        back_populates="record_label", cascade="all, delete-orphan"
    )


class Album(UUIDMixin, Base):
    """A purchasable release."""

    __tablename__ = "albums"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    stock: Mapped[int | None] = mapped_column(Integer, nullable=True)
    format: Mapped[ProductFormat | None] = mapped_column(
        Enum(ProductFormat, name="product_format"), nullable=True
    )
    front_cover_url: Mapped[str | None] = mapped_column(String(500), unique=True, nullable=True)
    back_cover_url: Mapped[str | None] = mapped_column(String(500), unique=True, nullable=True)
    # Percentage off the list price
    discount: Mapped[int | None] = mapped_column(Integer, nullable=True)

    genre_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("genres.id"), nullable=True, index=True
    )
    artist_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("artists.id"), nullable=True, index=True
    )
    record_label_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("record_label.id"), nullable=True, index=True
    )

    genre: Mapped[Genre | None] = relationship(back_populates="albums")
    artist: Mapped[Artist | None] = relationship(back_populates="albums")
    record_label: Mapped[RecordLabel | None] = relationship(back_populates="albums")
    songs: Mapped[list[Song]] = relationship(
        back_populates="album", cascade="all, delete-orphan"
    )


class Song(UUIDMixin, Base):
    __tablename__ = "songs"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    preview_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # Seconds
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)

    album_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("albums.id"), nullable=True, index=True
    )
    artist_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("artists.id"), nullable=True, index=True
    )

    album: Mapped[Album | None] = relationship(back_populates="songs")
    artist: Mapped[Artist | None] = relationship(back_populates="songs")

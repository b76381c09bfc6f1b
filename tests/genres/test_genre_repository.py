"""Tests for GenreRepository against a real database."""

import uuid

import pytest

from record_shop.exceptions import DuplicateRecordError
from record_shop.models import Genre
from record_shop.repositories import GenreRepository


@pytest.mark.asyncio
async def test_save_assigns_id_and_timestamps(db):
    repo = GenreRepository(db)

    genre = await repo.save(Genre(name="Rock"))

    assert isinstance(genre.id, uuid.UUID)
    assert genre.created_at is not None
    assert await repo.exists_by_name("Rock")
    assert not await repo.exists_by_name("rock")


@pytest.mark.asyncio
async def test_find_all_in_insertion_order(db):
    repo = GenreRepository(db)
    for name in ("Rock", "Pop", "Jazz"):
        await repo.save(Genre(name=name))

    assert [genre.name for genre in await repo.find_all()] == ["Rock", "Pop", "Jazz"]


@pytest.mark.asyncio
async def test_find_by_id_missing(db):
    assert await GenreRepository(db).find_by_id(uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_save_duplicate_name_raises(db):
    repo = GenreRepository(db)
    await repo.save(Genre(name="Rock"))

    with pytest.raises(DuplicateRecordError):
        await repo.save(Genre(name="Rock"))

    # Session is usable again after the failed commit
    assert [genre.name for genre in await repo.find_all()] == ["Rock"]


@pytest.mark.asyncio
async def test_delete_and_delete_all(db):
    repo = GenreRepository(db)
    rock = await repo.save(Genre(name="Rock"))
    await repo.save(Genre(name="Pop"))

    await repo.delete(rock)
    assert await repo.find_by_id(rock.id) is None

    await repo.delete_all()
    assert await repo.find_all() == []

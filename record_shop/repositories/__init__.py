"""Persistence access for users and genres."""

from record_shop.repositories.genres import GenreRepository
from record_shop.repositories.users import UserRepository

__all__ = ["GenreRepository", "UserRepository"]

"""Business logic layer."""

from record_shop.services.auth import AuthService
from record_shop.services.genres import GenreService

__all__ = ["AuthService", "GenreService"]

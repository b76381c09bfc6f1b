"""API routers package."""

from record_shop.routers import auth, genres

__all__ = ["auth", "genres"]

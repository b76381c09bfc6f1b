"""SQLAlchemy models package."""

from record_shop.models.catalog import Album, Artist, ProductFormat, RecordLabel, Song
from record_shop.models.commerce import Address, Cart, CartItem, Order, OrderItem, OrderStatus
from record_shop.models.genre import GENRE_NAME_MAX_LENGTH, Genre
from record_shop.models.user import User, UserRole

__all__ = [
    "Address",
    "Album",
    "Artist",
    "Cart",
    "CartItem",
    "GENRE_NAME_MAX_LENGTH",
    "Genre",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ProductFormat",
    "RecordLabel",
    "Song",
    "User",
    "UserRole",
]

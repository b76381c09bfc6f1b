"""User model."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from record_shop.database import Base
from record_shop.models.base import TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from record_shop.models.commerce import Address, Cart, Order


class UserRole(str, enum.Enum):
    """Role granted to a user; doubles as its single authority."""

    USER = "USER"
    ADMIN = "ADMIN"


class User(UUIDMixin, TimestampMixin, Base):
    """Registered shop customer or administrator."""

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role"), nullable=False, default=UserRole.USER
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    province: Mapped[str | None] = mapped_column(String(100), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    shipping_address: Mapped[str | None] = mapped_column(String(255), nullable=True)

    cart: Mapped[Cart | None] = relationship(
        back_populates="user", cascade="all, delete-orphan", uselist=False
    )
    address: Mapped[Address | None] = relationship(
        back_populates="user", cascade="all, delete-orphan", uselist=False
    )
    orders: Mapped[list[Order]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User {self.email} role={self.role.value if self.role else None}>"

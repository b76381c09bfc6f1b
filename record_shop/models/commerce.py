"""Commerce models: carts, orders and shipping addresses.

Schema only; no routes or services operate on these tables yet.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from record_shop.database import Base
from record_shop.models.base import UUIDMixin

if TYPE_CHECKING:
    from record_shop.models.catalog import Album
    from record_shop.models.user import User


class OrderStatus(str, enum.Enum):
    """Order lifecycle status."""

    PENDING = "PENDING"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class Cart(UUIDMixin, Base):
    __tablename__ = "carts"

    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0.00")
    )
    user_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), unique=True, nullable=True
    )

    user: Mapped[User | None] = relationship(back_populates="cart")
    items: Mapped[list[CartItem]] = relationship(
        back_populates="cart", cascade="all, delete-orphan"
    )


class CartItem(UUIDMixin, Base):
    __tablename__ = "cart_items"

    cart_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("carts.id"), nullable=False, index=True
    )
    album_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("albums.id"), nullable=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    unit_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    total_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)

    cart: Mapped[Cart] = relationship(back_populates="items")
    album: Mapped[Album | None] = relationship()


class Order(UUIDMixin, Base):
    __tablename__ = "orders"

    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    total_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, name="order_status"), nullable=False, default=OrderStatus.PENDING
    )
    user_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True, index=True
    )

    user: Mapped[User | None] = relationship(back_populates="orders")
    order_items: Mapped[list[OrderItem]] = relationship(
        back_populates="order", cascade="all, delete-orphan"
    )


class OrderItem(UUIDMixin, Base):
    __tablename__ = "order_items"

    order_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("orders.id"), nullable=False, index=True
    )
    album_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("albums.id"), nullable=True
    )
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    order: Mapped[Order] = relationship(back_populates="order_items")
    album: Mapped[Album | None] = relationship()


class Address(UUIDMixin, Base):
    __tablename__ = "addresses"

    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    province: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    user_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), unique=True, nullable=True
    )

    user: Mapped[User | None] = relationship(back_populates="address")

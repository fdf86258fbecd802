"""
Acme Stores Backend: Order, OrderItem, Payment and Refund Models
=================================================================

What:  ORM mappings for the order side of the schema.
Who:   Alembic (table creation) and Base.metadata consumers. No service or
       route reads or writes these tables; they carry no business rules.

Relationships:
    stores 1──* orders 1──* order_items
                  │  1──1 payments
                  └──1──* refunds *──0..1 order_items

Status/type columns are plain strings; the allowed values are owned by
whichever system writes the rows.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric, String, TIMESTAMP, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.store import Store


class Order(Base):
    """A sale placed at a Store, with delivery address and confirmation time."""

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    address: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Delivery address",
    )

    confirmation_date: Mapped[Optional[datetime]] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
    )

    status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    store_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("stores.store_id"),
        nullable=True,
        index=True,
    )

    store: Mapped[Optional["Store"]] = relationship(back_populates="orders", lazy="noload")
    items: Mapped[List["OrderItem"]] = relationship(back_populates="order", lazy="noload")
    payment: Mapped[Optional["Payment"]] = relationship(back_populates="order", lazy="noload")
    refunds: Mapped[List["Refund"]] = relationship(back_populates="order", lazy="noload")

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status='{self.status}')>"


class OrderItem(Base):
    """One product line of an Order."""

    __tablename__ = "order_items"

    id: Mapped[uuid.UUID] = mapped_column(
        "order_item_id", Uuid, primary_key=True, default=uuid.uuid4
    )
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    unit_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )

    order_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("orders.id"),
        nullable=True,
        index=True,
    )

    order: Mapped[Optional["Order"]] = relationship(back_populates="items", lazy="noload")


class Payment(Base):
    """Card payment settling an Order (at most one per order)."""

    __tablename__ = "payments"

    id: Mapped[uuid.UUID] = mapped_column(
        "payment_id", Uuid, primary_key=True, default=uuid.uuid4
    )
    status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    credit_card: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    payment_date: Mapped[Optional[datetime]] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
    )

    order_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("orders.id"),
        nullable=True,
        unique=True,
    )

    order: Mapped[Optional["Order"]] = relationship(back_populates="payment", lazy="noload")


class Refund(Base):
    """Refund of a whole Order or of a single OrderItem."""

    __tablename__ = "refunds"

    id: Mapped[uuid.UUID] = mapped_column(
        "refund_id", Uuid, primary_key=True, default=uuid.uuid4
    )
    type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    order_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("orders.id"),
        nullable=True,
        index=True,
    )
    order_item_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("order_items.order_item_id"),
        nullable=True,
    )

    order: Mapped[Optional["Order"]] = relationship(back_populates="refunds", lazy="noload")
    order_item: Mapped[Optional["OrderItem"]] = relationship(lazy="noload")

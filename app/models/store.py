"""
Acme Stores Backend: Store SQLAlchemy Model
============================================

What:  ORM model representing the `stores` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Read and written exclusively through StoreRepository.

Table Design:
    - store_id: UUID primary key, assigned when the row is first flushed.
      Callers never choose it; StoreService drops any id sent on create.
    - name / address: free text, both required at creation. Neither is unique.
    - Lower-case expression indexes back the case-insensitive substring search.
      They help prefix scans only; `%term%` patterns still scan on PostgreSQL
      without pg_trgm.
"""

import uuid
from typing import List, TYPE_CHECKING

from sqlalchemy import Index, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.order import Order


class Store(Base):
    """
    A retail location.

    `id` maps to the `store_id` column so the foreign keys on `orders` read
    naturally (`orders.store_id → stores.store_id`).
    """

    __tablename__ = "stores"

    id: Mapped[uuid.UUID] = mapped_column(
        "store_id",
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Server-assigned identifier, immutable after creation",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Store display name",
    )

    address: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Free-text street address",
    )

    # Inert relationship; no endpoint loads orders.
    orders: Mapped[List["Order"]] = relationship(back_populates="store", lazy="noload")

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, name='{self.name}')>"


# Functional indexes need the finished Table, so they are attached after the class.
Index("idx_stores_name_lower", func.lower(Store.__table__.c.name))
Index("idx_stores_address_lower", func.lower(Store.__table__.c.address))

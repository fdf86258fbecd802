"""Create stores and order tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates `stores` plus the order-side tables that reference it
       (`orders`, `order_items`, `payments`, `refunds`).
How:   Column definitions mirror app/models/store.py and app/models/order.py.

Rollback: downgrade() drops all five tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "stores",
        sa.Column(
            "store_id",
            sa.Uuid(),
            nullable=False,
            comment="Server-assigned identifier, immutable after creation",
        ),
        sa.Column("name", sa.String(255), nullable=False, comment="Store display name"),
        sa.Column("address", sa.String(255), nullable=False, comment="Free-text street address"),
        sa.PrimaryKeyConstraint("store_id"),
    )
    # Expression indexes for lower(name) / lower(address) lookups
    op.create_index("idx_stores_name_lower", "stores", [sa.text("lower(name)")])
    op.create_index("idx_stores_address_lower", "stores", [sa.text("lower(address)")])

    op.create_table(
        "orders",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("address", sa.String(255), nullable=True, comment="Delivery address"),
        sa.Column("confirmation_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("status", sa.String(50), nullable=True),
        sa.Column("store_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["store_id"], ["stores.store_id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_orders_store_id", "orders", ["store_id"])

    op.create_table(
        "order_items",
        sa.Column("order_item_id", sa.Uuid(), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("unit_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("order_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.PrimaryKeyConstraint("order_item_id"),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])

    op.create_table(
        "payments",
        sa.Column("payment_id", sa.Uuid(), nullable=False),
        sa.Column("status", sa.String(50), nullable=True),
        sa.Column("credit_card", sa.BigInteger(), nullable=True),
        sa.Column("payment_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("order_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.PrimaryKeyConstraint("payment_id"),
        sa.UniqueConstraint("order_id"),
    )

    op.create_table(
        "refunds",
        sa.Column("refund_id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.String(50), nullable=True),
        sa.Column("order_id", sa.Uuid(), nullable=True),
        sa.Column("order_item_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.ForeignKeyConstraint(["order_item_id"], ["order_items.order_item_id"]),
        sa.PrimaryKeyConstraint("refund_id"),
    )
    op.create_index("ix_refunds_order_id", "refunds", ["order_id"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order. Destroys all data."""
    op.drop_index("ix_refunds_order_id", table_name="refunds")
    op.drop_table("refunds")
    op.drop_table("payments")
    op.drop_index("ix_order_items_order_id", table_name="order_items")
    op.drop_table("order_items")
    op.drop_index("ix_orders_store_id", table_name="orders")
    op.drop_table("orders")
    op.drop_index("idx_stores_address_lower", table_name="stores")
    op.drop_index("idx_stores_name_lower", table_name="stores")
    op.drop_table("stores")

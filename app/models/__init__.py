# Models package init
"""
Importing this package registers every table with Base.metadata.
Alembic's env.py and the test fixtures rely on that.
"""

from app.models.store import Store
from app.models.order import Order, OrderItem, Payment, Refund

__all__ = ["Store", "Order", "OrderItem", "Payment", "Refund"]

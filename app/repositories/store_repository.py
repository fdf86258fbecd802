"""
Acme Stores Backend: Store Repository (Persistence Collaborator)
================================================================

What:  The only code that issues SQL against the `stores` table.
How:   Three async operations over the request's AsyncSession:
           find_by_id(id)              → Store | None
           save(store)                 → Store (id populated once flushed)
           find_by_filter(name, addr)  → list[Store]
Who:   Called by StoreService.

Search semantics:
    Both filters are case-insensitive substring matches, rendered by
    SQLAlchemy's `icontains` as `lower(col) LIKE '%' || lower(:p) || '%'`.
    When both filters are given they are OR-combined, so a Store matching
    only one of them is still returned. `%` and `_` typed by the client are
    escaped and match literally.

Error Handling:
    SQLAlchemyError is wrapped in DatabaseError; the original exception is
    chained and its type is recorded in the context for the server log.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.store import Store

logger = logging.getLogger(__name__)


class StoreRepository:
    """
    Stateless data-access object for Store rows.

    Methods never commit. Writes are flushed so generated ids are visible,
    and the request-scoped session dependency commits at the end.
    """

    async def find_by_id(self, db: AsyncSession, store_id: UUID) -> Optional[Store]:
        try:
            return await db.get(Store, store_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching store %s: %s", store_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the store. Please try again.",
                context={"store_id": str(store_id), "error_type": type(e).__name__},
            ) from e

    async def save(self, db: AsyncSession, store: Store) -> Store:
        """
        Insert or update a Store.

        New instances are added to the session; instances loaded through the
        same session are already tracked, so add() is a no-op for them. The
        flush sends the INSERT/UPDATE and assigns the id on new rows.
        """
        try:
            db.add(store)
            await db.flush()
            return store
        except SQLAlchemyError as e:
            logger.error("Database error saving store: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the store. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def find_by_filter(
        self,
        db: AsyncSession,
        name: Optional[str] = None,
        address: Optional[str] = None,
    ) -> List[Store]:
        """
        Case-insensitive substring search on name and/or address.

        Args:
            name:    substring to look for in Store.name (None = no name filter)
            address: substring to look for in Store.address (None = no address filter)

        Returns:
            Matching stores in the order the database yields them, or an empty
            list when neither filter is given.
        """
        conditions = []
        if name:
            conditions.append(Store.name.icontains(name, autoescape=True))
        if address:
            conditions.append(Store.address.icontains(address, autoescape=True))

        if not conditions:
            return []

        try:
            result = await db.execute(select(Store).where(or_(*conditions)))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error searching stores: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not search stores. Please try again.",
                context={"name": name, "address": address, "error_type": type(e).__name__},
            ) from e


# ── Singleton Instance ────────────────────────────────────────────────────
store_repository = StoreRepository()

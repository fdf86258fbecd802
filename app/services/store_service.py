"""
Acme Stores Backend: Store Service (Request Validation and Merge Rules)
=======================================================================

What:  Validates Store requests, resolves ids, and applies merge-patch updates.
How:   Each method checks its inputs in a fixed order, delegates persistence
       to StoreRepository, and raises application exceptions for every
       rejected input. The global handlers render those as `{status, message}`.
Who:   Called by the /stores route handlers.

Validation order per operation:
    get_store:      blank id → 400 · not a UUID → 400 · missing row → 404
    search_stores:  both filters blank → 400 · no match → 404
    create_store:   null body → 400 · blank name or address → 400
    update_store:   null body → 400 · blank id → 400 · both fields blank → 400
                    · not a UUID → 400 · missing row → 404

"Blank" means None or a string made only of whitespace.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import MalformedInputError, MissingInputError, NotFoundError
from app.models.store import Store
from app.repositories.store_repository import store_repository
from app.schemas.store import StoreRequest, StoreResponse

logger = logging.getLogger(__name__)

# ── Client-facing messages ────────────────────────────────────────────────
MSG_ID_NOT_PROVIDED = "id not provided"
MSG_ID_IS_NOT_VALID = "id is not valid"
MSG_ID_NOT_VALID = "id not valid"
MSG_ID_REQUIRED = "id is required"
MSG_NOT_FOUND_FOR_ID = "no Store found for id"
MSG_NO_FILTER = "no valid parameter informed; accepted parameters are name and address"
MSG_NOT_FOUND_FOR_FILTER = "no Store found for parameters Name/Address"
MSG_BODY_MALFORMED = "information incomplete or malformed"
MSG_CREATE_FIELDS_REQUIRED = "name and address fields are required"
MSG_UPDATE_FIELD_REQUIRED = "at least one field required to update"


def is_blank(value: Optional[str]) -> bool:
    """True for None, "" and whitespace-only strings."""
    return value is None or not value.strip()


def _parse_uuid(value: str, message: str) -> UUID:
    """Accept only the hyphenated 8-4-4-4-12 form, in either case."""
    try:
        parsed = UUID(value)
    except ValueError:
        raise MalformedInputError(message=message, field="id", context={"id": value})
    # UUID() also takes braces, urn:uuid: and undashed hex
    if str(parsed) != value.lower():
        raise MalformedInputError(message=message, field="id", context={"id": value})
    return parsed


class StoreService:
    """
    Business rules for the Store resource.

    Stateless: the database session arrives with each call, the repository
    is a module-level singleton, and nothing is cached between requests.
    """

    async def get_store(self, db: AsyncSession, store_id: Optional[str]) -> StoreResponse:
        """
        Fetch one Store by its id string.

        Raises:
            MissingInputError:   id is blank
            MalformedInputError: id is not a UUID
            NotFoundError:       no Store has this id
        """
        if is_blank(store_id):
            raise MissingInputError(message=MSG_ID_NOT_PROVIDED, field="id")

        parsed_id = _parse_uuid(store_id, MSG_ID_IS_NOT_VALID)
        store = await store_repository.find_by_id(db, parsed_id)
        if store is None:
            raise NotFoundError(message=MSG_NOT_FOUND_FOR_ID, context={"id": store_id})

        return StoreResponse.model_validate(store)

    async def search_stores(
        self,
        db: AsyncSession,
        name: Optional[str] = None,
        address: Optional[str] = None,
    ) -> List[StoreResponse]:
        """
        Case-insensitive substring search by name and/or address.

        With both filters the result is the union: a Store whose name matches
        is returned even if its address does not, and vice versa.

        Raises:
            MissingInputError: neither filter given
            NotFoundError:     nothing matched
        """
        name = None if is_blank(name) else name
        address = None if is_blank(address) else address

        if name is None and address is None:
            raise MissingInputError(message=MSG_NO_FILTER)

        stores = await store_repository.find_by_filter(db, name=name, address=address)
        if not stores:
            raise NotFoundError(
                message=MSG_NOT_FOUND_FOR_FILTER,
                context={"name": name, "address": address},
            )

        return [StoreResponse.model_validate(store) for store in stores]

    async def create_store(
        self,
        db: AsyncSession,
        payload: Optional[StoreRequest],
    ) -> StoreResponse:
        """
        Persist a new Store.

        The new row is built from name and address only, so an `id` present
        in the payload can never turn a create into an overwrite.

        Raises:
            MissingInputError: body missing, or name/address blank
        """
        if payload is None:
            raise MissingInputError(message=MSG_BODY_MALFORMED)
        if is_blank(payload.name) or is_blank(payload.address):
            raise MissingInputError(message=MSG_CREATE_FIELDS_REQUIRED)

        store = await store_repository.save(
            db, Store(name=payload.name, address=payload.address)
        )
        logger.info("Store created: %s", store.id)

        return StoreResponse.model_validate(store)

    async def update_store(
        self,
        db: AsyncSession,
        store_id: Optional[str],
        payload: Optional[StoreRequest],
    ) -> StoreResponse:
        """
        Merge-patch an existing Store.

        Non-blank fields in the payload overwrite the stored values; blank or
        omitted fields leave them untouched. Applying the same payload twice
        leaves the row in the same state.

        Raises:
            MissingInputError:   body missing, id blank, or both fields blank
            MalformedInputError: id is not a UUID
            NotFoundError:       no Store has this id
        """
        if payload is None:
            raise MissingInputError(message=MSG_BODY_MALFORMED)
        if is_blank(store_id):
            raise MissingInputError(message=MSG_ID_REQUIRED, field="id")
        if is_blank(payload.name) and is_blank(payload.address):
            raise MissingInputError(message=MSG_UPDATE_FIELD_REQUIRED)

        parsed_id = _parse_uuid(store_id, MSG_ID_NOT_VALID)
        store = await store_repository.find_by_id(db, parsed_id)
        if store is None:
            raise NotFoundError(message=MSG_NOT_FOUND_FOR_ID, context={"id": store_id})

        if not is_blank(payload.name):
            store.name = payload.name
        if not is_blank(payload.address):
            store.address = payload.address

        store = await store_repository.save(db, store)
        logger.info("Store updated: %s", store.id)

        return StoreResponse.model_validate(store)


# ── Singleton Instance ────────────────────────────────────────────────────
store_service = StoreService()

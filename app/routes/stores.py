"""
Acme Stores Backend: Store Route Handlers
==========================================

What:  GET/POST/PUT handlers for the /stores resource.
How:   Extracts path, query and body values, delegates to StoreService, and
       sets the status code and Location header. Every rejection is raised
       by the service and rendered by the global exception handlers.

Route Inventory:
    GET  /stores/{store_id}     fetch one Store
    GET  /stores?name=&address= case-insensitive substring search (OR)
    POST /stores                create, 201 + Location
    PUT  /stores/{store_id}     merge-patch update
    PUT  /stores                no id in the path → 400 "id is required"

Path ids are taken as plain strings rather than `UUID` so a malformed id is
reported as our 400 error instead of FastAPI's generic 422.
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.store import ErrorResponse, StoreRequest, StoreResponse
from app.services.store_service import store_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Stores"])

_ERROR_RESPONSES = {
    400: {"description": "Missing or malformed input", "model": ErrorResponse},
    404: {"description": "No matching Store", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


def _location_for(request: Request, store_id: UUID) -> str:
    """Request URL (without query) plus the new id, e.g. http://host/stores/<id>."""
    base = str(request.url.replace(query="")).rstrip("/")
    return f"{base}/{store_id}"


@router.get(
    "/stores/{store_id}",
    response_model=StoreResponse,
    responses=_ERROR_RESPONSES,
    summary="Get a Store by id",
)
async def get_store(
    store_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> StoreResponse:
    return await store_service.get_store(db=db, store_id=store_id)


@router.get(
    "/stores",
    response_model=List[StoreResponse],
    responses=_ERROR_RESPONSES,
    summary="Search Stores by name and/or address",
    description=(
        "Case-insensitive substring search. When both parameters are given, "
        "Stores matching either one are returned."
    ),
)
async def search_stores(
    name: Optional[str] = Query(default=None, description="Substring of the Store name"),
    address: Optional[str] = Query(default=None, description="Substring of the Store address"),
    db: AsyncSession = Depends(get_db_session),
) -> List[StoreResponse]:
    return await store_service.search_stores(db=db, name=name, address=address)


@router.post(
    "/stores",
    status_code=201,
    response_model=StoreResponse,
    responses={
        201: {"description": "Store created", "model": StoreResponse},
        400: _ERROR_RESPONSES[400],
        500: _ERROR_RESPONSES[500],
    },
    summary="Create a Store",
)
async def create_store(
    request: Request,
    response: Response,
    store: Optional[StoreRequest] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> StoreResponse:
    """
    Create a Store from `name` and `address`.

    Any `id` in the body is discarded. The Location header points at the
    new resource so clients can follow it with GET.
    """
    created = await store_service.create_store(db=db, payload=store)
    response.headers["Location"] = _location_for(request, created.id)
    return created


@router.put(
    "/stores/{store_id}",
    response_model=StoreResponse,
    responses=_ERROR_RESPONSES,
    summary="Update a Store (merge-patch)",
    description=(
        "Only non-blank fields are applied; omitted or blank fields keep their "
        "stored value. At least one of name and address is required."
    ),
)
async def update_store(
    store_id: str,
    store: Optional[StoreRequest] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> StoreResponse:
    return await store_service.update_store(db=db, store_id=store_id, payload=store)


@router.put("/stores", include_in_schema=False)
async def update_store_without_id(
    store: Optional[StoreRequest] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> StoreResponse:
    # Same checks as above with an empty id, so the body is still validated first.
    return await store_service.update_store(db=db, store_id="", payload=store)

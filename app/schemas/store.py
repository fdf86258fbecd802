"""
Acme Stores Backend: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the HTTP contract for the Store resource.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and builds the OpenAPI document from them.

Design Decision:
    Every field on StoreRequest is optional. Presence rules differ between
    create (both required) and update (at least one), so they live in
    StoreService instead of the schema, where a single model can serve both
    endpoints and blank strings can be treated the same as missing ones.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class StoreRequest(BaseModel):
    """
    What:  Body of POST /stores and PUT /stores/{id}.

    `id` is accepted so that clients echoing a full Store do not get a
    validation error, but it is never read: creates always receive a fresh
    id and updates take the id from the path.
    """
    id: Optional[str] = Field(
        default=None,
        description="Ignored. The server assigns ids and updates use the path id.",
    )
    name: Optional[str] = Field(default=None, max_length=255, description="Store name")
    address: Optional[str] = Field(default=None, max_length=255, description="Store address")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class StoreResponse(BaseModel):
    """Full representation of a stored Store."""
    id: uuid.UUID = Field(description="Server-assigned identifier (UUID)")
    name: str = Field(description="Store name")
    address: str = Field(description="Store address")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Uniform error body returned for every rejected request.

    Example:
        {"status": 404, "message": "no Store found for id"}
    """
    status: int = Field(description="HTTP status code, repeated in the body")
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

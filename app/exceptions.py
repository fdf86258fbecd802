"""
Acme Stores Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions, one per failure category.
How:   Each exception carries a client-safe message, an HTTP status code, and
       an optional context dict. Global exception handlers (main.py) turn
       them into the uniform `{status, message}` error body.
Who:   Raised by StoreService and StoreRepository; caught by global handlers.

Exception Hierarchy:
    StoreApiError (base)             → 500
    ├── InvalidInputError            → 400
    │   ├── MissingInputError        → 400 (field/param absent or blank)
    │   └── MalformedInputError      → 400 (id is not a UUID)
    ├── NotFoundError                → 404
    ├── DatabaseError                → 500 (generic message to client)
    └── RateLimitExceededError       → 429

`context` is written to server logs only. It never appears in a response.
"""

from typing import Any, Dict, Optional


class StoreApiError(Exception):
    """
    Base exception for all Acme Stores application errors.

    Attributes:
        message:      User-facing error description (returned in the body)
        status_code:  HTTP status the global handler responds with
        context:      Additional debug info (logged, NOT returned)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidInputError(StoreApiError):
    """
    Raised when client input fails validation.

    HTTP: 400 Bad Request. Covers both absent and badly formatted input;
    the two subclasses below only exist so callers and tests can tell them
    apart.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class MissingInputError(InvalidInputError):
    """A required field or parameter is absent, null, or blank."""


class MalformedInputError(InvalidInputError):
    """An identifier was supplied but cannot be parsed as a UUID."""


class NotFoundError(StoreApiError):
    """
    Raised when a well-formed identifier or filter matches no record.

    HTTP: 404 Not Found

    The repository returns None / [] for missing rows; StoreService converts
    that into this exception so the route stays free of branching.
    """

    status_code = 404

    def __init__(
        self,
        message: str = "The requested resource was not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(StoreApiError):
    """
    Raised when a database operation fails unexpectedly.

    HTTP: 500 Internal Server Error

    The response message is always generic. The original exception type and
    the operation are kept in `context` for the server log.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(StoreApiError):
    """
    A client exceeded the per-IP request rate limit.

    HTTP: 429 Too Many Requests, with a Retry-After header.
    """

    status_code = 429

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after


# Body message for any 500 not raised as a StoreApiError
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again or contact support."

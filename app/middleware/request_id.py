"""
Acme Stores Backend: Request ID Middleware
===========================================

What:  Tags every request with a correlation id and echoes it back.
How:   Reuses an inbound X-Request-ID header or generates a short UUID, stores
       it in a ContextVar and on request.state, and sets it on the response.
When:  Outermost middleware, so 429s from the rate limiter and 500s from
       unhandled exceptions carry the header too.
Who:   Read by RequestLoggingMiddleware and the global exception handlers so
       every log line of one request carries the same id.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.exceptions import UNEXPECTED_ERROR_MESSAGE

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request id for tracing.

    A client-supplied X-Request-ID wins, which lets callers correlate their
    own logs with ours. Generated ids are the first 8 hex chars of a UUID4.

    Exceptions that no handler claimed would otherwise reach Starlette's
    ServerErrorMiddleware, which answers outside this layer. They are
    rendered here as the generic 500 body instead.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("[%s] Unexpected error: %s", rid, str(e), exc_info=True)
            response = JSONResponse(
                status_code=500,
                content={"status": 500, "message": UNEXPECTED_ERROR_MESSAGE},
            )

        response.headers[REQUEST_ID_HEADER] = rid

        return response

# Middleware package init
"""
Acme Stores Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Rate Limit] → [Logging] → [CORS] → Route Handler

    1. Request ID: sets the correlation id, renders unhandled errors as 500
    2. Rate Limit: rejects over-limit clients before the route runs
    3. Logging: one access line per request, with status and duration
    4. CORS: FastAPI's CORSMiddleware (handles preflight)
"""

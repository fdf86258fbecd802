# Routes package init
"""
Acme Stores Backend: API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - stores.py:  GET  /stores/{id}      (single Store)
                  GET  /stores            (search by name/address)
                  POST /stores            (create)
                  PUT  /stores/{id}       (merge-patch update)
    - health.py:  GET  /health            (service health check)

Routes stay thin: read the request, call StoreService, shape the response.
"""

# Services package init
"""
Acme Stores Backend: Services Layer
====================================

What:  Business rules sitting between routes (HTTP) and repositories (SQL).
How:   Services take a database session plus plain inputs, validate them,
       call the repository, and return response schemas or raise
       application exceptions.

Service Inventory:
    - StoreService: get by id, filtered search, create, merge-patch update
"""

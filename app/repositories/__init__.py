# Repositories package init
"""
Acme Stores Backend: Repository Layer
======================================

What:  Data-access objects that own every SQL statement.
Why:   StoreService talks to a three-method collaborator (find_by_id, save,
       find_by_filter) and can be unit-tested by mocking it.

Repository Inventory:
    - StoreRepository: lookup by id, save, case-insensitive filtered search
"""

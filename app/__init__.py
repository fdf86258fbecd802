"""
Acme Stores Backend: Application Package Initializer
=====================================================

What: Marks the `app` directory as a Python package.
Who:  Imported by uvicorn (`app.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, headers, params
    ├─────────────────────────────────────┤
    │      Services (Store validation)    │  ← input rules, merge-patch
    ├─────────────────────────────────────┤
    │    Repositories (Persistence)       │  ← find_by_id / save / find_by_filter
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Sessions)          │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘

    Routes never touch SQL, and repositories never raise HTTP-flavoured
    errors other than DatabaseError.
"""

__version__ = "1.0.0"

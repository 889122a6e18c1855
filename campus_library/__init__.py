"""
Campus Library Backend — Application Package Initializer
=========================================================

What: Marks the `campus_library` directory as a Python package.
Why:  Enables module imports like `from campus_library.config import settings`.
Who:  Used by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows the same layered shape for every library entity
    (books, borrows, library cards, rare books, notes, events,
    notifications, contact messages, donations, users):

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP, session gate, uploads
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Login flows, status changes
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes stay thin: they check the session, translate uploads into stored
    paths and hand the payload to a service.
"""

__version__ = "1.0.0"

"""
Inkpost Backend — Application Package
=======================================

Layered layout:

    ┌─────────────────────────────────────┐
    │   Routes + Access Guard (HTTP)      │  ← status codes, envelopes, bearer check
    ├─────────────────────────────────────┤
    │   Services (business rules)         │  ← credentials, tokens, ownership, counters
    ├─────────────────────────────────────┤
    │   Models & Schemas (data)           │  ← SQLAlchemy ORM + Pydantic contracts
    ├─────────────────────────────────────┤
    │   Database (persistence)            │  ← async sessions, one per request
    └─────────────────────────────────────┘

Routes never talk to the database directly, and services never build HTTP
responses: they raise the exceptions in app.exceptions.
"""

__version__ = "1.0.0"

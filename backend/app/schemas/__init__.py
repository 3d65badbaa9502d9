"""
Inkpost Backend — Pydantic Request/Response Schemas
=====================================================

What:  The API contract. Request models validate input before any service
       runs; response models control exactly which fields leave the server
       (password hashes never do).
Why separate from ORM models: the wire shape (embedded author summaries,
       snake_case envelopes like {"task": ...}) differs from table layout.
"""

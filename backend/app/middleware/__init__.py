"""
Inkpost Backend — Middleware Package
======================================

Cross-cutting request handling.

Middleware Chain (outermost first):
    Request → [Request ID] → [Rate Limit] → [Access Log] → [GZip] → [CORS] → Route

    The request id exists before anything can answer, so even a 429 from
    the limiter carries one. Requests the limiter rejects never reach the
    access log; the limiter logs them itself.

auth_guard.py is not a Starlette middleware: it is the `require_auth`
dependency attached to protected routes only.
"""

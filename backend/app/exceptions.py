"""
Inkpost Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for every failure a client can see.
Why:   Services raise domain errors; the global handlers in main.py map each
       type to one HTTP status and a consistent JSON body. Routes never build
       error responses themselves.
How:   Each exception carries a user-safe `message` and a `context` dict that
       is logged server-side but never returned verbatim.

Exception Hierarchy:
    InkpostError (base)
    ├── ValidationError           → 400 (bad media upload, business-rule input)
    ├── ConflictError             → 400
    │   ├── DuplicateEmailError
    │   ├── AlreadyLikedError
    │   └── NotLikedError
    ├── InvalidCredentialsError   → 400
    ├── UnauthorizedError         → 401 (no bearer token presented)
    ├── ForbiddenError            → 403 (bad token, or not the comment owner)
    ├── NotFoundError             → 404
    ├── RateLimitExceededError    → 429
    └── DatabaseError             → 500 (generic message only)

    InvalidTokenError is raised by the token service only; the access guard
    converts it into ForbiddenError, so it has no handler of its own.
"""

from typing import Any, Dict, Optional


class InkpostError(Exception):
    """
    Base exception for all Inkpost application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, NOT returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(InkpostError):
    """
    Client input passed schema validation but broke a business rule.

    When:  Uploaded media has the wrong type or exceeds MAX_MEDIA_SIZE.
    HTTP:  400. Schema-level problems (missing fields, wrong types) are
           FastAPI's RequestValidationError and answered with 422 instead.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(InkpostError):
    """Request conflicts with existing state. HTTP 400."""


class DuplicateEmailError(ConflictError):
    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Email already registered", context=context)


class AlreadyLikedError(ConflictError):
    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Already liked", context=context)


class NotLikedError(ConflictError):
    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Not liked yet", context=context)


class InvalidCredentialsError(InkpostError):
    """
    Login failed.

    Raised for an unknown email and for a wrong password alike, with the same
    message, so a caller cannot probe which accounts exist.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid credentials", context=context)


class UnauthorizedError(InkpostError):
    """No bearer token was presented on a protected route. HTTP 401."""

    def __init__(
        self,
        message: str = "Token missing",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(InkpostError):
    """
    Caller is identified but not allowed. HTTP 403.

    When:  The presented token is invalid or expired, or the caller tries to
           delete someone else's comment.
    """

    def __init__(
        self,
        message: str = "Forbidden",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidTokenError(InkpostError):
    """Token signature, shape or expiry check failed."""

    def __init__(
        self,
        message: str = "Invalid or expired token",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(InkpostError):
    """
    Requested resource does not exist, or (for tasks and blogs) exists but
    belongs to another user. HTTP 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource


class DatabaseError(InkpostError):
    """
    A database operation failed unexpectedly. HTTP 500.

    The client only ever sees the generic message; the driver error is kept
    in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(InkpostError):
    """Client exceeded the per-IP limit on credential endpoints. HTTP 429."""

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Too many requests. Please wait {retry_after} seconds before retrying."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after

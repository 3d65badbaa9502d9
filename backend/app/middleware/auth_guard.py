"""
Inkpost Backend — Access Guard
================================

What:  The gate every protected route passes through before its handler runs.
How:   A FastAPI dependency (`require_auth`) rather than a Starlette
       middleware, so public and protected routes can share a router and the
       guard's errors flow through the same exception handlers as everything
       else.

Algorithm:
    1. Read `Authorization: Bearer <token>`.
    2. No header, no token after the scheme, or a non-Bearer scheme
       → UnauthorizedError (401). No service is touched.
    3. Token present but rejected by the token service
       → ForbiddenError (403).
    4. Otherwise the TokenClaim is stored on `request.state.claim` (read by
       the access log) and returned to the handler.

The 401/403 split is part of the API contract: 401 means "log in",
403 means "your session is expired or was tampered with".
"""

import logging
from typing import Optional

from fastapi import Request

from app.exceptions import ForbiddenError, InvalidTokenError, UnauthorizedError
from app.schemas.auth import TokenClaim
from app.services.token_service import token_service

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    Returns None when the header is missing, has another scheme, or has
    nothing after the scheme prefix.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


async def require_auth(request: Request) -> TokenClaim:
    """FastAPI dependency: resolve the caller's claim or reject the request."""
    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise UnauthorizedError()

    try:
        claim = token_service.validate(token)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token on %s: %s", request.url.path, e.context.get("reason"))
        raise ForbiddenError(message="Invalid or expired token", context=e.context)

    request.state.claim = claim
    return claim

"""
Inkpost Backend — Credential Endpoint Rate Limiting
=====================================================

What:  Per-IP sliding window limiter on POST /signup and POST /login.
Why:   Those are the only routes where an attacker can guess passwords or
       enumerate accounts; everything else requires a valid token.
How:   Each client IP keeps a list of request timestamps inside the window.
       When the list is full, the request is answered with 429 and a
       Retry-After header computed from the oldest timestamp.

Scope:
    State is in-process memory. With several worker processes each enforces
    its own window, so the effective limit is multiplied by the worker count.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.config import settings
from app.exceptions import RateLimitExceededError
from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

LIMITED_PATHS: FrozenSet[str] = frozenset({"/signup", "/login"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Args:
        limit:  Max requests per window per IP (default RATE_LIMIT_REQUESTS).
        window: Window length in seconds (default RATE_LIMIT_WINDOW).
        paths:  Paths subject to limiting (default: signup and login).
    """

    def __init__(
        self,
        app,
        limit: Optional[int] = None,
        window: Optional[int] = None,
        paths: Optional[Iterable[str]] = None,
    ):
        super().__init__(app)
        self.limit = limit or settings.rate_limit_requests
        self.window = window or settings.rate_limit_window
        self.paths = frozenset(paths) if paths is not None else LIMITED_PATHS
        self._requests: Dict[str, List[float]] = defaultdict(list)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path not in self.paths:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        window_start = now - self.window

        recent = [ts for ts in self._requests[client_ip] if ts > window_start]
        if len(recent) >= self.limit:
            retry_after = int(recent[0] + self.window - now) + 1
            self._requests[client_ip] = recent
            logger.warning(
                "Rate limit exceeded for %s on %s: %d requests in %ds",
                client_ip,
                request.url.path,
                len(recent),
                self.window,
            )
            exc = RateLimitExceededError(retry_after=retry_after)
            return JSONResponse(
                status_code=429,
                content={
                    "error": "rate_limit_exceeded",
                    "message": exc.message,
                    "details": {"retry_after": retry_after},
                    "request_id": request_id_var.get(""),
                },
                headers={"Retry-After": str(retry_after)},
            )

        recent.append(now)
        self._requests[client_ip] = recent
        self._forget_idle(window_start)
        return await call_next(request)

    def _forget_idle(self, window_start: float) -> None:
        """Drop IPs whose newest request has left the window."""
        idle = [ip for ip, stamps in self._requests.items() if not stamps or stamps[-1] <= window_start]
        for ip in idle:
            del self._requests[ip]

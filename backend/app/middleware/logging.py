"""
Inkpost Backend — Access Log Middleware
=========================================

What:  One log line per request on the `inkpost.access` logger:
       method, path, status, duration, request id, client IP, and the
       authenticated user id when the access guard resolved one.
How:   Level follows the status class: 5xx → ERROR, 4xx → WARNING,
       everything else → INFO. Health probes are not logged.

Never logged: request bodies (passwords, media), Authorization headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("inkpost.access")

QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        claim = getattr(request.state, "claim", None)
        user_id = str(claim.user_id) if claim is not None else "-"
        status = response.status_code

        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] user=%s from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            request_id_var.get(""),
            user_id,
            client_ip,
        )
        return response

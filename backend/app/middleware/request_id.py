"""
Inkpost Backend — Request ID Middleware
=========================================

What:  Gives each request a correlation id, exposed to loggers through a
       ContextVar and echoed back in the `X-Request-ID` response header.
Why:   Error bodies carry the same id, so a client report can be matched to
       the server log line for that request.

A client-supplied X-Request-ID is honoured (truncated to 64 characters);
otherwise a short random id is generated.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

MAX_REQUEST_ID_LENGTH = 64

# Coroutine-local: concurrent requests on one thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        supplied = request.headers.get("X-Request-ID", "").strip()
        rid = supplied[:MAX_REQUEST_ID_LENGTH] if supplied else uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

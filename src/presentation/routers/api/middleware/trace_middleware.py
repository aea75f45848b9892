"""Request correlation through the X-Trace-Id header.

The caller's trace id is reused when present, otherwise a uuid4 is minted.
It is echoed on the response, stored on `request.state` for the problem
handlers, and bound into structlog contextvars so every log line written
while serving the request carries it.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"

_current_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Trace id of the request being served; None outside a request."""
    return _current_trace_id.get()


class TraceMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id

        reset_token = _current_trace_id.set(trace_id)
        with structlog.contextvars.bound_contextvars(trace_id=trace_id):
            try:
                response = await call_next(request)
            finally:
                _current_trace_id.reset(reset_token)

        response.headers[TRACE_HEADER] = trace_id
        return response

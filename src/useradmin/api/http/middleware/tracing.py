"""Per-request trace id and request diagnostics."""

import time
import uuid

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from src.useradmin.api.http.response import error_response
from src.useradmin.core.errors import Internal

TRACE_HEADER = "X-Trace-ID"


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind a trace id to everything logged while serving a request.

    The id comes from the ``X-Trace-ID`` header or is generated. A logger
    bound to it is stored on ``request.state.logger`` for the handlers and
    services of this request, and the id is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid.uuid4())

        base_ctx = {
            "trace_id": trace_id,
            "method": request.method,
            "path": request.url.path,
        }
        request.state.trace_id = trace_id
        request.state.logger = logger.bind(**base_ctx)

        start = time.perf_counter()

        # Everything that logs within this block inherits base_ctx
        with logger.contextualize(**base_ctx):
            try:
                logger.debug("request.start")
                response = await call_next(request)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=Internal.http_status,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return error_response(Internal, headers={TRACE_HEADER: trace_id})

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault(TRACE_HEADER, trace_id)
            return response

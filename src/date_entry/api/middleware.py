"""Request logging for the date-entry API, with last-resort error handling."""
from __future__ import annotations
import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Binds a request id and the requested locale to every log line of the request.

    The locale comes from the ``locale`` query parameter when present, else the
    configured default, so date_committed and date_parse_failed events can be
    traced back to the request and locale that produced them.
    """

    def __init__(self, app, default_locale: str = "und"):
        super().__init__(app)
        self.default_locale = default_locale

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            locale=request.query_params.get("locale", self.default_locale),
        )
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "api_request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_ms=int((time.monotonic() - start) * 1000),
            )
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error", "request_id": request_id},
                headers={REQUEST_ID_HEADER: request_id},
            )
        else:
            logger.info(
                "api_request",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=int((time.monotonic() - start) * 1000),
            )
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "locale")
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

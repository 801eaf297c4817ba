# Request Logging Middleware with Correlation IDs
# Adds request_id to each request for log correlation

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from welcome.core.config import settings

logger = logging.getLogger("welcome.api")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that:
    1. Assigns a unique request ID (or reuses X-Request-ID)
    2. Logs request/response info with timing and the visitor's language cookie
    3. Echoes the request ID in the response headers
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        fields = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "lang_cookie": request.cookies.get(settings.LANG_COOKIE_NAME),
        }

        start_time = time.perf_counter()
        logger.info("Request started", extra=fields)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "Request failed",
                extra={
                    **fields,
                    "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error": str(e),
                },
            )
            raise

        logger.info(
            "Request completed",
            extra={
                **fields,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        response.headers["X-Request-ID"] = request_id
        return response

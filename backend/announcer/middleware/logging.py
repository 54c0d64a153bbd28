"""
Announcer Backend — Request Logging Middleware
===============================================

What:  One access log line per request: method, path, status, duration,
       request id and client address.
Who:   Registered in create_app(); runs inside RequestIDMiddleware so the
       request id is already set.

Log levels:
    5xx                     → ERROR
    4xx                     → WARNING
    2xx/3xx under /api      → INFO
    2xx/3xx static assets   → DEBUG (index.html, app.js, ... on every page load)

Request bodies and headers are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from announcer.middleware.request_id import request_id_var

logger = logging.getLogger("announcer.access")

API_PREFIX = "/api/"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each HTTP request with its outcome and duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        rid = request_id_var.get("")

        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        elif path.startswith(API_PREFIX):
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

"""
Medsite Backend — Access Logging Middleware
============================================

What:  One access log line per HTTP request on the `medsite.access` logger.
How:   Times the downstream call and logs method, path, status, duration
       and request ID. On protected routes the line also names the admin
       the auth gate resolved, so every content change is attributable:

           PUT /admin/colleges/4 200 12.3ms [a1b2c3d4] admin=2(alice)
           POST /customers 201 8.0ms [e5f6a7b8] anonymous

       Level follows the status class: 5xx → ERROR, 4xx → WARNING,
       otherwise INFO. Health probes are not logged.

Never logged: request bodies (passwords, lead contact details) and the
Authorization header.
"""

import logging
import time
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from medsite.middleware.request_id import request_id_var

logger = logging.getLogger("medsite.access")

UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def describe_caller(request: Request) -> Dict[str, Any]:
    """Who made the request, as far as the auth gate established it."""
    admin = getattr(request.state, "admin", None)
    if admin is None:
        return {"admin_id": None, "actor": "anonymous"}
    return {"admin_id": admin.id, "actor": f"admin={admin.id}({admin.username})"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with admin attribution."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        rid = request_id_var.get("")
        caller = describe_caller(request)
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            rid,
            caller["actor"],
            extra={
                "request_id": rid,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
                "admin_id": caller["admin_id"],
                "client_ip": request.client.host if request.client else None,
            },
        )
        return response

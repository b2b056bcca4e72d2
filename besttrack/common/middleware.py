"""HTTP middleware for the best-track service.

Provides request ID tracing, request logging, and Prometheus HTTP
metrics collection. All three classes are registered in besttrack/main.py.

Usage:
    from besttrack.common.middleware import request_id_var
    rid = request_id_var.get("")  # Access current request ID from anywhere
"""

from __future__ import annotations

import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from besttrack.common.logging import get_logger
from besttrack.common.metrics import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_REQUESTS_TOTAL,
)

# ContextVar, accessible from any async context during a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

logger = get_logger("SYSTEM")

# Probe and scrape traffic is neither logged nor measured
_SKIP_PATHS = frozenset({"/health", "/metrics", "/metrics/"})

_UNMATCHED_PATH = "unmatched"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Inject a unique request ID into every request/response cycle.

    Reads ``X-Request-ID`` from the incoming request when present,
    otherwise generates a UUID4, and echoes it in the response header.
    """

    async def dispatch(self, request: Request, call_next) -> Response:  # noqa: ANN001
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        request_id_var.set(rid)

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status, and duration."""

    async def dispatch(self, request: Request, call_next) -> Response:  # noqa: ANN001
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "data": {
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id_var.get(""),
                }
            },
        )
        return response


def _path_template(request: Request) -> str:
    """Label a request by its route path, keeping label cardinality bounded."""
    path = request.url.path
    known = {getattr(route, "path", None) for route in request.app.routes}
    return path if path in known else _UNMATCHED_PATH


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Record Prometheus HTTP metrics for every request.

    Tracks request count, duration histogram, and in-progress gauge.
    """

    async def dispatch(self, request: Request, call_next) -> Response:  # noqa: ANN001
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        method = request.method
        path_template = _path_template(request)

        HTTP_REQUESTS_IN_PROGRESS.labels(method=method).inc()
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            HTTP_REQUESTS_TOTAL.labels(
                method=method,
                path_template=path_template,
                status_code="500",
            ).inc()
            raise
        finally:
            HTTP_REQUESTS_IN_PROGRESS.labels(method=method).dec()
            HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method,
                path_template=path_template,
            ).observe(time.perf_counter() - start)

        HTTP_REQUESTS_TOTAL.labels(
            method=method,
            path_template=path_template,
            status_code=str(response.status_code),
        ).inc()
        return response

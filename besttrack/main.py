"""FastAPI application factory for the best-track service.

Run with: uvicorn besttrack.main:app --reload
"""

from __future__ import annotations

import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app as make_metrics_app

from besttrack.api.storms import router as storms_router
from besttrack.common.config import get_settings
from besttrack.common.exceptions import BestTrackError
from besttrack.common.logging import get_logger
from besttrack.common.metrics import set_app_info
from besttrack.common.middleware import (
    PrometheusMiddleware,
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    request_id_var,
)

logger = get_logger("SYSTEM")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Best Track Normalizer",
        version=settings.app_version,
        description="Normalizes HURDAT2 and ATCF best-track data into storm tracks",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added = outermost = runs first on request
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # ─── Exception Handlers ───

    @app.exception_handler(BestTrackError)
    async def best_track_exception_handler(request: Request, exc: BestTrackError) -> JSONResponse:
        """Handle all best-track exceptions with structured JSON responses."""
        logger.error(
            f"{type(exc).__name__}: {exc}",
            extra={"data": {"path": str(request.url), "context": exc.context}},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": type(exc).__name__,
                "message": str(exc),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions: log traceback, return 500."""
        rid = request_id_var.get("")
        logger.error(
            f"Unhandled {type(exc).__name__}: {exc}",
            extra={
                "data": {
                    "path": str(request.url),
                    "request_id": rid,
                    "traceback": traceback.format_exc(),
                }
            },
        )
        body: dict = {
            "error": "InternalServerError",
            "message": "An unexpected error occurred",
        }
        if rid:
            body["request_id"] = rid
        return JSONResponse(status_code=500, content=body)

    # ─── Health ───

    @app.get("/health")
    async def health_check() -> dict:
        """Liveness probe: confirms the process is running."""
        return {"status": "ok", "version": settings.app_version}

    # ─── Prometheus Metrics ───

    metrics_app = make_metrics_app()
    app.mount("/metrics", metrics_app)
    set_app_info(version=settings.app_version, environment=settings.environment)

    # ─── Router Mounting ───

    app.include_router(storms_router, prefix="/api/storms", tags=["storms"])

    logger.info("App started", extra={"data": {"version": settings.app_version}})

    return app


app = create_app()

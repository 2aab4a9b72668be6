"""
HTTP application factory for textfathom.

`create_app()` assembles the service:
1.  **CORS**: any origin may call the analysis endpoints.
2.  **Errors as JSON**: unexpected exceptions become a 500 payload naming the
    request path. Malformed requests keep FastAPI's 422 validation answer.
3.  **Routes**: the analysis router plus the `/health` probe.

A fresh application per call lets each test build its own instance.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from textfathom import __version__
from textfathom.api.routers import analyse
from textfathom.api.schemas import HealthResponse
from textfathom.core.settings import get_logger, load_settings

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Build the textfathom ASGI application.

    Returns
    -------
    FastAPI
        Application with middleware, error handlers and routes installed.
    """
    app = FastAPI(
        title="textfathom API",
        description="Fog, Flesch and Flesch-Kincaid statistics for English text",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Analysis failed on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    app.include_router(analyse.router)

    @app.get("/health", tags=["System"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Liveness probe with the running environment and package version."""
        return HealthResponse(environment=load_settings().environment, version=__version__)

    return app


__all__ = ["create_app"]

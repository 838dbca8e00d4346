"""FastAPI application factory for dbfschema."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from dbfschema import __version__
from dbfschema.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from dbfschema.api.routers import dialects, schema
from dbfschema.api.schemas import HealthResponse
from dbfschema.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="dbfschema",
        description="Renders xBase table metadata as ORM, migration, SQL and JSON schemas.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(schema.router, prefix="/schema", tags=["schema"])
    app.include_router(dialects.router, prefix="/dialects", tags=["dialects"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("dbfschema.api")
    logger.info(
        "dbfschema API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "dbfschema.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )

"""FastAPI application entry point for the front matter API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from wikiplum.api.frontmatter import router as frontmatter_router
from wikiplum.api.health import router as health_router
from wikiplum.config import Settings, configure_logging
from wikiplum.exceptions import InternalServerError, PageNotFoundError
from wikiplum.services.source_service import create_page_source

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

FILE_NOT_FOUND_MESSAGE = "file not found"
INTERNAL_ERROR_MESSAGE = "internal error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan: startup and shutdown."""
    settings: Settings = app.state.settings
    configure_logging(settings.debug)

    page_source = create_page_source(settings)
    app.state.page_source = page_source
    logger.info("Starting Wikiplum API (source=%s, debug=%s)", page_source.name, settings.debug)

    yield

    try:
        await page_source.aclose()
    except Exception as exc:
        logger.error("Error during page source shutdown: %s", exc, exc_info=True)

    logger.info("Wikiplum API stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Wikiplum",
        description="Front matter API for the Wikiplum static wiki",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings

    app.include_router(health_router)
    app.include_router(frontmatter_router)

    @app.exception_handler(PageNotFoundError)
    async def page_not_found_handler(
        request: Request, exc: PageNotFoundError
    ) -> PlainTextResponse:
        logger.info("Page not found in %s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse(FILE_NOT_FOUND_MESSAGE, status_code=404)

    @app.exception_handler(InternalServerError)
    async def internal_server_error_handler(
        request: Request, exc: InternalServerError
    ) -> PlainTextResponse:
        logger.error(
            "InternalServerError in %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

    @app.exception_handler(OSError)
    async def os_error_handler(request: Request, exc: OSError) -> PlainTextResponse:
        logger.error("OSError in %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

    return app


app = create_app()


def cli_entry() -> None:
    """CLI entry point for running the server."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(
        "wikiplum.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

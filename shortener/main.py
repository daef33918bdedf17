"""
FastAPI Application Factory

This module builds the FastAPI application and configures:
- API routes (health probes first, then the URL endpoints with the catch-all)
- Middleware (logging, request timeout)
- Plain-text error rendering

Design Decisions:
- Settings are passed in explicitly and stored on app.state
- OpenAPI docs are only exposed in the development environment
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener.api import endpoints, health
from shortener.core.exceptions import (
    MethodNotAllowedError,
    ShortenerError,
    ShortURLNotFoundError,
)
from shortener.core.setting import Settings
from shortener.middleware.logging import add_logging_middleware
from shortener.middleware.timeout import add_timeout_middleware


async def shortener_error_handler(request: Request, exc: ShortenerError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render framework-level 404/405 the same way as the endpoint errors."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ShortURLNotFoundError.message
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = MethodNotAllowedError.message
    else:
        message = str(exc.detail)
    return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings; read from the environment when omitted

    Returns:
        Configured FastAPI instance
    """
    if settings is None:
        settings = Settings()

    docs = settings.docs_enabled
    app = FastAPI(
        title=settings.SERVICE_NAME,
        description="A URL shortening service built with FastAPI",
        version=settings.VERSION,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = settings

    app.add_exception_handler(ShortenerError, shortener_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # Last added runs first: logging -> timeout -> routes
    add_timeout_middleware(app, settings.request_timeout)
    add_logging_middleware(app)

    # Health endpoints included before the URL router so the catch-all
    # route does not shadow them
    app.include_router(health.router)
    app.include_router(endpoints.router)

    return app

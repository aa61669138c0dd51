"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.responses import (
    NewlineJSONResponse,
    bookmarks_api_error_handler,
    http_exception_handler,
    unhandled_exception_handler,
)
from api.routers import bookmarks, bootstrap, health
from core.config import Settings, get_settings
from core.errors import BookmarksAPIError


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its routes and error handlers.

    Unsupported methods on a registered path are answered with 405 by the
    router; every error response uses the standard error body.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="Bookmarks API",
        description="Named, tagged URLs with API key protected writes.",
        version="0.1.0",
        default_response_class=NewlineJSONResponse,
    )

    app.add_exception_handler(BookmarksAPIError, bookmarks_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(bookmarks.router)
    app.include_router(bootstrap.router)
    app.include_router(health.router)
    return app


app = create_app()

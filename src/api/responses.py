"""JSON response class and error rendering shared by all routes."""
import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.errors import BookmarksAPIError
from schemas.error import ErrorPresenter, present_error

logger = logging.getLogger(__name__)


class NewlineJSONResponse(JSONResponse):
    """
    Compact JSON followed by a single newline.

    Serialization errors propagate (and become a 500) rather than producing an
    empty body.
    """

    def render(self, content: Any) -> bytes:
        """Render content as JSON with a trailing newline."""
        return super().render(content) + b"\n"


def error_response(
    error: ErrorPresenter,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> NewlineJSONResponse:
    """Build a response carrying the standard error body."""
    return NewlineJSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        headers=headers,
    )


async def bookmarks_api_error_handler(
    request: Request,
    exc: BookmarksAPIError,
) -> NewlineJSONResponse:
    """Render errors raised by handlers and services with their own status code."""
    logger.info(
        "%s %s failed with %d: %s",
        request.method, request.url.path, exc.status_code, exc.message,
    )
    return error_response(present_error(exc), exc.status_code)


async def http_exception_handler(
    request: Request,  # noqa: ARG001
    exc: StarletteHTTPException,
) -> NewlineJSONResponse:
    """Render routing errors (404, 405) with the standard error body."""
    return error_response(
        ErrorPresenter(summary=str(exc.detail)),
        exc.status_code,
        headers=exc.headers,
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> NewlineJSONResponse:
    """Render any other failure (e.g. a refused database connection) as a 500 error body."""
    logger.exception(
        "%s %s failed with an unhandled error", request.method, request.url.path,
        exc_info=exc,
    )
    return error_response(present_error(exc), 500)

"""Health check endpoint."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from core.errors import DatabaseUnavailableError
from services import api_key_service, bookmark_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Service status with the row count of each table."""

    status: str
    bookmarks: int
    api_keys: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Report whether both tables can be read.

    A `status` of "no_api_keys" means writes cannot succeed until /bootstrap
    has run. Responds 503 with the error body if either table cannot be read.
    """
    try:
        bookmark_count = await bookmark_service.count_bookmarks(db)
        api_key_count = await api_key_service.count_api_keys(db)
    except SQLAlchemyError as e:
        logger.exception("Health check could not read the database")
        raise DatabaseUnavailableError(str(e)) from e

    return HealthResponse(
        status="ok" if api_key_count else "no_api_keys",
        bookmarks=bookmark_count,
        api_keys=api_key_count,
    )

"""Bookmark list and create endpoints."""
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, require_api_key
from schemas.bookmark import BookmarkPresenter, parse_bookmark_body
from services import bookmark_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("", response_model=list[BookmarkPresenter])
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkPresenter]:
    """
    List all bookmarks.

    Returns 500 with an error body if the database fails at any point during
    the listing; partial results are never returned.
    """
    logger.debug("GET /bookmarks")
    return await bookmark_service.list_bookmarks(db)


@router.post(
    "",
    response_model=BookmarkPresenter,
    dependencies=[Depends(require_api_key)],
)
async def create_bookmark(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkPresenter:
    """
    Create a bookmark. Requires a valid `apikey` header.

    The body is read only after the key is accepted, and is decoded here rather
    than by FastAPI so that malformed JSON returns 400 and the key check always
    runs first. Responds with the submitted bookmark.
    """
    logger.debug("POST /bookmarks")
    body = await request.body()
    data = parse_bookmark_body(body)
    return await bookmark_service.create_bookmark(db, data)

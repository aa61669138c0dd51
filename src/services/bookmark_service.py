"""Service layer for bookmark storage."""
import logging
from collections.abc import AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import BookmarkValidationError, StoreError
from models.bookmark import Bookmark
from schemas.bookmark import INVALID_BOOKMARK_MESSAGE, BookmarkPresenter
from services.bookmark_iterator import collect_bookmarks

logger = logging.getLogger(__name__)


async def open_bookmark_cursor(db: AsyncSession) -> AsyncIterator[Bookmark]:
    """
    Stream every stored bookmark, in the database's default order.

    Errors raised while opening the query surface on the first fetch, the same
    way as errors raised partway through.
    """
    result = await db.stream_scalars(select(Bookmark))
    async for bookmark in result:
        yield bookmark


async def list_bookmarks(db: AsyncSession) -> list[BookmarkPresenter]:
    """Return all bookmarks, or raise StoreError if the listing fails at any point."""
    return await collect_bookmarks(open_bookmark_cursor(db))


async def create_bookmark(db: AsyncSession, data: BookmarkPresenter) -> BookmarkPresenter:
    """
    Validate and store a new bookmark.

    Returns the presenter that was stored (the caller's input), not a re-read
    of the saved row.
    """
    if not data.is_valid():
        raise BookmarkValidationError(INVALID_BOOKMARK_MESSAGE)

    bookmark = data.to_model()
    db.add(bookmark)
    try:
        await db.commit()
    except SQLAlchemyError as e:
        logger.exception("Failed to store bookmark")
        await db.rollback()
        raise StoreError(str(e)) from e

    logger.info("Stored bookmark %r", data.name)
    return data


async def count_bookmarks(db: AsyncSession) -> int:
    """Count stored bookmarks."""
    result = await db.execute(select(func.count()).select_from(Bookmark))
    return result.scalar_one()

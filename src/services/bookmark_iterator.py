"""
Iteration over streamed bookmark query results.

A database cursor can end in two ways: it runs out of rows, or the database
fails partway through. `BookmarkIterator` makes the difference explicit with a
three-way result (`Fetched`, `Exhausted`, `Failed`) and latches the first
failure so callers can never mistake a truncated listing for a complete one.
"""
import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from core.errors import StoreError
from models.bookmark import Bookmark
from schemas.bookmark import BookmarkPresenter, present_bookmark

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fetched:
    """A record was read from the cursor."""

    record: Bookmark


@dataclass(frozen=True)
class Exhausted:
    """The cursor has no more records."""


@dataclass(frozen=True)
class Failed:
    """The cursor raised a database error."""

    error: SQLAlchemyError


IterationResult = Fetched | Exhausted | Failed


class BookmarkIterator:
    """
    Pull-style wrapper around an async cursor of Bookmark rows.

    Once the cursor is exhausted or has failed, the iterator stays in that
    state and never reads from the cursor again. Errors are not retried.
    """

    def __init__(self, cursor: AsyncIterator[Bookmark]) -> None:
        self._cursor = cursor
        self.exhausted = False
        self.last_error: SQLAlchemyError | None = None
        self.current: Bookmark | None = None

    async def next_result(self) -> IterationResult:
        """Fetch the next record, reporting end of results and errors as values."""
        if self.last_error is not None:
            return Failed(self.last_error)
        if self.exhausted:
            return Exhausted()
        try:
            record = await anext(self._cursor)
        except StopAsyncIteration:
            self.exhausted = True
            return Exhausted()
        except SQLAlchemyError as e:
            logger.exception("Bookmark cursor failed")
            self.last_error = e
            self.exhausted = True
            return Failed(e)
        return Fetched(record)

    async def advance(self) -> bool:
        """
        Move to the next record, storing it in `current`.

        Returns False once iteration is finished, whether normally or because
        of an error. Check `last_error` after the loop ends.
        """
        result = await self.next_result()
        if isinstance(result, Fetched):
            self.current = result.record
            return True
        self.current = None
        return False


async def collect_bookmarks(cursor: AsyncIterator[Bookmark]) -> list[BookmarkPresenter]:
    """
    Read every record from the cursor and convert it to a presenter.

    Raises StoreError if the cursor fails at any point; partial results are
    discarded.
    """
    iterator = BookmarkIterator(cursor)
    presenters: list[BookmarkPresenter] = []
    while await iterator.advance():
        presenters.append(present_bookmark(iterator.current))

    if iterator.last_error is not None:
        logger.info("Discarding %d bookmarks read before the failure", len(presenters))
        raise StoreError(str(iterator.last_error)) from iterator.last_error
    return presenters

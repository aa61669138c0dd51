"""Pydantic schemas for bookmark endpoints."""
from pydantic import BaseModel, ConfigDict, ValidationError

from core.errors import BookmarkValidationError
from models.bookmark import Bookmark

INVALID_BOOKMARK_MESSAGE = "Bookmark failed validation check, must have all of: name, url, tags"


class BookmarkPresenter(BaseModel):
    """
    Wire representation of a bookmark.

    Fields missing from a request body decode to empty values so that
    `is_valid` (not the decoder) decides whether a bookmark is complete.
    Field order here is the order fields are serialized in.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str = ""
    url: str = ""
    tags: list[str] = []

    def is_valid(self) -> bool:
        """Return True if name, url and at least one tag are present."""
        return bool(self.name) and bool(self.url) and len(self.tags) > 0

    def to_model(self) -> Bookmark:
        """Copy fields into a new (unsaved) Bookmark model."""
        return Bookmark(name=self.name, url=self.url, tags=list(self.tags))


def present_bookmark(bookmark: Bookmark) -> BookmarkPresenter:
    """Convert a stored Bookmark into its wire representation."""
    return BookmarkPresenter.model_validate(bookmark)


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(messages)


def parse_bookmark_body(body: bytes) -> BookmarkPresenter:
    """
    Decode a raw request body into a BookmarkPresenter.

    Raises BookmarkValidationError if the body is not a JSON object with
    correctly typed fields. Completeness is checked separately with
    `BookmarkPresenter.is_valid`.
    """
    try:
        return BookmarkPresenter.model_validate_json(body)
    except ValidationError as e:
        raise BookmarkValidationError(_format_validation_error(e)) from e

"""Bookmark model, the stored shape of a bookmark."""
from sqlalchemy import JSON, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Bookmark(Base):
    """
    A named URL with tags.

    No validity rules are enforced at this level; bookmarks are checked by
    `schemas.bookmark.BookmarkPresenter.is_valid` before they are stored.
    """

    __tablename__ = "bookmarks"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(Text)
    url: Mapped[str] = mapped_column(Text)
    # JSON keeps tags in submitted order
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)

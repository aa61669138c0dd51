"""SQLAlchemy models."""
from models.api_key import ApiKey
from models.base import Base
from models.bookmark import Bookmark

__all__ = ["ApiKey", "Base", "Bookmark"]

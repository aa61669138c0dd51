"""API key model for the shared write-access key."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class ApiKey(Base):
    """API key record - any stored key_value authorizes bookmark writes."""

    __tablename__ = "api_keys"

    id: Mapped[int] = mapped_column(primary_key=True)
    key_value: Mapped[str] = mapped_column(
        String(255),
        index=True,
        comment="Value clients send in the 'apikey' header (not unique)",
    )
    company: Mapped[str] = mapped_column(String(255))

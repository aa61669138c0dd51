"""Service layer for API key lookup and seeding."""
import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import StoreError
from models.api_key import ApiKey

logger = logging.getLogger(__name__)

API_KEY_NOT_FOUND_MESSAGE = "API Key not found"


@dataclass(frozen=True)
class Authorized:
    """The key matches a stored API key."""


@dataclass(frozen=True)
class Unauthorized:
    """No stored API key matches."""

    reason: str = API_KEY_NOT_FOUND_MESSAGE


@dataclass(frozen=True)
class LookupFailed:
    """The lookup itself failed; whether the key is valid is unknown."""

    error: SQLAlchemyError


ApiKeyCheck = Authorized | Unauthorized | LookupFailed


async def validate_api_key(db: AsyncSession, key: str) -> ApiKeyCheck:
    """
    Check whether `key` matches at least one stored API key.

    Never raises for database errors; they are returned as LookupFailed so
    callers cannot confuse an unavailable database with an authorized key.
    """
    try:
        result = await db.execute(
            select(ApiKey.id).where(ApiKey.key_value == key).limit(1),
        )
        match = result.first()
    except SQLAlchemyError as e:
        logger.exception("API key lookup failed")
        return LookupFailed(e)

    if match is None:
        return Unauthorized()
    return Authorized()


async def bootstrap_api_key(db: AsyncSession, key_value: str, company: str) -> bool:
    """
    Seed an API key record unless one with the same value already exists.

    Returns True if a record was created. Raises StoreError on database failure.

    The existence check and the insert are not atomic: two concurrent calls can
    both insert. key_value has no unique constraint, so nothing rejects the
    second row; run bootstrap once per deployment.
    """
    try:
        existing = await db.execute(
            select(ApiKey.id).where(ApiKey.key_value == key_value).limit(1),
        )
        if existing.first() is not None:
            return False
        db.add(ApiKey(key_value=key_value, company=company))
        await db.commit()
    except SQLAlchemyError as e:
        logger.exception("Failed to bootstrap API key")
        await db.rollback()
        raise StoreError(str(e)) from e
    return True


async def count_api_keys(db: AsyncSession) -> int:
    """Count stored API keys, duplicates included."""
    result = await db.execute(select(func.count()).select_from(ApiKey))
    return result.scalar_one()

"""FastAPI dependencies for injection."""
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import get_settings
from core.errors import ApiKeyNotFoundError, StoreError
from db.session import get_async_session
from services.api_key_service import (
    Authorized,
    LookupFailed,
    Unauthorized,
    validate_api_key,
)


async def require_api_key(
    apikey: str = Header(default=""),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """
    Dependency that rejects requests without a stored API key.

    Runs before the request body is read. A missing header is looked up as an
    empty key. Raises ApiKeyNotFoundError (403) for an unknown key and
    StoreError (500) if the lookup itself fails.
    """
    check = await validate_api_key(db, apikey)
    if isinstance(check, Authorized):
        return
    if isinstance(check, Unauthorized):
        raise ApiKeyNotFoundError(check.reason)
    if isinstance(check, LookupFailed):
        raise StoreError(str(check.error)) from check.error
    raise TypeError(f"Unexpected API key check result: {check!r}")


__all__ = [
    "get_async_session",
    "get_settings",
    "require_api_key",
]

"""One-time setup endpoint that seeds the initial API key."""
import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from services.api_key_service import bootstrap_api_key

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bootstrap"])


@router.api_route(
    "/bootstrap",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_class=Response,
)
async def bootstrap(
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Seed the placeholder API key from settings.

    Safe to call repeatedly: the key is created only if no key with the same
    value exists. Responds 200 with an empty body.
    """
    created = await bootstrap_api_key(
        db, settings.bootstrap_api_key, settings.bootstrap_company,
    )
    if created:
        logger.info("Bootstrap API key created for %s", settings.bootstrap_company)
    else:
        logger.info("Bootstrap API key already exists, nothing created")
    return Response(status_code=200)

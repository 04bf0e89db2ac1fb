import logging
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from .config import get_settings
from .store import PetStore

logger = logging.getLogger(__name__)


def connect() -> AsyncIOMotorClient:
    settings = get_settings()
    # tz_aware: las fechas salen de Mongo en UTC con zona, no "naive"
    client = AsyncIOMotorClient(
        settings.mongodb_uri,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )
    logger.info("MongoDB client created for %s.%s", settings.db_name, settings.collection_name)
    return client


def pets_collection(client: AsyncIOMotorClient):
    settings = get_settings()
    return client[settings.db_name][settings.collection_name]


async def get_store(request: Request) -> PetStore:
    """Dependencia: el cliente se abre una vez en el lifespan y vive en app.state."""
    return PetStore(request.app.state.pets)

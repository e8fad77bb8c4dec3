"""
MongoDB client helpers for the migration tooling.
"""

from motor.motor_asyncio import AsyncIOMotorClient
from artdb.config import settings


def get_client(mongo_uri: str = None) -> AsyncIOMotorClient:
    """Create a Motor client for the configured (or given) URI"""
    return AsyncIOMotorClient(mongo_uri or settings.MONGO_URI)


async def ensure_collection(db, name: str) -> bool:
    """
    Create a collection unless it already exists.

    Returns True when the collection was created.
    """
    if name in await db.list_collection_names():
        return False
    await db.create_collection(name)
    return True

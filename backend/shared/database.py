"""
MongoDB client factory.

A single AsyncMongoClient is shared by the whole process. It is created
lazily on first use and closed by the application lifespan on shutdown.
"""

import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_client: Optional[AsyncMongoClient] = None


def get_mongo_client() -> AsyncMongoClient:
    """
    Get the process-wide MongoDB client.

    Returns:
        AsyncMongoClient configured from DB_CONNECT

    Raises:
        RuntimeError: If DB_CONNECT is not set
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.db_connect:
            raise RuntimeError(
                "MongoDB configuration missing. "
                "Set the DB_CONNECT environment variable."
            )
        _client = AsyncMongoClient(settings.db_connect, tz_aware=True)
        logger.info("Created MongoDB client for database %r", settings.db_name)

    return _client


def get_database() -> AsyncDatabase:
    """Get the application database from the shared client."""
    return get_mongo_client()[get_settings().db_name]


async def close_mongo_client() -> None:
    """Close the shared client, if one was created."""
    global _client

    if _client is not None:
        await _client.close()
        _client = None
        logger.info("Closed MongoDB client")


def reset_client_cache() -> None:
    """
    Forget the cached client without closing it.

    Useful for testing or when configuration changes.
    """
    global _client
    _client = None

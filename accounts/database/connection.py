"""
MongoDB connection management for the user directory.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from pymongo import ASCENDING, AsyncMongoClient

from accounts.config import settings
from accounts.exceptions import ConfigurationError
from .user_service import UserDirectory

logger = logging.getLogger(__name__)

# Single client per process, opened at startup and closed at shutdown
_client: Optional[AsyncMongoClient] = None
_database: Optional[Any] = None


def get_mongo_url() -> str:
    """Get the MongoDB URL from settings."""
    return settings.MONGO_URL


def _redact(url: str) -> str:
    # Keep only the host part so credentials never reach the logs
    return url.split("@")[-1] if "@" in url else url


async def ensure_indexes(collection: Any) -> None:
    """Create the indexes the user directory relies on."""
    await collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
    await collection.create_index([("username", ASCENDING)], name="username")
    logger.info(f"✓ Indexes ensured on collection '{collection.name}'")


async def init_database(url: Optional[str] = None, database_name: Optional[str] = None) -> Any:
    """Open the store connection, verify it and ensure indexes."""
    global _client, _database

    if _database is not None:
        return _database

    mongo_url = url or get_mongo_url()
    logger.info(f"Initializing MongoDB connection: {_redact(mongo_url)}")

    client = AsyncMongoClient(
        mongo_url,
        serverSelectionTimeoutMS=settings.SERVER_SELECTION_TIMEOUT_MS,
    )
    try:
        await client.admin.command("ping")
        database = client[database_name or settings.DATABASE_NAME]
        await ensure_indexes(database[settings.USER_COLLECTION])
    except Exception:
        await client.close()
        raise

    _client = client
    _database = database
    logger.info("✓ Database initialized successfully")
    return _database


async def close_database() -> None:
    """Close the store connection."""
    global _client, _database

    if _client is not None:
        await _client.close()
        logger.info("Database connection closed")

    _client = None
    _database = None


def get_user_collection() -> Any:
    """Return the user collection of the initialized database."""
    if _database is None:
        raise ConfigurationError("Database not initialized. Call init_database() first.")
    return _database[settings.USER_COLLECTION]


@asynccontextmanager
async def open_user_directory(
    url: Optional[str] = None, database_name: Optional[str] = None
) -> AsyncGenerator[UserDirectory, None]:
    """Open the store, yield a UserDirectory bound to it, close on exit."""
    await init_database(url, database_name)
    try:
        yield UserDirectory(get_user_collection())
    finally:
        await close_database()

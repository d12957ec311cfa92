"""
Database client factory for MongoDB.

Provides a process-wide MongoClient (pymongo clients are thread-safe and
pool connections internally), the configured database handle, index
bootstrap, and a health probe.
"""

import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """
    Get the shared MongoDB client.

    The client is created lazily on first use and reused afterwards.

    Returns:
        MongoClient configured from settings

    Raises:
        RuntimeError: If the connection URI is not configured
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.mongodb_uri:
            raise RuntimeError(
                "MongoDB configuration missing. "
                "Set the MONGODB_URI environment variable."
            )
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )

    return _client


def get_database() -> Database:
    """
    Get the configured catalog database.

    Returns:
        pymongo Database named by MONGODB_DATABASE
    """
    settings = get_settings()
    return get_mongo_client()[settings.mongodb_database]


def ensure_indexes(db: Database) -> None:
    """
    Create the indexes the stores rely on.

    The unique index on users.email is what rejects the loser of two
    concurrent registrations for the same email. Safe to call repeatedly.

    Args:
        db: Database to bootstrap
    """
    settings = get_settings()

    db[settings.users_collection].create_index(
        [("email", ASCENDING)], unique=True, name="email_unique"
    )
    db[settings.sessions_collection].create_index([("user_id", ASCENDING)], name="user_id")
    db[settings.sessions_collection].create_index([("jwt", ASCENDING)], name="jwt")
    db[settings.comments_collection].create_index([("email", ASCENDING)], name="email")
    logger.debug(f"Ensured indexes on database {db.name}")


def ping(client: Optional[MongoClient] = None) -> bool:
    """
    Check that the store answers a ping.

    Args:
        client: Client to probe (defaults to the shared client)

    Returns:
        True if the server responded, False otherwise
    """
    client = client or get_mongo_client()
    try:
        client.admin.command("ping")
        return True
    except PyMongoError:
        logger.warning("MongoDB ping failed")
        return False


def reset_client_cache() -> None:
    """
    Close and forget the cached client.

    Useful for testing or when configuration changes.
    """
    global _client
    if _client is not None:
        _client.close()
    _client = None

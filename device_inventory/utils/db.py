"""
Synchronous database access
---------------------------

Entry-point for command-line tools (seeding) that run outside the event loop
and want blocking PyMongo rather than Motor. The API itself never uses this.
"""
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..core.config import get_settings
from ..core.logging_config import mask_uri

# Singleton client shared by every call in the process
_mongo_client: Optional[MongoClient] = None
_mongo_db: Optional[Database] = None


def _get_client() -> MongoClient:
    """Get or create singleton MongoClient with connection timeouts (fail fast)."""
    global _mongo_client
    if _mongo_client is not None:
        return _mongo_client

    settings = get_settings()
    mongo_uri = settings.mongo_uri
    if not mongo_uri:
        raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")

    client = MongoClient(
        mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        socketTimeoutMS=settings.mongo_socket_timeout_ms,
        tz_aware=True,
    )
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise RuntimeError(f"Failed to connect to MongoDB at {mask_uri(mongo_uri)}: {e}") from e
    _mongo_client = client
    return _mongo_client


def get_collection(collection_name: str) -> Collection:
    """
    Get MongoDB collection (singleton client, sync PyMongo).

    Args:
        collection_name: Name of the collection

    Returns:
        MongoDB Collection object (synchronous PyMongo)
    """
    global _mongo_db
    client = _get_client()
    if _mongo_db is None:
        _mongo_db = client[get_settings().mongo_database_name]
    return _mongo_db[collection_name]


def close_client() -> None:
    global _mongo_client, _mongo_db
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_db = None

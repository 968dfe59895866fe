"""
Document store access for Ad Format Dimensions.

This module owns the process-wide MongoDB client. Scripts connect once,
read the publications collection and write back partial updates; the
client is closed when the script exits.

Usage:
    from storage.database import connect_to_database, get_database, close_database

    db = connect_to_database(uri, "chicago-hub")
    publications = get_database()["publications"]
    ...
    close_database()
"""

import logging
import re
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

PUBLICATIONS_COLLECTION = "publications"

# Connection settings for short-lived batch scripts
CLIENT_OPTIONS = {
    "serverSelectionTimeoutMS": 5000,
    "connectTimeoutMS": 10000,
    "socketTimeoutMS": 45000,
    "maxPoolSize": 10,
    "retryWrites": True,
    "retryReads": True,
}

_client: Optional[MongoClient] = None
_database: Optional[Database] = None
_uri: Optional[str] = None


class StorageError(Exception):
    """Raised when a document store operation fails."""

    pass


def redact_uri(uri: str) -> str:
    """Mask user:password credentials in a connection URI for logging."""
    return re.sub(r"//[^:/@]+:[^@]+@", "//***:***@", uri)


def connect_to_database(uri: str, database_name: str) -> Database:
    """Connect to MongoDB and return the named database.

    The server is pinged so that a bad URI or unreachable cluster fails
    here rather than on the first read. An open connection is reused
    only for the same URI and database.

    Args:
        uri: MongoDB connection string.
        database_name: Database to use.

    Returns:
        The pymongo Database handle.

    Raises:
        StorageError: If the server cannot be reached.
    """
    global _client, _database, _uri

    if _database is not None and _uri == uri and _database.name == database_name:
        return _database

    close_database()
    logger.info(f"Connecting to MongoDB at {redact_uri(uri)}")

    client = MongoClient(uri, **CLIENT_OPTIONS)
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StorageError(f"Failed to connect to MongoDB: {e}") from e

    _client = client
    _database = client[database_name]
    _uri = uri
    logger.info(f"Connected to database '{database_name}'")
    return _database


def get_database() -> Database:
    """Return the connected database.

    Raises:
        StorageError: If connect_to_database() has not been called.
    """
    if _database is None:
        raise StorageError("Not connected. Call connect_to_database() first.")
    return _database


def close_database() -> None:
    """Close the client and forget the cached database."""
    global _client, _database, _uri

    if _client is None:
        return

    logger.debug("Closing MongoDB connection")
    _client.close()
    _client = None
    _database = None
    _uri = None

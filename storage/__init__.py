"""Ad Format Dimensions - Storage Module.

This module provides MongoDB access for publication documents.

The storage layer is organized as follows:
- database.py: Process-wide client, connect/close helpers
- publication_repository.py: Async reads and partial updates of publications

Example:
    >>> from storage import PublicationRepository, connect_to_database
    >>>
    >>> db = connect_to_database(uri, "chicago-hub")
    >>> repository = PublicationRepository(db["publications"])
    >>> publications = await repository.find_all()
"""

from .database import (
    PUBLICATIONS_COLLECTION,
    StorageError,
    close_database,
    connect_to_database,
    get_database,
)
from .publication_repository import PublicationRepository

__all__ = [
    "PUBLICATIONS_COLLECTION",
    "StorageError",
    "close_database",
    "connect_to_database",
    "get_database",
    "PublicationRepository",
]

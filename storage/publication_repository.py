"""Publication repository for reading and patching publication documents.

pymongo is blocking, so every call runs in the default executor to keep
the async migration runner responsive. Writes are partial ``$set``
updates of one document at a time; there are no multi-document
transactions.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional

from pymongo.errors import PyMongoError

from .database import StorageError

logger = logging.getLogger(__name__)


class PublicationRepository:
    """Reads and updates documents in the publications collection.

    Attributes:
        collection: A pymongo Collection (or any object offering
            ``find`` and ``update_one`` with the same signatures).
    """

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    async def find_all(self, query: Optional[Mapping[str, Any]] = None) -> list[dict]:
        """Read every publication matching the query.

        Args:
            query: Mongo filter document; all documents when omitted.

        Returns:
            List of publication documents.

        Raises:
            StorageError: If the read fails.
        """
        loop = asyncio.get_event_loop()
        filter_doc = dict(query or {})

        def _execute():
            return list(self.collection.find(filter_doc))

        try:
            publications = await loop.run_in_executor(None, _execute)
        except PyMongoError as e:
            raise StorageError(f"Failed to read publications: {e}") from e

        logger.debug(f"Loaded {len(publications)} publications")
        return publications

    async def set_fields(self, publication_id: Any, fields: Mapping[str, Any]) -> int:
        """Set fields on a single publication by ``_id``.

        Args:
            publication_id: The document ``_id``.
            fields: Dotted field paths mapped to their new values.

        Returns:
            Number of documents modified (0 or 1).

        Raises:
            StorageError: If the write fails.
        """
        loop = asyncio.get_event_loop()
        update = {"$set": dict(fields)}

        def _execute():
            result = self.collection.update_one({"_id": publication_id}, update)
            return result.modified_count

        try:
            return await loop.run_in_executor(None, _execute)
        except PyMongoError as e:
            raise StorageError(f"Failed to update publication {publication_id}: {e}") from e

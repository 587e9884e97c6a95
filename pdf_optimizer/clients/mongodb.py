"""Client wrappers for MongoDB operations."""

from typing import Any, Callable, Dict, List, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..config.app import AppConfig
from ..middleware.exceptions import (
    DatabaseWriteError,
    StorageConnectionError,
    StorageGeneralError,
)
from ..middleware.logging import logger

SERVER_SELECTION_TIMEOUT_MS = 10_000


class MongoDBClient:
    """Client wrapper for operations on one MongoDB database."""

    def __init__(self, database: Database) -> None:
        """Initialize the client.

        Args:
            database: pymongo database handle
        """
        self.database = database

    def count(self, collection: str) -> int:
        """Count all documents of a collection.

        Raises:
            StorageGeneralError: If the count fails
        """
        try:
            return self.database[collection].count_documents({})
        except PyMongoError as e:
            raise StorageGeneralError(
                "Failed to count documents in MongoDB",
                details={"collection": collection, "error": str(e)},
            )

    def find_one(
        self,
        collection: str,
        query: Dict[str, Any],
        projection: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Find a single document.

        Args:
            collection: Collection name
            query: Filter document
            projection: Optional field projection

        Returns:
            The document, or None if nothing matched

        Raises:
            StorageGeneralError: If the query fails
        """
        try:
            return self.database[collection].find_one(query, projection)
        except PyMongoError as e:
            raise StorageGeneralError(
                "Failed to get document from MongoDB",
                details={"collection": collection, "error": str(e)},
            )

    def find_after(
        self, collection: str, after_id: Any, limit: int
    ) -> List[Dict[str, Any]]:
        """Return up to ``limit`` documents with ``_id`` greater than ``after_id``.

        Documents are sorted by ``_id`` ascending. A ``None`` ``after_id``
        starts from the beginning of the collection.

        Raises:
            StorageGeneralError: If the query fails
        """
        query = {"_id": {"$gt": after_id}} if after_id is not None else {}
        try:
            cursor = (
                self.database[collection]
                .find(query)
                .sort("_id", ASCENDING)
                .limit(limit)
            )
            return list(cursor)
        except PyMongoError as e:
            raise StorageGeneralError(
                "Failed to query documents from MongoDB",
                details={"collection": collection, "after_id": str(after_id), "error": str(e)},
            )

    def update_fields(
        self, collection: str, query: Dict[str, Any], updates: Dict[str, Any]
    ) -> int:
        """Set fields on the first matching document, never inserting.

        Args:
            collection: Collection name
            query: Filter document
            updates: Mapping of (dotted) field names to values

        Returns:
            Number of matched documents

        Raises:
            DatabaseWriteError: If the update fails
        """
        if not updates:
            return 0

        try:
            result = self.database[collection].update_one(
                query, {"$set": updates}, upsert=False
            )
            return result.matched_count
        except PyMongoError as e:
            raise DatabaseWriteError(
                "Failed to update document in MongoDB",
                details={"collection": collection, "error": str(e)},
            )


class StoreContext:
    """Owns the MongoDB connection and both database handles for one run.

    Use as a context manager: the connection is verified on entry and closed
    on exit.
    """

    def __init__(
        self,
        config: AppConfig,
        client_factory: Callable[..., MongoClient] = MongoClient,
    ) -> None:
        self.config = config
        self._client_factory = client_factory
        self._client: Optional[MongoClient] = None
        self.records: Optional[MongoDBClient] = None
        self.assets: Optional[MongoDBClient] = None

    def open(self) -> "StoreContext":
        """Connect and ping the server.

        Raises:
            StorageConnectionError: If the server cannot be reached
        """
        client = None
        try:
            client = self._client_factory(
                self.config.mongo_url,
                serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
            )
            client.admin.command("ping")
        except PyMongoError as e:
            if client is not None:
                client.close()
            raise StorageConnectionError(
                "Failed to establish MongoDB connection",
                details={"error": str(e)},
            ) from e

        self._client = client
        self.records = MongoDBClient(client[self.config.lesson_plan_db_name])
        self.assets = MongoDBClient(client[self.config.asset_db_name])
        logger.info(
            "Connected to MongoDB",
            extra={
                "lesson_plan_db": self.config.lesson_plan_db_name,
                "asset_db": self.config.asset_db_name,
            },
        )
        return self

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.debug("Closed MongoDB connection")
        self._client = None
        self.records = None
        self.assets = None

    def __enter__(self) -> "StoreContext":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

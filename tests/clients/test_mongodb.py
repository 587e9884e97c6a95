"""Unit tests for the MongoDB client and store context."""

import unittest
from unittest.mock import MagicMock

from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from pdf_optimizer.clients.mongodb import MongoDBClient, StoreContext
from pdf_optimizer.config.app import AppConfig
from pdf_optimizer.middleware.exceptions import (
    DatabaseWriteError,
    StorageConnectionError,
    StorageGeneralError,
)


class TestMongoDBClient(unittest.TestCase):
    """Test cases for the MongoDB client."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_collection = MagicMock()
        self.mock_database = MagicMock()
        self.mock_database.__getitem__.return_value = self.mock_collection
        self.client = MongoDBClient(self.mock_database)

    def test_find_after_from_start(self):
        """No cursor means an unfiltered query sorted by _id."""
        # Arrange
        cursor = self.mock_collection.find.return_value
        cursor.sort.return_value.limit.return_value = iter([{"_id": 1}])

        # Act
        result = self.client.find_after("lessonPlans", after_id=None, limit=25)

        # Assert
        self.mock_collection.find.assert_called_once_with({})
        cursor.sort.assert_called_once_with("_id", 1)
        cursor.sort.return_value.limit.assert_called_once_with(25)
        self.assertEqual([{"_id": 1}], result)

    def test_find_after_cursor(self):
        """A cursor restricts the query to greater identifiers."""
        cursor = self.mock_collection.find.return_value
        cursor.sort.return_value.limit.return_value = iter([])

        self.client.find_after("lessonPlans", after_id=10, limit=5)

        self.mock_collection.find.assert_called_once_with({"_id": {"$gt": 10}})

    def test_find_after_error(self):
        self.mock_collection.find.side_effect = OperationFailure("boom")

        with self.assertRaises(StorageGeneralError):
            self.client.find_after("lessonPlans", after_id=None, limit=5)

    def test_find_one_error(self):
        self.mock_collection.find_one.side_effect = OperationFailure("boom")

        with self.assertRaises(StorageGeneralError):
            self.client.find_one("assets", {"_id": 1})

    def test_count(self):
        self.mock_collection.count_documents.return_value = 12

        self.assertEqual(12, self.client.count("lessonPlans"))
        self.mock_collection.count_documents.assert_called_once_with({})

    def test_update_fields(self):
        """Updates use $set without upsert and report the matched count."""
        # Arrange
        self.mock_collection.update_one.return_value = MagicMock(matched_count=1)

        # Act
        matched = self.client.update_fields("assets", {"_id": 1}, {"data.x": "y"})

        # Assert
        self.assertEqual(1, matched)
        self.mock_collection.update_one.assert_called_once_with(
            {"_id": 1}, {"$set": {"data.x": "y"}}, upsert=False
        )

    def test_update_fields_empty(self):
        self.assertEqual(0, self.client.update_fields("assets", {"_id": 1}, {}))
        self.mock_collection.update_one.assert_not_called()

    def test_update_fields_error(self):
        self.mock_collection.update_one.side_effect = OperationFailure("boom")

        with self.assertRaises(DatabaseWriteError):
            self.client.update_fields("assets", {"_id": 1}, {"data.x": "y"})


class TestStoreContext(unittest.TestCase):
    """Test cases for the store context."""

    def setUp(self):
        """Set up test fixtures."""
        self.config = AppConfig(
            app_env="dev",
            mongo_url="mongodb://localhost:27017/",
            pdf_bucket_name="bucket",
        )
        self.mock_mongo = MagicMock()
        self.factory = MagicMock(return_value=self.mock_mongo)

    def test_open_and_close(self):
        """Both database handles live exactly as long as the context."""
        # Act
        with StoreContext(self.config, client_factory=self.factory) as stores:
            # Assert
            self.mock_mongo.admin.command.assert_called_once_with("ping")
            self.assertIsInstance(stores.records, MongoDBClient)
            self.assertIsInstance(stores.assets, MongoDBClient)
            self.mock_mongo.__getitem__.assert_any_call("lessonplan-db")
            self.mock_mongo.__getitem__.assert_any_call("assets-db")

        self.mock_mongo.close.assert_called_once()
        self.assertIsNone(stores.records)
        self.assertIsNone(stores.assets)

    def test_close_on_error(self):
        """The connection is closed when the body raises."""
        with self.assertRaises(RuntimeError):
            with StoreContext(self.config, client_factory=self.factory):
                raise RuntimeError("boom")

        self.mock_mongo.close.assert_called_once()

    def test_connection_failure(self):
        """An unreachable server raises StorageConnectionError."""
        self.mock_mongo.admin.command.side_effect = ServerSelectionTimeoutError("down")

        with self.assertRaises(StorageConnectionError):
            StoreContext(self.config, client_factory=self.factory).open()

    def test_connection_failure_closes_client(self):
        self.mock_mongo.admin.command.side_effect = ServerSelectionTimeoutError("down")

        with self.assertRaises(StorageConnectionError):
            StoreContext(self.config, client_factory=self.factory).open()

        self.mock_mongo.close.assert_called_once()

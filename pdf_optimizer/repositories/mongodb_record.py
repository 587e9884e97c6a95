"""MongoDB implementation of the record repository."""

from typing import Any, Optional

from ..clients.mongodb import MongoDBClient
from ..models.domain.record import RecordPage

DEFAULT_PAGE_SIZE = 25


class MongoDBRecordRepository:
    """Reads lesson plans in ascending ``_id`` order using keyset pagination."""

    def __init__(
        self,
        mongodb_client: MongoDBClient,
        collection: str = "lessonPlans",
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize the repository.

        Args:
            mongodb_client: Client bound to the lesson plan database
            collection: Name of the record collection
            page_size: Maximum number of records per page
        """
        self.mongodb_client = mongodb_client
        self.collection = collection
        self.page_size = page_size

    def count(self) -> int:
        return self.mongodb_client.count(self.collection)

    def get_page(self, cursor: Optional[Any]) -> RecordPage:
        records = self.mongodb_client.find_after(
            self.collection, after_id=cursor, limit=self.page_size
        )
        next_cursor = records[-1]["_id"] if records else None
        return RecordPage(records=records, next_cursor=next_cursor)

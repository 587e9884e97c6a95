"""Repository interface for record data access operations."""

from typing import Any, Optional, Protocol

from ..models.domain.record import RecordPage


class RecordRepository(Protocol):
    """Interface for paginated, read-only access to the record collection."""

    page_size: int

    def count(self) -> int:
        """Count all records at call time.

        Returns:
            The number of records; may be stale while other writers are active.
        Raises:
            StorageGeneralError: If the count fails.
        """
        ...

    def get_page(self, cursor: Optional[Any]) -> RecordPage:
        """Return the next page of records after the cursor.

        Args:
            cursor: Identifier of the last record seen, or None to start.
        Returns:
            Up to one page of records with identifiers strictly greater than
            the cursor, in ascending identifier order.
        Raises:
            StorageGeneralError: If the query fails.
        """
        ...

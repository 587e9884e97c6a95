"""Record page model."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class RecordPage(BaseModel):
    """One page of records in ascending identifier order.

    Attributes:
        records: Raw record documents
        next_cursor: Identifier of the last record, None when the page is empty
    """

    records: List[Dict[str, Any]] = Field(default_factory=list)
    next_cursor: Any = Field(default=None, description="Cursor for the next page")

    def is_empty(self) -> bool:
        return not self.records

"""Asset domain model."""

from typing import Optional

from pydantic import BaseModel, Field

from .enums import AssetKind


class Asset(BaseModel):
    """A stored binary object referenced from lesson plans.

    Attributes:
        id: Asset identifier, same form as the references in records
        kind: Asset kind, only PDF assets are handled
        original: Object storage key of the original content
        compressed_optimized_url: Key of the compressed rendition, if any
    """

    id: str = Field(..., description="Asset identifier")
    kind: AssetKind = Field(default=AssetKind.PDF, description="Asset kind")
    original: Optional[str] = Field(
        default=None, description="Object storage key of the original content"
    )
    compressed_optimized_url: Optional[str] = Field(
        default=None, description="Object storage key of the compressed rendition"
    )

    @property
    def is_optimized(self) -> bool:
        return bool(self.compressed_optimized_url)

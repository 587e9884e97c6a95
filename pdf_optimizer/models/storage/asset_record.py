"""Asset storage model."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..domain.asset import Asset
from ..domain.enums import AssetKind

COMPRESSED_URL_FIELD = "data.compressedOptimizedUrl"


class AssetRecord(BaseModel):
    """Storage record for an asset document.

    Maps between the MongoDB document shape
    ``{_id, type, data: {original, compressedOptimizedUrl}}`` and the domain Asset.
    """

    asset_id: str = Field(..., description="String form of the document _id")
    type: AssetKind = Field(default=AssetKind.PDF)
    original: Optional[str] = Field(default=None)
    compressed_optimized_url: Optional[str] = Field(default=None)

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> "AssetRecord":
        """Create an AssetRecord from a projected asset document."""
        data = item.get("data") or {}
        return cls(
            asset_id=str(item.get("_id")),
            type=AssetKind(item.get("type", AssetKind.PDF.value)),
            original=data.get("original") or None,
            compressed_optimized_url=data.get("compressedOptimizedUrl") or None,
        )

    def to_domain(self) -> Asset:
        return Asset(
            id=self.asset_id,
            kind=self.type,
            original=self.original,
            compressed_optimized_url=self.compressed_optimized_url,
        )

"""Storage models for the PDF Optimizer job."""

from .asset_record import COMPRESSED_URL_FIELD, AssetRecord

__all__ = [
    "AssetRecord",
    "COMPRESSED_URL_FIELD",
]

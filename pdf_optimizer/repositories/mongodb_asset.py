"""MongoDB implementation of the asset repository."""

from typing import Any, Optional

from bson import ObjectId

from ..clients.mongodb import MongoDBClient
from ..middleware.exceptions import AssetNotFoundError
from ..models.domain.asset import Asset
from ..models.domain.enums import AssetKind
from ..models.storage.asset_record import COMPRESSED_URL_FIELD, AssetRecord


class MongoDBAssetRepository:
    """Asset lookups and updates against the assets collection."""

    def __init__(self, mongodb_client: MongoDBClient, collection: str = "assets") -> None:
        """Initialize the repository.

        Args:
            mongodb_client: Client bound to the asset database
            collection: Name of the asset collection
        """
        self.mongodb_client = mongodb_client
        self.collection = collection

    @staticmethod
    def document_id(asset_id: str) -> Any:
        """Convert an asset identifier to the stored ``_id`` form.

        ObjectId hex strings become ObjectIds, anything else is kept as is.
        """
        return ObjectId(asset_id) if ObjectId.is_valid(asset_id) else asset_id

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        item = self.mongodb_client.find_one(
            self.collection,
            {"_id": self.document_id(asset_id), "type": AssetKind.PDF.value},
            projection={"data": 1, "type": 1},
        )
        if not item:
            return None
        return AssetRecord.from_dict(item).to_domain()

    def set_compressed_url(self, asset_id: str, url: str) -> None:
        matched = self.mongodb_client.update_fields(
            self.collection,
            {"_id": self.document_id(asset_id)},
            {COMPRESSED_URL_FIELD: url},
        )
        if matched == 0:
            raise AssetNotFoundError(
                asset_id=asset_id,
                message=f"Asset {asset_id} not found while saving compressed url",
            )

"""Repository interface for asset data access operations."""

from typing import Optional, Protocol

from ..models.domain.asset import Asset


class AssetRepository(Protocol):
    """Interface for asset repository operations."""

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        """Retrieve a PDF asset by identifier.

        Args:
            asset_id: The asset identifier.
        Returns:
            The Asset, or None when it is absent or not a PDF.
        Raises:
            StorageGeneralError: If the retrieval fails.
        """
        ...

    def set_compressed_url(self, asset_id: str, url: str) -> None:
        """Record the compressed rendition key on an asset.

        Args:
            asset_id: The asset identifier.
            url: Object storage key of the compressed rendition.
        Raises:
            AssetNotFoundError: If the asset does not exist.
            DatabaseWriteError: If the update fails.
        """
        ...

"""Storage-related exceptions."""

from typing import Any, Dict, Optional

from . import PDFOptimizerError


class StorageError(PDFOptimizerError):
    """Base class for storage-related errors."""

    def __init__(
        self, message: str, code: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message=message, code=code, details=details)


class StorageGeneralError(StorageError):
    """General error for storage operations."""

    def __init__(
        self,
        message: str = "Storage operation failed",
        code: str = "STORAGE_GENERAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class StorageConnectionError(StorageError):
    """Error when a store cannot be reached at startup."""

    def __init__(
        self,
        message: str = "Failed to connect to storage",
        code: str = "STORAGE_CONNECTION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class AssetNotFoundError(StorageError):
    """Error when an asset to update does not exist."""

    def __init__(
        self,
        asset_id: str,
        message: str = "Asset not found",
        code: str = "ASSET_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"asset_id": asset_id, **(details or {})},
        )


class DatabaseWriteError(StorageError):
    """Raised when a database write operation fails."""

    def __init__(
        self,
        message: str = "Failed to write to the database",
        code: str = "DATABASE_WRITE_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code, details)


class S3DownloadError(StorageError):
    """Raised when an S3 download operation fails."""

    def __init__(
        self,
        message: str = "Failed to download object from S3",
        code: str = "S3_DOWNLOAD_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code, details)


class S3UploadError(StorageError):
    """Raised when an S3 upload operation fails."""

    def __init__(
        self,
        message: str = "Failed to upload object to S3",
        code: str = "S3_UPLOAD_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code, details)

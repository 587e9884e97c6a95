"""Exception handling for the PDF Optimizer job."""

from typing import Any, Dict, Optional


class PDFOptimizerError(Exception):
    """Base exception for all PDF Optimizer errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


from .business import (
    CompressionError,
    CompressionTimeoutError,
    CompressionValidationError,
    ReferenceDepthError,
)
from .storage import (
    AssetNotFoundError,
    DatabaseWriteError,
    S3DownloadError,
    S3UploadError,
    StorageConnectionError,
    StorageError,
    StorageGeneralError,
)

__all__ = [
    # Base
    "PDFOptimizerError",
    # Business Errors
    "CompressionError",
    "CompressionTimeoutError",
    "CompressionValidationError",
    "ReferenceDepthError",
    # Storage Errors
    "StorageError",
    "StorageConnectionError",
    "StorageGeneralError",
    "AssetNotFoundError",
    "DatabaseWriteError",
    "S3DownloadError",
    "S3UploadError",
]

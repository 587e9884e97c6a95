"""Business logic related exceptions."""

from typing import Any, Dict, Optional

from . import PDFOptimizerError


class BusinessError(PDFOptimizerError):
    """Base class for business logic errors."""


class CompressionError(BusinessError):
    """Errors raised when the external compression tool fails."""

    def __init__(
        self,
        message: str = "Failed to compress PDF",
        code: str = "COMPRESSION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class CompressionTimeoutError(CompressionError):
    """The compression tool did not finish within the allowed time."""

    def __init__(
        self,
        timeout_seconds: float,
        message: str = "PDF compression timed out",
        code: str = "COMPRESSION_TIMEOUT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=f"{message} after {timeout_seconds}s",
            code=code,
            details={"timeout_seconds": timeout_seconds, **(details or {})},
        )


class CompressionValidationError(BusinessError):
    """The compressed rendition does not match the original document."""

    def __init__(
        self,
        message: str = "Compressed PDF failed validation",
        code: str = "COMPRESSION_INVALID",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class ReferenceDepthError(BusinessError):
    """A record is nested too deeply or contains a cycle."""

    def __init__(
        self,
        message: str = "Record structure is too deep or cyclic",
        code: str = "REFERENCE_DEPTH_EXCEEDED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)

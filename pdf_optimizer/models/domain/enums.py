"""Domain enums for the PDF Optimizer job."""

from enum import Enum


class AssetKind(str, Enum):
    """Kind of stored asset.

    Inherits from str to ensure JSON serialization works correctly.
    """

    PDF = "pdf"


class OutcomeStatus(str, Enum):
    """Final state of one attempted asset."""

    DONE = "done"
    SKIPPED = "skipped"
    ERROR = "error"

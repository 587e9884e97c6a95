"""Domain models for the PDF Optimizer job."""

from .asset import Asset
from .enums import AssetKind, OutcomeStatus
from .outcome import BYTES_PER_MB, AggregateTotals, ProcessingOutcome, to_mb
from .record import RecordPage
from .stats import RunStats

__all__ = [
    "AssetKind",
    "OutcomeStatus",
    "Asset",
    "AggregateTotals",
    "ProcessingOutcome",
    "RecordPage",
    "RunStats",
    "BYTES_PER_MB",
    "to_mb",
]

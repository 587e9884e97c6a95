"""Processing outcome and aggregate totals."""

from typing import Optional

from pydantic import BaseModel, Field

from .enums import OutcomeStatus

BYTES_PER_MB = 1024 * 1024


def to_mb(size: int) -> float:
    return size / BYTES_PER_MB


class ProcessingOutcome(BaseModel):
    """Audit entry for one attempted asset.

    Attributes:
        asset_id: Asset identifier
        original_url: Object storage key of the original, if it was fetched
        original_size: Original size in bytes, if it was measured
        compressed_size: Compressed size in bytes, if it was measured
        status: Final state of the asset
        detail: Error message for error outcomes
    """

    asset_id: str
    original_url: str = ""
    original_size: Optional[int] = None
    compressed_size: Optional[int] = None
    status: OutcomeStatus
    detail: str = ""

    @property
    def status_label(self) -> str:
        if self.status == OutcomeStatus.ERROR:
            return f"error:{self.detail}"
        return self.status.value

    @property
    def is_done(self) -> bool:
        return self.status == OutcomeStatus.DONE

    @classmethod
    def error(
        cls,
        asset_id: str,
        detail: str,
        original_url: str = "",
    ) -> "ProcessingOutcome":
        return cls(
            asset_id=asset_id,
            original_url=original_url,
            status=OutcomeStatus.ERROR,
            detail=detail,
        )


class AggregateTotals(BaseModel):
    """Running byte sums over done outcomes."""

    original_bytes: int = Field(default=0, ge=0)
    compressed_bytes: int = Field(default=0, ge=0)

    def add(self, outcome: ProcessingOutcome) -> None:
        """Add the sizes of a done outcome; other outcomes are ignored."""
        if not outcome.is_done:
            return
        self.original_bytes += outcome.original_size or 0
        self.compressed_bytes += outcome.compressed_size or 0

    @property
    def saved_bytes(self) -> int:
        return self.original_bytes - self.compressed_bytes

    @property
    def efficiency(self) -> float:
        """Percentage reduction; 0.0 when nothing was compressed."""
        if self.original_bytes == 0:
            return 0.0
        return (1 - self.compressed_bytes / self.original_bytes) * 100

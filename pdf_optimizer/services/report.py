"""Accumulates per-asset outcomes and writes the CSV reports."""

import csv
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..middleware.logging import logger
from ..models.domain import AggregateTotals, ProcessingOutcome, to_mb

DETAIL_REPORT_NAME = "compressed_assets_report.csv"
TOTALS_REPORT_NAME = "compressed_assets_totals.csv"

DETAIL_FIELDS = [
    "AssetId",
    "OriginalUrl",
    "OriginalAssetSize",
    "OptimizedAssetSize",
    "Status",
]


def format_mb(size: Optional[int]) -> str:
    """Format a byte count as ``"x.xx MB"``; unknown sizes stay blank."""
    if size is None:
        return ""
    return f"{to_mb(size):.2f} MB"


class ReportBuilder:
    """Collects outcome rows and the running totals of done assets."""

    def __init__(self) -> None:
        self.outcomes: List[ProcessingOutcome] = []
        self.totals = AggregateTotals()

    def add(self, outcome: ProcessingOutcome) -> None:
        self.outcomes.append(outcome)
        self.totals.add(outcome)

    def detail_rows(self) -> List[Dict[str, str]]:
        return [
            {
                "AssetId": outcome.asset_id,
                "OriginalUrl": outcome.original_url,
                "OriginalAssetSize": format_mb(outcome.original_size),
                "OptimizedAssetSize": format_mb(outcome.compressed_size),
                "Status": outcome.status_label,
            }
            for outcome in self.outcomes
        ]

    def totals_rows(self) -> List[Tuple[str, str]]:
        totals = self.totals
        return [
            ("Total Original Size (MB)", f"{to_mb(totals.original_bytes):.2f}"),
            ("Total Compressed Size (MB)", f"{to_mb(totals.compressed_bytes):.2f}"),
            ("Total Saved (MB)", f"{to_mb(totals.saved_bytes):.2f}"),
            ("Compression Efficiency (%)", f"{totals.efficiency:.2f}"),
        ]

    def summary(self) -> Dict[str, str]:
        return dict(self.totals_rows())

    def write(self, exports_dir: Path) -> Tuple[Path, Path]:
        """Write the detail and totals reports, overwriting earlier runs.

        Args:
            exports_dir: Directory receiving both CSV files

        Returns:
            Paths of the detail report and the totals report
        """
        exports_dir.mkdir(parents=True, exist_ok=True)
        detail_path = exports_dir / DETAIL_REPORT_NAME
        totals_path = exports_dir / TOTALS_REPORT_NAME

        with open(detail_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=DETAIL_FIELDS)
            writer.writeheader()
            writer.writerows(self.detail_rows())

        with open(totals_path, "w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerows(self.totals_rows())

        logger.info(
            "Reports written",
            extra={
                "detail_report": str(detail_path),
                "totals_report": str(totals_path),
                "rows": len(self.outcomes),
            },
        )
        return detail_path, totals_path

"""Unit tests for the report builder."""

import csv
import tempfile
import unittest
from pathlib import Path

from pdf_optimizer.models.domain import BYTES_PER_MB, OutcomeStatus, ProcessingOutcome
from pdf_optimizer.services.report import (
    DETAIL_REPORT_NAME,
    TOTALS_REPORT_NAME,
    ReportBuilder,
    format_mb,
)

MB = BYTES_PER_MB


def done(asset_id, original, compressed):
    return ProcessingOutcome(
        asset_id=asset_id,
        original_url=f"{asset_id}.pdf",
        original_size=original,
        compressed_size=compressed,
        status=OutcomeStatus.DONE,
    )


class TestReportBuilder(unittest.TestCase):
    """Test cases for ReportBuilder."""

    def setUp(self):
        self.report = ReportBuilder()

    def test_totals_only_count_done(self):
        """Skipped and error rows never change the totals."""
        # Act
        self.report.add(done("a", 100 * MB, 60 * MB))
        self.report.add(
            ProcessingOutcome(
                asset_id="b",
                original_size=5 * MB,
                compressed_size=6 * MB,
                status=OutcomeStatus.SKIPPED,
            )
        )
        self.report.add(ProcessingOutcome.error("c", "boom"))

        # Assert
        self.assertEqual(3, len(self.report.outcomes))
        self.assertEqual(100 * MB, self.report.totals.original_bytes)
        self.assertEqual(60 * MB, self.report.totals.compressed_bytes)

    def test_summary_efficiency(self):
        """100 MB compressed to 60 MB saves 40.00 MB, 40.00 %."""
        self.report.add(done("a", 100 * MB, 60 * MB))

        summary = self.report.summary()

        self.assertEqual("100.00", summary["Total Original Size (MB)"])
        self.assertEqual("60.00", summary["Total Compressed Size (MB)"])
        self.assertEqual("40.00", summary["Total Saved (MB)"])
        self.assertEqual("40.00", summary["Compression Efficiency (%)"])

    def test_summary_without_done_assets(self):
        """With no done assets the efficiency falls back to 0.00."""
        self.report.add(ProcessingOutcome.error("c", "boom"))

        summary = self.report.summary()

        self.assertEqual("0.00", summary["Total Original Size (MB)"])
        self.assertEqual("0.00", summary["Compression Efficiency (%)"])

    def test_detail_rows(self):
        # Arrange
        self.report.add(done("a", 3 * MB, MB // 2))
        self.report.add(ProcessingOutcome.error("b", "Ghostscript exited with status 1"))

        # Act
        rows = self.report.detail_rows()

        # Assert
        self.assertEqual(
            {
                "AssetId": "a",
                "OriginalUrl": "a.pdf",
                "OriginalAssetSize": "3.00 MB",
                "OptimizedAssetSize": "0.50 MB",
                "Status": "done",
            },
            rows[0],
        )
        self.assertEqual("", rows[1]["OriginalAssetSize"])
        self.assertEqual("error:Ghostscript exited with status 1", rows[1]["Status"])

    def test_format_mb(self):
        self.assertEqual("", format_mb(None))
        self.assertEqual("1.50 MB", format_mb(MB + MB // 2))

    def test_write_overwrites_files(self):
        """Both CSV files are written and replaced on each run."""
        with tempfile.TemporaryDirectory() as tmp:
            exports = Path(tmp) / "exports"
            (exports).mkdir()
            (exports / DETAIL_REPORT_NAME).write_text("stale\n")

            self.report.add(done("a", 10 * MB, 4 * MB))
            detail_path, totals_path = self.report.write(exports)

            with open(detail_path, newline="", encoding="utf-8") as f:
                rows = list(csv.DictReader(f))
            with open(totals_path, newline="", encoding="utf-8") as f:
                totals = list(csv.reader(f))

        self.assertEqual(1, len(rows))
        self.assertEqual("a", rows[0]["AssetId"])
        self.assertEqual(exports / TOTALS_REPORT_NAME, totals_path)
        self.assertEqual(
            [
                ["Total Original Size (MB)", "10.00"],
                ["Total Compressed Size (MB)", "4.00"],
                ["Total Saved (MB)", "6.00"],
                ["Compression Efficiency (%)", "60.00"],
            ],
            totals,
        )

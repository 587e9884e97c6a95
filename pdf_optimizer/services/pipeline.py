"""Batch traversal of records and the per-asset optimization pipeline."""

import math
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Set

from ..clients.s3 import S3Client
from ..middleware.exceptions import CompressionValidationError, ReferenceDepthError
from ..middleware.logging import logger
from ..models.domain import (
    Asset,
    OutcomeStatus,
    ProcessingOutcome,
    RunStats,
)
from ..pdf_processor.compress import GhostscriptCompressor
from ..pdf_processor.references import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_REFERENCE_KEY,
    extract_references,
)
from ..pdf_processor.scratch import scratch_files
from ..repositories.asset import AssetRepository
from ..repositories.record import RecordRepository
from ..utils.keys import compressed_key, file_name_from_key
from .report import ReportBuilder


class PipelineDriver:
    """Walks every record page by page and optimizes each referenced PDF asset.

    Records, and assets within a record, are handled strictly one at a time.
    Any failure of a single asset becomes an error row in the report and the
    run carries on with the next asset.
    """

    def __init__(
        self,
        records: RecordRepository,
        assets: AssetRepository,
        s3: S3Client,
        compressor: GhostscriptCompressor,
        report: ReportBuilder,
        scratch_dir: Path,
        reference_key: str = DEFAULT_REFERENCE_KEY,
        max_depth: int = DEFAULT_MAX_DEPTH,
        reprocess_optimized: bool = False,
        page_counter: Optional[Callable[[Path], int]] = None,
    ) -> None:
        """Initialize the driver.

        Args:
            records: Source of record pages
            assets: Asset lookups and updates
            s3: Object storage client for the asset bucket
            compressor: External compression adapter
            report: Receives one outcome per attempted asset
            scratch_dir: Directory for intermediate files
            reference_key: Key name holding asset references inside records
            max_depth: Nesting limit for reference extraction
            reprocess_optimized: Process assets that already have a compressed rendition
            page_counter: When set, compressed output must keep the original page count
        """
        self.records = records
        self.assets = assets
        self.s3 = s3
        self.compressor = compressor
        self.report = report
        self.scratch_dir = scratch_dir
        self.reference_key = reference_key
        self.max_depth = max_depth
        self.reprocess_optimized = reprocess_optimized
        self.page_counter = page_counter

    def run(self) -> RunStats:
        """Process all records and return the run counters.

        The loop stops on the first empty page, not when the initial count is
        reached, so records inserted during the run may still be visited.
        """
        stats = RunStats(records_total=self.records.count())
        total_batches = math.ceil(stats.records_total / self.records.page_size)
        logger.info(
            "Starting optimization run",
            extra={"records_total": stats.records_total, "total_batches": total_batches},
        )

        attempted: Set[str] = set()
        cursor: Optional[Any] = None
        while True:
            page = self.records.get_page(cursor)
            if page.is_empty():
                logger.info("No more records to process")
                break

            cursor = page.next_cursor
            stats.pages += 1
            logger.info(
                f"Processing batch {stats.pages}/{total_batches}",
                extra={"records_in_batch": len(page.records), "cursor": str(cursor)},
            )

            for record in page.records:
                self.process_record(record, stats, attempted)

        return stats

    def process_record(
        self, record: Dict[str, Any], stats: RunStats, attempted: Set[str]
    ) -> None:
        """Process the assets referenced by one record.

        Assets already in ``attempted`` got their report row earlier in the run
        and are not processed again.
        """
        stats.records_processed += 1
        record_id = str(record.get("_id"))

        try:
            asset_ids = extract_references(record, self.reference_key, self.max_depth)
        except ReferenceDepthError as e:
            stats.record_failures += 1
            logger.error(
                "Failed to extract asset references",
                extra={"record_id": record_id, "error": e.message, **e.details},
            )
            return

        in_record = 0
        for asset_id in sorted(asset_ids):
            if asset_id in attempted:
                logger.debug("Asset already attempted in this run", extra={"asset_id": asset_id})
                continue

            outcome = self.process_asset(asset_id, stats)
            if outcome is None:
                continue

            attempted.add(asset_id)
            in_record += 1
            self.report.add(outcome)
            if outcome.is_done:
                stats.assets_done += 1
            else:
                stats.assets_failed += 1

        logger.info(
            f"Processed record {stats.records_processed}/{stats.records_total}",
            extra={
                "record_id": record_id,
                "assets_in_record": in_record,
                "assets_done": stats.assets_done,
                "assets_failed": stats.assets_failed,
            },
        )

    def process_asset(self, asset_id: str, stats: RunStats) -> Optional[ProcessingOutcome]:
        """Run one asset through the pipeline.

        Returns:
            The outcome to report, or None for assets that are silently skipped
            (absent, not a PDF, without original, or already optimized).
        """
        asset: Optional[Asset] = None
        try:
            asset = self.assets.get_asset(asset_id)
            if asset is None or not asset.original:
                stats.assets_not_found += 1
                logger.debug("Skipping asset without PDF original", extra={"asset_id": asset_id})
                return None

            if asset.is_optimized and not self.reprocess_optimized:
                stats.assets_already_optimized += 1
                logger.info(
                    "Asset already optimized",
                    extra={"asset_id": asset_id, "compressed_url": asset.compressed_optimized_url},
                )
                return None

            return self._optimize(asset_id, asset.original)
        except Exception as e:
            logger.error(
                "Error processing asset",
                extra={"asset_id": asset_id, "error": str(e), "error_type": type(e).__name__},
            )
            return ProcessingOutcome.error(
                asset_id,
                detail=str(e),
                original_url=asset.original if asset and asset.original else "",
            )

    def _optimize(self, asset_id: str, original_key: str) -> ProcessingOutcome:
        target_key = compressed_key(original_key)

        with scratch_files(self.scratch_dir, file_name_from_key(original_key)) as (
            original_path,
            compressed_path,
        ):
            self.s3.download_file(original_key, original_path)
            self.compressor.compress(original_path, compressed_path)

            original_size = original_path.stat().st_size
            compressed_size = compressed_path.stat().st_size

            if compressed_size >= original_size:
                logger.warning(
                    "Compression did not reduce size",
                    extra={
                        "asset_id": asset_id,
                        "original_size": original_size,
                        "compressed_size": compressed_size,
                    },
                )
                return ProcessingOutcome(
                    asset_id=asset_id,
                    original_url=original_key,
                    original_size=original_size,
                    compressed_size=compressed_size,
                    status=OutcomeStatus.SKIPPED,
                )

            if self.page_counter is not None:
                self._verify_page_count(original_path, compressed_path)

            self.s3.upload_file(target_key, compressed_path)
            self.assets.set_compressed_url(asset_id, target_key)

        logger.info(
            "Asset updated successfully",
            extra={
                "asset_id": asset_id,
                "compressed_key": target_key,
                "original_size": original_size,
                "compressed_size": compressed_size,
            },
        )
        return ProcessingOutcome(
            asset_id=asset_id,
            original_url=original_key,
            original_size=original_size,
            compressed_size=compressed_size,
            status=OutcomeStatus.DONE,
        )

    def _verify_page_count(self, original_path: Path, compressed_path: Path) -> None:
        original_pages = self.page_counter(original_path)
        compressed_pages = self.page_counter(compressed_path)
        if original_pages != compressed_pages:
            raise CompressionValidationError(
                f"Page count changed from {original_pages} to {compressed_pages}",
                details={"original_pages": original_pages, "compressed_pages": compressed_pages},
            )

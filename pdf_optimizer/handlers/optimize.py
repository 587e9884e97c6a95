"""Entry point of the PDF optimization job."""

from typing import Optional

from ..clients.mongodb import StoreContext
from ..clients.s3 import S3Client
from ..config.app import AppConfig
from ..middleware.exceptions import PDFOptimizerError, StorageConnectionError
from ..middleware.logging import logger, logging_middleware
from ..models.domain import RunStats
from ..pdf_processor import GhostscriptCompressor, count_pages
from ..repositories.mongodb_asset import MongoDBAssetRepository
from ..repositories.mongodb_record import MongoDBRecordRepository
from ..services.pipeline import PipelineDriver
from ..services.report import ReportBuilder


def build_pipeline(
    config: AppConfig, stores: StoreContext, s3: S3Client, report: ReportBuilder
) -> PipelineDriver:
    """Wire repositories, clients and the compressor for one run."""
    records = MongoDBRecordRepository(
        stores.records,
        collection=config.lesson_plan_collection,
        page_size=config.page_size,
    )
    assets = MongoDBAssetRepository(stores.assets, collection=config.asset_collection)
    compressor = GhostscriptCompressor(
        binary=config.ghostscript_bin,
        resolution=config.image_resolution,
        timeout_seconds=config.compress_timeout_seconds,
    )
    return PipelineDriver(
        records=records,
        assets=assets,
        s3=s3,
        compressor=compressor,
        report=report,
        scratch_dir=config.temp_dir,
        reference_key=config.reference_key,
        max_depth=config.reference_max_depth,
        reprocess_optimized=config.reprocess_optimized,
        page_counter=count_pages if config.verify_page_count else None,
    )


def prepare_directories(config: AppConfig) -> None:
    """Create the exports and scratch directories if absent."""
    config.exports_dir.mkdir(parents=True, exist_ok=True)
    config.temp_dir.mkdir(parents=True, exist_ok=True)


def run_job(config: AppConfig, stores: Optional[StoreContext] = None) -> RunStats:
    """Run the optimization over all records and write both reports.

    If the run stops on a storage error after startup, the outcomes collected
    so far are still written before the error propagates.

    Raises:
        StorageConnectionError: If MongoDB cannot be reached at startup
        PDFOptimizerError: If the run stops on a store error
    """
    prepare_directories(config)

    report = ReportBuilder()
    with stores or StoreContext(config) as context:
        pipeline = build_pipeline(config, context, S3Client(config), report)
        try:
            stats = pipeline.run()
        except PDFOptimizerError:
            report.write(config.exports_dir)
            logger.warning(
                "Run aborted, partial report written",
                extra={"rows": len(report.outcomes)},
            )
            raise

    report.write(config.exports_dir)

    logger.info("Script completed", extra={"stats": stats.model_dump()})
    for label, value in report.summary().items():
        logger.info(f"{label}: {value}")
    return stats


def main() -> int:
    try:
        config = AppConfig.from_env()
    except (KeyError, ValueError):
        logger.exception("CRITICAL: Failed to load configuration")
        return 1

    prepare_directories(config)
    job = logging_middleware(scratch_dir=str(config.temp_dir))(run_job)
    try:
        job(config)
    except StorageConnectionError as e:
        logger.error(
            "Error establishing MongoDB connection",
            extra={"error": e.message, **e.details},
        )
        return 1
    except PDFOptimizerError as e:
        logger.error(
            "Optimization run aborted",
            extra={"error": e.message, "code": e.code, **e.details},
        )
        return 1
    return 0

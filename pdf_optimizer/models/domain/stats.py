"""Run statistics."""

from pydantic import BaseModel


class RunStats(BaseModel):
    """Counters collected over one pipeline run."""

    records_total: int = 0
    records_processed: int = 0
    record_failures: int = 0
    pages: int = 0
    assets_done: int = 0
    assets_failed: int = 0
    assets_not_found: int = 0
    assets_already_optimized: int = 0

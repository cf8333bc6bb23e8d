"""Assessment runs - ingest or generate customers, process, summarize"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Optional, Sequence, Union

from cashflow_risk.config import settings
from cashflow_risk.domain.models import CustomerRecord, PortfolioSummary, ProcessedRecord
from cashflow_risk.domain.portfolio import summarize
from cashflow_risk.domain.processing import process_records
from cashflow_risk.domain.sample_data import SampleDataGenerator
from cashflow_risk.infrastructure.observability.logging import log_batch_processed
from cashflow_risk.infrastructure.observability.metrics import record_batch, record_invalid_rows
from cashflow_risk.ingestion.csv_loader import load_customers_csv


@dataclass
class AssessmentResult:
    """Processed batch and its portfolio summary"""

    records: List[ProcessedRecord]
    summary: PortfolioSummary
    invalid_count: int = 0
    source: str = "records"


def assess(
    customers: Sequence[CustomerRecord],
    source: str = "records",
    invalid_count: int = 0,
) -> AssessmentResult:
    """
    Process a batch from scratch and summarize it.

    Flow:
    1. Score and decide every customer
    2. Aggregate counts, rates, stats and insights
    3. Record metrics and log the outcome
    """
    start_time = time.time()

    records = process_records(customers)
    summary = summarize(records)

    duration_ms = (time.time() - start_time) * 1000
    if settings.metrics_enabled:
        record_batch(records)
    log_batch_processed(
        source,
        summary.total,
        {decision.value: count for decision, count in summary.counts.items()},
        duration_ms,
    )

    return AssessmentResult(records=records, summary=summary, invalid_count=invalid_count, source=source)


def assess_csv(source: Union[str, Path, IO[str]]) -> AssessmentResult:
    """Load customers from CSV, then assess them"""
    ingested = load_customers_csv(source)
    if settings.metrics_enabled:
        record_invalid_rows(ingested.invalid_count)
    return assess(ingested.records, source="csv", invalid_count=ingested.invalid_count)


def assess_sample(count: Optional[int] = None, seed: Optional[int] = None) -> AssessmentResult:
    """Generate `count` sample customers (seeded when `seed` is given), then assess them"""
    count = settings.sample_size if count is None else count
    seed = settings.sample_seed if seed is None else seed
    generator = SampleDataGenerator(seed=seed)
    return assess(generator.generate_customers(count), source="sample")

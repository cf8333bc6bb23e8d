"""Prometheus metrics for decision mix, risk levels and ingestion quality"""

from typing import Sequence

from prometheus_client import Counter, Histogram

from cashflow_risk.domain.models import ProcessedRecord

# Decision metrics
decision_counter = Counter(
    "cashflow_decisions_total",
    "Total lending decisions made",
    ["decision"],  # Auto Approve | Manual Review | Elevated Risk | Auto Deny
)

risk_level_counter = Counter(
    "cashflow_risk_level_total",
    "Customers by overall risk level of the combined score",
    ["risk_level"],
)

batch_size_histogram = Histogram(
    "cashflow_batch_size",
    "Customers per processed batch",
    buckets=[0, 10, 50, 100, 250, 500, 1000, 2500, 5000],
)

# Ingestion metrics
invalid_rows_counter = Counter(
    "cashflow_ingestion_invalid_rows_total",
    "Uploaded rows skipped by validation",
)


def record_batch(records: Sequence[ProcessedRecord]) -> None:
    """Record decision and risk level distribution for one processed batch"""
    batch_size_histogram.observe(len(records))
    for record in records:
        decision_counter.labels(decision=record.decision.value).inc()
        risk_level_counter.labels(risk_level=record.risk_level.value).inc()


def record_invalid_rows(count: int) -> None:
    if count > 0:
        invalid_rows_counter.inc(count)

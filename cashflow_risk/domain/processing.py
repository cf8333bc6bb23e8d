"""Batch processing - raw customer records in, processed records out"""

from typing import Iterable, List

from cashflow_risk.domain.classification import classify
from cashflow_risk.domain.decision import decide
from cashflow_risk.domain.models import CustomerRecord, ProcessedRecord
from cashflow_risk.domain.scoring import combined_score, mean_score


def process_record(record: CustomerRecord) -> ProcessedRecord:
    """
    Derive combined score, overall risk level and decision for one customer.

    The risk level is classified from the unrounded mean, so a mean of 69.95
    stays Moderate even though it is stored as 70.0. The decision comes from
    the four per-criterion tiers and is independent of both.
    """
    return ProcessedRecord(
        customer_id=record.customer_id,
        transaction_history=record.transaction_history,
        affordability=record.affordability,
        employment=record.employment,
        behavior=record.behavior,
        combined_score=combined_score(record),
        risk_level=classify(mean_score(record)),
        decision=decide(record),
    )


def process_records(records: Iterable[CustomerRecord]) -> List[ProcessedRecord]:
    """Process a whole batch; input order is preserved and nothing is mutated"""
    return [process_record(record) for record in records]

"""Pytest fixtures for testing"""

import pytest
from typing import Callable, Dict, List

from cashflow_risk.domain.models import CustomerRecord, ProcessedRecord, RiskTier
from cashflow_risk.domain.processing import process_records
from cashflow_risk.domain.sample_data import SampleDataGenerator


# One representative score inside each tier
TIER_SCORES: Dict[RiskTier, float] = {
    RiskTier.HIGH: 10,
    RiskTier.ELEVATED: 40,
    RiskTier.MODERATE: 60,
    RiskTier.LOW: 80,
}


@pytest.fixture
def tier_scores() -> Dict[RiskTier, float]:
    return dict(TIER_SCORES)


@pytest.fixture
def make_customer() -> Callable[..., CustomerRecord]:
    """Build a customer from four scores, ID optional"""

    def _make(transaction_history, affordability, employment, behavior, customer_id="CUST-0001"):
        return CustomerRecord(
            customer_id=customer_id,
            transaction_history=transaction_history,
            affordability=affordability,
            employment=employment,
            behavior=behavior,
        )

    return _make


@pytest.fixture
def make_portfolio(make_customer) -> Callable[..., List[ProcessedRecord]]:
    """Processed batch from (count, scores) groups, IDs numbered in order"""

    def _make(*groups):
        customers = []
        for count, scores in groups:
            for _ in range(count):
                customers.append(make_customer(*scores, customer_id=f"CUST-{len(customers) + 1:04d}"))
        return process_records(customers)

    return _make


@pytest.fixture
def seeded_generator() -> SampleDataGenerator:
    return SampleDataGenerator(seed=12345)


@pytest.fixture
def sample_portfolio(seeded_generator) -> List[ProcessedRecord]:
    """100 reproducible sample customers, already processed"""
    return seeded_generator.generate(100)

"""Score aggregation - combined score per customer and portfolio statistics"""

import math
from typing import Sequence

from cashflow_risk.domain.models import Criterion, CriterionStats, CustomerRecord, PortfolioStats
from cashflow_risk.utils.rounding import round_half_away


def mean_score(record: CustomerRecord) -> float:
    """Equally weighted (25% each) mean of the four criteria, unrounded"""
    total = (
        record.transaction_history
        + record.affordability
        + record.employment
        + record.behavior
    )
    return total / 4


def combined_score(record: CustomerRecord) -> float:
    """
    The mean score to one decimal place.

    Halves round away from zero: 70.25 -> 70.3.
    """
    return round_half_away(mean_score(record), 1)


def portfolio_stats(records: Sequence[CustomerRecord]) -> PortfolioStats:
    """
    Mean of each criterion across the batch and the weakest criterion.

    Ties for weakest go to the first criterion in field order
    (transaction history, affordability, employment, behavior).

    Empty batch: every mean is NaN and weakest is None.
    """
    total = len(records)
    criteria = []
    for criterion in Criterion:
        if total == 0:
            mean = math.nan
        else:
            mean = sum(r.score(criterion) for r in records) / total
        criteria.append(CriterionStats(criterion=criterion, mean=mean))

    weakest = None
    if total > 0:
        weakest = criteria[0]
        for stats in criteria[1:]:
            if stats.mean < weakest.mean:
                weakest = stats

    return PortfolioStats(criteria=criteria, weakest=weakest, total=total)

"""Portfolio analysis - decision counts, rates and narrative insights"""

from typing import Dict, List, Optional, Sequence

from cashflow_risk.domain.classification import classify
from cashflow_risk.domain.models import (
    Decision,
    Insight,
    InsightKind,
    PortfolioStats,
    PortfolioSummary,
    ProcessedRecord,
    RiskTier,
)
from cashflow_risk.domain.scoring import portfolio_stats
from cashflow_risk.utils.rounding import percentage

STRONG_APPROVAL_RATE = 50.0
HIGH_DENIAL_RATE = 30.0
HIGH_REVIEW_RATE = 30.0
WEAK_CRITERION_MEAN = 60.0
TRANSACTION_HIGH_SHARE = 0.15
BEHAVIOR_RISK_SHARE = 0.20


def decision_counts(records: Sequence[ProcessedRecord]) -> Dict[Decision, int]:
    """Number of records per decision; every variant present, zero if unused"""
    counts = {decision: 0 for decision in Decision}
    for record in records:
        counts[record.decision] += 1
    return counts


def decision_rates(records: Sequence[ProcessedRecord]) -> Dict[Decision, float]:
    """Percentage of records per decision (one decimal); all 0.0 when empty"""
    total = len(records)
    return {decision: percentage(count, total) for decision, count in decision_counts(records).items()}


def generate_insights(
    records: Sequence[ProcessedRecord], stats: Optional[PortfolioStats] = None
) -> List[Insight]:
    """
    Threshold rules over a processed batch, evaluated independently.

    - strong portfolio:  approval rate >= 50%
    - high denial:       deny rate >= 30%, only when strong portfolio did not fire
    - manual review:     review + elevated rate >= 30%
    - weak criterion:    weakest criterion mean < 60
    - transaction flag:  > 15% of customers with High transaction history
    - behavior flag:     > 20% with Elevated or High behavior

    Falls back to a single "balanced" insight when nothing fires. An empty
    batch yields no insights at all.
    """
    total = len(records)
    if total == 0:
        return []
    if stats is None:
        stats = portfolio_stats(records)

    counts = decision_counts(records)
    approval_rate = percentage(counts[Decision.AUTO_APPROVE], total)
    deny_rate = percentage(counts[Decision.AUTO_DENY], total)
    review_rate = percentage(counts[Decision.MANUAL_REVIEW] + counts[Decision.ELEVATED_RISK], total)

    insights = []

    if approval_rate >= STRONG_APPROVAL_RATE:
        insights.append(
            Insight(
                kind=InsightKind.STRONG_PORTFOLIO,
                tone="positive",
                title="Strong Portfolio Health",
                description=(
                    f"{approval_rate:.1f}% of customers qualify for auto-approval, "
                    "indicating a healthy loan portfolio."
                ),
            )
        )
    elif deny_rate >= HIGH_DENIAL_RATE:
        insights.append(
            Insight(
                kind=InsightKind.HIGH_DENIAL,
                tone="negative",
                title="High Denial Rate Alert",
                description=(
                    f"{deny_rate:.1f}% of customers are auto-denied. "
                    "Consider reviewing acquisition channels."
                ),
            )
        )

    if review_rate >= HIGH_REVIEW_RATE:
        insights.append(
            Insight(
                kind=InsightKind.HIGH_MANUAL_REVIEW,
                tone="warning",
                title="High Manual Review Volume",
                description=(
                    f"{review_rate:.1f}% of applications require manual review. "
                    "This may impact processing times."
                ),
            )
        )

    weakest = stats.weakest
    if weakest is not None and weakest.mean < WEAK_CRITERION_MEAN:
        name = weakest.criterion.label
        insights.append(
            Insight(
                kind=InsightKind.WEAK_CRITERION,
                tone="warning",
                title=f"Weak {name} Scores",
                description=(
                    f"Average {name.lower()} score is {weakest.mean:.1f}. "
                    "This criterion is dragging down approvals."
                ),
            )
        )

    high_transactions = sum(1 for r in records if classify(r.transaction_history) is RiskTier.HIGH)
    if high_transactions / total > TRANSACTION_HIGH_SHARE:
        insights.append(
            Insight(
                kind=InsightKind.TRANSACTION_RED_FLAG,
                tone="negative",
                title="Transaction History Red Flag",
                description=(
                    f"{percentage(high_transactions, total):.1f}% of customers have "
                    "insufficient banking history."
                ),
            )
        )

    behavior_issues = sum(
        1 for r in records if classify(r.behavior) in (RiskTier.HIGH, RiskTier.ELEVATED)
    )
    if behavior_issues / total > BEHAVIOR_RISK_SHARE:
        insights.append(
            Insight(
                kind=InsightKind.BEHAVIORAL_CONCENTRATION,
                tone="negative",
                title="Behavioral Risk Concentration",
                description=(
                    f"{percentage(behavior_issues, total):.1f}% show elevated behavioral risk "
                    "(stop payments, ACH returns)."
                ),
            )
        )

    if not insights:
        insights.append(
            Insight(
                kind=InsightKind.BALANCED,
                tone="positive",
                title="Balanced Risk Profile",
                description=(
                    "The portfolio shows well-distributed risk across all criteria "
                    "with no major concerns."
                ),
            )
        )

    return insights


def summarize(records: Sequence[ProcessedRecord]) -> PortfolioSummary:
    """Main entry point: everything the summary cards and insight panel need"""
    stats = portfolio_stats(records)
    return PortfolioSummary(
        total=len(records),
        counts=decision_counts(records),
        rates=decision_rates(records),
        stats=stats,
        insights=generate_insights(records, stats),
    )

"""Chart data series for the dashboard

Plain data only: callers feed these into whichever plotting front end they
use. Colors and labels match across every chart.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from cashflow_risk.config import settings
from cashflow_risk.domain.classification import RISK_THRESHOLDS, classify
from cashflow_risk.domain.exceptions import UnknownCustomerError
from cashflow_risk.domain.models import Criterion, Decision, ProcessedRecord, RiskTier
from cashflow_risk.domain.portfolio import decision_counts
from cashflow_risk.domain.scoring import portfolio_stats

COLORS = {
    "low": "#17ca60",
    "moderate": "#0156f4",
    "elevated": "#f5a623",
    "high": "#e53e3e",
    "background": "#00052e",
    "turquoise": "#01CFFB",
}

DECISION_COLORS = {
    Decision.AUTO_APPROVE: COLORS["low"],
    Decision.MANUAL_REVIEW: COLORS["moderate"],
    Decision.ELEVATED_RISK: COLORS["elevated"],
    Decision.AUTO_DENY: COLORS["high"],
}

# Best tier first, as the charts list them
TIER_ORDER = [RiskTier.LOW, RiskTier.MODERATE, RiskTier.ELEVATED, RiskTier.HIGH]

CRITERION_LABELS = [c.short_label for c in Criterion]


@dataclass
class Series:
    name: str
    labels: List[str]
    values: List[float]
    color: Optional[str] = None


@dataclass
class Histogram:
    counts: List[int]
    edges: List[float]


@dataclass
class RadarProfile:
    name: str
    theta: List[str]
    r: List[float]


@dataclass
class Heatmap:
    z: List[List[float]]
    x: List[str]
    y: List[str]


@dataclass(frozen=True)
class ThresholdMarker:
    score: float
    label: str
    color: str


def decision_distribution(records: Sequence[ProcessedRecord]) -> Dict[str, list]:
    """Donut chart: one slice per decision"""
    counts = decision_counts(records)
    return {
        "labels": [d.value for d in Decision],
        "values": [counts[d] for d in Decision],
        "colors": [DECISION_COLORS[d] for d in Decision],
    }


def criteria_breakdown(records: Sequence[ProcessedRecord]) -> List[Series]:
    """Grouped bars: for every tier, how many customers each criterion puts there"""
    traces = []
    for tier in TIER_ORDER:
        values = [
            sum(1 for r in records if classify(r.score(criterion)) is tier)
            for criterion in Criterion
        ]
        traces.append(Series(name=tier.value, labels=CRITERION_LABELS, values=values, color=COLORS[tier.short]))
    return traces


def score_histogram(records: Sequence[ProcessedRecord], bins: Optional[int] = None) -> Histogram:
    """Combined score histogram with equal-width bins over [0, 100]"""
    if bins is None:
        bins = settings.histogram_bins
    scores = np.array([r.combined_score for r in records], dtype=float)
    counts, edges = np.histogram(scores, bins=bins, range=(0, 100))
    return Histogram(counts=counts.tolist(), edges=edges.tolist())


def radar_profile(records: Sequence[ProcessedRecord], customer_id: str = "all") -> RadarProfile:
    """
    Scores across the four criteria, polygon closed on the first point.

    "all" plots the portfolio average.
    """
    if customer_id == "all":
        stats = portfolio_stats(records)
        values = [s.mean for s in stats.criteria]
        name = "Portfolio Average"
    else:
        customer = next((r for r in records if r.customer_id == customer_id), None)
        if customer is None:
            raise UnknownCustomerError(f"Customer {customer_id} not found")
        values = customer.scores()
        name = customer_id

    return RadarProfile(
        name=name,
        theta=CRITERION_LABELS + CRITERION_LABELS[:1],
        r=values + values[:1],
    )


def heatmap_matrix(records: Sequence[ProcessedRecord], limit: Optional[int] = None) -> Heatmap:
    """Customers as rows, criteria as columns; first `limit` customers only"""
    if limit is None:
        limit = settings.heatmap_limit
    shown = records[:limit]
    return Heatmap(
        z=[r.scores() for r in shown],
        x=CRITERION_LABELS,
        y=[r.customer_id for r in shown],
    )


def threshold_markers() -> List[ThresholdMarker]:
    """Dashed tier boundaries drawn over the score histogram"""
    return [
        ThresholdMarker(RISK_THRESHOLDS["low"], "Low", COLORS["low"]),
        ThresholdMarker(RISK_THRESHOLDS["moderate"], "Moderate", COLORS["moderate"]),
        ThresholdMarker(RISK_THRESHOLDS["elevated"], "Elevated", COLORS["elevated"]),
    ]

"""Score to risk tier classification"""

from typing import Dict

from cashflow_risk.domain.models import RiskTier

# Lower bound (inclusive) of each tier; anything below "elevated" is High
RISK_THRESHOLDS: Dict[str, float] = {
    "low": 70,
    "moderate": 50,
    "elevated": 35,
}


def classify(score: float) -> RiskTier:
    """
    Map a 0-100 score to its risk tier.

    Tiers (closed below, open above):
    - Low:      score >= 70
    - Moderate: 50 <= score < 70
    - Elevated: 35 <= score < 50
    - High:     score < 35

    Total over all floats. Out-of-range values are classified as-is and NaN
    falls through to High because every comparison against it is false.
    """
    if score >= RISK_THRESHOLDS["low"]:
        return RiskTier.LOW
    if score >= RISK_THRESHOLDS["moderate"]:
        return RiskTier.MODERATE
    if score >= RISK_THRESHOLDS["elevated"]:
        return RiskTier.ELEVATED
    return RiskTier.HIGH

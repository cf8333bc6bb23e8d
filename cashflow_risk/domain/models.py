"""Domain models - pure Python dataclasses and enums for the lending engine"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class RiskTier(str, Enum):
    """Risk tier for a single score, ordered from worst to best"""

    HIGH = "High Risk"
    ELEVATED = "Elevated Risk"
    MODERATE = "Moderate Risk"
    LOW = "Low Risk"

    @property
    def rank(self) -> int:
        """0 for High up to 3 for Low"""
        return _TIER_RANK[self]

    @property
    def short(self) -> str:
        """Lowercase label used for per-criterion risk ("high", "low", ...)"""
        return self.name.lower()

    def __lt__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_RANK = {tier: rank for rank, tier in enumerate(RiskTier)}


class Decision(str, Enum):
    """Automated lending decision"""

    AUTO_APPROVE = "Auto Approve"
    MANUAL_REVIEW = "Manual Review"
    ELEVATED_RISK = "Elevated Risk"
    AUTO_DENY = "Auto Deny"


class Criterion(str, Enum):
    """The four scored criteria, in their fixed field order"""

    TRANSACTION_HISTORY = "transaction_history"
    AFFORDABILITY = "affordability"
    EMPLOYMENT = "employment"
    BEHAVIOR = "behavior"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def short_label(self) -> str:
        return self.label.split()[0]


@dataclass(frozen=True)
class CustomerRecord:
    """Validated applicant with four criterion scores (nominally 0-100)"""

    customer_id: str
    transaction_history: float
    affordability: float
    employment: float
    behavior: float

    def score(self, criterion: Criterion) -> float:
        return getattr(self, criterion.value)

    def scores(self) -> List[float]:
        return [self.score(c) for c in Criterion]


@dataclass(frozen=True)
class ProcessedRecord(CustomerRecord):
    """Customer record plus derived score, overall risk level and decision"""

    combined_score: float
    risk_level: RiskTier
    decision: Decision

    def to_customer(self) -> CustomerRecord:
        return CustomerRecord(
            customer_id=self.customer_id,
            transaction_history=self.transaction_history,
            affordability=self.affordability,
            employment=self.employment,
            behavior=self.behavior,
        )


@dataclass(frozen=True)
class CriterionStats:
    """Portfolio mean for one criterion"""

    criterion: Criterion
    mean: float


@dataclass(frozen=True)
class PortfolioStats:
    """Per-criterion means and the weakest criterion (None for an empty batch)"""

    criteria: List[CriterionStats]
    weakest: Optional[CriterionStats]
    total: int

    def mean(self, criterion: Criterion) -> float:
        return next(s.mean for s in self.criteria if s.criterion is criterion)


class InsightKind(str, Enum):
    STRONG_PORTFOLIO = "strong_portfolio"
    HIGH_DENIAL = "high_denial"
    HIGH_MANUAL_REVIEW = "high_manual_review"
    WEAK_CRITERION = "weak_criterion"
    TRANSACTION_RED_FLAG = "transaction_red_flag"
    BEHAVIORAL_CONCENTRATION = "behavioral_concentration"
    BALANCED = "balanced"


@dataclass(frozen=True)
class Insight:
    """Narrative finding about a processed portfolio"""

    kind: InsightKind
    tone: str  # positive | warning | negative
    title: str
    description: str


@dataclass
class PortfolioSummary:
    """Counts, rates and insights for one processed batch"""

    total: int
    counts: Dict[Decision, int]
    rates: Dict[Decision, float]
    stats: PortfolioStats
    insights: List[Insight] = field(default_factory=list)

"""Decision engine - maps four per-criterion risk tiers to a lending decision"""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping

from cashflow_risk.domain.classification import classify
from cashflow_risk.domain.models import Criterion, CustomerRecord, Decision, RiskTier


@dataclass(frozen=True)
class CriteriaAssessment:
    """Tier of each criterion plus how many criteria landed in each tier"""

    tiers: Dict[Criterion, RiskTier]
    tally: Dict[RiskTier, int]

    @classmethod
    def from_tiers(cls, tiers: Mapping[Criterion, RiskTier]) -> "CriteriaAssessment":
        counts = Counter(tiers.values())
        return cls(
            tiers=dict(tiers),
            tally={tier: counts.get(tier, 0) for tier in RiskTier},
        )

    def count(self, tier: RiskTier) -> int:
        return self.tally[tier]

    def tier(self, criterion: Criterion) -> RiskTier:
        return self.tiers[criterion]


@dataclass(frozen=True)
class DecisionRule:
    """One row of the decision table: first matching rule wins"""

    name: str
    predicate: Callable[[CriteriaAssessment], bool]
    outcome: Decision


DECISION_RULES: List[DecisionRule] = [
    DecisionRule(
        "any_high",
        lambda a: a.count(RiskTier.HIGH) > 0,
        Decision.AUTO_DENY,
    ),
    DecisionRule(
        "multiple_elevated",
        lambda a: a.count(RiskTier.ELEVATED) >= 2,
        Decision.AUTO_DENY,
    ),
    DecisionRule(
        "elevated_affordability_rest_moderate",
        lambda a: (
            a.tier(Criterion.AFFORDABILITY) is RiskTier.ELEVATED
            and a.count(RiskTier.MODERATE) == 3
        ),
        Decision.AUTO_DENY,
    ),
    DecisionRule(
        "all_low",
        lambda a: a.count(RiskTier.LOW) == 4,
        Decision.AUTO_APPROVE,
    ),
    # High and Elevated are both zero here, so the remainder is Moderate
    DecisionRule(
        "mostly_low_rest_moderate",
        lambda a: a.count(RiskTier.LOW) >= 2 and a.count(RiskTier.ELEVATED) == 0,
        Decision.AUTO_APPROVE,
    ),
    DecisionRule(
        "single_elevated",
        lambda a: a.count(RiskTier.ELEVATED) == 1,
        Decision.ELEVATED_RISK,
    ),
    DecisionRule(
        "fallback",
        lambda a: True,
        Decision.MANUAL_REVIEW,
    ),
]


def assess_criteria(record: CustomerRecord) -> CriteriaAssessment:
    """Classify each of the record's four criteria independently"""
    return CriteriaAssessment.from_tiers(
        {criterion: classify(record.score(criterion)) for criterion in Criterion}
    )


def first_matching_rule(assessment: CriteriaAssessment) -> DecisionRule:
    """Walk DECISION_RULES in order; the fallback guarantees a match"""
    for rule in DECISION_RULES:
        if rule.predicate(assessment):
            return rule
    raise AssertionError("decision table has no fallback rule")


def decide_tiers(tiers: Mapping[Criterion, RiskTier]) -> Decision:
    """Decision for an explicit tier per criterion (all four required)"""
    missing = [c.value for c in Criterion if c not in tiers]
    if missing:
        raise ValueError(f"tiers missing for: {', '.join(missing)}")
    return first_matching_rule(CriteriaAssessment.from_tiers(tiers)).outcome


def matching_rule(record: CustomerRecord) -> DecisionRule:
    """The rule that decided this record, for explaining a decision"""
    return first_matching_rule(assess_criteria(record))


def decide(record: CustomerRecord) -> Decision:
    """
    Derive the lending decision for one customer.

    Rule precedence (first match wins):
    1. Auto Deny:     any criterion High
    2. Auto Deny:     two or more Elevated
    3. Auto Deny:     Elevated affordability with the other three Moderate
    4. Auto Approve:  all four Low
    5. Auto Approve:  two or more Low and no Elevated
    6. Elevated Risk: exactly one Elevated
    7. Manual Review: everything else
    """
    return matching_rule(record).outcome

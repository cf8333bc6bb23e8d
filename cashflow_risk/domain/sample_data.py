"""Synthetic customer generation for demos and tests"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from cashflow_risk.domain.models import Criterion, CustomerRecord, ProcessedRecord
from cashflow_risk.domain.processing import process_records

logger = logging.getLogger(__name__)

# Cumulative upper bounds against a uniform [0, 1) draw
PROFILE_THRESHOLDS: List[Tuple[float, str]] = [
    (0.30, "excellent"),
    (0.70, "good"),
    (0.90, "fair"),
    (1.00, "poor"),
]

# Inclusive integer range for the base score of each profile
PROFILE_RANGES: Dict[str, Tuple[int, int]] = {
    "excellent": (70, 100),
    "good": (50, 85),
    "fair": (30, 65),
    "poor": (10, 45),
}

CRITERION_OFFSETS: Dict[Criterion, int] = {
    Criterion.TRANSACTION_HISTORY: 0,
    Criterion.AFFORDABILITY: -5,  # generally lower
    Criterion.EMPLOYMENT: 5,  # generally higher
    Criterion.BEHAVIOR: 0,
}

NOISE = 5
SCORE_MIN, SCORE_MAX = 0, 100


def _clamp(value: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def customer_id_for(index: int) -> str:
    """1 -> CUST-0001"""
    return f"CUST-{index:04d}"


class SampleDataGenerator:
    """
    Weighted-profile generator of plausible customers.

    Distribution of latent profiles: ~30% excellent, ~40% good, ~20% fair,
    ~10% poor. Pass `seed` (or a ready numpy Generator as `rng`) to make the
    output reproducible.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def random_profile(self) -> str:
        draw = self.rng.random()
        for upper, profile in PROFILE_THRESHOLDS:
            if draw < upper:
                return profile
        return PROFILE_THRESHOLDS[-1][1]

    def generate_score(self, profile: str, criterion: Criterion) -> int:
        """
        Base draw from the profile range, then criterion offset (clamped),
        then noise in [-5, +5], clamped into [0, 100] again.
        """
        low, high = PROFILE_RANGES[profile]
        score = int(self.rng.integers(low, high + 1))
        score = _clamp(score + CRITERION_OFFSETS[criterion])
        score += int(self.rng.integers(-NOISE, NOISE + 1))
        return _clamp(score)

    def generate_customers(self, count: int = 100) -> List[CustomerRecord]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        customers = []
        for index in range(1, count + 1):
            profile = self.random_profile()
            scores = {c.value: self.generate_score(profile, c) for c in Criterion}
            customers.append(CustomerRecord(customer_id=customer_id_for(index), **scores))

        logger.info("Sample generated", extra={"step": "sample_generated", "count": count})
        return customers

    def generate(self, count: int = 100) -> List[ProcessedRecord]:
        """`count` synthetic customers, already scored and decided"""
        return process_records(self.generate_customers(count))

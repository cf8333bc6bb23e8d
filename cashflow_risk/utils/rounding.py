"""Numeric helpers shared by the scoring and reporting code"""

import math
from decimal import Decimal, ROUND_HALF_UP


def round_half_away(value: float, places: int = 1) -> float:
    """
    Round to `places` decimals, halves going away from zero.

    Works on the shortest decimal repr of the float, so 70.25 -> 70.3 and
    -70.25 -> -70.3 rather than following binary float artefacts.
    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def percentage(part: int, total: int) -> float:
    """part/total as a percentage with one decimal; 0.0 when total is 0"""
    if total == 0:
        return 0.0
    return round_half_away(part / total * 100, 1)

#!/usr/bin/env python3
"""
Budget Scorer - Tiered overage/undershoot between monthly cost and a budget band.

Two named policies exist because the directions weigh a cheaper-than-budget
listing differently:
- FORWARD_BUDGET_POLICY (BFI): brand looking at listings
- REVERSE_BUDGET_POLICY (PFI): owner looking at brands, looser on undershoot
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from spacefit.scorer.models import PriceType
from spacefit.utils import bound_or_none, safe_float

IN_BAND_SCORE = 100
UNCONSTRAINED_SCORE = 80
UNKNOWN_COST_SCORE = 50


@dataclass(frozen=True)
class BudgetPolicy:
    """
    Tier tables for one direction.

    Tiers are (max ratio, score) pairs checked in order; the ratio is the
    overage or undershoot relative to the violated bound.
    """
    name: str
    over_tiers: Tuple[Tuple[float, int], ...]
    over_default: int
    under_tiers: Tuple[Tuple[float, int], ...]
    under_default: int

    def score_overage(self, ratio: float) -> int:
        for limit, score in self.over_tiers:
            if ratio <= limit:
                return score
        return self.over_default

    def score_undershoot(self, ratio: float) -> int:
        for limit, score in self.under_tiers:
            if ratio <= limit:
                return score
        return self.under_default


FORWARD_BUDGET_POLICY = BudgetPolicy(
    name='forward',
    over_tiers=((0.10, 70), (0.20, 40)),
    over_default=0,
    under_tiers=((0.10, 90), (0.20, 80)),
    under_default=50,
)

REVERSE_BUDGET_POLICY = BudgetPolicy(
    name='reverse',
    over_tiers=((0.10, 70), (0.20, 50)),
    over_default=20,
    under_tiers=((0.20, 90), (0.40, 80)),
    under_default=60,
)


def normalize_monthly_cost(
    price: Optional[float],
    price_type: PriceType,
    area: Optional[float] = None
) -> Optional[float]:
    """
    Convert a listing price to an approximate monthly figure.

    yearly -> price / 12, per-area -> price * area, monthly -> as-is.
    Returns None when the cost cannot be determined.
    """
    amount = safe_float(price)
    if amount is None or amount < 0:
        return None

    price_type = PriceType.parse(price_type)
    if price_type == PriceType.YEARLY:
        return amount / 12
    if price_type == PriceType.PER_AREA:
        listing_area = safe_float(area)
        if listing_area is None or listing_area <= 0:
            return None
        return amount * listing_area
    return amount


def calculate_budget_score(
    monthly_cost: Optional[float],
    budget_min: Optional[float],
    budget_max: Optional[float],
    policy: BudgetPolicy = FORWARD_BUDGET_POLICY
) -> int:
    """
    Score a monthly cost against [budget_min, budget_max] under a policy.

    Missing bounds are open sides; no bounds at all is permissive.
    """
    low = bound_or_none(budget_min)
    high = bound_or_none(budget_max)
    if low is None and high is None:
        return UNCONSTRAINED_SCORE

    if low is not None and high is not None and low > high:
        low, high = high, low

    cost = safe_float(monthly_cost)
    if cost is None or cost < 0:
        return UNKNOWN_COST_SCORE

    if high is not None and cost > high:
        return policy.score_overage((cost - high) / high)

    if low is not None and cost < low:
        return policy.score_undershoot((low - cost) / low)

    return IN_BAND_SCORE

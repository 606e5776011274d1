#!/usr/bin/env python3
"""
Size Scorer - Tiered deviation between listing area and a requested size band.
"""

from typing import Optional

from spacefit.utils import bound_or_none, safe_float

IN_BAND_SCORE = 100
UNCONSTRAINED_SCORE = 80  # No size band, or no usable midpoint
UNKNOWN_AREA_SCORE = 50

# (max deviation from band midpoint, score), checked in order
SIZE_TIERS = ((0.10, 100), (0.20, 70), (0.40, 40))
OUT_OF_TIER_SCORE = 0


def calculate_size_score(
    area: Optional[float],
    size_min: Optional[float],
    size_max: Optional[float]
) -> int:
    """
    Score listing area against [size_min, size_max].

    Inside the band -> 100. Otherwise the deviation from the band midpoint
    (or the only bound given) is bucketed into SIZE_TIERS.
    """
    low = bound_or_none(size_min)
    high = bound_or_none(size_max)
    if low is None and high is None:
        return UNCONSTRAINED_SCORE

    if low is not None and high is not None and low > high:
        low, high = high, low

    listing_area = safe_float(area)
    if listing_area is None or listing_area <= 0:
        return UNKNOWN_AREA_SCORE

    if (low is None or listing_area >= low) and (high is None or listing_area <= high):
        return IN_BAND_SCORE

    if low is not None and high is not None:
        midpoint = (low + high) / 2
    else:
        midpoint = low if low is not None else high

    if not midpoint or midpoint <= 0:
        return UNCONSTRAINED_SCORE

    deviation = abs(listing_area - midpoint) / midpoint
    for limit, score in SIZE_TIERS:
        if deviation <= limit:
            return score
    return OUT_OF_TIER_SCORE

#!/usr/bin/env python3
"""
Explainability Module - Human-readable rationales for ranked matches.

Rationales are short templated strings driven by sub-score thresholds and
listing features, ordered location, budget, size, type, amenities, condition,
and capped (5 by default).
"""

from typing import List, Optional
import logging

from spacefit.config_loader import ExplainabilityConfig
from spacefit.scorer.budget import normalize_monthly_cost
from spacefit.scorer.models import MatchResult, Requirement
from spacefit.utils import contains_phrase, normalize_text, safe_float

logger = logging.getLogger(__name__)


def _format_number(value: float) -> str:
    return f"{int(round(value)):,}"


def _has_amenity(amenities, keyword: str) -> bool:
    return any(contains_phrase(normalize_text(a), keyword) for a in amenities or ())


def generate_match_reasons(
    match: MatchResult,
    business_type: Optional[str] = None,
    config: Optional[ExplainabilityConfig] = None
) -> List[str]:
    """
    Build up to config.max_reasons rationale strings for one match.

    Args:
        match: Scored match (breakdown drives the templates)
        business_type: Display name for the brand's business, if known
        config: Currency symbol, area unit and reason cap

    Returns: ordered list of rationale strings
    """
    config = config or ExplainabilityConfig()
    listing = match.listing
    breakdown = match.breakdown
    business = business_type or match.requirement.business_type or 'your business'
    reasons: List[str] = []

    if breakdown.location == 100:
        reasons.append(f"Perfect location match - in {listing.city}")
    elif breakdown.location >= 70:
        reasons.append("Good location - nearby your preferred areas")

    if breakdown.budget >= 80:
        monthly = normalize_monthly_cost(listing.price, listing.price_type, listing.size)
        if monthly is not None:
            reasons.append(
                f"Great value - {config.currency_symbol}{_format_number(monthly)}/month within your budget"
            )
        else:
            reasons.append("Great value - within your budget")
    elif breakdown.budget >= 60:
        reasons.append("Close to your budget range")

    # size rationales quote the area, so they need a known one
    area = safe_float(listing.size)
    if area is not None and area > 0:
        if breakdown.size >= 80:
            reasons.append(f"Ideal size - {_format_number(area)} {config.area_unit} perfect for {business}")
        elif breakdown.size >= 60:
            reasons.append(f"Good size match - {_format_number(area)} {config.area_unit}")

    if breakdown.property_type >= 80:
        reasons.append("Perfect property type for your business")

    if _has_amenity(listing.amenities, 'parking'):
        reasons.append("Parking available")

    if _has_amenity(listing.amenities, 'ground'):
        reasons.append("Ground floor - high visibility")

    if (listing.condition or '').lower() == 'excellent':
        reasons.append("Property in excellent condition")

    return reasons[:config.max_reasons]


def describe_size_range(requirement: Requirement, area_unit: str = "sqft") -> str:
    low, high = requirement.size_min, requirement.size_max
    if low and high:
        return f"{_format_number(low)} - {_format_number(high)} {area_unit}"
    if low:
        return f"From {_format_number(low)} {area_unit}"
    if high:
        return f"Up to {_format_number(high)} {area_unit}"
    return "Size flexible"


def describe_budget_range(requirement: Requirement, currency_symbol: str = "₹") -> str:
    low, high = requirement.budget_min, requirement.budget_max
    if low and high:
        return f"{currency_symbol}{low / 1000:.0f}K - {currency_symbol}{high / 1000:.0f}K/month"
    if low:
        return f"From {currency_symbol}{low / 1000:.0f}K/month"
    if high:
        return f"Up to {currency_symbol}{high / 1000:.0f}K/month"
    return "Budget flexible"

#!/usr/bin/env python3
"""
Score Composer - Brand Fit Index (BFI) and Property Fit Index (PFI).

Both directions compute the same four sub-scores (location, size, budget,
property type) and combine them with their own declared weights:

- BFI: listing vs a brand's requirements (forward budget policy)
- PFI: brand vs a listing, from the owner's side (reverse budget policy,
  "flexible" neutral for brands without location preferences)

Composition never raises: a failing sub-score is replaced by the configured
component fault score, a failing candidate by the configured fault score.
"""

from typing import Callable, Optional
import logging

from spacefit.config_loader import ComponentWeights, ScorerConfig
from spacefit.scorer.budget import (
    BudgetPolicy,
    FORWARD_BUDGET_POLICY,
    REVERSE_BUDGET_POLICY,
    calculate_budget_score,
    normalize_monthly_cost,
)
from spacefit.scorer.location import calculate_location_score
from spacefit.scorer.models import Listing, MatchResult, Requirement, ScoreBreakdown
from spacefit.scorer.property_type import calculate_property_type_score
from spacefit.scorer.size import calculate_size_score
from spacefit.utils import clamp_score

logger = logging.getLogger(__name__)

BFI = 'bfi'
PFI = 'pfi'


def compose_score(breakdown: ScoreBreakdown, weights: ComponentWeights) -> int:
    """Weighted sum of the sub-scores, rounded and clamped to 0-100."""
    total = (
        breakdown.location * weights.location +
        breakdown.size * weights.size +
        breakdown.budget * weights.budget +
        breakdown.property_type * weights.property_type
    )
    return clamp_score(total)


def _safe_component(name: str, compute: Callable[[], int], fallback: int) -> int:
    try:
        return clamp_score(compute())
    except Exception as e:
        logger.warning(f"{name} score failed ({e}), substituting {fallback}")
        return fallback


def calculate_breakdown(
    listing: Listing,
    requirement: Requirement,
    location_neutral: int,
    budget_policy: BudgetPolicy,
    fault_score: int
) -> ScoreBreakdown:
    """Compute the four sub-scores for one listing/requirement pair."""
    location = _safe_component(
        'location',
        lambda: calculate_location_score(
            listing.city, listing.address, requirement.locations, neutral_score=location_neutral
        ),
        fault_score
    )
    size = _safe_component(
        'size',
        lambda: calculate_size_score(listing.size, requirement.size_min, requirement.size_max),
        fault_score
    )
    budget = _safe_component(
        'budget',
        lambda: calculate_budget_score(
            normalize_monthly_cost(listing.price, listing.price_type, listing.size),
            requirement.budget_min,
            requirement.budget_max,
            policy=budget_policy
        ),
        fault_score
    )
    property_type = _safe_component(
        'property_type',
        lambda: calculate_property_type_score(
            listing.category,
            requirement.business_type,
            amenities=listing.amenities,
            preferred_property_type=requirement.property_type
        ),
        fault_score
    )
    return ScoreBreakdown(location=location, size=size, budget=budget, property_type=property_type)


def _fault_result(
    listing: Listing,
    requirement: Requirement,
    direction: str,
    config: ScorerConfig,
    error: Exception
) -> MatchResult:
    logger.warning(
        f"{direction.upper()} scoring failed for listing {getattr(listing, 'id', '?')} / "
        f"requirement {getattr(requirement, 'id', '?')}: {error}"
    )
    fallback = config.component_fault_score
    return MatchResult(
        listing=listing,
        requirement=requirement,
        score=config.fault_score,
        breakdown=ScoreBreakdown(location=fallback, size=fallback, budget=fallback, property_type=fallback),
        direction=direction,
    )


def calculate_bfi(
    listing: Listing,
    requirement: Requirement,
    config: Optional[ScorerConfig] = None
) -> MatchResult:
    """
    Brand Fit Index: how well a listing fits a brand's requirements.

    Default weights: location 30%, size 25%, budget 25%, type 20%.
    """
    config = config or ScorerConfig()
    try:
        breakdown = calculate_breakdown(
            listing,
            requirement,
            location_neutral=config.bfi_location_neutral,
            budget_policy=FORWARD_BUDGET_POLICY,
            fault_score=config.component_fault_score
        )
        score = compose_score(breakdown, config.bfi_weights)
        logger.debug(f"BFI listing {listing.id}: {score} {breakdown.to_dict()}")
    except Exception as e:
        return _fault_result(listing, requirement, BFI, config, e)

    return MatchResult(
        listing=listing, requirement=requirement, score=score, breakdown=breakdown, direction=BFI
    )


def calculate_pfi(
    requirement: Requirement,
    listing: Listing,
    config: Optional[ScorerConfig] = None
) -> MatchResult:
    """
    Property Fit Index: how well a brand's requirements fit a listing.

    Default weights: size 30%, budget 30%, location 25%, type 15%.
    """
    config = config or ScorerConfig()
    try:
        breakdown = calculate_breakdown(
            listing,
            requirement,
            location_neutral=config.pfi_location_neutral,
            budget_policy=REVERSE_BUDGET_POLICY,
            fault_score=config.component_fault_score
        )
        score = compose_score(breakdown, config.pfi_weights)
        logger.debug(f"PFI requirement {requirement.id} on listing {listing.id}: {score} {breakdown.to_dict()}")
    except Exception as e:
        return _fault_result(listing, requirement, PFI, config, e)

    return MatchResult(
        listing=listing, requirement=requirement, score=score, breakdown=breakdown, direction=PFI
    )

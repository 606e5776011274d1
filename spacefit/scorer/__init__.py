#!/usr/bin/env python3
"""
Scoring Module - Brand Fit Index (BFI) and Property Fit Index (PFI).

Public API:
- calculate_bfi / calculate_pfi: composite index for one pair
- Listing, Requirement, ScoreBreakdown, MatchResult: value objects

Focused, single-responsibility modules:

- models.py: Value objects and record normalization
- location.py: Exact / same-zone / different-zone location tiers
- size.py: Size band deviation tiers
- budget.py: Monthly cost normalization and the two budget policies
- property_type.py: Business category compatibility
- composer.py: Weighted composition per direction
"""

from spacefit.scorer.models import (
    Listing, MatchResult, PriceType, PropertyCategory, Requirement, ScoreBreakdown
)
from spacefit.scorer.composer import calculate_bfi, calculate_pfi, compose_score

__all__ = [
    'calculate_bfi', 'calculate_pfi', 'compose_score',
    'Listing', 'Requirement', 'ScoreBreakdown', 'MatchResult', 'PriceType', 'PropertyCategory'
]

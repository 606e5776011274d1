"""
spacefit - Brand Fit Index (BFI) and Property Fit Index (PFI) matching engine.

Ranks commercial-space listings against a brand's requirements, and brands
against a listing, using location, size, budget and space-type heuristics.
"""
from spacefit.config_loader import AppConfig, MatchingConfig, load_config
from spacefit.scorer import (
    Listing, MatchResult, PriceType, PropertyCategory, Requirement, ScoreBreakdown,
    calculate_bfi, calculate_pfi
)
from spacefit.matcher import MatchFinder, MatchRequest, RankedMatches, RequestRanker, PairwiseMatcher

__all__ = [
    'AppConfig', 'MatchingConfig', 'load_config',
    'Listing', 'Requirement', 'ScoreBreakdown', 'MatchResult', 'PriceType', 'PropertyCategory',
    'calculate_bfi', 'calculate_pfi',
    'MatchFinder', 'MatchRequest', 'RankedMatches', 'RequestRanker', 'PairwiseMatcher'
]

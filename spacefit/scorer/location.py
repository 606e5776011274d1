#!/usr/bin/env python3
"""
Location Scorer - Classify a listing's address against preferred locations.

Tiers:
- exact: listing city/address and a preferred location name each other -> 100
- same_zone: different micro-area in the same zone -> 70
- different_zone: zones differ, or either side does not resolve -> 30
- unconstrained: no preferred locations -> neutral (caller supplied)
"""

from typing import Optional, Sequence
import logging

from spacefit.reference.zones import resolve_zone, resolve_zones
from spacefit.utils import contains_phrase, normalize_text

logger = logging.getLogger(__name__)

EXACT = 'exact'
SAME_ZONE = 'same_zone'
DIFFERENT_ZONE = 'different_zone'
UNCONSTRAINED = 'unconstrained'

EXACT_SCORE = 100
SAME_ZONE_SCORE = 70
DIFFERENT_ZONE_SCORE = 30
DEFAULT_NEUTRAL_SCORE = 50


def classify_location(
    city: Optional[str],
    address: Optional[str],
    preferred_locations: Optional[Sequence[str]]
) -> str:
    """Return the location tier for a listing against preferred locations."""
    preferred = [normalize_text(loc) for loc in (preferred_locations or [])]
    preferred = [loc for loc in preferred if loc]
    if not preferred:
        return UNCONSTRAINED

    listing_city = normalize_text(city)
    listing_address = normalize_text(address)

    for loc in preferred:
        if (contains_phrase(listing_city, loc)
                or contains_phrase(listing_address, loc)
                or contains_phrase(loc, listing_city)):
            return EXACT

    listing_zone = resolve_zone(city, address)
    if listing_zone and listing_zone in resolve_zones(preferred):
        return SAME_ZONE

    return DIFFERENT_ZONE


def calculate_location_score(
    city: Optional[str],
    address: Optional[str],
    preferred_locations: Optional[Sequence[str]],
    neutral_score: int = DEFAULT_NEUTRAL_SCORE
) -> int:
    """
    Score a listing's location against preferred locations.

    Args:
        city: Listing city
        address: Listing street address
        preferred_locations: Requester's preferred location names (may be empty)
        neutral_score: Score when no preference is given (BFI 50, PFI 60)

    Returns: integer score 0-100
    """
    tier = classify_location(city, address, preferred_locations)
    if tier == EXACT:
        return EXACT_SCORE
    if tier == SAME_ZONE:
        return SAME_ZONE_SCORE
    if tier == UNCONSTRAINED:
        return neutral_score
    return DIFFERENT_ZONE_SCORE
